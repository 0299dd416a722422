from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

# Sticks a player may take per turn
MOVES: Tuple[int, ...] = (1, 2, 3)

# Start count bounds for a new game
DEFAULT_START = 15
MIN_START = 5
MAX_START = 50

# Rows in the heuristic vs minimax reference table
TABLE_SIZE = 20


@dataclass(frozen=True)
class GameConfig:
    """Bounds applied when a new game is requested."""

    default_start: int = DEFAULT_START
    min_start: int = MIN_START
    max_start: int = MAX_START

    def clamp_start(self, start: object) -> int:
        try:
            value = int(start)  # type: ignore[arg-type]
        except (TypeError, ValueError, OverflowError):
            return self.default_start
        if value == 0:
            return self.default_start
        return max(self.min_start, min(self.max_start, value))


DEFAULT_CONFIG = GameConfig()
