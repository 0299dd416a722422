from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Dict, List

from .ai import AIPlayer
from .config import TABLE_SIZE
from .errors import PreconditionError
from .evaluator import Evaluator


@dataclass
class TableRow:
    sticks: int
    heuristic: int
    minimax: int

    @property
    def agrees(self) -> bool:
        return self.heuristic == self.minimax

    def to_dict(self) -> Dict[str, object]:
        row = asdict(self)
        row["agrees"] = self.agrees
        return row


def build_reference_table(ai: AIPlayer, size: int = TABLE_SIZE) -> List[TableRow]:
    """Heuristic vs minimax value for 1..size sticks, maximizer on move.

    The cache is cleared first so the table never reflects a previous game.
    """
    if size < 1:
        raise PreconditionError(f"Table size must be at least 1, got {size}")
    ai.cache.clear()
    return [
        TableRow(sticks=n, heuristic=Evaluator.heuristic(n), minimax=ai.evaluate(n, True))
        for n in range(1, size + 1)
    ]
