from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

import logging
import threading

from .config import MOVES
from .errors import PreconditionError

logger = logging.getLogger(__name__)

WIN = 1
LOSS = -1


@dataclass
class SearchResult:
    move: int
    score: int
    scored_moves: List[Tuple[int, int]] = field(default_factory=list)


class EvaluationCache:
    """Memo table for the search, keyed by (sticks, maximizing).

    Entries never go stale for a fixed move set, so there is no eviction.
    The lock lets a threaded web host share a single instance.
    """

    def __init__(self) -> None:
        self._table: Dict[Tuple[int, bool], int] = {}
        self._lock = threading.Lock()

    def get(self, count: int, maximizing: bool) -> Optional[int]:
        with self._lock:
            return self._table.get((count, maximizing))

    def put(self, count: int, maximizing: bool, score: int) -> None:
        with self._lock:
            self._table[(count, maximizing)] = score

    def clear(self) -> None:
        with self._lock:
            size = len(self._table)
            self._table.clear()
        logger.debug("Evaluation cache cleared (%d entries dropped)", size)

    def __len__(self) -> int:
        with self._lock:
            return len(self._table)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._table


def legal_moves(count: int) -> Iterator[int]:
    """Moves in ascending order that do not take more sticks than remain."""
    for move in MOVES:
        if move <= count:
            yield move


class AIPlayer:
    """Full-depth memoized minimax for the last-stick-loses matchstick game.

    Scores are +1 (win) or -1 (loss) from the maximizing player's point of view.
    """

    def __init__(self, cache: Optional[EvaluationCache] = None) -> None:
        self.cache = cache if cache is not None else EvaluationCache()

    def evaluate(self, count: int, maximizing: bool) -> int:
        """Value of a position with ``count`` sticks left.

        Terminal convention: with no sticks left the value is -1 when the
        maximizer is on move and +1 otherwise.
        """
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            raise PreconditionError(f"Stick count must be a non-negative integer, got {count!r}")
        if self.cache.get(count, maximizing) is None:
            self._fill(count)
        return self._minimax(count, maximizing)

    def select_move(self, count: int) -> SearchResult:
        """Pick the move that leaves the opponent in the worst position.

        Moves are scanned 1, 2, 3 and the first one reaching the best score is
        kept, so when every move loses the smallest take is returned.
        """
        if isinstance(count, bool) or not isinstance(count, int) or count <= 0:
            raise PreconditionError(f"Cannot select a move with {count!r} sticks left")

        self._fill(count - 1)

        best_move = 1
        best_score = LOSS - 1
        scored_moves: List[Tuple[int, int]] = []
        for move in legal_moves(count):
            score = self._minimax(count - move, maximizing=False)
            scored_moves.append((move, score))
            if score > best_score:
                best_score = score
                best_move = move

        logger.debug("select_move(%d) -> take %d, score %+d, candidates %s", count, best_move, best_score, scored_moves)
        return SearchResult(move=best_move, score=best_score, scored_moves=scored_moves)

    def choose_move(self, count: int) -> int:
        return self.select_move(count).move

    def _fill(self, count: int) -> None:
        # Ascending order keeps the recursion at most one level deep.
        for n in range(count + 1):
            self._minimax(n, True)
            self._minimax(n, False)

    def _minimax(self, count: int, maximizing: bool) -> int:
        cached = self.cache.get(count, maximizing)
        if cached is not None:
            return cached

        if count == 0:
            value = LOSS if maximizing else WIN
            self.cache.put(count, maximizing, value)
            return value

        if maximizing:
            value = LOSS - 1
            for move in legal_moves(count):
                value = max(value, self._minimax(count - move, maximizing=False))
                if value == WIN:
                    break
        else:
            value = WIN + 1
            for move in legal_moves(count):
                value = min(value, self._minimax(count - move, maximizing=True))
                if value == LOSS:
                    break
        self.cache.put(count, maximizing, value)
        return value
