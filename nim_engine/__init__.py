"""Matchstick game engine: the pile, the search, and the comparison heuristic.

Modules:
- game: Turn-taking orchestration between a human and the AI
- ai: Memoized minimax over the stick count and move selection
- evaluator: Naive modulus heuristic shown for comparison
- table: Heuristic vs minimax reference table
"""

from .game import Game, TurnState
from .ai import AIPlayer, EvaluationCache, SearchResult
from .evaluator import Evaluator
from .errors import IllegalMoveError, NimError, PreconditionError
from .table import TableRow, build_reference_table

__all__ = [
    "Game",
    "TurnState",
    "AIPlayer",
    "EvaluationCache",
    "SearchResult",
    "Evaluator",
    "IllegalMoveError",
    "NimError",
    "PreconditionError",
    "TableRow",
    "build_reference_table",
]
