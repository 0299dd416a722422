from __future__ import annotations

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Dict, List, Optional

import logging

from .ai import AIPlayer, legal_moves
from .config import DEFAULT_CONFIG, DEFAULT_START, GameConfig
from .errors import IllegalMoveError
from .evaluator import Evaluator

logger = logging.getLogger(__name__)

HUMAN = "human"
AI = "ai"


class TurnState(str, Enum):
    HUMAN_TO_MOVE = "human_to_move"
    AI_TO_MOVE = "ai_to_move"
    GAME_OVER = "game_over"


@dataclass
class HistoryEntry:
    turn: int
    actor: str
    move: int
    result: int


class Game:
    """Owns the pile of sticks and whose turn it is.

    Turns move through HUMAN_TO_MOVE -> AI_TO_MOVE -> ... -> GAME_OVER. The
    AI reply is computed synchronously inside ``play_ai_turn``. Whoever takes
    the last stick loses.
    """

    def __init__(
        self,
        start: Optional[object] = DEFAULT_START,
        human_starts: bool = True,
        ai: Optional[AIPlayer] = None,
        config: GameConfig = DEFAULT_CONFIG,
    ) -> None:
        self.ai = ai if ai is not None else AIPlayer()
        self.config = config
        self.sticks = 0
        self.state = TurnState.GAME_OVER
        self.history: List[HistoryEntry] = []
        self.loser: Optional[str] = None
        self.reset(start, human_starts)

    def reset(self, start: Optional[object] = None, human_starts: bool = True) -> None:
        self.sticks = self.config.clamp_start(start if start is not None else self.config.default_start)
        self.state = TurnState.HUMAN_TO_MOVE if human_starts else TurnState.AI_TO_MOVE
        self.history = []
        self.loser = None
        self.ai.cache.clear()
        logger.info("New game: %d sticks, %s moves first", self.sticks, HUMAN if human_starts else AI)

    def get_turn(self) -> Optional[str]:
        if self.state == TurnState.HUMAN_TO_MOVE:
            return HUMAN
        if self.state == TurnState.AI_TO_MOVE:
            return AI
        return None

    def get_legal_moves(self) -> List[int]:
        if self.is_game_over():
            return []
        return list(legal_moves(self.sticks))

    def is_game_over(self) -> bool:
        return self.state == TurnState.GAME_OVER

    def get_winner(self) -> Optional[str]:
        if self.loser is None:
            return None
        return AI if self.loser == HUMAN else HUMAN

    def push_human(self, move: int) -> None:
        if self.state != TurnState.HUMAN_TO_MOVE:
            raise IllegalMoveError(f"Not the human's turn (state: {self.state.value})")
        if isinstance(move, bool) or not isinstance(move, int):
            raise IllegalMoveError(f"Move must be an integer, got {move!r}")
        if move not in self.get_legal_moves():
            raise IllegalMoveError(f"Illegal move: take {move} with {self.sticks} sticks left")
        self._apply(HUMAN, move)

    def play_ai_turn(self) -> int:
        if self.state != TurnState.AI_TO_MOVE:
            raise IllegalMoveError(f"Not the AI's turn (state: {self.state.value})")
        move = self.ai.select_move(self.sticks).move
        self._apply(AI, move)
        return move

    def clear_history(self) -> None:
        self.history = []

    def _apply(self, actor: str, move: int) -> None:
        self.sticks -= move
        self.history.append(HistoryEntry(turn=len(self.history) + 1, actor=actor, move=move, result=self.sticks))
        if self.sticks == 0:
            self.loser = actor
            self.state = TurnState.GAME_OVER
            logger.info("Game over: %s took the last stick, %s wins", actor, self.get_winner())
            return
        self.state = TurnState.AI_TO_MOVE if actor == HUMAN else TurnState.HUMAN_TO_MOVE

    def snapshot(self) -> Dict[str, object]:
        suggested_move: Optional[int] = None
        suggested_score: Optional[int] = None
        if self.sticks > 0:
            suggestion = self.ai.select_move(self.sticks)
            suggested_move = suggestion.move
            suggested_score = suggestion.score

        return {
            "sticks": self.sticks,
            "turn": self.get_turn(),
            "state": self.state.value,
            "legal_moves": self.get_legal_moves(),
            "game_over": self.is_game_over(),
            "winner": self.get_winner(),
            "loser": self.loser,
            "history": [asdict(entry) for entry in self.history],
            "heuristic": Evaluator.heuristic(self.sticks),
            "minimax": self.ai.evaluate(self.sticks, True),
            "suggested_move": suggested_move,
            "suggested_score": suggested_score,
        }
