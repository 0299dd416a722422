from __future__ import annotations


class Evaluator:
    """Naive modulus heuristic shown beside the minimax value.

    Scores are from the point of view of the player about to move: +1 means
    the position looks winning, -1 losing. A count that is a multiple of 4
    is flagged as losing. This only happens to agree with the real search
    for the move set {1, 2, 3} under the last-stick-loses rule; the AI never
    consults it.
    """

    MODULUS = 4

    @classmethod
    def heuristic(cls, count: int) -> int:
        return -1 if count % cls.MODULUS == 0 else 1
