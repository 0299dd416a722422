from __future__ import annotations


class NimError(Exception):
    """Base class for errors raised by the matchstick engine."""


class PreconditionError(NimError, ValueError):
    """A caller handed the search an impossible position (e.g. a negative count)."""


class IllegalMoveError(NimError, ValueError):
    """A move was rejected by the game: out of turn, out of range or game over."""
