"""
Errors raised by the game logic.
Both are recoverable: callers report them and keep the session alive.
"""

from typing import Optional


class GameError(Exception):
    """Base class for game logic errors."""


class InvalidMove(GameError, ValueError):
    """
    A move that the rules do not allow.

    Raised for an index outside 0-8, an occupied cell, or a move on a
    finished game.
    """

    def __init__(self, message: str, index: Optional[int] = None):
        super().__init__(message)
        self.index = index


class EmptyBoardQuery(GameError, RuntimeError):
    """The computer was asked to move but there is nothing left to play."""
