"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

import numpy as np

from .board import Board, Player


# All possible winning lines, as board indices.
# The order matters only for which line is reported first.
WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)

LINE_INDEX = np.array(WINNING_LINES, dtype=np.intp)
LINE_INDEX.flags.writeable = False


class OutcomeStatus(Enum):
    """Tag of a GameOutcome."""
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class GameOutcome:
    """Result of checking a board: in progress, a win for someone, or a draw."""
    status: OutcomeStatus
    winner: Optional[Player] = None

    @classmethod
    def in_progress(cls) -> "GameOutcome":
        return cls(OutcomeStatus.IN_PROGRESS)

    @classmethod
    def win(cls, player: Player) -> "GameOutcome":
        return cls(OutcomeStatus.WIN, player)

    @classmethod
    def draw(cls) -> "GameOutcome":
        return cls(OutcomeStatus.DRAW)

    @property
    def is_terminal(self) -> bool:
        return self.status != OutcomeStatus.IN_PROGRESS

    @property
    def is_draw(self) -> bool:
        return self.status == OutcomeStatus.DRAW

    def __str__(self) -> str:
        if self.status == OutcomeStatus.WIN:
            return f"Win({self.winner.value})"
        return "Draw" if self.is_draw else "InProgress"


def _line_sums(board: Board) -> np.ndarray:
    # One row per winning line; a full line of one mark sums to +3 or -3
    return board.cells[LINE_INDEX].sum(axis=1, dtype=np.int16)


def _first_winning_line(board: Board) -> Optional[int]:
    hits = np.flatnonzero(np.abs(_line_sums(board)) == 3)
    return int(hits[0]) if hits.size else None


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally)
    """

    WINNING_LINES = WINNING_LINES

    def check_winner(self, board: Board) -> Optional[Player]:
        """
        Check if there's a winner.

        Args:
            board: The board to check.

        Returns:
            The player owning the first complete line, or None.
        """
        line = _first_winning_line(board)
        if line is None:
            return None
        return board[WINNING_LINES[line][0]]

    def check_outcome(self, board: Board) -> GameOutcome:
        """
        Classify the board.

        A complete line is looked for first, so a full board that
        contains a line is a win, not a draw.

        Args:
            board: The board to check.

        Returns:
            Win(player), Draw or InProgress.
        """
        winner = self.check_winner(board)
        if winner is not None:
            return GameOutcome.win(winner)
        if board.is_full():
            return GameOutcome.draw()
        return GameOutcome.in_progress()

    def get_winning_line(self, board: Board) -> Optional[Tuple[int, int, int]]:
        """
        Get the winning line if there is one.

        Returns:
            The winning line as three indices, or None.
        """
        line = _first_winning_line(board)
        return None if line is None else WINNING_LINES[line]


_checker = WinChecker()


def check_outcome(board: Board) -> GameOutcome:
    """Classify ``board`` as InProgress, Win(player) or Draw."""
    return _checker.check_outcome(board)


def winning_line(board: Board) -> Optional[Tuple[int, int, int]]:
    """The first complete line on ``board``, or None."""
    return _checker.get_winning_line(board)
