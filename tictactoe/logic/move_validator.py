"""
Move validator for TicTacToe.
Validates that moves follow the rules and applies the ones that do.
"""

import logging
import numbers
from dataclasses import dataclass
from typing import Any, Optional

from .board import NUM_CELLS, Board, Player
from .errors import InvalidMove

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. The index must be a whole number from 0 to 8
    2. Can only place on empty cells
    """

    def validate_move(self, board: Board, index: Any) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            index: Cell to mark (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # bool is an int subclass but never a cell
        if isinstance(index, bool) or not isinstance(index, numbers.Integral):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position {index!r}. Must be a whole number 0-{NUM_CELLS - 1}."
            )

        index = int(index)
        if not 0 <= index < NUM_CELLS:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position {index}. Must be 0-{NUM_CELLS - 1}."
            )

        occupant = board[index]
        if occupant is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {occupant.value}"
            )

        return ValidationResult(is_valid=True)

    def apply_move(self, board: Board, index: Any, player: Player) -> Board:
        """
        Place ``player``'s mark at ``index``.

        Args:
            board: Current board. It is not modified.
            index: Cell to mark (0-8).
            player: Whose mark to place.

        Returns:
            A new board with the mark placed.

        Raises:
            InvalidMove: If the index is out of range or the cell is taken.
        """
        result = self.validate_move(board, index)
        if not result.is_valid:
            logger.debug("Rejected move %r for %s: %s", index, player.value, result.error_message)
            raise InvalidMove(result.error_message, index=index if isinstance(index, numbers.Integral) else None)

        return board.with_mark(int(index), player)


_validator = MoveValidator()


def validate_move(board: Board, index: Any) -> ValidationResult:
    """Check a move without raising."""
    return _validator.validate_move(board, index)


def apply_move(board: Board, index: Any, player: Player) -> Board:
    """Return ``board`` with ``player``'s mark at ``index``; raises InvalidMove."""
    return _validator.apply_move(board, index, player)
