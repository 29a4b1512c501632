"""
Board state for TicTacToe.
Holds the 9 cells and the two players' marks.
"""

from enum import Enum
from typing import Iterator, List, Optional, Sequence, Union

import numpy as np


# Cell values in the board array
EMPTY = 0
X_MARK = 1
O_MARK = -1

BOARD_SIZE = 3
NUM_CELLS = BOARD_SIZE * BOARD_SIZE


class Player(Enum):
    """The two players in the game."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X

    @property
    def mark(self) -> int:
        """The value this player's mark has in the board array."""
        return X_MARK if self == Player.X else O_MARK

    @classmethod
    def from_mark(cls, mark: int) -> Optional["Player"]:
        """Map a board array value back to a player (None for empty)."""
        if mark == X_MARK:
            return cls.X
        if mark == O_MARK:
            return cls.O
        return None


CellLike = Union[str, Player, None]


def _parse_cell(value: CellLike) -> int:
    if isinstance(value, Player):
        return value.mark
    if value is None:
        return EMPTY
    if not isinstance(value, str):
        raise ValueError(f"Unknown cell value: {value!r}")
    if value.strip() == "":
        return EMPTY
    try:
        return Player(value.strip().upper()).mark
    except ValueError:
        raise ValueError(f"Unknown cell value: {value!r}") from None


class Board:
    """
    The 3x3 board, indexed 0-8 in row-major order.

    Boards are values: the cell array is read-only and every move
    produces a new Board, so a board handed to the computer player can
    never be changed behind the game's back.
    """

    __slots__ = ("_cells",)

    def __init__(self, cells: Optional[Sequence[CellLike]] = None):
        """
        Create a board.

        Args:
            cells: 9 cell values ("X", "O", "" / None for empty),
                or None for an empty board.
        """
        if cells is None:
            array = np.zeros(NUM_CELLS, dtype=np.int8)
        else:
            if len(cells) != NUM_CELLS:
                raise ValueError(f"A board has {NUM_CELLS} cells, got {len(cells)}")
            array = np.array([_parse_cell(c) for c in cells], dtype=np.int8)
        array.flags.writeable = False
        self._cells = array

    @classmethod
    def from_cells(cls, cells: Sequence[CellLike]) -> "Board":
        """Build a board from strings like ["X", "", "O", ...]."""
        return cls(cells)

    @classmethod
    def _wrap(cls, array: np.ndarray) -> "Board":
        # Takes ownership of an already validated int8 array
        board = cls.__new__(cls)
        array.flags.writeable = False
        board._cells = array
        return board

    @property
    def cells(self) -> np.ndarray:
        """Read-only int8 array of cell values (0 empty, 1 X, -1 O)."""
        return self._cells

    def with_mark(self, index: int, player: Player) -> "Board":
        """Return a copy of this board with ``index`` set to ``player``'s mark."""
        array = self._cells.copy()
        array[index] = player.mark
        return Board._wrap(array)

    def is_full(self) -> bool:
        """True when no empty cell is left."""
        return not (self._cells == EMPTY).any()

    def empty_indices(self) -> List[int]:
        """
        Get all empty cells on the board.

        Returns:
            Indices of empty cells, in ascending order.
        """
        return [int(i) for i in np.flatnonzero(self._cells == EMPTY)]

    def count(self, player: Player) -> int:
        """How many cells hold this player's mark."""
        return int(np.count_nonzero(self._cells == player.mark))

    def to_cells(self) -> List[str]:
        """The board as display strings ("X", "O" or "")."""
        return [p.value if p else "" for p in self]

    def render(self) -> str:
        """Draw the board as text. Empty cells show their 1-9 number."""
        lines = []
        for row in range(BOARD_SIZE):
            parts = []
            for col in range(BOARD_SIZE):
                index = row * BOARD_SIZE + col
                player = self[index]
                parts.append(player.value if player else str(index + 1))
            lines.append(" " + " | ".join(parts))
            if row < BOARD_SIZE - 1:
                lines.append("---+---+---")
        return "\n".join(lines)

    def __getitem__(self, index: int) -> Optional[Player]:
        return Player.from_mark(int(self._cells[index]))

    def __iter__(self) -> Iterator[Optional[Player]]:
        for value in self._cells:
            yield Player.from_mark(int(value))

    def __len__(self) -> int:
        return NUM_CELLS

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self._cells, other._cells))

    def __hash__(self) -> int:
        return hash(self._cells.tobytes())

    def __repr__(self) -> str:
        return f"Board({self.to_cells()!r})"


def new_board() -> Board:
    """Return a board with 9 empty cells."""
    return Board()


def empty_indices(board: Board) -> List[int]:
    """Indices whose cell is empty, ascending."""
    return board.empty_indices()

