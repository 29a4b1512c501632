"""
Game session for TicTacToe.
Tracks the board, whose turn it is, the game mode and the result.
"""

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple, Union

from ..config import GameConfig
from .board import Board, Player
from .errors import EmptyBoardQuery, InvalidMove
from .move_selector import Difficulty, strategy_for
from .move_validator import MoveValidator
from .win_checker import GameOutcome, WinChecker

logger = logging.getLogger(__name__)


class Mode(Enum):
    """Who plays against whom."""
    SINGLE = "single"    # Human vs computer
    MULTI = "multi"      # Human vs human


@dataclass
class GameSession:
    """
    The complete state of one TicTacToe game.

    Tracks:
    - The board
    - Whose turn it is
    - Whether the game is still running
    - Mode and difficulty
    - The outcome once the game is over

    A session is owned by one caller; nothing in it is shared.
    """

    mode: Mode = Mode(GameConfig.DEFAULT_MODE)
    difficulty: Difficulty = Difficulty(GameConfig.DEFAULT_DIFFICULTY)
    rng: random.Random = field(default_factory=random.Random, repr=False)

    board: Board = field(default_factory=Board)
    current_player: Player = Player.X
    running: bool = False
    outcome: GameOutcome = field(default_factory=GameOutcome.in_progress)

    human_player: Player = Player(GameConfig.HUMAN_PLAYER)
    computer_player: Player = Player(GameConfig.COMPUTER_PLAYER)

    def __post_init__(self):
        self.mode = Mode(self.mode)
        self.difficulty = Difficulty(self.difficulty)
        self._validator = MoveValidator()
        self._win_checker = WinChecker()

    @classmethod
    def new(
        cls,
        mode: Union[Mode, str] = GameConfig.DEFAULT_MODE,
        difficulty: Union[Difficulty, str] = GameConfig.DEFAULT_DIFFICULTY,
        rng: Optional[random.Random] = None
    ) -> "GameSession":
        """Create a session and start its first game."""
        session = cls(mode=mode, difficulty=difficulty, rng=rng or random.Random())
        session.reset()
        return session

    # ------------------------------------------------------------------ Input events

    def reset(self) -> None:
        """Start a new game: clear the board and pick who starts at random."""
        self.board = Board()
        self.outcome = GameOutcome.in_progress()
        self.current_player = self.rng.choice([Player.X, Player.O])
        self.running = True
        logger.debug("New game (%s, %s), %s starts",
                     self.mode.value, self.difficulty.value, self.current_player.value)

    def set_mode(self, mode: Union[Mode, str]) -> None:
        self.mode = Mode(mode)
        logger.debug("Mode set to: %s", self.mode.value)

    def set_difficulty(self, difficulty: Union[Difficulty, str]) -> None:
        self.difficulty = Difficulty(difficulty)
        logger.debug("Difficulty set to: %s", self.difficulty.value)

    def activate_cell(self, index: int) -> bool:
        """
        Handle a human clicking a cell.

        The click is ignored if the game is over, the cell is taken or
        it is the computer's turn.

        Returns:
            True if the move was played.
        """
        if not self.running or self.is_computer_turn:
            logger.debug("Ignoring cell %s: not the human's turn", index)
            return False

        if not self._validator.validate_move(self.board, index).is_valid:
            logger.debug("Ignoring cell %s: not a valid move", index)
            return False

        self.make_move(index)
        return True

    # ------------------------------------------------------------------ Moves

    def make_move(self, index: int) -> GameOutcome:
        """
        Play the current player's mark at ``index``.

        Args:
            index: Cell to mark (0-8).

        Returns:
            The outcome after the move.

        Raises:
            InvalidMove: If the game is over or the move breaks the rules.
        """
        if not self.running:
            raise InvalidMove("Game is already over!", index=index)

        player = self.current_player
        self.board = self._validator.apply_move(self.board, index, player)
        self.outcome = self._win_checker.check_outcome(self.board)
        logger.debug("%s plays %s", player.value, index)

        if self.outcome.is_terminal:
            self.running = False
            logger.info("Game over: %s", self.outcome)
        else:
            self.current_player = player.opposite()

        return self.outcome

    def computer_move(self) -> int:
        """
        Let the computer play its move at the current difficulty.

        Returns:
            The index the computer played.

        Raises:
            EmptyBoardQuery: If the game is over.
            InvalidMove: If it is not the computer's turn.
        """
        if not self.running:
            raise EmptyBoardQuery("Game is already over!")
        if not self.is_computer_turn:
            raise InvalidMove(f"It's not the computer's turn ({self.current_player.value} to move)")

        strategy = strategy_for(self.difficulty, self.rng)
        index = strategy.select_move(self.board, self.computer_player)
        logger.debug("Computer (%s) chose %d", self.difficulty.value, index)
        self.make_move(index)
        return index

    # ------------------------------------------------------------------ Output

    @property
    def is_computer_turn(self) -> bool:
        return (
            self.running
            and self.mode == Mode.SINGLE
            and self.current_player == self.computer_player
        )

    @property
    def winning_line(self) -> Optional[Tuple[int, int, int]]:
        return self._win_checker.get_winning_line(self.board)

    @property
    def status_message(self) -> str:
        """Text for the status line."""
        if self.outcome.winner is not None:
            return f"{self.outcome.winner.value} wins! Congratulations!"
        if self.outcome.is_draw:
            return "It's a tie!"
        return f"{self.current_player.value}'s turn"
