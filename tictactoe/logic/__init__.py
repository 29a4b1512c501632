"""
Logic module for TicTacToe.
Handles the board, rules, computer opponent and game sessions.
"""

from .board import Board, Player, empty_indices, new_board
from .errors import EmptyBoardQuery, GameError, InvalidMove
from .win_checker import WINNING_LINES, GameOutcome, OutcomeStatus, WinChecker, check_outcome, winning_line
from .move_validator import MoveValidator, ValidationResult, apply_move, validate_move
from .move_selector import (
    BlockingStrategy,
    Difficulty,
    MinimaxStrategy,
    MoveStrategy,
    RandomStrategy,
    select_move,
    strategy_for,
)
from .game_session import GameSession, Mode
