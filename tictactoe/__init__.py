"""
TicTacToe
=========
The classic 3x3 game, played against a friend or against the computer.

The computer has three difficulty levels: easy (random moves), medium
(blocks your lines) and hard (Minimax, never loses).

Run ``python -m tictactoe`` for the window, or add ``--no-ui`` to play
in the terminal.
"""

__version__ = "1.0.0"

from .logic import (
    Board,
    Difficulty,
    EmptyBoardQuery,
    GameOutcome,
    GameSession,
    InvalidMove,
    Mode,
    Player,
    apply_move,
    check_outcome,
    empty_indices,
    new_board,
    select_move,
)
