"""
Computer player for TicTacToe.

Three strategies, one per difficulty level:

- easy: a random empty cell
- medium: blocks a line the opponent is about to complete, otherwise random
- hard: full Minimax search, never loses

Every strategy only reads the board it is given and returns a cell index;
the game applies the move itself.
"""

import logging
import random
from enum import Enum
from typing import List, Optional, Union

import numpy as np

from ..config import GameConfig
from .board import EMPTY, Board, Player
from .errors import EmptyBoardQuery
from .win_checker import LINE_INDEX, WinChecker

logger = logging.getLogger(__name__)

# Minimax scores, from the computer's point of view
WIN_SCORE = 1
LOSS_SCORE = -1
DRAW_SCORE = 0


class Difficulty(Enum):
    """Computer difficulty levels."""
    EASY = "easy"        # Random moves
    MEDIUM = "medium"    # Blocks, otherwise random
    HARD = "hard"        # Full minimax


class MoveStrategy:
    """Base class for the computer's move selection."""

    difficulty: Difficulty

    def select_move(self, board: Board, computer_player: Player) -> int:
        """
        Pick the cell to play.

        Args:
            board: Current board (not modified).
            computer_player: The mark the computer plays.

        Returns:
            Index of an empty cell.

        Raises:
            EmptyBoardQuery: If the board has no empty cell.
        """
        raise NotImplementedError

    @staticmethod
    def _available(board: Board) -> List[int]:
        moves = board.empty_indices()
        if not moves:
            raise EmptyBoardQuery("No empty cells left to play")
        return moves


class RandomStrategy(MoveStrategy):
    """Easy: any empty cell, uniformly at random."""

    difficulty = Difficulty.EASY

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def select_move(self, board: Board, computer_player: Player) -> int:
        return self.rng.choice(self._available(board))


class BlockingStrategy(RandomStrategy):
    """
    Medium: block the opponent's two-in-a-row, otherwise play randomly.

    It does not look for its own winning line, which keeps it weaker
    than the hard level.
    """

    difficulty = Difficulty.MEDIUM

    def find_block(self, board: Board, computer_player: Player) -> Optional[int]:
        """
        Find a cell that stops the opponent from completing a line.

        Returns:
            The empty cell of the first line (in table order) holding two
            opponent marks, or None.
        """
        lines = board.cells[LINE_INDEX]
        opponent = np.count_nonzero(lines == computer_player.opposite().mark, axis=1)
        empty = lines == EMPTY
        hits = np.flatnonzero((opponent == 2) & (np.count_nonzero(empty, axis=1) == 1))
        if not hits.size:
            return None
        line = hits[0]
        return int(LINE_INDEX[line][empty[line]][0])

    def select_move(self, board: Board, computer_player: Player) -> int:
        available = self._available(board)
        block = self.find_block(board, computer_player)
        if block is not None:
            logger.debug("Blocking %s at %d", computer_player.opposite().value, block)
            return block
        return self.rng.choice(available)


class MinimaxStrategy(MoveStrategy):
    """
    Hard: plays optimally using the Minimax algorithm.

    Wins are worth +1, losses -1 and draws 0, however deep they are.
    Cells are tried in ascending order and only a strictly better score
    replaces the best move, so ties go to the lowest index.
    """

    difficulty = Difficulty.HARD

    def __init__(self, use_alpha_beta: bool = GameConfig.USE_ALPHA_BETA):
        self.use_alpha_beta = use_alpha_beta
        self.win_checker = WinChecker()

        # Keep track of how many positions we've evaluated (for debugging)
        self.positions_evaluated = 0

    def select_move(self, board: Board, computer_player: Player) -> int:
        self.positions_evaluated = 0
        valid_moves = self._available(board)

        # Special case: if only one move, just take it
        if len(valid_moves) == 1:
            return valid_moves[0]

        best_score = float('-inf')
        best_move = valid_moves[0]

        for index in valid_moves:
            child = board.with_mark(index, computer_player)
            # A window starting at the best score so far can only prune
            # moves that would not replace it
            alpha = best_score if self.use_alpha_beta else float('-inf')
            score = self._minimax(child, computer_player, False, alpha, float('inf'))

            if score > best_score:
                best_score = score
                best_move = index

            if best_score == WIN_SCORE:
                break  # Nothing scores higher

        logger.debug(
            "Minimax evaluated %d positions. Best move: %d (score: %d)",
            self.positions_evaluated, best_move, best_score
        )
        return best_move

    def score_move(self, board: Board, index: int, computer_player: Player) -> int:
        """Exact minimax score of the computer playing ``index`` on ``board``."""
        child = board.with_mark(index, computer_player)
        return self._minimax(child, computer_player, False, float('-inf'), float('inf'))

    def _minimax(
        self,
        board: Board,
        computer_player: Player,
        is_maximizing: bool,
        alpha: float,
        beta: float
    ) -> float:
        """
        Minimax algorithm with optional alpha-beta pruning.

        Args:
            board: Position to evaluate.
            computer_player: The maximizing player.
            is_maximizing: True if it is the computer's turn.
            alpha: Best score the maximizer is already assured of.
            beta: Best score the minimizer is already assured of.

        Returns:
            The score of the position.
        """
        self.positions_evaluated += 1

        outcome = self.win_checker.check_outcome(board)
        if outcome.is_terminal:
            if outcome.winner is None:
                return DRAW_SCORE
            return WIN_SCORE if outcome.winner == computer_player else LOSS_SCORE

        if is_maximizing:
            max_score = float('-inf')
            for index in board.empty_indices():
                child = board.with_mark(index, computer_player)
                score = self._minimax(child, computer_player, False, alpha, beta)
                max_score = max(max_score, score)
                if self.use_alpha_beta:
                    alpha = max(alpha, score)
                    if beta <= alpha:
                        break  # Prune
            return max_score
        else:
            opponent = computer_player.opposite()
            min_score = float('inf')
            for index in board.empty_indices():
                child = board.with_mark(index, opponent)
                score = self._minimax(child, computer_player, True, alpha, beta)
                min_score = min(min_score, score)
                if self.use_alpha_beta:
                    beta = min(beta, score)
                    if beta <= alpha:
                        break  # Prune
            return min_score


def strategy_for(
    difficulty: Union[Difficulty, str],
    rng: Optional[random.Random] = None
) -> MoveStrategy:
    """Build the strategy for a difficulty level ("easy", "medium" or "hard")."""
    difficulty = Difficulty(difficulty)
    if difficulty == Difficulty.EASY:
        return RandomStrategy(rng)
    if difficulty == Difficulty.MEDIUM:
        return BlockingStrategy(rng)
    return MinimaxStrategy()


def select_move(
    board: Board,
    computer_player: Player,
    difficulty: Union[Difficulty, str] = Difficulty.HARD,
    rng: Optional[random.Random] = None
) -> int:
    """Pick the computer's move on ``board`` at the given difficulty."""
    return strategy_for(difficulty, rng).select_move(board, computer_player)
