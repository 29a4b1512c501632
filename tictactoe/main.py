"""
Main entry point for TicTacToe.

Launches the Tkinter window by default. With --no-ui the game is played
in the terminal instead:

    python -m tictactoe --no-ui --difficulty hard
"""

import argparse
import logging
import random
import time
from typing import Callable, List, Optional

from .config import GameConfig
from .logger import setup_logger
from .logic import Difficulty, GameSession, InvalidMove, Mode

logger = logging.getLogger(__name__)

HELP_TEXT = """Commands:
  1-9                 play that cell (numbered left to right, top to bottom)
  r                   restart
  mode single|multi   play against the computer or a friend
  difficulty LEVEL    easy, medium or hard
  q                   quit"""


class ConsoleGame:
    """
    Terminal front end for a GameSession.

    Game flow:
    1. The player to move types a cell number
    2. In single mode the computer answers on its turn
    3. Repeat until someone wins or it's a tie
    4. Restart with 'r' or quit with 'q'
    """

    def __init__(
        self,
        session: GameSession,
        input_fn: Optional[Callable[[str], str]] = None,
        output_fn: Optional[Callable[[str], None]] = None,
        think_delay: float = GameConfig.THINK_DELAY_MS / 1000
    ):
        """
        Initialize the console game.

        Args:
            session: The game session to play.
            input_fn: Reads one line of user input (default: input).
            output_fn: Writes one line of output (default: print).
            think_delay: Seconds to pause before the computer moves.
        """
        self.session = session
        self.input_fn = input_fn or input
        self.output_fn = output_fn or print
        self.think_delay = think_delay
        self.is_running = False

    def start(self):
        """Start the game loop."""
        self.output_fn("=" * 40)
        self.output_fn("   Tic Tac Toe")
        self.output_fn("=" * 40)
        self._show_mode()
        self.output_fn(HELP_TEXT)

        self.is_running = True
        self._game_loop()

    def _game_loop(self):
        """Main game loop."""
        while self.is_running:
            if self.session.is_computer_turn:
                self._computer_move()
                continue

            self._show_board()

            if self.session.running:
                prompt = f"{self.session.current_player.value}, choose a cell (1-9): "
            else:
                self._show_game_result()
                prompt = "Type r to play again or q to quit: "

            try:
                command = self.input_fn(prompt)
            except EOFError:
                command = "q"

            self._handle_command(command.strip().lower())

    def _handle_command(self, command: str):
        """Dispatch one line of user input."""
        if not command:
            return

        if command in ("q", "quit", "exit"):
            self.output_fn("Goodbye!")
            self.is_running = False
        elif command in ("r", "restart"):
            self._reset_game()
        elif command in ("h", "help", "?"):
            self.output_fn(HELP_TEXT)
        elif command.startswith("mode"):
            self._set_option(command, self.session.set_mode, [m.value for m in Mode])
        elif command.startswith("difficulty"):
            self._set_option(command, self.session.set_difficulty, [d.value for d in Difficulty])
        elif command.isdigit():
            self._process_human_move(int(command) - 1)
        else:
            self.output_fn(f"Unknown command: {command!r}. Type h for help.")

    def _set_option(self, command: str, setter: Callable[[str], None], choices: List[str]):
        parts = command.split()
        if len(parts) != 2 or parts[1] not in choices:
            self.output_fn(f"Usage: {parts[0]} {'|'.join(choices)}")
            return
        setter(parts[1])
        self._show_mode()

    def _process_human_move(self, index: int):
        """
        Play a move typed by the human.

        Args:
            index: Cell index (0-8).
        """
        if not self.session.running:
            self.output_fn("Game is over! Type r to play again.")
            return

        if not 0 <= index < len(self.session.board):
            self.output_fn("Choose a cell from 1 to 9.")
            return

        if not self.session.activate_cell(index):
            self.output_fn(f"Cell {index + 1} is already taken.")

    def _computer_move(self):
        """Let the computer play its move."""
        self.output_fn("\n>>> Computer is thinking...")
        if self.think_delay > 0:
            time.sleep(self.think_delay)

        try:
            index = self.session.computer_move()
        except InvalidMove as e:
            # Should not happen: we only get here on the computer's turn
            logger.error("Computer move failed: %s", e)
            self.is_running = False
            return

        self.output_fn(f">>> Computer plays {self.session.computer_player.value} at cell {index + 1}")

    def _show_board(self):
        self.output_fn("")
        self.output_fn(self.session.board.render())
        self.output_fn("")
        if self.session.running:
            self.output_fn(self.session.status_message)

    def _show_mode(self):
        if self.session.mode == Mode.SINGLE:
            self.output_fn(
                f"Mode: single player ({self.session.difficulty.value}). "
                f"You are {self.session.human_player.value}."
            )
        else:
            self.output_fn("Mode: two players.")

    def _show_game_result(self):
        """Show the final game result."""
        self.output_fn("=" * 40)
        self.output_fn("   GAME OVER! " + self.session.status_message)
        self.output_fn("=" * 40)

    def _reset_game(self):
        """Reset the game for a new round."""
        self.session.reset()
        self.output_fn(f"\nNew game! {self.session.current_player.value} goes first.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Tic Tac Toe against a friend or the computer")
    parser.add_argument(
        "--mode",
        choices=[m.value for m in Mode],
        default=GameConfig.DEFAULT_MODE,
        help="single = against the computer, multi = two players (default: %(default)s)"
    )
    parser.add_argument(
        "--difficulty",
        choices=[d.value for d in Difficulty],
        default=GameConfig.DEFAULT_DIFFICULTY,
        help="Computer difficulty in single mode (default: %(default)s)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the starting player and random moves"
    )
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Play in the terminal instead of a window"
    )
    parser.add_argument(
        "--log-level",
        default=GameConfig.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Logging level (default: %(default)s)"
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also write logs to this file"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    setup_logger(level=args.log_level, log_file=args.log_file)

    session = GameSession.new(
        mode=args.mode,
        difficulty=args.difficulty,
        rng=random.Random(args.seed)
    )

    # Launch UI by default
    if not args.no_ui:
        from .ui import TicTacToeUI
        ui = TicTacToeUI(session)
        ui.run()
        return 0

    game = ConsoleGame(session)
    try:
        game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
