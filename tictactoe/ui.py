"""
TicTacToe UI
A graphical interface for TicTacToe using Tkinter.

Shows:
- The 3x3 board (click a cell to play)
- Game status
- Mode and difficulty selection
- Restart and quit buttons
"""

import tkinter as tk
from tkinter import ttk
from typing import List, Optional

from .config import GameConfig
from .logic import Difficulty, GameSession, Mode


class TicTacToeUI:
    """
    Main UI class for TicTacToe.

    All game rules live in the GameSession; this class only forwards
    clicks to it and redraws the board afterwards.
    """

    DIFFICULTY_COLORS = {
        Difficulty.EASY: "#4ade80",
        Difficulty.MEDIUM: "#fbbf24",
        Difficulty.HARD: "#f87171",
    }

    def __init__(self, session: Optional[GameSession] = None):
        """Initialize the UI."""
        self.session = session or GameSession.new()
        self._pending_move: Optional[str] = None

        self.cell_buttons: List[tk.Button] = []
        self.difficulty_buttons = {}

        # Create UI
        self._create_ui()
        self._refresh()
        self._schedule_computer_move()

    def _create_ui(self):
        """Create the Tkinter UI."""
        font = GameConfig.FONT_FAMILY

        self.root = tk.Tk()
        self.root.title(GameConfig.WINDOW_TITLE)
        self.root.configure(bg=GameConfig.BG_COLOR)
        self.root.resizable(False, False)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=GameConfig.BG_COLOR)
        style.configure('TLabel', background=GameConfig.BG_COLOR, foreground='white', font=(font, 11))
        style.configure('Title.TLabel', font=(font, 16, 'bold'), foreground=GameConfig.TITLE_COLOR)
        style.configure('Status.TLabel', font=(font, 12), foreground=GameConfig.STATUS_COLOR)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=20, pady=20)

        ttk.Label(main_frame, text="Tic Tac Toe", style='Title.TLabel').pack(pady=(0, 10))

        # Mode selection
        mode_frame = ttk.Frame(main_frame)
        mode_frame.pack(pady=5)
        ttk.Label(mode_frame, text="Mode:").pack(side=tk.LEFT, padx=(0, 5))

        self.mode_var = tk.StringVar(value=self.session.mode.value)
        mode_box = ttk.Combobox(
            mode_frame,
            textvariable=self.mode_var,
            values=[m.value for m in Mode],
            state='readonly',
            width=8
        )
        mode_box.pack(side=tk.LEFT)
        mode_box.bind('<<ComboboxSelected>>', lambda _event: self._set_mode(self.mode_var.get()))

        # Difficulty selection (hidden in two-player mode)
        self.diff_frame = ttk.Frame(main_frame)
        self.diff_frame.pack(pady=5)

        for difficulty in Difficulty:
            btn = tk.Button(
                self.diff_frame,
                text=difficulty.value.title(),
                font=(font, 10, 'bold'),
                width=8,
                activebackground=self.DIFFICULTY_COLORS[difficulty],
                command=lambda d=difficulty: self._set_difficulty(d)
            )
            btn.pack(side=tk.LEFT, padx=5)
            self.difficulty_buttons[difficulty] = btn

        # Board
        self.board_frame = ttk.Frame(main_frame)
        self.board_frame.pack(pady=15)

        for index in range(len(self.session.board)):
            cell = tk.Button(
                self.board_frame,
                text="",
                font=(font, 24, 'bold'),
                width=4,
                height=2,
                bg=GameConfig.CELL_COLOR,
                fg='white',
                relief='ridge',
                borderwidth=2,
                command=lambda i=index: self._cell_clicked(i)
            )
            cell.grid(row=index // 3, column=index % 3, padx=2, pady=2)
            self.cell_buttons.append(cell)

        # Status
        self.status_label = ttk.Label(main_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=5)

        # Control buttons
        control_frame = ttk.Frame(main_frame)
        control_frame.pack(pady=10)

        tk.Button(
            control_frame,
            text="Restart",
            font=(font, 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=12,
            command=self._restart
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="Quit",
            font=(font, 11, 'bold'),
            bg='#ef4444',
            fg='white',
            width=12,
            command=self._quit
        ).pack(side=tk.LEFT, padx=5)

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    # ------------------------------------------------------------------ Events

    def _cell_clicked(self, index: int):
        """Forward a click to the session; ignored clicks change nothing."""
        if self.session.activate_cell(index):
            self._refresh()
            self._schedule_computer_move()

    def _set_mode(self, value: str):
        self.session.set_mode(value)
        self._refresh()
        self._schedule_computer_move()

    def _set_difficulty(self, difficulty: Difficulty):
        self.session.set_difficulty(difficulty)
        self._refresh()

    def _restart(self):
        """Start a new game with a random starting player."""
        self._cancel_pending_move()
        self.session.reset()
        self._refresh()
        self._schedule_computer_move()

    def _quit(self):
        """Quit the application."""
        self._cancel_pending_move()
        self.root.quit()
        self.root.destroy()

    # ------------------------------------------------------------------ Computer player

    def _schedule_computer_move(self):
        """Let the computer move after a short delay, if it is its turn."""
        if self._pending_move is None and self.session.is_computer_turn:
            self._pending_move = self.root.after(GameConfig.THINK_DELAY_MS, self._computer_move)

    def _cancel_pending_move(self):
        if self._pending_move is not None:
            self.root.after_cancel(self._pending_move)
            self._pending_move = None

    def _computer_move(self):
        self._pending_move = None
        # Mode may have changed while we were waiting
        if not self.session.is_computer_turn:
            return
        self.session.computer_move()
        self._refresh()

    # ------------------------------------------------------------------ Drawing

    def _refresh(self):
        """Redraw the board, status and selection buttons from the session."""
        session = self.session
        win_line = session.winning_line or ()

        for index, (cell, mark) in enumerate(zip(self.cell_buttons, session.board.to_cells())):
            color = GameConfig.X_COLOR if mark == "X" else GameConfig.O_COLOR
            cell.configure(
                text=mark,
                fg=color,
                bg=GameConfig.WIN_CELL_COLOR if index in win_line else GameConfig.CELL_COLOR
            )

        self.status_label.configure(text=session.status_message)

        if session.mode == Mode.SINGLE:
            self.diff_frame.pack(pady=5, before=self.board_frame)
        else:
            self.diff_frame.pack_forget()

        for difficulty, btn in self.difficulty_buttons.items():
            if difficulty == session.difficulty:
                btn.configure(bg=self.DIFFICULTY_COLORS[difficulty], fg='black')
            else:
                btn.configure(bg='#2d3748', fg='white')

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()
