"""
Game configuration for TicTacToe.
All the settings for players, modes, the computer opponent, logging and the UI.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Change these values based on your setup!
    Command line flags in main.py override the defaults below.
    """

    # ==================== PLAYER SETTINGS ====================
    # The human always plays X in single-player mode, the computer plays O
    HUMAN_PLAYER = "X"
    COMPUTER_PLAYER = "O"

    # ==================== MODE SETTINGS ====================
    # "single" = human vs computer, "multi" = human vs human
    DEFAULT_MODE = "single"

    # "easy", "medium" or "hard" (only used in single mode)
    DEFAULT_DIFFICULTY = "easy"

    # Delay before the computer moves, to simulate thinking
    THINK_DELAY_MS = 500

    # ==================== SEARCH SETTINGS ====================
    # Alpha-beta never changes the chosen move, it only skips work
    USE_ALPHA_BETA = True

    # ==================== LOGGING SETTINGS ====================
    LOG_NAME = "tictactoe"
    LOG_LEVEL = "WARNING"
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    LOG_MAX_BYTES = 1024 * 1024
    LOG_BACKUP_COUNT = 3

    # ==================== UI SETTINGS ====================
    WINDOW_TITLE = "Tic Tac Toe"
    BG_COLOR = "#1a1a2e"
    CELL_COLOR = "#16213e"
    WIN_CELL_COLOR = "#10b981"
    X_COLOR = "#00ff88"
    O_COLOR = "#ff6b6b"
    TITLE_COLOR = "#00d4ff"
    STATUS_COLOR = "#ffd700"
    FONT_FAMILY = "Segoe UI"
