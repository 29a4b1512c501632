"""
Logging setup for TicTacToe.

Modules log through ``logging.getLogger(__name__)``; the entry point calls
:func:`setup_logger` once to attach handlers to the package logger.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from .config import GameConfig


def setup_logger(
    name: str = GameConfig.LOG_NAME,
    level: str = GameConfig.LOG_LEVEL,
    log_file: Optional[str] = None,
    format_string: Optional[str] = None,
    console_output: bool = True
) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        name: Logger name (the package name by default).
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path of a rotating log file.
        format_string: Custom format, defaults to GameConfig.LOG_FORMAT.
        console_output: Whether to log to stderr.

    Returns:
        The configured logger.
    """
    log_level = getattr(logging, level.upper(), None)
    if not isinstance(log_level, int):
        raise ValueError(f"Unknown log level: {level}")

    logger = logging.getLogger(name)
    logger.setLevel(log_level)

    # Avoid duplicate handlers when called twice
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    formatter = logging.Formatter(format_string or GameConfig.LOG_FORMAT)

    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=GameConfig.LOG_MAX_BYTES,
            backupCount=GameConfig.LOG_BACKUP_COUNT,
            encoding="utf-8"
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
