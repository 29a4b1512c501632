"""
Tests for the logging setup.
"""

import logging

from tictactoe.logger import setup_logger


def test_setup_twice_closes_old_file_handler(tmp_path):
    name = "tictactoe.test_setup_twice"
    logger = setup_logger(name=name, level="info", log_file=str(tmp_path / "first.log"), console_output=False)
    first = logger.handlers[0]

    try:
        logger = setup_logger(name=name, level="debug", log_file=str(tmp_path / "second.log"), console_output=False)

        assert first not in logger.handlers
        assert first.stream is None
        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG

        logger.debug("hello")
        logger.handlers[0].flush()
        assert "hello" in (tmp_path / "second.log").read_text(encoding="utf-8")
        assert (tmp_path / "first.log").read_text(encoding="utf-8") == ""
    finally:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
