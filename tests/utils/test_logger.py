"""Tests for the application logger utility."""

from __future__ import annotations

import logging
from unittest.mock import patch


def test_get_logger_creates_log_file(tmp_path):
    """Logger creates the log file inside user_log_dir."""
    with patch("todoly.utils.logger.user_log_dir", return_value=str(tmp_path)):
        from todoly.utils.logger import get_logger

        logger = get_logger()

    log_file = tmp_path / "todoly.log"
    assert log_file.exists(), "Log file should be created on first use"
    assert isinstance(logger, logging.Logger)
    assert logger.name == "todoly"


def test_get_logger_returns_singleton(tmp_path):
    """Repeated calls return the same logger instance."""
    with patch("todoly.utils.logger.user_log_dir", return_value=str(tmp_path)):
        from todoly.utils.logger import get_logger

        l1 = get_logger()
        l2 = get_logger()

    assert l1 is l2


def test_get_logger_writes_message(tmp_path):
    """Messages written to the logger appear in the log file."""
    with patch("todoly.utils.logger.user_log_dir", return_value=str(tmp_path)):
        from todoly.utils.logger import get_logger

        logger = get_logger()
        logger.info("hello from test")

    for handler in logger.handlers:
        handler.flush()

    content = (tmp_path / "todoly.log").read_text()
    assert "hello from test" in content
    assert "[todoly]" in content


def test_get_logger_creates_parent_dirs(tmp_path):
    """Logger creates nested directories if they do not exist."""
    nested = tmp_path / "a" / "b" / "c"
    with patch("todoly.utils.logger.user_log_dir", return_value=str(nested)):
        from todoly.utils.logger import get_logger

        get_logger()

    assert nested.is_dir()


def test_get_logger_does_not_propagate(tmp_path):
    """Log records stay out of the root logger (and the terminal)."""
    with patch("todoly.utils.logger.user_log_dir", return_value=str(tmp_path)):
        from todoly.utils.logger import get_logger

        logger = get_logger()

    assert logger.propagate is False
