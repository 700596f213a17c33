"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from real user directories.
"""

from __future__ import annotations

import logging
from datetime import date
from unittest.mock import patch

import pytest

from todoly.models import Task, TaskStatus
from todoly.services.task_store import TaskStore

# ---------------------------------------------------------------------------
# Isolation helpers
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path, monkeypatch):
    """Send logs, config and data files into *tmp_path*.

    Also resets the logger singleton and the cached ConfigService so each
    test starts from a clean slate.
    """
    import todoly.utils.logger as logger_mod
    from todoly.services.config_service import DATA_FILE_ENV, get_config_service

    monkeypatch.delenv(DATA_FILE_ENV, raising=False)
    logger_mod._logger = None
    logging.getLogger("todoly").handlers.clear()
    get_config_service.cache_clear()

    tmpdir = str(tmp_path / "platform")
    with (
        patch("todoly.utils.logger.user_log_dir", return_value=tmpdir),
        patch("todoly.services.config_service.user_config_dir", return_value=tmpdir),
        patch("todoly.services.config_service.user_data_dir", return_value=tmpdir),
    ):
        yield

    for handler in logging.getLogger("todoly").handlers:
        handler.close()
    logging.getLogger("todoly").handlers.clear()
    logger_mod._logger = None
    get_config_service.cache_clear()


# ---------------------------------------------------------------------------
# Store fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def tasks_file(tmp_path):
    return tmp_path / "tasks.json"


@pytest.fixture()
def store(tasks_file):
    """An empty TaskStore backed by a temporary file."""
    return TaskStore(tasks_file)


@pytest.fixture()
def make_task():
    """Factory building a Task with sensible defaults."""

    def _make(task_id: int, title: str = "Task", **kwargs) -> Task:
        kwargs.setdefault("project", "")
        kwargs.setdefault("due_date", date(2024, 1, 1))
        kwargs.setdefault("status", TaskStatus.TODO)
        return Task(id=task_id, title=title, **kwargs)

    return _make
