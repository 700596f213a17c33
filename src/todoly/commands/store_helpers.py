"""Shared load/save plumbing for commands.

Every command loads the task file once, runs one store operation and,
if it changed anything, saves once on the way out.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from todoly.services.task_store import TaskStore, get_task_store
from todoly.utils.ui.formatters import format_warning


def open_store(path: str | Path | None = None) -> TaskStore:
    """Load the task store, warning if saved data could not be read."""
    store = get_task_store(path)
    result = store.load()
    if result.is_corrupt:
        format_warning(
            f"Could not load tasks from {result.path}: {result.error}. "
            "Starting with an empty list; saving will overwrite the old file."
        )
    return store


@contextmanager
def editing_store(path: str | Path | None = None) -> Iterator[TaskStore]:
    """Load the store, yield it, and save it if the block succeeds."""
    store = open_store(path)
    yield store
    store.save()
