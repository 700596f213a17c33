"""ToDoLy domain models.

This package contains the Pydantic models and exceptions that represent the
task tracker's domain. They are used by the store, the codec and the
command layer for validation, serialization and type safety.
"""

from .config_models import AppConfig
from .core import LoadResult, LoadStatus, OutputFormat, SortKey, Task, TaskCounts, TaskStatus
from .exceptions import (
    BadDateError,
    DecodeError,
    EmptyTitleError,
    SaveError,
    TaskNotFoundError,
    TaskValidationError,
    TodolyError,
)

__all__ = [
    # Task models
    "Task",
    "TaskStatus",
    "TaskCounts",
    "OutputFormat",
    "SortKey",
    "LoadResult",
    "LoadStatus",
    # Config models
    "AppConfig",
    # Errors
    "TodolyError",
    "TaskValidationError",
    "EmptyTitleError",
    "BadDateError",
    "TaskNotFoundError",
    "DecodeError",
    "SaveError",
]
