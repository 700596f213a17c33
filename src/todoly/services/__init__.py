"""Services module for ToDoLy - Business logic layer."""

from .config_service import ConfigService, get_config_service
from .task_store import TaskStore, get_task_store

__all__ = [
    "TaskStore",
    "get_task_store",
    "ConfigService",
    "get_config_service",
]
