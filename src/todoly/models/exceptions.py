"""Custom exceptions for ToDoLy."""


class TodolyError(Exception):
    """Base exception for all ToDoLy errors."""


class TaskValidationError(TodolyError):
    """Raised when user input for a task is rejected. Nothing is applied."""


class EmptyTitleError(TaskValidationError):
    """Raised when a task title is empty or whitespace-only."""

    def __init__(self, message: str = "Title is required."):
        super().__init__(message)


class BadDateError(TaskValidationError):
    """Raised when a due date does not parse as a calendar date."""

    def __init__(self, value: object):
        super().__init__(f"Invalid date: {value!r} (expected YYYY-MM-DD)")
        self.value = value


class TaskNotFoundError(TodolyError):
    """Raised when no task matches the requested id."""

    def __init__(self, task_id: int):
        super().__init__(f"Task not found: {task_id}")
        self.task_id = task_id


class DecodeError(TodolyError):
    """Raised when stored task data is malformed or has the wrong shape."""


class SaveError(TodolyError):
    """Raised when the task file cannot be written."""
