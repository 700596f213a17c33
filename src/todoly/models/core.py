"""Task data models."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, field_validator

from .exceptions import DecodeError

_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class TaskStatus(str, Enum):
    """Task status. The value is what gets written to the task file."""

    TODO = "Todo"
    DONE = "Done"


class SortKey(str, Enum):
    """Orderings supported by TaskStore.list_tasks."""

    DUE_DATE = "date"
    PROJECT = "project"
    ID = "id"


class OutputFormat(str, Enum):
    """Formats accepted by --output."""

    TABLE = "table"
    JSON = "json"
    YAML = "yaml"


class Task(BaseModel):
    """Task model representing a single to-do record.

    Attributes:
        id: Positive identifier, assigned by the store
        title: Non-empty title, stored trimmed
        project: Free-form project label, may be empty
        due_date: Calendar due date
        status: Todo or Done
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    id: StrictInt = Field(gt=0)
    title: StrictStr
    project: StrictStr = ""
    due_date: date
    status: TaskStatus = TaskStatus.TODO

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("title must not be empty")
        return value

    @field_validator("due_date", mode="before")
    @classmethod
    def _due_date_is_calendar_date(cls, value: Any) -> Any:
        # Only "YYYY-MM-DD" strings or date objects; no timestamps or datetimes.
        if isinstance(value, str):
            if not _ISO_DATE_RE.match(value):
                raise ValueError("due_date must be in YYYY-MM-DD form")
            return value
        if isinstance(value, datetime) or not isinstance(value, date):
            raise ValueError("due_date must be a calendar date")
        return value

    @property
    def is_done(self) -> bool:
        return self.status is TaskStatus.DONE


class TaskCounts(BaseModel):
    """Number of open and completed tasks."""

    todo: int = 0
    done: int = 0

    @property
    def total(self) -> int:
        return self.todo + self.done


class LoadStatus(str, Enum):
    """Outcome of TaskStore.load."""

    LOADED = "loaded"
    MISSING = "missing"
    CORRUPT = "corrupt"


@dataclass(frozen=True)
class LoadResult:
    """What TaskStore.load found on disk.

    A CORRUPT result carries the DecodeError so callers can tell the user
    that previously saved tasks could not be read.
    """

    path: Path
    status: LoadStatus
    count: int = 0
    error: DecodeError | None = None

    @property
    def is_corrupt(self) -> bool:
        return self.status is LoadStatus.CORRUPT
