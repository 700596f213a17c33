"""JSON codec for the task collection.

The durable form is a UTF-8 JSON array of task records::

    [
      {
        "id": 1,
        "title": "Write report",
        "project": "Work",
        "due_date": "2024-03-01",
        "status": "Todo"
      }
    ]
"""

from __future__ import annotations

import codecs
from collections.abc import Iterable

from pydantic import TypeAdapter, ValidationError

from todoly.models import DecodeError, Task

_TASK_LIST = TypeAdapter(list[Task])


class JsonTaskCodec:
    """Encode and decode task collections.

    ``decode(encode(tasks)) == tasks`` holds for every valid collection.
    """

    def __init__(self, indent: int | None = 2):
        self.indent = indent

    def encode(self, tasks: Iterable[Task]) -> bytes:
        """Serialize tasks in collection order with a fixed field order."""
        return _TASK_LIST.dump_json(list(tasks), indent=self.indent)

    def decode(self, data: bytes | str) -> list[Task]:
        """Parse and validate a serialized collection.

        Raises:
            DecodeError: If the data is not well-formed JSON, is not an array
                of valid task records, or repeats an id
        """
        data = _strip_bom(data)
        try:
            tasks = _TASK_LIST.validate_json(data)
        except ValidationError as e:
            raise DecodeError(_describe(e)) from e

        seen: set[int] = set()
        for task in tasks:
            if task.id in seen:
                raise DecodeError(f"Duplicate task id {task.id}")
            seen.add(task.id)
        return tasks


def _strip_bom(data: bytes | str) -> bytes | str:
    # Some Windows editors save UTF-8 with a byte order mark
    if isinstance(data, bytes):
        return data.removeprefix(codecs.BOM_UTF8)
    return data.removeprefix("\ufeff")


def _describe(error: ValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or "<root>"
    count = error.error_count()
    suffix = f" (and {count - 1} more)" if count > 1 else ""
    return f"Malformed task data at {location}: {first['msg']}{suffix}"
