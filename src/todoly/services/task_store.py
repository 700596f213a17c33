"""Task store - the authoritative in-memory task collection.

The store owns the only live copy of every task. Callers get copies back
from every operation, so the collection can only change through the
methods below. Persistence is explicit: ``load()`` once at start-up and
``save()`` once on exit.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path

from todoly.adapters.file_storage import FileStorage
from todoly.adapters.json_codec import JsonTaskCodec
from todoly.models import (
    DecodeError,
    EmptyTitleError,
    LoadResult,
    LoadStatus,
    SaveError,
    SortKey,
    Task,
    TaskCounts,
    TaskNotFoundError,
    TaskStatus,
)
from todoly.services.config_service import get_config_service
from todoly.utils.dates import parse_due_date, try_parse_due_date
from todoly.utils.logger import get_logger


def _sort_key(sort: SortKey):
    if sort is SortKey.PROJECT:
        return lambda t: (t.project, t.due_date, t.id)
    if sort is SortKey.ID:
        return lambda t: t.id
    return lambda t: (t.due_date, t.id)


class TaskStore:
    """In-memory task collection backed by a JSON file.

    Single-threaded by design: one caller issues one operation at a time.
    """

    def __init__(
        self,
        path: str | Path,
        *,
        codec: JsonTaskCodec | None = None,
        storage: FileStorage | None = None,
    ):
        """Initialize the store with an empty collection.

        Args:
            path: Task file location
            codec: Codec used to (de)serialize the collection
            storage: File adapter; defaults to FileStorage(path)
        """
        self.codec = codec or JsonTaskCodec()
        self.storage = storage or FileStorage(path)
        self._tasks: list[Task] = []

    @property
    def path(self) -> Path:
        return self.storage.path

    def __len__(self) -> int:
        return len(self._tasks)

    # ---- lifecycle ----

    def load(self) -> LoadResult:
        """Replace the collection with what is stored on disk.

        A missing file gives an empty collection. Unreadable or malformed
        data also gives an empty collection; the result is marked CORRUPT
        and carries the DecodeError.
        """
        logger = get_logger()
        self._tasks = []

        try:
            data = self.storage.read()
        except OSError as e:
            error = DecodeError(f"Could not read {self.path}: {e}")
            logger.warning("task file unreadable: %s", error)
            return LoadResult(self.path, LoadStatus.CORRUPT, error=error)

        if data is None:
            logger.info("no task file at %s, starting empty", self.path)
            return LoadResult(self.path, LoadStatus.MISSING)

        try:
            tasks = self.codec.decode(data)
        except DecodeError as e:
            logger.warning("task file %s is corrupt, starting empty: %s", self.path, e)
            return LoadResult(self.path, LoadStatus.CORRUPT, error=e)

        self._tasks = tasks
        logger.info("loaded %d task(s) from %s", len(tasks), self.path)
        return LoadResult(self.path, LoadStatus.LOADED, count=len(tasks))

    def save(self) -> Path:
        """Write the whole collection to disk.

        Returns:
            Path of the written file

        Raises:
            SaveError: If the file cannot be written
        """
        data = self.codec.encode(self._tasks)
        try:
            self.storage.write(data)
        except OSError as e:
            get_logger().error("saving %s failed: %s", self.path, e)
            raise SaveError(f"Could not save tasks to {self.path}: {e}") from e
        get_logger().info("saved %d task(s) to %s", len(self._tasks), self.path)
        return self.path

    # ---- queries ----

    def list_tasks(
        self,
        sort: SortKey = SortKey.DUE_DATE,
        project: str | None = None,
    ) -> list[Task]:
        """Return a sorted, optionally filtered view of the collection.

        Args:
            sort: DUE_DATE (due date, id), PROJECT (project, due date, id)
                or ID
            project: Keep only tasks whose project equals this,
                ignoring case. Blank means no filter.

        Returns:
            Copies of the matching tasks
        """
        ordered = sorted(self._tasks, key=_sort_key(SortKey(sort)))
        wanted = project.strip().casefold() if project else ""
        if wanted:
            ordered = [t for t in ordered if t.project.casefold() == wanted]
        return [t.model_copy() for t in ordered]

    def find(self, task_id: int) -> Task:
        """Get a copy of the task with this id.

        Raises:
            TaskNotFoundError: If no task has this id
        """
        return self._get(task_id).model_copy()

    def counts(self) -> TaskCounts:
        done = sum(1 for t in self._tasks if t.status is TaskStatus.DONE)
        return TaskCounts(todo=len(self._tasks) - done, done=done)

    # ---- mutations ----

    def add(self, title: str, project: str | None, due_date: str | date) -> Task:
        """Create a task with the next free id and status Todo.

        Raises:
            EmptyTitleError: If the title is blank
            BadDateError: If the due date does not parse
        """
        title = (title or "").strip()
        if not title:
            raise EmptyTitleError()
        parsed_due = parse_due_date(due_date)

        task = Task(
            id=self._next_id(),
            title=title,
            project=(project or "").strip(),
            due_date=parsed_due,
            status=TaskStatus.TODO,
        )
        self._tasks.append(task)
        get_logger().info("added task %d", task.id)
        return task.model_copy()

    def update(
        self,
        task_id: int,
        *,
        title: str | None = None,
        project: str | None = None,
        due_date: str | date | None = None,
    ) -> Task:
        """Change some fields of a task, keeping the rest.

        None or a blank string keeps the current value. A due date that
        does not parse is skipped rather than rejected; the other fields
        are still applied.

        Raises:
            TaskNotFoundError: If no task has this id
        """
        task = self._get(task_id)

        changes: dict[str, object] = {}
        if title is not None and title.strip():
            changes["title"] = title.strip()
        if project is not None and project.strip():
            changes["project"] = project.strip()
        if isinstance(due_date, date) or (due_date is not None and due_date.strip()):
            parsed_due = try_parse_due_date(due_date)
            if parsed_due is None:
                get_logger().info("task %d: ignoring unparseable due date %r", task_id, due_date)
            else:
                changes["due_date"] = parsed_due

        for field, value in changes.items():
            setattr(task, field, value)
        if changes:
            get_logger().info("updated task %d: %s", task_id, ", ".join(changes))
        return task.model_copy()

    def set_status(self, task_id: int, status: TaskStatus | str) -> Task:
        """Mark a task Todo or Done. Setting the current status is a no-op.

        Raises:
            TaskNotFoundError: If no task has this id
        """
        task = self._get(task_id)
        status = TaskStatus(status)
        if task.status is not status:
            task.status = status
            get_logger().info("task %d marked %s", task_id, status.value)
        return task.model_copy()

    def remove(self, task_id: int) -> Task:
        """Delete a task and return it.

        Raises:
            TaskNotFoundError: If no task has this id
        """
        task = self._get(task_id)
        self._tasks.remove(task)
        get_logger().info("removed task %d", task_id)
        return task

    # ---- helpers ----

    def _get(self, task_id: int) -> Task:
        for task in self._tasks:
            if task.id == task_id:
                return task
        raise TaskNotFoundError(task_id)

    def _next_id(self) -> int:
        return max((t.id for t in self._tasks), default=0) + 1


def get_task_store(path: str | Path | None = None) -> TaskStore:
    """Build a TaskStore for the configured task file."""
    return TaskStore(get_config_service().resolve_data_file(path))
