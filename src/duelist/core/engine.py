"""Task list engine - owns the task collection and its mutations."""

import logging
from datetime import date, datetime, timezone
from typing import Callable, Iterable

from .errors import NotFoundError, ValidationError
from .tasks import Task, TaskStatus, parse_due_date
from .view import ViewState, project

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TaskListEngine:
    """
    In-memory task collection.

    Every mutation validates before it touches state, so a failed call
    leaves the collection exactly as it was. Persistence is the caller's
    job: load() seeds the engine, .tasks is what gets saved.
    """

    def __init__(
        self,
        tasks: Iterable[Task] | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        self._tasks: list[Task] = []
        self._clock = clock or _utc_now
        if tasks:
            self.load(tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    @property
    def tasks(self) -> list[Task]:
        """Copy of the collection in insertion order."""
        return list(self._tasks)

    def load(self, tasks: Iterable[Task]) -> None:
        """Replace the collection with previously saved tasks. Later duplicate ids are dropped."""
        loaded: list[Task] = []
        seen: set[int] = set()
        for task in tasks:
            if task.id in seen:
                logger.warning(f"Dropping task with duplicate id {task.id}: {task.text!r}")
                continue
            seen.add(task.id)
            loaded.append(task)
        self._tasks = loaded
        logger.debug(f"Loaded {len(self._tasks)} tasks")

    def get(self, task_id: int) -> Task | None:
        return next((t for t in self._tasks if t.id == task_id), None)

    def _next_id(self, created_at: datetime) -> int:
        # Epoch milliseconds, bumped past the largest id so same-instant adds stay unique
        candidate = int(created_at.timestamp() * 1000)
        if self._tasks:
            candidate = max(candidate, max(t.id for t in self._tasks) + 1)
        return candidate

    def add(self, text: str, due_date: str | date) -> Task:
        """Create a task and append it to the collection."""
        text = (text or "").strip()
        if not text:
            raise ValidationError("empty text")
        try:
            due = parse_due_date(due_date)
        except ValueError:
            raise ValidationError("missing date")

        created_at = self._clock()
        task = Task(
            id=self._next_id(created_at),
            text=text,
            due_date=due,
            created_at=created_at,
        )
        self._tasks.append(task)
        logger.debug(f"Added task {task.id} due {due.isoformat()}")
        return task

    def toggle(self, task_id: int) -> None:
        """Flip completion. Unknown ids are ignored."""
        task = self.get(task_id)
        if task is None:
            logger.debug(f"Toggle ignored unknown task {task_id}")
            return
        task.completed = not task.completed

    def edit(self, task_id: int, new_text: str, new_due_date: str | date) -> Task:
        """Overwrite text and due date. Raises NotFoundError for unknown ids."""
        task = self.get(task_id)
        if task is None:
            raise NotFoundError(task_id)

        new_text = (new_text or "").strip()
        if not new_text:
            raise ValidationError("empty text")
        try:
            due = parse_due_date(new_due_date)
        except ValueError:
            raise ValidationError("invalid date")

        task.text = new_text
        task.due_date = due
        logger.debug(f"Edited task {task_id}")
        return task

    def delete(self, task_id: int) -> bool:
        """Remove a task. Returns whether anything was removed."""
        before = len(self._tasks)
        self._tasks = [t for t in self._tasks if t.id != task_id]
        return len(self._tasks) < before

    def clear_completed(self) -> int:
        """Remove completed tasks. Returns how many were removed."""
        before = len(self._tasks)
        self._tasks = [t for t in self._tasks if not t.completed]
        removed = before - len(self._tasks)
        logger.debug(f"Cleared {removed} completed tasks")
        return removed

    def clear_all(self) -> int:
        """Remove every task. Returns the prior count."""
        removed = len(self._tasks)
        self._tasks = []
        logger.debug(f"Cleared all {removed} tasks")
        return removed

    def project(self, view: ViewState | None = None, as_of: date | None = None) -> list[Task]:
        """Visible tasks for a view. Read-only."""
        return project(self._tasks, view, as_of)

    def counts(self, as_of: date | None = None) -> dict[str, int]:
        """Task totals per status, plus "total"."""
        as_of = as_of or date.today()
        counts = {status.value: 0 for status in TaskStatus}
        for task in self._tasks:
            counts[task.status(as_of).value] += 1
        counts["total"] = len(self._tasks)
        return counts
