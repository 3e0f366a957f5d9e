"""Pure task domain logic - no I/O dependencies."""

import math
import re
from dataclasses import dataclass
from datetime import date, datetime, timezone
from enum import Enum

DUE_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class TaskStatus(str, Enum):
    """Where a task sits relative to completion and its due date."""

    ACTIVE = "active"
    OVERDUE = "overdue"
    COMPLETED = "completed"


def parse_due_date(value: str | date) -> date:
    """
    Parse a YYYY-MM-DD due date.

    Strict calendar validation: the shape must match and the date must exist
    (2024-02-30 is rejected, not rolled over). Raises ValueError.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    value = (value or "").strip()
    if not DUE_DATE_PATTERN.match(value):
        raise ValueError(f"Not a YYYY-MM-DD date: {value!r}")
    return date.fromisoformat(value)


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp, treating naive values as UTC."""
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_timestamp(value: datetime) -> str:
    """Format a timestamp like JS toISOString: UTC, milliseconds, Z suffix."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


@dataclass
class Task:
    """A to-do item with a due date."""

    id: int
    text: str
    due_date: date | None
    created_at: datetime
    completed: bool = False

    def is_overdue(self, as_of: date | None = None) -> bool:
        """Due strictly before as_of. A task due today is never overdue."""
        if not self.due_date:
            return False
        as_of = as_of or date.today()
        return self.due_date < as_of

    def status(self, as_of: date | None = None) -> TaskStatus:
        if self.completed:
            return TaskStatus.COMPLETED
        if self.is_overdue(as_of):
            return TaskStatus.OVERDUE
        return TaskStatus.ACTIVE

    def to_dict(self) -> dict:
        """Storage representation."""
        return {
            "id": self.id,
            "text": self.text,
            "completed": self.completed,
            "dueDate": self.due_date.isoformat() if self.due_date else None,
            "createdAt": format_timestamp(self.created_at),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Task":
        """Create Task from its storage representation."""
        task_id = data["id"]
        if isinstance(task_id, bool) or not isinstance(task_id, (int, float)):
            raise ValueError(f"Task id must be a number: {task_id!r}")
        if isinstance(task_id, float) and not (math.isfinite(task_id) and task_id.is_integer()):
            raise ValueError(f"Task id must be a whole number: {task_id!r}")
        text = data["text"]
        if not isinstance(text, str) or not text.strip():
            raise ValueError(f"Task text must be a non-empty string: {text!r}")
        completed = data.get("completed", False)
        if not isinstance(completed, bool):
            raise ValueError(f"Task completed flag must be a boolean: {completed!r}")
        due = None
        if data.get("dueDate"):
            due = parse_due_date(data["dueDate"])
        return cls(
            id=int(task_id),
            text=text.strip(),
            due_date=due,
            created_at=parse_timestamp(data["createdAt"]),
            completed=completed,
        )
