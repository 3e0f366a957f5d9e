"""Functional core - pure business logic with no I/O."""

from .tasks import Task, TaskStatus, parse_due_date
from .errors import TaskError, ValidationError, NotFoundError
from .view import ViewState, StatusFilter, SortKey, search_tasks, filter_by_status, sort_tasks
from .engine import TaskListEngine
from .display import EMPTY_STATE, format_due_date, format_task_line, format_summary

__all__ = [
    # Tasks
    "Task",
    "TaskStatus",
    "parse_due_date",
    # Errors
    "TaskError",
    "ValidationError",
    "NotFoundError",
    # View
    "ViewState",
    "StatusFilter",
    "SortKey",
    "search_tasks",
    "filter_by_status",
    "sort_tasks",
    # Engine
    "TaskListEngine",
    # Display
    "EMPTY_STATE",
    "format_due_date",
    "format_task_line",
    "format_summary",
]
