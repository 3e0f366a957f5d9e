"""Search, filter and sort - the projection building blocks."""

import unicodedata
from dataclasses import dataclass
from datetime import date
from enum import Enum

from .tasks import Task, TaskStatus


class StatusFilter(str, Enum):
    ALL = "all"
    COMPLETED = "completed"
    ACTIVE = "active"
    OVERDUE = "overdue"


class SortKey(str, Enum):
    NEWEST = "newest"
    OLDEST = "oldest"
    ALPHABETICAL = "alphabetical"
    DUE_DATE = "dueDate"


@dataclass
class ViewState:
    """Transient view parameters; never persisted."""

    search_text: str = ""
    status_filter: StatusFilter = StatusFilter.ALL
    sort_key: SortKey = SortKey.NEWEST


def search_tasks(tasks: list[Task], text: str) -> list[Task]:
    """Case-insensitive substring match on task text."""
    if not text:
        return list(tasks)
    needle = text.casefold()
    return [t for t in tasks if needle in t.text.casefold()]


def filter_by_status(
    tasks: list[Task],
    status_filter: StatusFilter,
    as_of: date | None = None,
) -> list[Task]:
    """
    Filter tasks by status.

    Every task falls into exactly one of completed/active/overdue, so the
    three non-"all" filters partition the collection.
    """
    as_of = as_of or date.today()
    match StatusFilter(status_filter):
        case StatusFilter.COMPLETED:
            return [t for t in tasks if t.status(as_of) == TaskStatus.COMPLETED]
        case StatusFilter.ACTIVE:
            return [t for t in tasks if t.status(as_of) == TaskStatus.ACTIVE]
        case StatusFilter.OVERDUE:
            return [t for t in tasks if t.status(as_of) == TaskStatus.OVERDUE]
        case _:
            return list(tasks)


def _collation_key(text: str) -> tuple[str, str, str]:
    # Primary: letters without accents or case; ties broken by case, lowercase first.
    folded = text.casefold()
    base = "".join(
        c for c in unicodedata.normalize("NFKD", folded) if not unicodedata.combining(c)
    )
    return (base, folded, text.swapcase())


def sort_tasks(tasks: list[Task], sort_key: SortKey) -> list[Task]:
    """
    Sort tasks for display. Stable: ties keep their incoming order.

    Pure function - returns a new list.
    """
    match SortKey(sort_key):
        case SortKey.NEWEST:
            return sorted(tasks, key=lambda t: t.created_at, reverse=True)
        case SortKey.OLDEST:
            return sorted(tasks, key=lambda t: t.created_at)
        case SortKey.ALPHABETICAL:
            return sorted(tasks, key=lambda t: _collation_key(t.text))
        case SortKey.DUE_DATE:
            # Missing due dates sort last
            return sorted(
                tasks,
                key=lambda t: (t.due_date is None, t.due_date or date.min),
            )


def project(
    tasks: list[Task],
    view: ViewState | None = None,
    as_of: date | None = None,
) -> list[Task]:
    """Search, then filter, then sort. Never mutates the input."""
    view = view or ViewState()
    visible = search_tasks(tasks, view.search_text)
    visible = filter_by_status(visible, view.status_filter, as_of)
    return sort_tasks(visible, view.sort_key)
