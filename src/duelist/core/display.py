"""Plain-text formatting for task lists - no I/O."""

from datetime import date

from .tasks import Task, TaskStatus

EMPTY_STATE = "No tasks yet. Add one with: duelist add \"Task\" --due YYYY-MM-DD"


def format_due_date(due: date | None) -> str:
    """Short human date, e.g. "Jan 5, 2025"."""
    if not due:
        return "no date"
    return f"{due.strftime('%b')} {due.day}, {due.year}"


def format_task_line(task: Task, as_of: date | None = None) -> str:
    """Format a task as a single list line."""
    status = task.status(as_of)
    checkbox = "[x]" if task.completed else "[ ]"
    due = f"Due: {format_due_date(task.due_date)}"
    if status == TaskStatus.OVERDUE:
        due += " ⚠️ Overdue"
    elif status == TaskStatus.COMPLETED:
        due += " ✓ Completed"
    return f"{checkbox} {task.id}  {task.text}  ({due})"


def format_summary(counts: dict[str, int]) -> str:
    total = counts.get("total", 0)
    noun = "task" if total == 1 else "tasks"
    return (
        f"{total} {noun}: "
        f"{counts.get(TaskStatus.ACTIVE.value, 0)} active, "
        f"{counts.get(TaskStatus.OVERDUE.value, 0)} overdue, "
        f"{counts.get(TaskStatus.COMPLETED.value, 0)} completed"
    )
