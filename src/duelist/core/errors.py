"""Errors raised by the task list engine."""


class TaskError(Exception):
    """Base class for task list errors."""

    pass


class ValidationError(TaskError):
    """Raised when user input is empty or malformed."""

    pass


class NotFoundError(TaskError):
    """Raised when an operation references a task id that does not exist."""

    def __init__(self, task_id: int):
        super().__init__(f"Task {task_id} not found")
        self.task_id = task_id
