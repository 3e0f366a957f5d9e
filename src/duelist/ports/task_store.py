"""Task storage interface."""

from typing import Protocol

from duelist.core.tasks import Task


class TaskStore(Protocol):
    """Interface for persisting the whole task collection under one key."""

    def load(self) -> list[Task]:
        """Load saved tasks. Returns [] if nothing usable is stored; never raises."""
        ...

    def save(self, tasks: list[Task]) -> None:
        """Serialize and overwrite the stored collection."""
        ...
