"""Session layer between the CLI and the engine.

Each command: open_engine() loads the saved collection, the caller mutates
it, commit() saves it back, and the view is re-projected for display.
"""

import logging

from .adapters.json_store import JsonFileTaskStore
from .config import Config
from .core.engine import TaskListEngine
from .core.view import SortKey, StatusFilter, ViewState
from .ports.task_store import TaskStore

logger = logging.getLogger(__name__)


def get_store(config: Config) -> JsonFileTaskStore:
    """Resolve the task store from config."""
    return JsonFileTaskStore(config.resolved_data_dir(), key=config.storage_key)


def open_engine(config: Config, store: TaskStore | None = None) -> tuple[TaskListEngine, TaskStore]:
    """Load the saved collection into a fresh engine."""
    store = store or get_store(config)
    engine = TaskListEngine()
    engine.load(store.load())
    return engine, store


def commit(engine: TaskListEngine, store: TaskStore) -> bool:
    """
    Save the engine's collection.

    Returns False if the write failed. The in-memory collection keeps its
    changes either way; only durability is lost.
    """
    try:
        store.save(engine.tasks)
    except OSError as e:
        logger.error(f"Failed to save tasks: {e}")
        return False
    return True


def default_view(
    config: Config,
    search: str | None = None,
    status: str | None = None,
    sort: str | None = None,
) -> ViewState:
    """Build a view from explicit options, falling back to config defaults."""
    status = status or config.default_filter
    sort = sort or config.default_sort
    try:
        status_filter = StatusFilter(status)
    except ValueError:
        raise ValueError(f"Unknown filter: {status}")
    try:
        sort_key = SortKey(sort)
    except ValueError:
        raise ValueError(f"Unknown sort: {sort}")
    return ViewState(search_text=search or "", status_filter=status_filter, sort_key=sort_key)
