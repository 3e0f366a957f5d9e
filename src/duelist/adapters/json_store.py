"""File-based task storage adapter."""

import json
import logging
import os
import tempfile
from pathlib import Path

from duelist.core.tasks import Task

logger = logging.getLogger(__name__)

DEFAULT_KEY = "todos"


class JsonFileTaskStore:
    """
    JSON key-value task storage.

    Implements TaskStore protocol. Works like browser local storage: one
    serialized value per key, each key a JSON file in data_dir.
    """

    def __init__(self, data_dir: Path | str, key: str = DEFAULT_KEY):
        self.data_dir = Path(data_dir).expanduser()
        self.key = key

    @property
    def path(self) -> Path:
        """The file holding the value for this store's key."""
        return self.data_dir / f"{self.key}.json"

    def load(self) -> list[Task]:
        """Read the saved collection. Missing or unreadable data loads as []."""
        path = self.path
        if not path.exists():
            return []

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.warning(f"Could not read tasks from {path}: {e}")
            return []

        if not isinstance(data, list):
            logger.warning(f"Ignoring {path}: expected a JSON array, got {type(data).__name__}")
            return []

        tasks = []
        for entry in data:
            try:
                tasks.append(Task.from_dict(entry))
            except (KeyError, TypeError, ValueError, AttributeError) as e:
                logger.warning(f"Skipping unreadable task record {entry!r}: {e}")
        logger.debug(f"Loaded {len(tasks)} tasks from {path}")
        return tasks

    def save(self, tasks: list[Task]) -> None:
        """Overwrite the stored collection. Raises OSError on failure."""
        self.data_dir.mkdir(parents=True, exist_ok=True)
        payload = json.dumps([t.to_dict() for t in tasks], indent=2, ensure_ascii=False)

        # Write to a sibling temp file, then swap it in
        fd, tmp_name = tempfile.mkstemp(dir=self.data_dir, prefix=f".{self.key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(tmp_name, self.path)
        except OSError:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug(f"Saved {len(tasks)} tasks to {self.path}")
