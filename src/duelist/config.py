"""Configuration management for duelist."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

DUELIST_HOME = Path(os.environ.get("DUELIST_HOME", Path.home() / "duelist"))
CONFIG_FILE = DUELIST_HOME / "config" / "duelist.conf"
DATA_DIR = DUELIST_HOME / "data"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass
class Config:
    """duelist configuration."""

    data_dir: str = ""
    storage_key: str = "todos"
    default_filter: str = "all"
    default_sort: str = "newest"
    confirm_destructive: bool = True

    def resolved_data_dir(self) -> Path:
        """Configured data directory, falling back to DUELIST_HOME/data."""
        if self.data_dir:
            return Path(self.data_dir).expanduser()
        return DATA_DIR


def _parse_bool(key: str, value: str, default: bool) -> bool:
    lowered = value.lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    logger.warning(f"Invalid boolean for {key.upper()}: {value!r}, using {default}")
    return default


def _unquote(value: str) -> str:
    # Handle quoted values with inline comments: "value" # comment
    if value.startswith('"') or value.startswith("'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        if end_quote != -1:
            return value[1:end_quote]
        return value[1:]
    # Unquoted: strip inline comments
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config(path: Path | None = None) -> Config:
    """Load configuration from duelist.conf file."""
    config = Config()
    path = path or CONFIG_FILE

    if not path.exists():
        return config

    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "data_dir":
                config.data_dir = value
            case "storage_key":
                if value:
                    config.storage_key = value
            case "default_filter":
                config.default_filter = value
            case "default_sort":
                config.default_sort = value
            case "confirm_destructive":
                config.confirm_destructive = _parse_bool(key, value, config.confirm_destructive)
            case _:
                logger.debug(f"Ignoring unknown config key {key.upper()}")

    return config
