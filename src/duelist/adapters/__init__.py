"""Adapters - I/O implementations of ports."""

from .json_store import JsonFileTaskStore

__all__ = [
    "JsonFileTaskStore",
]
