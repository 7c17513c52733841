"""Persistence adapters."""

from settings_store.adapters.file_storage import JsonFileAdapter
from settings_store.adapters.memory import InMemoryAdapter

__all__ = [
    "InMemoryAdapter",
    "JsonFileAdapter",
]
