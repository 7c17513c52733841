"""Utility modules for the settings store."""

from settings_store.utils.logging_utils import setup_logging

__all__ = [
    "setup_logging",
]
