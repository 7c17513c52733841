"""Public settings store API."""

from settings_store.store.settings_manager import SettingsManager

__all__ = [
    "SettingsManager",
]
