"""Typed accessors for known settings categories."""

from settings_store.models.comms_settings import CommsPath, CommsSettings

__all__ = [
    "CommsPath",
    "CommsSettings",
]
