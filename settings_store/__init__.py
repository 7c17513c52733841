"""Settings Store

Hierarchical user-preference store with dotted-path access and default-schema reconciliation.
"""

__version__ = "0.1.0"

# Configuration
from settings_store.config import DEFAULT_SETTINGS, StoreConfig, load_store_config

# Data models
from settings_store.core import ConfigurationDocument, Outcome, OutcomeStatus, WriteResult

# Persistence adapters
from settings_store.adapters import InMemoryAdapter, JsonFileAdapter

# Store
from settings_store.models import CommsPath, CommsSettings
from settings_store.store import SettingsManager

__all__ = [
    "DEFAULT_SETTINGS",
    "StoreConfig",
    "load_store_config",
    "ConfigurationDocument",
    "Outcome",
    "OutcomeStatus",
    "WriteResult",
    "InMemoryAdapter",
    "JsonFileAdapter",
    "CommsPath",
    "CommsSettings",
    "SettingsManager",
]
