"""Core types: documents, outcomes, errors and the persistence port."""

from settings_store.core.dto import (
    MISSING,
    ConfigurationDocument,
    LoadResult,
    Outcome,
    OutcomeStatus,
    SettingValue,
    ValueKind,
    WriteResult,
    classify_value,
)
from settings_store.core.errors import (
    InvalidPathError,
    MalformedStoredDataError,
    SettingsStoreError,
    StorageUnavailableError,
)
from settings_store.core.interfaces import PersistenceAdapter

__all__ = [
    "MISSING",
    "ConfigurationDocument",
    "LoadResult",
    "Outcome",
    "OutcomeStatus",
    "SettingValue",
    "ValueKind",
    "WriteResult",
    "classify_value",
    "InvalidPathError",
    "MalformedStoredDataError",
    "SettingsStoreError",
    "StorageUnavailableError",
    "PersistenceAdapter",
]
