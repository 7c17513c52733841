"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from datetime import datetime, timezone
import json
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]

if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pytest

from settings_store.adapters import InMemoryAdapter
from settings_store.store import SettingsManager

FIXED_TIME = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def fixed_clock():
    """Return a clock that always reports FIXED_TIME."""

    return lambda: FIXED_TIME


@pytest.fixture
def adapter() -> InMemoryAdapter:
    """Return an empty in-memory persistence adapter."""

    return InMemoryAdapter()


@pytest.fixture
def manager(adapter: InMemoryAdapter, fixed_clock) -> SettingsManager:
    """Return a settings manager backed by the in-memory adapter."""

    return SettingsManager(adapter, clock=fixed_clock)


@pytest.fixture
def store_document(adapter: InMemoryAdapter):
    """Return a helper that writes a raw document into the adapter."""

    def _store(settings, last_updated: str | None = "2024-01-01T00:00:00+00:00", **extra) -> None:
        document = {"lastUpdated": last_updated, "settings": settings, **extra}
        adapter.storage[adapter.key] = json.dumps(document)

    return _store


@pytest.fixture
def stored_json(adapter: InMemoryAdapter):
    """Return a helper that parses the document currently held by the adapter."""

    def _read() -> dict:
        return json.loads(adapter.storage[adapter.key])

    return _read
