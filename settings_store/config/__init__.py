"""Store configuration and the default settings schema."""

from settings_store.config.defaults import DEFAULT_SETTINGS, SETTINGS_KEY
from settings_store.config.loader import load_config_file, load_store_config
from settings_store.config.schema import StoreConfig

__all__ = [
    "DEFAULT_SETTINGS",
    "SETTINGS_KEY",
    "StoreConfig",
    "load_config_file",
    "load_store_config",
]
