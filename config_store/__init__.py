"""Lazily loaded, thread-safe configuration store."""

from config_store.errors import ConfigLoadError
from config_store.runtime import get_store, reset_store, set_store
from config_store.sources import (
    DEFAULT_LOAD_DELAY_SECS,
    SEED_SETTINGS,
    SettingsSource,
    simulated_source,
    static_source,
)
from config_store.store import ConfigurationStore, StoreState

__all__ = [
    "ConfigLoadError",
    "ConfigurationStore",
    "DEFAULT_LOAD_DELAY_SECS",
    "SEED_SETTINGS",
    "SettingsSource",
    "StoreState",
    "get_store",
    "reset_store",
    "set_store",
    "simulated_source",
    "static_source",
]
