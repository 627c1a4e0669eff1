"""Process-wide configuration store instance."""

from __future__ import annotations

import os
import threading

from config_store.sources import DEFAULT_LOAD_DELAY_SECS, simulated_source
from config_store.store import ConfigurationStore

_lock = threading.Lock()
_STORE: ConfigurationStore | None = None


def get_store() -> ConfigurationStore:
    """Return the process-wide store, building it on first call."""
    global _STORE
    store = _STORE
    if store is not None:
        return store
    with _lock:
        if _STORE is None:
            _STORE = ConfigurationStore(simulated_source(_load_delay_secs()))
        return _STORE


def set_store(store: ConfigurationStore) -> ConfigurationStore:
    """Install ``store`` as the process-wide instance (once, at startup)."""
    global _STORE
    with _lock:
        if _STORE is not None and _STORE is not store:
            raise RuntimeError("A process-wide configuration store is already installed")
        _STORE = store
        return store


def reset_store() -> None:
    """Drop the process-wide instance. Intended for tests."""
    global _STORE
    with _lock:
        _STORE = None


def _load_delay_secs() -> float:
    raw = os.getenv("CONFIG_LOAD_DELAY_MS")
    if raw is None or not raw.strip():
        return DEFAULT_LOAD_DELAY_SECS
    try:
        delay_ms = float(raw)
    except ValueError as exc:
        raise ValueError(f"CONFIG_LOAD_DELAY_MS must be a number (got {raw!r})") from exc
    return max(delay_ms, 0.0) / 1000
