"""Lazily loaded, thread-safe settings cache."""

from __future__ import annotations

import threading
import time
from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType

from config_store.errors import ConfigLoadError
from config_store.sources import SettingsSource, simulated_source
from utils.log_utils import deep_log, is_deep_logging, log


class StoreState(str, Enum):
    UNLOADED = "unloaded"
    LOADING = "loading"
    LOADED = "loaded"


class ConfigurationStore:
    """Settings cache populated once on first access, with explicit reload.

    A single lock guards the loaded flag and the live mapping. Readers take a
    lock-free fast path once the store is loaded; the first callers race on the
    lock and the losers see the re-checked flag, so the source runs once.

    Published mappings are never mutated. A load builds a fresh dict and swaps
    it in, and ``reload`` swaps in an empty one first, so any reader sees either
    nothing or a complete load result.
    """

    def __init__(self, source: SettingsSource | None = None) -> None:
        """Create an unloaded store.

        Args:
            source: Zero-argument callable returning the settings mapping
                (defaults to the simulated expensive source)
        """
        self._source = source or simulated_source()
        self._lock = threading.Lock()
        self._settings: dict[str, str] = {}
        self._loaded = False
        self._state = StoreState.UNLOADED
        self._load_count = 0

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    @property
    def state(self) -> StoreState:
        return self._state

    @property
    def load_count(self) -> int:
        """Number of times the source has been loaded successfully."""
        return self._load_count

    def get_setting(self, key: str) -> str | None:
        """Return the value stored under ``key``, or None when it is absent."""
        self.ensure_loaded()
        return self._settings.get(key)

    def get_all_settings(self) -> Mapping[str, str]:
        """Return a read-only view of every setting.

        The view wraps the mapping that was live when it was taken; a later
        reload replaces that mapping instead of changing it.
        """
        self.ensure_loaded()
        return MappingProxyType(self._settings)

    def reload(self) -> None:
        """Discard all settings and load them again before returning."""
        with self._lock:
            self._loaded = False
            self._state = StoreState.UNLOADED
            self._settings = {}
            log("CONFIG", "Reload requested; settings discarded")
            self._load_locked()

    def ensure_loaded(self) -> None:
        if self._loaded:
            return
        with self._lock:
            if self._loaded:
                return
            self._load_locked()

    def _load_locked(self) -> None:
        self._state = StoreState.LOADING
        start = time.monotonic()
        if is_deep_logging():
            deep_log(
                f"[CONFIG] Loading settings on thread={threading.current_thread().name}"
            )
        try:
            settings = _validated(self._source())
        except Exception as exc:
            self._state = StoreState.UNLOADED
            log("CONFIG", f"Settings load failed: {exc}", "ERROR")
            if isinstance(exc, ConfigLoadError):
                raise
            raise ConfigLoadError(f"Failed to load settings: {exc}") from exc

        self._settings = settings
        self._load_count += 1
        self._loaded = True
        self._state = StoreState.LOADED
        elapsed_ms = int((time.monotonic() - start) * 1000)
        log(
            "CONFIG",
            f"Loaded {len(settings)} settings in {elapsed_ms} ms (load #{self._load_count})",
        )


def _validated(raw: object) -> dict[str, str]:
    if not isinstance(raw, Mapping):
        raise ConfigLoadError(
            f"Settings source returned {type(raw).__name__}, expected a mapping"
        )
    settings = dict(raw)
    bad_keys = [
        key
        for key, value in settings.items()
        if not isinstance(key, str) or not isinstance(value, str)
    ]
    if bad_keys:
        raise ConfigLoadError(f"Non-string settings entries: {bad_keys!r}")
    return settings
