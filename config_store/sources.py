"""Load sources for the configuration store."""

from __future__ import annotations

import time
from collections.abc import Callable, Mapping
from types import MappingProxyType

SettingsSource = Callable[[], Mapping[str, str]]

DEFAULT_LOAD_DELAY_SECS = 0.2

SEED_SETTINGS: Mapping[str, str] = MappingProxyType(
    {
        "DatabaseConnection": "Server=localhost;Database=MyApp;",
        "ApiKey": "abc123xyz789",
        "CacheServer": "redis://localhost:6379",
        "LogLevel": "Information",
    }
)


def simulated_source(delay_secs: float = DEFAULT_LOAD_DELAY_SECS) -> SettingsSource:
    """Return a source that stalls for ``delay_secs`` and then yields the seed data.

    The stall stands in for reading a file, the environment or a database on
    cold start.
    """
    if delay_secs < 0:
        raise ValueError(f"delay_secs must be >= 0 (got {delay_secs})")

    def _load() -> dict[str, str]:
        if delay_secs:
            time.sleep(delay_secs)
        return dict(SEED_SETTINGS)

    return _load


def static_source(settings: Mapping[str, str] = SEED_SETTINGS) -> SettingsSource:
    """Return an instant source yielding a copy of ``settings`` on every call."""
    frozen = dict(settings)

    def _load() -> dict[str, str]:
        return dict(frozen)

    return _load
