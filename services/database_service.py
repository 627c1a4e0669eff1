"""Demo consumer that reads its connection string from the configuration store."""

from __future__ import annotations

from config_store.store import ConfigurationStore
from utils.log_utils import tprint


class DatabaseService:
    def __init__(self, store: ConfigurationStore) -> None:
        self._store = store

    def connect(self) -> str | None:
        """Announce the configured connection string and return it."""
        conn = self._store.get_setting("DatabaseConnection")
        tprint(f"[DatabaseService] {conn}")
        return conn
