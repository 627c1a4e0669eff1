"""Tests for the settings load sources."""

import time

import pytest

from config_store.sources import (
    DEFAULT_LOAD_DELAY_SECS,
    SEED_SETTINGS,
    simulated_source,
    static_source,
)


class TestSeedSettings:
    def test_seed_has_four_fixed_entries(self):
        assert dict(SEED_SETTINGS) == {
            "DatabaseConnection": "Server=localhost;Database=MyApp;",
            "ApiKey": "abc123xyz789",
            "CacheServer": "redis://localhost:6379",
            "LogLevel": "Information",
        }

    def test_seed_is_read_only(self):
        with pytest.raises(TypeError):
            SEED_SETTINGS["LogLevel"] = "Debug"


class TestSimulatedSource:
    """Test suite for simulated_source()."""

    def test_default_delay_matches_cold_start_cost(self):
        """Test that the default stall is 200 ms."""
        assert DEFAULT_LOAD_DELAY_SECS == pytest.approx(0.2)

    def test_returns_fresh_copy_each_call(self):
        """Test that callers cannot corrupt later loads."""
        source = simulated_source(0)
        first = source()
        first["LogLevel"] = "Debug"

        assert source()["LogLevel"] == "Information"

    def test_stalls_for_delay(self):
        """Test that the source blocks for roughly its delay."""
        source = simulated_source(0.05)
        start = time.monotonic()
        source()

        assert time.monotonic() - start >= 0.04

    def test_negative_delay_rejected(self):
        with pytest.raises(ValueError):
            simulated_source(-1)


class TestStaticSource:
    def test_returns_given_settings(self):
        source = static_source({"A": "1"})
        assert source() == {"A": "1"}

    def test_detached_from_input(self):
        """Test that later edits to the input mapping are not visible."""
        settings = {"A": "1"}
        source = static_source(settings)
        settings["A"] = "2"

        assert source() == {"A": "1"}

    def test_defaults_to_seed(self):
        assert static_source()() == dict(SEED_SETTINGS)
