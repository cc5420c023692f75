"""Pytest configuration and shared fixtures."""

import os
from collections.abc import Callable, Generator
from datetime import UTC, datetime, tzinfo
from pathlib import Path
from zoneinfo import ZoneInfo

import pytest

import gtime.config.settings as settings_module


class FixedClock:
    """Clock frozen at one instant in a given local timezone."""

    def __init__(self, now: datetime, local_tz: tzinfo) -> None:
        self._now = now
        self._local_tz = local_tz

    def now(self) -> datetime:
        return self._now

    def local_timezone(self) -> tzinfo:
        return self._local_tz


@pytest.fixture(autouse=True)
def reset_settings() -> Generator[None, None, None]:
    """Drop the cached global settings around each test."""
    settings_module._settings = None
    yield
    settings_module._settings = None


@pytest.fixture
def clean_env() -> Generator[None, None, None]:
    """Clean environment variables before and after test."""
    # Save original environment
    original_env = os.environ.copy()

    for key in list(os.environ.keys()):
        if key.startswith("GTIME_"):
            del os.environ[key]

    yield

    # Restore original environment
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def missing_config_file(tmp_path: Path, clean_env: None) -> Path:
    """Point GTIME_CONFIG_FILE at a file that does not exist."""
    path = tmp_path / "gtime" / "config.toml"
    os.environ["GTIME_CONFIG_FILE"] = str(path)
    return path


@pytest.fixture
def make_clock() -> Callable[[datetime, str], FixedClock]:
    """Factory for clocks frozen at a UTC instant in a named local timezone."""

    def _make(now: datetime, local_tz: str) -> FixedClock:
        return FixedClock(now.astimezone(UTC), ZoneInfo(local_tz))

    return _make


@pytest.fixture
def new_york_clock(make_clock: Callable[[datetime, str], FixedClock]) -> FixedClock:
    """Clock at 2024-01-15 17:00 UTC (12:00 EST) in America/New_York."""
    return make_clock(datetime(2024, 1, 15, 17, 0, 0, tzinfo=UTC), "America/New_York")
