"""Shared helpers for calrotate tests.

Instants are built from timezone-aware UTC datetimes and the calendar
functions are called with tz="UTC" unless a test is about zones.
"""

import time
from datetime import datetime, timezone

import pytest


def utc(*fields: int) -> int:
    """Instant for a UTC wall-clock time, e.g. utc(2025, 1, 31, 9)."""
    return int(datetime(*fields, tzinfo=timezone.utc).timestamp())


@pytest.fixture
def host_tz(monkeypatch):
    """Pin the host's local time zone for tests that use tz=None."""

    def pin(name: str) -> None:
        monkeypatch.setenv("TZ", name)
        time.tzset()

    yield pin
    monkeypatch.undo()
    time.tzset()
