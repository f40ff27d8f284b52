"""Tests for time formatting and duration/interval prose."""

import pytest
from conftest import utc

from calrotate import Interval, describe_duration, describe_interval, format_time


def test_format_time_default_pattern():
    assert format_time(utc(2025, 1, 5, 7, 3, 9), tz="UTC") == "2025-01-05 07:03:09"


def test_format_time_custom_pattern_and_zone():
    t = utc(2025, 1, 5, 23, 30)
    assert format_time(t, "%Y%m%d-%H%M", tz="UTC") == "20250105-2330"
    assert format_time(t, "%Y-%m-%d %H:%M", tz="Asia/Tokyo") == "2025-01-06 08:30"


def test_format_time_invalid_instant():
    assert format_time(10**13, tz="UTC") == "Invalid Time"


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (0, "0 seconds"),
        (45, "45 seconds"),
        (60, "1 minutes"),
        (125, "2 minutes, 5 seconds"),
        (3599, "59 minutes, 59 seconds"),
        (3600, "1 hours"),
        (3601, "1 hours"),
        (3660, "1 hours, 1 minutes"),
        (86399, "23 hours, 59 minutes"),
        (86400, "1 days"),
        (86400 + 6 * 3600 + 59, "1 days, 6 hours"),
        (30 * 86400, "30 days"),
    ],
)
def test_describe_duration(seconds, expected):
    start = utc(2025, 1, 1)
    assert describe_duration(start, start + seconds) == expected


def test_describe_duration_is_order_independent():
    """Test an end before the start uses the absolute difference."""
    start = utc(2025, 1, 1)
    assert describe_duration(start + 125, start) == "2 minutes, 5 seconds"


@pytest.mark.parametrize(
    "interval, expected",
    [
        (Interval.MINUTELY, "Every minute"),
        (Interval.HOURLY, "Every hour"),
        (Interval.DAILY, "Every day"),
        (Interval.WEEKLY, "Every week"),
        (Interval.MONTHLY, "Every month"),
        (Interval.YEARLY, "Every year"),
        ("monthly", "Every month"),
    ],
)
def test_describe_interval(interval, expected):
    assert describe_interval(interval) == expected


@pytest.mark.parametrize("value", ["fortnightly", 42, None])
def test_describe_interval_unknown(value):
    assert describe_interval(value) == "Unknown interval"
