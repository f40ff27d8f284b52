"""Human-readable renderings of instants, durations and intervals."""

import logging
from datetime import datetime
from typing import Any

from calrotate.bridge import resolve_zone
from calrotate.interval import Interval, as_interval
from calrotate.util import DAY, HOUR, MINUTE, Instant

logger = logging.getLogger(__name__)

INVALID_TIME = "Invalid Time"

_INTERVAL_PHRASES = {
    Interval.MINUTELY: "Every minute",
    Interval.HOURLY: "Every hour",
    Interval.DAILY: "Every day",
    Interval.WEEKLY: "Every week",
    Interval.MONTHLY: "Every month",
    Interval.YEARLY: "Every year",
}


def format_time(
    t: Instant, pattern: str = "%Y-%m-%d %H:%M:%S", tz: str | None = None
) -> str:
    """Render ``t`` in local time with a ``strftime`` pattern.

    Returns ``"Invalid Time"`` when the instant cannot be converted.
    """
    zone = resolve_zone(tz)
    try:
        return datetime.fromtimestamp(t, tz=zone).strftime(pattern)
    except (OverflowError, OSError, ValueError):
        logger.debug("Cannot format instant %r", t)
        return INVALID_TIME


def describe_duration(start: Instant, end: Instant) -> str:
    """Compact description of the time between two instants, in either order.

    Shows the largest unit and, when non-zero, the next smaller one:
    ``"45 seconds"``, ``"2 minutes, 5 seconds"``, ``"3 hours"``,
    ``"1 days, 6 hours"``.
    """
    seconds = abs(end - start)

    if seconds < MINUTE:
        return f"{seconds} seconds"
    if seconds < HOUR:
        major, minor = divmod(seconds, MINUTE)
        units = ("minutes", "seconds")
    elif seconds < DAY:
        major, minor = seconds // HOUR, seconds % HOUR // MINUTE
        units = ("hours", "minutes")
    else:
        major, minor = seconds // DAY, seconds % DAY // HOUR
        units = ("days", "hours")

    text = f"{major} {units[0]}"
    if minor > 0:
        text += f", {minor} {units[1]}"
    return text


def describe_interval(interval: Any) -> str:
    """Fixed English phrase for an interval, e.g. ``"Every week"``."""
    try:
        return _INTERVAL_PHRASES[as_interval(interval)]
    except ValueError:
        return "Unknown interval"
