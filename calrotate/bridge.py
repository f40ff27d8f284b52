"""Conversion between instants and broken-down local time.

Local time is either the host's (``tz=None``) or a named IANA zone. The
conversions never raise for out-of-range instants: they fall back to the
Unix epoch and log a warning, so the calendar operations built on top stay
total.
"""

import logging
from collections.abc import Callable
from datetime import date, datetime, time
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dateutil.parser import isoparse

from calrotate.record import EPOCH_RECORD, CalendarRecord, normalize
from calrotate.util import Instant

logger = logging.getLogger(__name__)


@lru_cache(maxsize=64)
def _lookup_zone(tz: str) -> ZoneInfo:
    try:
        return ZoneInfo(tz)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(
            f"Unknown timezone: {tz!r}\n"
            f"Use an IANA name (e.g., 'UTC', 'Europe/Berlin', 'US/Pacific'),\n"
            f"or tz=None for the host's local time."
        ) from e


def resolve_zone(tz: str | None) -> ZoneInfo | None:
    """Return the ``ZoneInfo`` for ``tz``, or None for host local time."""
    if tz is None:
        return None
    return _lookup_zone(tz)


def to_record(t: Instant, tz: str | None = None) -> CalendarRecord:
    """Break an instant down into local calendar fields.

    Returns the 1970-01-01 00:00:00 record if the platform cannot represent
    the instant.
    """
    zone = resolve_zone(tz)
    try:
        dt = datetime.fromtimestamp(t, tz=zone)
    except (OverflowError, OSError, ValueError):
        logger.warning("Cannot convert instant %r to local time, using epoch", t)
        return EPOCH_RECORD
    return CalendarRecord(
        year=dt.year,
        month=dt.month,
        day=dt.day,
        hour=dt.hour,
        minute=dt.minute,
        second=dt.second,
    )


def from_record(record: CalendarRecord, tz: str | None = None) -> Instant:
    """Render local calendar fields back to an instant.

    The record is normalized first, so out-of-range fields are fine. Local
    times skipped or repeated by a DST transition resolve the way
    ``datetime.timestamp`` resolves them. Returns 0 (the epoch) if the
    result cannot be represented.
    """
    zone = resolve_zone(tz)
    r = normalize(record)
    try:
        dt = datetime(
            r.year, r.month, r.day, r.hour, r.minute, r.second, tzinfo=zone
        )
        return int(dt.timestamp())
    except (OverflowError, OSError, ValueError):
        logger.warning("Cannot render %s as an instant, using epoch", r)
        return 0


def at_tz(tz: str | None = None) -> Callable[..., Instant]:
    """Return a factory that builds instants in the given zone.

    The factory accepts calendar components, an ISO-8601 string, a ``date``
    or a timezone-aware ``datetime``. Naive inputs are read as wall-clock
    time in ``tz`` (host local time when ``tz`` is None).

    Example:
        >>> at = at_tz("UTC")
        >>> at(2025, 1, 31, 9)
        1738314000
        >>> at("2025-01-31 09:00")
        1738314000
    """
    zone = resolve_zone(tz)

    def at(value: int | str | date | datetime, *components: int) -> Instant:
        if isinstance(value, datetime):
            if value.tzinfo is None:
                raise TypeError(
                    f"datetime must be timezone-aware, got naive {value!r}\n"
                    f"Hint: pass the wall-clock fields instead and let the "
                    f"factory apply its zone:\n"
                    f"  at({value.year}, {value.month}, {value.day}, "
                    f"{value.hour}, {value.minute})"
                )
            return int(value.timestamp())
        if isinstance(value, date):
            dt = datetime.combine(value, time.min)
        elif isinstance(value, str):
            dt = isoparse(value)
        elif isinstance(value, int):
            dt = datetime(value, *components)
        else:
            raise TypeError(
                f"Expected int components, str, date, or datetime.\n"
                f"Got {type(value).__name__!r}: {value!r}\n"
                f"Examples:\n"
                f"  at(2025, 1, 31, 9, 30)\n"
                f"  at('2025-01-31T09:30')\n"
                f"  at(date(2025, 1, 31))"
            )
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=zone)
        return int(dt.timestamp())

    return at
