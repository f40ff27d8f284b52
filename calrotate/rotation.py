"""Rotation deadlines: alignment, next rotation instant, and the due check.

Sub-day cadences (and daily/weekly) step by a fixed number of seconds.
Monthly and yearly cadences step in calendar arithmetic with end-of-month
and leap-day clamping, so a rotation anchored on the 31st still fires in
February.
"""

from collections.abc import Callable, Iterator
from dataclasses import replace

from calrotate.boundaries import (
    add_months,
    add_years,
    start_of_day,
    start_of_month,
    start_of_week,
    start_of_year,
)
from calrotate.bridge import from_record, to_record
from calrotate.interval import (
    Alignment,
    AlignmentName,
    Interval,
    IntervalName,
    as_alignment,
    as_interval,
)
from calrotate.util import DAY, HOUR, MINUTE, WEEK, Instant

_FIXED_STEPS: dict[Interval, int] = {
    Interval.MINUTELY: MINUTE,
    Interval.HOURLY: HOUR,
    Interval.DAILY: DAY,
    Interval.WEEKLY: WEEK,
}

_CALENDAR_STEPS: dict[Interval, Callable[[Instant, str | None], Instant]] = {
    Interval.MONTHLY: lambda t, tz: add_months(t, 1, tz),
    Interval.YEARLY: lambda t, tz: add_years(t, 1, tz),
}

_FLOORS: dict[Alignment, Callable[[Instant, str | None], Instant]] = {
    Alignment.DAY: start_of_day,
    Alignment.WEEK: start_of_week,
    Alignment.MONTH: start_of_month,
    Alignment.YEAR: start_of_year,
}


def align(
    t: Instant,
    alignment: Alignment | AlignmentName,
    tz: str | None = None,
) -> Instant:
    """Floor ``t`` to the calendar boundary named by ``alignment``.

    ``Alignment.NONE`` returns ``t`` unchanged. Minute and hour alignment
    also go through local calendar fields, like the coarser ones.
    """
    alignment = as_alignment(alignment)
    if alignment is Alignment.NONE:
        return t
    if alignment is Alignment.MINUTE:
        return from_record(replace(to_record(t, tz), second=0), tz)
    if alignment is Alignment.HOUR:
        return from_record(replace(to_record(t, tz), minute=0, second=0), tz)
    return _FLOORS[alignment](t, tz)


def next_rotation(
    interval: Interval | IntervalName,
    base: Instant,
    alignment: Alignment | AlignmentName = Alignment.NONE,
    tz: str | None = None,
) -> Instant:
    """Return the first rotation deadline after ``base``.

    ``base`` is aligned first, then advanced by one ``interval`` step. When
    the alignment is coarser than the interval (hourly rotation aligned to
    the day, say), one step from the floor may not reach past ``base``;
    stepping continues on the same grid until it does.

    Example:
        >>> at = at_tz("UTC")
        >>> base = at(2025, 1, 15, 13, 42, 7)
        >>> next_rotation("daily", base, "day", tz="UTC") == at(2025, 1, 16)
        True
    """
    interval = as_interval(interval)
    aligned = align(base, alignment, tz)

    if interval in _FIXED_STEPS:
        step = _FIXED_STEPS[interval]
        deadline = aligned + step
        if deadline <= base:
            deadline += ((base - deadline) // step + 1) * step
        return deadline

    advance = _CALENDAR_STEPS[interval]
    deadline = advance(aligned, tz)
    if deadline <= aligned:
        # The step fell back to the epoch: beyond the representable range
        return deadline
    while deadline <= base:
        following = advance(deadline, tz)
        if following <= deadline:
            # Beyond the platform's representable range
            break
        deadline = following
    return deadline


def is_rotation_time(
    interval: Interval | IntervalName,
    last_rotation: Instant,
    now: Instant,
    alignment: Alignment | AlignmentName = Alignment.NONE,
    tz: str | None = None,
) -> bool:
    """True once ``now`` has reached the deadline following ``last_rotation``."""
    return now >= next_rotation(interval, last_rotation, alignment, tz)


def rotation_times(
    interval: Interval | IntervalName,
    start: Instant,
    alignment: Alignment | AlignmentName = Alignment.NONE,
    tz: str | None = None,
) -> Iterator[Instant]:
    """Yield successive rotation deadlines after ``start``, without end.

    Each deadline is computed from the previous one, which is what a driver
    that rotates exactly on time observes. Without alignment, a monthly
    series anchored on the 31st drifts to the 28th after February; align
    to the month to avoid that.

    Example:
        >>> from itertools import islice
        >>> at = at_tz("UTC")
        >>> start = at(2025, 6, 1, 8, 15)
        >>> deadlines = islice(rotation_times("hourly", start, "hour", tz="UTC"), 3)
        >>> list(deadlines) == [at(2025, 6, 1, h) for h in (9, 10, 11)]
        True
    """
    interval = as_interval(interval)
    alignment = as_alignment(alignment)
    current = start
    while True:
        following = next_rotation(interval, current, alignment, tz)
        if following <= current:
            return
        yield following
        current = following
