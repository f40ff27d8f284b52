"""Calendar boundary floors and clamped month/year addition.

All functions take and return instants and read the calendar in local time
(``tz=None``) or in the named zone.
"""

from dataclasses import replace

from calrotate.bridge import from_record, to_record
from calrotate.record import CalendarRecord, days_in_month, is_leap
from calrotate.util import DAY, Instant


def _midnight(record: CalendarRecord) -> CalendarRecord:
    return replace(record, hour=0, minute=0, second=0)


def start_of_day(t: Instant, tz: str | None = None) -> Instant:
    """Floor ``t`` to 00:00:00 of its local day."""
    return from_record(_midnight(to_record(t, tz)), tz)


def start_of_week(t: Instant, tz: str | None = None) -> Instant:
    """Floor ``t`` to 00:00:00 of the Monday starting its week.

    Whole days are subtracted from the start of the local day, so the
    result can be off by the DST shift when the week spans a transition.
    """
    record = _midnight(to_record(t, tz))
    days_to_monday = record.weekday - 1
    return from_record(record, tz) - days_to_monday * DAY


def start_of_month(t: Instant, tz: str | None = None) -> Instant:
    """Floor ``t`` to 00:00:00 on the first of its month."""
    return from_record(replace(_midnight(to_record(t, tz)), day=1), tz)


def start_of_year(t: Instant, tz: str | None = None) -> Instant:
    """Floor ``t`` to 00:00:00 on January 1st of its year."""
    return from_record(replace(_midnight(to_record(t, tz)), month=1, day=1), tz)


def add_months(t: Instant, months: int, tz: str | None = None) -> Instant:
    """Move ``t`` by whole calendar months, keeping the time of day.

    A day of month that does not exist in the target month is clamped to
    its last day, so Jan 31 + 1 month is Feb 28 (Feb 29 in leap years).
    ``months`` may be negative.
    """
    record = to_record(t, tz)
    year_carry, month_index = divmod(record.month - 1 + months, 12)
    year = record.year + year_carry
    month = month_index + 1
    day = min(record.day, days_in_month(year, month))
    return from_record(replace(record, year=year, month=month, day=day), tz)


def add_years(t: Instant, years: int, tz: str | None = None) -> Instant:
    """Move ``t`` by whole calendar years, keeping the time of day.

    Feb 29 lands on Feb 28 when the target year is not a leap year.
    """
    record = to_record(t, tz)
    year = record.year + years
    day = record.day
    if record.month == 2 and day == 29 and not is_leap(year):
        day = 28
    return from_record(replace(record, year=year, day=day), tz)
