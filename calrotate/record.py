"""Gregorian calendar fields and their normalization.

A ``CalendarRecord`` is the broken-down form of an instant in some local
time. Arithmetic happens by pushing fields out of range (``month + 13``,
``day - 40``) and letting ``normalize`` carry the excess into the next
larger field.
"""

from dataclasses import dataclass
from datetime import date

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_DAYS_IN_400_YEARS = 146097


def is_leap(year: int) -> bool:
    """Gregorian leap year rule."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(year: int, month: int) -> int:
    """Number of days in ``month`` of ``year``, or 0 if ``month`` is not 1-12."""
    if month < 1 or month > 12:
        return 0
    if month == 2 and is_leap(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


@dataclass(frozen=True, kw_only=True)
class CalendarRecord:
    """Broken-down local time.

    Fields may hold any integer; only a normalized record (see
    ``is_normalized``) denotes a real calendar position.
    """

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0

    @property
    def is_normalized(self) -> bool:
        return (
            1 <= self.month <= 12
            and 1 <= self.day <= days_in_month(self.year, self.month)
            and 0 <= self.hour < 24
            and 0 <= self.minute < 60
            and 0 <= self.second < 60
        )

    @property
    def weekday(self) -> int:
        """ISO weekday of the normalized record: 1 = Monday ... 7 = Sunday."""
        r = self if self.is_normalized else normalize(self)
        return date(r.year, r.month, r.day).isoweekday()

    def __str__(self) -> str:
        return (
            f"{self.year:04d}-{self.month:02d}-{self.day:02d} "
            f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        )


# Returned by the bridge when the platform cannot convert an instant
EPOCH_RECORD = CalendarRecord(year=1970, month=1, day=1)


def normalize(record: CalendarRecord) -> CalendarRecord:
    """Move every out-of-range field into range, carrying into larger fields.

    Time of day carries second -> minute -> hour -> day with floored
    division, so negative fields borrow. Month folds into 1-12 adjusting the
    year. Whole 400-year cycles are taken out of the day count, then the
    rest is walked into the month one whole month at a time, which may move
    month and year again.
    """
    carry, second = divmod(record.second, 60)
    carry, minute = divmod(record.minute + carry, 60)
    carry, hour = divmod(record.hour + carry, 24)
    day = record.day + carry

    carry, month_index = divmod(record.month - 1, 12)
    year = record.year + carry
    month = month_index + 1

    # The Gregorian calendar repeats every 400 years
    cycles, day_index = divmod(day - 1, _DAYS_IN_400_YEARS)
    year += 400 * cycles
    day = day_index + 1

    while day > (length := days_in_month(year, month)):
        day -= length
        month += 1
        if month > 12:
            month = 1
            year += 1

    while day < 1:
        month -= 1
        if month < 1:
            month = 12
            year -= 1
        day += days_in_month(year, month)

    result = CalendarRecord(
        year=year, month=month, day=day, hour=hour, minute=minute, second=second
    )
    if not result.is_normalized:
        return normalize(result)
    return result
