from enum import StrEnum
from typing import Literal, TypeAlias, TypeVar


class Interval(StrEnum):
    """Cadence at which rotations fire."""

    MINUTELY = "minutely"
    HOURLY = "hourly"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


class Alignment(StrEnum):
    """Calendar boundary an instant is floored to before stepping."""

    NONE = "none"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


IntervalName: TypeAlias = Literal[
    "minutely", "hourly", "daily", "weekly", "monthly", "yearly"
]
AlignmentName: TypeAlias = Literal[
    "none", "minute", "hour", "day", "week", "month", "year"
]

E = TypeVar("E", Interval, Alignment)


def _coerce(enum: type[E], value: "E | str", param: str) -> E:
    if isinstance(value, enum):
        return value
    if isinstance(value, str):
        try:
            return enum(value.lower())
        except ValueError:
            pass
    valid = ", ".join(member.value for member in enum)
    raise ValueError(
        f"Invalid {param}: {value!r}\n"
        f"Valid values: {valid}\n"
        f"Example: {param}={enum.__name__}.{list(enum)[2].name} "
        f"or {param}={list(enum)[2].value!r}"
    )


def as_interval(value: "Interval | IntervalName | str") -> Interval:
    """Coerce an ``Interval`` or its (case-insensitive) name to an ``Interval``."""
    return _coerce(Interval, value, "interval")


def as_alignment(value: "Alignment | AlignmentName | str") -> Alignment:
    """Coerce an ``Alignment`` or its (case-insensitive) name to an ``Alignment``."""
    return _coerce(Alignment, value, "alignment")
