from .boundaries import (
    add_months,
    add_years,
    start_of_day,
    start_of_month,
    start_of_week,
    start_of_year,
)
from .bridge import at_tz, from_record, to_record
from .describe import describe_duration, describe_interval, format_time
from .interval import Alignment, Interval
from .record import CalendarRecord, days_in_month, is_leap, normalize
from .rotation import align, is_rotation_time, next_rotation, rotation_times
from .strategy import RotationDecision, TimeBasedRotation
from .util import DAY, HOUR, MINUTE, SECOND, WEEK, Instant

__all__ = [
    "Interval",
    "Alignment",
    "Instant",
    "CalendarRecord",
    "RotationDecision",
    "TimeBasedRotation",
    "next_rotation",
    "is_rotation_time",
    "rotation_times",
    "align",
    "start_of_day",
    "start_of_week",
    "start_of_month",
    "start_of_year",
    "add_months",
    "add_years",
    "is_leap",
    "days_in_month",
    "normalize",
    "to_record",
    "from_record",
    "at_tz",
    "format_time",
    "describe_duration",
    "describe_interval",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "WEEK",
]
