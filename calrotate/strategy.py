"""Time-based rotation strategy for log rotation drivers.

A driver keeps the instant of its last rotation and polls
``TimeBasedRotation.should_rotate`` with the current time. The decision
carries a reason and a priority that grows the longer a rotation is
overdue, so a driver juggling several outputs can rotate the most overdue
first.
"""

import logging
from dataclasses import dataclass
from typing import ClassVar

from calrotate.bridge import resolve_zone
from calrotate.interval import Alignment, Interval, as_alignment, as_interval
from calrotate.rotation import next_rotation
from calrotate.util import HOUR, Instant

logger = logging.getLogger(__name__)

MAX_PRIORITY = 10

_UNIT_NAMES = {
    Interval.MINUTELY: "minute",
    Interval.HOURLY: "hour",
    Interval.DAILY: "day",
    Interval.WEEKLY: "week",
    Interval.MONTHLY: "month",
    Interval.YEARLY: "year",
}


@dataclass(frozen=True)
class RotationDecision:
    """Outcome of a rotation check.

    Attributes:
        should_rotate: True if the rotation deadline has been reached
        reason: Short explanation suitable for logs
        priority: 0 (not urgent) to 10 (long overdue)
    """

    should_rotate: bool
    reason: str
    priority: int = 0


@dataclass(frozen=True)
class TimeBasedRotation:
    """Rotate whenever a calendar-aware interval has elapsed.

    Interval and alignment may be given as enum members or their names.

    Example:
        >>> policy = TimeBasedRotation("monthly", alignment="month", tz="UTC")
        >>> decision = policy.should_rotate(last_rotation, now)
        >>> if decision.should_rotate:
        ...     rotate()
    """

    interval: Interval = Interval.DAILY
    alignment: Alignment = Alignment.NONE
    tz: str | None = None

    name: ClassVar[str] = "TimeBased"

    def __post_init__(self) -> None:
        object.__setattr__(self, "interval", as_interval(self.interval))
        object.__setattr__(self, "alignment", as_alignment(self.alignment))
        # Fail on construction rather than on the first poll
        resolve_zone(self.tz)

    @property
    def unit(self) -> str:
        return _UNIT_NAMES[self.interval]

    @property
    def description(self) -> str:
        return f"Rotates every {self.unit}"

    def next_rotation_time(self, last_rotation: Instant) -> Instant:
        return next_rotation(self.interval, last_rotation, self.alignment, self.tz)

    def should_rotate(self, last_rotation: Instant, now: Instant) -> RotationDecision:
        """Decide whether a rotation is due at ``now``.

        Priority is half a point per whole hour past the deadline, capped at
        ``MAX_PRIORITY``.
        """
        deadline = self.next_rotation_time(last_rotation)
        if now < deadline:
            return RotationDecision(False, "Time interval not reached")

        overdue_hours = (now - deadline) // HOUR
        priority = min(MAX_PRIORITY, int(overdue_hours * 0.5))
        logger.debug(
            "Rotation due: deadline %s, now %s, priority %s",
            deadline,
            now,
            priority,
        )
        return RotationDecision(True, f"Time interval ({self.unit}) reached", priority)
