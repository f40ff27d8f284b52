"""Utility constants for calrotate.

Time unit constants represent fixed durations in seconds. Months and years
have no fixed length, so calendar steps go through ``calrotate.boundaries``.
"""

from typing import TypeAlias

# Whole seconds since the Unix epoch
Instant: TypeAlias = int

# Time unit constants (all values in seconds)
SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400
WEEK = 604800
