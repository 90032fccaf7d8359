"""Utility constants and helpers for caldate.

Day-scale constants are integers so every conversion stays exact.
Unit names are plain strings, checked at the call site.
"""

from typing import Literal, TypeAlias

# Supported year range
MIN_YEAR = -999_999_999
MAX_YEAR = 999_999_999
MIN_MONTH = 1
MAX_MONTH = 12

# Days in a 400 year cycle
DAYS_PER_CYCLE = 146097
# Five cycles take year zero to 2000, minus 30 years holding 7 leap days
DAYS_0000_TO_1970 = DAYS_PER_CYCLE * 5 - (30 * 365 + 7)

# Time unit constants
HOURS_PER_DAY = 24
MINUTES_PER_HOUR = 60
SECONDS_PER_MINUTE = 60
NANOS_PER_SECOND = 1_000_000_000
NANOS_PER_MICROSECOND = 1000

MINUTES_PER_DAY = MINUTES_PER_HOUR * HOURS_PER_DAY
SECONDS_PER_HOUR = SECONDS_PER_MINUTE * MINUTES_PER_HOUR
SECONDS_PER_DAY = SECONDS_PER_HOUR * HOURS_PER_DAY
NANOS_PER_MINUTE = NANOS_PER_SECOND * SECONDS_PER_MINUTE
NANOS_PER_HOUR = NANOS_PER_MINUTE * MINUTES_PER_HOUR
NANOS_PER_DAY = NANOS_PER_HOUR * HOURS_PER_DAY

# Zone used by host conversions when none is given
DEFAULT_TZ = "UTC"

DateUnit: TypeAlias = Literal["year", "month", "week", "day"]
TimeUnit: TypeAlias = Literal["hour", "minute", "second", "nanosecond"]
Unit: TypeAlias = DateUnit | TimeUnit

DATE_UNITS: tuple[DateUnit, ...] = ("year", "month", "week", "day")
TIME_UNITS: tuple[TimeUnit, ...] = ("hour", "minute", "second", "nanosecond")


def trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q
