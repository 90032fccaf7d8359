from dataclasses import dataclass, fields, replace
from typing import ClassVar

from caldate.calendar import normalize_date
from caldate.errors import UnsupportedUnitError
from caldate.util import (
    HOURS_PER_DAY,
    MINUTES_PER_HOUR,
    NANOS_PER_SECOND,
    SECONDS_PER_MINUTE,
)

_FIELDS = ("year", "month", "day", "hour", "minute", "second", "nanosecond")


@dataclass(frozen=True, kw_only=True)
class Period:
    """A signed calendar displacement in seven fields.

    Normalized on every construction: sub-day fields carry upward like a
    mixed-radix number, then the day and month overflow is folded through
    the date engine. Afterwards hour, minute, second and nanosecond are
    within their clock ranges and month is in 0..11.
    """

    ZERO: ClassVar["Period"]

    year: int = 0
    month: int = 0
    day: int = 0
    hour: int = 0
    minute: int = 0
    second: int = 0
    nanosecond: int = 0

    def __post_init__(self) -> None:
        carry, nanosecond = divmod(self.nanosecond, NANOS_PER_SECOND)
        carry, second = divmod(self.second + carry, SECONDS_PER_MINUTE)
        carry, minute = divmod(self.minute + carry, MINUTES_PER_HOUR)
        days, hour = divmod(self.hour + carry, HOURS_PER_DAY)
        days += self.day

        # Treat the period as a 1-based date so month lengths and the
        # month-to-year carry come from the calendar rules
        year, month, day = normalize_date(self.year, self.month + 1, days + 1)

        object.__setattr__(self, "year", year)
        object.__setattr__(self, "month", month - 1)
        object.__setattr__(self, "day", day - 1)
        object.__setattr__(self, "hour", hour)
        object.__setattr__(self, "minute", minute)
        object.__setattr__(self, "second", second)
        object.__setattr__(self, "nanosecond", nanosecond)

    def with_field(self, unit: str, value: int) -> "Period":
        """Return a renormalized copy with one field replaced."""
        if unit not in _FIELDS:
            raise UnsupportedUnitError.for_unit(unit, _FIELDS)
        return replace(self, **{unit: value})

    def __add__(self, other: object) -> "Period":
        if not isinstance(other, Period):
            return NotImplemented
        return Period(
            **{f.name: getattr(self, f.name) + getattr(other, f.name) for f in fields(self)}
        )

    def __sub__(self, other: object) -> "Period":
        if not isinstance(other, Period):
            return NotImplemented
        return Period(
            **{f.name: getattr(self, f.name) - getattr(other, f.name) for f in fields(self)}
        )


Period.ZERO = Period()
