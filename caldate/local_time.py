"""Time of day without a date or zone."""

from datetime import date, datetime
from typing import ClassVar

from typing_extensions import override

from caldate import host
from caldate.errors import UnsupportedUnitError
from caldate.util import (
    DEFAULT_TZ,
    HOURS_PER_DAY,
    MINUTES_PER_HOUR,
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    TIME_UNITS,
    TimeUnit,
    trunc_div,
)

# Nanoseconds in one of each unit
_UNIT_NANOS: dict[str, int] = {
    "hour": NANOS_PER_HOUR,
    "minute": NANOS_PER_MINUTE,
    "second": NANOS_PER_SECOND,
    "nanosecond": 1,
}

_RANGES: dict[str, tuple[int, int]] = {
    "hour": (0, HOURS_PER_DAY - 1),
    "minute": (0, MINUTES_PER_HOUR - 1),
    "second": (0, SECONDS_PER_MINUTE - 1),
    "nanosecond": (0, NANOS_PER_SECOND - 1),
}


class LocalTime:
    """A time of day: hour, minute, second and nanosecond.

    Fields are stored as given and may hold out-of-range values (e.g.
    hour=25 or minute=-1) until they are read. Reading any field normalizes
    first, wrapping the value around midnight. Operations never modify an
    instance in place; they return new ones.
    """

    MIN: ClassVar["LocalTime"]
    MAX: ClassVar["LocalTime"]
    MIDNIGHT: ClassVar["LocalTime"]
    NOON: ClassVar["LocalTime"]

    __slots__ = ("_hour", "_minute", "_second", "_nanosecond")

    def __init__(
        self, hour: int = 0, minute: int = 0, second: int = 0, nanosecond: int = 0
    ):
        self._hour: int = hour
        self._minute: int = minute
        self._second: int = second
        self._nanosecond: int = nanosecond

    @classmethod
    def of_nano_of_day(cls, nano_of_day: int) -> "LocalTime":
        """Decompose a nanosecond count, leaving whole days in the hour field."""
        hour, rest = divmod(nano_of_day, NANOS_PER_HOUR)
        minute, rest = divmod(rest, NANOS_PER_MINUTE)
        second, nanosecond = divmod(rest, NANOS_PER_SECOND)
        return cls(hour, minute, second, nanosecond)

    @classmethod
    def of_second_of_day(cls, second_of_day: int) -> "LocalTime":
        return cls.of_nano_of_day(second_of_day * NANOS_PER_SECOND)

    @classmethod
    def now(cls, tz: str = DEFAULT_TZ) -> "LocalTime":
        """Current wall-clock time in the given zone."""
        return cls(*host.now(tz)[3:])

    @classmethod
    def from_datetime(cls, value: date, tz: str | None = None) -> "LocalTime":
        return cls(*host.fields_of(value, tz)[3:])

    @classmethod
    def parse(
        cls, text: str, fmt: str | None = None, tz: str | None = None
    ) -> "LocalTime | None":
        """Parse text such as "10:15:30" (ISO 8601) or a strptime pattern.

        Returns None when the text does not match.
        """
        parsed = host.parse(text, fmt) if fmt is not None else _parse_iso_time(text)
        if parsed is None:
            return None
        return cls.from_datetime(parsed, tz)

    def copy(self) -> "LocalTime":
        return LocalTime(self.hour, self.minute, self.second, self.nanosecond)

    # -- normalization ---------------------------------------------------

    def _is_valid(self) -> bool:
        return (
            0 <= self._hour < HOURS_PER_DAY
            and 0 <= self._minute < MINUTES_PER_HOUR
            and 0 <= self._second < SECONDS_PER_MINUTE
            and 0 <= self._nanosecond < NANOS_PER_SECOND
        )

    def _raw_nanos(self) -> int:
        return (
            self._hour * NANOS_PER_HOUR
            + self._minute * NANOS_PER_MINUTE
            + self._second * NANOS_PER_SECOND
            + self._nanosecond
        )

    def _split_days(self) -> tuple[int, "LocalTime"]:
        """Split the raw fields into whole days and a valid time of day."""
        days, nano_of_day = divmod(self._raw_nanos(), NANOS_PER_DAY)
        return days, LocalTime.of_nano_of_day(nano_of_day)

    def _normalize(self) -> None:
        if self._is_valid():
            return
        _, time = self._split_days()
        self._hour = time._hour
        self._minute = time._minute
        self._second = time._second
        self._nanosecond = time._nanosecond

    def _key(self) -> tuple[int, int, int, int]:
        self._normalize()
        return self._hour, self._minute, self._second, self._nanosecond

    # -- fields ----------------------------------------------------------

    @property
    def hour(self) -> int:
        self._normalize()
        return self._hour

    @property
    def minute(self) -> int:
        self._normalize()
        return self._minute

    @property
    def second(self) -> int:
        self._normalize()
        return self._second

    @property
    def nanosecond(self) -> int:
        self._normalize()
        return self._nanosecond

    @property
    def nano_of_day(self) -> int:
        self._normalize()
        return self._raw_nanos()

    @property
    def second_of_day(self) -> int:
        self._normalize()
        return (
            self._hour * SECONDS_PER_HOUR
            + self._minute * SECONDS_PER_MINUTE
            + self._second
        )

    # -- with / plus / minus ----------------------------------------------

    def with_field(self, unit: TimeUnit, value: int) -> "LocalTime":
        """Return a copy with one field replaced."""
        if unit not in TIME_UNITS:
            raise UnsupportedUnitError.for_unit(unit, TIME_UNITS)
        fields = dict(zip(TIME_UNITS, self._key()))
        fields[unit] = value
        return LocalTime(**fields)

    def with_hour(self, hour: int) -> "LocalTime":
        return self.with_field("hour", hour)

    def with_minute(self, minute: int) -> "LocalTime":
        return self.with_field("minute", minute)

    def with_second(self, second: int) -> "LocalTime":
        return self.with_field("second", second)

    def with_nanosecond(self, nanosecond: int) -> "LocalTime":
        return self.with_field("nanosecond", nanosecond)

    def plus(self, amount: int, unit: TimeUnit) -> "LocalTime":
        """Return a copy with amount added to the raw field for unit."""
        if unit == "hour":
            return LocalTime(
                self._hour + amount, self._minute, self._second, self._nanosecond
            )
        if unit == "minute":
            return LocalTime(
                self._hour, self._minute + amount, self._second, self._nanosecond
            )
        if unit == "second":
            return LocalTime(
                self._hour, self._minute, self._second + amount, self._nanosecond
            )
        if unit == "nanosecond":
            return LocalTime(
                self._hour, self._minute, self._second, self._nanosecond + amount
            )
        raise UnsupportedUnitError.for_unit(unit, TIME_UNITS)

    def minus(self, amount: int, unit: TimeUnit) -> "LocalTime":
        return self.plus(-amount, unit)

    def plus_hours(self, hours: int) -> "LocalTime":
        return self.plus(hours, "hour")

    def plus_minutes(self, minutes: int) -> "LocalTime":
        return self.plus(minutes, "minute")

    def plus_seconds(self, seconds: int) -> "LocalTime":
        return self.plus(seconds, "second")

    def plus_nanoseconds(self, nanoseconds: int) -> "LocalTime":
        return self.plus(nanoseconds, "nanosecond")

    def minus_hours(self, hours: int) -> "LocalTime":
        return self.plus(-hours, "hour")

    def minus_minutes(self, minutes: int) -> "LocalTime":
        return self.plus(-minutes, "minute")

    def minus_seconds(self, seconds: int) -> "LocalTime":
        return self.plus(-seconds, "second")

    def minus_nanoseconds(self, nanoseconds: int) -> "LocalTime":
        return self.plus(-nanoseconds, "nanosecond")

    # -- queries ---------------------------------------------------------

    def range(self, unit: TimeUnit) -> tuple[int, int]:
        """Return the (min, max) valid values of a field."""
        if unit not in _RANGES:
            raise UnsupportedUnitError.for_unit(unit, TIME_UNITS)
        return _RANGES[unit]

    def until(self, end: "LocalTime", unit: TimeUnit) -> int:
        """Signed amount of unit from this time to end, truncated toward zero."""
        if unit not in _UNIT_NANOS:
            raise UnsupportedUnitError.for_unit(unit, TIME_UNITS)
        return trunc_div(end.nano_of_day - self.nano_of_day, _UNIT_NANOS[unit])

    def format(self, fmt: str) -> str:
        return host.assemble((2000, 1, 1, *self._key())).strftime(fmt)

    # -- operators -------------------------------------------------------

    def __add__(self, other: object) -> "LocalTime":
        if not isinstance(other, LocalTime):
            return NotImplemented
        return LocalTime(*(a + b for a, b in zip(self._key(), other._key())))

    def __sub__(self, other: object) -> "LocalTime":
        if not isinstance(other, LocalTime):
            return NotImplemented
        return LocalTime(*(a - b for a, b in zip(self._key(), other._key())))

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._key() == other._key()

    @override
    def __hash__(self) -> int:
        return hash(self._key())

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._key() >= other._key()

    @override
    def __str__(self) -> str:
        hour, minute, second, nanosecond = self._key()
        text = f"{hour:02d}:{minute:02d}:{second:02d}"
        if nanosecond:
            text += f".{nanosecond:09d}"
        return text

    @override
    def __repr__(self) -> str:
        return (
            f"LocalTime(hour={self._hour}, minute={self._minute}, "
            f"second={self._second}, nanosecond={self._nanosecond})"
        )


def _parse_iso_time(text: str) -> datetime | None:
    """Parse a bare ISO 8601 time by anchoring it to an arbitrary date."""
    return host.parse(f"2000-01-01T{text}")


LocalTime.MIN = LocalTime(0, 0, 0, 0)
LocalTime.MAX = LocalTime(
    HOURS_PER_DAY - 1, MINUTES_PER_HOUR - 1, SECONDS_PER_MINUTE - 1, NANOS_PER_SECOND - 1
)
LocalTime.MIDNIGHT = LocalTime(0, 0, 0, 0)
LocalTime.NOON = LocalTime(12, 0, 0, 0)
