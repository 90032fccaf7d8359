"""Date-time without a zone: a LocalDate paired with a LocalTime."""

from datetime import date, datetime
from typing import ClassVar

from typing_extensions import override

from caldate import calendar, host
from caldate.errors import UnsupportedUnitError
from caldate.local_date import DateField, LocalDate
from caldate.local_time import LocalTime
from caldate.period import Period
from caldate.util import (
    DATE_UNITS,
    DEFAULT_TZ,
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
    TIME_UNITS,
    Unit,
    trunc_div,
)

# Nanoseconds in one of each sub-day unit
_UNIT_NANOS: dict[str, int] = {
    "hour": NANOS_PER_HOUR,
    "minute": NANOS_PER_MINUTE,
    "second": NANOS_PER_SECOND,
    "nanosecond": 1,
}

_ALL_UNITS = (*DATE_UNITS, *TIME_UNITS)
_SETTABLE_UNITS = ("year", "month", "day", *TIME_UNITS)


class LocalDateTime:
    """A date and time of day without a zone, e.g. 2007-12-03T10:15:30.

    The date and time parts are private copies. Like its parts, a
    LocalDateTime holds raw fields and normalizes only on read: time
    overflow (hour=25, or a negative minute after ``minus_minutes``) is
    carried into the date's day field, and the date then normalizes itself
    lazily.
    """

    MIN: ClassVar["LocalDateTime"]
    MAX: ClassVar["LocalDateTime"]

    __slots__ = ("_date", "_time")

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nanosecond: int = 0,
    ):
        self._date: LocalDate = LocalDate(year, month, day)
        self._time: LocalTime = LocalTime(hour, minute, second, nanosecond)

    @classmethod
    def of(cls, date: LocalDate, time: LocalTime) -> "LocalDateTime":
        """Combine a date and a time; both are copied."""
        return cls(
            date.year, date.month, date.day,
            time.hour, time.minute, time.second, time.nanosecond,
        )

    @classmethod
    def of_epoch_day(cls, epoch_day: int, nano_of_day: int) -> "LocalDateTime":
        """Build from days since 1970-01-01 and nanoseconds into that day.

        nano_of_day may exceed one day; the excess carries into the date.
        """
        time = LocalTime.of_nano_of_day(nano_of_day)
        return cls(
            *calendar.from_epoch_day(epoch_day),
            time._hour, time._minute, time._second, time._nanosecond,
        )

    @classmethod
    def now(cls, tz: str = DEFAULT_TZ) -> "LocalDateTime":
        """Current date-time from the system clock in the given zone."""
        return cls(*host.now(tz))

    @classmethod
    def from_datetime(cls, value: date, tz: str | None = None) -> "LocalDateTime":
        """Wall-clock fields of a datetime, read in ``tz`` if it is aware."""
        return cls(*host.fields_of(value, tz))

    @classmethod
    def parse(
        cls, text: str, fmt: str | None = None, tz: str | None = None
    ) -> "LocalDateTime | None":
        """Parse text such as "2007-12-03T10:15:30.217" or a strptime pattern.

        Returns None when the text does not match.
        """
        parsed = host.parse(text, fmt)
        if parsed is None:
            return None
        return cls.from_datetime(parsed, tz)

    def copy(self) -> "LocalDateTime":
        return LocalDateTime.of(self.date, self.time)

    # -- normalization ---------------------------------------------------

    def _normalize(self) -> None:
        if self._time._is_valid():
            return
        days, self._time = self._time._split_days()
        self._date = self._date.plus_days(days)

    def _key(self) -> tuple[tuple[int, int, int], tuple[int, int, int, int]]:
        self._normalize()
        return self._date._key(), self._time._key()

    # -- fields ----------------------------------------------------------

    @property
    def date(self) -> LocalDate:
        self._normalize()
        return self._date

    @property
    def time(self) -> LocalTime:
        self._normalize()
        return self._time

    @property
    def year(self) -> int:
        self._normalize()
        return self._date.year

    @property
    def month(self) -> int:
        self._normalize()
        return self._date.month

    @property
    def day(self) -> int:
        self._normalize()
        return self._date.day

    @property
    def day_of_week(self) -> int:
        self._normalize()
        return self._date.day_of_week

    @property
    def hour(self) -> int:
        self._normalize()
        return self._time.hour

    @property
    def minute(self) -> int:
        self._normalize()
        return self._time.minute

    @property
    def second(self) -> int:
        self._normalize()
        return self._time.second

    @property
    def nanosecond(self) -> int:
        self._normalize()
        return self._time.nanosecond

    def length_of_month(self) -> int:
        return self.date.length_of_month()

    def length_of_year(self) -> int:
        return self.date.length_of_year()

    def is_leap_year(self) -> bool:
        return self.date.is_leap_year()

    # -- with / plus / minus ----------------------------------------------

    def _replace(
        self, date: LocalDate | None = None, time: LocalTime | None = None
    ) -> "LocalDateTime":
        result = LocalDateTime.__new__(LocalDateTime)
        result._date = self._date if date is None else date
        result._time = self._time if time is None else time
        return result

    def with_field(self, unit: Unit, value: int) -> "LocalDateTime":
        """Return a copy with one field replaced."""
        if unit not in _SETTABLE_UNITS:
            raise UnsupportedUnitError.for_unit(unit, _SETTABLE_UNITS)
        self._normalize()
        if unit in TIME_UNITS:
            return self._replace(time=self._time.with_field(unit, value))
        return self._replace(date=self._date.with_field(unit, value))

    def with_year(self, year: int) -> "LocalDateTime":
        return self.with_field("year", year)

    def with_month(self, month: int) -> "LocalDateTime":
        return self.with_field("month", month)

    def with_day(self, day: int) -> "LocalDateTime":
        return self.with_field("day", day)

    def with_hour(self, hour: int) -> "LocalDateTime":
        return self.with_field("hour", hour)

    def with_minute(self, minute: int) -> "LocalDateTime":
        return self.with_field("minute", minute)

    def with_second(self, second: int) -> "LocalDateTime":
        return self.with_field("second", second)

    def with_nanosecond(self, nanosecond: int) -> "LocalDateTime":
        return self.with_field("nanosecond", nanosecond)

    def plus(self, amount: int, unit: Unit) -> "LocalDateTime":
        """Return a copy with amount added to the stored field for unit.

        Time units go to the time part and the rest to the date part.
        Nothing is normalized until the result is read.
        """
        if unit in TIME_UNITS:
            return self._replace(time=self._time.plus(amount, unit))
        return self._replace(date=self._date.plus(amount, unit))

    def minus(self, amount: int, unit: Unit) -> "LocalDateTime":
        return self.plus(-amount, unit)

    def plus_years(self, years: int) -> "LocalDateTime":
        return self.plus(years, "year")

    def plus_months(self, months: int) -> "LocalDateTime":
        return self.plus(months, "month")

    def plus_weeks(self, weeks: int) -> "LocalDateTime":
        return self.plus(weeks, "week")

    def plus_days(self, days: int) -> "LocalDateTime":
        return self.plus(days, "day")

    def plus_hours(self, hours: int) -> "LocalDateTime":
        return self.plus(hours, "hour")

    def plus_minutes(self, minutes: int) -> "LocalDateTime":
        return self.plus(minutes, "minute")

    def plus_seconds(self, seconds: int) -> "LocalDateTime":
        return self.plus(seconds, "second")

    def plus_nanoseconds(self, nanoseconds: int) -> "LocalDateTime":
        return self.plus(nanoseconds, "nanosecond")

    def minus_years(self, years: int) -> "LocalDateTime":
        return self.plus(-years, "year")

    def minus_months(self, months: int) -> "LocalDateTime":
        return self.plus(-months, "month")

    def minus_weeks(self, weeks: int) -> "LocalDateTime":
        return self.plus(-weeks, "week")

    def minus_days(self, days: int) -> "LocalDateTime":
        return self.plus(-days, "day")

    def minus_hours(self, hours: int) -> "LocalDateTime":
        return self.plus(-hours, "hour")

    def minus_minutes(self, minutes: int) -> "LocalDateTime":
        return self.plus(-minutes, "minute")

    def minus_seconds(self, seconds: int) -> "LocalDateTime":
        return self.plus(-seconds, "second")

    def minus_nanoseconds(self, nanoseconds: int) -> "LocalDateTime":
        return self.plus(-nanoseconds, "nanosecond")

    # -- queries ---------------------------------------------------------

    def range(self, field: DateField | str) -> tuple[int, int]:
        """Return the (min, max) valid values of a date or time field."""
        self._normalize()
        if field in TIME_UNITS:
            return self._time.range(field)
        return self._date.range(field)

    def until(self, end: "LocalDateTime", unit: Unit) -> int:
        """Whole amount of unit from this date-time to end.

        Sub-day units take the exact nanosecond span and truncate it toward
        zero once. For date units a trailing partial day is not counted: the
        end date is pulled back one day when the times run the other way.
        """
        if unit not in _ALL_UNITS:
            raise UnsupportedUnitError.for_unit(unit, _ALL_UNITS)
        self._normalize()
        end._normalize()

        if unit in TIME_UNITS:
            days = self._date.until(end._date, "day")
            nanos = (
                days * NANOS_PER_DAY
                + end._time.nano_of_day
                - self._time.nano_of_day
            )
            return trunc_div(nanos, _UNIT_NANOS[unit])

        end_date = end._date
        if end_date > self._date and end._time < self._time:
            end_date = end_date.minus_days(1)
        elif end_date < self._date and end._time > self._time:
            end_date = end_date.plus_days(1)
        return self._date.until(end_date, unit)

    # -- host conversions ------------------------------------------------

    def _fields(self) -> host.Fields:
        (year, month, day), (hour, minute, second, nanosecond) = self._key()
        return year, month, day, hour, minute, second, nanosecond

    def to_datetime(self, tz: str | None = DEFAULT_TZ) -> datetime:
        """This wall-clock time as a host datetime (naive when tz is None).

        Raises:
            ConversionError: If the host cannot represent the value.
        """
        return host.assemble(self._fields(), tz)

    def format(self, fmt: str) -> str:
        """Render with a strftime pattern, e.g. ``"%Y-%m-%dT%H:%M:%S"``."""
        return self.to_datetime(None).strftime(fmt)

    # -- operators -------------------------------------------------------

    def __add__(self, other: object) -> "LocalDateTime":
        """Field-by-field sum with a LocalDateTime, LocalDate, LocalTime or Period."""
        if isinstance(other, LocalDateTime):
            return self._replace(date=self.date + other.date, time=self.time + other.time)
        if isinstance(other, LocalDate):
            return self._replace(date=self.date + other)
        if isinstance(other, LocalTime):
            return self._replace(time=self.time + other)
        if isinstance(other, Period):
            return LocalDateTime(
                *(a + b for a, b in zip(self._fields(), _period_fields(other)))
            )
        return NotImplemented

    def __sub__(self, other: object) -> "LocalDateTime":
        if isinstance(other, LocalDateTime):
            return self._replace(date=self.date - other.date, time=self.time - other.time)
        if isinstance(other, LocalDate):
            return self._replace(date=self.date - other)
        if isinstance(other, LocalTime):
            return self._replace(time=self.time - other)
        if isinstance(other, Period):
            return LocalDateTime(
                *(a - b for a, b in zip(self._fields(), _period_fields(other)))
            )
        return NotImplemented

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self._key() == other._key()

    @override
    def __hash__(self) -> int:
        return hash(self._key())

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self._key() >= other._key()

    @override
    def __str__(self) -> str:
        self._normalize()
        return f"{self._date}T{self._time}"

    @override
    def __repr__(self) -> str:
        return f"LocalDateTime(date={self._date!r}, time={self._time!r})"


def _period_fields(period: Period) -> host.Fields:
    return (
        period.year,
        period.month,
        period.day,
        period.hour,
        period.minute,
        period.second,
        period.nanosecond,
    )


LocalDateTime.MIN = LocalDateTime.of(LocalDate.MIN, LocalTime.MIN)
LocalDateTime.MAX = LocalDateTime.of(LocalDate.MAX, LocalTime.MAX)
