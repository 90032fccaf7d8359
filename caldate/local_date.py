"""Calendar date in the proleptic Gregorian calendar."""

from datetime import date, datetime
from typing import ClassVar, Literal, TypeAlias, overload

from typing_extensions import override

from caldate import calendar, host
from caldate.errors import UnsupportedUnitError
from caldate.period import Period
from caldate.util import (
    DATE_UNITS,
    DEFAULT_TZ,
    MAX_MONTH,
    MAX_YEAR,
    MIN_MONTH,
    MIN_YEAR,
    DateUnit,
    trunc_div,
)

DateField: TypeAlias = Literal[
    "week_of_month", "day_of_month", "day_of_year", "year_of_era"
]

_DATE_FIELDS = ("week_of_month", "day_of_month", "day_of_year", "year_of_era")
_SETTABLE = ("year", "month", "day")


class LocalDate:
    """A date without a time of day or zone, e.g. 2007-12-03.

    Fields are stored as given, so month=13 or day=45 are accepted and
    carried into the following months only when the date is read.
    Arithmetic (``plus``, ``minus``, ``with_*``) builds new dates from the
    stored fields without normalizing them, e.g.::

        >>> LocalDate(2024, 2, 29).plus_years(1).plus_months(1)
        LocalDate(year=2025, month=3, day=29)

    Instances are never modified in place from the outside. Reading a field
    may rewrite the private storage to its normalized form, so an instance
    shared between threads needs external locking.
    """

    MIN: ClassVar["LocalDate"]
    MAX: ClassVar["LocalDate"]

    __slots__ = ("_year", "_month", "_day")

    def __init__(self, year: int, month: int, day: int):
        self._year: int = year
        self._month: int = month
        self._day: int = day

    @classmethod
    def of_month_day(cls, month: int, day: int) -> "LocalDate":
        """Date in year zero."""
        return cls(0, month, day)

    @classmethod
    def of_year_day(cls, year: int, day_of_year: int) -> "LocalDate":
        return cls(year, 1, day_of_year)

    @classmethod
    def of_epoch_day(cls, epoch_day: int) -> "LocalDate":
        return cls(*calendar.from_epoch_day(epoch_day))

    @classmethod
    def now(cls, tz: str = DEFAULT_TZ) -> "LocalDate":
        """Current date from the system clock in the given zone."""
        return cls(*host.now(tz)[:3])

    @classmethod
    def from_datetime(cls, value: date, tz: str | None = None) -> "LocalDate":
        """Date part of a datetime/date, read in ``tz`` if the value is aware."""
        return cls(*host.fields_of(value, tz)[:3])

    @classmethod
    def parse(
        cls, text: str, fmt: str | None = None, tz: str | None = None
    ) -> "LocalDate | None":
        """Parse text such as "2007-12-03", or text matching a strptime pattern.

        Returns None when the text does not match.
        """
        parsed = host.parse(text, fmt)
        if parsed is None:
            return None
        return cls.from_datetime(parsed, tz)

    def copy(self) -> "LocalDate":
        return LocalDate(self.year, self.month, self.day)

    # -- normalization ---------------------------------------------------

    def _normalize(self) -> None:
        self._year, self._month, self._day = calendar.normalize_date(
            self._year, self._month, self._day
        )

    def _key(self) -> tuple[int, int, int]:
        self._normalize()
        return self._year, self._month, self._day

    # -- fields ----------------------------------------------------------

    @property
    def year(self) -> int:
        self._normalize()
        return self._year

    @property
    def month(self) -> int:
        """Month of year, 1 to 12."""
        self._normalize()
        return self._month

    @property
    def day(self) -> int:
        """Day of month."""
        self._normalize()
        return self._day

    @property
    def day_of_week(self) -> int:
        """Day of week, Sunday = 0 through Saturday = 6."""
        return calendar.day_of_week(*self._key())

    @property
    def epoch_day(self) -> int:
        """Days since 1970-01-01."""
        return calendar.epoch_day_of(*self._key())

    @property
    def _proleptic_month(self) -> int:
        year, month, _ = self._key()
        return calendar.proleptic_month(year, month)

    def length_of_month(self) -> int:
        year, month, _ = self._key()
        return calendar.length_of_month(year, month)

    def length_of_year(self) -> int:
        return calendar.length_of_year(self.year)

    def is_leap_year(self) -> bool:
        return calendar.is_leap_year(self.year)

    # -- with / plus / minus ----------------------------------------------

    def with_field(
        self, unit: Literal["year", "month", "day"], value: int
    ) -> "LocalDate":
        """Return a copy with one field replaced; the result is not normalized."""
        if unit not in _SETTABLE:
            raise UnsupportedUnitError.for_unit(unit, _SETTABLE)
        fields = dict(zip(_SETTABLE, self._key()))
        fields[unit] = value
        return LocalDate(**fields)

    def with_year(self, year: int) -> "LocalDate":
        return self.with_field("year", year)

    def with_month(self, month: int) -> "LocalDate":
        return self.with_field("month", month)

    def with_day(self, day: int) -> "LocalDate":
        return self.with_field("day", day)

    def with_day_of_year(self, day_of_year: int) -> "LocalDate":
        return LocalDate(self.year, 1, day_of_year)

    def plus(self, amount: int, unit: DateUnit) -> "LocalDate":
        """Return a copy with amount added to the stored field for unit."""
        if unit == "year":
            return LocalDate(self._year + amount, self._month, self._day)
        if unit == "month":
            return LocalDate(self._year, self._month + amount, self._day)
        if unit == "week":
            return LocalDate(self._year, self._month, self._day + amount * 7)
        if unit == "day":
            return LocalDate(self._year, self._month, self._day + amount)
        raise UnsupportedUnitError.for_unit(unit, DATE_UNITS)

    def minus(self, amount: int, unit: DateUnit) -> "LocalDate":
        return self.plus(-amount, unit)

    def plus_years(self, years: int) -> "LocalDate":
        return self.plus(years, "year")

    def plus_months(self, months: int) -> "LocalDate":
        return self.plus(months, "month")

    def plus_weeks(self, weeks: int) -> "LocalDate":
        return self.plus(weeks, "week")

    def plus_days(self, days: int) -> "LocalDate":
        return self.plus(days, "day")

    def minus_years(self, years: int) -> "LocalDate":
        return self.plus(-years, "year")

    def minus_months(self, months: int) -> "LocalDate":
        return self.plus(-months, "month")

    def minus_weeks(self, weeks: int) -> "LocalDate":
        return self.plus(-weeks, "week")

    def minus_days(self, days: int) -> "LocalDate":
        return self.plus(-days, "day")

    # -- queries ---------------------------------------------------------

    def range(self, field: DateField) -> tuple[int, int]:
        """Return the (min, max) valid values of a field for this date.

        Weeks start on Sunday, so ``week_of_month`` counts the Sunday-based
        weeks the month touches.
        """
        if field == "week_of_month":
            first = LocalDate(self.year, self.month, 1)
            return 1, (first.day_of_week + self.length_of_month() + 6) // 7
        if field == "day_of_month":
            return 1, self.length_of_month()
        if field == "day_of_year":
            return 1, self.length_of_year()
        if field == "year_of_era":
            return (1, MAX_YEAR + 1) if self.year <= 0 else (1, MAX_YEAR)
        raise UnsupportedUnitError.for_unit(field, _DATE_FIELDS)

    @overload
    def until(self, end: "LocalDate") -> Period: ...

    @overload
    def until(self, end: "LocalDate", unit: DateUnit) -> int: ...

    def until(self, end: "LocalDate", unit: DateUnit | None = None) -> Period | int:
        """Amount of time from this date to end.

        Without a unit, returns the difference as a Period of years, months
        and days. With a unit, returns the whole number of that unit,
        truncated toward zero.
        """
        if unit is None:
            return self._period_until(end)
        if unit == "day":
            return end.epoch_day - self.epoch_day
        if unit == "week":
            return trunc_div(end.epoch_day - self.epoch_day, 7)
        if unit == "month":
            return self._months_until(end)
        if unit == "year":
            return trunc_div(self._months_until(end), 12)
        raise UnsupportedUnitError.for_unit(unit, DATE_UNITS)

    def _months_until(self, end: "LocalDate") -> int:
        # Packing the day in keeps a partial month from counting
        packed_start = self._proleptic_month * 32 + self.day
        packed_end = end._proleptic_month * 32 + end.day
        return trunc_div(packed_end - packed_start, 32)

    def _period_until(self, end: "LocalDate") -> Period:
        total_months = end._proleptic_month - self._proleptic_month
        days = end.day - self.day
        if total_months > 0 and days < 0:
            total_months -= 1
            shifted = self.with_month(self.month + total_months)
            days = end.epoch_day - shifted.epoch_day
        elif total_months < 0 and days > 0:
            total_months += 1
            days -= end.length_of_month()
        return Period(
            year=trunc_div(total_months, 12),
            month=total_months - trunc_div(total_months, 12) * 12,
            day=days,
        )

    # -- host conversions ------------------------------------------------

    def to_datetime(self, tz: str | None = DEFAULT_TZ) -> datetime:
        """Midnight of this date as a host datetime (naive when tz is None).

        Raises:
            ConversionError: If the host cannot represent the date.
        """
        return host.assemble((*self._key(), 0, 0, 0, 0), tz)

    def to_date(self) -> date:
        return self.to_datetime(None).date()

    def format(self, fmt: str) -> str:
        """Render with a strftime pattern, e.g. ``"%Y-%m-%d"``."""
        return self.to_datetime(None).strftime(fmt)

    # -- operators -------------------------------------------------------

    def __add__(self, other: object) -> "LocalDate":
        """Field-by-field sum of two dates; not calendar arithmetic."""
        if not isinstance(other, LocalDate):
            return NotImplemented
        return LocalDate(*(a + b for a, b in zip(self._key(), other._key())))

    def __sub__(self, other: object) -> "LocalDate":
        if not isinstance(other, LocalDate):
            return NotImplemented
        return LocalDate(*(a - b for a, b in zip(self._key(), other._key())))

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._key() == other._key()

    @override
    def __hash__(self) -> int:
        return hash(self._key())

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._key() >= other._key()

    @override
    def __str__(self) -> str:
        year, month, day = self._key()
        sign = "-" if year < 0 else ""
        return f"{sign}{abs(year):04d}.{month:02d}.{day:02d}"

    @override
    def __repr__(self) -> str:
        return f"LocalDate(year={self._year}, month={self._month}, day={self._day})"


LocalDate.MIN = LocalDate(MIN_YEAR, MIN_MONTH, 1)
LocalDate.MAX = LocalDate(MAX_YEAR, MAX_MONTH, 31)
