"""Tests for LocalDate."""

import pytest

from caldate import LocalDate, Period, UnsupportedUnitError
from caldate.util import MAX_YEAR, MIN_YEAR


def test_fields_normalize_on_read():
    """Out-of-range fields are kept until the date is read."""
    d = LocalDate(2023, 13, 1)
    assert repr(d) == "LocalDate(year=2023, month=13, day=1)"

    assert (d.year, d.month, d.day) == (2024, 1, 1)
    assert repr(d) == "LocalDate(year=2024, month=1, day=1)"


def test_day_overflow_carries_into_month():
    d = LocalDate(2023, 2, 30)
    assert (d.year, d.month, d.day) == (2023, 3, 2)


def test_plus_does_not_normalize():
    """plus adjusts the stored field; normalization waits for a read."""
    d = LocalDate(2024, 1, 31).plus_months(1)
    assert repr(d) == "LocalDate(year=2024, month=2, day=31)"
    assert d == LocalDate(2024, 3, 2)


def test_plus_chains_on_raw_fields():
    """A leap day moved to a common year is not clamped before the next step."""
    d = LocalDate(2024, 2, 29).plus_years(1).plus_months(1)
    assert d == LocalDate(2025, 3, 29)


def test_plus_and_minus_units():
    d = LocalDate(2024, 1, 15)
    assert d.plus(2, "year") == LocalDate(2026, 1, 15)
    assert d.plus(13, "month") == LocalDate(2025, 2, 15)
    assert d.plus(2, "week") == LocalDate(2024, 1, 29)
    assert d.plus(20, "day") == LocalDate(2024, 2, 4)
    assert d.minus(1, "month") == LocalDate(2023, 12, 15)
    assert d.minus_days(15) == LocalDate(2023, 12, 31)
    assert d.minus_weeks(1) == LocalDate(2024, 1, 8)
    assert d.minus_years(2024) == LocalDate(0, 1, 15)


def test_plus_rejects_unsupported_unit():
    with pytest.raises(UnsupportedUnitError, match="Unsupported unit"):
        LocalDate(2024, 1, 1).plus(1, "hour")  # type: ignore[arg-type]


def test_with_fields():
    d = LocalDate(2024, 2, 29)
    assert d.with_year(2025) == LocalDate(2025, 3, 1)
    assert d.with_month(4) == LocalDate(2024, 4, 29)
    assert d.with_day(1) == LocalDate(2024, 2, 1)
    # 2024-14-29 is 2025-02-29, which rolls on to March
    assert d.with_field("month", 14) == LocalDate(2025, 3, 1)
    assert LocalDate(2024, 5, 5).with_day_of_year(60) == LocalDate(2024, 2, 29)


def test_with_field_rejects_unsupported_unit():
    with pytest.raises(UnsupportedUnitError):
        LocalDate(2024, 1, 1).with_field("week", 2)  # type: ignore[arg-type]


def test_alternate_constructors():
    assert LocalDate.of_year_day(2023, 365) == LocalDate(2023, 12, 31)
    assert LocalDate.of_year_day(2024, 366) == LocalDate(2024, 12, 31)
    assert LocalDate.of_month_day(2, 29) == LocalDate(0, 2, 29)
    assert LocalDate.of_epoch_day(0) == LocalDate(1970, 1, 1)
    assert LocalDate.of_epoch_day(-1) == LocalDate(1969, 12, 31)


def test_copy_is_normalized_and_equal():
    original = LocalDate(2023, 2, 30)
    copied = original.copy()
    assert repr(copied) == "LocalDate(year=2023, month=3, day=2)"
    assert copied == original
    assert copied is not original


def test_epoch_day_and_back():
    d = LocalDate(2024, 2, 29)
    assert LocalDate.of_epoch_day(d.epoch_day) == d
    assert LocalDate(2000, 1, 1).epoch_day == 10957


def test_day_of_week():
    assert LocalDate(2000, 1, 1).day_of_week == 6
    assert LocalDate(2024, 2, 29).day_of_week == 4
    # 2023-02-30 is 2023-03-02, a Thursday
    assert LocalDate(2023, 2, 30).day_of_week == 4


def test_calendar_queries():
    assert LocalDate(2024, 2, 1).length_of_month() == 29
    assert LocalDate(2023, 2, 1).length_of_month() == 28
    assert LocalDate(2024, 4, 1).length_of_month() == 30
    assert LocalDate(2024, 1, 1).length_of_year() == 366
    assert LocalDate(1900, 6, 1).is_leap_year() is False
    assert LocalDate(2000, 6, 1).is_leap_year() is True
    # Reads normalize first: 2023-14-01 is in 2024
    assert LocalDate(2023, 14, 1).is_leap_year() is True


def test_min_and_max():
    assert (LocalDate.MIN.year, LocalDate.MIN.month, LocalDate.MIN.day) == (
        MIN_YEAR,
        1,
        1,
    )
    assert (LocalDate.MAX.year, LocalDate.MAX.month, LocalDate.MAX.day) == (
        MAX_YEAR,
        12,
        31,
    )
    assert LocalDate.of_epoch_day(LocalDate.MAX.epoch_day) == LocalDate.MAX
    assert LocalDate.of_epoch_day(LocalDate.MIN.epoch_day) == LocalDate.MIN


def test_range():
    assert LocalDate(2024, 2, 10).range("day_of_month") == (1, 29)
    assert LocalDate(2024, 2, 10).range("day_of_year") == (1, 366)
    # February 2015 starts on a Sunday and fills exactly four weeks
    assert LocalDate(2015, 2, 10).range("week_of_month") == (1, 4)
    # February 2024 starts on a Thursday
    assert LocalDate(2024, 2, 10).range("week_of_month") == (1, 5)
    assert LocalDate(0, 1, 1).range("year_of_era") == (1, MAX_YEAR + 1)
    assert LocalDate(2024, 1, 1).range("year_of_era") == (1, MAX_YEAR)

    with pytest.raises(UnsupportedUnitError):
        LocalDate(2024, 1, 1).range("hour")  # type: ignore[arg-type]


def test_ordering():
    assert LocalDate(2024, 2, 29) > LocalDate(2024, 2, 28)
    assert LocalDate(1999, 12, 31) < LocalDate(2000, 1, 1)
    assert LocalDate(-1, 12, 31) < LocalDate(0, 1, 1)
    assert LocalDate(-5, 6, 1) < LocalDate(-4, 1, 1)
    assert LocalDate(2024, 1, 1) <= LocalDate(2024, 1, 1)
    assert LocalDate(2024, 1, 1) >= LocalDate(2023, 12, 32)


def test_ordering_is_lexicographic():
    """A later year wins even when its month and day are smaller."""
    early = LocalDate(2023, 12, 31)
    late = LocalDate(2024, 1, 1)
    assert early < late
    assert not late < early
    assert late > early
    assert not early > late


def test_sorting_normalizes_values():
    dates = [LocalDate(2024, 1, 32), LocalDate(2023, 13, 1), LocalDate(2024, 1, 31)]
    assert [str(d) for d in sorted(dates)] == [
        "2024.01.01",
        "2024.01.31",
        "2024.02.01",
    ]


def test_equality_and_hash_use_normalized_fields():
    assert LocalDate(2023, 13, 1) == LocalDate(2024, 1, 1)
    assert hash(LocalDate(2023, 13, 1)) == hash(LocalDate(2024, 1, 1))
    assert len({LocalDate(2023, 13, 1), LocalDate(2024, 1, 1)}) == 1
    assert LocalDate(2024, 1, 1) != "2024-01-01"


def test_until_period():
    assert LocalDate(2024, 1, 15).until(LocalDate(2024, 3, 20)) == Period(
        month=2, day=5
    )
    assert LocalDate(2024, 1, 31).until(LocalDate(2024, 3, 1)) == Period(day=30)
    assert LocalDate(2020, 2, 29).until(LocalDate(2024, 2, 28)) == Period(
        year=3, month=11, day=30
    )
    assert LocalDate(1999, 12, 31).until(LocalDate(2000, 1, 1)) == Period(day=1)
    assert LocalDate(2024, 5, 5).until(LocalDate(2024, 5, 5)) == Period()


def test_until_period_backwards():
    """A backwards span is a negative year with positive month/day residuals."""
    period = LocalDate(2024, 3, 10).until(LocalDate(2024, 1, 5))
    assert period == Period(year=-1, month=9, day=26)


@pytest.mark.parametrize(
    "start, end",
    [
        (LocalDate(2024, 1, 15), LocalDate(2024, 3, 20)),
        (LocalDate(2024, 1, 31), LocalDate(2024, 3, 1)),
        (LocalDate(2020, 2, 29), LocalDate(2024, 2, 28)),
        (LocalDate(1999, 12, 31), LocalDate(2000, 1, 1)),
        (LocalDate(-5, 3, 15), LocalDate(3, 7, 4)),
        (LocalDate(2024, 3, 10), LocalDate(2024, 1, 5)),
    ],
)
def test_until_period_is_reversible(start: LocalDate, end: LocalDate):
    """Adding the period's years, months and days to start gives end."""
    p = start.until(end)
    assert start.plus_years(p.year).plus_months(p.month).plus_days(p.day) == end


def test_until_period_folds_day_residual_into_month():
    """Day residuals fold into months by year-zero month lengths.

    March 31 to May 30 is one month and 29 days, which the period stores as
    two months, so adding it back lands a day past the end.
    """
    start = LocalDate(2023, 3, 31)
    p = start.until(LocalDate(2023, 5, 30))
    assert p == Period(month=2)
    assert start.plus_years(p.year).plus_months(p.month).plus_days(p.day) == LocalDate(
        2023, 5, 31
    )


def test_until_days_and_weeks():
    start = LocalDate(2024, 1, 31)
    assert start.until(LocalDate(2024, 2, 29), "day") == 29
    assert start.until(LocalDate(2024, 2, 29), "week") == 4
    assert LocalDate(2024, 2, 15).until(LocalDate(2024, 1, 20), "day") == -26
    # Weeks truncate toward zero
    assert LocalDate(2024, 2, 15).until(LocalDate(2024, 1, 20), "week") == -3


def test_until_months_ignore_partial_months():
    assert LocalDate(2024, 1, 31).until(LocalDate(2024, 2, 29), "month") == 0
    assert LocalDate(2024, 1, 15).until(LocalDate(2024, 2, 15), "month") == 1
    assert LocalDate(2024, 2, 15).until(LocalDate(2024, 1, 20), "month") == 0
    assert LocalDate(2024, 2, 15).until(LocalDate(2024, 1, 15), "month") == -1


def test_until_years():
    assert LocalDate(2020, 2, 29).until(LocalDate(2024, 2, 28), "year") == 3
    assert LocalDate(2020, 2, 29).until(LocalDate(2024, 2, 29), "year") == 4
    assert LocalDate(2024, 2, 29).until(LocalDate(2020, 2, 29), "year") == -4


def test_until_rejects_unsupported_unit():
    with pytest.raises(UnsupportedUnitError, match="Valid units"):
        LocalDate(2024, 1, 1).until(LocalDate(2024, 1, 2), "hour")  # type: ignore


def test_addition_is_componentwise():
    """Adding dates sums fields; it is not calendar arithmetic."""
    total = LocalDate(2024, 1, 31) + LocalDate(0, 1, 1)
    assert repr(total) == "LocalDate(year=2024, month=2, day=32)"
    assert total == LocalDate(2024, 3, 3)

    difference = LocalDate(2024, 3, 1) - LocalDate(1, 1, 1)
    assert difference == LocalDate(2023, 1, 31)


def test_str_is_normalized():
    assert str(LocalDate(2024, 2, 29)) == "2024.02.29"
    assert str(LocalDate(2023, 13, 1)) == "2024.01.01"


def test_str_pads_negative_years():
    assert str(LocalDate(-5, 3, 1)) == "-0005.03.01"
    assert str(LocalDate(0, 1, 1)) == "0000.01.01"
    assert str(LocalDate(-12345, 12, 31)) == "-12345.12.31"
