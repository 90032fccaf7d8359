"""Proleptic Gregorian calendar arithmetic on plain integers.

These functions are the engine under LocalDate, LocalDateTime and Period.
Everything is closed-form integer math, with no iteration and no host
calendar, so results are exact across the whole supported year range,
including years before zero.
"""

from caldate.util import DAYS_0000_TO_1970, DAYS_PER_CYCLE, MAX_MONTH, MIN_MONTH

# Days before the first of each month in a common year
_DAYS_BEFORE_MONTH = (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334, 365)


def is_leap_year(year: int) -> bool:
    """Return True if year is a leap year under the 4/100/400 rule."""
    if year & 3 != 0:
        return False
    return year % 100 != 0 or year % 400 == 0


def length_of_month(year: int, month: int) -> int:
    if month == 2:
        return 29 if is_leap_year(year) else 28
    if month in (4, 6, 9, 11):
        return 30
    return 31


def length_of_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def is_valid_date(year: int, month: int, day: int) -> bool:
    if not MIN_MONTH <= month <= MAX_MONTH:
        return False
    return 1 <= day <= length_of_month(year, month)


def proleptic_month(year: int, month: int) -> int:
    """Count of months since year zero, January being month zero."""
    return year * 12 + month - 1


def epoch_day_of(year: int, month: int, day: int) -> int:
    """Convert a calendar triple to days since 1970-01-01.

    month must already be in 1..12. day may fall outside the month; the
    excess runs on linearly, which is what normalization relies on.
    """
    total = 365 * year
    if year >= 0:
        total += (year + 3) // 4 - (year + 99) // 100 + (year + 399) // 400
    else:
        total -= (-year) // 4 - (-year) // 100 + (-year) // 400
    total += (367 * month - 362) // 12
    total += day - 1
    if month > 2:
        total -= 1
        if not is_leap_year(year):
            total -= 1
    return total - DAYS_0000_TO_1970


def from_epoch_day(epoch_day: int) -> tuple[int, int, int]:
    """Convert days since 1970-01-01 back to (year, month, day).

    Works on a March-based year starting 0000-03-01 so the leap day falls at
    the end of each four year cycle.
    """
    zero_day = epoch_day + DAYS_0000_TO_1970 - 60

    adjust = 0
    if zero_day < 0:
        # Shift negative days forward by whole 400 year cycles
        adjust_cycles = -(-(zero_day + 1) // DAYS_PER_CYCLE) - 1
        adjust = adjust_cycles * 400
        zero_day -= adjust_cycles * DAYS_PER_CYCLE

    year_est = (400 * zero_day + 591) // DAYS_PER_CYCLE
    doy_est = zero_day - (
        365 * year_est + year_est // 4 - year_est // 100 + year_est // 400
    )
    if doy_est < 0:
        year_est -= 1
        doy_est = zero_day - (
            365 * year_est + year_est // 4 - year_est // 100 + year_est // 400
        )
    year_est += adjust

    march_month0 = (doy_est * 5 + 2) // 153
    year = year_est + march_month0 // 10
    month = (march_month0 + 2) % 12 + 1
    day = doy_est - (march_month0 * 306 + 5) // 10 + 1
    return year, month, day


def day_of_week(year: int, month: int, day: int) -> int:
    """Return the weekday of a valid date, Sunday = 0 through Saturday = 6."""
    last_year = year - 1
    total = last_year * 365 + last_year // 4 - last_year // 100 + last_year // 400
    total += _DAYS_BEFORE_MONTH[month - 1]
    if month > 2 and is_leap_year(year):
        total += 1
    total += day - 1
    # 0001-01-01 was a Monday
    return (total + 1) % 7


def normalize_date(year: int, month: int, day: int) -> tuple[int, int, int]:
    """Fold out-of-range month and day fields back into a valid date.

    A valid triple comes back unchanged. Otherwise the month overflow moves
    into the year first, then the day overflow is resolved by a round trip
    through the epoch day.
    """
    if is_valid_date(year, month, day):
        return year, month, day
    year, month0 = divmod(proleptic_month(year, month), 12)
    return from_epoch_day(epoch_day_of(year, month0 + 1, day))
