from .calendar import (
    day_of_week,
    epoch_day_of,
    from_epoch_day,
    is_leap_year,
    length_of_month,
    length_of_year,
    normalize_date,
)
from .errors import CaldateError, ConversionError, UnsupportedUnitError
from .local_date import LocalDate
from .local_datetime import LocalDateTime
from .local_time import LocalTime
from .period import Period
from .util import DEFAULT_TZ, MAX_YEAR, MIN_YEAR

__all__ = [
    "LocalDate",
    "LocalTime",
    "LocalDateTime",
    "Period",
    "CaldateError",
    "ConversionError",
    "UnsupportedUnitError",
    "day_of_week",
    "epoch_day_of",
    "from_epoch_day",
    "is_leap_year",
    "length_of_month",
    "length_of_year",
    "normalize_date",
    "DEFAULT_TZ",
    "MIN_YEAR",
    "MAX_YEAR",
]
