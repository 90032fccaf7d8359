"""Bridge between caldate values and the host's datetime services.

The arithmetic core never touches the system clock, the zone database or
text. Those come from the standard library's datetime/zoneinfo and from
python-dateutil's ISO 8601 parser, and always go through this module, with
the zone passed explicitly.

Values cross the boundary as a 7-tuple of integers:
(year, month, day, hour, minute, second, nanosecond).
"""

import logging
from datetime import date, datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dateutil import parser as dateutil_parser

from caldate.errors import ConversionError
from caldate.util import DEFAULT_TZ, NANOS_PER_MICROSECOND

logger = logging.getLogger(__name__)

Fields = tuple[int, int, int, int, int, int, int]


def zone(tz: str) -> ZoneInfo:
    """Resolve an IANA zone name (e.g. "UTC", "US/Pacific")."""
    try:
        return ZoneInfo(tz)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ConversionError(f"Unknown time zone: {tz!r}") from e


def now(tz: str = DEFAULT_TZ) -> Fields:
    """Read the current wall-clock fields in the given zone."""
    return fields_of(datetime.now(zone(tz)))


def fields_of(value: date, tz: str | None = None) -> Fields:
    """Split a datetime (or date) into caldate fields.

    Aware datetimes are converted into ``tz`` first when it is given.
    Naive datetimes are read as wall time. A plain date reads as midnight.
    """
    if not isinstance(value, datetime):
        return value.year, value.month, value.day, 0, 0, 0, 0
    if tz is not None and value.tzinfo is not None:
        try:
            value = value.astimezone(zone(tz))
        except OverflowError as e:
            logger.debug("Cannot move %r into %s: %s", value, tz, e)
            raise ConversionError(f"Cannot convert {value!r} to {tz}") from e
    return (
        value.year,
        value.month,
        value.day,
        value.hour,
        value.minute,
        value.second,
        value.microsecond * NANOS_PER_MICROSECOND,
    )


def assemble(fields: Fields, tz: str | None = None) -> datetime:
    """Build a host datetime from caldate fields.

    The result is naive when ``tz`` is None. Nanoseconds are truncated to
    microseconds.

    Raises:
        ConversionError: If the host cannot represent the fields, e.g. a year
            outside 1..9999.
    """
    tzinfo = None if tz is None else zone(tz)
    year, month, day, hour, minute, second, nanosecond = fields
    try:
        return datetime(
            year,
            month,
            day,
            hour,
            minute,
            second,
            nanosecond // NANOS_PER_MICROSECOND,
            tzinfo=tzinfo,
        )
    except (ValueError, OverflowError) as e:
        logger.debug("Cannot assemble datetime from %r: %s", fields, e)
        raise ConversionError(
            f"Cannot represent {year}-{month:02d}-{day:02d} "
            f"{hour:02d}:{minute:02d}:{second:02d} as a datetime: {e}"
        ) from e


def parse(text: str, fmt: str | None = None) -> datetime | None:
    """Parse text into a datetime, or return None if it does not match.

    Without ``fmt`` the text must be ISO 8601 (e.g. "2007-12-03" or
    "2007-12-03T10:15:30.217"). With ``fmt`` it must match the strptime
    pattern.
    """
    try:
        if fmt is None:
            return dateutil_parser.isoparse(text)
        return datetime.strptime(text, fmt)
    except (ValueError, OverflowError) as e:
        logger.debug("Cannot parse %r as %s: %s", text, fmt or "ISO 8601", e)
        return None
