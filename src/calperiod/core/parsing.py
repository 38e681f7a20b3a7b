"""Permissive free-text date/time helpers.

Parsing here is for validation flows that must not raise: a malformed string
(wrong separators, non-numeric fields) yields ``None``. The reason is only
logged at DEBUG level.
"""

from __future__ import annotations

from datetime import datetime, tzinfo

from babel import Locale
from babel.dates import format_datetime

from ..observability import get_logger
from .calendar import ZonedCalendar, lenient_datetime
from .errors import InvalidArgumentError
from .time import to_timezone

__all__ = [
    "DATE_FORMAT",
    "DATE_TIME_FORMAT",
    "TIME_FORMAT",
    "ZERO_DATE_TIME_FORMAT",
    "from_fields",
    "pad_date_time_zero",
    "to_date_string",
    "to_date_time_string",
    "to_datetime",
    "to_datetime_parts",
    "to_time_string",
    "truncate_to_minute",
]

log = get_logger("parsing")

DATE_FORMAT = "yyyy-MM-dd"
DATE_TIME_FORMAT = "yyyy-MM-dd HH:mm:ss.SSS"
TIME_FORMAT = "HH:mm:ss"
ZERO_DATE_FORMAT = "0000-00-00"
ZERO_DATE_TIME_FORMAT = "0000-00-00 00:00:00.000"
ZERO_TIME_FORMAT = "00:00:00"


def from_fields(
    month: int | str,
    day: int | str,
    year: int | str,
    hour: int | str = 0,
    minute: int | str = 0,
    second: int | str = 0,
    timezone: str | tzinfo | None = None,
) -> datetime | None:
    """Build a moment from separate fields, interpreted in ``timezone``.

    Fields may be strings. Out-of-range values carry (month 13 is January of
    the next year); non-numeric values give ``None``.
    """
    try:
        values = [int(value) for value in (month, day, year, hour, minute, second)]
    except (TypeError, ValueError) as exc:
        log.debug("Could not convert to date: {}", exc)
        return None

    month, day, year, hour, minute, second = values
    try:
        wall = lenient_datetime(year, month, day, hour, minute, second)
    except InvalidArgumentError as exc:
        log.debug("Could not convert to date: {}", exc)
        return None

    return _localize(wall, to_timezone(timezone))


def _localize(wall: datetime, zone: tzinfo) -> datetime:
    if hasattr(zone, "localize"):
        return zone.normalize(zone.localize(wall))
    return wall.replace(tzinfo=zone)


def to_datetime_parts(
    date_text: str | None,
    time_text: str | None,
    timezone: str | tzinfo | None = None,
) -> datetime | None:
    """Parse ``MM/DD/YYYY`` and ``HH:MM`` or ``HH:MM:SS`` strings into a moment.

    Returns
    -------
    datetime | None
        The moment, or ``None`` when either string is malformed
    """
    if date_text is None or time_text is None:
        return None

    date_parts = date_text.split("/")
    if len(date_parts) != 3 or not date_parts[0]:
        log.debug("Malformed date string: {!r}", date_text)
        return None

    time_parts = time_text.split(":")
    if len(time_parts) not in (2, 3) or not time_parts[0]:
        log.debug("Malformed time string: {!r}", time_text)
        return None
    if len(time_parts) == 2:
        time_parts.append("0")

    month, day, year = date_parts
    hour, minute, second = time_parts
    return from_fields(month, day, year, hour, minute, second, timezone=timezone)


def to_datetime(text: str | None, timezone: str | tzinfo | None = None) -> datetime | None:
    """Parse ``MM/DD/YYYY HH:MM[:SS]`` into a moment, or ``None`` if malformed."""
    if text is None:
        return None
    if " " not in text:
        log.debug("Malformed date/time string (no separator): {!r}", text)
        return None
    date_text, time_text = text.split(" ", 1)
    return to_datetime_parts(date_text, time_text, timezone=timezone)


def to_date_string(
    moment: datetime | None,
    pattern: str = "MM/dd/yyyy",
    timezone: str | tzinfo | None = None,
    locale: str | Locale | None = None,
) -> str:
    """Render a moment with an LDML pattern; ``None`` renders as ``""``."""
    if moment is None:
        return ""
    calendar = ZonedCalendar.of(moment, timezone, locale)
    return format_datetime(calendar.moment, pattern, tzinfo=calendar.zone, locale=calendar.locale)


def to_time_string(hour: int, minute: int, second: int) -> str:
    """Render ``HH:MM:SS``, or ``HH:MM`` when the seconds are zero."""
    if second == 0:
        return f"{hour:02d}:{minute:02d}"
    return f"{hour:02d}:{minute:02d}:{second:02d}"


def to_date_time_string(moment: datetime | None, timezone: str | tzinfo | None = None) -> str:
    """Render ``MM/dd/yyyy HH:MM[:SS]``; ``None`` renders as ``""``."""
    if moment is None:
        return ""
    calendar = ZonedCalendar.of(moment, timezone)
    local = calendar.moment
    return f"{to_date_string(local, timezone=calendar.zone)} {to_time_string(local.hour, local.minute, local.second)}"


def pad_date_time_zero(text: str | None) -> str | None:
    """Complete a partial ``yyyy-MM-dd HH:mm:ss.SSS`` string with zeros.

    Example
    -------
    >>> pad_date_time_zero("2024-03-15 13")
    '2024-03-15 13:00:00.000'
    """
    if text is None or len(text) > len(ZERO_DATE_TIME_FORMAT):
        return text
    return text + ZERO_DATE_TIME_FORMAT[len(text):]


def truncate_to_minute(moment: datetime | None) -> datetime | None:
    """Drop seconds and sub-second precision."""
    if moment is None:
        return None
    return moment.replace(second=0, microsecond=0)
