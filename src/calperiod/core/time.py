"""Moments, time zones and locales.

Provides the conventions every period computation relies on:
- a moment is a timezone-aware datetime (naive values are read as UTC)
- epoch millisecond (+ nanosecond remainder) conversions
- zone and locale resolution against the configured defaults
- the process-wide cache of available time zones
"""

from __future__ import annotations

import threading
from datetime import datetime, timedelta, timezone, tzinfo

import pytz
from babel import Locale, UnknownLocaleError

from ..config.settings import get_settings
from ..observability import get_logger
from .errors import InvalidArgumentError

__all__ = [
    "available_timezones",
    "ensure_timezone",
    "format_utc_iso8601",
    "get_current_utc",
    "moment_from_epoch_millis",
    "parse_utc_iso8601",
    "reset_available_timezones_cache",
    "timezone_for_gmt_offset",
    "to_epoch_millis",
    "to_locale",
    "to_timezone",
]

log = get_logger("calendar")

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Etc/GMT zones exist from Etc/GMT-14 to Etc/GMT+12
MIN_GMT_OFFSET = -14
MAX_GMT_OFFSET = 12


def get_current_utc() -> datetime:
    """Get current time in UTC.

    Returns
    -------
    datetime
        Current time in UTC with timezone info
    """
    return datetime.now(timezone.utc)


def ensure_timezone(dt: datetime, tz: str | tzinfo | None = None) -> datetime:
    """Ensure datetime has timezone information.

    Parameters
    ----------
    dt
        Datetime (may be naive)
    tz
        Timezone to assume if dt is naive (default: UTC)

    Returns
    -------
    datetime
        Timezone-aware datetime
    """
    if dt.tzinfo is not None:
        return dt

    if tz is None:
        return dt.replace(tzinfo=timezone.utc)

    zone = to_timezone(tz) if isinstance(tz, str) else tz
    if hasattr(zone, "localize"):
        return zone.localize(dt)
    return dt.replace(tzinfo=zone)


def moment_from_epoch_millis(millis: int, nanos: int = 0) -> datetime:
    """Build a UTC moment from epoch milliseconds.

    Parameters
    ----------
    millis
        Milliseconds since 1970-01-01T00:00:00Z
    nanos
        Sub-millisecond remainder in nanoseconds (0..999999), truncated to
        microsecond precision

    Returns
    -------
    datetime
        Aware datetime in UTC
    """
    if not 0 <= nanos < 1_000_000:
        raise InvalidArgumentError(f"Sub-millisecond nanos out of range: {nanos}")
    return EPOCH + timedelta(milliseconds=millis, microseconds=nanos // 1000)


def to_epoch_millis(moment: datetime) -> int:
    """Return whole milliseconds since the epoch for a moment (floored)."""
    delta = ensure_timezone(moment) - EPOCH
    return (delta.days * 86_400 + delta.seconds) * 1000 + delta.microseconds // 1000


def format_utc_iso8601(dt: datetime) -> str:
    """Format datetime as ISO-8601 UTC string.

    Parameters
    ----------
    dt
        Datetime to format (naive values are read as UTC)

    Returns
    -------
    str
        ISO-8601 UTC string (e.g., "2024-03-15T00:00:00+00:00")
    """
    return ensure_timezone(dt).astimezone(timezone.utc).isoformat()


def parse_utc_iso8601(iso_string: str) -> datetime:
    """Parse ISO-8601 string to UTC datetime.

    Parameters
    ----------
    iso_string
        ISO-8601 formatted string; a trailing ``Z`` is accepted

    Returns
    -------
    datetime
        Datetime in UTC

    Raises
    ------
    ValueError
        If string is not valid ISO-8601

    Example
    -------
    >>> parse_utc_iso8601("2024-03-15T14:30:00+02:00").hour
    12
    """
    if iso_string.endswith("Z"):
        iso_string = iso_string[:-1] + "+00:00"

    return ensure_timezone(datetime.fromisoformat(iso_string)).astimezone(timezone.utc)


def to_timezone(tz: str | tzinfo | None = None) -> tzinfo:
    """Resolve a zone id (or zone) to a pytz zone.

    ``None`` or an empty id resolves to the configured default zone.

    Raises
    ------
    InvalidArgumentError
        If the id is not a known zone
    """
    if tz is None or tz == "":
        tz = get_settings().default_timezone
    if not isinstance(tz, str):
        return tz
    try:
        return pytz.timezone(tz)
    except pytz.UnknownTimeZoneError as exc:
        raise InvalidArgumentError(f"Invalid timezone: {tz}") from exc


def to_locale(locale: str | Locale | None = None) -> Locale:
    """Resolve a locale identifier (``en_US``, ``fr-FR``) to a babel Locale.

    ``None`` resolves to the configured default locale.
    """
    if locale is None or locale == "":
        locale = get_settings().default_locale
    if isinstance(locale, Locale):
        return locale
    try:
        return Locale.parse(locale, sep="-" if "-" in locale else "_")
    except (UnknownLocaleError, ValueError) as exc:
        raise InvalidArgumentError(f"Invalid locale: {locale}") from exc


def timezone_for_gmt_offset(gmt_offset: int) -> tzinfo:
    """Return the ``Etc/GMT`` zone for a whole-hour offset.

    The offset uses the POSIX sign convention of the ``Etc`` zone names:
    ``5`` gives ``Etc/GMT+5`` (five hours west of Greenwich, UTC-05:00).

    Raises
    ------
    InvalidArgumentError
        If the offset is outside -14..+12
    """
    if gmt_offset > MAX_GMT_OFFSET or gmt_offset < MIN_GMT_OFFSET:
        raise InvalidArgumentError(f"Invalid GMT offset: {gmt_offset}")
    prefix = "Etc/GMT+" if gmt_offset > 0 else "Etc/GMT"
    return pytz.timezone(f"{prefix}{gmt_offset}")


# The one piece of shared state: built once, then read-only.
_available_timezones: tuple[tzinfo, ...] | None = None
_available_timezones_lock = threading.Lock()


def _build_available_timezones() -> tuple[tzinfo, ...]:
    tz_ids = get_settings().available_timezones or pytz.all_timezones
    zones = tuple(pytz.timezone(tz_id) for tz_id in tz_ids)
    log.debug("Built available time zone list", count=len(zones), restricted=bool(get_settings().available_timezones))
    return zones


def available_timezones() -> tuple[tzinfo, ...]:
    """Return the available time zones.

    The list is taken from ``CALPERIOD_AVAILABLE_TIMEZONES`` when configured,
    otherwise it is every zone pytz knows. It is computed on first access and
    the same tuple is returned afterwards.
    """
    global _available_timezones
    zones = _available_timezones
    if zones is None:
        with _available_timezones_lock:
            if _available_timezones is None:
                _available_timezones = _build_available_timezones()
            zones = _available_timezones
    return zones


def reset_available_timezones_cache() -> None:
    """Drop the cached zone list (used after changing settings)."""
    global _available_timezones
    with _available_timezones_lock:
        _available_timezones = None
