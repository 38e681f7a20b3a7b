"""Core calendar components: moments, zones, locales and the zoned calendar view."""

from .calendar import (
    CalendarField,
    ZonedCalendar,
    adjust,
    get_field,
    lenient_datetime,
    week_fields,
    week_number,
    week_one_start,
)
from .errors import CalperiodError, InvalidArgumentError, InvalidGranularityError, UnsupportedOperationError
from .parsing import (
    from_fields,
    pad_date_time_zero,
    to_date_string,
    to_date_time_string,
    to_datetime,
    to_datetime_parts,
    to_time_string,
    truncate_to_minute,
)
from .time import (
    available_timezones,
    ensure_timezone,
    format_utc_iso8601,
    get_current_utc,
    moment_from_epoch_millis,
    parse_utc_iso8601,
    reset_available_timezones_cache,
    timezone_for_gmt_offset,
    to_epoch_millis,
    to_locale,
    to_timezone,
)

__all__ = [
    # Calendar view
    "CalendarField",
    "ZonedCalendar",
    "adjust",
    "get_field",
    "lenient_datetime",
    "week_fields",
    "week_number",
    "week_one_start",
    # Errors
    "CalperiodError",
    "InvalidArgumentError",
    "InvalidGranularityError",
    "UnsupportedOperationError",
    # Free-text parsing
    "from_fields",
    "pad_date_time_zero",
    "to_date_string",
    "to_date_time_string",
    "to_datetime",
    "to_datetime_parts",
    "to_time_string",
    "truncate_to_minute",
    # Moments and zones
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
