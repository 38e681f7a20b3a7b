"""calperiod - calendar-aware period and interval computations.

Derives begin/end instants of hour, day, week, month, quarter, semester and
year units for a moment in a given time zone and locale, and lookback
reference points for reporting windows.

Example
-------
>>> from datetime import datetime
>>> from calperiod import PeriodOptions, period_interval_with_formatter
>>> interval = period_interval_with_formatter("quarter", datetime(2024, 6, 10), PeriodOptions(timezone="UTC"))
>>> interval.label
'2024-2T'
"""

from loguru import logger

from .core.calendar import CalendarField, ZonedCalendar, adjust, get_field, week_number
from .core.errors import CalperiodError, InvalidArgumentError, InvalidGranularityError, UnsupportedOperationError
from .core.time import (
    available_timezones,
    moment_from_epoch_millis,
    timezone_for_gmt_offset,
    to_epoch_millis,
    to_locale,
    to_timezone,
)
from .periods import (
    Granularity,
    Interval,
    PeriodFormatter,
    PeriodOptions,
    default_lookback_count,
    format_interval,
    formatter_for,
    is_supported_granularity,
    lookback,
    month_names,
    period_interval,
    period_interval_with_formatter,
    time_intervals,
    weekday_names,
)

logger.disable("calperiod")

__version__ = "1.0.0"

__all__ = [
    "CalendarField",
    "CalperiodError",
    "Granularity",
    "Interval",
    "InvalidArgumentError",
    "InvalidGranularityError",
    "PeriodFormatter",
    "PeriodOptions",
    "UnsupportedOperationError",
    "ZonedCalendar",
    "adjust",
    "available_timezones",
    "default_lookback_count",
    "format_interval",
    "formatter_for",
    "get_field",
    "is_supported_granularity",
    "lookback",
    "moment_from_epoch_millis",
    "month_names",
    "period_interval",
    "period_interval_with_formatter",
    "time_intervals",
    "timezone_for_gmt_offset",
    "to_epoch_millis",
    "to_locale",
    "to_timezone",
    "week_number",
    "weekday_names",
]
