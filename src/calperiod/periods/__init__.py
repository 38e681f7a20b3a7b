"""Period computations: unit boundaries, labels, lookbacks and durations."""

from .boundaries import (
    day_end,
    day_start,
    hour_end,
    hour_start,
    month_end,
    month_start,
    period_interval,
    period_interval_with_formatter,
    quarter_end,
    quarter_start,
    semester_end,
    semester_start,
    week_end,
    week_start,
    year_end,
    year_start,
)
from .formatters import DerivedPeriodFormatter, PatternFormatter, PeriodFormatter, WeekFormatter, formatter_for
from .granularity import (
    DEFAULT_LOOKBACK_COUNTS,
    TIME_INTERVALS,
    Granularity,
    default_lookback_count,
    is_supported_granularity,
    time_intervals,
    to_granularity,
)
from .humanize import format_interval, interval_in_days, interval_in_hours, interval_millis
from .interval import Interval, PeriodOptions
from .lookback import lookback, resolve_lookback_count
from .names import month_names, weekday_names

__all__ = [
    # Boundaries
    "day_end",
    "day_start",
    "hour_end",
    "hour_start",
    "month_end",
    "month_start",
    "period_interval",
    "period_interval_with_formatter",
    "quarter_end",
    "quarter_start",
    "semester_end",
    "semester_start",
    "week_end",
    "week_start",
    "year_end",
    "year_start",
    # Formatters
    "DerivedPeriodFormatter",
    "PatternFormatter",
    "PeriodFormatter",
    "WeekFormatter",
    "formatter_for",
    # Granularities
    "DEFAULT_LOOKBACK_COUNTS",
    "TIME_INTERVALS",
    "Granularity",
    "default_lookback_count",
    "is_supported_granularity",
    "time_intervals",
    "to_granularity",
    # Durations
    "format_interval",
    "interval_in_days",
    "interval_in_hours",
    "interval_millis",
    # Values
    "Interval",
    "PeriodOptions",
    # Lookback
    "lookback",
    "resolve_lookback_count",
    # Names
    "month_names",
    "weekday_names",
]
