"""Reference points for "last N units" reporting windows."""

from __future__ import annotations

from datetime import datetime

from ..core.calendar import CalendarField, ZonedCalendar
from ..observability import get_logger
from .granularity import Granularity, default_lookback_count, to_granularity
from .interval import PeriodOptions

__all__ = ["lookback", "resolve_lookback_count"]

log = get_logger("lookback")

# Months stepped back per unit for the month-based granularities
_MONTH_SPANS = {
    Granularity.MONTH: 1,
    Granularity.QUARTER: 3,
    Granularity.SEMESTER: 6,
}


def resolve_lookback_count(granularity: str | Granularity, count: int | None = None) -> int:
    """Return ``count``, or the granularity default when it is missing or below 1."""
    unit = to_granularity(granularity)
    if count is None or count < 1:
        return default_lookback_count(unit)
    return count


def lookback(
    granularity: str | Granularity,
    count: int | None = None,
    reference: datetime | None = None,
    options: PeriodOptions | None = None,
) -> datetime:
    """Return the moment ``count - 1`` units before ``reference``.

    A count of 1 is the current unit. Hour and day return the decremented
    instant as is. Week snaps to the locale's first day of week, month,
    quarter and semester to the first of the month, and year to January 1st;
    snapping keeps the time of day.

    Parameters
    ----------
    granularity
        One of ``hour, day, week, month, quarter, semester, year``
    count
        Units to cover including the current one; ``None`` or less than 1
        selects the granularity default
    reference
        Moment to look back from (default: now)
    options
        Zone and locale; shift and offsets are not used

    Raises
    ------
    InvalidGranularityError
        If ``granularity`` is not supported

    Example
    -------
    >>> from datetime import datetime
    >>> lookback("month", 3, datetime(2024, 5, 20, 8), PeriodOptions(timezone="UTC")).isoformat()
    '2024-03-01T08:00:00+00:00'
    """
    unit = to_granularity(granularity)
    effective = resolve_lookback_count(unit, count)
    offset = effective - 1
    opts = options or PeriodOptions()
    view = ZonedCalendar.of(reference, opts.timezone, opts.locale)

    if unit is Granularity.HOUR:
        view = view.set(CalendarField.HOUR, view.get(CalendarField.HOUR) - offset)
    elif unit is Granularity.DAY:
        view = view.set(CalendarField.DAY_OF_YEAR, view.get(CalendarField.DAY_OF_YEAR) - offset)
    elif unit is Granularity.WEEK:
        view = view.set(CalendarField.DAY_OF_WEEK, view.first_day_of_week)
        view = view.add(CalendarField.WEEK_OF_YEAR, -offset)
    elif unit in _MONTH_SPANS:
        view = view.set(CalendarField.DAY_OF_MONTH, 1)
        view = view.set(CalendarField.MONTH, view.get(CalendarField.MONTH) - offset * _MONTH_SPANS[unit])
    else:
        view = view.set(CalendarField.DAY_OF_YEAR, 1)
        view = view.set(CalendarField.YEAR, view.get(CalendarField.YEAR) - offset)

    log.debug("Resolved lookback", granularity=unit.value, count=effective, moment=view.moment.isoformat())
    return view.moment
