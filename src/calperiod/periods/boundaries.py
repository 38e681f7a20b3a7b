"""Begin and end instants of calendar units.

Every function takes a moment and returns an aware datetime in the requested
zone (default: configured zone). Starts have all smaller fields at their
minimum; ends are the last whole second of the unit with sub-second cleared.

Example
-------
>>> from datetime import datetime, timezone
>>> month_end(datetime(2024, 2, 10, tzinfo=timezone.utc), timezone="UTC").isoformat()
'2024-02-29T23:59:59+00:00'
"""

from __future__ import annotations

from datetime import datetime, tzinfo

from babel import Locale

from ..core.calendar import CalendarField, ZonedCalendar
from .formatters import formatter_for
from .granularity import Granularity, to_granularity
from .interval import Interval, PeriodOptions

__all__ = [
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
]

QUARTER_MONTHS = 3
SEMESTER_MONTHS = 6


def _view(moment: datetime | None, timezone: str | tzinfo | None, locale: str | Locale | None) -> ZonedCalendar:
    return ZonedCalendar.of(moment, timezone, locale)


def _start_of_day(view: ZonedCalendar) -> ZonedCalendar:
    return view.with_fields(hour=0, minute=0, second=0, microsecond=0)


def _end_of_day(view: ZonedCalendar) -> ZonedCalendar:
    return view.with_fields(hour=23, minute=59, second=59, microsecond=0)


# Hour


def hour_start(
    moment: datetime | None = None,
    hours_later: int = 0,
    *,
    timezone: str | tzinfo | None = None,
    locale: str | Locale | None = None,
) -> datetime:
    """Return the first instant of the hour containing ``moment``, shifted by ``hours_later``."""
    view = _view(moment, timezone, locale).with_fields(minute=0, second=0, microsecond=0)
    return view.add(CalendarField.HOUR, hours_later).moment


def hour_end(
    moment: datetime | None = None,
    hours_later: int = 0,
    *,
    timezone: str | tzinfo | None = None,
    locale: str | Locale | None = None,
) -> datetime:
    """Return ``HH:59:59`` of the hour containing ``moment``, shifted by ``hours_later``."""
    view = _view(moment, timezone, locale).with_fields(minute=59, second=59, microsecond=0)
    return view.add(CalendarField.HOUR, hours_later).moment


# Day


def day_start(
    moment: datetime | None = None,
    days_later: int = 0,
    *,
    timezone: str | tzinfo | None = None,
    locale: str | Locale | None = None,
) -> datetime:
    """Return midnight of the day containing ``moment``, shifted by ``days_later``."""
    view = _start_of_day(_view(moment, timezone, locale))
    return view.add(CalendarField.DAY_OF_MONTH, days_later).moment


def day_end(
    moment: datetime | None = None,
    days_later: int = 0,
    *,
    timezone: str | tzinfo | None = None,
    locale: str | Locale | None = None,
) -> datetime:
    """Return ``23:59:59`` of the day containing ``moment``, shifted by ``days_later``.

    On DST transition days the span from :func:`day_start` is 23 or 25 hours
    minus one second instead of 86399 seconds.
    """
    view = _end_of_day(_view(moment, timezone, locale))
    return view.add(CalendarField.DAY_OF_MONTH, days_later).moment


# Week


def week_start(
    moment: datetime | None = None,
    days_later: int = 0,
    weeks_later: int = 0,
    *,
    timezone: str | tzinfo | None = None,
    locale: str | Locale | None = None,
) -> datetime:
    """Return the first instant of the locale week containing ``moment``.

    Parameters
    ----------
    moment
        Reference moment (default: now)
    days_later
        Days added to the reference day before snapping to the week start
    weeks_later
        Whole weeks added after snapping
    timezone
        Zone id or zone (default: configured zone)
    locale
        Locale whose first day of week is used (default: configured locale)
    """
    view = _start_of_day(_view(moment, timezone, locale)).add(CalendarField.DAY_OF_MONTH, days_later)
    view = view.set(CalendarField.DAY_OF_WEEK, view.first_day_of_week)
    return view.add(CalendarField.WEEK_OF_YEAR, weeks_later).moment


def week_end(
    moment: datetime | None = None,
    *,
    timezone: str | tzinfo | None = None,
    locale: str | Locale | None = None,
) -> datetime:
    """Return the last second of the locale week containing ``moment``."""
    begin = week_start(moment, timezone=timezone, locale=locale)
    return day_end(begin, 6, timezone=timezone, locale=locale)


# Month


def month_start(
    moment: datetime | None = None,
    days_later: int = 0,
    months_later: int = 0,
    *,
    timezone: str | tzinfo | None = None,
    locale: str | Locale | None = None,
) -> datetime:
    """Return midnight of the first day of the month, shifted by months then days."""
    view = _view(moment, timezone, locale).with_fields(day=1, hour=0, minute=0, second=0, microsecond=0)
    view = view.add(CalendarField.MONTH, months_later)
    return view.add(CalendarField.DAY_OF_MONTH, days_later).moment


def month_end(
    moment: datetime | None = None,
    *,
    timezone: str | tzinfo | None = None,
    locale: str | Locale | None = None,
) -> datetime:
    """Return ``23:59:59`` of the last actual day of the month containing ``moment``."""
    view = _view(moment, timezone, locale)
    view = view.with_fields(day=view.actual_maximum(CalendarField.DAY_OF_MONTH))
    return _end_of_day(view).moment


# Quarter and semester


def _span_start(
    moment: datetime | None,
    span: int,
    later: int,
    timezone: str | tzinfo | None,
    locale: str | Locale | None,
) -> datetime:
    view = _view(moment, timezone, locale)
    index = view.month_index // span
    view = view.with_fields(month=index * span + 1, day=1, hour=0, minute=0, second=0, microsecond=0)
    return view.add(CalendarField.MONTH, later * span).moment


def _span_end(
    moment: datetime | None,
    span: int,
    timezone: str | tzinfo | None,
    locale: str | Locale | None,
) -> datetime:
    begin = _span_start(moment, span, 0, timezone, locale)
    last_month = month_start(begin, 0, span - 1, timezone=timezone, locale=locale)
    return month_end(last_month, timezone=timezone, locale=locale)


def quarter_start(
    moment: datetime | None = None,
    quarters_later: int = 0,
    *,
    timezone: str | tzinfo | None = None,
    locale: str | Locale | None = None,
) -> datetime:
    """Return the first instant of the calendar quarter (Jan, Apr, Jul, Oct)."""
    return _span_start(moment, QUARTER_MONTHS, quarters_later, timezone, locale)


def quarter_end(
    moment: datetime | None = None,
    *,
    timezone: str | tzinfo | None = None,
    locale: str | Locale | None = None,
) -> datetime:
    """Return the last second of the calendar quarter containing ``moment``."""
    return _span_end(moment, QUARTER_MONTHS, timezone, locale)


def semester_start(
    moment: datetime | None = None,
    semesters_later: int = 0,
    *,
    timezone: str | tzinfo | None = None,
    locale: str | Locale | None = None,
) -> datetime:
    """Return the first instant of the half year (January or July)."""
    return _span_start(moment, SEMESTER_MONTHS, semesters_later, timezone, locale)


def semester_end(
    moment: datetime | None = None,
    *,
    timezone: str | tzinfo | None = None,
    locale: str | Locale | None = None,
) -> datetime:
    """Return the last second of the half year containing ``moment``."""
    return _span_end(moment, SEMESTER_MONTHS, timezone, locale)


# Year


def year_start(
    moment: datetime | None = None,
    days_later: int = 0,
    months_later: int = 0,
    years_later: int = 0,
    *,
    timezone: str | tzinfo | None = None,
    locale: str | Locale | None = None,
) -> datetime:
    """Return midnight of January 1st, shifted by years, then months, then days."""
    view = _view(moment, timezone, locale).with_fields(month=1, day=1, hour=0, minute=0, second=0, microsecond=0)
    view = view.add(CalendarField.YEAR, years_later)
    view = view.add(CalendarField.MONTH, months_later)
    return view.add(CalendarField.DAY_OF_MONTH, days_later).moment


def year_end(
    moment: datetime | None = None,
    *,
    timezone: str | tzinfo | None = None,
    locale: str | Locale | None = None,
) -> datetime:
    """Return ``December 31st 23:59:59`` of the year containing ``moment``."""
    view = _view(moment, timezone, locale).with_fields(month=12, day=1)
    return month_end(view.moment, timezone=timezone, locale=locale)


# Intervals


def period_interval(
    granularity: str | Granularity,
    reference: datetime | None = None,
    options: PeriodOptions | None = None,
) -> Interval:
    """Compute the interval of one granularity unit.

    Parameters
    ----------
    granularity
        One of ``hour, day, week, month, quarter, semester, year``
    reference
        Moment inside the unit of interest (default: now)
    options
        Shift, offsets, zone and locale (default: no shift, configured zone
        and locale)

    Returns
    -------
    Interval
        Begin and end of the unit containing ``reference``, moved by
        ``options.shift`` units

    Raises
    ------
    InvalidGranularityError
        If ``granularity`` is not supported; nothing is computed

    Example
    -------
    >>> from datetime import datetime
    >>> interval = period_interval("quarter", datetime(2024, 6, 10), PeriodOptions(timezone="UTC"))
    >>> interval.begin.isoformat(), interval.end.isoformat()
    ('2024-04-01T00:00:00+00:00', '2024-06-30T23:59:59+00:00')
    """
    unit = to_granularity(granularity)
    opts = options or PeriodOptions()
    zone, loc, shift = opts.timezone, opts.locale, opts.shift
    reference = _view(reference, zone, loc).moment

    if unit is Granularity.HOUR:
        begin = hour_start(reference, shift, timezone=zone, locale=loc)
        end = hour_end(begin, timezone=zone, locale=loc)
    elif unit is Granularity.DAY:
        begin = day_start(reference, shift, timezone=zone, locale=loc)
        end = day_end(begin, timezone=zone, locale=loc)
    elif unit is Granularity.WEEK:
        begin = week_start(reference, opts.day_offset, shift, timezone=zone, locale=loc)
        end = week_end(begin, timezone=zone, locale=loc)
    elif unit is Granularity.MONTH:
        begin = month_start(reference, opts.day_offset, shift, timezone=zone, locale=loc)
        end = month_end(begin, timezone=zone, locale=loc)
    elif unit is Granularity.QUARTER:
        begin = quarter_start(reference, shift, timezone=zone, locale=loc)
        end = quarter_end(begin, timezone=zone, locale=loc)
    elif unit is Granularity.SEMESTER:
        begin = semester_start(reference, shift, timezone=zone, locale=loc)
        end = semester_end(begin, timezone=zone, locale=loc)
    else:
        begin = year_start(reference, opts.day_offset, opts.month_offset, shift, timezone=zone, locale=loc)
        end = year_end(begin, timezone=zone, locale=loc)

    return Interval(begin=begin, end=end, granularity=unit)


def period_interval_with_formatter(
    granularity: str | Granularity,
    reference: datetime | None = None,
    options: PeriodOptions | None = None,
) -> Interval:
    """Like :func:`period_interval`, with the granularity's formatter attached."""
    opts = options or PeriodOptions()
    interval = period_interval(granularity, reference, opts)
    return interval.with_formatter(formatter_for(interval.granularity, locale=opts.locale, timezone=opts.timezone))
