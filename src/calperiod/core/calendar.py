"""Zone and locale scoped calendar view.

``ZonedCalendar`` materializes a moment into wall-clock fields of a time zone,
with week rules (first day of week, minimal days in the first week) taken
from the locale's CLDR data. It is an immutable value: ``set``, ``add`` and
``roll`` return new views, so a view can be passed around freely.

Field conventions follow Python rather than any other calendar API:
months are 1-12, ``DAY_OF_WEEK`` is 0 (Monday) to 6 (Sunday). The zero-based
month index used to derive quarters and semesters is ``month_index``.
"""

from __future__ import annotations

import calendar as _stdlib_calendar
from dataclasses import dataclass
from datetime import date, datetime, timedelta, tzinfo
from enum import Enum

import pytz
from babel import Locale
from dateutil.relativedelta import relativedelta

from .errors import InvalidArgumentError
from .time import ensure_timezone, get_current_utc, to_locale, to_timezone

__all__ = [
    "CalendarField",
    "ZonedCalendar",
    "adjust",
    "get_field",
    "lenient_datetime",
    "week_fields",
    "week_number",
    "week_one_start",
]


class CalendarField(str, Enum):
    """Addressable calendar fields."""

    YEAR = "year"
    MONTH = "month"
    DAY_OF_MONTH = "day_of_month"
    DAY_OF_YEAR = "day_of_year"
    DAY_OF_WEEK = "day_of_week"
    WEEK_OF_YEAR = "week_of_year"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"
    MICROSECOND = "microsecond"


# Fields whose add() is measured in elapsed time rather than wall-clock fields
_ELAPSED_UNITS = {
    CalendarField.HOUR: "hours",
    CalendarField.MINUTE: "minutes",
    CalendarField.SECOND: "seconds",
    CalendarField.MICROSECOND: "microseconds",
}

_FIXED_MAXIMUM = {
    CalendarField.MONTH: 12,
    CalendarField.DAY_OF_WEEK: 6,
    CalendarField.HOUR: 23,
    CalendarField.MINUTE: 59,
    CalendarField.SECOND: 59,
    CalendarField.MICROSECOND: 999_999,
    CalendarField.YEAR: 9999,
}


def lenient_datetime(
    year: int,
    month: int = 1,
    day: int = 1,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    microsecond: int = 0,
) -> datetime:
    """Build a naive datetime, carrying out-of-range fields into higher ones.

    ``lenient_datetime(2024, 1, 32)`` is February 1st and
    ``lenient_datetime(2024, 13, 1)`` is January 1st 2025; nothing is clamped.

    Raises
    ------
    InvalidArgumentError
        If the carried result falls outside the supported year range
    """
    try:
        base = datetime(year + (month - 1) // 12, (month - 1) % 12 + 1, 1)
        return base + timedelta(
            days=day - 1,
            hours=hour,
            minutes=minute,
            seconds=second,
            microseconds=microsecond,
        )
    except (OverflowError, ValueError) as exc:
        raise InvalidArgumentError(f"Date fields out of supported range: {exc}") from exc


def week_one_start(year: int, first_day_of_week: int, minimal_days: int) -> date:
    """Return the first day of week 1 of ``year``.

    Week 1 is the first week (starting on ``first_day_of_week``) that has at
    least ``minimal_days`` days in ``year``.
    """
    jan1 = date(year, 1, 1)
    offset = (jan1.weekday() - first_day_of_week) % 7
    start = jan1 - timedelta(days=offset)
    if 7 - offset < minimal_days:
        start += timedelta(days=7)
    return start


def week_fields(day: date, first_day_of_week: int, minimal_days: int) -> tuple[int, int]:
    """Return ``(week_year, week_of_year)`` for a date under locale week rules.

    Example
    -------
    >>> week_fields(date(2021, 1, 1), 0, 4)  # ISO rules: belongs to 2020-W53
    (2020, 53)
    """
    week_year = day.year
    start = week_one_start(week_year, first_day_of_week, minimal_days)
    if day < start:
        week_year -= 1
        start = week_one_start(week_year, first_day_of_week, minimal_days)
    else:
        next_start = week_one_start(week_year + 1, first_day_of_week, minimal_days)
        if day >= next_start:
            week_year += 1
            start = next_start
    return week_year, (day - start).days // 7 + 1


@dataclass(frozen=True)
class ZonedCalendar:
    """Immutable calendar view of a moment in a zone and locale.

    Attributes
    ----------
    moment : datetime
        The instant, expressed in ``zone``
    zone : tzinfo
        Time zone used for field extraction
    locale : Locale
        Locale supplying week rules
    """

    moment: datetime
    zone: tzinfo
    locale: Locale

    @classmethod
    def of(
        cls,
        moment: datetime | None = None,
        timezone: str | tzinfo | None = None,
        locale: str | Locale | None = None,
    ) -> ZonedCalendar:
        """Create a view of ``moment`` (default: now) in a zone and locale.

        ``None`` zone and locale resolve to the configured defaults; naive
        moments are read as UTC.
        """
        zone = to_timezone(timezone)
        moment = get_current_utc() if moment is None else ensure_timezone(moment)
        return cls(moment=moment.astimezone(zone), zone=zone, locale=to_locale(locale))

    # Locale week rules

    @property
    def first_day_of_week(self) -> int:
        """First day of the week for the locale (0=Monday .. 6=Sunday)."""
        return self.locale.first_week_day

    @property
    def minimal_days_in_first_week(self) -> int:
        """Days of a new year a week needs to count as week 1."""
        return self.locale.min_week_days

    # Field access

    @property
    def wall(self) -> datetime:
        """Naive wall-clock datetime in the view's zone."""
        return self.moment.replace(tzinfo=None)

    @property
    def month_index(self) -> int:
        """Zero-based month index (January = 0)."""
        return self.moment.month - 1

    @property
    def week_year(self) -> int:
        """Year the current locale week belongs to."""
        return self._week_fields()[0]

    def _week_fields(self) -> tuple[int, int]:
        return week_fields(self.moment.date(), self.first_day_of_week, self.minimal_days_in_first_week)

    def _week_position(self, day_of_week: int) -> int:
        return (day_of_week - self.first_day_of_week) % 7

    def get(self, field: CalendarField) -> int:
        """Return the value of a field in the view's zone."""
        field = CalendarField(field)
        m = self.moment
        if field is CalendarField.YEAR:
            return m.year
        if field is CalendarField.MONTH:
            return m.month
        if field is CalendarField.DAY_OF_MONTH:
            return m.day
        if field is CalendarField.DAY_OF_YEAR:
            return m.timetuple().tm_yday
        if field is CalendarField.DAY_OF_WEEK:
            return m.weekday()
        if field is CalendarField.WEEK_OF_YEAR:
            return self._week_fields()[1]
        if field is CalendarField.HOUR:
            return m.hour
        if field is CalendarField.MINUTE:
            return m.minute
        if field is CalendarField.SECOND:
            return m.second
        if field is CalendarField.MICROSECOND:
            return m.microsecond
        raise InvalidArgumentError(f"Unknown calendar field: {field!r}")

    def actual_maximum(self, field: CalendarField) -> int:
        """Return the largest value ``field`` can take for the current date."""
        field = CalendarField(field)
        if field is CalendarField.DAY_OF_MONTH:
            return _stdlib_calendar.monthrange(self.moment.year, self.moment.month)[1]
        if field is CalendarField.DAY_OF_YEAR:
            return 366 if _stdlib_calendar.isleap(self.moment.year) else 365
        if field is CalendarField.WEEK_OF_YEAR:
            week_year = self.week_year
            this_start = week_one_start(week_year, self.first_day_of_week, self.minimal_days_in_first_week)
            next_start = week_one_start(week_year + 1, self.first_day_of_week, self.minimal_days_in_first_week)
            return (next_start - this_start).days // 7
        return _FIXED_MAXIMUM[field]

    # Derived views

    def _localize(self, wall: datetime) -> ZonedCalendar:
        """Attach the zone to a wall-clock datetime.

        Ambiguous wall times keep the DST flag of the current moment;
        non-existent ones (inside a spring-forward gap) move forward.
        """
        zone = self.zone
        if not hasattr(zone, "localize"):
            return ZonedCalendar(wall.replace(tzinfo=zone), zone, self.locale)
        try:
            moment = zone.localize(wall, is_dst=None)
        except pytz.NonExistentTimeError:
            moment = zone.normalize(zone.localize(wall, is_dst=False))
        except pytz.AmbiguousTimeError:
            moment = zone.localize(wall, is_dst=bool(self.moment.dst()))
        return ZonedCalendar(moment, zone, self.locale)

    def with_fields(
        self,
        *,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
        hour: int | None = None,
        minute: int | None = None,
        second: int | None = None,
        microsecond: int | None = None,
    ) -> ZonedCalendar:
        """Replace wall-clock fields leniently (overflow carries upward)."""
        w = self.wall
        return self._localize(
            lenient_datetime(
                w.year if year is None else year,
                w.month if month is None else month,
                w.day if day is None else day,
                w.hour if hour is None else hour,
                w.minute if minute is None else minute,
                w.second if second is None else second,
                w.microsecond if microsecond is None else microsecond,
            )
        )

    def set(self, field: CalendarField, value: int) -> ZonedCalendar:
        """Set one field leniently.

        ``DAY_OF_WEEK`` moves within the current locale week and
        ``WEEK_OF_YEAR`` moves by whole weeks, keeping the weekday.
        """
        field = CalendarField(field)
        if field is CalendarField.YEAR:
            return self.with_fields(year=value)
        if field is CalendarField.MONTH:
            return self.with_fields(month=value)
        if field is CalendarField.DAY_OF_MONTH:
            return self.with_fields(day=value)
        if field is CalendarField.DAY_OF_YEAR:
            return self.with_fields(month=1, day=value)
        if field is CalendarField.DAY_OF_WEEK:
            target = (value % 7 - self.first_day_of_week) % 7 + 7 * (value // 7)
            return self.add(CalendarField.DAY_OF_MONTH, target - self._week_position(self.moment.weekday()))
        if field is CalendarField.WEEK_OF_YEAR:
            return self.add(CalendarField.WEEK_OF_YEAR, value - self.get(CalendarField.WEEK_OF_YEAR))
        if field is CalendarField.HOUR:
            return self.with_fields(hour=value)
        if field is CalendarField.MINUTE:
            return self.with_fields(minute=value)
        if field is CalendarField.SECOND:
            return self.with_fields(second=value)
        if field is CalendarField.MICROSECOND:
            return self.with_fields(microsecond=value)
        raise InvalidArgumentError(f"Unknown calendar field: {field!r}")

    def add(self, field: CalendarField, delta: int) -> ZonedCalendar:
        """Add ``delta`` units of ``field``, carrying into higher fields.

        Time-of-day units add elapsed time; days and weeks move the wall-clock
        date; months and years use calendar month arithmetic (the day of month
        is limited to the length of the target month).
        """
        field = CalendarField(field)
        if delta == 0:
            return self
        if field in _ELAPSED_UNITS:
            shifted = self.moment.astimezone(pytz.utc) + timedelta(**{_ELAPSED_UNITS[field]: delta})
            return ZonedCalendar(shifted.astimezone(self.zone), self.zone, self.locale)
        if field in (CalendarField.DAY_OF_MONTH, CalendarField.DAY_OF_YEAR, CalendarField.DAY_OF_WEEK):
            return self._localize(self.wall + timedelta(days=delta))
        if field is CalendarField.WEEK_OF_YEAR:
            return self._localize(self.wall + timedelta(weeks=delta))
        if field is CalendarField.MONTH:
            return self._localize(self.wall + relativedelta(months=delta))
        if field is CalendarField.YEAR:
            return self._localize(self.wall + relativedelta(years=delta))
        raise InvalidArgumentError(f"Unknown calendar field: {field!r}")

    def roll(self, field: CalendarField, delta: int) -> ZonedCalendar:
        """Add ``delta`` to a field, wrapping within it without touching larger fields."""
        field = CalendarField(field)
        if field is CalendarField.YEAR:
            return self.add(field, delta)
        if field is CalendarField.MONTH:
            month = (self.moment.month - 1 + delta) % 12 + 1
            last_day = _stdlib_calendar.monthrange(self.moment.year, month)[1]
            return self.with_fields(month=month, day=min(self.moment.day, last_day))
        if field is CalendarField.DAY_OF_WEEK:
            position = self._week_position(self.moment.weekday())
            return self.add(CalendarField.DAY_OF_MONTH, (position + delta) % 7 - position)
        if field is CalendarField.WEEK_OF_YEAR:
            week = self.get(field)
            return self.add(field, (week - 1 + delta) % self.actual_maximum(field) + 1 - week)

        current = self.get(field)
        if field in (CalendarField.DAY_OF_MONTH, CalendarField.DAY_OF_YEAR):
            span = self.actual_maximum(field)
            return self.set(field, (current - 1 + delta) % span + 1)
        span = _FIXED_MAXIMUM[field] + 1
        return self.set(field, (current + delta) % span)


def get_field(
    moment: datetime,
    field: CalendarField,
    timezone: str | tzinfo | None = None,
    locale: str | Locale | None = None,
) -> int:
    """Return one calendar field of a moment in a zone and locale."""
    return ZonedCalendar.of(moment, timezone, locale).get(field)


def week_number(
    moment: datetime,
    timezone: str | tzinfo | None = None,
    locale: str | Locale | None = None,
) -> int:
    """Return the locale week of year of a moment."""
    return get_field(moment, CalendarField.WEEK_OF_YEAR, timezone, locale)


def adjust(
    moment: datetime,
    field: CalendarField,
    quantity: int,
    timezone: str | tzinfo | None = None,
    locale: str | Locale | None = None,
) -> datetime:
    """Perform calendar arithmetic on a moment.

    This is the accurate way to shift by days, months or years across zones:
    the wall-clock time is kept through DST changes.
    """
    return ZonedCalendar.of(moment, timezone, locale).add(field, quantity).moment
