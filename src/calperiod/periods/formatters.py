"""Canonical labels for granularity units.

Each granularity maps to one label format:

- hour ``2024-03-15 13``
- day ``2024-03-15``
- week ``2024-W11`` (locale week-year and week number)
- month ``2024-03``
- quarter ``2024-1T``
- semester ``2024-1S``
- year ``2024``

Quarter and semester have no calendar field of their own, so their labels are
built from the zero-based month index and cannot be parsed back.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from datetime import datetime, timedelta, tzinfo

from babel import Locale
from babel.dates import format_datetime

from ..core.calendar import CalendarField, ZonedCalendar, week_one_start
from ..core.errors import UnsupportedOperationError
from ..core.time import ensure_timezone, to_locale, to_timezone
from .granularity import Granularity, to_granularity

__all__ = [
    "DerivedPeriodFormatter",
    "PatternFormatter",
    "PeriodFormatter",
    "WeekFormatter",
    "formatter_for",
]

# LDML pattern rendered by babel, strptime pattern used to read it back
_PATTERNS: dict[Granularity, tuple[str, str]] = {
    Granularity.HOUR: ("yyyy-MM-dd HH", "%Y-%m-%d %H"),
    Granularity.DAY: ("yyyy-MM-dd", "%Y-%m-%d"),
    Granularity.MONTH: ("yyyy-MM", "%Y-%m"),
    Granularity.YEAR: ("yyyy", "%Y"),
}

WEEK_PATTERN = "YYYY-'W'ww"
_WEEK_LABEL = re.compile(r"^(?P<year>\d{4})-W(?P<week>\d{2})$")

# Months per derived unit and the literal suffix of its label
_DERIVED_UNITS: dict[Granularity, tuple[int, str]] = {
    Granularity.QUARTER: (3, "T"),
    Granularity.SEMESTER: (6, "S"),
}


class PeriodFormatter(ABC):
    """Renders moments as the canonical label of their unit.

    Attributes
    ----------
    granularity : Granularity
        Unit the labels describe
    zone : tzinfo
        Zone the moment is rendered in
    locale : Locale
        Locale used for week rules and rendering
    """

    pattern: str

    def __init__(self, granularity: Granularity, zone: tzinfo, locale: Locale):
        self.granularity = granularity
        self.zone = zone
        self.locale = locale

    def _calendar(self, moment: datetime) -> ZonedCalendar:
        return ZonedCalendar.of(moment, self.zone, self.locale)

    @abstractmethod
    def format(self, moment: datetime) -> str:
        """Render the label of the unit containing ``moment``."""

    @abstractmethod
    def parse(self, text: str) -> datetime:
        """Read a label back to the first instant of its unit."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.granularity.value!r}, pattern={self.pattern!r}, zone={self.zone}, locale={self.locale})"


class PatternFormatter(PeriodFormatter):
    """Formatter backed by a plain date pattern (hour, day, month, year)."""

    def __init__(self, granularity: Granularity, zone: tzinfo, locale: Locale):
        super().__init__(granularity, zone, locale)
        self.pattern, self._parse_pattern = _PATTERNS[granularity]

    def format(self, moment: datetime) -> str:
        calendar = self._calendar(moment)
        return format_datetime(calendar.moment, self.pattern, tzinfo=self.zone, locale=self.locale)

    def parse(self, text: str) -> datetime:
        """Parse a label in this formatter's zone.

        Raises
        ------
        ValueError
            If ``text`` does not match the pattern
        """
        wall = datetime.strptime(text.strip(), self._parse_pattern)
        return ensure_timezone(wall, self.zone)


class WeekFormatter(PeriodFormatter):
    """Formatter for locale weeks, ``<week-year>-W<week>``."""

    pattern = WEEK_PATTERN

    def format(self, moment: datetime) -> str:
        calendar = self._calendar(moment)
        week = calendar.get(CalendarField.WEEK_OF_YEAR)
        return f"{calendar.week_year:04d}-W{week:02d}"

    def parse(self, text: str) -> datetime:
        """Parse a week label to midnight of the week's first day.

        Raises
        ------
        ValueError
            If ``text`` is not a week label
        """
        match = _WEEK_LABEL.match(text.strip())
        if match is None:
            raise ValueError(f"Not a week label: {text!r}")
        first = week_one_start(int(match["year"]), self.locale.first_week_day, self.locale.min_week_days)
        first += timedelta(weeks=int(match["week"]) - 1)
        return ensure_timezone(datetime(first.year, first.month, first.day), self.zone)


class DerivedPeriodFormatter(PeriodFormatter):
    """Format-only formatter for quarters and semesters."""

    def __init__(self, granularity: Granularity, zone: tzinfo, locale: Locale):
        super().__init__(granularity, zone, locale)
        self.months, self.suffix = _DERIVED_UNITS[granularity]
        self.pattern = f"yyyy-N{self.suffix}"

    def format(self, moment: datetime) -> str:
        calendar = self._calendar(moment)
        index = calendar.month_index // self.months
        return f"{calendar.moment.year:04d}-{index + 1}{self.suffix}"

    def parse(self, text: str) -> datetime:
        raise UnsupportedOperationError(f"Parsing {self.granularity.value} labels is not supported: {text!r}")


def formatter_for(
    granularity: str | Granularity,
    locale: str | Locale | None = None,
    timezone: str | tzinfo | None = None,
) -> PeriodFormatter:
    """Return the label formatter of a granularity.

    Raises
    ------
    InvalidGranularityError
        If ``granularity`` is not supported
    """
    unit = to_granularity(granularity)
    zone = to_timezone(timezone)
    loc = to_locale(locale)
    if unit in _DERIVED_UNITS:
        return DerivedPeriodFormatter(unit, zone, loc)
    if unit is Granularity.WEEK:
        return WeekFormatter(unit, zone, loc)
    return PatternFormatter(unit, zone, loc)
