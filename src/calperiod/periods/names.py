"""Locale-rendered weekday and month names."""

from __future__ import annotations

from babel import Locale
from babel.dates import get_day_names, get_month_names

from ..core.time import to_locale

__all__ = ["NAME_WIDTHS", "month_names", "weekday_names"]

NAME_WIDTHS = ("wide", "abbreviated", "short", "narrow")


def weekday_names(locale: str | Locale | None = None, width: str = "wide") -> list[str]:
    """Return the seven weekday names, starting from the locale's first day of week.

    Example
    -------
    >>> weekday_names("en_US")[:2]
    ['Sunday', 'Monday']
    """
    loc = to_locale(locale)
    names = get_day_names(width, context="format", locale=loc)
    first = loc.first_week_day
    return [names[(first + i) % 7] for i in range(7)]


def month_names(locale: str | Locale | None = None, width: str = "wide") -> list[str]:
    """Return the twelve month names from January."""
    loc = to_locale(locale)
    names = get_month_names(width, context="format", locale=loc)
    return [names[month] for month in range(1, 13)]
