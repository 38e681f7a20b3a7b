"""Elapsed-time helpers and human readable durations."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime, timedelta

from babel import Locale
from babel.units import format_unit

from ..core.time import ensure_timezone, to_locale

__all__ = [
    "format_interval",
    "interval_in_days",
    "interval_in_hours",
    "interval_millis",
]

HOUR_MILLIS = 60 * 60 * 1000
DAY_MILLIS = 24 * HOUR_MILLIS

# (divisor, unit) from the smallest unit up; weeks take whatever is left
_UNIT_STEPS = (
    (1000, "millisecond"),
    (60, "second"),
    (60, "minute"),
    (24, "hour"),
    (7, "day"),
)
_LARGEST_UNIT = "week"


def interval_millis(begin: datetime, end: datetime | None) -> float:
    """Return ``end - begin`` in milliseconds, including sub-millisecond precision.

    A missing ``end`` gives 0.
    """
    if end is None:
        return 0.0
    return (ensure_timezone(end) - ensure_timezone(begin)) / timedelta(milliseconds=1)


def interval_in_days(begin: datetime, end: datetime | None) -> int:
    """Return whole days between two moments, truncated toward zero."""
    return int(interval_millis(begin, end) / DAY_MILLIS)


def interval_in_hours(begin: datetime, end: datetime | None) -> int:
    """Return whole hours between two moments, truncated toward zero."""
    return int(interval_millis(begin, end) / HOUR_MILLIS)


def _split(millis: float) -> list[tuple[str, float]]:
    parts = []
    value = float(millis)
    for divisor, unit in _UNIT_STEPS:
        parts.append((unit, value % divisor))
        value /= divisor
    parts.append((_LARGEST_UNIT, value))
    return parts


def _render(
    unit: str,
    value: float,
    last: bool,
    locale: Locale,
    labels: Mapping[str, str] | None,
) -> str:
    if labels is not None:
        number = f"{value:.2f}" if last else str(int(value))
        form = "singular" if int(value) == 1 else "plural"
        return f"{number} {labels[f'{unit}.{form}']}"
    if last:
        return format_unit(value, f"duration-{unit}", length="long", format="0.00", locale=locale)
    return format_unit(int(value), f"duration-{unit}", length="long", locale=locale)


def format_interval(
    millis: float,
    count: int = 2,
    locale: str | Locale | None = None,
    labels: Mapping[str, str] | None = None,
) -> str:
    """Render a duration as its ``count`` most significant units.

    Units below 1 are skipped. Every unit but the last printed one shows its
    whole value; the last one shows two decimals.

    Parameters
    ----------
    millis
        Duration in milliseconds
    count
        Maximum number of units to print
    locale
        Locale for CLDR unit patterns (default: configured locale)
    labels
        Optional unit labels keyed ``"<unit>.singular"`` / ``"<unit>.plural"``
        (``millisecond``, ``second``, ``minute``, ``hour``, ``day``, ``week``);
        when given, CLDR patterns are not used

    Example
    -------
    >>> format_interval(90_000, locale="en_US")
    '1 minute, 30.00 seconds'
    """
    loc = to_locale(locale)
    rendered: list[str] = []
    remaining = count
    for unit, value in reversed(_split(millis)):
        if remaining <= 0:
            break
        if value < 1:
            continue
        remaining -= 1
        rendered.append(_render(unit, value, remaining == 0, loc, labels))
    return ", ".join(rendered)
