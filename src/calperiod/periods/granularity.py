"""Supported granularities and their lookback defaults."""

from __future__ import annotations

from enum import Enum

from ..core.errors import InvalidGranularityError

__all__ = [
    "DEFAULT_LOOKBACK_COUNTS",
    "Granularity",
    "TIME_INTERVALS",
    "default_lookback_count",
    "is_supported_granularity",
    "time_intervals",
    "to_granularity",
]


class Granularity(str, Enum):
    """Calendar unit sizes, smallest first."""

    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    QUARTER = "quarter"
    SEMESTER = "semester"
    YEAR = "year"


TIME_INTERVALS: tuple[str, ...] = tuple(g.value for g in Granularity)

# Units looked back when a caller gives no count
DEFAULT_LOOKBACK_COUNTS: dict[Granularity, int] = {
    Granularity.HOUR: 12,
    Granularity.DAY: 30,
    Granularity.WEEK: 4,
    Granularity.MONTH: 12,
    Granularity.QUARTER: 16,
    Granularity.SEMESTER: 24,
    Granularity.YEAR: 5,
}


def is_supported_granularity(granularity: object) -> bool:
    """Check a granularity name against the supported set (exact, case-sensitive)."""
    if isinstance(granularity, Granularity):
        return True
    return isinstance(granularity, str) and granularity in TIME_INTERVALS


def to_granularity(granularity: str | Granularity) -> Granularity:
    """Resolve a granularity name.

    Raises
    ------
    InvalidGranularityError
        If the name is not supported
    """
    if not is_supported_granularity(granularity):
        raise InvalidGranularityError(granularity)
    return Granularity(granularity)


def time_intervals() -> list[str]:
    """Return the supported granularity names in order."""
    return list(TIME_INTERVALS)


def default_lookback_count(granularity: str | Granularity) -> int:
    """Return the built-in lookback count for a granularity."""
    return DEFAULT_LOOKBACK_COUNTS[to_granularity(granularity)]
