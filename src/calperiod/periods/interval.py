"""Immutable interval and option values."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import datetime, tzinfo
from typing import TYPE_CHECKING, Any

from babel import Locale

from ..core.errors import InvalidArgumentError
from ..core.time import format_utc_iso8601
from .granularity import Granularity

if TYPE_CHECKING:
    from .formatters import PeriodFormatter

__all__ = ["Interval", "PeriodOptions"]


@dataclass(frozen=True)
class PeriodOptions:
    """Parameters shared by interval and lookback computations.

    Attributes
    ----------
    shift : int
        Signed number of granularity units to move the interval
    day_offset : int
        Extra days applied to week, month and year starts
    month_offset : int
        Extra months applied to year starts
    timezone : str | tzinfo | None
        Zone used for field extraction (default: configured zone)
    locale : str | Locale | None
        Locale supplying week rules (default: configured locale)
    """

    shift: int = 0
    day_offset: int = 0
    month_offset: int = 0
    timezone: str | tzinfo | None = None
    locale: str | Locale | None = None


@dataclass(frozen=True)
class Interval:
    """Inclusive ``[begin, end]`` bounds of one granularity unit.

    ``end`` is the last whole second of the unit. The formatter does not take
    part in equality.
    """

    begin: datetime
    end: datetime
    granularity: Granularity
    formatter: PeriodFormatter | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if self.begin > self.end:
            raise InvalidArgumentError(f"Interval begin {self.begin} is after end {self.end}")

    def with_formatter(self, formatter: PeriodFormatter) -> Interval:
        """Return a copy carrying ``formatter``."""
        return dataclasses.replace(self, formatter=formatter)

    @property
    def label(self) -> str | None:
        """Canonical label of the interval, if a formatter is attached."""
        if self.formatter is None:
            return None
        return self.formatter.format(self.begin)

    def contains(self, moment: datetime) -> bool:
        """Check whether a moment falls inside the interval (whole seconds)."""
        return self.begin <= moment.replace(microsecond=0) <= self.end

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-friendly dict."""
        data: dict[str, Any] = {
            "granularity": self.granularity.value,
            "begin": self.begin.isoformat(),
            "end": self.end.isoformat(),
            "begin_utc": format_utc_iso8601(self.begin),
            "end_utc": format_utc_iso8601(self.end),
        }
        if self.formatter is not None:
            data["label"] = self.label
        return data
