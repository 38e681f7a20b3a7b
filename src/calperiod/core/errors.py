"""Exception hierarchy for period computations."""

from __future__ import annotations

__all__ = [
    "CalperiodError",
    "InvalidArgumentError",
    "InvalidGranularityError",
    "UnsupportedOperationError",
]


class CalperiodError(Exception):
    """Base exception for calperiod operations."""

    pass


class InvalidGranularityError(CalperiodError, ValueError):
    """Raised when a granularity name is not one of the supported intervals.

    Callers that must fail silently are expected to check
    ``is_supported_granularity`` first.
    """

    def __init__(self, granularity: object) -> None:
        self.granularity = granularity
        super().__init__(f"Unknown granularity: {granularity!r}")


class UnsupportedOperationError(CalperiodError, NotImplementedError):
    """Raised when a formatter is asked to parse a label it can only render."""

    pass


class InvalidArgumentError(CalperiodError, ValueError):
    """Raised for structurally invalid arguments (programming errors)."""

    pass
