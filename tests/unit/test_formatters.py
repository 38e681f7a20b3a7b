"""Tests for granularity label formatters."""

from datetime import datetime, timezone

import pytest

from calperiod.core.errors import InvalidGranularityError, UnsupportedOperationError
from calperiod.periods.formatters import (
    DerivedPeriodFormatter,
    PatternFormatter,
    WeekFormatter,
    formatter_for,
)

UTC = timezone.utc


def utc(*args):
    return datetime(*args, tzinfo=UTC)


class TestPatternFormatters:
    @pytest.mark.parametrize(
        ("granularity", "expected"),
        [
            ("hour", "2024-03-15 13"),
            ("day", "2024-03-15"),
            ("month", "2024-03"),
            ("year", "2024"),
        ],
    )
    def test_format(self, granularity, expected):
        formatter = formatter_for(granularity, "en_US", "UTC")

        assert isinstance(formatter, PatternFormatter)
        assert formatter.format(utc(2024, 3, 15, 13, 45, 30)) == expected

    def test_patterns(self):
        assert formatter_for("hour", "en_US", "UTC").pattern == "yyyy-MM-dd HH"
        assert formatter_for("day", "en_US", "UTC").pattern == "yyyy-MM-dd"
        assert formatter_for("month", "en_US", "UTC").pattern == "yyyy-MM"
        assert formatter_for("year", "en_US", "UTC").pattern == "yyyy"

    def test_format_in_zone(self):
        formatter = formatter_for("day", "en_US", "Asia/Tokyo")
        assert formatter.format(utc(2024, 3, 15, 20)) == "2024-03-16"

    def test_parse_returns_unit_start(self):
        assert formatter_for("day", "en_US", "UTC").parse("2024-03-15") == utc(2024, 3, 15)
        assert formatter_for("hour", "en_US", "UTC").parse("2024-03-15 13") == utc(2024, 3, 15, 13)
        assert formatter_for("month", "en_US", "UTC").parse("2024-02") == utc(2024, 2, 1)

    def test_parse_in_zone(self):
        parsed = formatter_for("day", "en_US", "Asia/Tokyo").parse("2024-03-16")
        assert parsed == utc(2024, 3, 15, 15)

    def test_parse_rejects_other_shapes(self):
        with pytest.raises(ValueError):
            formatter_for("day", "en_US", "UTC").parse("15/03/2024")


class TestWeekFormatter:
    def test_iso_week(self):
        formatter = formatter_for("week", "de_DE", "UTC")

        assert isinstance(formatter, WeekFormatter)
        assert formatter.format(utc(2024, 3, 15)) == "2024-W11"

    def test_week_year_differs_from_calendar_year(self):
        assert formatter_for("week", "de_DE", "UTC").format(utc(2021, 1, 1)) == "2020-W53"
        assert formatter_for("week", "en_US", "UTC").format(utc(2024, 12, 30)) == "2025-W01"

    def test_parse_week(self):
        formatter = formatter_for("week", "de_DE", "UTC")

        assert formatter.parse("2024-W11") == utc(2024, 3, 11)
        assert formatter.parse("2020-W53") == utc(2020, 12, 28)

    def test_parse_rejects_non_week(self):
        with pytest.raises(ValueError):
            formatter_for("week", "de_DE", "UTC").parse("2024-11")


class TestDerivedFormatters:
    @pytest.mark.parametrize(
        ("month", "label"),
        [(1, "2024-1T"), (3, "2024-1T"), (4, "2024-2T"), (6, "2024-2T"), (10, "2024-4T"), (12, "2024-4T")],
    )
    def test_quarter_labels(self, month, label):
        assert formatter_for("quarter", "en_US", "UTC").format(utc(2024, month, 15)) == label

    @pytest.mark.parametrize(("month", "label"), [(1, "2024-1S"), (6, "2024-1S"), (7, "2024-2S"), (12, "2024-2S")])
    def test_semester_labels(self, month, label):
        assert formatter_for("semester", "en_US", "UTC").format(utc(2024, month, 15)) == label

    def test_label_uses_zone(self):
        # Still December 31st in New York
        formatter = formatter_for("quarter", "en_US", "America/New_York")
        assert formatter.format(utc(2025, 1, 1, 2)) == "2024-4T"

    @pytest.mark.parametrize("granularity", ["quarter", "semester"])
    def test_parse_unsupported(self, granularity):
        formatter = formatter_for(granularity, "en_US", "UTC")

        assert isinstance(formatter, DerivedPeriodFormatter)
        with pytest.raises(UnsupportedOperationError):
            formatter.parse("2024-1T")

    def test_unsupported_is_not_implemented(self):
        with pytest.raises(NotImplementedError):
            formatter_for("quarter", "en_US", "UTC").parse("2024-1T")


def test_unknown_granularity():
    with pytest.raises(InvalidGranularityError):
        formatter_for("fortnight", "en_US", "UTC")
