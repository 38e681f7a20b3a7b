"""Tests for period boundaries and intervals.

DoD: boundaries hold across month lengths, leap years, locale weeks and DST days.
"""

from datetime import datetime, timedelta, timezone

import pytest
import pytz

from calperiod.core.errors import InvalidArgumentError, InvalidGranularityError
from calperiod.periods.boundaries import (
    day_end,
    day_start,
    hour_end,
    hour_start,
    month_end,
    month_start,
    period_interval,
    period_interval_with_formatter,
    quarter_end,
    quarter_start,
    semester_end,
    semester_start,
    week_end,
    week_start,
    year_end,
    year_start,
)
from calperiod.periods.granularity import TIME_INTERVALS, Granularity
from calperiod.periods.interval import Interval, PeriodOptions

UTC = timezone.utc
NEW_YORK = pytz.timezone("America/New_York")
UTC_US = PeriodOptions(timezone="UTC", locale="en_US")


def utc(*args):
    return datetime(*args, tzinfo=UTC)


class TestUnitBoundaries:
    def test_hour(self):
        moment = utc(2024, 3, 15, 13, 45, 30, 123456)

        assert hour_start(moment, timezone="UTC") == utc(2024, 3, 15, 13)
        assert hour_end(moment, timezone="UTC") == utc(2024, 3, 15, 13, 59, 59)
        assert hour_start(moment, -14, timezone="UTC") == utc(2024, 3, 14, 23)

    def test_day_start_clears_time(self):
        assert day_start(utc(2024, 3, 15, 13, 45, 30), timezone="UTC") == utc(2024, 3, 15)

    def test_day_end_clears_sub_second(self):
        end = day_end(utc(2024, 3, 15, 13, 45, 30, 999999), timezone="UTC")

        assert end == utc(2024, 3, 15, 23, 59, 59)
        assert end.microsecond == 0

    def test_day_in_zone(self):
        # 20:00Z is already the 16th in Tokyo
        start = day_start(utc(2024, 3, 15, 20), timezone="Asia/Tokyo")
        assert start == utc(2024, 3, 15, 15)

    def test_day_shift_crosses_year(self):
        assert day_start(utc(2024, 12, 31, 10), 1, timezone="UTC") == utc(2025, 1, 1)

    def test_regular_day_spans_86399_seconds(self):
        moment = utc(2024, 7, 4, 12)
        span = day_end(moment, timezone="America/New_York") - day_start(moment, timezone="America/New_York")
        assert span == timedelta(seconds=86399)

    def test_week_start_follows_locale(self):
        # Friday March 15th 2024
        moment = utc(2024, 3, 15, 10)

        assert week_start(moment, timezone="UTC", locale="en_US") == utc(2024, 3, 10)
        assert week_start(moment, timezone="UTC", locale="de_DE") == utc(2024, 3, 11)

    def test_week_start_day_and_week_offsets_are_independent(self):
        moment = utc(2024, 3, 15, 10)

        # two days later is Sunday the 17th, which starts the next US week
        assert week_start(moment, 2, timezone="UTC", locale="en_US") == utc(2024, 3, 17)
        assert week_start(moment, 0, 1, timezone="UTC", locale="en_US") == utc(2024, 3, 17)
        assert week_start(moment, 2, 1, timezone="UTC", locale="en_US") == utc(2024, 3, 24)

    def test_week_spans_seven_calendar_days(self):
        begin = week_start(utc(2024, 2, 28), timezone="UTC", locale="de_DE")
        end = week_end(begin, timezone="UTC", locale="de_DE")

        assert end - begin == timedelta(days=6, hours=23, minutes=59, seconds=59)
        assert end == utc(2024, 3, 3, 23, 59, 59)

    @pytest.mark.parametrize(
        ("year", "month", "last_day"),
        [
            (2024, 2, 29),
            (2023, 2, 28),
            (2000, 2, 29),
            (1900, 2, 28),
            (2024, 4, 30),
            (2024, 12, 31),
        ],
    )
    def test_month_end_is_actual_last_day(self, year, month, last_day):
        end = month_end(utc(year, month, 10), timezone="UTC")
        assert end == utc(year, month, last_day, 23, 59, 59)

    def test_month_start_shifts_months_then_days(self):
        moment = utc(2024, 1, 31, 18)

        assert month_start(moment, timezone="UTC") == utc(2024, 1, 1)
        assert month_start(moment, 0, 1, timezone="UTC") == utc(2024, 2, 1)
        assert month_start(moment, 40, 0, timezone="UTC") == utc(2024, 2, 10)
        assert month_start(moment, -1, 0, timezone="UTC") == utc(2023, 12, 31)

    def test_quarters(self):
        assert quarter_start(utc(2024, 2, 15), timezone="UTC") == utc(2024, 1, 1)
        assert quarter_start(utc(2024, 2, 15), -1, timezone="UTC") == utc(2023, 10, 1)
        assert quarter_end(utc(2024, 11, 5), timezone="UTC") == utc(2024, 12, 31, 23, 59, 59)

    def test_semesters(self):
        assert semester_start(utc(2024, 6, 30), timezone="UTC") == utc(2024, 1, 1)
        assert semester_start(utc(2024, 7, 1), timezone="UTC") == utc(2024, 7, 1)
        assert semester_end(utc(2024, 8, 20), timezone="UTC") == utc(2024, 12, 31, 23, 59, 59)
        assert semester_start(utc(2024, 8, 20), 1, timezone="UTC") == utc(2025, 1, 1)

    def test_year(self):
        moment = utc(2024, 6, 10, 8)

        assert year_start(moment, timezone="UTC") == utc(2024, 1, 1)
        assert year_start(moment, 1, 2, -1, timezone="UTC") == utc(2023, 3, 2)
        assert year_end(moment, timezone="UTC") == utc(2024, 12, 31, 23, 59, 59)


class TestDaylightSavingDays:
    def test_spring_forward_day_is_23_hours(self):
        moment = NEW_YORK.localize(datetime(2024, 3, 10, 12))
        start = day_start(moment, timezone=NEW_YORK)
        end = day_end(moment, timezone=NEW_YORK)

        assert start == utc(2024, 3, 10, 5)
        assert end == utc(2024, 3, 11, 3, 59, 59)
        assert end - start == timedelta(hours=23, seconds=-1)

    def test_fall_back_day_is_25_hours(self):
        moment = NEW_YORK.localize(datetime(2024, 11, 3, 12))
        start = day_start(moment, timezone=NEW_YORK)
        end = day_end(moment, timezone=NEW_YORK)

        assert end - start == timedelta(hours=25, seconds=-1)

    @pytest.mark.parametrize(
        ("moment", "offset"),
        [
            (utc(2024, 11, 3, 5, 30), timedelta(hours=-4)),
            (utc(2024, 11, 3, 6, 30), timedelta(hours=-5)),
        ],
    )
    def test_repeated_hour_keeps_source_offset(self, moment, offset):
        # 01:00-01:59 occurs twice in New York on November 3rd 2024
        interval = period_interval("hour", moment, PeriodOptions(timezone="America/New_York"))

        assert interval.begin.replace(tzinfo=None) == datetime(2024, 11, 3, 1)
        assert interval.end.replace(tzinfo=None) == datetime(2024, 11, 3, 1, 59, 59)
        assert interval.begin.utcoffset() == offset
        assert interval.end.utcoffset() == offset
        assert interval.end - interval.begin == timedelta(minutes=59, seconds=59)

    def test_month_start_keeps_local_midnight(self):
        start = month_start(utc(2024, 3, 20), 0, 1, timezone="America/New_York")

        assert start.hour == 0
        assert start.utcoffset() == timedelta(hours=-4)
        assert start == utc(2024, 4, 1, 4)


class TestPeriodInterval:
    def test_quarter_interval(self):
        interval = period_interval("quarter", utc(2024, 6, 10), UTC_US)

        assert interval.begin == utc(2024, 4, 1)
        assert interval.end == utc(2024, 6, 30, 23, 59, 59)
        assert interval.granularity is Granularity.QUARTER

    def test_hour_interval_with_shift(self):
        interval = period_interval("hour", utc(2024, 3, 15, 13, 45), PeriodOptions(shift=2, timezone="UTC"))

        assert interval.begin == utc(2024, 3, 15, 15)
        assert interval.end == utc(2024, 3, 15, 15, 59, 59)

    def test_day_interval_with_negative_shift(self):
        interval = period_interval("day", utc(2024, 3, 1, 9), PeriodOptions(shift=-1, timezone="UTC"))

        assert interval.begin == utc(2024, 2, 29)
        assert interval.end == utc(2024, 2, 29, 23, 59, 59)

    def test_week_interval_with_shift_and_day_offset(self):
        options = PeriodOptions(shift=1, day_offset=2, timezone="UTC", locale="en_US")
        interval = period_interval("week", utc(2024, 3, 15), options)

        assert interval.begin == utc(2024, 3, 24)
        assert interval.end == utc(2024, 3, 30, 23, 59, 59)

    def test_month_interval_from_month_end(self):
        interval = period_interval("month", utc(2024, 1, 31, 12), PeriodOptions(shift=1, timezone="UTC"))

        assert interval.begin == utc(2024, 2, 1)
        assert interval.end == utc(2024, 2, 29, 23, 59, 59)

    def test_semester_interval_with_shift(self):
        interval = period_interval("semester", utc(2024, 3, 1), PeriodOptions(shift=-1, timezone="UTC"))

        assert interval.begin == utc(2023, 7, 1)
        assert interval.end == utc(2023, 12, 31, 23, 59, 59)

    def test_year_interval_with_offsets(self):
        options = PeriodOptions(shift=-1, month_offset=3, timezone="UTC")
        interval = period_interval("year", utc(2024, 6, 10), options)

        assert interval.begin == utc(2023, 4, 1)
        assert interval.end == utc(2023, 12, 31, 23, 59, 59)

    def test_enum_granularity_accepted(self):
        interval = period_interval(Granularity.DAY, utc(2024, 3, 15, 8), UTC_US)
        assert interval.begin == utc(2024, 3, 15)

    @pytest.mark.parametrize("granularity", TIME_INTERVALS)
    @pytest.mark.parametrize("shift", [-13, -1, 0, 1, 7])
    def test_begin_never_after_end(self, granularity, shift):
        options = PeriodOptions(shift=shift, timezone="America/New_York", locale="en_US")
        interval = period_interval(granularity, utc(2024, 3, 10, 7, 30), options)

        assert interval.begin <= interval.end
        assert interval.begin.microsecond == 0
        assert interval.end.microsecond == 0

    def test_unknown_granularity(self):
        with pytest.raises(InvalidGranularityError) as exc_info:
            period_interval("fortnight", utc(2024, 3, 15), UTC_US)

        assert exc_info.value.granularity == "fortnight"

    def test_granularity_is_case_sensitive(self):
        with pytest.raises(InvalidGranularityError):
            period_interval("Day", utc(2024, 3, 15), UTC_US)

    def test_with_formatter_attaches_label(self):
        interval = period_interval_with_formatter("quarter", utc(2024, 6, 10), UTC_US)

        assert interval.formatter is not None
        assert interval.label == "2024-2T"
        assert interval == period_interval("quarter", utc(2024, 6, 10), UTC_US)


class TestInterval:
    def test_begin_after_end_rejected(self):
        with pytest.raises(InvalidArgumentError):
            Interval(begin=utc(2024, 3, 2), end=utc(2024, 3, 1), granularity=Granularity.DAY)

    def test_interval_is_frozen(self):
        interval = period_interval("day", utc(2024, 3, 15), UTC_US)

        with pytest.raises(AttributeError):
            interval.begin = utc(2024, 1, 1)

    def test_with_formatter_returns_new_value(self):
        plain = period_interval("day", utc(2024, 3, 15), UTC_US)
        labelled = period_interval_with_formatter("day", utc(2024, 3, 15), UTC_US)
        copy = plain.with_formatter(labelled.formatter)

        assert plain.formatter is None
        assert plain.label is None
        assert copy.label == "2024-03-15"

    def test_contains(self):
        interval = period_interval("day", utc(2024, 3, 15), UTC_US)

        assert interval.contains(utc(2024, 3, 15, 23, 59, 59, 500000))
        assert not interval.contains(utc(2024, 3, 16))

    def test_to_dict(self):
        interval = period_interval_with_formatter("month", utc(2024, 2, 10), UTC_US)

        assert interval.to_dict() == {
            "granularity": "month",
            "begin": "2024-02-01T00:00:00+00:00",
            "end": "2024-02-29T23:59:59+00:00",
            "begin_utc": "2024-02-01T00:00:00+00:00",
            "end_utc": "2024-02-29T23:59:59+00:00",
            "label": "2024-02",
        }
