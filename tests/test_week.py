"""
Unit tests for Monday-start week windows.
"""
import pytest
from datetime import date, datetime, timedelta

from app.services.week import (
    WEEKDAY_NAMES,
    days_of,
    iso_date,
    shift_week,
    start_of_week,
    week_label,
    week_window,
)

# Two years of consecutive dates, crossing a leap day and a year boundary
_ALL_DAYS = [date(2023, 6, 1) + timedelta(days=i) for i in range(730)]


class TestStartOfWeek:
    def test_every_date_maps_to_monday_containing_it(self):
        for d in _ALL_DAYS:
            start = start_of_week(d)
            assert start.weekday() == 0
            assert start <= d <= start + timedelta(days=6)

    def test_monday_maps_to_itself(self):
        assert start_of_week(date(2024, 1, 1)) == date(2024, 1, 1)

    def test_sunday_belongs_to_previous_monday(self):
        assert start_of_week(date(2024, 1, 7)) == date(2024, 1, 1)

    def test_crosses_year_boundary(self):
        # Wednesday 2025-01-01 → Monday 2024-12-30
        assert start_of_week(date(2025, 1, 1)) == date(2024, 12, 30)

    def test_datetime_late_in_the_day(self):
        assert start_of_week(datetime(2024, 1, 7, 23, 59, 59)) == date(2024, 1, 1)

    def test_returns_plain_date(self):
        result = start_of_week(datetime(2024, 1, 3, 15, 0))
        assert type(result) is date


class TestDaysOf:
    def test_seven_consecutive_days(self):
        for d in _ALL_DAYS[::13]:
            days = days_of(start_of_week(d))
            assert len(days) == 7
            for a, b in zip(days, days[1:]):
                assert b - a == timedelta(days=1)

    def test_over_month_end(self):
        days = days_of(date(2024, 2, 26))
        assert [iso_date(d) for d in days] == [
            "2024-02-26", "2024-02-27", "2024-02-28", "2024-02-29",
            "2024-03-01", "2024-03-02", "2024-03-03",
        ]


class TestIsoDate:
    def test_zero_padded(self):
        assert iso_date(date(2024, 1, 5)) == "2024-01-05"

    def test_naive_datetime_near_midnight_keeps_local_day(self):
        assert iso_date(datetime(2024, 3, 9, 23, 45)) == "2024-03-09"

    def test_aware_local_datetime_keeps_local_day(self):
        local = datetime(2024, 3, 9, 23, 45).astimezone()
        assert iso_date(local) == "2024-03-09"


class TestShiftWeek:
    @pytest.mark.parametrize("delta, expected", [
        (0, date(2024, 1, 1)),
        (1, date(2024, 1, 8)),
        (-1, date(2023, 12, 25)),
        (52, date(2024, 12, 30)),
        (-520, date(2014, 1, 13)),
    ])
    def test_shift(self, delta, expected):
        assert shift_week(date(2024, 1, 1), delta) == expected

    def test_shift_keeps_monday(self):
        assert shift_week(date(2024, 1, 1), 37).weekday() == 0


class TestWeekWindow:
    def test_window_fields(self):
        window = week_window(date(2024, 1, 3))
        assert window.start == date(2024, 1, 1)
        assert window.days[0] == window.start
        assert window.days[-1] == date(2024, 1, 7)

    def test_label(self):
        assert week_label(week_window(date(2024, 1, 3))) == "Jan 1 - Jan 7"

    def test_label_spanning_months(self):
        assert week_label(week_window(date(2024, 1, 31))) == "Jan 29 - Feb 4"

    def test_weekday_names_monday_first(self):
        assert WEEKDAY_NAMES[0] == "Mon"
        assert WEEKDAY_NAMES[-1] == "Sun"
