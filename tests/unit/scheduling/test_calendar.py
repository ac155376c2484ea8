"""Tests for the weekday and calendar-week helpers."""

import datetime

import pytest

from app.scheduling.calendar import (monday_offset, sorted_offsets, to_calendar_day, training_dates_for_week,
                                     week_start, )

# 2026-10-18 is a Sunday
SUNDAY = datetime.date(2026, 10, 18)
MONDAY = datetime.date(2026, 10, 19)
WEDNESDAY = datetime.date(2026, 10, 21)


# ======================================================================
# monday_offset
# ======================================================================


class TestMondayOffset:
    @pytest.mark.parametrize(
        "weekday, expected",
        [
            (0, 6),  # Sunday is the last day of the week
            (1, 0),
            (2, 1),
            (3, 2),
            (4, 3),
            (5, 4),
            (6, 5),
        ],
    )
    def test_offsets(self, weekday, expected):
        assert monday_offset(weekday) == expected


# ======================================================================
# week_start / to_calendar_day
# ======================================================================


class TestWeekStart:
    def test_monday_is_its_own_week_start(self):
        assert week_start(MONDAY) == MONDAY

    def test_midweek(self):
        assert week_start(WEDNESDAY) == MONDAY

    def test_sunday_belongs_to_the_previous_monday(self):
        assert week_start(SUNDAY) == datetime.date(2026, 10, 12)

    def test_datetime_time_is_stripped(self):
        late = datetime.datetime(2026, 10, 21, 23, 59, 59)
        assert week_start(late) == MONDAY

    def test_to_calendar_day(self):
        assert to_calendar_day(datetime.datetime(2026, 10, 21, 8, 30)) == WEDNESDAY
        assert to_calendar_day(WEDNESDAY) == WEDNESDAY


# ======================================================================
# Training dates
# ======================================================================


class TestTrainingDates:
    def test_offsets_sorted_monday_first(self):
        # Sun, Mon, Sat, Thu  →  Mon, Thu, Sat, Sun
        assert sorted_offsets([0, 1, 6, 4]) == [0, 3, 5, 6]

    def test_duplicates_collapse(self):
        assert sorted_offsets([1, 1, 4]) == [0, 3]

    def test_dates_for_week(self):
        dates = training_dates_for_week(MONDAY, sorted_offsets([1, 4, 6]))
        assert dates == [
            datetime.date(2026, 10, 19),
            datetime.date(2026, 10, 22),
            datetime.date(2026, 10, 24),
        ]
