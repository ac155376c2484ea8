"""
Calendar helpers shared by schedule generation and date queries.

Weekdays use the Sunday-first encoding (0=Sunday ... 6=Saturday) that
athletes' training-day patterns are stored in.  Calendar weeks, however,
run Monday to Sunday, so every weekday is first mapped to its offset
from Monday.
"""

import datetime
from typing import Iterable, Union

DateLike = Union[datetime.date, datetime.datetime]

DAYS_PER_WEEK = 7

# Mon/Tue/Thu/Fri
DEFAULT_TRAINING_DAYS: tuple[int, ...] = (1, 2, 4, 5)

WEEKDAY_NAMES: tuple[str, ...] = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")


def monday_offset(weekday: int) -> int:
    """Map a Sunday=0 weekday to its offset from Monday (Monday=0, Sunday=6)."""
    return 6 if weekday == 0 else weekday - 1


def to_calendar_day(value: DateLike) -> datetime.date:
    """Strip the time of day, keeping only the calendar date."""
    if isinstance(value, datetime.datetime):
        return value.date()
    return value


def week_start(value: DateLike) -> datetime.date:
    """Return the Monday of the calendar week containing ``value``."""
    day = to_calendar_day(value)
    # isoweekday(): Monday=1 ... Sunday=7  →  Sunday=0 encoding
    return day - datetime.timedelta(days=monday_offset(day.isoweekday() % 7))


def sorted_offsets(training_days: Iterable[int]) -> list[int]:
    """Monday-first offsets of a training-day pattern, ascending and unique."""
    return sorted({monday_offset(d) for d in training_days})


def training_dates_for_week(monday: datetime.date, offsets: list[int]) -> list[datetime.date]:
    """Concrete dates of the training days in the week starting at ``monday``."""
    return [monday + datetime.timedelta(days=offset) for offset in offsets]
