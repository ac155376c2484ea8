"""
Schedule generation — maps abstract program workouts onto the calendar.

A program is an ordered list of weeks, each holding ordered workout days
identified by ``(week_number, day_number)``.  Generation binds each
workout to a concrete date using the athlete's training-day pattern.

Rules
-----

1. Workouts are ordered by ``(week_number, day_number)``.
2. Each program week starts on a fresh calendar week (Monday-first).
   The first program week starts in the calendar week containing
   ``start_date``; training days before ``start_date`` are skipped.
3. Within a calendar week, training days are filled earliest-first.
4. **Spillover** — a program week with more workouts than the calendar
   week has training days continues on the next calendar week's
   training days.  The next program week then starts one calendar week
   later, so two program weeks never share a calendar week.

The function is pure: no I/O, no clock, fully deterministic.
"""

import datetime
from itertools import groupby
from typing import Sequence

from app.scheduling.calendar import (DAYS_PER_WEEK, DEFAULT_TRAINING_DAYS, DateLike, sorted_offsets, to_calendar_day,
                                     training_dates_for_week, week_start, )
from app.schemas.schedule import ScheduledSession, WorkoutInput

_ONE_WEEK = datetime.timedelta(days=DAYS_PER_WEEK)


def generate_schedule(workouts: Sequence[WorkoutInput], start_date: DateLike,
                      training_days: Sequence[int] = DEFAULT_TRAINING_DAYS, ) -> list[ScheduledSession]:
    """Bind every workout to a calendar date.

    Args:
        workouts: Workouts of one program, in any order.
        start_date: First calendar day the program may use.  A
            ``datetime`` is reduced to its date.
        training_days: Weekdays the athlete trains on (0=Sunday ...
            6=Saturday).  Defaults to Mon/Tue/Thu/Fri.

    Returns:
        One :class:`ScheduledSession` per workout, in assignment order.
        Empty when ``workouts`` or ``training_days`` is empty.
    """
    if not workouts or not training_days:
        return []

    first_day = to_calendar_day(start_date)
    offsets = sorted_offsets(training_days)
    ordered = sorted(workouts, key=lambda w: (w.week_number, w.day_number))

    sessions: list[ScheduledSession] = []
    monday = week_start(first_day)
    is_first_week = True

    for _, group in groupby(ordered, key=lambda w: w.week_number):
        pending = list(group)
        index = 0

        while index < len(pending):
            dates = training_dates_for_week(monday, offsets)
            if is_first_week:
                dates = [d for d in dates if d >= first_day]
                is_first_week = False

            for date in dates:
                if index >= len(pending):
                    break
                workout = pending[index]
                sessions.append(ScheduledSession(date=date, workout_id=workout.id, week_number=workout.week_number,
                                                 day_number=workout.day_number, title=workout.name, ))
                index += 1

            if index < len(pending):
                monday += _ONE_WEEK  # spillover

        monday += _ONE_WEEK

    return sessions
