"""
Workout session database model.

A workout session is the date-bound instance of a program workout for
one athlete.  Sessions are created by the schedule persister and later
updated by training logging (progress counters, status).

At most one session exists per athlete and calendar day; the
``(athlete_id, date)`` unique constraint is what keeps schedule
persistence idempotent under concurrent writers.
"""

import datetime
import enum
from typing import Optional

from sqlalchemy import DateTime, UniqueConstraint
from sqlmodel import Field, SQLModel


def _utcnow() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


class SessionStatus(str, enum.Enum):
    NOT_STARTED = "NOT_STARTED"
    PARTIALLY_COMPLETED = "PARTIALLY_COMPLETED"
    FULLY_COMPLETED = "FULLY_COMPLETED"


class WorkoutSession(SQLModel, table=True):
    """A scheduled training day for an athlete."""

    __tablename__ = "workout_sessions"
    __table_args__ = (UniqueConstraint("athlete_id", "date", name="uq_workout_session_athlete_date", ),)

    id: Optional[int] = Field(default=None, primary_key=True)
    athlete_id: str = Field(nullable=False, max_length=64, index=True)
    date: datetime.date = Field(nullable=False, index=True)

    # Origin — null for ad-hoc sessions or once the assignment is deleted
    program_id: Optional[str] = Field(default=None, max_length=64, index=True)
    program_assignment_id: Optional[str] = Field(default=None, max_length=64, index=True)
    workout_id: Optional[str] = Field(default=None, max_length=64)

    title: Optional[str] = Field(default=None, max_length=255)
    week_number: Optional[int] = Field(default=None)
    day_number: Optional[int] = Field(default=None)

    status: SessionStatus = Field(default=SessionStatus.NOT_STARTED, nullable=False)

    # Progress — filled in by training logging
    total_items: int = Field(default=0, nullable=False)
    completed_items: int = Field(default=0, nullable=False)
    completion_percentage: float = Field(default=0.0, nullable=False)

    # Timestamps (timezone-aware UTC)
    created_at: datetime.datetime = Field(default_factory=_utcnow, sa_type=DateTime(timezone=True), nullable=False)
    updated_at: datetime.datetime = Field(default_factory=_utcnow, sa_type=DateTime(timezone=True), nullable=False)
