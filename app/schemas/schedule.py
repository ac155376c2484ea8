"""
Schedule schemas.

Transient types passed between schedule generation, conflict detection
and persistence, plus the request/response bodies of the schedule API.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from app.models.workout_session import SessionStatus


class WorkoutInput(BaseModel):
    """An abstract, date-agnostic prescribed training day of a program.

    ``week_number`` and ``day_number`` are expected to be >= 1.  This is a
    precondition of the generator, not something it validates.
    """

    id: str
    week_number: int
    day_number: int
    name: str


class ScheduledSession(BaseModel):
    """A workout bound to a calendar day.  Not stored."""

    date: datetime.date
    workout_id: str
    week_number: int
    day_number: int
    title: str


class ConflictingSession(BaseModel):
    """An existing session occupying a date the new schedule wants."""

    date: datetime.date
    existing_title: Optional[str]
    existing_program_id: Optional[str]
    existing_program_assignment_id: Optional[str]
    existing_status: SessionStatus
    new_title: str


class ConflictDetectionResult(BaseModel):
    has_conflicts: bool = False
    conflicts: list[ConflictingSession] = Field(default_factory=list)
    conflict_count: int = 0


class PersistScheduleRequest(BaseModel):
    athlete_id: str
    program_id: str
    program_assignment_id: str
    schedule: list[ScheduledSession]


class PersistScheduleResult(BaseModel):
    created: int = 0
    skipped: int = 0
    total: int = 0


class CleanupResult(BaseModel):
    """Outcome of removing an assignment's future sessions."""

    deleted: int = 0
    preserved: int = 0


# ----------------------------------------------------------------------
# API bodies
# ----------------------------------------------------------------------


class _ScheduleRequestBase(BaseModel):
    athlete_id: str
    start_date: Optional[datetime.date] = Field(None,
                                                description="First calendar day of the program. Defaults to the "
                                                            "server's current date.", )
    training_days: Optional[list[int]] = Field(None,
                                               description="Weekdays the athlete trains on, 0=Sunday ... 6=Saturday. "
                                                           "Defaults to the configured pattern.", )
    workouts: list[WorkoutInput]

    @field_validator("training_days")
    @classmethod
    def _check_weekdays(cls, value: Optional[list[int]]) -> Optional[list[int]]:
        if value is None:
            return value
        for day in value:
            if day < 0 or day > 6:
                raise ValueError(f"Invalid weekday {day}: expected 0 (Sunday) to 6 (Saturday)")
        return value


class SchedulePreviewRequest(_ScheduleRequestBase):
    """Generate a schedule and check it for conflicts without writing."""

    exclude_assignment_id: Optional[str] = None


class SchedulePreviewResponse(BaseModel):
    schedule: list[ScheduledSession]
    conflicts: ConflictDetectionResult


class ScheduleAssignRequest(_ScheduleRequestBase):
    """Generate a schedule and persist it for a program assignment."""

    program_id: str
    program_assignment_id: str


class ScheduleAssignResponse(BaseModel):
    schedule_size: int
    conflicts: ConflictDetectionResult
    result: PersistScheduleResult


class WorkoutSessionResponse(BaseModel):
    """Schema for a stored workout session in API responses."""

    id: int
    athlete_id: str
    date: datetime.date
    program_id: Optional[str]
    program_assignment_id: Optional[str]
    workout_id: Optional[str]
    title: Optional[str]
    week_number: Optional[int]
    day_number: Optional[int]
    status: SessionStatus
    total_items: int
    completed_items: int
    completion_percentage: float

    class Config:
        from_attributes = True
