"""Pydantic schemas for request/response validation."""

from app.schemas.schedule import (
    CleanupResult,
    ConflictDetectionResult,
    ConflictingSession,
    PersistScheduleRequest,
    PersistScheduleResult,
    ScheduleAssignRequest,
    ScheduleAssignResponse,
    ScheduledSession,
    SchedulePreviewRequest,
    SchedulePreviewResponse,
    WorkoutInput,
    WorkoutSessionResponse,
)

__all__ = [
    "CleanupResult",
    "ConflictDetectionResult",
    "ConflictingSession",
    "PersistScheduleRequest",
    "PersistScheduleResult",
    "ScheduleAssignRequest",
    "ScheduleAssignResponse",
    "ScheduledSession",
    "SchedulePreviewRequest",
    "SchedulePreviewResponse",
    "WorkoutInput",
    "WorkoutSessionResponse",
]
