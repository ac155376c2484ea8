"""SQLModel database models."""

from app.models.workout_session import SessionStatus, WorkoutSession

__all__ = [
    "SessionStatus",
    "WorkoutSession",
]
