"""Database repositories."""

from app.db.repositories.workout_session import WorkoutSessionRepository

__all__ = [
    "WorkoutSessionRepository",
]
