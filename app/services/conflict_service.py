"""
Schedule conflict detection.

Reports the dates of a proposed schedule that an athlete already has a
session on.  This is an advisory, read-only check: nothing is locked, so
a concurrent writer can still take a date between this check and
persistence.  The persister handles that case on its own.
"""

from typing import Optional, Sequence

from loguru import logger
from sqlmodel import Session

from app.db.repositories.workout_session import WorkoutSessionRepository
from app.schemas.schedule import ConflictDetectionResult, ConflictingSession, ScheduledSession


class ConflictDetector:
    """Service for detecting schedule conflicts."""

    def __init__(self, session: Session):
        self.repository = WorkoutSessionRepository(session)

    def detect_conflicts(self, athlete_id: str, schedule: Sequence[ScheduledSession],
                         exclude_assignment_id: Optional[str] = None, ) -> ConflictDetectionResult:
        """Find existing sessions on the dates of ``schedule``.

        Sessions of ``exclude_assignment_id`` are not conflicts, so
        re-assigning the same program does not conflict with itself.
        Sessions without an assignment always count.
        """
        if not schedule:
            return ConflictDetectionResult()

        existing = self.repository.get_on_dates(athlete_id, (s.date for s in schedule), exclude_assignment_id, )
        if not existing:
            return ConflictDetectionResult()

        existing_by_date = { e.date: e for e in existing }

        conflicts: list[ConflictingSession] = []
        for proposed in schedule:
            taken = existing_by_date.get(proposed.date)
            if taken is None:
                continue
            conflicts.append(ConflictingSession(date=proposed.date, existing_title=taken.title,
                                                existing_program_id=taken.program_id,
                                                existing_program_assignment_id=taken.program_assignment_id,
                                                existing_status=taken.status, new_title=proposed.title, ))

        if conflicts:
            logger.info(f"Detected {len(conflicts)} schedule conflict(s) for athlete {athlete_id}")

        return ConflictDetectionResult(has_conflicts=bool(conflicts), conflicts=conflicts,
                                       conflict_count=len(conflicts), )
