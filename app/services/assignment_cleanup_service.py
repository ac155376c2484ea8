"""
Assignment cleanup service.

When a program assignment is removed or deactivated, its future
sessions that were never started are deleted.  Sessions with logged
work (partially or fully completed) are kept, so an athlete's training
history is never lost.
"""

import datetime
from typing import Optional

from loguru import logger
from sqlmodel import Session

from app.db.repositories.workout_session import WorkoutSessionRepository
from app.models.workout_session import SessionStatus
from app.schemas.schedule import CleanupResult

_LOGGED_STATUSES = (SessionStatus.PARTIALLY_COMPLETED, SessionStatus.FULLY_COMPLETED)


class AssignmentCleanupService:
    """Service for removing an assignment's unstarted future sessions."""

    def __init__(self, session: Session):
        self.repository = WorkoutSessionRepository(session)

    def cleanup_assignment_sessions(self, program_assignment_id: str,
                                    as_of: Optional[datetime.date] = None, ) -> CleanupResult:
        """Delete ``NOT_STARTED`` sessions of the assignment dated on/after ``as_of``.

        Args:
            program_assignment_id: The assignment being removed.
            as_of: Cutoff calendar day, inclusive.  Defaults to today.

        Returns:
            How many sessions were deleted and how many logged sessions
            in the same window were preserved.
        """
        cutoff = as_of or datetime.date.today()

        preserved = self.repository.count_by_assignment_from(program_assignment_id, cutoff, _LOGGED_STATUSES)
        deleted = self.repository.delete_by_assignment_from(program_assignment_id, cutoff, SessionStatus.NOT_STARTED)

        logger.info(f"Cleaned up assignment {program_assignment_id} from {cutoff.isoformat()}: "
                    f"deleted={deleted} preserved={preserved}")
        return CleanupResult(deleted=deleted, preserved=preserved)
