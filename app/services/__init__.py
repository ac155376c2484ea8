"""Business logic services."""

from app.services.assignment_cleanup_service import AssignmentCleanupService
from app.services.conflict_service import ConflictDetector
from app.services.schedule_persistence_service import SchedulePersister

__all__ = [
    "AssignmentCleanupService",
    "ConflictDetector",
    "SchedulePersister",
]
