"""
Schedule persistence service.

Turns a generated schedule into :class:`WorkoutSession` rows for one
athlete and program assignment.

**Idempotency**::

    1. read    existing sessions of the athlete on the schedule's dates
    2. skip    every proposed date already taken (any assignment) or repeated
    3. insert  the rest in one transaction, ON CONFLICT (athlete_id, date) DO NOTHING

Step 1 only avoids pointless writes.  Between steps 1 and 3 another
caller may take a date; the unique constraint plus ``DO NOTHING`` makes
that row a skip instead of a failure of the whole batch.
"""

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from app.db.repositories.workout_session import WorkoutSessionRepository
from app.models.workout_session import SessionStatus, WorkoutSession
from app.schemas.schedule import PersistScheduleRequest, PersistScheduleResult


class SchedulePersister:
    """Service for persisting generated schedules."""

    def __init__(self, session: Session):
        self.repository = WorkoutSessionRepository(session)

    def persist_schedule(self, request: PersistScheduleRequest) -> PersistScheduleResult:
        schedule = request.schedule
        total = len(schedule)
        if total == 0:
            return PersistScheduleResult()

        # Assignment-agnostic: any session on the date blocks it
        existing = self.repository.get_on_dates(request.athlete_id, (s.date for s in schedule))
        taken = { e.date for e in existing }

        # One session per date: a repeated date in the schedule is a skip
        to_create = []
        for s in schedule:
            if s.date not in taken:
                taken.add(s.date)
                to_create.append(s)
        skipped = total - len(to_create)

        if not to_create:
            logger.info(f"Schedule for athlete {request.athlete_id} already persisted ({skipped} session(s) skipped)")
            return PersistScheduleResult(created=0, skipped=skipped, total=total)

        entries = [WorkoutSession(athlete_id=request.athlete_id, date=s.date, program_id=request.program_id,
                                  program_assignment_id=request.program_assignment_id, workout_id=s.workout_id,
                                  title=s.title, week_number=s.week_number, day_number=s.day_number,
                                  status=SessionStatus.NOT_STARTED, total_items=0, completed_items=0,
                                  completion_percentage=0.0, ) for s in to_create]

        try:
            created = self.repository.insert_ignoring_existing(entries)
        except SQLAlchemyError:
            logger.exception(f"Failed to persist schedule for athlete {request.athlete_id} "
                             f"(assignment {request.program_assignment_id}); batch rolled back")
            raise

        raced = len(to_create) - created
        if raced:
            logger.warning(f"{raced} session(s) for athlete {request.athlete_id} were created concurrently "
                           f"and skipped")

        logger.info(f"Persisted schedule for athlete {request.athlete_id}: created={created} "
                    f"skipped={skipped + raced} total={total}")
        return PersistScheduleResult(created=created, skipped=skipped + raced, total=total)
