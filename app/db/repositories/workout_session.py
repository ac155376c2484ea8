"""
Workout session repository.

Handles database operations for :class:`WorkoutSession`, including the
existence lookup shared by conflict detection and schedule persistence,
and the conflict-tolerant batch insert used to persist schedules.
"""

import datetime
from typing import Any, Iterable, Optional

from sqlalchemy import delete, func, or_
from sqlalchemy.dialects import postgresql, sqlite
from sqlmodel import Session, col, select

from app.models.workout_session import SessionStatus, WorkoutSession

_INSERT_BY_DIALECT = { "postgresql": postgresql.insert, "sqlite": sqlite.insert, }


class WorkoutSessionRepository:
    """Repository for WorkoutSession database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get_on_dates(self, athlete_id: str, dates: Iterable[datetime.date],
                     exclude_assignment_id: Optional[str] = None, ) -> list[WorkoutSession]:
        """Existing sessions of an athlete on any of ``dates``.

        When ``exclude_assignment_id`` is given, sessions belonging to that
        assignment are left out.  Sessions without an assignment are
        always returned.
        """
        wanted = sorted(set(dates))
        if not wanted:
            return []
        statement = select(WorkoutSession).where(WorkoutSession.athlete_id == athlete_id,
                                                 col(WorkoutSession.date).in_(wanted), )
        if exclude_assignment_id:
            statement = statement.where(or_(col(WorkoutSession.program_assignment_id) != exclude_assignment_id,
                                            col(WorkoutSession.program_assignment_id).is_(None), ))
        statement = statement.order_by(WorkoutSession.date)
        return list(self.session.exec(statement).all())

    def get_by_athlete_date_range(self, athlete_id: str, start: datetime.date,
                                  end: datetime.date, ) -> list[WorkoutSession]:
        statement = (select(WorkoutSession).where(WorkoutSession.athlete_id == athlete_id, WorkoutSession.date >= start,
                                                  WorkoutSession.date <= end, ).order_by(WorkoutSession.date))
        return list(self.session.exec(statement).all())

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def insert_ignoring_existing(self, entries: list[WorkoutSession]) -> int:
        """Insert ``entries`` in one transaction, skipping taken (athlete, date) slots.

        Rows whose ``(athlete_id, date)`` already exists when the statement
        runs are silently dropped (``ON CONFLICT DO NOTHING``).  Any other
        error rolls back the whole batch and propagates.

        Returns:
            Number of rows actually inserted.
        """
        if not entries:
            return 0

        dialect = self.session.get_bind().dialect.name
        insert = _INSERT_BY_DIALECT.get(dialect)
        if insert is None:
            raise NotImplementedError(f"Conflict-tolerant insert is not supported on '{dialect}'")

        table = WorkoutSession.__table__
        rows: list[dict[str, Any]] = [entry.model_dump(exclude={"id"}) for entry in entries]
        statement = (insert(table).values(rows).on_conflict_do_nothing(index_elements=["athlete_id", "date"])
                     .returning(table.c.id))
        try:
            inserted = len(self.session.exec(statement).all())
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        return inserted

    def count_by_assignment_from(self, program_assignment_id: str, as_of: datetime.date,
                                 statuses: Iterable[SessionStatus], ) -> int:
        """Count an assignment's sessions on/after ``as_of`` with one of ``statuses``."""
        statement = (select(func.count()).select_from(WorkoutSession).where(
            WorkoutSession.program_assignment_id == program_assignment_id, WorkoutSession.date >= as_of,
            col(WorkoutSession.status).in_(list(statuses)), ))
        return self.session.exec(statement).first() or 0

    def delete_by_assignment_from(self, program_assignment_id: str, as_of: datetime.date,
                                  status: SessionStatus, ) -> int:
        """Delete an assignment's sessions on/after ``as_of`` with ``status``.  Commits."""
        statement = delete(WorkoutSession).where(col(WorkoutSession.program_assignment_id) == program_assignment_id,
                                                 col(WorkoutSession.date) >= as_of,
                                                 col(WorkoutSession.status) == status, )
        try:
            result = self.session.exec(statement)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        return result.rowcount
