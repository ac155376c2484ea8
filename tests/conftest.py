"""Shared fixtures.

Database tests run against an in-memory SQLite engine.  ``StaticPool``
keeps a single connection so every session sees the same database.
"""

import datetime
from typing import Optional

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import app.db.base  # noqa: F401  (registers models on SQLModel.metadata)
from app.models.workout_session import SessionStatus, WorkoutSession


@pytest.fixture
def engine():
    engine = create_engine("sqlite://", connect_args={ "check_same_thread": False }, poolclass=StaticPool, )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def add_session(db):
    """Insert a pre-existing workout session."""

    def _add(athlete_id: str, date: datetime.date, *, title: str = "Existing", program_id: Optional[str] = "prog-old",
             program_assignment_id: Optional[str] = "assign-old",
             status: SessionStatus = SessionStatus.NOT_STARTED, ) -> WorkoutSession:
        entry = WorkoutSession(athlete_id=athlete_id, date=date, title=title, program_id=program_id,
                               program_assignment_id=program_assignment_id, status=status, )
        db.add(entry)
        db.commit()
        db.refresh(entry)
        return entry

    return _add
