"""Tests for schedule persistence: idempotency, races and atomicity."""

import datetime

import pytest
from loguru import logger
from sqlalchemy.exc import IntegrityError, OperationalError
from sqlmodel import select

from app.db.repositories.workout_session import WorkoutSessionRepository
from app.models.workout_session import SessionStatus, WorkoutSession
from app.scheduling.generator import generate_schedule
from app.schemas.schedule import PersistScheduleRequest, ScheduledSession, WorkoutInput
from app.services.schedule_persistence_service import SchedulePersister

D = datetime.date

ATHLETE = "athlete-1"
MONDAY = D(2026, 10, 19)


# ======================================================================
# Helpers
# ======================================================================


def _schedule() -> list[ScheduledSession]:
    workouts = [WorkoutInput(id=f"w1d{d}", week_number=1, day_number=d, name=f"Day {d}") for d in range(1, 5)]
    return generate_schedule(workouts, MONDAY, [1, 2, 4, 5])


def _request(schedule, assignment_id: str = "assign-1") -> PersistScheduleRequest:
    return PersistScheduleRequest(athlete_id=ATHLETE, program_id="prog-1", program_assignment_id=assignment_id,
                                  schedule=schedule, )


def _stored(db) -> list[WorkoutSession]:
    return list(db.exec(select(WorkoutSession).order_by(WorkoutSession.date)).all())


# ======================================================================
# persist_schedule
# ======================================================================


class TestPersistSchedule:
    def test_empty_schedule(self, db):
        result = SchedulePersister(db).persist_schedule(_request([]))
        assert (result.created, result.skipped, result.total) == (0, 0, 0)
        assert _stored(db) == []

    def test_creates_all_new_sessions(self, db):
        schedule = _schedule()
        result = SchedulePersister(db).persist_schedule(_request(schedule))

        assert (result.created, result.skipped, result.total) == (4, 0, 4)
        rows = _stored(db)
        assert [r.date for r in rows] == [s.date for s in schedule]
        for row, proposed in zip(rows, schedule):
            assert row.athlete_id == ATHLETE
            assert row.program_id == "prog-1"
            assert row.program_assignment_id == "assign-1"
            assert row.workout_id == proposed.workout_id
            assert row.title == proposed.title
            assert row.week_number == 1
            assert row.day_number == proposed.day_number
            assert row.status == SessionStatus.NOT_STARTED
            assert row.total_items == 0
            assert row.completed_items == 0
            assert row.completion_percentage == 0.0

    def test_idempotent(self, db):
        persister = SchedulePersister(db)
        schedule = _schedule()

        first = persister.persist_schedule(_request(schedule))
        second = persister.persist_schedule(_request(schedule))

        assert first.created == 4
        assert (second.created, second.skipped, second.total) == (0, 4, 4)
        assert len(_stored(db)) == 4

    def test_skips_dates_taken_by_any_assignment(self, db, add_session):
        add_session(ATHLETE, D(2026, 10, 20), program_assignment_id="assign-1")
        add_session(ATHLETE, D(2026, 10, 22), program_assignment_id=None)

        result = SchedulePersister(db).persist_schedule(_request(_schedule()))

        assert (result.created, result.skipped, result.total) == (2, 2, 4)
        assert len(_stored(db)) == 4

    def test_existing_session_is_left_untouched(self, db, add_session):
        add_session(ATHLETE, MONDAY, title="Logged", status=SessionStatus.FULLY_COMPLETED)
        SchedulePersister(db).persist_schedule(_request(_schedule()))
        monday = db.exec(select(WorkoutSession).where(WorkoutSession.date == MONDAY)).one()
        assert monday.title == "Logged"
        assert monday.status == SessionStatus.FULLY_COMPLETED

    def test_repeated_date_in_schedule_is_skipped_not_raced(self, db):
        schedule = [ScheduledSession(date=MONDAY, workout_id="a", week_number=1, day_number=1, title="A"),
                    ScheduledSession(date=MONDAY, workout_id="b", week_number=1, day_number=2, title="B"), ]
        warnings: list[str] = []
        handler_id = logger.add(warnings.append, level="WARNING", format="{message}")
        try:
            result = SchedulePersister(db).persist_schedule(_request(schedule))
        finally:
            logger.remove(handler_id)

        assert (result.created, result.skipped, result.total) == (1, 1, 2)
        assert [r.title for r in _stored(db)] == ["A"]
        assert warnings == []

    def test_other_athlete_does_not_block(self, db, add_session):
        add_session("athlete-2", MONDAY)
        result = SchedulePersister(db).persist_schedule(_request(_schedule()))
        assert result.created == 4


# ======================================================================
# Concurrency and failure
# ======================================================================


class TestRaceAndAtomicity:
    def test_row_taken_after_precheck_is_skipped(self, db, add_session, monkeypatch):
        """Another writer takes a date between the existence check and the insert."""
        add_session(ATHLETE, D(2026, 10, 22), title="Concurrent")
        persister = SchedulePersister(db)
        monkeypatch.setattr(persister.repository, "get_on_dates", lambda *args, **kwargs: [])

        result = persister.persist_schedule(_request(_schedule()))

        assert (result.created, result.skipped, result.total) == (3, 1, 4)
        rows = _stored(db)
        assert len(rows) == 4
        assert [r.title for r in rows if r.date == D(2026, 10, 22)] == ["Concurrent"]

    def test_failed_commit_rolls_back_whole_batch(self, db, monkeypatch):
        persister = SchedulePersister(db)

        def _fail():
            raise OperationalError("COMMIT", { }, Exception("disk I/O error"))

        monkeypatch.setattr(db, "commit", _fail)
        with pytest.raises(OperationalError):
            persister.persist_schedule(_request(_schedule()))

        monkeypatch.undo()
        assert _stored(db) == []


# ======================================================================
# Repository
# ======================================================================


class TestInsertIgnoringExisting:
    def test_returns_inserted_count(self, db, add_session):
        add_session(ATHLETE, MONDAY)
        entries = [WorkoutSession(athlete_id=ATHLETE, date=MONDAY + datetime.timedelta(days=i), title=f"S{i}")
                   for i in range(3)]
        assert WorkoutSessionRepository(db).insert_ignoring_existing(entries) == 2

    def test_nothing_to_insert(self, db):
        assert WorkoutSessionRepository(db).insert_ignoring_existing([]) == 0

    def test_invalid_row_fails_whole_batch(self, db):
        entries = [WorkoutSession(athlete_id=ATHLETE, date=MONDAY, title="ok"),
                   WorkoutSession(athlete_id=None, date=MONDAY + datetime.timedelta(days=1), title="broken"), ]
        with pytest.raises(IntegrityError):
            WorkoutSessionRepository(db).insert_ignoring_existing(entries)
        assert _stored(db) == []
