"""
Schedule endpoints.

Preview, persist, list and clean up athletes' generated schedules.

When a request omits ``start_date`` the server's current calendar day
(``datetime.date.today()``) is used.  Clients in a different time zone
should send an explicit date to avoid an off-by-one day.
"""

import datetime
from typing import Optional, Union

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlmodel import Session

from app.core.config import settings
from app.db.repositories.workout_session import WorkoutSessionRepository
from app.db.session import get_db
from app.scheduling.generator import generate_schedule
from app.schemas.schedule import (CleanupResult, PersistScheduleRequest, ScheduleAssignRequest, ScheduleAssignResponse,
                                  ScheduledSession, SchedulePreviewRequest, SchedulePreviewResponse,
                                  WorkoutSessionResponse, )
from app.services.assignment_cleanup_service import AssignmentCleanupService
from app.services.conflict_service import ConflictDetector
from app.services.schedule_persistence_service import SchedulePersister

router = APIRouter()


def _generate(data: Union[SchedulePreviewRequest, ScheduleAssignRequest]) -> list[ScheduledSession]:
    # Configured pattern applies only when the request has none
    training_days = data.training_days if data.training_days is not None else settings.DEFAULT_TRAINING_DAYS
    return generate_schedule(data.workouts, data.start_date or datetime.date.today(), training_days)


@router.post("/preview", summary="Generate a schedule and report conflicts without saving it.",
             response_model=SchedulePreviewResponse, )
def preview_schedule(data: SchedulePreviewRequest, db: Session = Depends(get_db), ):
    schedule = _generate(data)
    conflicts = ConflictDetector(db).detect_conflicts(data.athlete_id, schedule, data.exclude_assignment_id)
    return SchedulePreviewResponse(schedule=schedule, conflicts=conflicts)


@router.post("/assign", summary="Generate and persist a schedule for a program assignment.",
             response_model=ScheduleAssignResponse, status_code=status.HTTP_201_CREATED, )
def assign_schedule(data: ScheduleAssignRequest, db: Session = Depends(get_db), ):
    schedule = _generate(data)
    conflicts = ConflictDetector(db).detect_conflicts(data.athlete_id, schedule, data.program_assignment_id)
    result = SchedulePersister(db).persist_schedule(
        PersistScheduleRequest(athlete_id=data.athlete_id, program_id=data.program_id,
                               program_assignment_id=data.program_assignment_id, schedule=schedule, ))
    return ScheduleAssignResponse(schedule_size=len(schedule), conflicts=conflicts, result=result)


@router.get("/{athlete_id}", summary="List an athlete's scheduled sessions.",
            response_model=list[WorkoutSessionResponse], )
def list_schedule(athlete_id: str, start: Optional[datetime.date] = Query(None, description="Range start (inclusive)"),
                  end: Optional[datetime.date] = Query(None, description="Range end (inclusive)"),
                  db: Session = Depends(get_db), ):
    # Default: the next 28 days
    start_date = start or datetime.date.today()
    end_date = end or start_date + datetime.timedelta(days=28)
    if start_date > end_date:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="start must be on or before end", )
    return WorkoutSessionRepository(db).get_by_athlete_date_range(athlete_id, start_date, end_date)


@router.delete("/assignments/{program_assignment_id}/sessions",
               summary="Delete an assignment's unstarted future sessions.", response_model=CleanupResult, )
def cleanup_assignment(program_assignment_id: str,
                       as_of: Optional[datetime.date] = Query(None, description="Cutoff day (inclusive)"),
                       db: Session = Depends(get_db), ):
    return AssignmentCleanupService(db).cleanup_assignment_sessions(program_assignment_id, as_of)
