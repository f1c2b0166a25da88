from datetime import date
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from liftlog.db import get_db
from liftlog.deps.auth import get_current_user_id
from liftlog.repositories.session_repo import WorkoutSessionRepository
from liftlog.schemas.workout import (
    ImportRead, UpsertRead, WorkoutImport, WorkoutRead, WorkoutSave,
)
from liftlog.services.upsert import SessionUpsertEngine

router = APIRouter(prefix="/workouts", tags=["workouts"])

@router.get("", response_model=list[WorkoutRead])
def list_workouts(db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    return WorkoutSessionRepository(db).workouts(user_id)

@router.put("/{day}", response_model=UpsertRead)
def save_workout(
    day: date,
    payload: WorkoutSave,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """Replace everything logged on ``day`` with the payload's exercises."""
    return SessionUpsertEngine(db).upsert(
        user_id, day, payload.day_for(day), payload.domain_exercises(), superset=payload.superset,
    )

@router.post("/{day}/entries", response_model=UpsertRead, status_code=status.HTTP_201_CREATED)
def add_entries(
    day: date,
    payload: WorkoutSave,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    return SessionUpsertEngine(db).add_entries(
        user_id, day, payload.day_for(day), payload.domain_exercises(), superset=payload.superset,
    )

@router.post("/import", response_model=ImportRead)
def import_workouts(
    payload: WorkoutImport,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    workouts = [w.to_domain() for w in payload.workouts]
    return SessionUpsertEngine(db).import_workouts(user_id, workouts)

@router.delete("/{day}/exercises/{exercise_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_exercise(
    day: date,
    exercise_id: int,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    SessionUpsertEngine(db).delete_exercise(user_id, day, exercise_id)

@router.delete("")
def delete_all(db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    deleted = SessionUpsertEngine(db).delete_all_sessions(user_id)
    return {"deleted": deleted}
