from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from liftlog.db import get_db
from liftlog.deps.auth import get_current_user_id
from liftlog.repositories.exercise_master_repo import ExerciseMasterRepository
from liftlog.schemas.exercise_master import ExerciseMasterCreate, ExerciseMasterRead

router = APIRouter(prefix="/exercises", tags=["exercises"])

@router.get("/names", response_model=list[str])
def known_names(db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    """Suggestions for the logging form; read fresh on every call."""
    return ExerciseMasterRepository(db).known_names(user_id)

@router.post("", response_model=ExerciseMasterRead, status_code=status.HTTP_201_CREATED)
def create_exercise(
    payload: ExerciseMasterCreate,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    # ConflictError on a duplicate name is mapped to 409 by the app
    return ExerciseMasterRepository(db).create(user_id, name=payload.name, muscle_group=payload.muscle_group)
