from datetime import timedelta
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from liftlog.db import get_db
from liftlog.deps.auth import get_current_user_id
from liftlog.repositories.exercise_master_repo import ExerciseMasterRepository
from liftlog.repositories.session_repo import WorkoutSessionRepository
from liftlog.schemas.analytics import (
    BestSetRead, ExerciseStatsRead, SummaryRead, TrendsRead, WeeklyVolumeRead,
)
from liftlog.services.analytics import AnalyticsEngine
from liftlog.settings import get_settings

router = APIRouter(prefix="/analytics", tags=["analytics"])

def get_engine(db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)) -> AnalyticsEngine:
    """One engine per request, over the user's sessions as they are right now."""
    workouts = WorkoutSessionRepository(db).workouts(user_id)
    muscle_groups = ExerciseMasterRepository(db).muscle_group_map(user_id)
    return AnalyticsEngine(workouts, muscle_groups)

def lookback(
    days: int | None = Query(None, ge=1, le=3650),
    weeks: int | None = Query(None, ge=1, le=520),
) -> timedelta:
    if days is not None and weeks is not None:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail="Pass either days or weeks, not both")
    if weeks is not None:
        return timedelta(weeks=weeks)
    return timedelta(days=days if days is not None else get_settings().BEST_SETS_DEFAULT_DAYS)

@router.get("/best-sets", response_model=list[BestSetRead])
def best_sets(window: timedelta = Depends(lookback), engine: AnalyticsEngine = Depends(get_engine)):
    return engine.best_sets(window)

@router.get("/exercise/{name}/trends", response_model=TrendsRead)
def exercise_trends(name: str, engine: AnalyticsEngine = Depends(get_engine)):
    return {"exercise_name": name, "trends": engine.trend(name)}

@router.get("/exercise/{name}/stats", response_model=ExerciseStatsRead)
def exercise_stats(
    name: str,
    window: timedelta = Depends(lookback),
    engine: AnalyticsEngine = Depends(get_engine),
):
    return engine.exercise_stats(name, window)

@router.get("/volume-history", response_model=list[WeeklyVolumeRead])
def volume_history(engine: AnalyticsEngine = Depends(get_engine)):
    return engine.volume_history()

@router.get("/summary", response_model=SummaryRead)
def summary(engine: AnalyticsEngine = Depends(get_engine)):
    return engine.summary()
