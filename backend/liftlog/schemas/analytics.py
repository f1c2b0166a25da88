from datetime import date
from pydantic import BaseModel

class BestSetRead(BaseModel):
    exercise_name: str
    weight: float
    reps: int
    volume: float
    date: date | None
    muscle_group: str

    model_config = {"from_attributes": True}

class TrendPointRead(BaseModel):
    date: date | None
    max_weight: float
    total_volume: float
    total_reps: int
    average_weight: float

    model_config = {"from_attributes": True}

class TrendsRead(BaseModel):
    exercise_name: str
    trends: list[TrendPointRead]

class ExerciseStatsRead(BaseModel):
    exercise_name: str
    current_pr: BestSetRead
    recent_best: BestSetRead | None = None
    trend: list[TrendPointRead]
    total_sessions: int

    model_config = {"from_attributes": True}

class WeeklyVolumeRead(BaseModel):
    week: str
    total_volume: float
    exercise_count: int
    muscle_groups: dict[str, float]

    model_config = {"from_attributes": True}

class SummaryRead(BaseModel):
    total_sessions: int
    total_sets: int
    total_volume: float
    unique_exercises: int
    exercise_list: list[str]

    model_config = {"from_attributes": True}
