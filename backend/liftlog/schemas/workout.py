from typing import Annotated, Literal
from datetime import date
from pydantic import BaseModel, Field, field_validator

from liftlog.domain import DayOfWeek, Exercise, Workout, WorkoutSet, GROUP_TYPE_SUPERSET
from liftlog.isoweek import day_of_week, week_number

ExerciseStr = Annotated[str, Field(max_length=255)]
NonNegInt = Annotated[int, Field(ge=0)]
# Numeric(6, 2) column
Weight = Annotated[float, Field(ge=0, lt=10000)]

class SetValue(BaseModel):
    weight: Weight = 0
    reps: NonNegInt

class ExerciseIn(BaseModel):
    name: ExerciseStr
    warmup: SetValue | None = None
    sets: list[SetValue] = Field(default_factory=list)
    group_id: str | None = Field(default=None, max_length=64)
    group_type: Literal["superset"] | None = None

    @field_validator("name")
    @classmethod
    def name_non_blank(cls, v: str) -> str:
        v2 = v.strip()
        if not v2:
            raise ValueError("exercise name cannot be blank")
        return v2

    def to_domain(self) -> Exercise:
        sets = []
        if self.warmup is not None:
            sets.append(WorkoutSet(weight=self.warmup.weight, reps=self.warmup.reps, is_warmup=True, set_number=0))
        for n, s in enumerate(self.sets, start=1):
            sets.append(WorkoutSet(weight=s.weight, reps=s.reps, is_warmup=False, set_number=n))
        group_type = self.group_type or (GROUP_TYPE_SUPERSET if self.group_id else None)
        return Exercise(name=self.name, sets=sets, group_id=self.group_id, group_type=group_type)

class WorkoutSave(BaseModel):
    """Body for saving one date; the date itself comes from the path."""
    day_of_week: DayOfWeek | None = None
    exercises: list[ExerciseIn] = Field(default_factory=list)
    # one fresh group id shared by every exercise in this save
    superset: bool = False

    def day_for(self, when: date) -> DayOfWeek:
        return self.day_of_week or day_of_week(when)

    def domain_exercises(self) -> list[Exercise]:
        return [ex.to_domain() for ex in self.exercises]

class WorkoutIn(BaseModel):
    date: date
    day_of_week: DayOfWeek | None = None
    exercises: list[ExerciseIn] = Field(default_factory=list)

    def to_domain(self) -> Workout:
        return Workout(
            date=self.date,
            day_of_week=self.day_of_week or day_of_week(self.date),
            week_number=week_number(self.date),
            exercises=[ex.to_domain() for ex in self.exercises],
        )

class WorkoutImport(BaseModel):
    workouts: list[WorkoutIn]

class SetRead(BaseModel):
    weight: float
    reps: int
    is_warmup: bool
    set_number: int

    model_config = {"from_attributes": True}

class ExerciseRead(BaseModel):
    id: str | None = None
    name: str
    sets: list[SetRead]
    group_id: str | None = None
    group_type: str | None = None

    model_config = {"from_attributes": True}

class WorkoutRead(BaseModel):
    date: date | None
    day_of_week: DayOfWeek
    week_number: int
    exercises: list[ExerciseRead]

    model_config = {"from_attributes": True}

class UpsertRead(BaseModel):
    created: bool
    session_id: int

    model_config = {"from_attributes": True}

class ImportRead(BaseModel):
    imported: int
    updated: int
    total: int

    model_config = {"from_attributes": True}
