"""Canonical workout values shared by both readers, the store and analytics."""
from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date as Date
from enum import Enum


class DayOfWeek(str, Enum):
    Monday = "Monday"
    Tuesday = "Tuesday"
    Wednesday = "Wednesday"
    Thursday = "Thursday"
    Friday = "Friday"
    Saturday = "Saturday"
    Sunday = "Sunday"

    @property
    def index(self) -> int:
        """Monday = 0 ... Sunday = 6."""
        return DAYS_OF_WEEK.index(self)


DAYS_OF_WEEK: list[DayOfWeek] = list(DayOfWeek)

GROUP_TYPE_SUPERSET = "superset"
OTHER_MUSCLE_GROUP = "Other"


@dataclass(slots=True)
class WorkoutSet:
    weight: float
    reps: int
    is_warmup: bool = False
    set_number: int = 1

    @property
    def volume(self) -> float:
        return self.weight * self.reps


@dataclass(slots=True)
class Exercise:
    name: str
    sets: list[WorkoutSet] = field(default_factory=list)
    id: str | None = None
    group_id: str | None = None
    group_type: str | None = None

    @property
    def working_sets(self) -> list[WorkoutSet]:
        return [s for s in self.sets if not s.is_warmup]

    @property
    def key(self) -> str:
        """Name used for case-insensitive comparisons."""
        return self.name.strip().lower()


@dataclass(slots=True)
class Workout:
    date: Date | None
    day_of_week: DayOfWeek
    week_number: int
    exercises: list[Exercise] = field(default_factory=list)


@dataclass(slots=True)
class DayWorkouts:
    day_of_week: DayOfWeek
    exercises: list[Exercise]


@dataclass(slots=True)
class Week:
    week_number: int
    days: list[DayWorkouts] = field(default_factory=list)


# --- derived analytics values (never persisted) ---

@dataclass(slots=True)
class BestSet:
    exercise_name: str
    weight: float
    reps: int
    volume: float
    date: Date | None
    muscle_group: str


@dataclass(slots=True)
class TrendPoint:
    date: Date | None
    max_weight: float
    total_volume: float
    total_reps: int
    average_weight: float


@dataclass(slots=True)
class ExerciseStats:
    exercise_name: str
    current_pr: BestSet
    recent_best: BestSet | None
    trend: list[TrendPoint]
    total_sessions: int


@dataclass(slots=True)
class WeeklyVolume:
    week: str
    total_volume: float = 0.0
    exercise_count: int = 0
    muscle_groups: dict[str, float] = field(default_factory=dict)


@dataclass(slots=True)
class Summary:
    total_sessions: int
    total_sets: int
    total_volume: float
    unique_exercises: int
    exercise_list: list[str]


# --- write-path results ---

@dataclass(slots=True)
class UpsertResult:
    created: bool
    session_id: int


@dataclass(slots=True)
class ImportResult:
    imported: int
    updated: int
    total: int
