"""Canonical workouts back to flat log rows, the inverse of the log reader."""
from __future__ import annotations
from typing import Iterable

from liftlog.domain import Exercise, Workout
from liftlog.ingest.codec import format_set_value

WORKING_SET_COLUMNS = 4


def log_row(workout: Workout, exercise: Exercise) -> list[str]:
    """One row in ``LOG_HEADERS`` order; empty cells for sets not logged."""
    if workout.date is None:
        raise ValueError(f"{exercise.name}: workout has no date")
    warmup = ""
    working = [""] * WORKING_SET_COLUMNS
    for s in exercise.sets:
        value = format_set_value(s.weight, s.reps)
        if s.is_warmup:
            warmup = value
        elif 1 <= s.set_number <= WORKING_SET_COLUMNS:
            working[s.set_number - 1] = value
        else:
            raise ValueError(f"{exercise.name}: set {s.set_number} has no column (1-{WORKING_SET_COLUMNS})")
    return [
        workout.date.isoformat(),
        workout.day_of_week.value,
        exercise.name,
        exercise.group_id or "",
        warmup,
        *working,
    ]


def log_rows(workouts: Iterable[Workout]) -> list[list[str]]:
    return [log_row(w, ex) for w in workouts for ex in w.exercises]
