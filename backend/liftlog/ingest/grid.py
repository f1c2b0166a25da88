"""Weekly grid layout: one block of rows per week, one column block per day.

Row 0 holds day names, row 1 column names. A row whose first cell is a bare
positive integer opens a new week; the week marker row can carry exercises
itself. Each day spans six columns starting at column B:

    exercise | warmup | set1 | set2 | set3 | set4
"""
from __future__ import annotations
import logging
import re
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Sequence

from liftlog.domain import DAYS_OF_WEEK, DayOfWeek, DayWorkouts, Exercise, Week, Workout
from liftlog.ingest.base import Cell, Grid, cell
from liftlog.ingest.codec import build_sets

log = logging.getLogger(__name__)

HEADER_ROWS = 2
GRID_RANGE = "A:AQ"
_WEEK_MARKER_RE = re.compile(r"^\d+$")


@dataclass(frozen=True, slots=True)
class DayColumns:
    day: DayOfWeek
    exercise: int

    @property
    def warmup(self) -> int:
        return self.exercise + 1

    @property
    def sets(self) -> list[int]:
        return [self.exercise + 2 + i for i in range(4)]


DAY_COLUMNS: list[DayColumns] = [
    DayColumns(day, exercise=1 + 6 * i) for i, day in enumerate(DAYS_OF_WEEK)
]


def _week_number(row: Sequence[Cell]) -> int | None:
    marker = cell(row, 0)
    if _WEEK_MARKER_RE.match(marker):
        number = int(marker)
        if number > 0:
            return number
    return None


class GridExtractor:
    """Reads the weekly grid. ``week_one`` is the Monday of week 1, used to date workouts."""

    def __init__(self, week_one: date | None = None):
        self.week_one = week_one

    def extract(self, rows: Grid) -> list[Week]:
        if len(rows) < HEADER_ROWS + 1:
            return []

        weeks: list[Week] = []
        current: int | None = None
        block: list[tuple[int, Sequence[Cell]]] = []

        for i in range(HEADER_ROWS, len(rows)):
            row = rows[i]
            number = _week_number(row)
            if number is not None:
                if current is not None:
                    weeks.append(self._build_week(current, block))
                current = number
                block = [(i, row)]
            elif current is not None:
                block.append((i, row))

        if current is not None:
            weeks.append(self._build_week(current, block))
        return weeks

    def _build_week(self, number: int, block: list[tuple[int, Sequence[Cell]]]) -> Week:
        week = Week(week_number=number)
        for cols in DAY_COLUMNS:
            exercises = self._day_exercises(cols, block)
            if exercises:
                week.days.append(DayWorkouts(day_of_week=cols.day, exercises=exercises))
        return week

    @staticmethod
    def _day_exercises(cols: DayColumns, block: list[tuple[int, Sequence[Cell]]]) -> list[Exercise]:
        exercises: list[Exercise] = []
        for row_idx, row in block:
            name = cell(row, cols.exercise)
            if not name:
                continue
            sets = build_sets(
                cell(row, cols.warmup),
                [cell(row, c) for c in cols.sets],
            )
            if sets:
                exercises.append(Exercise(name=name, sets=sets, id=f"{row_idx}-{cols.day.value}-{name}"))
        return exercises

    def to_workouts(self, weeks: list[Week]) -> list[Workout]:
        workouts: list[Workout] = []
        for week in weeks:
            for day in week.days:
                when = None
                if self.week_one is not None:
                    when = self.week_one + timedelta(weeks=week.week_number - 1, days=day.day_of_week.index)
                workouts.append(Workout(
                    date=when,
                    day_of_week=day.day_of_week,
                    week_number=week.week_number,
                    exercises=day.exercises,
                ))
        return workouts

    def read(self, rows: Grid) -> list[Workout]:
        weeks = self.extract(rows)
        log.info("grid: %d week(s) extracted", len(weeks))
        return self.to_workouts(weeks)
