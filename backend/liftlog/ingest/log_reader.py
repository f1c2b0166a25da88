"""Flat workout log: one row per exercise per date."""
from __future__ import annotations
import logging
import re
from datetime import date
from typing import Sequence

from liftlog.domain import DayOfWeek, Exercise, GROUP_TYPE_SUPERSET, Workout
from liftlog.errors import SheetValidationError
from liftlog.ingest.base import Cell, Grid, cell
from liftlog.ingest.codec import build_sets
from liftlog.isoweek import day_of_week, week_number

log = logging.getLogger(__name__)

LOG_HEADERS = ("Date", "Day", "Exercise", "Group", "Warmup", "Set1", "Set2", "Set3", "Set4")
# Sheets created before supersets existed have no Group column
LEGACY_LOG_HEADERS = ("Date", "Day", "Exercise", "Warmup", "Set1", "Set2", "Set3", "Set4")
LOG_RANGE = "A:I"

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def validate_header(header: Sequence[Cell]) -> tuple[str, ...]:
    """Return the recognised layout or raise naming the first bad column (1-based)."""
    names = [cell(header, i) for i in range(len(header))]
    # trailing blank cells are how the API pads short rows
    while names and not names[-1]:
        names.pop()

    if len(names) == len(LOG_HEADERS):
        expected = LOG_HEADERS
    elif len(names) == len(LEGACY_LOG_HEADERS):
        expected = LEGACY_LOG_HEADERS
    else:
        raise SheetValidationError(
            f"Expected {len(LOG_HEADERS)} (or {len(LEGACY_LOG_HEADERS)}) columns, got {len(names)}",
            row=1,
        )

    for i, (got, want) in enumerate(zip(names, expected), start=1):
        if got != want:
            raise SheetValidationError(f'Invalid header. Expected "{want}", got "{got}"', row=1, column=i)
    return expected


def _parse_date(text: str, row_num: int) -> date:
    if not _DATE_RE.match(text):
        raise SheetValidationError(f'Invalid date format "{text}". Expected YYYY-MM-DD', row=row_num, column="Date")
    try:
        return date.fromisoformat(text)
    except ValueError:
        raise SheetValidationError(f'"{text}" is not a calendar date', row=row_num, column="Date")


def _parse_day(text: str, when: date, row_num: int) -> DayOfWeek:
    if not text:
        return day_of_week(when)
    for day in DayOfWeek:
        if day.value.lower() == text.lower():
            return day
    raise SheetValidationError(f'Unknown day "{text}"', row=row_num, column="Day")


class NormalizedLogReader:
    def read(self, rows: Grid) -> list[Workout]:
        if not rows:
            raise SheetValidationError("Sheet is empty", row=1)

        headers = validate_header(rows[0])
        col = {name: i for i, name in enumerate(headers)}
        by_date: dict[str, Workout] = {}

        for i in range(1, len(rows)):
            row = rows[i]
            row_num = i + 1
            date_text = cell(row, col["Date"])
            name = cell(row, col["Exercise"])
            if not date_text or not name:
                continue

            when = _parse_date(date_text, row_num)
            day = _parse_day(cell(row, col["Day"]), when, row_num)

            exercise = Exercise(
                name=name,
                sets=build_sets(
                    cell(row, col["Warmup"]),
                    [cell(row, col[f"Set{n}"]) for n in range(1, 5)],
                ),
                id=f"{i}-{date_text}-{name}",
            )
            if "Group" in col:
                group = cell(row, col["Group"])
                if group:
                    exercise.group_id = group
                    exercise.group_type = GROUP_TYPE_SUPERSET

            workout = by_date.get(date_text)
            if workout is None:
                workout = Workout(date=when, day_of_week=day, week_number=week_number(when))
                by_date[date_text] = workout
            workout.exercises.append(exercise)

        workouts = [by_date[k] for k in sorted(by_date)]
        log.info("workout log: %d row(s) -> %d workout(s)", len(rows) - 1, len(workouts))
        return workouts
