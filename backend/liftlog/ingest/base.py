from __future__ import annotations
from typing import Optional, Protocol, Sequence

from liftlog.domain import Workout

Cell = Optional[str]
Grid = Sequence[Sequence[Cell]]


class WorkoutSource(Protocol):
    """Anything that turns raw spreadsheet rows into canonical workouts."""

    def read(self, rows: Grid) -> list[Workout]: ...


def cell(row: Sequence[Cell], idx: int) -> str:
    """Trimmed text of ``row[idx]``; ragged rows read as blank."""
    if idx >= len(row):
        return ""
    value = row[idx]
    if value is None:
        return ""
    return str(value).strip()
