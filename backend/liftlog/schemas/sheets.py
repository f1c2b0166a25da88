from datetime import date
from typing import Annotated
from pydantic import BaseModel, Field, field_validator

from liftlog.ingest.log_writer import WORKING_SET_COLUMNS
from liftlog.schemas.workout import SetValue, WorkoutIn

class SheetImport(BaseModel):
    spreadsheet_id: str = Field(min_length=1)
    sheet_name: str | None = None

class GridImport(SheetImport):
    # Monday of week 1; grid rows carry week numbers, not dates
    week_one: date

    @field_validator("week_one")
    @classmethod
    def week_one_is_monday(cls, v: date) -> date:
        if v.weekday() != 0:
            raise ValueError(f"week_one must be a Monday, got {v.strftime('%A')} {v.isoformat()}")
        return v

class LogSheetRead(BaseModel):
    sheet_name: str
    exists: bool
    created: bool = False

class LogEntries(SheetImport):
    workouts: list[WorkoutIn] = Field(min_length=1)

    @field_validator("workouts")
    @classmethod
    def sets_fit_columns(cls, v: list[WorkoutIn]) -> list[WorkoutIn]:
        for w in v:
            for ex in w.exercises:
                if len(ex.sets) > WORKING_SET_COLUMNS:
                    raise ValueError(f"{ex.name}: at most {WORKING_SET_COLUMNS} working sets fit a log row")
        return v

class LogEntriesRead(BaseModel):
    entries_added: int

# spreadsheet column letters, A..ZZZ
ColumnStr = Annotated[str, Field(pattern=r"^[A-Z]{1,3}$")]

class CellUpdate(SetValue):
    spreadsheet_id: str = Field(min_length=1)
    sheet_name: str | None = None
    row: int = Field(ge=1)
    col: ColumnStr

class CellUpdateRead(BaseModel):
    row: int
    col: str
    value: str
