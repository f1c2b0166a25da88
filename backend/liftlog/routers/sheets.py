from fastapi import APIRouter, Depends, Header, HTTPException, Query, status
from sqlalchemy.orm import Session
from liftlog.db import get_db
from liftlog.deps.auth import get_current_user_id
from liftlog.ingest.base import Grid, WorkoutSource
from liftlog.ingest.grid import GRID_RANGE, GridExtractor
from liftlog.ingest.codec import format_set_value
from liftlog.ingest.log_reader import LOG_HEADERS, LOG_RANGE, NormalizedLogReader
from liftlog.ingest.log_writer import log_rows
from liftlog.schemas.sheets import (
    CellUpdate, CellUpdateRead, GridImport, LogEntries, LogEntriesRead, LogSheetRead, SheetImport,
)
from liftlog.schemas.workout import ImportRead
from liftlog.services.upsert import SessionUpsertEngine
from liftlog.settings import get_settings
from liftlog.sheets import GoogleSheetsSource

router = APIRouter(prefix="/sheets", tags=["sheets"])

def get_sheets_source(x_google_access_token: str | None = Header(None)) -> GoogleSheetsSource:
    """Google access token obtained (and refreshed) by the auth service."""
    if not x_google_access_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Google access token required")
    return GoogleSheetsSource.from_access_token(x_google_access_token)

def _import(reader: WorkoutSource, rows: Grid, db: Session, user_id: str):
    # whole sheet parsed before anything is written
    workouts = reader.read(rows)
    return SessionUpsertEngine(db).import_workouts(user_id, workouts)

@router.post("/grid/import", response_model=ImportRead)
def import_grid(
    payload: GridImport,
    source: GoogleSheetsSource = Depends(get_sheets_source),
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    sheet = payload.sheet_name or get_settings().GRID_SHEET_NAME
    rows = source.get_values(payload.spreadsheet_id, f"{sheet}!{GRID_RANGE}")
    return _import(GridExtractor(week_one=payload.week_one), rows, db, user_id)

@router.post("/log/import", response_model=ImportRead)
def import_log(
    payload: SheetImport,
    source: GoogleSheetsSource = Depends(get_sheets_source),
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    sheet = payload.sheet_name or get_settings().LOG_SHEET_NAME
    rows = source.get_values(payload.spreadsheet_id, f"{sheet}!{LOG_RANGE}")
    return _import(NormalizedLogReader(), rows, db, user_id)

# --- write-back ---

@router.get("/log", response_model=LogSheetRead)
def check_log_sheet(
    spreadsheet_id: str = Query(..., min_length=1),
    sheet_name: str | None = None,
    source: GoogleSheetsSource = Depends(get_sheets_source),
    user_id: str = Depends(get_current_user_id),
):
    sheet = sheet_name or get_settings().LOG_SHEET_NAME
    return {"sheet_name": sheet, "exists": sheet in source.sheet_titles(spreadsheet_id)}

@router.post("/log", response_model=LogSheetRead)
def create_log_sheet(
    payload: SheetImport,
    source: GoogleSheetsSource = Depends(get_sheets_source),
    user_id: str = Depends(get_current_user_id),
):
    """Add the log sheet with its header row; an existing sheet is left alone."""
    sheet = payload.sheet_name or get_settings().LOG_SHEET_NAME
    if sheet in source.sheet_titles(payload.spreadsheet_id):
        return {"sheet_name": sheet, "exists": True, "created": False}
    source.add_sheet(payload.spreadsheet_id, sheet)
    source.update_values(payload.spreadsheet_id, f"{sheet}!A1", [LOG_HEADERS])
    return {"sheet_name": sheet, "exists": True, "created": True}

@router.post("/log/entries", response_model=LogEntriesRead, status_code=status.HTTP_201_CREATED)
def append_log_entries(
    payload: LogEntries,
    source: GoogleSheetsSource = Depends(get_sheets_source),
    user_id: str = Depends(get_current_user_id),
):
    sheet = payload.sheet_name or get_settings().LOG_SHEET_NAME
    rows = log_rows(w.to_domain() for w in payload.workouts)
    if rows:
        source.append_values(payload.spreadsheet_id, f"{sheet}!{LOG_RANGE}", rows)
    return {"entries_added": len(rows)}

@router.put("/cell", response_model=CellUpdateRead)
def update_cell(
    payload: CellUpdate,
    source: GoogleSheetsSource = Depends(get_sheets_source),
    user_id: str = Depends(get_current_user_id),
):
    """Write one set into a grid cell, e.g. ``B7`` of the program sheet."""
    sheet = payload.sheet_name or get_settings().GRID_SHEET_NAME
    value = format_set_value(payload.weight, payload.reps)
    source.update_values(payload.spreadsheet_id, f"{sheet}!{payload.col}{payload.row}", [[value]])
    return {"row": payload.row, "col": payload.col, "value": value}
