# liftlog/main.py
import os
import time
import logging
import uuid
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text

from liftlog.errors import (
    ConflictError, NotFoundError, ReauthenticationRequired, SheetValidationError, SheetsSourceError,
)
from liftlog.routers.workouts import router as workouts_router
from liftlog.routers.analytics import router as analytics_router
from liftlog.routers.exercises import router as exercises_router
from liftlog.routers.sheets import router as sheets_router
from liftlog.db import SessionLocal  # for healthz DB check
from liftlog.settings import get_settings

log = logging.getLogger("uvicorn")

app = FastAPI(
    title="liftlog API",
    openapi_tags=[
        {"name": "workouts", "description": "Per-date workout sessions"},
        {"name": "sheets", "description": "Import from and write back to Google Sheets"},
        {"name": "analytics", "description": "PRs, trends and weekly volume"},
        {"name": "exercises", "description": "Exercise master lookup"},
    ],
)


# CORS
ALLOW_ORIGINS = [o.strip() for o in get_settings().ALLOW_ORIGINS.split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOW_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.middleware("http")
async def add_request_id_and_log(request: Request, call_next):
    req_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000
    response.headers["X-Request-ID"] = req_id
    log.info("rid=%s %s %s -> %s in %.1fms",
             req_id, request.method, request.url.path, response.status_code, duration_ms)
    return response

# Error taxonomy -> HTTP
@app.exception_handler(SheetValidationError)
async def sheet_validation_error(request: Request, exc: SheetValidationError):
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": str(exc), "row": exc.row, "column": exc.column},
    )

@app.exception_handler(ReauthenticationRequired)
async def reauth_required(request: Request, exc: ReauthenticationRequired):
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"detail": str(exc), "reauthenticate": True},
        headers={"WWW-Authenticate": "Bearer"},
    )

@app.exception_handler(SheetsSourceError)
async def sheets_source_error(request: Request, exc: SheetsSourceError):
    return JSONResponse(status_code=status.HTTP_502_BAD_GATEWAY, content={"detail": str(exc)})

@app.exception_handler(NotFoundError)
async def not_found(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})

@app.exception_handler(ConflictError)
async def conflict(request: Request, exc: ConflictError):
    return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"detail": str(exc)})

@app.get("/")
def root():
    return {"ok": True, "name": "liftlog API"}

@app.get("/ping")
def ping():
    return {"pong": True}

@app.get("/healthz")
def healthz():
    # Quick DB sanity check
    try:
        with SessionLocal() as db:
            db.execute(text("SELECT 1"))
        return {"status": "ok"}
    except Exception as e:
        return {"status": "degraded", "error": str(e)}

@app.get("/version")
def version():
    return {"version": os.getenv("API_VERSION", "dev")}

# Routers
app.include_router(workouts_router)
app.include_router(sheets_router)
app.include_router(analytics_router)
app.include_router(exercises_router)
