from contextlib import asynccontextmanager

from fastapi import FastAPI, Depends
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from sqlalchemy import text

from app.db.base import Base, engine, get_db
from app.core.config import settings
from app.core.dependencies import build_tracker
from app.core.logging import setup_logging
from app.models import StateSlot  # noqa: F401  (registers the table)
from app.routers import habits as habits_router
from app.routers import week as week_router
from app.routers import transfer as transfer_router
from app.core.errors import (
    DisciplineException,
    discipline_exception_handler,
    validation_exception_handler,
    unhandled_exception_handler,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.LOG_LEVEL)
    Base.metadata.create_all(bind=engine)
    app.state.tracker = build_tracker()
    yield


app = FastAPI(
    title="Discipline Table API",
    description=(
        "**Weekly habit grid**\n\n"
        "Define habits, mark per-day completion across a Monday-start week, "
        "navigate between weeks, and export/import the data as CSV or JSON.\n\n"
        "All error responses follow the `{code, message, details}` envelope."
    ),
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# --- CORS ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Exception handlers (most specific first) ---
app.add_exception_handler(DisciplineException, discipline_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)

# --- Routers ---
app.include_router(habits_router.router)
app.include_router(week_router.router)
app.include_router(transfer_router.router)


@app.get("/health", tags=["health"], summary="Health check")
def health(db: Session = Depends(get_db)):
    """
    Probes the database that holds the `state_slots` storage row. The
    habit table itself is served from memory, so a 503 here means saves
    are failing (and being dropped), not that requests will fail.
    """
    try:
        db.execute(text("SELECT 1"))
        db_status = "ok"
    except Exception:
        db_status = "unreachable"

    if db_status != "ok":
        return JSONResponse(
            status_code=503,
            content={"status": "error", "db": db_status},
        )
    return {"status": "ok", "db": "ok", "env": settings.APP_ENV}
