"""
Import / export router.

GET    /state         — full snapshot
DELETE /state         — clear all data
GET    /export/csv    — current (or given) week as CSV download
GET    /export/json   — full snapshot as JSON download
POST   /import        — replace everything with an uploaded JSON document
"""
from __future__ import annotations

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, Response, status
from starlette.concurrency import run_in_threadpool

from app.core.dependencies import get_tracker
from app.schemas.common import ErrorResponse
from app.schemas.habit import AppState
from app.services.tracker import ExportFile, HabitTracker

router = APIRouter(tags=["transfer"])


def _download(export: ExportFile) -> Response:
    return Response(
        content=export.content,
        media_type=export.media_type,
        headers={"Content-Disposition": f'attachment; filename="{export.filename}"'},
    )


@router.get("/state", response_model=AppState, summary="Full habit table snapshot")
def get_state(tracker: HabitTracker = Depends(get_tracker)):
    return tracker.state


@router.delete(
    "/state",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Clear all data",
)
def clear_state(tracker: HabitTracker = Depends(get_tracker)):
    """Reset to an empty table and erase the persisted copy. Cannot be undone."""
    tracker.clear_all()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/export/csv", summary="Download one week as CSV")
def export_csv(
    week_start: Optional[date] = Query(
        default=None,
        description="Any date in the week to export. Defaults to the current week.",
        examples=["2024-01-01"],
    ),
    tracker: HabitTracker = Depends(get_tracker),
):
    return _download(tracker.export_csv(week_start))


@router.get("/export/json", summary="Download all habits and marks as JSON")
def export_json(tracker: HabitTracker = Depends(get_tracker)):
    return _download(tracker.export_json())


@router.post(
    "/import",
    response_model=AppState,
    summary="Replace all data with an exported JSON document",
    responses={
        200: {"description": "Import applied; the new snapshot is returned."},
        422: {"model": ErrorResponse, "description": "Not JSON, or missing `habits` list / `checks` mapping."},
    },
)
async def import_json(request: Request, tracker: HabitTracker = Depends(get_tracker)):
    """
    The request body is the raw file content. The import is all-or-nothing:
    on any parse or shape error the existing data is left untouched.
    """
    body = await request.body()
    # Applying and saving blocks on the tracker lock and the DB.
    return await run_in_threadpool(tracker.import_json, body)
