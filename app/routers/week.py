"""
Week router.

GET  /week
POST /week/previous
POST /week/next
POST /week/today
"""
from __future__ import annotations

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.core.dependencies import get_tracker
from app.schemas.week import DayColumn, HabitRow, WeekViewResponse
from app.services.tracker import HabitTracker, WeekView
from app.services.week import WEEKDAY_NAMES, iso_date, week_label

router = APIRouter(prefix="/week", tags=["week"])


# ---------------------------------------------------------------------------
# Serialization helper
# ---------------------------------------------------------------------------

def _view_to_response(view: WeekView) -> WeekViewResponse:
    return WeekViewResponse(
        week_start=iso_date(view.window.start),
        label=week_label(view.window),
        days=[
            DayColumn(date=iso_date(d), weekday=WEEKDAY_NAMES[i], total=view.totals.per_day[i])
            for i, d in enumerate(view.window.days)
        ],
        rows=[
            HabitRow(
                id=h.id,
                name=h.name,
                cells=view.cells[h.id],
                total=view.totals.per_habit.get(h.id, 0),
            )
            for h in view.habits
        ],
    )


@router.get("", response_model=WeekViewResponse, summary="Habit grid for one week")
def get_week(
    reference: Optional[date] = Query(
        default=None,
        description="Any date in the wanted week. Defaults to the tracker's current week.",
        examples=["2024-01-03"],
    ),
    tracker: HabitTracker = Depends(get_tracker),
):
    """Rows per habit with 7 marks and a weekly total, plus per-day totals."""
    return _view_to_response(tracker.week_view(reference))


@router.post("/previous", response_model=WeekViewResponse, summary="Move back one week")
def previous_week(tracker: HabitTracker = Depends(get_tracker)):
    tracker.previous_week()
    return _view_to_response(tracker.week_view())


@router.post("/next", response_model=WeekViewResponse, summary="Move forward one week")
def next_week(tracker: HabitTracker = Depends(get_tracker)):
    tracker.next_week()
    return _view_to_response(tracker.week_view())


@router.post("/today", response_model=WeekViewResponse, summary="Jump to the current week")
def this_week(tracker: HabitTracker = Depends(get_tracker)):
    tracker.this_week()
    return _view_to_response(tracker.week_view())
