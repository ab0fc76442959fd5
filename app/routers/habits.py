"""
Habits router.

GET    /habits
POST   /habits
PATCH  /habits/{habit_id}
DELETE /habits/{habit_id}
POST   /habits/{habit_id}/checks/{day}
"""
from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, Response, status

from app.core.dependencies import get_tracker
from app.schemas.common import ErrorResponse
from app.schemas.habit import Habit, HabitNameRequest, ToggleResponse
from app.services.tracker import HabitTracker
from app.services.week import iso_date

router = APIRouter(prefix="/habits", tags=["habits"])


@router.get("", response_model=list[Habit], summary="All habits in display order")
def list_habits(tracker: HabitTracker = Depends(get_tracker)):
    return tracker.list_habits()


@router.post(
    "",
    response_model=Habit,
    status_code=status.HTTP_201_CREATED,
    summary="Add a habit",
    responses={
        201: {"description": "Habit appended to the end of the list."},
        204: {"description": "Name was blank after trimming; nothing was added."},
    },
)
def add_habit(payload: HabitNameRequest, tracker: HabitTracker = Depends(get_tracker)):
    """Append a habit. A whitespace-only name is silently skipped (204)."""
    habit = tracker.add_habit(payload.name)
    if habit is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return habit


@router.patch(
    "/{habit_id}",
    response_model=Habit,
    summary="Rename a habit",
    responses={404: {"model": ErrorResponse, "description": "No habit with this id."}},
)
def rename_habit(
    habit_id: str,
    payload: HabitNameRequest,
    tracker: HabitTracker = Depends(get_tracker),
):
    """
    Rename a habit. A blank name abandons the rename and the habit is
    returned with its current name.
    """
    return tracker.rename_habit(habit_id, payload.name)


@router.delete(
    "/{habit_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a habit and its completion marks",
)
def remove_habit(habit_id: str, tracker: HabitTracker = Depends(get_tracker)):
    """Idempotent: deleting an unknown id also returns 204."""
    tracker.remove_habit(habit_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{habit_id}/checks/{day}",
    response_model=ToggleResponse,
    summary="Toggle one day's completion mark",
)
def toggle_check(habit_id: str, day: date, tracker: HabitTracker = Depends(get_tracker)):
    checked = tracker.toggle_check(habit_id, day)
    return ToggleResponse(habit_id=habit_id, day=iso_date(day), checked=checked)
