"""
Weekly totals derived from the completion map.

Public API
----------
per_habit_total(checks, habit_id, week) -> int in [0, 7]
per_day_total(checks, day, habits)      -> int in [0, len(habits)]
week_totals(state, week)                -> WeekTotals
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable

from app.schemas.habit import AppState, CompletionMap, Habit
from app.services.week import WeekWindow, iso_date


@dataclass
class WeekTotals:
    per_habit: dict[str, int]   # habit id -> completed days this week
    per_day: list[int]          # one count per day, Monday first


def _is_done(checks: CompletionMap, habit_id: str, day: str) -> bool:
    return checks.get(habit_id, {}).get(day) is True


def per_habit_total(checks: CompletionMap, habit_id: str, week: WeekWindow) -> int:
    """Days of `week` marked done for `habit_id`. Unknown ids count 0."""
    return sum(1 for d in week.days if _is_done(checks, habit_id, iso_date(d)))


def per_day_total(checks: CompletionMap, day: date, habits: Iterable[Habit]) -> int:
    """Habits marked done on `day`. Orphaned entries in `checks` are ignored."""
    key = iso_date(day)
    return sum(1 for h in habits if _is_done(checks, h.id, key))


def week_totals(state: AppState, week: WeekWindow) -> WeekTotals:
    return WeekTotals(
        per_habit={h.id: per_habit_total(state.checks, h.id, week) for h in state.habits},
        per_day=[per_day_total(state.checks, d, state.habits) for d in week.days],
    )
