"""
Habit table schemas.

AppState is both the in-memory model and the JSON interchange document:
{"habits": [{"id", "name"}, ...], "checks": {habit_id: {YYYY-MM-DD: bool}}}
"""
from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field, StrictBool, StrictStr, field_validator

# habit id -> ISO date -> completed
CompletionMap = dict[StrictStr, dict[StrictStr, StrictBool]]


class Habit(BaseModel):
    """A named habit. Identity is the id; the name is display-only."""
    id: StrictStr
    name: StrictStr


class AppState(BaseModel):
    """Full habit table snapshot, not windowed to a week."""
    habits: list[Habit] = Field(default_factory=list)
    checks: CompletionMap = Field(default_factory=dict)

    @field_validator("habits")
    @classmethod
    def ids_unique(cls, v: list[Habit]) -> list[Habit]:
        seen: set[str] = set()
        for habit in v:
            if habit.id in seen:
                raise ValueError(f"duplicate habit id {habit.id!r}")
            seen.add(habit.id)
        return v


class ImportDocument(AppState):
    """Imported JSON: both top-level fields are required."""
    habits: list[Habit]
    checks: CompletionMap


# ---------------------------------------------------------------------------
# Request / response bodies
# ---------------------------------------------------------------------------

class HabitNameRequest(BaseModel):
    """Name for a new or renamed habit. Trimmed by the store; blank means skip."""
    name: Annotated[str, Field(
        description="Display name. Leading/trailing whitespace is stripped.",
        examples=["Read 20 pages"],
    )]


class ToggleResponse(BaseModel):
    habit_id: str
    day: str = Field(description="ISO date of the toggled cell.")
    checked: bool = Field(description="Completion mark after the toggle.")
