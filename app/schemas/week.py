"""
Week view schemas.

GET  /week            → WeekViewResponse
POST /week/previous   → WeekViewResponse
POST /week/next       → WeekViewResponse
POST /week/today      → WeekViewResponse
"""
from pydantic import BaseModel, Field


class DayColumn(BaseModel):
    date: str = Field(description="ISO date (YYYY-MM-DD).")
    weekday: str = Field(description="Short weekday name, Monday first.", examples=["Mon"])
    total: int = Field(description="Habits completed on this day.")


class HabitRow(BaseModel):
    id: str
    name: str
    cells: list[bool] = Field(description="Seven completion marks, Monday first.")
    total: int = Field(description="Completed days this week (0–7).")


class WeekViewResponse(BaseModel):
    """The visible grid for one Monday-start week."""
    week_start: str = Field(description="ISO date of the Monday.")
    label: str = Field(examples=["Jan 1 - Jan 7"])
    days: list[DayColumn]
    rows: list[HabitRow]
