"""
Week window: Monday-start weeks and the ISO date keys of their days.

All functions are pure. Dates are calendar dates in the local zone; an
aware datetime is converted to local time before its date is taken, so a
late-evening timestamp never lands on the next (UTC) day.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Union

DAYS_IN_WEEK = 7
WEEKDAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

DateLike = Union[date, datetime]


@dataclass(frozen=True)
class WeekWindow:
    start: date              # always a Monday
    days: tuple[date, ...]   # start .. start + 6


def _local_date(d: DateLike) -> date:
    if isinstance(d, datetime):
        if d.tzinfo is not None:
            d = d.astimezone()
        return d.date()
    return d


def start_of_week(reference: DateLike) -> date:
    """Monday on or before `reference`, regardless of locale."""
    day = _local_date(reference)
    return day - timedelta(days=day.weekday())


def days_of(week_start: DateLike) -> tuple[date, ...]:
    start = _local_date(week_start)
    return tuple(start + timedelta(days=i) for i in range(DAYS_IN_WEEK))


def iso_date(d: DateLike) -> str:
    """Zero-padded YYYY-MM-DD from the local year/month/day."""
    return _local_date(d).isoformat()


def shift_week(week_start: DateLike, delta_weeks: int) -> date:
    """Move by whole weeks; no bounds on past or future."""
    return _local_date(week_start) + timedelta(days=DAYS_IN_WEEK * delta_weeks)


def week_window(reference: DateLike) -> WeekWindow:
    start = start_of_week(reference)
    return WeekWindow(start=start, days=days_of(start))


def week_label(window: WeekWindow) -> str:
    """Header text such as `Jan 1 - Jan 7`."""
    first, last = window.days[0], window.days[-1]
    return f"{first:%b} {first.day} - {last:%b} {last.day}"
