"""
FastAPI dependencies.

The tracker is built once per process at startup and stored on
`app.state`; there is exactly one in-memory writer of the habit table.
"""
from fastapi import Request

from app.core.config import settings
from app.db.base import SessionLocal
from app.services.persistence import SqlStateGateway
from app.services.tracker import HabitTracker


def build_tracker() -> HabitTracker:
    gateway = SqlStateGateway(SessionLocal, key=settings.STORAGE_KEY)
    return HabitTracker(gateway=gateway, seed=settings.SEED_HABITS)


def get_tracker(request: Request) -> HabitTracker:
    return request.app.state.tracker
