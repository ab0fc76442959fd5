"""
Shared pytest fixtures.

HTTP tests inject a tracker backed by an in-memory gateway, a
deterministic id generator and a fixed "today" (Wednesday 2024-01-03).
SQL gateway tests use an in-memory SQLite database.
"""
import itertools
import os

os.environ.setdefault("DATABASE_URL", "sqlite:///./test_discipline.db")

import pytest
from datetime import date
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.dependencies import get_tracker
from app.db.base import Base, engine
from app.main import app
from app.services.persistence import InMemoryGateway
from app.services.tracker import HabitTracker

FIXED_TODAY = date(2024, 1, 3)


def sequential_ids(prefix: str = "h"):
    counter = itertools.count(1)
    return lambda: f"{prefix}{next(counter)}"


@pytest.fixture(scope="session", autouse=True)
def create_tables():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def make_ids():
    return sequential_ids


@pytest.fixture()
def gateway():
    return InMemoryGateway()


@pytest.fixture()
def tracker(gateway):
    return HabitTracker(
        gateway=gateway,
        id_generator=sequential_ids(),
        today=lambda: FIXED_TODAY,
    )


@pytest.fixture()
def client(tracker):
    app.dependency_overrides[get_tracker] = lambda: tracker
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture()
def session_factory():
    sqlite = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=sqlite)
    yield sessionmaker(autocommit=False, autoflush=False, bind=sqlite)
    Base.metadata.drop_all(bind=sqlite)
