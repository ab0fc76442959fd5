"""
Tests for the single-slot persistence gateways.
"""
import pytest
from sqlalchemy.exc import OperationalError

from app.core.errors import PersistenceError
from app.models.state_slot import StateSlot
from app.schemas.habit import AppState, Habit
from app.services.persistence import InMemoryGateway, SqlStateGateway

STATE = AppState(
    habits=[Habit(id="a", name="Run"), Habit(id="b", name="Read")],
    checks={"a": {"2024-01-01": True}},
)


class TestInMemoryGateway:
    def test_empty_load_returns_none(self):
        assert InMemoryGateway().load() is None

    def test_save_then_load(self):
        gw = InMemoryGateway()
        gw.save(STATE)
        assert gw.load() == STATE

    def test_clear(self):
        gw = InMemoryGateway()
        gw.save(STATE)
        gw.clear()
        assert gw.load() is None
        gw.clear()

    def test_corrupt_payload_raises_persistence_error(self):
        gw = InMemoryGateway()
        gw.slots[gw.key] = "{broken"
        with pytest.raises(PersistenceError):
            gw.load()


class TestSqlStateGateway:
    def test_empty_load_returns_none(self, session_factory):
        assert SqlStateGateway(session_factory, key="k").load() is None

    def test_save_then_load(self, session_factory):
        gw = SqlStateGateway(session_factory, key="k")
        gw.save(STATE)
        assert gw.load() == STATE

    def test_save_overwrites_single_slot(self, session_factory):
        gw = SqlStateGateway(session_factory, key="k")
        gw.save(STATE)
        gw.save(AppState())
        assert gw.load() == AppState()
        with session_factory() as db:
            assert db.query(StateSlot).count() == 1

    def test_slots_are_keyed(self, session_factory):
        SqlStateGateway(session_factory, key="one").save(STATE)
        assert SqlStateGateway(session_factory, key="two").load() is None

    def test_clear(self, session_factory):
        gw = SqlStateGateway(session_factory, key="k")
        gw.save(STATE)
        gw.clear()
        assert gw.load() is None

    def test_corrupt_row_raises_persistence_error(self, session_factory):
        with session_factory() as db:
            db.add(StateSlot(key="k", payload='{"habits": 3}'))
            db.commit()
        with pytest.raises(PersistenceError):
            SqlStateGateway(session_factory, key="k").load()

    def test_database_errors_are_wrapped(self):
        class BrokenSession:
            def __enter__(self):
                raise OperationalError("SELECT", {}, Exception("db is down"))

            def __exit__(self, *exc):
                return False

        gw = SqlStateGateway(BrokenSession, key="k")
        for call in (gw.load, gw.clear, lambda: gw.save(STATE)):
            with pytest.raises(PersistenceError) as exc_info:
                call()
            assert exc_info.value.code == "PERSISTENCE_ERROR"
