"""
Persistence gateways: a single storage slot holding the whole AppState.

Gateways raise PersistenceError on failure; callers decide whether to
swallow it. `load()` returns None when nothing has been stored yet.
"""
from __future__ import annotations

import abc
from typing import Callable, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import DisciplineException, PersistenceError
from app.models.state_slot import StateSlot
from app.schemas.habit import AppState
from app.services.codec import from_json, to_json


class PersistenceGateway(abc.ABC):
    @abc.abstractmethod
    def load(self) -> Optional[AppState]:
        ...

    @abc.abstractmethod
    def save(self, state: AppState) -> None:
        ...

    @abc.abstractmethod
    def clear(self) -> None:
        ...


class InMemoryGateway(PersistenceGateway):
    """Keeps the serialized snapshot in a dict, keyed like the SQL slot."""

    def __init__(self, key: str = "discipline-table-v1"):
        self.key = key
        self.slots: dict[str, str] = {}

    def load(self) -> Optional[AppState]:
        payload = self.slots.get(self.key)
        if payload is None:
            return None
        return _decode(payload)

    def save(self, state: AppState) -> None:
        self.slots[self.key] = to_json(state)

    def clear(self) -> None:
        self.slots.pop(self.key, None)


class SqlStateGateway(PersistenceGateway):
    """Stores the JSON snapshot in one `state_slots` row."""

    def __init__(self, session_factory: Callable[[], Session], key: str):
        self._session_factory = session_factory
        self.key = key

    def load(self) -> Optional[AppState]:
        try:
            with self._session_factory() as db:
                slot = db.get(StateSlot, self.key)
                payload = slot.payload if slot is not None else None
        except SQLAlchemyError as exc:
            raise PersistenceError("load", str(exc)) from exc
        if payload is None:
            return None
        return _decode(payload)

    def save(self, state: AppState) -> None:
        payload = to_json(state)
        try:
            with self._session_factory() as db:
                slot = db.get(StateSlot, self.key)
                if slot is None:
                    db.add(StateSlot(key=self.key, payload=payload))
                else:
                    slot.payload = payload
                db.commit()
        except SQLAlchemyError as exc:
            raise PersistenceError("save", str(exc)) from exc

    def clear(self) -> None:
        try:
            with self._session_factory() as db:
                db.query(StateSlot).filter(StateSlot.key == self.key).delete()
                db.commit()
        except SQLAlchemyError as exc:
            raise PersistenceError("clear", str(exc)) from exc


def _decode(payload: str) -> AppState:
    try:
        return from_json(payload)
    except DisciplineException as exc:
        raise PersistenceError("load", exc.message) from exc
