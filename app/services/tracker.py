"""
HabitTracker: the single owner of the habit table.

Holds the HabitStore, the visible week, and an injected persistence
gateway. Every mutation is followed by a best-effort save; storage
failures are logged and never surfaced, so the in-memory state stays the
source of truth for the session.

FastAPI runs sync endpoints in a threadpool, so every public method
holds one re-entrant lock across its read or mutation and the save that
follows it. Operations therefore apply, and reach storage, one at a time.

Public API
----------
add_habit / rename_habit / remove_habit / toggle_check
previous_week / next_week / this_week / show_week / week_view
export_csv / export_json / import_json / clear_all
"""
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional, Sequence, Union

from app.core.errors import PersistenceError
from app.schemas.habit import AppState, Habit
from app.services import codec
from app.services.aggregate import WeekTotals, week_totals
from app.services.persistence import PersistenceGateway
from app.services.store import HabitStore, IdGenerator, uuid_id
from app.services.week import (
    WeekWindow,
    iso_date,
    shift_week,
    start_of_week,
    week_window,
)

logger = logging.getLogger(__name__)

DEFAULT_SEED = ("Wake early", "Exercise", "Deep work (2h)")


@dataclass
class ExportFile:
    filename: str
    media_type: str
    content: str


@dataclass
class WeekView:
    window: WeekWindow
    habits: list[Habit]
    cells: dict[str, list[bool]]   # habit id -> 7 marks, Monday first
    totals: WeekTotals




class HabitTracker:
    def __init__(
        self,
        gateway: PersistenceGateway,
        id_generator: IdGenerator = uuid_id,
        today: Callable[[], date] = date.today,
        seed: Sequence[str] = DEFAULT_SEED,
    ):
        self._gateway = gateway
        self._today = today
        self._lock = threading.RLock()
        self._store = HabitStore(id_generator=id_generator)
        with self._lock:
            self._load_or_seed(seed)
            self.week_start = start_of_week(self._today())

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def _load_or_seed(self, seed: Sequence[str]) -> None:
        try:
            stored = self._gateway.load()
        except PersistenceError as exc:
            logger.warning("Could not load saved habits, starting empty: %s", exc.message)
            return

        if stored is not None:
            self._store.replace_all(stored.habits, stored.checks)
            logger.info("Loaded %d habits from storage", len(stored.habits))
            return

        for name in seed:
            self._store.add_habit(name)
        logger.info("No saved habits found, seeded %d examples", len(self._store.habits))
        self._persist()

    def _persist(self) -> None:
        # Caller holds self._lock.
        try:
            self._gateway.save(self._store.snapshot())
        except PersistenceError as exc:
            logger.warning("Saving habits failed: %s", exc.message)

    @property
    def state(self) -> AppState:
        with self._lock:
            return self._store.snapshot()

    # ------------------------------------------------------------------
    # Habit mutations
    # ------------------------------------------------------------------

    def list_habits(self) -> list[Habit]:
        with self._lock:
            return [h.model_copy() for h in self._store.habits]

    def add_habit(self, name: str) -> Optional[Habit]:
        with self._lock:
            habit = self._store.add_habit(name)
            if habit is None:
                return None
            self._persist()
            return habit.model_copy()

    def rename_habit(self, habit_id: str, new_name: str) -> Habit:
        with self._lock:
            habit = self._store.rename_habit(habit_id, new_name)
            self._persist()
            return habit.model_copy()

    def remove_habit(self, habit_id: str) -> None:
        with self._lock:
            if self._store.remove_habit(habit_id):
                logger.info("Removed habit %s", habit_id)
            self._persist()

    def toggle_check(self, habit_id: str, day: Union[date, str]) -> bool:
        key = day if isinstance(day, str) else iso_date(day)
        with self._lock:
            checked = self._store.toggle_check(habit_id, key)
            self._persist()
            return checked

    # ------------------------------------------------------------------
    # Week navigation
    # ------------------------------------------------------------------

    def previous_week(self) -> WeekWindow:
        with self._lock:
            self.week_start = shift_week(self.week_start, -1)
            return self.window

    def next_week(self) -> WeekWindow:
        with self._lock:
            self.week_start = shift_week(self.week_start, 1)
            return self.window

    def this_week(self) -> WeekWindow:
        return self.show_week(self._today())

    def show_week(self, reference: date) -> WeekWindow:
        with self._lock:
            self.week_start = start_of_week(reference)
            return self.window

    @property
    def window(self) -> WeekWindow:
        with self._lock:
            return week_window(self.week_start)

    def week_view(self, reference: Optional[date] = None) -> WeekView:
        """Grid for the current week, or the week containing `reference`."""
        with self._lock:
            window = week_window(reference) if reference is not None else self.window
            state = self._store.snapshot()
        keys = [iso_date(d) for d in window.days]
        cells = {
            h.id: [state.checks.get(h.id, {}).get(k) is True for k in keys]
            for h in state.habits
        }
        return WeekView(
            window=window,
            habits=state.habits,
            cells=cells,
            totals=week_totals(state, window),
        )

    # ------------------------------------------------------------------
    # Import / export
    # ------------------------------------------------------------------

    def export_csv(self, week_start: Optional[date] = None) -> ExportFile:
        with self._lock:
            window = week_window(week_start) if week_start is not None else self.window
            content = codec.to_csv(self._store.habits, self._store.checks, window)
        return ExportFile(
            filename=codec.csv_filename(window.start),
            media_type=codec.EXPORT_MEDIA_TYPE,
            content=content,
        )

    def export_json(self) -> ExportFile:
        with self._lock:
            content = codec.to_json(self._store.snapshot())
        return ExportFile(
            filename=codec.JSON_FILENAME,
            media_type=codec.EXPORT_MEDIA_TYPE,
            content=content,
        )

    def import_json(self, text: Union[str, bytes]) -> AppState:
        """Replace everything with the imported document, or raise and change nothing."""
        imported = codec.from_json(text)
        with self._lock:
            self._store.replace_all(imported.habits, imported.checks)
            logger.info("Imported %d habits", len(imported.habits))
            self._persist()
            return self._store.snapshot()

    def clear_all(self) -> None:
        with self._lock:
            self._store.clear()
            try:
                self._gateway.clear()
            except PersistenceError as exc:
                logger.warning("Clearing saved habits failed: %s", exc.message)
        logger.info("Cleared all habits")
