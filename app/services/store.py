"""
In-memory habit collection and completion marks.

Habits keep insertion order (= display order). `checks` may hold entries
for habit ids that no longer exist; those are tolerated and never rendered.
"""
from __future__ import annotations

import uuid
from typing import Callable, Optional

from app.core.errors import HabitNotFoundError
from app.schemas.habit import AppState, CompletionMap, Habit

IdGenerator = Callable[[], str]


def uuid_id() -> str:
    return str(uuid.uuid4())


class HabitStore:
    def __init__(
        self,
        state: Optional[AppState] = None,
        id_generator: IdGenerator = uuid_id,
    ):
        self._state = state if state is not None else AppState()
        self._new_id = id_generator

    @property
    def habits(self) -> list[Habit]:
        return self._state.habits

    @property
    def checks(self) -> CompletionMap:
        return self._state.checks

    def snapshot(self) -> AppState:
        return self._state.model_copy(deep=True)

    def get_habit(self, habit_id: str) -> Optional[Habit]:
        return next((h for h in self._state.habits if h.id == habit_id), None)

    def add_habit(self, name: str) -> Optional[Habit]:
        """Append a habit; a blank name is skipped and returns None."""
        name = name.strip()
        if not name:
            return None
        habit = Habit(id=self._new_id(), name=name)
        self._state.habits.append(habit)
        return habit

    def rename_habit(self, habit_id: str, new_name: str) -> Habit:
        """
        Rename in place. A blank name abandons the rename and leaves the
        current name untouched. Raises HabitNotFoundError for unknown ids.
        """
        habit = self.get_habit(habit_id)
        if habit is None:
            raise HabitNotFoundError(habit_id)
        name = new_name.strip()
        if name:
            habit.name = name
        return habit

    def remove_habit(self, habit_id: str) -> bool:
        """Drop the habit and its marks. Unknown ids are a no-op (returns False)."""
        before = len(self._state.habits)
        self._state.habits = [h for h in self._state.habits if h.id != habit_id]
        self._state.checks.pop(habit_id, None)
        return len(self._state.habits) != before

    def is_checked(self, habit_id: str, day: str) -> bool:
        return bool(self._state.checks.get(habit_id, {}).get(day, False))

    def toggle_check(self, habit_id: str, day: str) -> bool:
        """Flip one mark and return its new value. Orphaned ids are allowed."""
        marks = self._state.checks.setdefault(habit_id, {})
        marks[day] = not marks.get(day, False)
        return marks[day]

    def replace_all(self, habits: list[Habit], checks: CompletionMap) -> None:
        """Discard everything and take the given habits/checks as-is."""
        self._state = AppState.model_construct(habits=list(habits), checks=dict(checks))

    def clear(self) -> None:
        self._state = AppState()
