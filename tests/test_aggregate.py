"""
Unit tests for weekly totals.
"""
from datetime import date

from app.schemas.habit import AppState, Habit
from app.services.aggregate import per_day_total, per_habit_total, week_totals
from app.services.store import HabitStore
from app.services.week import week_window

WEEK = week_window(date(2024, 1, 1))   # Mon 2024-01-01 .. Sun 2024-01-07
A = Habit(id="A", name="A")
B = Habit(id="B", name="B")
CHECKS = {
    "A": {"2024-01-01": True, "2024-01-03": True},
    "B": {"2024-01-01": True},
}


class TestPerHabitTotal:
    def test_counts_marked_days(self):
        assert per_habit_total(CHECKS, "A", WEEK) == 2
        assert per_habit_total(CHECKS, "B", WEEK) == 1

    def test_ignores_false_and_out_of_week_entries(self):
        checks = {"A": {"2024-01-02": False, "2023-12-31": True, "2024-01-08": True}}
        assert per_habit_total(checks, "A", WEEK) == 0

    def test_full_week(self):
        checks = {"A": {f"2024-01-0{i}": True for i in range(1, 8)}}
        assert per_habit_total(checks, "A", WEEK) == 7

    def test_unknown_habit_counts_zero(self):
        assert per_habit_total(CHECKS, "missing", WEEK) == 0

    def test_removed_habit_counts_zero(self):
        store = HabitStore(AppState(habits=[A, B], checks={k: dict(v) for k, v in CHECKS.items()}))
        store.remove_habit("A")
        assert per_habit_total(store.checks, "A", WEEK) == 0


class TestPerDayTotal:
    def test_counts_habits_per_day(self):
        assert per_day_total(CHECKS, date(2024, 1, 1), [A, B]) == 2
        assert per_day_total(CHECKS, date(2024, 1, 2), [A, B]) == 0
        assert per_day_total(CHECKS, date(2024, 1, 3), [A, B]) == 1

    def test_orphaned_entries_are_not_counted(self):
        checks = {"ghost": {"2024-01-01": True}, **CHECKS}
        assert per_day_total(checks, date(2024, 1, 1), [A, B]) == 2

    def test_no_habits(self):
        assert per_day_total(CHECKS, date(2024, 1, 1), []) == 0


class TestWeekTotals:
    def test_combined(self):
        totals = week_totals(AppState(habits=[A, B], checks=CHECKS), WEEK)
        assert totals.per_habit == {"A": 2, "B": 1}
        assert totals.per_day == [2, 0, 1, 0, 0, 0, 0]

    def test_empty_state(self):
        totals = week_totals(AppState(), WEEK)
        assert totals.per_habit == {}
        assert totals.per_day == [0] * 7
