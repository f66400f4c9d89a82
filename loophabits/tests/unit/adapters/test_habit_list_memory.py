from __future__ import annotations

import pytest

from loophabits.adapters.habit_list_memory import MemoryHabitList
from loophabits.domain.entities import Habit


def _list() -> MemoryHabitList:
    return MemoryHabitList([Habit(id=i, name=f"H{i}") for i in (1, 2, 3, 4)])


def test_add_assigns_positions_and_rejects_duplicates() -> None:
    habits = _list()

    assert [h.position for h in habits] == [0, 1, 2, 3]
    with pytest.raises(ValueError):
        habits.add(Habit(id=2, name="Again"))


def test_reorder_moves_habit_into_target_slot() -> None:
    habits = _list()
    h1, h2, h3, h4 = list(habits)

    habits.reorder(h1, h3)
    assert [h.id for h in habits] == [2, 3, 1, 4]

    habits.reorder(h4, h2)
    assert [h.id for h in habits] == [4, 2, 3, 1]
    assert [h.position for h in habits] == [0, 1, 2, 3]


def test_reorder_requires_members() -> None:
    habits = _list()

    with pytest.raises(ValueError):
        habits.reorder(Habit(id=9, name="Outsider"), habits.get_by_id(1))


def test_repair_drops_duplicates_and_renumbers() -> None:
    habits = _list()
    h1, h2, h3, _ = list(habits)
    # simulate corruption left behind by an interrupted write
    habits._habits.append(Habit(id=2, name="Dup", position=10))
    h3.position = 42

    habits.repair()

    assert [h.id for h in habits] == [1, 2, 4, 3]
    assert [h.position for h in habits] == [0, 1, 2, 3]


def test_observers_are_notified_on_changes() -> None:
    habits = _list()
    calls = []
    habits.add_observer(lambda: calls.append("changed"))

    habits.update([habits.get_by_id(1)])
    habits.repair()

    assert calls == ["changed", "changed"]


def test_update_rejects_habits_outside_the_list() -> None:
    habits = _list()
    calls = []
    habits.add_observer(lambda: calls.append("changed"))

    with pytest.raises(ValueError):
        habits.update([Habit(id=1, name="Copy of H1")])

    assert calls == []
