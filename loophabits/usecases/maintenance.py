from __future__ import annotations

"""Background tasks that reorder or repair the habit list."""

from dataclasses import dataclass, field
from typing import Callable

from ..domain.entities import Habit
from ..domain.ports import HabitList
from .base import BackgroundTask


@dataclass
class ReorderHabitsTask(BackgroundTask):
    habit_list: HabitList
    from_habit: Habit
    to_habit: Habit

    def do_in_background(self) -> None:
        self.habit_list.reorder(self.from_habit, self.to_habit)


@dataclass
class RepairDatabaseTask(BackgroundTask):
    """Repair the habit list, then fire ``on_repaired`` on the foreground.

    ``on_repaired`` fires only when ``repair()`` returned normally.
    """

    habit_list: HabitList
    on_repaired: Callable[[], None]
    repaired: bool = field(default=False, init=False)

    def do_in_background(self) -> None:
        self.repaired = False
        self.habit_list.repair()
        self.repaired = True

    def on_post_execute(self) -> None:
        if self.repaired:
            self.on_repaired()


__all__ = ["ReorderHabitsTask", "RepairDatabaseTask"]
