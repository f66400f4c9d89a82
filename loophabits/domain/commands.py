from __future__ import annotations

"""Undoable commands that mutate habits."""

from dataclasses import dataclass, field
from typing import Optional

from .entities import Entry, Habit, Timestamp
from .ports import HabitList


@dataclass
class CreateRepetitionCommand:
    """Create or overwrite the entry of ``habit`` on ``timestamp`` with ``value``."""

    habit_list: HabitList
    habit: Habit
    timestamp: Timestamp
    value: int
    _previous: Optional[Entry] = field(default=None, init=False, repr=False)
    _executed: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError("CreateRepetitionCommand value must be an int.")

    def run(self) -> None:
        entries = self.habit.computed_entries
        self._previous = entries.find(self.timestamp)
        entries.add(Entry(self.timestamp, self.value))
        self.habit_list.update([self.habit])
        self._executed = True

    def undo(self) -> None:
        if not self._executed:
            return
        entries = self.habit.computed_entries
        if self._previous is None:
            entries.remove(self.timestamp)
        else:
            entries.add(self._previous)
        self.habit_list.update([self.habit])
        self._executed = False


__all__ = ["CreateRepetitionCommand"]
