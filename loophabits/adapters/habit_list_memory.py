from __future__ import annotations

import logging
import threading
from typing import Callable, Iterable, Iterator, List, Optional

from ..domain.entities import Habit
from ..domain.ports import HabitList

log = logging.getLogger(__name__)


class MemoryHabitList(HabitList):
    """In-memory habit list ordered by ``position``.

    Mutations are serialized with a lock so the list can be touched from a
    task runner's worker thread.
    """

    def __init__(self, habits: Optional[Iterable[Habit]] = None) -> None:
        self._habits: List[Habit] = []
        self._lock = threading.RLock()
        self._observers: List[Callable[[], None]] = []
        for habit in habits or []:
            self.add(habit)

    # ---- Queries ----
    def __iter__(self) -> Iterator[Habit]:
        with self._lock:
            return iter(list(self._habits))

    def __len__(self) -> int:
        with self._lock:
            return len(self._habits)

    def __contains__(self, habit: object) -> bool:
        with self._lock:
            return any(h is habit for h in self._habits)

    def get_by_id(self, habit_id: int) -> Optional[Habit]:
        with self._lock:
            for habit in self._habits:
                if habit.id == habit_id:
                    return habit
        return None

    def index_of(self, habit: Habit) -> int:
        with self._lock:
            for idx, candidate in enumerate(self._habits):
                if candidate is habit:
                    return idx
        return -1

    # ---- Mutations ----
    def add(self, habit: Habit) -> None:
        with self._lock:
            if self.get_by_id(habit.id) is not None:
                raise ValueError(f"Habit id {habit.id} already present.")
            habit.position = len(self._habits)
            self._habits.append(habit)
        self._notify()

    def update(self, habits: Iterable[Habit]) -> None:
        """Announce changes made to member habits; entries live on the habits themselves."""
        for habit in habits:
            if self.index_of(habit) < 0:
                raise ValueError(f"Habit {habit.id} does not belong to the list.")
        self._notify()

    def reorder(self, from_habit: Habit, to_habit: Habit) -> None:
        """Move ``from_habit`` into the slot currently held by ``to_habit``."""
        with self._lock:
            src = self.index_of(from_habit)
            dst = self.index_of(to_habit)
            if src < 0 or dst < 0:
                raise ValueError("Both habits must belong to the list.")
            if src == dst:
                return
            self._habits.insert(dst, self._habits.pop(src))
            self._renumber()
        log.debug("Moved habit %s to position %d", from_habit.id, dst)
        self._notify()

    def repair(self) -> None:
        """Drop duplicate ids and renumber positions densely."""
        with self._lock:
            seen = set()
            kept: List[Habit] = []
            for habit in sorted(self._habits, key=lambda h: h.position):
                if habit.id in seen:
                    log.warning("Dropping duplicate habit id %s during repair", habit.id)
                    continue
                seen.add(habit.id)
                kept.append(habit)
            self._habits = kept
            self._renumber()
        log.info("Habit list repaired (%d habits)", len(kept))
        self._notify()

    def add_observer(self, observer: Callable[[], None]) -> None:
        self._observers.append(observer)

    def _renumber(self) -> None:
        for idx, habit in enumerate(self._habits):
            habit.position = idx

    def _notify(self) -> None:
        for observer in list(self._observers):
            observer()


__all__ = ["MemoryHabitList"]
