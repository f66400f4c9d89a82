from __future__ import annotations

"""Domain value objects and aggregates shared across adapters, use-cases, and the coordinator."""

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Dict, Iterator, List, Optional

from .time_utils import day_from_millis, get_today


@dataclass(frozen=True, order=True)
class Timestamp:
    """Calendar-day identifier; equality and ordering follow the day only."""

    day: date
    """Calendar day represented by this timestamp."""

    def __post_init__(self) -> None:
        if isinstance(self.day, datetime):
            # datetime is a date subclass; keep only the calendar part
            object.__setattr__(self, "day", self.day.date())
        elif not isinstance(self.day, date):
            raise TypeError("Timestamp requires a date instance.")

    @classmethod
    def today(cls) -> "Timestamp":
        return cls(get_today())

    @classmethod
    def from_millis(cls, millis: int) -> "Timestamp":
        return cls(day_from_millis(millis))

    @classmethod
    def parse(cls, text: str) -> "Timestamp":
        """Parse an ISO ``YYYY-MM-DD`` day."""
        return cls(date.fromisoformat(str(text).strip()))

    def plus(self, days: int) -> "Timestamp":
        return Timestamp(self.day + timedelta(days=days))

    def __str__(self) -> str:
        return self.day.isoformat()


@dataclass(frozen=True)
class Entry:
    """Value recorded for a habit on a single day."""

    UNKNOWN = -1
    NO = 0
    YES_AUTO = 1
    YES_MANUAL = 2
    SKIP = 3

    timestamp: Timestamp
    value: int = -1


class EntryList:
    """Date-ordered mapping from :class:`Timestamp` to :class:`Entry`."""

    def __init__(self, entries: Optional[List[Entry]] = None) -> None:
        self._entries: Dict[Timestamp, Entry] = {}
        for entry in entries or []:
            self.add(entry)

    def get(self, timestamp: Timestamp) -> Entry:
        """Return the entry for ``timestamp`` or an ``UNKNOWN`` placeholder."""
        entry = self._entries.get(timestamp)
        if entry is None:
            return Entry(timestamp, Entry.UNKNOWN)
        return entry

    def find(self, timestamp: Timestamp) -> Optional[Entry]:
        return self._entries.get(timestamp)

    def add(self, entry: Entry) -> None:
        self._entries[entry.timestamp] = entry

    def remove(self, timestamp: Timestamp) -> None:
        self._entries.pop(timestamp, None)

    def get_known(self) -> List[Entry]:
        """Return stored entries, newest day first."""
        return [self._entries[ts] for ts in sorted(self._entries, reverse=True)]

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries[ts] for ts in sorted(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, timestamp: object) -> bool:
        return timestamp in self._entries


@dataclass(eq=False)
class Habit:
    """Tracked habit; identity is the object itself, ``id`` is its persistent key."""

    id: int
    name: str
    unit: str = ""
    position: int = 0
    is_numerical: bool = False
    computed_entries: EntryList = field(default_factory=EntryList)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("Habit name must be a non-empty string.")

    def __repr__(self) -> str:
        return f"Habit(id={self.id!r}, name={self.name!r}, position={self.position})"


__all__ = ["Entry", "EntryList", "Habit", "Timestamp"]
