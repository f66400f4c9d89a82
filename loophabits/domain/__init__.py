
"""Domain package exports for value objects, commands, and ports."""

from .commands import CreateRepetitionCommand
from .entities import Entry, EntryList, Habit, Timestamp
from .messages import IMPORT_MESSAGES, ImportResult, Message
from .ports import UseCaseError

__all__ = [
    "CreateRepetitionCommand",
    "Entry",
    "EntryList",
    "Habit",
    "IMPORT_MESSAGES",
    "ImportResult",
    "Message",
    "Timestamp",
    "UseCaseError",
]
