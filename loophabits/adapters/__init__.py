"""Concrete adapters implementing the domain ports for local, file-based use."""

from .bug_reporter_local import LocalBugReporter
from .command_runner import LocalCommandRunner
from .csv_archive import CSVHabitsExporter, CSVHabitsImporter
from .dir_finder import LocalDirFinder
from .habit_list_memory import MemoryHabitList
from .preferences_local import PreferencesLocal

__all__ = [
    "CSVHabitsExporter",
    "CSVHabitsImporter",
    "LocalBugReporter",
    "LocalCommandRunner",
    "LocalDirFinder",
    "MemoryHabitList",
    "PreferencesLocal",
]
