from __future__ import annotations
from pathlib import Path
from typing import Callable, Iterable, Iterator, Optional, Protocol

from .entities import Habit, Timestamp
from .messages import Message


# ---- Error model ----
class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


# ---- Domain collaborators ----
class HabitList(Protocol):
    """Ordered collection of habits owned by the persistence layer."""

    def __iter__(self) -> Iterator[Habit]: ...
    def __len__(self) -> int: ...
    def add(self, habit: Habit) -> None: ...
    def get_by_id(self, habit_id: int) -> Optional[Habit]: ...
    def update(self, habits: Iterable[Habit]) -> None: ...
    def reorder(self, from_habit: Habit, to_habit: Habit) -> None: ...
    def repair(self) -> None: ...


class Command(Protocol):
    """Atomic, undoable unit of domain mutation."""

    def run(self) -> None: ...
    def undo(self) -> None: ...


class CommandRunner(Protocol):
    def run(self, command: Command) -> None: ...


class Preferences(Protocol):
    """User preferences touched by the habit list screen."""

    def is_first_run(self) -> bool: ...
    def set_first_run(self, is_first_run: bool) -> None: ...
    def update_last_hint(self, number: int, timestamp: Timestamp) -> None: ...
    def increment_launch_count(self) -> None: ...
    def get_sync_key(self) -> str: ...
    def enable_sync(self, sync_key: str, encryption_key: str) -> None: ...


class BugReporter(Protocol):
    """Diagnostic dump writer; ``get_bug_report`` may raise ``OSError``."""

    def dump_bug_report_to_file(self) -> None: ...
    def get_bug_report(self) -> str: ...


class DirFinder(Protocol):
    def get_csv_output_dir(self) -> Path: ...


# ---- Background work ----
class Task(Protocol):
    """Unit of background work.

    ``on_pre_execute`` and ``on_post_execute`` run on the foreground sequence,
    ``do_in_background`` runs wherever the runner decides. Runners call
    ``on_post_execute`` exactly once, after ``do_in_background`` returns.
    """

    def on_pre_execute(self) -> None: ...
    def do_in_background(self) -> None: ...
    def on_post_execute(self) -> None: ...


class TaskRunner(Protocol):
    def execute(self, task: Task) -> None: ...

    @property
    def active_task_count(self) -> int: ...


class HabitsExporter(Protocol):
    """Writes habits to a file inside ``output_dir`` and returns its path."""

    def export(self, habits: Iterable[Habit], output_dir: Path) -> str: ...


class HabitsImporter(Protocol):
    def can_handle(self, path: Path) -> bool: ...
    def import_habits(self, path: Path, habit_list: HabitList) -> None: ...


# ---- UI boundary ----
class NumberPickerCallback(Protocol):
    def on_number_picked(self, new_value: float) -> None: ...
    def on_number_picker_dismissed(self) -> None: ...


OnConfirmedCallback = Callable[[], None]


class Screen(Protocol):
    """Notification surface supplied by the view layer."""

    def show_habit_screen(self, habit: Habit) -> None: ...
    def show_intro_screen(self) -> None: ...
    def show_message(self, message: Message) -> None: ...
    def show_number_picker(
        self, value: float, unit: str, callback: NumberPickerCallback
    ) -> None: ...
    def show_send_bug_report_to_developer_screen(self, log: str) -> None: ...
    def show_send_file_screen(self, filename: str) -> None: ...
    def show_confirm_install_sync_key(self, callback: OnConfirmedCallback) -> None: ...
