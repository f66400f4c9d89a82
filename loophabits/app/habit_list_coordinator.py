"""Coordinator translating habit list screen events into commands and tasks.

This module contains orchestration only: it decides which command to issue,
which background task to submit, and which screen notification follows. All
persistence, rendering and threading live behind the injected ports.
"""

from __future__ import annotations


import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..domain.commands import CreateRepetitionCommand
from ..domain.entities import Habit, Timestamp
from ..domain.messages import IMPORT_MESSAGES, ImportResult, Message
from ..domain.ports import (
    BugReporter,
    CommandRunner,
    DirFinder,
    HabitList,
    HabitsExporter,
    HabitsImporter,
    Preferences,
    Screen,
    TaskRunner,
)
from ..usecases.export_csv import ExportCSVTask
from ..usecases.import_data import ImportDataTask
from ..usecases.maintenance import ReorderHabitsTask, RepairDatabaseTask

# Numerical entries are stored in thousandths of the displayed unit.
VALUE_SCALE = 1000


def to_stored_value(displayed: float) -> int:
    """Convert a picked value to integer thousandths, rounding half up.

    A NaN pick stores 0.
    """
    if math.isnan(displayed):
        return 0
    return int(math.floor(displayed * VALUE_SCALE + 0.5))


@dataclass
class _EditValueCallback:
    """Number picker callback bound to one habit/day edit."""

    coordinator: "HabitListCoordinator"
    habit: Habit
    timestamp: Timestamp

    def on_number_picked(self, new_value: float) -> None:
        self.coordinator._create_repetition(
            self.habit, self.timestamp, to_stored_value(new_value)
        )

    def on_number_picker_dismissed(self) -> None:
        return None


class HabitListCoordinator:
    """Handle user intents raised by the habit list screen."""

    def __init__(
        self,
        *,
        habit_list: HabitList,
        dir_finder: DirFinder,
        task_runner: TaskRunner,
        screen: Screen,
        command_runner: CommandRunner,
        prefs: Preferences,
        bug_reporter: BugReporter,
        exporter: Optional[HabitsExporter] = None,
        importer: Optional[HabitsImporter] = None,
    ) -> None:
        """Store collaborators.

        Args:
            habit_list: Habit collection shown on screen.
            dir_finder: Resolver for the export output directory.
            task_runner: Runner receiving asynchronous work.
            screen: View-layer notification surface.
            command_runner: Executor for undoable commands.
            prefs: Preferences store (first run, hints, sync keys).
            bug_reporter: Diagnostic dump writer/reader.
            exporter: Writer used by CSV export; required for ``on_export_csv``.
            importer: Reader used by ``on_import_data``.
        """
        self._log = logging.getLogger(__name__)
        self.habit_list = habit_list
        self.dir_finder = dir_finder
        self.task_runner = task_runner
        self.screen = screen
        self.command_runner = command_runner
        self.prefs = prefs
        self.bug_reporter = bug_reporter
        self.exporter = exporter
        self.importer = importer

    def on_click_habit(self, habit: Habit) -> None:
        self.screen.show_habit_screen(habit)

    def on_edit(self, habit: Habit, timestamp: Timestamp) -> None:
        """Open the number picker for a numerical entry.

        The stored value is shown in display units (stored / 1000); a picked
        value is converted back and written with one repetition command.
        """
        old_value = habit.computed_entries.get(timestamp).value
        self.screen.show_number_picker(
            old_value / VALUE_SCALE,
            habit.unit,
            _EditValueCallback(self, habit, timestamp),
        )

    def on_toggle(self, habit: Habit, timestamp: Timestamp, value: int) -> None:
        self._create_repetition(habit, timestamp, value)

    def on_export_csv(self) -> None:
        """Snapshot habits and output dir now, then export in the background."""
        if self.exporter is None:
            raise RuntimeError("No exporter configured for CSV export.")
        selected = list(self.habit_list)
        output_dir = self.dir_finder.get_csv_output_dir()
        self._log.debug("Exporting %d habits to %s", len(selected), output_dir)
        self.task_runner.execute(
            ExportCSVTask(
                habit_list=self.habit_list,
                selected=selected,
                output_dir=output_dir,
                exporter=self.exporter,
                listener=self._on_export_finished,
            )
        )

    def on_import_data(self, path: Path) -> None:
        if self.importer is None:
            raise RuntimeError("No importer configured for data import.")
        self.task_runner.execute(
            ImportDataTask(
                habit_list=self.habit_list,
                path=Path(path),
                importer=self.importer,
                listener=self._on_import_finished,
            )
        )

    def on_first_run(self) -> None:
        self.prefs.set_first_run(False)
        self.prefs.update_last_hint(-1, Timestamp.today())
        self.screen.show_intro_screen()

    def on_startup(self) -> None:
        self.prefs.increment_launch_count()
        if self.prefs.is_first_run():
            self.on_first_run()

    def on_reorder_habit(self, from_habit: Habit, to_habit: Habit) -> None:
        self.task_runner.execute(ReorderHabitsTask(self.habit_list, from_habit, to_habit))

    def on_repair_db(self) -> None:
        self.task_runner.execute(
            RepairDatabaseTask(
                self.habit_list,
                on_repaired=lambda: self.screen.show_message(Message.DATABASE_REPAIRED),
            )
        )

    def on_send_bug_report(self) -> None:
        """Dump diagnostics and hand them to the developer-report screen.

        Error Cases:
            Read-back failures are logged and shown as
            ``COULD_NOT_GENERATE_BUG_REPORT``; they never propagate.
        """
        self.bug_reporter.dump_bug_report_to_file()
        try:
            log = self.bug_reporter.get_bug_report()
        except OSError:
            self._log.exception("Could not read back bug report")
            self.screen.show_message(Message.COULD_NOT_GENERATE_BUG_REPORT)
            return
        self.screen.show_send_bug_report_to_developer_screen(log)

    def on_sync_key_offer(self, sync_key: str, encryption_key: str) -> None:
        if self.prefs.get_sync_key() == sync_key:
            self.screen.show_message(Message.SYNC_KEY_ALREADY_INSTALLED)
            return

        def on_confirmed() -> None:
            self.prefs.enable_sync(sync_key, encryption_key)
            self._log.info("Sync enabled with a new key")
            self.screen.show_message(Message.SYNC_ENABLED)

        self.screen.show_confirm_install_sync_key(on_confirmed)

    def _create_repetition(self, habit: Habit, timestamp: Timestamp, value: int) -> None:
        self.command_runner.run(
            CreateRepetitionCommand(self.habit_list, habit, timestamp, value)
        )

    def _on_export_finished(self, filename: Optional[str]) -> None:
        if filename is not None:
            self.screen.show_send_file_screen(filename)
        else:
            self.screen.show_message(Message.COULD_NOT_EXPORT)

    def _on_import_finished(self, result: ImportResult) -> None:
        self.screen.show_message(IMPORT_MESSAGES[result])


__all__ = ["HabitListCoordinator", "VALUE_SCALE", "to_stored_value"]
