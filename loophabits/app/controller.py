"""Adapter and coordinator wiring for the habit list screen.

This module owns lazy construction of the local adapters, the task runner and
the :class:`HabitListCoordinator` from values in :class:`AppSettings`. The
view layer supplies only the ``Screen`` implementation and, optionally, a
``post`` hook for background completions.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from ..adapters.bug_reporter_local import LocalBugReporter
from ..adapters.command_runner import LocalCommandRunner
from ..adapters.csv_archive import CSVHabitsExporter, CSVHabitsImporter
from ..adapters.dir_finder import LocalDirFinder
from ..adapters.habit_list_memory import MemoryHabitList
from ..adapters.preferences_local import PreferencesLocal
from ..domain.ports import Screen
from ..utils.logging import apply_user_preferences, configure_root, level_name
from .habit_list_coordinator import HabitListCoordinator
from .settings import AppSettings
from .task_runner import PostFn, SingleThreadTaskRunner, ThreadedTaskRunner


class AppController:
    """Create and cache runtime adapters and the coordinator.

    Call chain:
        The app entry point creates one instance, calls ``configure_logging``
        once, then ``build_coordinator(screen)`` and forwards UI events to the
        returned coordinator.
    """

    def __init__(self, settings: AppSettings, *, post: Optional[PostFn] = None) -> None:
        """Initialize controller with settings-backed lazy dependencies.

        Args:
            settings: Data directory and logging toggles.
            post: Foreground scheduling hook. When omitted, background work
                runs inline on the caller.
        """
        self._log = logging.getLogger(__name__)
        self.settings = settings
        self._post = post
        self.habit_list: Optional[MemoryHabitList] = None
        self.prefs: Optional[PreferencesLocal] = None
        self.command_runner: Optional[LocalCommandRunner] = None
        self.task_runner = None
        self.bug_reporter: Optional[LocalBugReporter] = None
        self.dir_finder: Optional[LocalDirFinder] = None
        self.coordinator: Optional[HabitListCoordinator] = None

    def configure_logging(self) -> int:
        os.makedirs(self.settings.data_dir, exist_ok=True)
        configure_root(log_file=self.settings.log_file)
        level = apply_user_preferences(self.settings.debug_logging)
        self._log.info("Logging at %s under %s", level_name(level), self.settings.data_dir)
        return level

    def reset(self) -> None:
        """Drop cached adapters so the next build uses current settings."""
        self.habit_list = None
        self.prefs = None
        self.command_runner = None
        self.task_runner = None
        self.bug_reporter = None
        self.dir_finder = None
        self.coordinator = None

    def ensure_ready(self) -> bool:
        if self.habit_list is not None and self.prefs is not None:
            return True
        root = self.settings.data_dir
        os.makedirs(root, exist_ok=True)
        self.habit_list = MemoryHabitList()
        self.prefs = PreferencesLocal(root_dir=root)
        self.command_runner = LocalCommandRunner()
        self.task_runner = (
            ThreadedTaskRunner(self._post) if self._post is not None else SingleThreadTaskRunner()
        )
        self.bug_reporter = LocalBugReporter(
            root,
            habit_list=self.habit_list,
            log_file=self.settings.log_file,
            app_version=self.settings.app_version,
        )
        self.dir_finder = LocalDirFinder(root)
        self._log.debug("Adapters ready under %s", root)
        return True

    def build_coordinator(self, screen: Screen) -> HabitListCoordinator:
        self.ensure_ready()
        self.coordinator = HabitListCoordinator(
            habit_list=self.habit_list,
            dir_finder=self.dir_finder,
            task_runner=self.task_runner,
            screen=screen,
            command_runner=self.command_runner,
            prefs=self.prefs,
            bug_reporter=self.bug_reporter,
            exporter=CSVHabitsExporter(),
            importer=CSVHabitsImporter(),
        )
        return self.coordinator


__all__ = ["AppController"]
