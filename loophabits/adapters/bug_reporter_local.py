"""Local bug reporter writing a plain-text diagnostic dump."""

from __future__ import annotations


import logging
import os
import platform
import sys
from datetime import datetime
from typing import List, Optional

from ..domain.ports import BugReporter, HabitList


class LocalBugReporter(BugReporter):
    """Write diagnostics to ``<root>/bug_report.txt`` and read them back.

    ``dump_bug_report_to_file`` never raises: I/O failures are logged and the
    next ``get_bug_report`` call surfaces them as ``OSError``.
    """

    FILENAME = "bug_report.txt"

    def __init__(
        self,
        root_dir: str,
        *,
        habit_list: Optional[HabitList] = None,
        log_file: Optional[str] = None,
        log_tail_lines: int = 200,
        app_version: str = "",
    ) -> None:
        self._log = logging.getLogger(__name__)
        self.root = root_dir
        self.habit_list = habit_list
        self.log_file = log_file
        self.log_tail_lines = max(0, int(log_tail_lines))
        self.app_version = app_version

    @property
    def path(self) -> str:
        return os.path.join(self.root, self.FILENAME)

    def build_report(self) -> str:
        lines: List[str] = [
            "---------- BUG REPORT BEGINS ----------",
            f"Generated: {datetime.now().astimezone().isoformat(timespec='seconds')}",
            f"App version: {self.app_version or 'unknown'}",
            f"Python: {sys.version.split()[0]}",
            f"Platform: {platform.platform()}",
        ]
        if self.habit_list is not None:
            habits = list(self.habit_list)
            lines.append(f"Habits: {len(habits)}")
            for habit in habits:
                lines.append(
                    f"  #{habit.id} pos={habit.position} entries={len(habit.computed_entries)}"
                )
        lines.extend(self._log_tail())
        lines.append("---------- BUG REPORT ENDS ------------")
        return "\n".join(lines) + "\n"

    def dump_bug_report_to_file(self) -> None:
        try:
            os.makedirs(self.root, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(self.build_report())
        except OSError:
            self._log.exception("Could not write bug report to %s", self.path)

    def get_bug_report(self) -> str:
        with open(self.path, "r", encoding="utf-8") as f:
            return f.read()

    def _log_tail(self) -> List[str]:
        if not self.log_file or not self.log_tail_lines:
            return []
        try:
            with open(self.log_file, "r", encoding="utf-8", errors="replace") as f:
                tail = f.readlines()[-self.log_tail_lines:]
        except OSError as exc:
            self._log.warning("Log file %s unavailable: %s", self.log_file, exc)
            return []
        return ["Recent log:"] + [line.rstrip("\n") for line in tail]


__all__ = ["LocalBugReporter"]
