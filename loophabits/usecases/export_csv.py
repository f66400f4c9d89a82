from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional

from ..domain.entities import Habit
from ..domain.ports import HabitList, HabitsExporter
from .base import BackgroundTask

log = logging.getLogger(__name__)

ExportListener = Callable[[Optional[str]], None]


@dataclass
class ExportCSVTask(BackgroundTask):
    """Export ``selected`` habits into ``output_dir``.

    The listener receives the produced file name, or ``None`` when the export
    failed. Failures never escape the task.
    """

    habit_list: HabitList
    selected: List[Habit]
    output_dir: Path
    exporter: HabitsExporter
    listener: ExportListener
    archive_filename: Optional[str] = field(default=None, init=False)

    def do_in_background(self) -> None:
        try:
            self.archive_filename = self.exporter.export(self.selected, self.output_dir)
        except Exception:
            log.exception("CSV export to %s failed", self.output_dir)
            self.archive_filename = None

    def on_post_execute(self) -> None:
        self.listener(self.archive_filename)
