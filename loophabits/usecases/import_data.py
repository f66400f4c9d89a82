from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from ..domain.messages import ImportResult
from ..domain.ports import HabitList, HabitsImporter
from .base import BackgroundTask

log = logging.getLogger(__name__)


@dataclass
class ImportDataTask(BackgroundTask):
    """Load habits from ``path`` into ``habit_list`` and report an :class:`ImportResult`."""

    habit_list: HabitList
    path: Path
    importer: HabitsImporter
    listener: Callable[[ImportResult], None]
    result: ImportResult = field(default=ImportResult.FAILED, init=False)

    def do_in_background(self) -> None:
        try:
            if not self.importer.can_handle(self.path):
                self.result = ImportResult.NOT_RECOGNIZED
                return
            self.importer.import_habits(self.path, self.habit_list)
            self.result = ImportResult.SUCCESS
        except Exception:
            log.exception("Import from %s failed", self.path)
            self.result = ImportResult.FAILED

    def on_post_execute(self) -> None:
        self.listener(self.result)
