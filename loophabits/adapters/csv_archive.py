"""CSV zip archive exporter/importer for habits and their entries.

Archive layout::

    Habits.csv   -> id, position, name, unit, numerical
    Entries.csv  -> habit_id, date (ISO day), value
"""

from __future__ import annotations
import csv, io, logging, zipfile
from datetime import datetime
from pathlib import Path
from typing import Dict, Iterable, List

from ..domain.entities import Entry, Habit, Timestamp
from ..domain.ports import HabitList, HabitsExporter, HabitsImporter, UseCaseError

log = logging.getLogger(__name__)

HABITS_FILE = "Habits.csv"
ENTRIES_FILE = "Entries.csv"
_HABIT_HEADER = ["id", "position", "name", "unit", "numerical"]
_ENTRY_HEADER = ["habit_id", "date", "value"]


def _csv_text(header: List[str], rows: Iterable[List[object]]) -> str:
    buf = io.StringIO()
    w = csv.writer(buf, lineterminator="\n")
    w.writerow(header)
    w.writerows(rows)
    return buf.getvalue()


class CSVHabitsExporter(HabitsExporter):
    """Write a timestamped ``.zip`` containing the habits and their entries."""

    def __init__(self, prefix: str = "Loop Habits CSV") -> None:
        self.prefix = prefix

    def archive_name(self) -> str:
        return f"{self.prefix} {datetime.now().strftime('%Y-%m-%d %H%M%S')}.zip"

    def export(self, habits: Iterable[Habit], output_dir: Path) -> str:
        habits = list(habits)
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        target = output_dir / self.archive_name()

        habit_rows = [
            [h.id, h.position, h.name, h.unit, int(h.is_numerical)] for h in habits
        ]
        entry_rows = [
            [h.id, str(e.timestamp), e.value] for h in habits for e in h.computed_entries
        ]
        with zipfile.ZipFile(target, "w", compression=zipfile.ZIP_DEFLATED) as zf:
            zf.writestr(HABITS_FILE, _csv_text(_HABIT_HEADER, habit_rows))
            zf.writestr(ENTRIES_FILE, _csv_text(_ENTRY_HEADER, entry_rows))
        log.info("Exported %d habits to %s", len(habits), target)
        return str(target)


class CSVHabitsImporter(HabitsImporter):
    """Load archives produced by :class:`CSVHabitsExporter`."""

    def can_handle(self, path: Path) -> bool:
        path = Path(path)
        if not path.is_file() or not zipfile.is_zipfile(path):
            return False
        with zipfile.ZipFile(path) as zf:
            return HABITS_FILE in zf.namelist()

    def import_habits(self, path: Path, habit_list: HabitList) -> None:
        with zipfile.ZipFile(Path(path)) as zf:
            habit_rows = self._read_rows(zf, HABITS_FILE, _HABIT_HEADER)
            names = zf.namelist()
            entry_rows = (
                self._read_rows(zf, ENTRIES_FILE, _ENTRY_HEADER)
                if ENTRIES_FILE in names
                else []
            )

        used_ids = {h.id for h in habit_list}
        next_id = max(used_ids, default=0) + 1
        by_archive_id: Dict[str, Habit] = {}
        try:
            for row in sorted(habit_rows, key=lambda r: int(r["position"] or 0)):
                habit_id = int(row["id"])
                if habit_id in used_ids:
                    habit_id, next_id = next_id, next_id + 1
                used_ids.add(habit_id)
                next_id = max(next_id, habit_id + 1)
                habit = Habit(
                    id=habit_id,
                    name=row["name"],
                    unit=row.get("unit") or "",
                    is_numerical=(row.get("numerical") or "0").strip() == "1",
                )
                by_archive_id[row["id"]] = habit
            for row in entry_rows:
                habit = by_archive_id.get(row["habit_id"])
                if habit is None:
                    log.warning("Skipping entry for unknown habit id %s", row["habit_id"])
                    continue
                habit.computed_entries.add(
                    Entry(Timestamp.parse(row["date"]), int(row["value"]))
                )
        except (KeyError, ValueError) as e:
            raise UseCaseError("IMPORT_INVALID_ROW", f"{path}: {e}")

        for habit in by_archive_id.values():
            habit_list.add(habit)
        log.info("Imported %d habits from %s", len(by_archive_id), path)

    @staticmethod
    def _read_rows(zf: zipfile.ZipFile, name: str, header: List[str]) -> List[Dict[str, str]]:
        text = zf.read(name).decode("utf-8")
        reader = csv.DictReader(io.StringIO(text))
        missing = [col for col in header if col not in (reader.fieldnames or [])]
        if missing:
            raise UseCaseError("IMPORT_BAD_HEADER", f"{name} missing columns: {', '.join(missing)}")
        return list(reader)


__all__ = ["CSVHabitsExporter", "CSVHabitsImporter", "ENTRIES_FILE", "HABITS_FILE"]
