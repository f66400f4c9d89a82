from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from loophabits.domain.messages import ImportResult
from loophabits.usecases.export_csv import ExportCSVTask
from loophabits.usecases.import_data import ImportDataTask
from loophabits.usecases.maintenance import ReorderHabitsTask, RepairDatabaseTask


def _export_task(exporter) -> ExportCSVTask:
    return ExportCSVTask(
        habit_list=MagicMock(),
        selected=[MagicMock(), MagicMock()],
        output_dir=Path("/tmp/out"),
        exporter=exporter,
        listener=MagicMock(),
    )


def test_export_task_reports_filename() -> None:
    exporter = MagicMock()
    exporter.export.return_value = "/tmp/out/habits.zip"
    task = _export_task(exporter)

    task.do_in_background()
    task.on_post_execute()

    exporter.export.assert_called_once_with(task.selected, Path("/tmp/out"))
    task.listener.assert_called_once_with("/tmp/out/habits.zip")


def test_export_task_turns_failure_into_none() -> None:
    exporter = MagicMock()
    exporter.export.side_effect = PermissionError("read-only")
    task = _export_task(exporter)

    task.do_in_background()
    task.on_post_execute()

    task.listener.assert_called_once_with(None)


def _import_task(importer) -> ImportDataTask:
    return ImportDataTask(
        habit_list=MagicMock(),
        path=Path("backup.zip"),
        importer=importer,
        listener=MagicMock(),
    )


def test_import_task_success() -> None:
    importer = MagicMock()
    importer.can_handle.return_value = True
    task = _import_task(importer)

    task.do_in_background()
    task.on_post_execute()

    importer.import_habits.assert_called_once_with(Path("backup.zip"), task.habit_list)
    task.listener.assert_called_once_with(ImportResult.SUCCESS)


def test_import_task_unrecognized_file_skips_import() -> None:
    importer = MagicMock()
    importer.can_handle.return_value = False
    task = _import_task(importer)

    task.do_in_background()
    task.on_post_execute()

    importer.import_habits.assert_not_called()
    task.listener.assert_called_once_with(ImportResult.NOT_RECOGNIZED)


def test_import_task_failure() -> None:
    importer = MagicMock()
    importer.can_handle.return_value = True
    importer.import_habits.side_effect = ValueError("bad row")
    task = _import_task(importer)

    task.do_in_background()
    task.on_post_execute()

    task.listener.assert_called_once_with(ImportResult.FAILED)


def test_reorder_task_delegates() -> None:
    habit_list = MagicMock()

    ReorderHabitsTask(habit_list, "a", "b").do_in_background()

    habit_list.reorder.assert_called_once_with("a", "b")


def test_repair_task_notifies_after_repair_only() -> None:
    habit_list = MagicMock()
    on_repaired = MagicMock()
    task = RepairDatabaseTask(habit_list, on_repaired=on_repaired)

    task.do_in_background()
    on_repaired.assert_not_called()
    task.on_post_execute()

    habit_list.repair.assert_called_once_with()
    on_repaired.assert_called_once_with()


def test_repair_task_stays_silent_when_repair_raises() -> None:
    habit_list = MagicMock()
    habit_list.repair.side_effect = RuntimeError("db locked")
    on_repaired = MagicMock()
    task = RepairDatabaseTask(habit_list, on_repaired=on_repaired)

    with pytest.raises(RuntimeError):
        task.do_in_background()
    task.on_post_execute()

    assert task.repaired is False
    on_repaired.assert_not_called()
