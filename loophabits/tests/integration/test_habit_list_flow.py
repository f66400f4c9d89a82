from __future__ import annotations

import queue
import zipfile
from datetime import date
from unittest.mock import MagicMock

from loophabits.adapters.habit_list_memory import MemoryHabitList
from loophabits.app.controller import AppController
from loophabits.app.settings import AppSettings
from loophabits.domain.entities import Entry, Habit, Timestamp
from loophabits.domain.messages import Message


def test_export_then_import_round_trip_through_coordinator(tmp_path) -> None:
    controller = AppController(AppSettings(data_dir=str(tmp_path / "data")))
    screen = MagicMock()
    coordinator = controller.build_coordinator(screen)
    walk = Habit(id=1, name="Walk", unit="km", is_numerical=True)
    controller.habit_list.add(walk)
    day = Timestamp(date(2024, 3, 5))

    coordinator.on_toggle(walk, day, 1200)
    coordinator.on_export_csv()

    (filename,), _ = screen.show_send_file_screen.call_args
    assert zipfile.is_zipfile(filename)

    other = AppController(AppSettings(data_dir=str(tmp_path / "other")))
    other_screen = MagicMock()
    other.build_coordinator(other_screen).on_import_data(filename)

    other_screen.show_message.assert_called_once_with(Message.IMPORT_SUCCESSFUL)
    imported = next(iter(other.habit_list))
    assert imported.name == "Walk"
    assert imported.computed_entries.get(day).value == 1200


def test_import_of_unrelated_file_reports_not_recognized(tmp_path) -> None:
    controller = AppController(AppSettings(data_dir=str(tmp_path)))
    screen = MagicMock()
    stray = tmp_path / "notes.txt"
    stray.write_text("hello", encoding="utf-8")

    controller.build_coordinator(screen).on_import_data(stray)

    screen.show_message.assert_called_once_with(Message.FILE_NOT_RECOGNIZED)


def test_threaded_reorder_completes_on_posted_callback(tmp_path) -> None:
    posted: "queue.Queue" = queue.Queue()
    controller = AppController(AppSettings(data_dir=str(tmp_path)), post=posted.put)
    screen = MagicMock()
    coordinator = controller.build_coordinator(screen)
    for i in (1, 2, 3):
        controller.habit_list.add(Habit(id=i, name=f"H{i}"))
    h1, _, h3 = list(controller.habit_list)

    coordinator.on_reorder_habit(h3, h1)
    posted.get(timeout=5)()

    assert [h.id for h in controller.habit_list] == [3, 1, 2]
    assert controller.task_runner.active_task_count == 0


def test_edit_value_round_trip_and_undo(tmp_path) -> None:
    controller = AppController(AppSettings(data_dir=str(tmp_path)))
    screen = MagicMock()
    coordinator = controller.build_coordinator(screen)
    day = Timestamp(date(2024, 3, 5))
    run = Habit(id=5, name="Run", unit="km", is_numerical=True)
    run.computed_entries.add(Entry(day, 5000))
    controller.habit_list.add(run)

    coordinator.on_edit(run, day)
    value, _, callback = screen.show_number_picker.call_args.args
    callback.on_number_picked(value + 0.75)

    assert run.computed_entries.get(day).value == 5750
    controller.command_runner.undo()
    assert run.computed_entries.get(day).value == 5000
    assert isinstance(controller.habit_list, MemoryHabitList)
