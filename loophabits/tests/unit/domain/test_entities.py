from __future__ import annotations

from datetime import date, datetime, timezone

import pytest

from loophabits.domain.entities import Entry, EntryList, Habit, Timestamp
from loophabits.domain.time_utils import set_fixed_today


def test_timestamp_equality_is_by_calendar_day() -> None:
    morning = Timestamp(datetime(2024, 3, 5, 7, 30))
    evening = Timestamp(datetime(2024, 3, 5, 23, 59))

    assert morning == evening
    assert hash(morning) == hash(evening)
    assert Timestamp(date(2024, 3, 4)) < morning


def test_timestamp_from_millis_truncates_to_utc_day() -> None:
    millis = int(datetime(2024, 3, 5, 18, 0, tzinfo=timezone.utc).timestamp() * 1000)

    assert Timestamp.from_millis(millis) == Timestamp(date(2024, 3, 5))


def test_timestamp_rejects_non_dates() -> None:
    with pytest.raises(TypeError):
        Timestamp("2024-03-05")  # type: ignore[arg-type]


def test_timestamp_today_honours_fixed_day() -> None:
    set_fixed_today(date(2020, 1, 1))
    try:
        assert Timestamp.today() == Timestamp(date(2020, 1, 1))
        assert str(Timestamp.today().plus(1)) == "2020-01-02"
    finally:
        set_fixed_today(None)


def test_entry_list_returns_unknown_for_missing_day() -> None:
    entries = EntryList([Entry(Timestamp(date(2024, 3, 5)), Entry.YES_MANUAL)])

    assert entries.get(Timestamp(date(2024, 3, 5))).value == Entry.YES_MANUAL
    missing = entries.get(Timestamp(date(2024, 3, 6)))
    assert missing.value == Entry.UNKNOWN
    assert len(entries) == 1


def test_entry_list_orders_by_date() -> None:
    days = [Timestamp(date(2024, 3, d)) for d in (7, 5, 6)]
    entries = EntryList([Entry(ts, 1) for ts in days])

    assert [str(e.timestamp) for e in entries] == ["2024-03-05", "2024-03-06", "2024-03-07"]
    assert [str(e.timestamp) for e in entries.get_known()] == [
        "2024-03-07",
        "2024-03-06",
        "2024-03-05",
    ]


def test_habit_requires_name_and_uses_identity() -> None:
    with pytest.raises(ValueError):
        Habit(id=1, name="  ")

    a = Habit(id=1, name="Walk")
    b = Habit(id=1, name="Walk")
    assert a != b
    assert a == a
