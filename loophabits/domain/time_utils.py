from __future__ import annotations

"""Calendar-day helpers with an overridable notion of "today"."""

from datetime import date, datetime, timezone
from typing import Optional

_fixed_today: Optional[date] = None


def set_fixed_today(value: Optional[date]) -> None:
    """Pin the value returned by :func:`get_today` (``None`` restores the clock)."""
    global _fixed_today
    if isinstance(value, datetime):
        value = value.date()
    _fixed_today = value


def get_today() -> date:
    """Return the current local calendar day, or the pinned one when set."""
    if _fixed_today is not None:
        return _fixed_today
    return datetime.now().astimezone().date()


def day_from_millis(millis: int) -> date:
    """Truncate epoch milliseconds to the UTC calendar day they fall on."""
    return datetime.fromtimestamp(int(millis) / 1000, tz=timezone.utc).date()


__all__ = ["day_from_millis", "get_today", "set_fixed_today"]
