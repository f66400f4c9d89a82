from __future__ import annotations
import json, os
from typing import Any, Dict, Optional
from ..domain.entities import Timestamp
from ..domain.ports import Preferences, UseCaseError


class PreferencesLocal(Preferences):
    """JSON-backed preferences stored in ``<root>/preferences.json``."""

    FILENAME = "preferences.json"

    _DEFAULTS: Dict[str, Any] = {
        "first_run": True,
        "launch_count": 0,
        "last_hint_number": -1,
        "last_hint_timestamp": None,
        "sync_key": "",
        "encryption_key": "",
        "sync_enabled": False,
    }

    def __init__(self, root_dir: str = ".") -> None:
        self.root = root_dir
        self._data: Dict[str, Any] = dict(self._DEFAULTS)
        self._data.update(self._load())

    @property
    def path(self) -> str:
        return os.path.join(self.root, self.FILENAME)

    # ---- First run / hints ----
    def is_first_run(self) -> bool:
        return bool(self._data["first_run"])

    def set_first_run(self, is_first_run: bool) -> None:
        self._set(first_run=bool(is_first_run))

    def update_last_hint(self, number: int, timestamp: Timestamp) -> None:
        self._set(last_hint_number=int(number), last_hint_timestamp=str(timestamp))

    @property
    def last_hint_number(self) -> int:
        return int(self._data["last_hint_number"])

    @property
    def last_hint_timestamp(self) -> Optional[Timestamp]:
        raw = self._data.get("last_hint_timestamp")
        return Timestamp.parse(raw) if raw else None

    # ---- Launch counter ----
    def increment_launch_count(self) -> None:
        self._set(launch_count=self.launch_count + 1)

    @property
    def launch_count(self) -> int:
        return int(self._data["launch_count"])

    # ---- Sync ----
    def get_sync_key(self) -> str:
        return str(self._data["sync_key"] or "")

    def get_encryption_key(self) -> str:
        return str(self._data["encryption_key"] or "")

    def is_sync_enabled(self) -> bool:
        return bool(self._data["sync_enabled"])

    def enable_sync(self, sync_key: str, encryption_key: str) -> None:
        self._set(sync_key=sync_key, encryption_key=encryption_key, sync_enabled=True)

    def disable_sync(self) -> None:
        self._set(sync_key="", encryption_key="", sync_enabled=False)

    # ---- Persistence ----
    def _set(self, **values: Any) -> None:
        self._data.update(values)
        os.makedirs(self.root, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(self._data, f, ensure_ascii=False, indent=2)

    def _load(self) -> Dict[str, Any]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                payload = json.load(f)
        except ValueError as e:
            raise UseCaseError("PREFERENCES_CORRUPT", f"{self.path}: {e}")
        if not isinstance(payload, dict):
            raise UseCaseError("PREFERENCES_CORRUPT", f"{self.path}: expected an object")
        return {k: v for k, v in payload.items() if k in self._DEFAULTS}


__all__ = ["PreferencesLocal"]
