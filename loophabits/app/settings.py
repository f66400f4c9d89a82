from __future__ import annotations

"""Runtime settings for wiring the habit list screen."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DATA_DIR_ENV = "LOOPHABITS_DATA_DIR"
_DEFAULT_DATA_DIR = os.path.join("~", ".loophabits")


@dataclass
class AppSettings:
    """Paths and toggles consumed by :class:`loophabits.app.controller.AppController`."""

    data_dir: str = _DEFAULT_DATA_DIR
    debug_logging: bool = False
    log_filename: str = "loophabits.log"
    app_version: str = ""

    def __post_init__(self) -> None:
        self.data_dir = os.path.expanduser(str(self.data_dir or "").strip() or _DEFAULT_DATA_DIR)

    @property
    def log_file(self) -> Optional[str]:
        if not self.log_filename:
            return None
        return os.path.join(self.data_dir, self.log_filename)

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None, **overrides) -> "AppSettings":
        """Build settings from defaults, then ``LOOPHABITS_DATA_DIR``, then overrides."""
        env = os.environ if env is None else env
        values = {}
        data_dir = (env.get(DATA_DIR_ENV) or "").strip()
        if data_dir:
            values["data_dir"] = data_dir
        values.update(overrides)
        return cls(**values)


__all__ = ["AppSettings", "DATA_DIR_ENV"]
