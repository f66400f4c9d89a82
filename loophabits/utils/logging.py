from __future__ import annotations

import logging
import os
from typing import Mapping, Optional, Union

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DATEFMT = "%H:%M:%S"
LEVEL_ENV = "LOOPHABITS_LOG_LEVEL"
DEBUG_ENV = "LOOPHABITS_DEBUG"
_TRUTHY = frozenset({"1", "true", "yes", "on"})


def parse_level(value: Union[int, str, None], fallback: int = logging.INFO) -> int:
    """Turn ``"debug"``, ``"10"`` or ``10`` into a logging level; unknown input gives ``fallback``."""
    if isinstance(value, int):
        return value
    text = (value or "").strip()
    if text.isdigit():
        return int(text)
    level = logging.getLevelName(text.upper()) if text else None
    return level if isinstance(level, int) else fallback


def env_level(env: Optional[Mapping[str, str]] = None) -> Optional[int]:
    """Level forced by the environment, or ``None`` when the user setting applies.

    ``LOOPHABITS_LOG_LEVEL`` wins over a truthy ``LOOPHABITS_DEBUG``.
    """
    env = os.environ if env is None else env
    explicit = env.get(LEVEL_ENV)
    if explicit and explicit.strip():
        return parse_level(explicit)
    if (env.get(DEBUG_ENV) or "").strip().lower() in _TRUTHY:
        return logging.DEBUG
    return None


def _has_file_handler(root: logging.Logger, path: str) -> bool:
    return any(
        isinstance(h, logging.FileHandler) and h.baseFilename == path for h in root.handlers
    )


def configure_root(default_level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> int:
    """Set up the root logger once and return the effective level.

    A console handler is installed only when the root has none. ``log_file``
    adds a file handler (once per path) so the bug reporter can attach the
    recent log tail.
    """
    forced = env_level()
    effective = forced if forced is not None else parse_level(default_level)

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=effective, format=_FORMAT, datefmt=_DATEFMT)
    if log_file:
        path = os.path.abspath(log_file)
        if not _has_file_handler(root, path):
            handler = logging.FileHandler(path, encoding="utf-8")
            handler.setFormatter(logging.Formatter(_FORMAT, _DATEFMT))
            root.addHandler(handler)
    root.setLevel(effective)
    return effective


def apply_user_preferences(debug_enabled: bool) -> int:
    """Apply the user's debug toggle unless the environment forces a level."""
    forced = env_level()
    level = forced if forced is not None else (logging.DEBUG if debug_enabled else logging.INFO)
    logging.getLogger().setLevel(level)
    return level


def level_name(level: int) -> str:
    return logging.getLevelName(level)
