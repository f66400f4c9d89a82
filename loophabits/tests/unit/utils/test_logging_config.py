import logging

import pytest

from loophabits.utils import logging as log_utils


@pytest.fixture(autouse=True)
def _restore_root_level():
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


def test_env_level_overrides_default(monkeypatch):
    monkeypatch.setenv("LOOPHABITS_LOG_LEVEL", "warning")
    monkeypatch.delenv("LOOPHABITS_DEBUG", raising=False)

    assert log_utils.configure_root(logging.INFO) == logging.WARNING
    assert logging.getLogger().level == logging.WARNING


def test_debug_flag_forces_debug(monkeypatch):
    monkeypatch.delenv("LOOPHABITS_LOG_LEVEL", raising=False)
    monkeypatch.setenv("LOOPHABITS_DEBUG", "yes")

    assert log_utils.apply_user_preferences(False) == logging.DEBUG


def test_user_preference_applies_without_env(monkeypatch):
    monkeypatch.delenv("LOOPHABITS_LOG_LEVEL", raising=False)
    monkeypatch.delenv("LOOPHABITS_DEBUG", raising=False)

    assert log_utils.apply_user_preferences(True) == logging.DEBUG
    assert log_utils.apply_user_preferences(False) == logging.INFO
    assert log_utils.level_name(logging.INFO) == "INFO"


def test_configure_root_attaches_file_handler_once(monkeypatch, tmp_path):
    monkeypatch.delenv("LOOPHABITS_LOG_LEVEL", raising=False)
    monkeypatch.delenv("LOOPHABITS_DEBUG", raising=False)
    log_file = tmp_path / "app.log"
    root = logging.getLogger()
    before = list(root.handlers)
    try:
        log_utils.configure_root("INFO", log_file=str(log_file))
        log_utils.configure_root("INFO", log_file=str(log_file))
        added = [h for h in root.handlers if h not in before]
        assert len([h for h in added if isinstance(h, logging.FileHandler)]) == 1
    finally:
        for handler in root.handlers[:]:
            if handler not in before:
                root.removeHandler(handler)
                handler.close()


def test_parse_level_and_env_level():
    assert log_utils.parse_level("debug") == logging.DEBUG
    assert log_utils.parse_level("15") == 15
    assert log_utils.parse_level("chatty", fallback=logging.ERROR) == logging.ERROR
    assert log_utils.env_level({"LOOPHABITS_DEBUG": "on"}) == logging.DEBUG
    assert log_utils.env_level({"LOOPHABITS_LOG_LEVEL": "error", "LOOPHABITS_DEBUG": "1"}) == logging.ERROR
    assert log_utils.env_level({}) is None
