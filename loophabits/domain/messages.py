from __future__ import annotations

"""Closed set of outcome notifications shown by the habit list screen."""

from enum import Enum


class Message(Enum):
    COULD_NOT_EXPORT = "could_not_export"
    IMPORT_SUCCESSFUL = "import_successful"
    IMPORT_FAILED = "import_failed"
    DATABASE_REPAIRED = "database_repaired"
    COULD_NOT_GENERATE_BUG_REPORT = "could_not_generate_bug_report"
    FILE_NOT_RECOGNIZED = "file_not_recognized"
    SYNC_ENABLED = "sync_enabled"
    SYNC_KEY_ALREADY_INSTALLED = "sync_key_already_installed"


class ImportResult(Enum):
    """Outcome reported by the import task."""

    SUCCESS = "success"
    NOT_RECOGNIZED = "not_recognized"
    FAILED = "failed"


IMPORT_MESSAGES = {
    ImportResult.SUCCESS: Message.IMPORT_SUCCESSFUL,
    ImportResult.NOT_RECOGNIZED: Message.FILE_NOT_RECOGNIZED,
    ImportResult.FAILED: Message.IMPORT_FAILED,
}


__all__ = ["IMPORT_MESSAGES", "ImportResult", "Message"]
