from __future__ import annotations

import logging
from typing import Callable, List, Optional

from ..domain.ports import Command, CommandRunner

CommandListener = Callable[[Command], None]


class LocalCommandRunner(CommandRunner):
    """Apply commands in order, keep an undo stack and notify listeners."""

    def __init__(self, max_undo: int = 100) -> None:
        self._log = logging.getLogger(__name__)
        self._history: List[Command] = []
        self._listeners: List[CommandListener] = []
        self._max_undo = max(1, int(max_undo))

    def add_listener(self, listener: CommandListener) -> None:
        self._listeners.append(listener)

    def run(self, command: Command) -> None:
        command.run()
        self._history.append(command)
        if len(self._history) > self._max_undo:
            del self._history[0]
        self._log.debug("Executed %r", command)
        self._notify(command)

    def undo(self) -> Optional[Command]:
        """Undo the most recent command; returns it, or ``None`` when empty."""
        if not self._history:
            return None
        command = self._history.pop()
        command.undo()
        self._log.debug("Undid %r", command)
        self._notify(command)
        return command

    def _notify(self, command: Command) -> None:
        for listener in list(self._listeners):
            try:
                listener(command)
            except Exception:
                self._log.exception("Command listener %r failed", listener)


__all__ = ["LocalCommandRunner"]
