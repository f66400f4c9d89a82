from __future__ import annotations

"""Shared base for background tasks submitted to a task runner."""

from dataclasses import dataclass
from typing import Callable


class BackgroundTask:
    """No-op foreground hooks; subclasses override what they need."""

    def on_pre_execute(self) -> None:
        return None

    def do_in_background(self) -> None:
        return None

    def on_post_execute(self) -> None:
        return None


@dataclass
class FunctionTask(BackgroundTask):
    """Adapt a zero-argument callable into a task with no completion step."""

    fn: Callable[[], None]

    def do_in_background(self) -> None:
        self.fn()


__all__ = ["BackgroundTask", "FunctionTask"]
