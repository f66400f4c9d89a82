"""Task runners that execute background work for the habit list coordinator.

The view layer passes a ``post`` callable (for example a wrapper around Tk
``after(0, ...)``) into :class:`ThreadedTaskRunner` so completion steps land
back on the foreground sequence. :class:`SingleThreadTaskRunner` runs every
step inline and is what tests and scripts use.
"""

from __future__ import annotations


import logging
import threading
from typing import Callable, List, Set

from ..domain.ports import Task
from ..usecases.base import FunctionTask

PostFn = Callable[[Callable[[], None]], None]
TaskListener = Callable[[int], None]


def _as_task(task) -> Task:
    """Accept either a task object or a zero-argument callable."""
    if hasattr(task, "do_in_background"):
        return task
    if callable(task):
        return FunctionTask(task)
    raise TypeError(f"Cannot execute {task!r}: not a task or callable.")


class _Submission:
    """Single submitted task; guarantees one completion step."""

    def __init__(self, task: Task, log: logging.Logger) -> None:
        self.task = task
        self._log = log
        self._finished = False
        self._lock = threading.Lock()

    def run_background(self) -> None:
        try:
            self.task.do_in_background()
        except Exception:
            self._log.exception("Background task %r failed", self.task)

    def finish(self) -> bool:
        """Run ``on_post_execute`` once; later calls return ``False``."""
        with self._lock:
            if self._finished:
                return False
            self._finished = True
        self.task.on_post_execute()
        return True


class _BaseTaskRunner:
    def __init__(self) -> None:
        self._log = logging.getLogger(__name__)
        self._active: Set[_Submission] = set()
        self._active_lock = threading.Lock()
        self._listeners: List[TaskListener] = []

    @property
    def active_task_count(self) -> int:
        with self._active_lock:
            return len(self._active)

    def add_listener(self, listener: TaskListener) -> None:
        """Register a callback receiving the active task count after each change."""
        self._listeners.append(listener)

    def remove_listener(self, listener: TaskListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _track(self, submission: _Submission) -> None:
        with self._active_lock:
            self._active.add(submission)
        self._notify()

    def _untrack(self, submission: _Submission) -> None:
        with self._active_lock:
            self._active.discard(submission)
        self._notify()

    def _notify(self) -> None:
        count = self.active_task_count
        for listener in list(self._listeners):
            try:
                listener(count)
            except Exception:
                self._log.exception("Task listener %r failed", listener)


class SingleThreadTaskRunner(_BaseTaskRunner):
    """Run each task to completion on the calling sequence."""

    def execute(self, task) -> None:
        submission = _Submission(_as_task(task), self._log)
        self._track(submission)
        try:
            submission.task.on_pre_execute()
            submission.run_background()
            submission.finish()
        finally:
            self._untrack(submission)


class ThreadedTaskRunner(_BaseTaskRunner):
    """Run ``do_in_background`` on a worker thread and post completion back."""

    def __init__(self, post: PostFn) -> None:
        """Store the foreground scheduling hook.

        Args:
            post: Function handing a zero-argument callback to the foreground
                sequence, e.g. ``lambda cb: root.after(0, cb)``.
        """
        super().__init__()
        self._post = post

    def execute(self, task) -> None:
        submission = _Submission(_as_task(task), self._log)
        self._track(submission)
        try:
            submission.task.on_pre_execute()
        except Exception:
            self._untrack(submission)
            raise
        worker = threading.Thread(
            target=self._work,
            args=(submission,),
            name=f"loophabits-task-{id(submission):x}",
            daemon=True,
        )
        worker.start()

    def _work(self, submission: _Submission) -> None:
        submission.run_background()
        self._post(lambda: self._complete(submission))

    def _complete(self, submission: _Submission) -> None:
        try:
            submission.finish()
        finally:
            self._untrack(submission)


__all__ = ["SingleThreadTaskRunner", "ThreadedTaskRunner"]
