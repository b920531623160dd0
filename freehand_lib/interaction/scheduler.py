"""Cancellable delayed callbacks.

The idle auto-clear needs "run this in N seconds unless cancelled". Two
schedulers provide it:

    ThreadingScheduler: Real time, one daemon threading.Timer per task.
    ManualScheduler: Virtual time advanced explicitly by the caller. Used by
        the tests and by hosts that already run their own loop.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Callable, List, Protocol


class ScheduledTask(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def schedule(self, delay: float, callback: Callable[[], None]) -> ScheduledTask: ...


class ThreadingScheduler:
    """Schedules callbacks on background timer threads."""

    def schedule(self, delay: float, callback: Callable[[], None]) -> threading.Timer:
        timer = threading.Timer(delay, callback)
        timer.daemon = True
        timer.start()
        return timer


@dataclass
class _ManualTask:
    due: float
    callback: Callable[[], None]
    cancelled: bool = False

    def cancel(self) -> None:
        self.cancelled = True


@dataclass
class ManualScheduler:
    """Scheduler driven by advance() instead of a clock."""
    now: float = 0.0
    _tasks: List[_ManualTask] = field(default_factory=list)

    def schedule(self, delay: float, callback: Callable[[], None]) -> _ManualTask:
        task = _ManualTask(self.now + delay, callback)
        self._tasks.append(task)
        return task

    @property
    def pending(self) -> int:
        return sum(1 for t in self._tasks if not t.cancelled)

    def advance(self, seconds: float) -> int:
        """Move time forward and run every task that came due.

        Returns:
            Number of callbacks run.
        """
        self.now += seconds
        due = [t for t in self._tasks if not t.cancelled and t.due <= self.now]
        self._tasks = [t for t in self._tasks if not t.cancelled and t.due > self.now]
        for task in sorted(due, key=lambda t: t.due):
            task.callback()
        return len(due)
