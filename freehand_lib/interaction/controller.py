"""Interaction controller: owns the point buffer.

The controller is the only writer of the buffer. Pointer events append to
it, clear events replace it, and everything else (the renderer, the
recognizer, the web layer) reads immutable snapshots.

Idle auto-clear is an explicit task owned by the controller:

    pointer down        cancel the idle task
    pointer up/cancel   append a stroke break, reschedule the idle task
    task expires        post ClearRequested(generation) back to the controller

The clear request is applied under the same lock as pointer input and is
dropped when the pen is down or when a newer transition has bumped the
generation, so a timer that fires late can never wipe a stroke in progress.
"""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from typing import Callable, List, Optional

from .. import config
from ..domain.buffer import EMPTY_BUFFER, PointBuffer
from ..domain.geometry import Point
from .scheduler import Scheduler, ScheduledTask, ThreadingScheduler

logger = logging.getLogger(__name__)

POINTER_EVENT_TYPES = ('down', 'move', 'up', 'cancel')
CLEAR_KEYS = ('space', ' ')

Listener = Callable[[PointBuffer], None]


@dataclass(frozen=True)
class PointerEvent:
    """Pointer input in surface-local coordinates."""
    type: str
    x: float = 0.0
    y: float = 0.0

    def __post_init__(self):
        if self.type not in POINTER_EVENT_TYPES:
            raise ValueError(f'unknown pointer event type: {self.type!r}')


@dataclass(frozen=True)
class ClearRequested:
    """Message posted by the idle task when it expires."""
    generation: int


class IdleClearTask:
    """Reschedulable delayed clear.

    Not thread-safe on its own; the controller calls it under its lock.
    """

    def __init__(self, scheduler: Scheduler, delay: Optional[float],
                 post: Callable[[ClearRequested], None]):
        self.scheduler = scheduler
        self.delay = delay
        self.generation = 0
        self._post = post
        self._handle: Optional[ScheduledTask] = None

    @property
    def enabled(self) -> bool:
        return self.delay is not None and self.delay > 0

    def cancel(self) -> None:
        self.generation += 1
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def reschedule(self) -> None:
        self.cancel()
        if not self.enabled:
            return
        generation = self.generation
        self._handle = self.scheduler.schedule(
            self.delay, lambda: self._post(ClearRequested(generation)))


class DrawingController:
    """Owns the PointBuffer and applies input transitions to it.

    Args:
        scheduler: Runs the idle clear; defaults to ThreadingScheduler.
        idle_clear_seconds: Delay after a stroke ends before the buffer is
            cleared. ``None`` or ``0`` disables auto-clear.
        clock: Returns the current time in milliseconds, stamped on samples.
    """

    def __init__(self, scheduler: Optional[Scheduler] = None,
                 idle_clear_seconds: Optional[float] = config.IDLE_CLEAR_SECONDS,
                 clock: Optional[Callable[[], int]] = None):
        self._lock = threading.Lock()
        self._buffer = EMPTY_BUFFER
        self._pen_down = False
        self._listeners: List[Listener] = []
        self._clock = clock or (lambda: int(time.time() * 1000))
        self._idle = IdleClearTask(scheduler or ThreadingScheduler(),
                                   idle_clear_seconds, self.post)

    @property
    def pen_down(self) -> bool:
        return self._pen_down

    def snapshot(self) -> PointBuffer:
        """The current buffer. Immutable, safe to hand to another thread."""
        return self._buffer

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call listener with every new snapshot; returns an unsubscribe function."""
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    def _notify(self, buffer: PointBuffer) -> None:
        for listener in list(self._listeners):
            listener(buffer)

    def pointer_down(self, x: float, y: float) -> None:
        """Start a stroke. An open stroke whose up was lost is ended first."""
        with self._lock:
            self._idle.cancel()
            if self._pen_down:
                logger.debug("Pointer down while a stroke is open, ending it")
                self._buffer = self._buffer.append_break()
            self._pen_down = True
            self._buffer = self._buffer.append_sample(Point(x, y), self._clock())
            buffer = self._buffer
        self._notify(buffer)

    def pointer_move(self, x: float, y: float) -> bool:
        """Append a sample to the stroke in progress.

        Returns:
            False when no stroke is in progress and the move was ignored.
        """
        with self._lock:
            if not self._pen_down:
                return False
            self._buffer = self._buffer.append_sample(Point(x, y), self._clock())
            buffer = self._buffer
        self._notify(buffer)
        return True

    def pointer_up(self) -> bool:
        """End the stroke in progress.

        Returns:
            False when no stroke was in progress.
        """
        with self._lock:
            if not self._pen_down:
                return False
            self._pen_down = False
            self._buffer = self._buffer.append_break()
            self._idle.reschedule()
            buffer = self._buffer
        self._notify(buffer)
        return True

    def pointer_cancel(self) -> bool:
        return self.pointer_up()

    def handle(self, event: PointerEvent) -> bool:
        """Dispatch a PointerEvent to the matching transition."""
        if event.type == 'down':
            self.pointer_down(event.x, event.y)
            return True
        if event.type == 'move':
            return self.pointer_move(event.x, event.y)
        if event.type == 'up':
            return self.pointer_up()
        return self.pointer_cancel()

    def clear(self) -> None:
        with self._lock:
            self._idle.cancel()
            self._buffer = EMPTY_BUFFER
        self._notify(EMPTY_BUFFER)

    def key_pressed(self, key: str) -> bool:
        """Keyboard shortcut: space clears the drawing."""
        if key in CLEAR_KEYS:
            self.clear()
            return True
        return False

    def post(self, event: ClearRequested) -> bool:
        """Apply a clear request from the idle task.

        Returns:
            True if the buffer was cleared, False if the request was stale.
        """
        with self._lock:
            if self._pen_down or event.generation != self._idle.generation:
                logger.debug("Ignoring stale idle clear (generation %d, current %d)",
                             event.generation, self._idle.generation)
                return False
            self._idle.cancel()
            self._buffer = EMPTY_BUFFER
        logger.debug("Idle timeout, buffer cleared")
        self._notify(EMPTY_BUFFER)
        return True
