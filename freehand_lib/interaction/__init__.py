"""Interaction layer: pointer input, buffer ownership and idle clear.

Example usage::

    from freehand_lib.interaction import DrawingController

    controller = DrawingController()
    controller.pointer_down(10, 10)
    controller.pointer_move(20, 14)
    controller.pointer_up()
    buffer = controller.snapshot()
"""

from .controller import (
    ClearRequested,
    DrawingController,
    IdleClearTask,
    PointerEvent,
)
from .scheduler import ManualScheduler, Scheduler, ThreadingScheduler

__all__ = [
    'DrawingController', 'PointerEvent', 'ClearRequested', 'IdleClearTask',
    'Scheduler', 'ThreadingScheduler', 'ManualScheduler',
]
