"""Service layer for handwriting practice.

PracticeService wires the pieces together for the web and CLI surfaces: the
DrawingController owns the buffer, the StrokeRenderer paints snapshots of
it, and an optional Recognizer plus CharacterChecker judge the drawing.

Errors from the recognizer are turned into a user-facing Notification and
never affect what is drawn.

Example usage::

    from freehand_lib.api import PracticeService

    service = PracticeService(recognizer=my_recognizer)
    service.controller.pointer_down(40, 40)
    service.controller.pointer_move(120, 44)
    service.controller.pointer_up()
    png = service.render_png()
    note = service.check()
    print(note.message)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .. import config
from ..errors import RecognitionError
from ..interaction.controller import DrawingController
from ..recognition.checker import CharacterChecker
from ..recognition.ink import ink_from_buffer
from ..recognition.recognizer import Recognizer, ensure_model
from ..rendering.planner import StrokeRenderer
from ..utils.canvas import PillowCanvas, SvgCanvas

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Notification:
    """Transient message for the user, the result of a check.

    Attributes:
        message: Text to show.
        correct: Whether the drawing matched; None when no judgment was made.
        detected: Top recognizer candidate, if any.
    """
    message: str
    correct: Optional[bool] = None
    detected: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {'message': self.message, 'correct': self.correct, 'detected': self.detected}


class PracticeService:
    """One practice surface: a drawing, its renderer and its checker.

    Args:
        controller: Buffer owner; a new DrawingController by default.
        renderer: Stroke renderer; default options when omitted.
        recognizer: Optional recognizer adapter. Its model is fetched on
            construction if missing.
        expected: The character being practiced.
        width: Canvas width used by the render methods.
        height: Canvas height used by the render methods.
    """

    def __init__(self, controller: Optional[DrawingController] = None,
                 renderer: Optional[StrokeRenderer] = None,
                 recognizer: Optional[Recognizer] = None,
                 expected: str = config.EXPECTED_CHARACTER,
                 width: int = config.CANVAS_WIDTH,
                 height: int = config.CANVAS_HEIGHT):
        self.controller = controller or DrawingController()
        self.renderer = renderer or StrokeRenderer()
        self.recognizer = recognizer
        self.checker = CharacterChecker(expected)
        self.width = width
        self.height = height
        if recognizer is not None:
            ensure_model(recognizer)

    def render_png(self, supersample: int = config.SUPERSAMPLE) -> bytes:
        """Rasterize the current drawing."""
        canvas = PillowCanvas(self.width, self.height, supersample=supersample)
        self.renderer.render(self.controller.snapshot(), canvas)
        return canvas.to_png_bytes()

    def render_svg(self) -> str:
        """Vectorize the current drawing."""
        canvas = SvgCanvas(self.width, self.height)
        self.renderer.render(self.controller.snapshot(), canvas)
        return canvas.to_svg()

    def check(self) -> Optional[Notification]:
        """Recognize the drawing and judge it against the expected character.

        Returns:
            None when there is nothing drawn, otherwise a Notification. The
            drawing is left as is; clearing is up to the user.
        """
        buffer = self.controller.snapshot()
        if buffer.is_empty():
            return None

        if self.recognizer is None:
            return Notification('Recognizer unavailable')

        try:
            candidates = self.recognizer.recognize(ink_from_buffer(buffer))
        except RecognitionError as e:
            _logger.warning("Recognition error: %s", e)
            return Notification(f'Recognition failed: {e}')
        except Exception as e:
            _logger.error("Unexpected recognizer error: %s", e, exc_info=True)
            return Notification(f'Recognition failed: {e}')

        result = self.checker.check(candidates)
        _logger.info("Checked %r: detected=%r correct=%s",
                     self.checker.expected, result.detected, result.correct)
        if result.correct:
            message = f'✓ Correct! Detected: {result.detected}'
        else:
            message = f'✗ Try again. Detected: {result.detected}'
        return Notification(message, correct=result.correct, detected=result.detected)
