"""Exception hierarchy for the freehand practice package."""


class FreehandError(Exception):
    """Base class for all errors raised by freehand_lib."""


class OutlineSynthesisError(FreehandError):
    """The outline algorithm could not produce a valid closed loop.

    Raised by outline.synthesize_outline and recovered by the render planner,
    which draws the stroke as a fallback curve instead.
    """


class RecognitionError(FreehandError):
    """A recognizer adapter failed to classify the ink or fetch its model."""


class BufferFormatError(FreehandError, ValueError):
    """Stroke JSON received from the web or CLI surface is malformed."""
