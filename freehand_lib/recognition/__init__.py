"""Recognition boundary: ink conversion, recognizer protocol and checking.

Example usage::

    from freehand_lib.recognition import CharacterChecker, ink_from_buffer

    candidates = recognizer.recognize(ink_from_buffer(buffer))
    result = CharacterChecker('カ').check(candidates)
"""

from .checker import ACCEPTED_LOOKALIKES, NOTHING_DETECTED, CharacterChecker, CheckResult
from .ink import Ink, InkPoint, InkStroke, ink_from_buffer
from .recognizer import RecognitionCandidate, Recognizer, ensure_model

__all__ = [
    'Ink', 'InkStroke', 'InkPoint', 'ink_from_buffer',
    'Recognizer', 'RecognitionCandidate', 'ensure_model',
    'CharacterChecker', 'CheckResult', 'ACCEPTED_LOOKALIKES', 'NOTHING_DETECTED',
]
