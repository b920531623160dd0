"""Recognizer boundary.

Character recognition is an external capability. Adapters implement the
Recognizer protocol and raise RecognitionError for anything that goes wrong
on their side (model missing, backend crash, timeout). Callers in this
package catch it at the service boundary, along with anything else an
adapter lets escape.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Protocol

from ..errors import RecognitionError
from .ink import Ink

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecognitionCandidate:
    """One ranked guess from a recognizer."""
    text: str
    score: float = 0.0


class Recognizer(Protocol):
    """Ranked handwriting recognition for one language."""

    language_code: str

    def is_model_downloaded(self) -> bool: ...

    def download_model(self) -> None: ...

    def recognize(self, ink: Ink) -> List[RecognitionCandidate]: ...


def ensure_model(recognizer: Recognizer) -> bool:
    """Download the recognizer's model if it is missing.

    Failures are logged, not raised: drawing keeps working without a model
    and a later check reports the problem to the user.

    Returns:
        True if the model is available afterwards.
    """
    try:
        if recognizer.is_model_downloaded():
            return True
        logger.info("Downloading recognition model for %r...", recognizer.language_code)
        recognizer.download_model()
        logger.info("Download complete.")
        return True
    except RecognitionError as e:
        logger.warning("Model download failed for %r: %s", recognizer.language_code, e)
        return False
    except Exception as e:
        logger.error("Unexpected error preparing model for %r: %s",
                     recognizer.language_code, e, exc_info=True)
        return False
