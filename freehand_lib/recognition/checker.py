"""Judging a recognizer's answer against the character being practiced."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Sequence, Tuple

from .recognizer import RecognitionCandidate

NOTHING_DETECTED = 'nothing'

# Recognizers regularly read katakana KA as the kanji for "power"; the two
# are drawn with the same strokes. Only this pair is accepted.
ACCEPTED_LOOKALIKES: Dict[str, Tuple[str, ...]] = {
    'カ': ('力',),
}


@dataclass(frozen=True)
class CheckResult:
    correct: bool
    detected: str


@dataclass(frozen=True)
class CharacterChecker:
    """Decides whether recognizer candidates match the expected character.

    A drawing is correct when any candidate's text contains the expected
    character, or one of its accepted lookalikes. ``detected`` reports the
    top candidate regardless.
    """
    expected: str

    def accepts(self, text: str) -> bool:
        if self.expected in text:
            return True
        return any(alt in text for alt in ACCEPTED_LOOKALIKES.get(self.expected, ()))

    def check(self, candidates: Sequence[RecognitionCandidate]) -> CheckResult:
        if not candidates:
            return CheckResult(correct=False, detected=NOTHING_DETECTED)
        return CheckResult(
            correct=any(self.accepts(c.text) for c in candidates),
            detected=candidates[0].text,
        )
