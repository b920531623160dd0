"""Unit tests for the recognition boundary.

Tests freehand_lib.recognition:
    - ink_from_buffer: stroke grouping and timestamps
    - CharacterChecker: matching, the KA lookalike case, nothing detected
    - ensure_model: model download with logged failures
"""

import logging
import unittest

from freehand_lib.domain.buffer import PointBuffer
from freehand_lib.errors import RecognitionError
from freehand_lib.recognition import (
    NOTHING_DETECTED,
    CharacterChecker,
    InkPoint,
    RecognitionCandidate,
    ensure_model,
    ink_from_buffer,
)


class FakeRecognizer:
    """Recognizer with a scripted model state."""

    language_code = 'ja'

    def __init__(self, downloaded=True, download_error=None):
        self.downloaded = downloaded
        self.download_error = download_error
        self.download_calls = 0

    def is_model_downloaded(self):
        return self.downloaded

    def download_model(self):
        self.download_calls += 1
        if self.download_error is not None:
            raise self.download_error
        self.downloaded = True

    def recognize(self, ink):
        return []


class TestInkFromBuffer(unittest.TestCase):
    """Tests for ink_from_buffer."""

    def test_same_grouping_as_rendering(self):
        buf = PointBuffer.from_strokes([[(1, 1, 5), (2, 1, 9)], [(5, 5, 40)]])
        ink = ink_from_buffer(buf)
        self.assertEqual(len(ink.strokes), 2)
        self.assertEqual(ink.strokes[0].points, [InkPoint(1, 1, 5), InkPoint(2, 1, 9)])
        self.assertEqual(ink.to_list(), [[[1, 1, 5], [2, 1, 9]], [[5, 5, 40]]])

    def test_empty(self):
        self.assertTrue(ink_from_buffer(PointBuffer()).is_empty())


class TestCharacterChecker(unittest.TestCase):
    """Tests for CharacterChecker."""

    def setUp(self):
        self.checker = CharacterChecker('カ')

    def test_exact_match(self):
        result = self.checker.check([RecognitionCandidate('カ', 0.9)])
        self.assertTrue(result.correct)
        self.assertEqual(result.detected, 'カ')

    def test_match_in_lower_candidate(self):
        result = self.checker.check([RecognitionCandidate('ヵ'), RecognitionCandidate('カ')])
        self.assertTrue(result.correct)
        self.assertEqual(result.detected, 'ヵ')

    def test_kanji_lookalike_accepted(self):
        """KA drawn correctly is often read as the kanji for power."""
        result = self.checker.check([RecognitionCandidate('力')])
        self.assertTrue(result.correct)
        self.assertEqual(result.detected, '力')

    def test_lookalike_not_generalized(self):
        """The lookalike rule applies only when KA is expected."""
        self.assertFalse(CharacterChecker('力').accepts('カ'))
        self.assertFalse(CharacterChecker('ロ').accepts('口'))

    def test_wrong_answer(self):
        result = self.checker.check([RecognitionCandidate('ナ')])
        self.assertFalse(result.correct)
        self.assertEqual(result.detected, 'ナ')

    def test_no_candidates(self):
        result = self.checker.check([])
        self.assertFalse(result.correct)
        self.assertEqual(result.detected, NOTHING_DETECTED)


class TestEnsureModel(unittest.TestCase):
    """Tests for ensure_model."""

    def test_already_downloaded(self):
        recognizer = FakeRecognizer(downloaded=True)
        self.assertTrue(ensure_model(recognizer))
        self.assertEqual(recognizer.download_calls, 0)

    def test_downloads_when_missing(self):
        recognizer = FakeRecognizer(downloaded=False)
        self.assertTrue(ensure_model(recognizer))
        self.assertEqual(recognizer.download_calls, 1)

    def test_download_failure_logged_not_raised(self):
        recognizer = FakeRecognizer(downloaded=False,
                                    download_error=RecognitionError('offline'))
        with self.assertLogs('freehand_lib.recognition.recognizer', level=logging.WARNING) as logs:
            self.assertFalse(ensure_model(recognizer))
        self.assertIn('offline', logs.output[0])


if __name__ == '__main__':
    unittest.main()
