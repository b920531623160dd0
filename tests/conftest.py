"""Shared pytest fixtures for the freehand_lib test suite.

Fixtures:
    manual_scheduler: Virtual-time scheduler for idle-clear tests
    controller: DrawingController driven by manual_scheduler
    fake_recognizer: Scriptable Recognizer stand-in
    recognizer_factory: The FakeRecognizer class itself
    practice_service: PracticeService wired to the fakes above
    flask_client: Flask test client for the practice app
    sample_buffer: Two-stroke buffer, a short line and a tap
    sample_strokes: Raw (x, y) stroke lists

Markers:
    slow: Mark test as slow-running (skip with -m "not slow")
    integration: Mark test as integration test
"""

from typing import List

import pytest

from freehand_lib.api.services import PracticeService
from freehand_lib.app import app, set_service
from freehand_lib.domain.buffer import PointBuffer
from freehand_lib.errors import RecognitionError
from freehand_lib.interaction.controller import DrawingController
from freehand_lib.interaction.scheduler import ManualScheduler
from freehand_lib.recognition.recognizer import RecognitionCandidate


class FakeRecognizer:
    """Recognizer whose answers are set by the test.

    Attributes:
        candidates: Returned by recognize().
        error: Raised by recognize() when set.
        downloaded: Model state reported by is_model_downloaded().
        download_error: Raised by download_model() when set.
    """

    language_code = 'ja'

    def __init__(self, candidates=None, error=None, downloaded=True, download_error=None):
        self.candidates: List[RecognitionCandidate] = list(candidates or [])
        self.error = error
        self.downloaded = downloaded
        self.download_error = download_error
        self.download_calls = 0
        self.seen = []

    def is_model_downloaded(self):
        return self.downloaded

    def download_model(self):
        self.download_calls += 1
        if self.download_error is not None:
            raise self.download_error
        self.downloaded = True

    def recognize(self, ink):
        self.seen.append(ink)
        if self.error is not None:
            raise self.error
        return self.candidates


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow-running")
    config.addinivalue_line("markers", "integration: marks tests as integration tests")


@pytest.fixture
def manual_scheduler():
    """Scheduler that only runs callbacks when advanced."""
    return ManualScheduler()


@pytest.fixture
def controller(manual_scheduler):
    """Controller with a 3 second idle clear on virtual time and a fixed clock."""
    ticks = iter(range(0, 1_000_000, 10))
    return DrawingController(scheduler=manual_scheduler, idle_clear_seconds=3.0,
                             clock=lambda: next(ticks))


@pytest.fixture
def recognizer_factory():
    """The FakeRecognizer class, for tests that script the model state."""
    return FakeRecognizer


@pytest.fixture
def fake_recognizer():
    return FakeRecognizer(candidates=[RecognitionCandidate('カ', 0.9)])


@pytest.fixture
def failing_recognizer():
    return FakeRecognizer(error=RecognitionError('backend crashed'))


@pytest.fixture
def practice_service(controller, fake_recognizer):
    """PracticeService on a small canvas with the fake recognizer."""
    return PracticeService(controller=controller, recognizer=fake_recognizer,
                           width=120, height=120)


@pytest.fixture
def flask_client(practice_service):
    """Flask test client serving practice_service."""
    set_service(practice_service)
    app.config['TESTING'] = True
    with app.test_client() as client:
        yield client
    set_service(None)


@pytest.fixture
def sample_strokes():
    """A horizontal line and a single tap."""
    return [
        [(10.0, 20.0), (30.0, 22.0), (50.0, 26.0), (70.0, 32.0), (90.0, 40.0)],
        [(60.0, 80.0)],
    ]


@pytest.fixture
def sample_buffer(sample_strokes):
    return PointBuffer.from_strokes(sample_strokes)
