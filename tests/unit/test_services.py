"""Unit tests for PracticeService (freehand_lib.api.services)."""

import io
import logging

from PIL import Image

from freehand_lib.api.services import Notification, PracticeService
from freehand_lib.errors import RecognitionError
from freehand_lib.interaction.controller import DrawingController
from freehand_lib.interaction.scheduler import ManualScheduler
from freehand_lib.recognition.recognizer import RecognitionCandidate


def draw_ka(controller):
    controller.pointer_down(30, 40)
    controller.pointer_move(60, 40)
    controller.pointer_move(90, 42)
    controller.pointer_move(85, 90)
    controller.pointer_up()
    controller.pointer_down(55, 20)
    controller.pointer_move(50, 60)
    controller.pointer_move(35, 95)
    controller.pointer_up()


class TestRender:
    """Tests for render_png and render_svg."""

    def test_png(self, practice_service):
        draw_ka(practice_service.controller)
        image = Image.open(io.BytesIO(practice_service.render_png()))
        assert image.size == (120, 120)

    def test_svg(self, practice_service):
        draw_ka(practice_service.controller)
        svg = practice_service.render_svg()
        assert svg.count('<path') == 2

    def test_empty_drawing(self, practice_service):
        assert '<path' not in practice_service.render_svg()


class TestCheck:
    """Tests for check()."""

    def test_nothing_drawn(self, practice_service, fake_recognizer):
        assert practice_service.check() is None
        assert fake_recognizer.seen == []

    def test_correct(self, practice_service, fake_recognizer):
        draw_ka(practice_service.controller)
        note = practice_service.check()
        assert note == Notification('✓ Correct! Detected: カ', correct=True, detected='カ')
        assert len(fake_recognizer.seen[0].strokes) == 2
        assert not practice_service.controller.snapshot().is_empty()

    def test_lookalike_correct(self, practice_service, fake_recognizer):
        fake_recognizer.candidates = [RecognitionCandidate('力', 0.7)]
        draw_ka(practice_service.controller)
        assert practice_service.check().correct is True

    def test_wrong(self, practice_service, fake_recognizer):
        fake_recognizer.candidates = [RecognitionCandidate('ナ', 0.6)]
        draw_ka(practice_service.controller)
        note = practice_service.check()
        assert note.message == '✗ Try again. Detected: ナ'
        assert note.correct is False
        assert not practice_service.controller.snapshot().is_empty()

    def test_nothing_detected(self, practice_service, fake_recognizer):
        fake_recognizer.candidates = []
        draw_ka(practice_service.controller)
        assert practice_service.check().detected == 'nothing'

    def test_recognizer_error_keeps_drawing(self, practice_service, fake_recognizer, caplog):
        fake_recognizer.error = RecognitionError('timeout')
        draw_ka(practice_service.controller)
        with caplog.at_level(logging.WARNING, logger='freehand_lib.api.services'):
            note = practice_service.check()
        assert note.message == 'Recognition failed: timeout'
        assert note.correct is None
        assert not practice_service.controller.snapshot().is_empty()
        assert 'timeout' in caplog.text

    def test_unexpected_recognizer_exception_is_contained(self, practice_service, fake_recognizer,
                                                          caplog):
        """Adapter errors outside RecognitionError still become a notification."""
        fake_recognizer.error = ConnectionError('backend down')
        draw_ka(practice_service.controller)
        with caplog.at_level(logging.ERROR, logger='freehand_lib.api.services'):
            note = practice_service.check()
        assert note.message == 'Recognition failed: backend down'
        assert note.correct is None
        assert not practice_service.controller.snapshot().is_empty()
        assert 'ConnectionError' in caplog.text

    def test_no_recognizer(self, controller):
        service = PracticeService(controller=controller)
        draw_ka(controller)
        assert service.check().message == 'Recognizer unavailable'


class TestModelSetup:
    """Tests for model download on construction."""

    def test_downloads_missing_model(self, recognizer_factory):
        recognizer = recognizer_factory(downloaded=False)
        PracticeService(controller=DrawingController(scheduler=ManualScheduler()),
                        recognizer=recognizer)
        assert recognizer.download_calls == 1

    def test_download_failure_does_not_raise(self, recognizer_factory):
        recognizer = recognizer_factory(downloaded=False, download_error=RecognitionError('offline'))
        service = PracticeService(controller=DrawingController(scheduler=ManualScheduler()),
                                  recognizer=recognizer)
        draw_ka(service.controller)
        assert service.render_svg().count('<path') == 2

    def test_model_state_exception_does_not_raise(self, recognizer_factory, caplog):
        recognizer = recognizer_factory()

        def offline():
            raise TimeoutError('no network')

        recognizer.is_model_downloaded = offline
        with caplog.at_level(logging.ERROR, logger='freehand_lib.recognition.recognizer'):
            service = PracticeService(controller=DrawingController(scheduler=ManualScheduler()),
                                      recognizer=recognizer)
        assert 'no network' in caplog.text
        draw_ka(service.controller)
        assert service.check().detected == 'nothing'


def test_notification_to_dict():
    note = Notification('hi', correct=False, detected='x')
    assert note.to_dict() == {'message': 'hi', 'correct': False, 'detected': 'x'}
