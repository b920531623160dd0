"""Unit tests for render orchestration.

Tests freehand_lib.rendering.planner:
    - plan_stroke: the per-stroke decision table
    - plan_buffer: whole-buffer planning
    - paint / StrokeRenderer: dispatch to a canvas
"""

import unittest
from unittest.mock import MagicMock, patch

from freehand_lib import config
from freehand_lib.domain.buffer import STROKE_BREAK, PointBuffer, Sample
from freehand_lib.domain.commands import FilledDot, FilledPolygon, StrokedPath
from freehand_lib.domain.geometry import Point, Stroke
from freehand_lib.errors import OutlineSynthesisError
from freehand_lib.outline.options import StrokeOptions
from freehand_lib.rendering.planner import (
    FALLBACK_STYLE,
    StrokeRenderer,
    paint,
    plan_buffer,
    plan_stroke,
)

SYNTHESIS = 'freehand_lib.rendering.planner.synthesize_outline'


class TestPlanStroke(unittest.TestCase):
    """Tests for the plan_stroke decision table."""

    def test_empty_stroke(self):
        self.assertIsNone(plan_stroke(Stroke()))

    def test_single_point_is_dot(self):
        command = plan_stroke(Stroke.from_tuples([(5, 5)]))
        self.assertIsInstance(command, FilledDot)
        self.assertEqual(command.kind, 'dot')
        self.assertEqual(command.center, Point(5, 5))
        self.assertEqual(command.radius, config.DOT_RADIUS)

    def test_single_point_never_synthesizes(self):
        with patch(SYNTHESIS) as synth:
            plan_stroke(Stroke.from_tuples([(5, 5)]))
        synth.assert_not_called()

    def test_line_is_outline(self):
        command = plan_stroke(Stroke.from_tuples([(1, 1), (2, 1), (3, 1)]))
        self.assertIsInstance(command, FilledPolygon)
        self.assertEqual(command.kind, 'outline')
        self.assertGreaterEqual(len(command.points), 3)

    def test_two_point_stroke(self):
        command = plan_stroke(Stroke.from_tuples([(10, 10), (80, 40)]))
        self.assertIn(command.kind, ('outline', 'curve'))

    def test_coincident_points_fall_back(self):
        command = plan_stroke(Stroke.from_tuples([(7, 7), (7, 7), (7, 7)]))
        self.assertIsInstance(command, StrokedPath)
        self.assertEqual(command.reason, 'coincident')
        self.assertEqual(command.style, FALLBACK_STYLE)

    def test_synthesis_failure_falls_back(self):
        """A failing synthesis is replaced by the curve, never raised."""
        stroke = Stroke.from_tuples([(1, 1), (20, 5), (40, 30)])
        with patch(SYNTHESIS, side_effect=OutlineSynthesisError('boom')):
            command = plan_stroke(stroke)
        self.assertEqual(command.kind, 'curve')
        self.assertEqual(command.reason, 'synthesis_failed')
        self.assertEqual(command.path.start, stroke.start)
        self.assertEqual(command.path.end, stroke.end)

    def test_fallback_style(self):
        self.assertEqual(FALLBACK_STYLE.width, 4.0)
        self.assertEqual(FALLBACK_STYLE.cap, 'round')
        self.assertEqual(FALLBACK_STYLE.join, 'round')

    def test_zero_size_outline_is_empty(self):
        command = plan_stroke(Stroke.from_tuples([(1, 1), (20, 5)]), StrokeOptions(size=0))
        self.assertEqual(command.kind, 'outline')
        self.assertEqual(command.points, ())


class TestPlanBuffer(unittest.TestCase):
    """Tests for plan_buffer."""

    def test_empty_buffer(self):
        self.assertEqual(plan_buffer(PointBuffer()), [])

    def test_only_breaks(self):
        self.assertEqual(plan_buffer(PointBuffer([STROKE_BREAK, STROKE_BREAK])), [])

    def test_line_then_tap(self):
        """[(1,1),(2,1),(3,1), break, (5,5)]: outline or curve, then a dot at (5,5)."""
        buf = PointBuffer([
            Sample(Point(1, 1)), Sample(Point(2, 1)), Sample(Point(3, 1)),
            STROKE_BREAK, Sample(Point(5, 5)),
        ])
        commands = plan_buffer(buf)
        self.assertEqual(len(commands), 2)
        self.assertIn(commands[0].kind, ('outline', 'curve'))
        self.assertEqual(commands[1].kind, 'dot')
        self.assertEqual(commands[1].center, Point(5, 5))

    def test_idempotent(self):
        buf = PointBuffer.from_strokes([[(10, 10), (30, 14), (60, 30)], [(5, 5)]])
        self.assertEqual(plan_buffer(buf), plan_buffer(buf))


class TestPaint(unittest.TestCase):
    """Tests for paint and StrokeRenderer."""

    def test_dispatch_by_kind(self):
        canvas = MagicMock()
        buf = PointBuffer.from_strokes([[(10, 10), (40, 12), (70, 30)], [(5, 5)], [(9, 9), (9, 9)]])
        StrokeRenderer().render(buf, canvas)
        canvas.fill_polygon.assert_called_once()
        canvas.fill_circle.assert_called_once()
        canvas.stroke_path.assert_called_once()

    def test_empty_outline_draws_nothing(self):
        canvas = MagicMock()
        paint([FilledPolygon(points=())], canvas)
        canvas.fill_polygon.assert_not_called()

    def test_unknown_kind_raises(self):
        bogus = MagicMock(kind='sparkle')
        with self.assertRaises(ValueError):
            paint([bogus], MagicMock())

    def test_render_returns_commands(self):
        buf = PointBuffer.from_strokes([[(5, 5)]])
        commands = StrokeRenderer().render(buf, MagicMock())
        self.assertEqual(commands, [FilledDot(Point(5, 5), config.DOT_RADIUS,
                                              commands[0].style)])


if __name__ == '__main__':
    unittest.main()
