"""Render orchestration: from a buffer snapshot to drawing commands.

Every repaint starts over from the full buffer. The buffer is segmented into
strokes, and each stroke is resolved to exactly one command by a fixed
decision table:

    points   command         notes
    0        (none)          nothing to draw
    1        FilledDot       tap without movement, radius DOT_RADIUS
    >= 2     FilledPolygon   pressure-simulated outline
    >= 2     StrokedPath     when the points coincide or synthesis fails

Synthesis failures never leave this module: they are logged and replaced by
the fallback curve, so any non-empty stroke always draws something.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .. import config
from ..analysis.segmentation import split_strokes
from ..domain.buffer import PointBuffer
from ..domain.commands import (
    FilledDot,
    FilledPolygon,
    PaintStyle,
    RenderCommand,
    StrokedPath,
)
from ..domain.geometry import Stroke
from ..errors import OutlineSynthesisError
from ..outline.options import DEFAULT_OPTIONS, StrokeOptions
from ..outline.synthesis import synthesize_outline
from ..utils.canvas import Canvas
from ..utils.curves import midpoint_curve

logger = logging.getLogger(__name__)

FILL_STYLE = PaintStyle(color=config.INK_COLOR)
FALLBACK_STYLE = PaintStyle(
    color=config.INK_COLOR,
    width=config.FALLBACK_STROKE_WIDTH,
    cap='round',
    join='round',
)


def plan_stroke(stroke: Stroke, options: StrokeOptions = DEFAULT_OPTIONS,
                dot_radius: float = config.DOT_RADIUS) -> Optional[RenderCommand]:
    """Decide how one stroke is drawn.

    Args:
        stroke: Stroke from segmentation.
        options: Outline synthesis options.
        dot_radius: Radius of the dot drawn for single-point strokes.

    Returns:
        The command for the stroke, or None for an empty stroke.
    """
    if len(stroke) == 0:
        return None

    if len(stroke) == 1:
        return FilledDot(center=stroke.start, radius=dot_radius, style=FILL_STYLE)

    if stroke.is_coincident():
        return StrokedPath(midpoint_curve(stroke.points), FALLBACK_STYLE, reason='coincident')

    try:
        outline = synthesize_outline(stroke.points, options)
    except OutlineSynthesisError as e:
        logger.debug("Outline synthesis failed for %d-point stroke, using curve: %s",
                     len(stroke), e)
        return StrokedPath(midpoint_curve(stroke.points), FALLBACK_STYLE,
                           reason='synthesis_failed')

    return FilledPolygon(points=outline, style=FILL_STYLE)


def plan_buffer(buffer: PointBuffer, options: StrokeOptions = DEFAULT_OPTIONS) -> List[RenderCommand]:
    """Commands for every stroke in a buffer snapshot, in buffer order."""
    if buffer.is_empty():
        return []
    commands = []
    for stroke in split_strokes(buffer):
        command = plan_stroke(stroke, options)
        if command is not None:
            commands.append(command)
    return commands


def paint(commands: List[RenderCommand], canvas: Canvas) -> None:
    """Draw commands onto a canvas in order."""
    for command in commands:
        if command.kind == 'outline':
            # An empty outline is valid and draws nothing
            if command.points:
                canvas.fill_polygon(command.points, command.style)
        elif command.kind == 'dot':
            canvas.fill_circle(command.center, command.radius, command.style)
        elif command.kind == 'curve':
            canvas.stroke_path(command.path, command.style)
        else:
            raise ValueError(f'unknown render command kind: {command.kind!r}')


@dataclass
class StrokeRenderer:
    """Stateless renderer bundling synthesis options.

    Holds no outline state between calls; rendering the same buffer twice
    produces the same commands.

    Example:
        >>> renderer = StrokeRenderer()
        >>> canvas = PillowCanvas(400, 400)
        >>> renderer.render(controller.snapshot(), canvas)
    """
    options: StrokeOptions = field(default_factory=lambda: DEFAULT_OPTIONS)

    def plan(self, buffer: PointBuffer) -> List[RenderCommand]:
        return plan_buffer(buffer, self.options)

    def render(self, buffer: PointBuffer, canvas: Canvas) -> List[RenderCommand]:
        """Plan and paint a buffer snapshot; returns the painted commands."""
        commands = self.plan(buffer)
        paint(commands, canvas)
        return commands
