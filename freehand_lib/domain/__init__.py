"""Domain objects for freehand strokes.

This module provides the value objects shared by every layer of the
package: geometry primitives, the point buffer the interaction layer
appends to, and the drawing commands the renderer emits.

Geometry classes:
    Point: Immutable 2D point with vector operations.
    BBox: Immutable bounding box.
    Stroke: One pen-down to pen-up run of points.

Buffer classes:
    PointBuffer: Immutable sequence of samples and stroke breaks.
    Sample: A pointer sample with timestamp.
    STROKE_BREAK: Element that ends a stroke.
    SENTINEL: The (0, 0) break marker of the legacy flat format.

Command classes:
    FilledPolygon, FilledDot, StrokedPath: Tagged render outcomes.
    CurvePath: Quadratic midpoint curve used by StrokedPath.
    PaintStyle: Color, width, cap and join.

Example usage::

    from freehand_lib.domain import Point, PointBuffer

    buf = PointBuffer().append_sample(Point(10, 10)).append_sample(Point(20, 12))
    buf = buf.append_break()
"""

from .buffer import (
    EMPTY_BUFFER,
    SENTINEL,
    STROKE_BREAK,
    PointBuffer,
    Sample,
    StrokeBreak,
)
from .commands import (
    CurvePath,
    FilledDot,
    FilledPolygon,
    PaintStyle,
    RenderCommand,
    StrokedPath,
)
from .geometry import BBox, Point, Stroke

__all__ = [
    'Point', 'BBox', 'Stroke',
    'PointBuffer', 'Sample', 'StrokeBreak', 'STROKE_BREAK', 'SENTINEL', 'EMPTY_BUFFER',
    'FilledPolygon', 'FilledDot', 'StrokedPath', 'CurvePath', 'PaintStyle', 'RenderCommand',
]
