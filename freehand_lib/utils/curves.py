"""Fallback curve construction and flattening.

When a stroke cannot be drawn as a filled outline it is drawn as a smooth
open curve through its samples. The curve uses each interior sample as the
control point of a quadratic segment that ends halfway to the next sample,
the classic midpoint smoothing of a polyline. Segments approximate the raw
points rather than pass through them, so a final straight segment runs into
the last sample to make sure the curve always reaches it.

The module provides the following functions:
    midpoint_curve: Build the CurvePath for a stroke.
    flatten_quadratic: Adaptive subdivision of one quadratic segment.
    flatten_path: Polyline approximation of a whole CurvePath.
"""

from __future__ import annotations

from typing import List, Sequence

from .. import config
from ..domain.commands import CurvePath
from ..domain.geometry import Point

MAX_SUBDIVISION_DEPTH = 10


def midpoint_curve(points: Sequence[Point]) -> CurvePath:
    """Build the smoothed open path for a stroke.

    Args:
        points: Stroke samples, at least one.

    Returns:
        CurvePath starting at ``points[0]`` and ending at ``points[-1]``.
        For two points the path is a single straight segment.
    """
    segments = []
    for i in range(1, len(points) - 1):
        control = points[i]
        segments.append((control, control.midpoint(points[i + 1])))
    return CurvePath(start=points[0], segments=tuple(segments), end=points[-1])


def flatten_quadratic(p0: Point, p1: Point, p2: Point,
                      tolerance: float = config.CURVE_TOLERANCE) -> List[Point]:
    """Flatten a quadratic Bezier into line segments.

    Recursively splits the curve at t=0.5 until the control point is within
    ``tolerance`` of the chord or the depth limit is reached.

    Returns:
        Points after ``p0`` along the curve; the last one is ``p2``.
    """
    out: List[Point] = []

    def flatness(a: Point, b: Point, c: Point) -> float:
        ux = 2 * b.x - a.x - c.x
        uy = 2 * b.y - a.y - c.y
        return ux * ux + uy * uy

    def subdivide(a: Point, b: Point, c: Point, depth: int) -> None:
        if depth > MAX_SUBDIVISION_DEPTH or flatness(a, b, c) < tolerance * tolerance:
            out.append(c)
            return
        ab = a.midpoint(b)
        bc = b.midpoint(c)
        abc = ab.midpoint(bc)
        subdivide(a, ab, abc, depth + 1)
        subdivide(abc, bc, c, depth + 1)

    subdivide(p0, p1, p2, 0)
    return out


def flatten_path(path: CurvePath, tolerance: float = config.CURVE_TOLERANCE) -> List[Point]:
    """Polyline approximation of a CurvePath.

    The first vertex is ``path.start`` and the last is ``path.end``, exactly.
    """
    polyline = [path.start]
    cursor = path.start
    for control, end in path.segments:
        polyline.extend(flatten_quadratic(cursor, control, end, tolerance))
        cursor = end
    polyline.append(path.end)
    return polyline
