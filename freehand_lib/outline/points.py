"""Stroke point preparation for outline synthesis.

The raw pointer samples are noisy and irregularly spaced. get_stroke_points
streamlines them (each kept point is pulled toward the previous one), pads
very short input so the outline has something to bend around, and records
for every kept point the data the outline pass needs: pressure, direction,
segment length and running length.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union

from ..domain.geometry import Point
from .options import DEFAULT_OPTIONS, StrokeOptions

# Pressure assumed for samples that carry none
DEFAULT_PRESSURE = 0.5
DEFAULT_FIRST_PRESSURE = 0.25

InputPoint = Union[Point, Sequence[float]]


@dataclass
class StrokePoint:
    """A streamlined centerline point.

    Attributes:
        point: Position after streamlining.
        pressure: Input pressure, or the default when the input has none.
        vector: Unit vector pointing back toward the previous point.
        distance: Distance from the previous kept point.
        running_length: Arc length from the first point.
    """
    point: Point
    pressure: float
    vector: Point
    distance: float
    running_length: float


def normalize_point(raw: InputPoint) -> Tuple[Point, Optional[float]]:
    """Split an input point into its position and optional pressure."""
    if isinstance(raw, Point):
        return raw, None
    pressure = float(raw[2]) if len(raw) > 2 and raw[2] is not None else None
    return Point(float(raw[0]), float(raw[1])), pressure


def _pressure_or(pressure: Optional[float], default: float) -> float:
    return pressure if pressure is not None and pressure >= 0 else default


def get_stroke_points(points: Sequence[InputPoint],
                      options: StrokeOptions = DEFAULT_OPTIONS) -> List[StrokePoint]:
    """Streamline raw samples into stroke points.

    Args:
        points: Points or ``(x, y[, pressure])`` sequences.
        options: Synthesis options; ``size``, ``streamline`` and ``last``
            are used here.

    Returns:
        Stroke points, empty for empty input. Consecutive duplicates are
        removed, so a stroke whose samples all coincide comes back as a
        single point.
    """
    if not points:
        return []

    t = 0.15 + (1 - options.streamline) * 0.85
    pts = [normalize_point(p) for p in points]

    # Two samples give the outline nothing to bend around, interpolate a few
    if len(pts) == 2:
        first, last = pts[0][0], pts[1][0]
        pts = [pts[0]] + [(first.lerp(last, i / 4), None) for i in range(1, 5)]

    if len(pts) == 1:
        pts = [pts[0], (pts[0][0] + Point(1, 1), pts[0][1])]

    first_point, first_pressure = pts[0]
    stroke_points = [StrokePoint(
        point=first_point,
        pressure=_pressure_or(first_pressure, DEFAULT_FIRST_PRESSURE),
        vector=Point(1, 1),
        distance=0.0,
        running_length=0.0,
    )]

    has_reached_minimum_length = False
    running_length = 0.0
    prev = stroke_points[0]
    last_index = len(pts) - 1

    for i in range(1, len(pts)):
        raw_point, raw_pressure = pts[i]
        if options.last and i == last_index:
            point = raw_point
        else:
            point = prev.point.lerp(raw_point, t)

        if point == prev.point:
            continue

        distance = point.distance_to(prev.point)
        running_length += distance

        # Hold back the first points until the pen has travelled a full size
        if i < last_index and not has_reached_minimum_length:
            if running_length < options.size:
                continue
            has_reached_minimum_length = True

        prev = StrokePoint(
            point=point,
            pressure=_pressure_or(raw_pressure, DEFAULT_PRESSURE),
            vector=(prev.point - point).unit(),
            distance=distance,
            running_length=running_length,
        )
        stroke_points.append(prev)

    stroke_points[0].vector = stroke_points[1].vector if len(stroke_points) > 1 else Point(0, 0)
    return stroke_points
