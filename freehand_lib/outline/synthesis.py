"""Variable-width outline synthesis.

Turns a stroke's centerline into a closed polygon that looks like ink laid
down with varying pressure. There is no pressure input from the pointer, so
pressure is simulated from geometry: fast, widely spaced samples thin the
line, slow dense samples thicken it.

The pipeline:
    1. get_stroke_points streamlines the samples (see outline.points).
    2. get_stroke_outline_points walks the stroke points, computes a radius
       per point from the simulated pressure, and offsets the centerline to
       a left and a right rail. Sharp turns get a half-circle of rail points
       so the outline does not fold over itself.
    3. Round caps are added at both ends and the loop is stitched as
       left rail, end cap, reversed right rail, start cap.

synthesize_outline wraps the pipeline with the checks the renderer relies
on: it refuses degenerate input and never returns non-finite coordinates,
raising OutlineSynthesisError instead so the caller can fall back.

Example:
    >>> from freehand_lib.domain import Point
    >>> outline = synthesize_outline([Point(10, 10), Point(40, 12), Point(80, 30)])
    >>> len(outline) > 3
    True
"""

from __future__ import annotations

import logging
import math
from typing import List, Sequence, Tuple

import numpy as np

from ..domain.geometry import Point
from ..errors import OutlineSynthesisError
from .options import DEFAULT_OPTIONS, StrokeOptions, ease_out_cubic, ease_out_quad
from .points import InputPoint, StrokePoint, get_stroke_points, normalize_point

logger = logging.getLogger(__name__)

RATE_OF_PRESSURE_CHANGE = 0.275

# Slightly over pi so half-turn caps close without a hairline gap
FIXED_PI = math.pi + 0.0001

START_CAP_STEPS = 13
END_CAP_STEPS = 29
CORNER_STEPS = 13

# Points this close to the end of the stroke are skipped, the end cap covers them
END_NOISE_LENGTH = 3


def get_stroke_radius(size: float, thinning: float, pressure: float, easing=lambda t: t) -> float:
    """Radius of the stroke at a given pressure."""
    return size * easing(0.5 - thinning * (0.5 - pressure))


def _simulated_pressure(prev_pressure: float, distance: float, size: float) -> float:
    speed = min(1.0, distance / size)
    rp = min(1.0, 1.0 - speed)
    return min(1.0, prev_pressure + (rp - prev_pressure) * (speed * RATE_OF_PRESSURE_CHANGE))


def _resolve_taper(taper, size: float, total_length: float) -> float:
    if taper is False:
        return 0.0
    if taper is True:
        return max(size, total_length)
    return float(taper)


def get_stroke_outline_points(points: List[StrokePoint],
                              options: StrokeOptions = DEFAULT_OPTIONS) -> List[Point]:
    """Build the closed outline polygon around prepared stroke points.

    Args:
        points: Output of get_stroke_points.
        options: Synthesis options.

    Returns:
        Outline vertices in drawing order; the closing edge from the last
        vertex back to the first is implicit. Empty when there are no points
        or the size is not positive. A single stroke point produces a ring
        around it.
    """
    size = options.size
    if not points or size <= 0:
        return []

    thinning = options.thinning
    simulate_pressure = options.simulate_pressure
    easing = options.easing
    taper_start_ease = options.start.easing or ease_out_quad
    taper_end_ease = options.end.easing or ease_out_cubic

    total_length = points[-1].running_length
    taper_start = _resolve_taper(options.start.taper, size, total_length)
    taper_end = _resolve_taper(options.end.taper, size, total_length)

    min_distance = (size * options.smoothing) ** 2

    left_pts: List[Point] = []
    right_pts: List[Point] = []

    # Seed pressure from the first few points so the start is not a blob
    prev_pressure = points[0].pressure
    for curr in points[:10]:
        pressure = curr.pressure
        if simulate_pressure:
            pressure = _simulated_pressure(prev_pressure, curr.distance, size)
        prev_pressure = (prev_pressure + pressure) / 2

    radius = get_stroke_radius(size, thinning, points[-1].pressure, easing)
    first_radius = None
    prev_vector = points[0].vector
    pl = points[0].point
    pr = pl
    tl = pl
    tr = pr
    is_prev_point_sharp_corner = False
    last_index = len(points) - 1

    for i, stroke_point in enumerate(points):
        pressure = stroke_point.pressure
        point = stroke_point.point
        vector = stroke_point.vector
        running_length = stroke_point.running_length

        if i < last_index and total_length - running_length < END_NOISE_LENGTH:
            continue

        if thinning:
            if simulate_pressure:
                pressure = _simulated_pressure(prev_pressure, stroke_point.distance, size)
            radius = get_stroke_radius(size, thinning, pressure, easing)
        else:
            radius = size / 2

        if first_radius is None:
            first_radius = radius

        ts = taper_start_ease(running_length / taper_start) if running_length < taper_start else 1.0
        remaining = total_length - running_length
        te = taper_end_ease(remaining / taper_end) if remaining < taper_end else 1.0
        radius = max(0.01, radius * min(ts, te))

        next_vector = points[i + 1].vector if i < last_index else vector
        next_dpr = vector.dot(next_vector) if i < last_index else 1.0
        prev_dpr = vector.dot(prev_vector)

        is_point_sharp_corner = prev_dpr < 0 and not is_prev_point_sharp_corner
        is_next_point_sharp_corner = next_dpr < 0

        if is_point_sharp_corner or is_next_point_sharp_corner:
            offset = prev_vector.perpendicular() * radius
            for k in range(CORNER_STEPS + 1):
                t = k / CORNER_STEPS
                tl = (point - offset).rotate_around(point, FIXED_PI * t)
                left_pts.append(tl)
                tr = (point + offset).rotate_around(point, FIXED_PI * -t)
                right_pts.append(tr)
            pl = tl
            pr = tr
            if is_next_point_sharp_corner:
                is_prev_point_sharp_corner = True
            continue

        is_prev_point_sharp_corner = False

        if i == last_index:
            offset = vector.perpendicular() * radius
            left_pts.append(point - offset)
            right_pts.append(point + offset)
            continue

        offset = next_vector.lerp(vector, next_dpr).perpendicular() * radius

        tl = point - offset
        if i <= 1 or pl.distance_squared_to(tl) > min_distance:
            left_pts.append(tl)
            pl = tl

        tr = point + offset
        if i <= 1 or pr.distance_squared_to(tr) > min_distance:
            right_pts.append(tr)
            pr = tr

        prev_pressure = pressure
        prev_vector = vector

    first_point = points[0].point
    last_point = points[-1].point if len(points) > 1 else points[0].point + Point(1, 1)

    start_cap: List[Point] = []
    end_cap: List[Point] = []

    if len(points) == 1:
        if not (taper_start or taper_end) or options.last:
            start = first_point.project(
                (first_point - last_point).perpendicular().unit(),
                -(first_radius if first_radius is not None else radius),
            )
            return [start.rotate_around(first_point, FIXED_PI * 2 * k / START_CAP_STEPS)
                    for k in range(1, START_CAP_STEPS + 1)]
    else:
        if taper_start or (taper_end and len(points) == 1):
            pass
        elif options.start.cap:
            for k in range(1, START_CAP_STEPS + 1):
                start_cap.append(right_pts[0].rotate_around(first_point, FIXED_PI * k / START_CAP_STEPS))
        else:
            corners = left_pts[0] - right_pts[0]
            offset_a = corners * 0.5
            offset_b = corners * 0.51
            start_cap.extend([
                first_point - offset_a,
                first_point - offset_b,
                first_point + offset_b,
                first_point + offset_a,
            ])

        direction = (-points[-1].vector).perpendicular()

        if taper_end or (taper_start and len(points) == 1):
            end_cap.append(last_point)
        elif options.end.cap:
            start = last_point.project(direction, radius)
            for k in range(1, END_CAP_STEPS):
                end_cap.append(start.rotate_around(last_point, FIXED_PI * 3 * k / END_CAP_STEPS))
        else:
            end_cap.extend([
                last_point + direction * radius,
                last_point + direction * (radius * 0.99),
                last_point - direction * (radius * 0.99),
                last_point - direction * radius,
            ])

    return left_pts + end_cap + right_pts[::-1] + start_cap


def get_stroke(points: Sequence[InputPoint], options: StrokeOptions = DEFAULT_OPTIONS) -> List[Point]:
    """Outline polygon for raw input points, no degeneracy checks."""
    return get_stroke_outline_points(get_stroke_points(points, options), options)


def synthesize_outline(points: Sequence[InputPoint],
                       options: StrokeOptions = DEFAULT_OPTIONS) -> Tuple[Point, ...]:
    """Synthesize the filled outline for one stroke.

    Args:
        points: The stroke's centerline, at least two samples.
        options: Synthesis options, DEFAULT_OPTIONS for the renderer.

    Returns:
        Outline vertices forming a closed loop. Empty only when the options
        describe an empty pen (``size <= 0``); an empty outline draws nothing.

    Raises:
        OutlineSynthesisError: If the stroke has fewer than two points, all
            of its points coincide, the computation fails numerically, or the
            result is not a finite polygon with at least three vertices.
    """
    if len(points) < 2:
        raise OutlineSynthesisError(f'need at least 2 points, got {len(points)}')

    centerline = [normalize_point(p)[0] for p in points]
    if all(p == centerline[0] for p in centerline):
        raise OutlineSynthesisError('all points coincide')

    if options.size <= 0:
        return ()

    try:
        outline = get_stroke(points, options)
    except (ArithmeticError, IndexError, ValueError) as e:
        raise OutlineSynthesisError(f'outline computation failed: {e}') from e

    if len(outline) < 3:
        raise OutlineSynthesisError(f'outline has only {len(outline)} vertices')

    coords = np.array([p.to_tuple() for p in outline], dtype=np.float64)
    if not np.isfinite(coords).all():
        raise OutlineSynthesisError('outline has non-finite coordinates')

    logger.debug("Synthesized outline: %d centerline points -> %d vertices",
                 len(points), len(outline))
    return tuple(outline)
