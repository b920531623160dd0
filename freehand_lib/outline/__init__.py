"""Pressure-simulated outline synthesis.

Example usage::

    from freehand_lib.outline import synthesize_outline, StrokeOptions

    outline = synthesize_outline(stroke.points)
    thin = synthesize_outline(stroke.points, StrokeOptions(size=8))
"""

from .options import DEFAULT_OPTIONS, StrokeOptions, TaperOptions
from .points import StrokePoint, get_stroke_points, normalize_point
from .synthesis import (
    get_stroke,
    get_stroke_outline_points,
    get_stroke_radius,
    synthesize_outline,
)

__all__ = [
    'StrokeOptions', 'TaperOptions', 'DEFAULT_OPTIONS',
    'StrokePoint', 'get_stroke_points', 'normalize_point',
    'get_stroke', 'get_stroke_outline_points', 'get_stroke_radius',
    'synthesize_outline',
]
