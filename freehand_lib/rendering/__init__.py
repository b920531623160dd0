"""Render orchestration.

Example usage::

    from freehand_lib.rendering import StrokeRenderer
    from freehand_lib.utils import PillowCanvas

    canvas = PillowCanvas()
    StrokeRenderer().render(buffer, canvas)
"""

from .planner import (
    FALLBACK_STYLE,
    FILL_STYLE,
    StrokeRenderer,
    paint,
    plan_buffer,
    plan_stroke,
)

__all__ = [
    'plan_stroke', 'plan_buffer', 'paint', 'StrokeRenderer',
    'FILL_STYLE', 'FALLBACK_STYLE',
]
