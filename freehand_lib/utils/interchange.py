"""JSON interchange for point buffers.

Two shapes are accepted on input:

    {"strokes": [[[x, y], [x, y, t], ...], ...], "in_progress": false}
        Nested strokes, optional per-sample timestamp in milliseconds. A bare
        list of strokes is accepted too. When ``in_progress`` is true the
        last stroke is left open.

    [[x, y], [x, y], [0, 0], [x, y], ...]
        Legacy flat list where the origin ends a stroke.

Output is always the nested shape.
"""

from __future__ import annotations

import math
from numbers import Real
from typing import Any, Dict, List

from ..analysis.segmentation import split_strokes
from ..domain.buffer import PointBuffer
from ..domain.geometry import Point
from ..errors import BufferFormatError


def _is_pair(item: Any) -> bool:
    return (isinstance(item, (list, tuple)) and len(item) in (2, 3)
            and all(isinstance(v, Real) and not isinstance(v, bool) and math.isfinite(v)
                    for v in item))


def buffer_from_json(data: Any) -> PointBuffer:
    """Parse decoded JSON into a PointBuffer.

    Raises:
        BufferFormatError: If the payload matches neither accepted shape.
    """
    in_progress = False
    if isinstance(data, dict):
        if 'strokes' not in data:
            raise BufferFormatError("object payload needs a 'strokes' key")
        in_progress = bool(data.get('in_progress', False))
        data = data['strokes']

    if not isinstance(data, list):
        raise BufferFormatError(f'expected a list of strokes, got {type(data).__name__}')
    if not data:
        return PointBuffer()

    if all(_is_pair(item) for item in data):
        return PointBuffer.from_sentinel_points(Point(float(x), float(y)) for x, y, *_ in data)

    for i, stroke in enumerate(data):
        if not isinstance(stroke, list) or not all(_is_pair(item) for item in stroke):
            raise BufferFormatError(f'stroke {i} is not a list of [x, y] or [x, y, t] points')

    buffer = PointBuffer.from_strokes(data)
    if in_progress and buffer.ends_with_break():
        buffer = PointBuffer(buffer.elements[:-1])
    return buffer


def buffer_to_json(buffer: PointBuffer) -> Dict[str, Any]:
    """Serialize a buffer to the nested stroke shape."""
    strokes: List[List[List[float]]] = []
    for stroke in split_strokes(buffer):
        timestamps = stroke.timestamps or (0,) * len(stroke)
        strokes.append([[p.x, p.y, t] for p, t in zip(stroke.points, timestamps)])
    return {
        'strokes': strokes,
        'in_progress': not buffer.is_empty() and not buffer.ends_with_break(),
    }
