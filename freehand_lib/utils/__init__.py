"""Utility functions for stroke rendering.

Curve utilities:
    midpoint_curve: Smoothed open path through a stroke's samples.
    flatten_quadratic: Adaptive subdivision of a quadratic segment.
    flatten_path: Polyline approximation of a CurvePath.

Canvas backends:
    PillowCanvas: Raster drawing surface (PNG output).
    SvgCanvas: Vector drawing surface (SVG output).

Interchange:
    buffer_from_json, buffer_to_json: Stroke JSON used by the web service
        and the CLI.

Example usage::

    from freehand_lib.utils import midpoint_curve, flatten_path

    path = midpoint_curve(stroke.points)
    polyline = flatten_path(path)
"""

from .canvas import Canvas, PillowCanvas, SvgCanvas
from .curves import flatten_path, flatten_quadratic, midpoint_curve
from .interchange import buffer_from_json, buffer_to_json

__all__ = [
    'midpoint_curve', 'flatten_quadratic', 'flatten_path',
    'Canvas', 'PillowCanvas', 'SvgCanvas',
    'buffer_from_json', 'buffer_to_json',
]
