"""Freehand practice package.

Renders handwriting-practice strokes as smooth, pressure-simulated ink. A
pointer's raw samples go into a point buffer; every repaint segments the
buffer into strokes and turns each stroke into a filled outline, a dot (for
a tap) or, when outline synthesis is not possible, a smoothed curve.

The package is organized into the following modules:
    domain: Value objects: Point, Stroke, PointBuffer, render commands.
    analysis: Segmentation of the buffer into strokes.
    outline: Variable-width outline synthesis with simulated pressure.
    rendering: Per-stroke render decisions and painting.
    utils: Fallback curves, canvas backends (Pillow, SVG), stroke JSON.
    interaction: Pointer input controller and idle auto-clear.
    recognition: Recognizer boundary and answer checking.
    api: PracticeService tying the above together.
    app: Flask service and logging setup.
    cli: Command-line entry point.

Example usage:
    Rendering a buffer::

        from freehand_lib import PointBuffer, StrokeRenderer
        from freehand_lib.utils import PillowCanvas

        buffer = PointBuffer.from_strokes([[(40, 40), (90, 44), (140, 60)], [(60, 120)]])
        canvas = PillowCanvas(200, 200)
        StrokeRenderer().render(buffer, canvas)
        canvas.save('drawing.png')

Attributes:
    __version__ (str): Package version string.
    __all__ (list): List of public symbols exported by this package.
"""

from .analysis import split_strokes
from .domain import Point, PointBuffer, Stroke
from .outline import StrokeOptions, synthesize_outline
from .rendering import StrokeRenderer, plan_buffer, plan_stroke

__all__ = [
    # Domain objects
    'Point', 'Stroke', 'PointBuffer',
    # Pipeline
    'split_strokes', 'synthesize_outline', 'StrokeOptions',
    'plan_stroke', 'plan_buffer', 'StrokeRenderer',
]

__version__ = '1.0.0'
