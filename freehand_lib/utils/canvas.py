"""Drawing surfaces for render commands.

The render planner emits backend-neutral commands; a canvas turns them into
pixels or markup. Two backends are provided:

    PillowCanvas: Raster output through PIL.ImageDraw. Draws at a
        supersampled resolution and downsamples, which gives the filled
        outlines smooth edges that ImageDraw alone does not.
    SvgCanvas: Vector output. Quadratic fallback segments are kept as
        ``Q`` path commands instead of being flattened.

Both implement the Canvas protocol, so rendering.paint works with either.

Example usage::

    from freehand_lib.utils.canvas import PillowCanvas

    canvas = PillowCanvas(400, 400)
    renderer.render(buffer, canvas)
    png_bytes = canvas.to_png_bytes()
"""

from __future__ import annotations

import io
from typing import List, Protocol, Sequence, Tuple

import numpy as np
from PIL import Image, ImageDraw

from .. import config
from ..domain.commands import CurvePath, PaintStyle
from ..domain.geometry import Point
from .curves import flatten_path


class Canvas(Protocol):
    """Minimal 2D surface the renderer paints on."""

    def fill_polygon(self, points: Sequence[Point], style: PaintStyle) -> None: ...

    def fill_circle(self, center: Point, radius: float, style: PaintStyle) -> None: ...

    def stroke_path(self, path: CurvePath, style: PaintStyle) -> None: ...


class PillowCanvas:
    """Raster canvas backed by a Pillow RGB image.

    Attributes:
        width: Output width in pixels (surface units).
        height: Output height in pixels.
        supersample: Internal scale factor; 1 draws directly.
    """

    def __init__(self, width: int = config.CANVAS_WIDTH, height: int = config.CANVAS_HEIGHT,
                 background: Tuple[int, int, int] = config.BACKGROUND_COLOR,
                 supersample: int = config.SUPERSAMPLE):
        if width <= 0 or height <= 0:
            raise ValueError(f'canvas size must be positive, got {width}x{height}')
        self.width = width
        self.height = height
        self.supersample = max(1, int(supersample))
        self._image = Image.new(
            'RGB', (width * self.supersample, height * self.supersample), background)
        self._draw = ImageDraw.Draw(self._image)

    def _scaled(self, points: Sequence[Point]) -> List[Tuple[float, float]]:
        s = self.supersample
        return [(p.x * s, p.y * s) for p in points]

    def fill_polygon(self, points: Sequence[Point], style: PaintStyle) -> None:
        # Fewer than three vertices enclose no area
        if len(points) < 3:
            return
        self._draw.polygon(self._scaled(points), fill=style.color)

    def fill_circle(self, center: Point, radius: float, style: PaintStyle) -> None:
        s = self.supersample
        cx, cy, r = center.x * s, center.y * s, radius * s
        self._draw.ellipse([cx - r, cy - r, cx + r, cy + r], fill=style.color)

    def stroke_path(self, path: CurvePath, style: PaintStyle) -> None:
        polyline = self._scaled(flatten_path(path, config.CURVE_TOLERANCE / self.supersample))
        width = max(1, int(round(style.width * self.supersample)))
        joint = 'curve' if style.join == 'round' else None
        self._draw.line(polyline, fill=style.color, width=width, joint=joint)
        if style.cap == 'round':
            r = width / 2
            for x, y in (polyline[0], polyline[-1]):
                self._draw.ellipse([x - r, y - r, x + r, y + r], fill=style.color)

    def to_image(self) -> Image.Image:
        """The canvas at output resolution."""
        if self.supersample == 1:
            return self._image.copy()
        return self._image.resize((self.width, self.height), Image.Resampling.LANCZOS)

    def to_array(self) -> np.ndarray:
        """The canvas as an (H, W, 3) uint8 array."""
        return np.array(self.to_image())

    def to_png_bytes(self) -> bytes:
        buf = io.BytesIO()
        self.to_image().save(buf, format='PNG')
        return buf.getvalue()

    def save(self, path) -> None:
        self.to_image().save(path)


def _fmt(v: float) -> str:
    return f'{v:.2f}'


def _rgb(color: Tuple[int, int, int]) -> str:
    return 'rgb({},{},{})'.format(*color)


class SvgCanvas:
    """Vector canvas that collects SVG elements."""

    def __init__(self, width: int = config.CANVAS_WIDTH, height: int = config.CANVAS_HEIGHT,
                 background: Tuple[int, int, int] = config.BACKGROUND_COLOR):
        if width <= 0 or height <= 0:
            raise ValueError(f'canvas size must be positive, got {width}x{height}')
        self.width = width
        self.height = height
        self.background = background
        self.elements: List[str] = []

    def fill_polygon(self, points: Sequence[Point], style: PaintStyle) -> None:
        if len(points) < 3:
            return
        d = f'M {_fmt(points[0].x)} {_fmt(points[0].y)}'
        for p in points[1:]:
            d += f' L {_fmt(p.x)} {_fmt(p.y)}'
        self.elements.append(f'<path d="{d} Z" fill="{_rgb(style.color)}" />')

    def fill_circle(self, center: Point, radius: float, style: PaintStyle) -> None:
        self.elements.append(
            f'<circle cx="{_fmt(center.x)}" cy="{_fmt(center.y)}" r="{_fmt(radius)}" '
            f'fill="{_rgb(style.color)}" />'
        )

    def stroke_path(self, path: CurvePath, style: PaintStyle) -> None:
        d = f'M {_fmt(path.start.x)} {_fmt(path.start.y)}'
        for control, end in path.segments:
            d += f' Q {_fmt(control.x)} {_fmt(control.y)} {_fmt(end.x)} {_fmt(end.y)}'
        d += f' L {_fmt(path.end.x)} {_fmt(path.end.y)}'
        self.elements.append(
            f'<path d="{d}" fill="none" stroke="{_rgb(style.color)}" '
            f'stroke-width="{_fmt(style.width)}" stroke-linecap="{style.cap}" '
            f'stroke-linejoin="{style.join}" />'
        )

    def to_svg(self) -> str:
        parts = [
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{self.width}" '
            f'height="{self.height}" viewBox="0 0 {self.width} {self.height}">',
            f'<rect width="100%" height="100%" fill="{_rgb(self.background)}" />',
        ]
        parts.extend(self.elements)
        parts.append('</svg>')
        return '\n'.join(parts)

    def save(self, path) -> None:
        with open(path, 'w', encoding='utf-8') as f:
            f.write(self.to_svg())
