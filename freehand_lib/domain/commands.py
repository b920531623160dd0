"""Drawing commands produced by the render planner.

Each stroke resolves to exactly one command. The command classes form a
tagged union distinguished by their ``kind`` attribute, so callers (canvas
backends, tests, the JSON surface) can dispatch without isinstance chains:

    kind "outline"  FilledPolygon  closed pressure-simulated outline
    kind "dot"      FilledDot      single-sample tap
    kind "curve"    StrokedPath    smoothed open curve used as fallback
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

from .geometry import Point

RGB = Tuple[int, int, int]


@dataclass(frozen=True)
class PaintStyle:
    """How a command is painted."""
    color: RGB = (0, 0, 0)
    width: float = 0.0
    cap: str = 'round'
    join: str = 'round'


@dataclass(frozen=True)
class CurvePath:
    """Open path: quadratic segments followed by a line into ``end``.

    Attributes:
        start: First raw sample; the path begins here.
        segments: ``(control, end)`` pairs for consecutive quadratic curves.
        end: Last raw sample; a straight segment always finishes here.
    """
    start: Point
    segments: Tuple[Tuple[Point, Point], ...]
    end: Point


@dataclass(frozen=True)
class FilledPolygon:
    points: Tuple[Point, ...]
    style: PaintStyle = PaintStyle()
    kind: str = 'outline'


@dataclass(frozen=True)
class FilledDot:
    center: Point
    radius: float
    style: PaintStyle = PaintStyle()
    kind: str = 'dot'


@dataclass(frozen=True)
class StrokedPath:
    """Fallback rendering of a stroke as a stroked open curve.

    Attributes:
        path: The smoothed curve.
        style: Stroke width, caps and joins.
        reason: Why synthesis was not used, ``'coincident'`` or
            ``'synthesis_failed'``.
    """
    path: CurvePath
    style: PaintStyle = PaintStyle()
    reason: str = 'synthesis_failed'
    kind: str = 'curve'


RenderCommand = Union[FilledPolygon, FilledDot, StrokedPath]
