"""Ink: the recognizer's view of a drawing.

Recognizers take the same stroke grouping the renderer draws, with a
timestamp on every point.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from ..analysis.segmentation import split_strokes
from ..domain.buffer import PointBuffer


@dataclass(frozen=True)
class InkPoint:
    x: float
    y: float
    t: int


@dataclass
class InkStroke:
    points: List[InkPoint] = field(default_factory=list)


@dataclass
class Ink:
    strokes: List[InkStroke] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.strokes

    def to_list(self) -> List[List[List[float]]]:
        """Nested ``[[x, y, t], ...]`` lists for JSON-speaking recognizers."""
        return [[[p.x, p.y, p.t] for p in s.points] for s in self.strokes]


def ink_from_buffer(buffer: PointBuffer) -> Ink:
    """Group a buffer into Ink, in the same order the renderer uses."""
    ink = Ink()
    for stroke in split_strokes(buffer):
        timestamps = stroke.timestamps or (0,) * len(stroke)
        ink.strokes.append(InkStroke([
            InkPoint(p.x, p.y, t) for p, t in zip(stroke.points, timestamps)
        ]))
    return ink
