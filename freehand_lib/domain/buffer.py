"""Point buffer: the flat, append-only record of what the pointer did.

The buffer interleaves pointer samples with explicit stroke breaks. Older
clients encode the break in-band as the origin point (0, 0); that format is
still accepted through from_sentinel_points/to_sentinel_points, but inside
the package a break is always the STROKE_BREAK element, so a genuine sample
at the origin can never be mistaken for the end of a stroke.

PointBuffer is immutable. Every mutation returns a new buffer, which lets the
interaction layer hand the renderer a snapshot without copying or locking.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence, Tuple, Union

from .geometry import Point

# In-band stroke terminator of the legacy flat format
SENTINEL = Point(0.0, 0.0)


@dataclass(frozen=True)
class Sample:
    """A pointer sample with its capture time in milliseconds."""
    point: Point
    t: int = 0


class StrokeBreak:
    """Marks the end of a stroke. Use the STROKE_BREAK singleton."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'STROKE_BREAK'

    def __reduce__(self):
        return (StrokeBreak, ())


STROKE_BREAK = StrokeBreak()

BufferElement = Union[Sample, StrokeBreak]


class PointBuffer:
    """Immutable sequence of samples and stroke breaks."""

    __slots__ = ('_elements',)

    def __init__(self, elements: Iterable[BufferElement] = ()):
        self._elements: Tuple[BufferElement, ...] = tuple(elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[BufferElement]:
        return iter(self._elements)

    def __getitem__(self, idx):
        return self._elements[idx]

    def __eq__(self, other) -> bool:
        if not isinstance(other, PointBuffer):
            return NotImplemented
        return self._elements == other._elements

    def __hash__(self) -> int:
        return hash(self._elements)

    def __repr__(self) -> str:
        return f'PointBuffer({list(self._elements)!r})'

    @property
    def elements(self) -> Tuple[BufferElement, ...]:
        return self._elements

    def is_empty(self) -> bool:
        return not self._elements

    def append_sample(self, point: Point, t: int = 0) -> PointBuffer:
        return PointBuffer(self._elements + (Sample(point, t),))

    def append_break(self) -> PointBuffer:
        return PointBuffer(self._elements + (STROKE_BREAK,))

    def cleared(self) -> PointBuffer:
        return EMPTY_BUFFER

    def ends_with_break(self) -> bool:
        return bool(self._elements) and self._elements[-1] is STROKE_BREAK

    def points(self) -> List[Point]:
        """All sample points in order, without breaks."""
        return [e.point for e in self._elements if isinstance(e, Sample)]

    def to_sentinel_points(self) -> List[Point]:
        """Export to the legacy flat format with (0, 0) as the break."""
        return [SENTINEL if e is STROKE_BREAK else e.point for e in self._elements]

    @classmethod
    def from_sentinel_points(cls, points: Iterable[Point]) -> PointBuffer:
        """Import the legacy flat format.

        Any point equal to (0, 0) becomes a stroke break, including a sample
        that really was drawn at the origin.
        """
        return cls(STROKE_BREAK if p == SENTINEL else Sample(p) for p in points)

    @classmethod
    def from_strokes(cls, strokes: Iterable[Sequence]) -> PointBuffer:
        """Build a buffer from nested (x, y) or (x, y, t) sequences.

        Each inner sequence is terminated with a stroke break.
        """
        elements: List[BufferElement] = []
        for stroke in strokes:
            for item in stroke:
                t = int(item[2]) if len(item) > 2 else 0
                elements.append(Sample(Point(float(item[0]), float(item[1])), t))
            elements.append(STROKE_BREAK)
        return cls(elements)


EMPTY_BUFFER = PointBuffer()
