"""Stroke segmentation.

Groups the flat, time-ordered point buffer into discrete strokes. A stroke
is a maximal run of samples between two breaks (or the buffer ends). Empty
runs produced by leading, trailing or doubled breaks are dropped, and a
trailing run without a break (a stroke still being drawn) is kept.

Functions:
    split_strokes: Segment a PointBuffer into Stroke objects.
    split_sentinel_points: Same contract for the legacy flat list where
        the origin (0, 0) marks the break.
    iter_runs: Generator both are built on.
"""

from __future__ import annotations

from typing import Callable, Iterable, Iterator, List, TypeVar

from ..domain.buffer import SENTINEL, STROKE_BREAK, PointBuffer, Sample
from ..domain.geometry import Point, Stroke

T = TypeVar('T')


def iter_runs(items: Iterable[T], is_break: Callable[[T], bool]) -> Iterator[List[T]]:
    """Yield non-empty runs of items separated by break elements.

    Args:
        items: Sequence to split, consumed once.
        is_break: Predicate identifying break elements.

    Yields:
        Lists of consecutive non-break items, in input order.
    """
    current: List[T] = []
    for item in items:
        if is_break(item):
            if current:
                yield current
                current = []
        else:
            current.append(item)
    if current:
        yield current


def split_strokes(buffer: PointBuffer) -> List[Stroke]:
    """Segment a buffer snapshot into strokes.

    Pure function of the buffer: calling it twice on the same buffer gives
    equal results.

    Args:
        buffer: Snapshot of the interaction layer's point buffer.

    Returns:
        Strokes in buffer order, each with at least one point and the
        timestamps of its samples.

    Example:
        >>> from freehand_lib.domain import Point, PointBuffer
        >>> buf = PointBuffer.from_strokes([[(1, 1), (2, 1)], [(5, 5)]])
        >>> [len(s) for s in split_strokes(buf)]
        [2, 1]
    """
    strokes = []
    for run in iter_runs(buffer, lambda e: e is STROKE_BREAK):
        samples: List[Sample] = run
        strokes.append(Stroke(
            points=tuple(s.point for s in samples),
            timestamps=tuple(s.t for s in samples),
        ))
    return strokes


def split_sentinel_points(points: Iterable[Point]) -> List[List[Point]]:
    """Segment a legacy flat point list where (0, 0) ends a stroke.

    A genuine sample at the origin is indistinguishable from a break in this
    format and is dropped as one.
    """
    return list(iter_runs(points, lambda p: p == SENTINEL))
