"""Geometric value objects for freehand strokes."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator, Optional, Tuple
import math


@dataclass(frozen=True)
class Point:
    """Immutable 2D point in surface-local coordinates."""
    x: float
    y: float

    def distance_to(self, other: Point) -> float:
        """Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def distance_squared_to(self, other: Point) -> float:
        """Squared distance, cheaper for threshold comparisons."""
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Point:
        return Point(self.x * scalar, self.y * scalar)

    def __truediv__(self, scalar: float) -> Point:
        return Point(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)

    def dot(self, other: Point) -> float:
        """Dot product treating points as vectors."""
        return self.x * other.x + self.y * other.y

    def length(self) -> float:
        """Length when treated as a vector from origin."""
        return math.hypot(self.x, self.y)

    def unit(self) -> Point:
        """Unit vector in the same direction.

        Raises:
            ZeroDivisionError: If the vector has zero length. Outline
                synthesis relies on this to detect degenerate geometry.
        """
        return self / self.length()

    def perpendicular(self) -> Point:
        """Vector rotated a quarter turn, (x, y) -> (y, -x)."""
        return Point(self.y, -self.x)

    def lerp(self, other: Point, t: float) -> Point:
        """Linear interpolation from this point toward other."""
        return Point(self.x + (other.x - self.x) * t,
                     self.y + (other.y - self.y) * t)

    def midpoint(self, other: Point) -> Point:
        return Point((self.x + other.x) / 2, (self.y + other.y) / 2)

    def project(self, direction: Point, distance: float) -> Point:
        """Point reached by moving distance along direction."""
        return self + direction * distance

    def rotate_around(self, center: Point, radians: float) -> Point:
        """Rotate this point around center by the given angle."""
        s = math.sin(radians)
        c = math.cos(radians)
        px = self.x - center.x
        py = self.y - center.y
        return Point(px * c - py * s + center.x, px * s + py * c + center.y)

    def to_tuple(self) -> Tuple[float, float]:
        """Convert to tuple for compatibility."""
        return (self.x, self.y)

    @classmethod
    def from_tuple(cls, t: Tuple[float, float]) -> Point:
        """Create from tuple."""
        return cls(float(t[0]), float(t[1]))


@dataclass(frozen=True)
class BBox:
    """Immutable bounding box."""
    x_min: float
    y_min: float
    x_max: float
    y_max: float

    def expanded(self, margin: float) -> BBox:
        """Grow the box by margin on every side."""
        return BBox(self.x_min - margin, self.y_min - margin,
                    self.x_max + margin, self.y_max + margin)

    def to_tuple(self) -> Tuple[float, float, float, float]:
        return (self.x_min, self.y_min, self.x_max, self.y_max)

    @classmethod
    def from_points(cls, points) -> BBox:
        """Create bounding box containing all points."""
        points = list(points)
        if not points:
            return cls(0, 0, 0, 0)
        xs = [p.x for p in points]
        ys = [p.y for p in points]
        return cls(min(xs), min(ys), max(xs), max(ys))


@dataclass(frozen=True)
class Stroke:
    """One pen-down to pen-up motion as an ordered run of points.

    Strokes are derived from a PointBuffer on every render and never stored.
    Timestamps (milliseconds) are carried along when the buffer has them so
    the same grouping can be handed to a recognizer.
    """
    points: Tuple[Point, ...] = ()
    timestamps: Optional[Tuple[int, ...]] = field(default=None, compare=False)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __getitem__(self, idx) -> Point:
        return self.points[idx]

    @property
    def start(self) -> Point:
        return self.points[0]

    @property
    def end(self) -> Point:
        return self.points[-1]

    def is_coincident(self) -> bool:
        """True when every point sits at the same coordinate."""
        first = self.points[0]
        return all(p == first for p in self.points)

    @classmethod
    def from_tuples(cls, tuples) -> Stroke:
        """Create from a sequence of (x, y) pairs."""
        return cls(tuple(Point.from_tuple(t) for t in tuples))
