"""Plain 2D value types shared by the model and the editing core.

Point is a location (design or screen space), Vec2 is a displacement and
Rect an axis-aligned box. All three are immutable.
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Vec2:
    """A 2D displacement.

    Attributes:
        x: Horizontal component
        y: Vertical component
    """

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> "Vec2":
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> "Vec2":
        return Vec2(self.x / divisor, self.y / divisor)

    def __neg__(self) -> "Vec2":
        return Vec2(-self.x, -self.y)

    def hypot(self) -> float:
        """Length of the vector."""
        return math.hypot(self.x, self.y)

    def hypot2(self) -> float:
        """Squared length of the vector."""
        return self.x * self.x + self.y * self.y

    def dot(self, other: "Vec2") -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y

    def to_point(self) -> "Point":
        """Treat the displacement as a location relative to the origin."""
        return Point(self.x, self.y)

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True, slots=True)
class Point:
    """A 2D location.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float = 0.0
    y: float = 0.0

    def __add__(self, delta: Vec2) -> "Point":
        return Point(self.x + delta.x, self.y + delta.y)

    def __sub__(self, other: "Point") -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def lerp(self, other: "Point", t: float) -> "Point":
        """Linear interpolation towards ``other``.

        Args:
            other: Target point (reached at t=1)
            t: Interpolation parameter

        Returns:
            Interpolated point
        """
        return Point(self.x + (other.x - self.x) * t, self.y + (other.y - self.y) * t)

    def midpoint(self, other: "Point") -> "Point":
        return self.lerp(other, 0.5)

    def distance(self, other: "Point") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def distance_squared(self, other: "Point") -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def to_vec2(self) -> Vec2:
        return Vec2(self.x, self.y)

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    @classmethod
    def from_tuple(cls, pt: tuple[float, float]) -> "Point":
        return cls(float(pt[0]), float(pt[1]))


@dataclass(frozen=True, slots=True)
class Rect:
    """An axis-aligned rectangle with x0 <= x1 and y0 <= y1.

    Attributes:
        x0: Minimum x
        y0: Minimum y
        x1: Maximum x
        y1: Maximum y
    """

    x0: float
    y0: float
    x1: float
    y1: float

    @classmethod
    def from_points(cls, a: Point, b: Point) -> "Rect":
        """Build the normalized rectangle spanned by two corners."""
        return cls(min(a.x, b.x), min(a.y, b.y), max(a.x, b.x), max(a.y, b.y))

    @classmethod
    def bounding(cls, points: Sequence[Point]) -> "Rect | None":
        """Bounding box of a set of points, or None when there are none."""
        if not points:
            return None
        xs = [p.x for p in points]
        ys = [p.y for p in points]
        return cls(min(xs), min(ys), max(xs), max(ys))

    @property
    def width(self) -> float:
        return self.x1 - self.x0

    @property
    def height(self) -> float:
        return self.y1 - self.y0

    def center(self) -> Point:
        return Point((self.x0 + self.x1) / 2, (self.y0 + self.y1) / 2)

    def contains(self, point: Point) -> bool:
        """Whether a point lies inside or on the border of the rectangle."""
        return self.x0 <= point.x <= self.x1 and self.y0 <= point.y <= self.y1

    def union(self, other: "Rect") -> "Rect":
        return Rect(
            min(self.x0, other.x0),
            min(self.y0, other.y0),
            max(self.x1, other.x1),
            max(self.y1, other.y1),
        )

    def to_tuple(self) -> tuple[float, float, float, float]:
        """Convert to (xMin, yMin, xMax, yMax), the fontTools bounds order."""
        return (self.x0, self.y0, self.x1, self.y1)
