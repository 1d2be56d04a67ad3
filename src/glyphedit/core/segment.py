"""Segment primitives for hit-testing and curve subdivision.

A segment is the piece of a path between two consecutive on-curve points:
a Line, a QuadBez or a CubicBez. Segments are derived from a path's points
on demand and never stored.
"""

from dataclasses import dataclass

from glyphedit.core import _bezier
from glyphedit.domain.geometry import Point

# Squared length below which a line is treated as a single point
DEGENERATE_LINE_EPSILON = 1e-12


@dataclass(frozen=True, slots=True)
class Line:
    """A straight segment from p0 to p1."""

    p0: Point
    p1: Point

    def eval(self, t: float) -> Point:
        return self.p0.lerp(self.p1, t)

    def nearest(self, point: Point) -> tuple[float, float]:
        """Closest parameter on the line and its squared distance.

        A degenerate line (coincident endpoints) yields t = 0.
        """
        d = self.p1 - self.p0
        length_sq = d.hypot2()
        if length_sq < DEGENERATE_LINE_EPSILON:
            return 0.0, self.p0.distance_squared(point)
        t = (point - self.p0).dot(d) / length_sq
        t = min(max(t, 0.0), 1.0)
        return t, self.eval(t).distance_squared(point)

    def control_points(self) -> tuple[Point, Point]:
        return (self.p0, self.p1)

    @property
    def start(self) -> Point:
        return self.p0

    @property
    def end(self) -> Point:
        return self.p1


@dataclass(frozen=True, slots=True)
class QuadBez:
    """A quadratic Bezier segment with one control point."""

    p0: Point
    p1: Point
    p2: Point

    def eval(self, t: float) -> Point:
        return _bezier.evaluate(self.control_points(), t)

    def nearest(self, point: Point) -> tuple[float, float]:
        """Closest parameter on the curve and its squared distance."""
        return _bezier.nearest(self.control_points(), point)

    def control_points(self) -> tuple[Point, Point, Point]:
        return (self.p0, self.p1, self.p2)

    @property
    def start(self) -> Point:
        return self.p0

    @property
    def end(self) -> Point:
        return self.p2


@dataclass(frozen=True, slots=True)
class CubicBez:
    """A cubic Bezier segment with two control points."""

    p0: Point
    p1: Point
    p2: Point
    p3: Point

    def eval(self, t: float) -> Point:
        return _bezier.evaluate(self.control_points(), t)

    def nearest(self, point: Point) -> tuple[float, float]:
        """Closest parameter on the curve and its squared distance."""
        return _bezier.nearest(self.control_points(), point)

    def control_points(self) -> tuple[Point, Point, Point, Point]:
        return (self.p0, self.p1, self.p2, self.p3)

    @property
    def start(self) -> Point:
        return self.p0

    @property
    def end(self) -> Point:
        return self.p3


Segment = Line | QuadBez | CubicBez


@dataclass(frozen=True, slots=True)
class SegmentInfo:
    """A segment together with the stored point indices it spans.

    For the closing segment of a closed path ``end_index`` is smaller than
    ``start_index``: the span wraps around the end of the point list.

    Attributes:
        segment: The geometric primitive
        start_index: Index of the on-curve point the segment starts at
        end_index: Index of the on-curve point the segment ends at
    """

    segment: Segment
    start_index: int
    end_index: int

    def nearest(self, point: Point) -> tuple[float, float]:
        return self.segment.nearest(point)

    def eval(self, t: float) -> Point:
        return self.segment.eval(t)

    def points_between(self, point_count: int) -> int:
        """Number of stored points strictly between start and end.

        Args:
            point_count: Length of the owning path's point list

        Returns:
            Count of points skipped by the span, wrapping when needed
        """
        if self.end_index > self.start_index:
            return self.end_index - self.start_index - 1
        return point_count - self.start_index - 1 + self.end_index


def subdivide_cubic(curve: CubicBez, t: float) -> tuple[CubicBez, CubicBez]:
    """Split a cubic Bezier at t without changing its shape.

    Args:
        curve: The curve to split
        t: Split parameter in [0, 1]

    Returns:
        The halves covering [0, t] and [t, 1]
    """
    left, right = _bezier.split(curve.control_points(), t)
    return CubicBez(*left), CubicBez(*right)


def subdivide_quadratic(curve: QuadBez, t: float) -> tuple[QuadBez, QuadBez]:
    """Split a quadratic Bezier at t without changing its shape.

    Args:
        curve: The curve to split
        t: Split parameter in [0, 1]

    Returns:
        The halves covering [0, t] and [t, 1]
    """
    left, right = _bezier.split(curve.control_points(), t)
    return QuadBez(*left), QuadBez(*right)
