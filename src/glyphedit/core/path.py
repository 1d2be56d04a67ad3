"""Editable paths and their bezier reconstruction.

A path is an ordered list of on-curve and off-curve points. Cubic paths
treat up to two off-curve points between on-curve points as cubic control
points, quadratic paths use one. Closed paths store their points rotated
one step left relative to the interchange order: the first interchange
record is stored last. ``from_interchange`` applies the rotation and
``to_interchange`` undoes it, so records survive a round trip unchanged.

Reconstructed geometry is expressed in fontTools pen calls, so any
segment pen (recording, bounds, transform, drawing backends) can consume
it directly.
"""

import logging
from collections.abc import Iterable, Iterator
from typing import Any, ClassVar

from fontTools.pens.basePen import AbstractPen
from fontTools.pens.boundsPen import BoundsPen
from fontTools.pens.recordingPen import RecordingPen

from glyphedit.core.segment import CubicBez, Line, QuadBez, SegmentInfo
from glyphedit.domain.contour import Contour, ContourPoint, ContourTag
from glyphedit.domain.entity import EntityId
from glyphedit.domain.geometry import Point, Rect
from glyphedit.domain.point import OffCurve, OnCurve, PathPoint
from glyphedit.domain.point_list import PathPoints

logger = logging.getLogger(__name__)


class _Span:
    """Stored indices making up one reconstructed segment."""

    __slots__ = ("start", "controls", "end")

    def __init__(self, start: int, controls: list[int], end: int) -> None:
        self.start = start
        self.controls = controls
        self.end = end


class BasePath:
    """Shared behavior of cubic and quadratic paths.

    Attributes:
        points: Copy-on-write point storage
        closed: Whether the contour is closed
        id: Stable identity of the path
    """

    max_controls: ClassVar[int] = 2
    smooth_tag: ClassVar[ContourTag] = ContourTag.CURVE

    __slots__ = ("points", "closed", "id")

    def __init__(
        self,
        points: PathPoints | Iterable[PathPoint] = (),
        closed: bool = False,
        id: EntityId | None = None,
    ) -> None:
        self.points = points if isinstance(points, PathPoints) else PathPoints(points)
        self.closed = closed
        self.id = id if id is not None else EntityId.next()

    # -- interchange -----------------------------------------------------

    @classmethod
    def from_interchange(cls, contour: Contour) -> "BasePath":
        """Build a path from interchange records.

        The contour is closed unless its first record is tagged MOVE. For
        closed contours the mapped points are rotated left by one.

        Args:
            contour: Interchange contour

        Returns:
            A new path with fresh ids
        """
        closed = contour.is_closed
        points = [_point_from_record(record) for record in contour.points]
        if closed and points:
            points = points[1:] + points[:1]
        return cls(PathPoints(points), closed=closed)

    def to_interchange(self) -> Contour:
        """Convert back to interchange records.

        Undoes the closed-path rotation. The first point of an open path is
        tagged MOVE when it is on-curve.

        Returns:
            Interchange contour
        """
        pts = self.points.to_list()
        if self.closed and pts:
            pts = pts[-1:] + pts[:-1]
        records = [self._record_for(p) for p in pts]
        if not self.closed and records and records[0].tag.is_on_curve:
            first = records[0]
            records[0] = ContourPoint(first.x, first.y, ContourTag.MOVE)
        return Contour(points=records)

    def _record_for(self, point: PathPoint) -> ContourPoint:
        if isinstance(point.type, OffCurve):
            tag = ContourTag.OFF_CURVE
        elif point.type.smooth:
            tag = self.smooth_tag
        else:
            tag = ContourTag.LINE
        return ContourPoint(point.x, point.y, tag)

    # -- reconstruction --------------------------------------------------

    def _spans(self) -> Iterator[_Span]:
        # Traversal starts at the first on-curve point and wraps around
        pts = self.points
        n = len(pts)
        start = pts.first_on_curve_index()
        if start is None:
            return
        prev = start
        controls: list[int] = []
        for k in range(1, n):
            idx = (start + k) % n
            if pts[idx].is_on_curve:
                yield _Span(prev, self._trailing(controls), idx)
                prev = idx
                controls = []
            else:
                controls.append(idx)
        if self.closed and (controls or prev != start):
            yield _Span(prev, self._trailing(controls), start)

    def _trailing(self, controls: list[int]) -> list[int]:
        if len(controls) > self.max_controls:
            logger.debug(
                "Off-curve run of %d exceeds degree %d, using trailing controls",
                len(controls),
                self.max_controls,
            )
            return controls[-self.max_controls:]
        return controls

    def draw(self, pen: AbstractPen) -> None:
        """Draw the reconstructed outline into a fontTools segment pen.

        Closed paths end with closePath, open paths with endPath. Paths
        without on-curve points draw nothing.

        Args:
            pen: Any fontTools segment pen
        """
        if self._draw_segments(pen):
            if not self.closed:
                pen.endPath()

    def _draw_segments(self, pen: AbstractPen) -> bool:
        pts = self.points
        start = pts.first_on_curve_index()
        if start is None:
            return False
        pen.moveTo(pts[start].position.to_tuple())
        for span in self._spans():
            ctrl = [pts[i].position.to_tuple() for i in span.controls]
            end = pts[span.end].position.to_tuple()
            if not ctrl:
                # A straight closing edge is implied by closePath
                if not (self.closed and span.end == start):
                    pen.lineTo(end)
            elif len(ctrl) == 1:
                pen.qCurveTo(ctrl[0], end)
            else:
                pen.curveTo(ctrl[0], ctrl[1], end)
        if self.closed:
            pen.closePath()
        return True

    def to_geometry(self) -> list[tuple[str, tuple[Any, ...]]]:
        """Reconstruct the outline as a list of pen instructions.

        Returns:
            RecordingPen value: (operator, points) pairs using moveTo,
            lineTo, qCurveTo, curveTo and closePath
        """
        pen = RecordingPen()
        self._draw_segments(pen)
        return pen.value

    def iter_segments(self) -> Iterator[SegmentInfo]:
        """Iterate over the segments of the path.

        Follows the same control-point mapping as ``to_geometry``; the
        closing edge of a closed path is included even when it is a line.

        Yields:
            SegmentInfo for each segment in traversal order
        """
        pts = self.points
        for span in self._spans():
            p0 = pts[span.start].position
            p3 = pts[span.end].position
            ctrl = [pts[i].position for i in span.controls]
            if not ctrl:
                segment: Line | QuadBez | CubicBez = Line(p0, p3)
            elif len(ctrl) == 1:
                segment = QuadBez(p0, ctrl[0], p3)
            else:
                segment = CubicBez(p0, ctrl[0], ctrl[1], p3)
            yield SegmentInfo(segment, span.start, span.end)

    def bounding_box(self) -> Rect | None:
        """Bounding box of the reconstructed outline, or None if empty."""
        pen = BoundsPen(None)
        self.draw(pen)
        if pen.bounds is None:
            return None
        return Rect(*pen.bounds)

    # -- helpers ---------------------------------------------------------

    def clone(self) -> "BasePath":
        """Copy sharing point storage; the copy keeps the path id."""
        return type(self)(self.points.clone(), closed=self.closed, id=self.id)

    def with_points(self, points: Iterable[PathPoint]) -> "BasePath":
        """Same path (id, variant, closedness) with different points."""
        return type(self)(PathPoints(points), closed=self.closed, id=self.id)

    def reversed(self) -> "BasePath":
        """The same path with its direction reversed."""
        return self.with_points(reversed(self.points.to_list()))

    def contains_point(self, entity_id: EntityId) -> bool:
        return self.points.find_by_id(entity_id) is not None

    @property
    def is_quadratic(self) -> bool:
        return False

    def __len__(self) -> int:
        return len(self.points)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BasePath):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.id == other.id
            and self.closed == other.closed
            and self.points == other.points
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(id={self.id.value}, closed={self.closed}, "
            f"points={len(self.points)})"
        )


class CubicPath(BasePath):
    """A path whose curves are cubic (two control points per segment)."""

    __slots__ = ()

    max_controls = 2
    smooth_tag = ContourTag.CURVE


class QuadraticPath(BasePath):
    """A path whose curves are quadratic (one control point per segment)."""

    __slots__ = ()

    max_controls = 1
    smooth_tag = ContourTag.QCURVE

    @property
    def is_quadratic(self) -> bool:
        return True


Path = CubicPath | QuadraticPath


def path_from_interchange(contour: Contour) -> Path:
    """Build a path choosing the variant from the records.

    Contours with any QCURVE record become quadratic paths, all others
    cubic.

    Args:
        contour: Interchange contour

    Returns:
        CubicPath or QuadraticPath
    """
    if contour.is_quadratic:
        return QuadraticPath.from_interchange(contour)  # type: ignore[return-value]
    return CubicPath.from_interchange(contour)  # type: ignore[return-value]


def _point_from_record(record: ContourPoint) -> PathPoint:
    position = Point(record.x, record.y)
    if record.tag is ContourTag.OFF_CURVE:
        return PathPoint(EntityId.next(), position, OffCurve(auto=False))
    smooth = record.tag in (ContourTag.CURVE, ContourTag.QCURVE)
    return PathPoint(EntityId.next(), position, OnCurve(smooth=smooth))
