"""Unit tests for paths: interchange conversion and bezier reconstruction."""

import pytest
from fontTools.pens.recordingPen import RecordingPen

from glyphedit.core.path import CubicPath, QuadraticPath, path_from_interchange
from glyphedit.core.segment import CubicBez, Line, QuadBez
from glyphedit.domain import Contour, ContourPoint, ContourTag, PathPoint, Point, Rect

L = ContourTag.LINE
M = ContourTag.MOVE
C = ContourTag.CURVE
Q = ContourTag.QCURVE
O = ContourTag.OFF_CURVE


def contour(*records: tuple[float, float, ContourTag]) -> Contour:
    return Contour([ContourPoint(x, y, tag) for x, y, tag in records])


@pytest.fixture
def triangle() -> Contour:
    """Closed triangle made of corner points."""
    return contour((0, 0, L), (10, 0, L), (5, 10, L))


@pytest.fixture
def closed_with_trailing_curve() -> Contour:
    """Closed contour whose curve runs back into the first record."""
    return contour((0, 0, L), (0, 50, O), (50, 100, O), (100, 100, C), (100, 0, L))


@pytest.fixture
def open_cubic() -> Contour:
    """Open contour with one cubic and one line segment."""
    return contour((0, 0, M), (10, 20, O), (30, 20, O), (40, 0, C), (50, 0, L))


class TestInterchange:
    """Tests for from_interchange / to_interchange."""

    def test_closed_path_is_rotated_left(self, triangle: Contour) -> None:
        """Test that the first record is stored last for closed paths."""
        path = CubicPath.from_interchange(triangle)
        assert path.closed
        assert [p.position for p in path.points] == [Point(10, 0), Point(5, 10), Point(0, 0)]

    def test_open_path_is_not_rotated(self, open_cubic: Contour) -> None:
        """Test that open paths keep record order."""
        path = CubicPath.from_interchange(open_cubic)
        assert not path.closed
        assert path.points[0].position == Point(0, 0)

    def test_point_types_from_tags(self, open_cubic: Contour) -> None:
        """Test mapping of tags to point kinds."""
        path = CubicPath.from_interchange(open_cubic)
        kinds = [(p.is_on_curve, p.is_smooth) for p in path.points]
        assert kinds == [(True, False), (False, False), (False, False), (True, True), (True, False)]

    @pytest.mark.parametrize(
        "records",
        [
            [(0, 0, L), (10, 0, L), (5, 10, L)],
            [(0, 0, L), (0, 50, O), (50, 100, O), (100, 100, C), (100, 0, L)],
            [(0, 0, M), (10, 20, O), (30, 20, O), (40, 0, C), (50, 0, L)],
            [(0, 0, O), (10, 10, Q), (20, 0, O), (10, -10, Q)],
            [(5, 5, M), (6, 6, L)],
        ],
    )
    def test_round_trip(self, records: list[tuple[float, float, ContourTag]]) -> None:
        """Test that records survive import and export unchanged."""
        original = contour(*records)
        assert path_from_interchange(original).to_interchange() == original

    def test_variant_detection(self) -> None:
        """Test that QCURVE records select the quadratic variant."""
        quad = path_from_interchange(contour((0, 0, M), (5, 10, O), (10, 0, Q)))
        cubic = path_from_interchange(contour((0, 0, M), (5, 10, O), (10, 0, C)))
        assert isinstance(quad, QuadraticPath)
        assert quad.is_quadratic
        assert isinstance(cubic, CubicPath)

    def test_smooth_export_tag_depends_on_variant(self) -> None:
        """Test smooth points export as CURVE or QCURVE."""
        points = [PathPoint.on_curve(Point(0, 0)), PathPoint.on_curve(Point(1, 1), smooth=True)]
        cubic = CubicPath(points, closed=False).to_interchange()
        quad = QuadraticPath(points, closed=False).to_interchange()
        assert [r.tag for r in cubic.points] == [M, C]
        assert [r.tag for r in quad.points] == [M, Q]

    def test_import_assigns_fresh_ids(self, triangle: Contour) -> None:
        """Test that every import gets new point and path ids."""
        a = CubicPath.from_interchange(triangle)
        b = CubicPath.from_interchange(triangle)
        assert a.id != b.id
        assert {p.id for p in a.points}.isdisjoint({p.id for p in b.points})


class TestGeometry:
    """Tests for to_geometry reconstruction."""

    def test_triangle(self, triangle: Contour) -> None:
        """Test the rotated start point and implicit closing line."""
        path = CubicPath.from_interchange(triangle)
        assert path.to_geometry() == [
            ("moveTo", ((10, 0),)),
            ("lineTo", ((5, 10),)),
            ("lineTo", ((0, 0),)),
            ("closePath", ()),
        ]

    def test_trailing_off_curves_close_with_curve(self, closed_with_trailing_curve: Contour) -> None:
        """Test that trailing off-curve points form the closing segment."""
        path = CubicPath.from_interchange(closed_with_trailing_curve)
        assert path.to_geometry() == [
            ("moveTo", ((100, 100),)),
            ("lineTo", ((100, 0),)),
            ("lineTo", ((0, 0),)),
            ("curveTo", ((0, 50), (50, 100), (100, 100))),
            ("closePath", ()),
        ]

    def test_open_path_never_closes(self, open_cubic: Contour) -> None:
        """Test open path reconstruction."""
        path = CubicPath.from_interchange(open_cubic)
        assert path.to_geometry() == [
            ("moveTo", ((0, 0),)),
            ("curveTo", ((10, 20), (30, 20), (40, 0))),
            ("lineTo", ((50, 0),)),
        ]

    def test_draw_ends_open_path(self, open_cubic: Contour) -> None:
        """Test that draw() finishes open contours with endPath."""
        pen = RecordingPen()
        CubicPath.from_interchange(open_cubic).draw(pen)
        assert pen.value[-1] == ("endPath", ())

    def test_single_control_in_cubic_path_is_quadratic(self) -> None:
        """Test that one off-curve point gives a quadratic segment."""
        path = CubicPath.from_interchange(contour((0, 0, M), (5, 10, O), (10, 0, L)))
        assert path.to_geometry()[1] == ("qCurveTo", ((5, 10), (10, 0)))

    def test_long_run_uses_trailing_cubic_controls(self) -> None:
        """Test that only the last two controls of a long run are used."""
        path = CubicPath.from_interchange(
            contour((0, 0, M), (1, 1, O), (2, 2, O), (3, 3, O), (4, 0, L))
        )
        assert path.to_geometry()[1] == ("curveTo", ((2, 2), (3, 3), (4, 0)))

    def test_long_run_uses_trailing_quadratic_control(self) -> None:
        """Test that quadratic paths use only the last control."""
        path = QuadraticPath.from_interchange(
            contour((0, 0, M), (1, 1, O), (2, 2, O), (4, 0, Q))
        )
        assert path.to_geometry()[1] == ("qCurveTo", ((2, 2), (4, 0)))

    def test_all_off_curve_path_draws_nothing(self) -> None:
        """Test that a path without on-curve points reconstructs to nothing."""
        path = CubicPath([PathPoint.off_curve(Point(0, 0)), PathPoint.off_curve(Point(1, 1))], closed=True)
        assert path.to_geometry() == []
        assert list(path.iter_segments()) == []
        assert path.bounding_box() is None

    def test_bounding_box(self, triangle: Contour) -> None:
        """Test bounding box of the outline."""
        assert CubicPath.from_interchange(triangle).bounding_box() == Rect(0, 0, 10, 10)


class TestSegments:
    """Tests for iter_segments."""

    def test_closed_triangle_has_closing_line(self, triangle: Contour) -> None:
        """Test that the closing edge is reported as a segment."""
        segments = list(CubicPath.from_interchange(triangle).iter_segments())
        assert [(s.start_index, s.end_index) for s in segments] == [(0, 1), (1, 2), (2, 0)]
        assert all(isinstance(s.segment, Line) for s in segments)
        assert segments[2].segment == Line(Point(0, 0), Point(10, 0))

    def test_wrapping_curve_segment(self, closed_with_trailing_curve: Contour) -> None:
        """Test the indices of a closing curve that wraps the point list."""
        path = CubicPath.from_interchange(closed_with_trailing_curve)
        segments = list(path.iter_segments())
        closing = segments[-1]
        assert isinstance(closing.segment, CubicBez)
        assert (closing.start_index, closing.end_index) == (4, 2)
        assert closing.points_between(len(path)) == 2

    def test_open_path_segments(self, open_cubic: Contour) -> None:
        """Test segment kinds of an open path."""
        segments = list(CubicPath.from_interchange(open_cubic).iter_segments())
        assert [type(s.segment) for s in segments] == [CubicBez, Line]
        assert segments[0].points_between(5) == 2

    def test_quadratic_segments(self) -> None:
        """Test segments of a quadratic path."""
        path = QuadraticPath.from_interchange(contour((0, 0, M), (5, 10, O), (10, 0, Q)))
        (segment,) = path.iter_segments()
        assert segment.segment == QuadBez(Point(0, 0), Point(5, 10), Point(10, 0))


class TestPathHelpers:
    """Tests for clone, reverse and lookups."""

    def test_clone_keeps_id_and_shares_points(self, triangle: Contour) -> None:
        """Test cloning a path."""
        path = CubicPath.from_interchange(triangle)
        clone = path.clone()
        assert clone == path
        assert clone.points.shares_storage_with(path.points)

    def test_reversed(self, triangle: Contour) -> None:
        """Test reversing point order."""
        path = CubicPath.from_interchange(triangle)
        rev = path.reversed()
        assert rev.id == path.id
        assert [p.id for p in rev.points] == [p.id for p in reversed(path.points.to_list())]

    def test_contains_point(self, triangle: Contour) -> None:
        """Test point membership."""
        path = CubicPath.from_interchange(triangle)
        assert path.contains_point(path.points[0].id)
