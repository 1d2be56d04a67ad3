"""Editing session for a single glyph.

EditSession is the aggregate root of the editing engine. It owns the paths
of the glyph being edited, the selection, the viewport and the active tool,
and exposes the small vocabulary of edits tools are built from. Every edit
builds the new path tuple first and assigns it in one step, so an edit
either fully applies or leaves the session untouched.
"""

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any

from fontTools.pens.basePen import AbstractPen
from fontTools.pens.recordingPen import RecordingPen

from glyphedit.config.settings import GlyphEditSettings, get_default_settings
from glyphedit.core.edit_type import EditType
from glyphedit.core.hit_test import (
    HitCandidate,
    HitTestResult,
    SegmentHit,
    find_closest,
    find_closest_segment,
)
from glyphedit.core.path import Path, path_from_interchange
from glyphedit.core.segment import CubicBez, QuadBez, SegmentInfo, subdivide_cubic, subdivide_quadratic
from glyphedit.core.viewport import ViewPort
from glyphedit.domain.entity import EntityId
from glyphedit.domain.geometry import Point, Rect, Vec2
from glyphedit.domain.glyph import FontMetrics, Glyph, GlyphMetadata
from glyphedit.domain.point import PathPoint
from glyphedit.domain.quadrant import CoordinateSelection, Quadrant
from glyphedit.domain.selection import Selection
from glyphedit.tools.base import Tool, ToolId
from glyphedit.tools.toolbox import tool_for_id

logger = logging.getLogger(__name__)


class NudgeDirection(Enum):
    """Arrow-key nudge direction in design space (up is +y)."""

    UP = (0.0, 1.0)
    DOWN = (0.0, -1.0)
    LEFT = (-1.0, 0.0)
    RIGHT = (1.0, 0.0)

    @property
    def unit(self) -> Vec2:
        return Vec2(*self.value)

    @property
    def edit_type(self) -> EditType:
        return _NUDGE_EDIT_TYPES[self]


_NUDGE_EDIT_TYPES = {
    NudgeDirection.UP: EditType.NUDGE_UP,
    NudgeDirection.DOWN: EditType.NUDGE_DOWN,
    NudgeDirection.LEFT: EditType.NUDGE_LEFT,
    NudgeDirection.RIGHT: EditType.NUDGE_RIGHT,
}


@dataclass(frozen=True)
class SessionSnapshot:
    """Undoable state of a session.

    Attributes:
        paths: The paths at the time of the snapshot
        selection: The selection at the time of the snapshot
    """

    paths: tuple[Path, ...]
    selection: Selection


class EditSession:
    """All state needed to edit one glyph.

    Attributes:
        metadata: Glyph name, codepoints and advance width
        metrics: Vertical metrics of the font
        settings: Editor settings
        selection: Selected point ids
        viewport: Design/screen mapping
        coord_selection: Bounding box summary of the selection
        tool: The active tool
        revision: Incremented by every successful edit
    """

    def __init__(
        self,
        metadata: GlyphMetadata,
        metrics: FontMetrics | None = None,
        paths: Iterable[Path] = (),
        settings: GlyphEditSettings | None = None,
    ) -> None:
        self.metadata = metadata
        self.metrics = metrics or FontMetrics()
        self.settings = settings or get_default_settings()
        self._paths: tuple[Path, ...] = tuple(paths)
        self.selection = Selection()
        self.viewport = ViewPort()
        self.coord_selection = CoordinateSelection()
        self.tool: Tool = tool_for_id(ToolId.SELECT)
        self.revision = 0

    @classmethod
    def from_glyph(
        cls,
        glyph: Glyph,
        metrics: FontMetrics | None = None,
        settings: GlyphEditSettings | None = None,
    ) -> "EditSession":
        """Open a glyph for editing.

        Args:
            glyph: Interchange glyph
            metrics: Font vertical metrics (defaults if None)
            settings: Editor settings (defaults if None)

        Returns:
            A new session holding one path per contour

        Raises:
            ContourFormatError: If any contour is invalid
        """
        glyph.validate()
        paths = [path_from_interchange(contour) for contour in glyph.contours]
        logger.debug("Opened glyph %s with %d paths", glyph.name, len(paths))
        return cls(glyph.metadata, metrics, paths, settings)

    def to_glyph(self) -> Glyph:
        """Export the current outline as an interchange glyph."""
        return Glyph(
            metadata=self.metadata,
            contours=[path.to_interchange() for path in self._paths],
        )

    # -- read accessors --------------------------------------------------

    @property
    def glyph_name(self) -> str:
        return self.metadata.name

    @property
    def paths(self) -> tuple[Path, ...]:
        return self._paths

    @property
    def tool_id(self) -> ToolId:
        return self.tool.id()

    @property
    def selection_len(self) -> int:
        return len(self.selection)

    def iter_points(self) -> Iterator[tuple[Path, int, PathPoint]]:
        """Iterate over (path, index, point) for every point."""
        for path in self._paths:
            for idx, point in enumerate(path.points):
                yield path, idx, point

    def point_ids(self) -> set[EntityId]:
        return {point.id for _, _, point in self.iter_points()}

    def find_point(self, entity_id: EntityId) -> PathPoint | None:
        for path in self._paths:
            point = path.points.find_by_id(entity_id)
            if point is not None:
                return point
        return None

    def find_path(self, path_id: EntityId) -> Path | None:
        for path in self._paths:
            if path.id == path_id:
                return path
        return None

    def draw(self, pen: AbstractPen) -> None:
        """Draw all paths into a fontTools segment pen."""
        for path in self._paths:
            path.draw(pen)

    def geometry(self) -> list[tuple[str, tuple[Any, ...]]]:
        """Reconstructed outline of all paths as pen instructions."""
        pen = RecordingPen()
        self.draw(pen)
        return pen.value

    # -- hit testing -----------------------------------------------------

    def hit_test_point(
        self, screen_pos: Point, max_dist: float | None = None
    ) -> HitTestResult | None:
        """Find the point closest to a screen position.

        Args:
            screen_pos: Query position in screen pixels
            max_dist: Pick radius in pixels (configured click distance if None)

        Returns:
            The closest point within range, or None
        """
        if max_dist is None:
            max_dist = self.settings.hit_test.click_distance
        candidates = (
            HitCandidate(point.id, self.viewport.to_screen(point.position), point.is_on_curve)
            for _, _, point in self.iter_points()
        )
        return find_closest(
            screen_pos,
            candidates,
            max_dist,
            on_curve_penalty=self.settings.hit_test.on_curve_penalty,
        )

    def hit_test_segments(
        self, screen_pos: Point, max_dist: float | None = None
    ) -> SegmentHit | None:
        """Find the segment closest to a screen position.

        The search runs in design space with the pixel radius converted by
        the current zoom.

        Args:
            screen_pos: Query position in screen pixels
            max_dist: Pick radius in pixels (configured segment distance if None)

        Returns:
            The closest segment within range, or None
        """
        if max_dist is None:
            max_dist = self.settings.hit_test.segment_distance
        design_pos = self.viewport.screen_to_design(screen_pos)
        segments = (
            (path.id, info) for path in self._paths for info in path.iter_segments()
        )
        return find_closest_segment(design_pos, segments, max_dist / self.viewport.zoom)

    def points_in_screen_rect(self, rect: Rect) -> Selection:
        """Ids of points whose screen position lies inside ``rect``."""
        return Selection(
            point.id
            for _, _, point in self.iter_points()
            if rect.contains(self.viewport.to_screen(point.position))
        )

    # -- selection -------------------------------------------------------

    def set_selection(self, selection: Selection) -> None:
        """Replace the selection; not an undoable edit by itself."""
        self.selection = selection
        self.update_coord_selection()

    def update_coord_selection(self) -> None:
        """Recompute the coordinate panel summary from the selection."""
        quadrant = self.coord_selection.quadrant
        positions = [
            point.position
            for _, _, point in self.iter_points()
            if point.id in self.selection
        ]
        frame = Rect.bounding(positions)
        self.coord_selection = CoordinateSelection(len(positions), frame, quadrant)

    def set_quadrant(self, quadrant: Quadrant) -> None:
        self.coord_selection = CoordinateSelection(
            self.coord_selection.count, self.coord_selection.frame, quadrant
        )

    # -- edits -----------------------------------------------------------

    def _commit(self, paths: Iterable[Path], selection: Selection | None = None) -> None:
        self._paths = tuple(paths)
        if selection is not None:
            self.selection = selection
        self.revision += 1
        self.update_coord_selection()

    def add_path(self, path: Path) -> None:
        """Append a path, e.g. one finished by the pen tool."""
        self._commit(self._paths + (path,))
        logger.debug("Added path %s with %d points", path.id, len(path))

    def move_selection(self, delta: Vec2) -> bool:
        """Translate the selected points by a design-space delta.

        Off-curve neighbours of selected on-curve points move along, so
        handles keep their relation to the point they belong to.

        Args:
            delta: Displacement in design units

        Returns:
            True if any point moved
        """
        if not self.selection or (delta.x == 0 and delta.y == 0):
            return False
        changed = False
        new_paths = []
        for path in self._paths:
            indices = self._indices_to_move(path)
            if not indices:
                new_paths.append(path)
                continue
            new_path = path.clone()
            with new_path.points.edit() as pts:
                for idx in indices:
                    pts[idx] = pts[idx].moved(delta)
            new_paths.append(new_path)
            changed = True
        if changed:
            self._commit(new_paths)
        return changed

    def _indices_to_move(self, path: Path) -> set[int]:
        pts = path.points
        n = len(pts)
        indices: set[int] = set()
        for idx, point in enumerate(pts):
            if point.id not in self.selection:
                continue
            indices.add(idx)
            if not point.is_on_curve:
                continue
            for neighbour in (idx - 1, idx + 1):
                if not path.closed and not 0 <= neighbour < n:
                    continue
                neighbour %= n
                if pts[neighbour].is_off_curve:
                    indices.add(neighbour)
        return indices

    def nudge_selection(self, direction: NudgeDirection, shift: bool = False, ctrl: bool = False) -> bool:
        """Move the selection one step in a direction.

        Args:
            direction: Nudge direction
            shift: Use the shift step
            ctrl: Use the ctrl (or cmd) step, which wins over shift

        Returns:
            True if any point moved
        """
        step = self.settings.nudge.step_for(shift, ctrl)
        return self.move_selection(direction.unit * step)

    def delete_selection(self) -> bool:
        """Remove the selected points.

        Open paths drop off-curve points left dangling at either end, and
        paths left with fewer than two points are removed as well. The
        selection is cleared since every id in it is gone.

        Returns:
            True if anything was removed
        """
        if not self.selection:
            return False
        changed = False
        new_paths = []
        for path in self._paths:
            remaining = [p for p in path.points if p.id not in self.selection]
            if len(remaining) == len(path):
                new_paths.append(path)
                continue
            changed = True
            if not path.closed:
                remaining = _trim_dangling_controls(remaining)
            if len(remaining) >= 2:
                new_paths.append(path.with_points(remaining))
            else:
                logger.debug("Removing path %s left with %d points", path.id, len(remaining))
        if not changed:
            return False
        self._commit(new_paths, Selection())
        return True

    def toggle_point_type(self) -> bool:
        """Flip selected on-curve points between smooth and corner.

        Returns:
            True if any point changed
        """
        if not self.selection:
            return False
        changed = False
        new_paths = []
        for path in self._paths:
            if not any(p.is_on_curve and p.id in self.selection for p in path.points):
                new_paths.append(path)
                continue
            new_path = path.clone()
            with new_path.points.edit() as pts:
                for idx, point in enumerate(pts):
                    if point.is_on_curve and point.id in self.selection:
                        pts[idx] = point.toggled()
            new_paths.append(new_path)
            changed = True
        if changed:
            self._commit(new_paths)
        return changed

    def reverse_contours(self) -> bool:
        """Reverse the direction of paths.

        Paths containing a selected point are reversed; with an empty
        selection every path is.

        Returns:
            True if any path was reversed
        """
        if self.selection:
            targets = {
                path.id
                for path in self._paths
                if any(p.id in self.selection for p in path.points)
            }
        else:
            targets = {path.id for path in self._paths}
        if not targets:
            return False
        self._commit(path.reversed() if path.id in targets else path for path in self._paths)
        return True

    def insert_point_on_segment(
        self, path_id: EntityId, info: SegmentInfo, t: float
    ) -> EntityId | None:
        """Insert an on-curve point into a segment without changing its shape.

        Lines get a corner point; curves are split with De Casteljau's
        construction and their control points replaced by those of the two
        halves. The new point becomes the selection.

        Args:
            path_id: Id of the path owning the segment
            info: Segment to split, as produced by the path
            t: Split parameter, clamped to [0, 1]

        Returns:
            Id of the new on-curve point, or None if the path is gone
        """
        path = self.find_path(path_id)
        if path is None:
            return None
        t = min(max(t, 0.0), 1.0)
        segment = info.segment
        if isinstance(segment, CubicBez):
            left, right = subdivide_cubic(segment, t)
            on_curve = PathPoint.on_curve(left.p3)
            replacement = [
                PathPoint.off_curve(left.p1),
                PathPoint.off_curve(left.p2),
                on_curve,
                PathPoint.off_curve(right.p1),
                PathPoint.off_curve(right.p2),
            ]
        elif isinstance(segment, QuadBez):
            left, right = subdivide_quadratic(segment, t)
            on_curve = PathPoint.on_curve(left.p2)
            replacement = [
                PathPoint.off_curve(left.p1),
                on_curve,
                PathPoint.off_curve(right.p1),
            ]
        else:
            on_curve = PathPoint.on_curve(segment.eval(t))
            replacement = [on_curve]

        pts = path.points.to_list()
        n = len(pts)
        start = info.start_index
        count = info.points_between(n)
        if start + count < n:
            new_points = pts[: start + 1] + replacement + pts[start + 1 + count:]
        else:
            # The span wraps past the end of the list
            wrapped = start + count - n + 1
            new_points = pts[wrapped: start + 1] + replacement

        self._commit(
            (path.with_points(new_points) if p.id == path_id else p for p in self._paths),
            Selection([on_curve.id]),
        )
        return on_curve.id

    # -- snapshots -------------------------------------------------------

    def snapshot(self) -> SessionSnapshot:
        """Capture paths and selection for the undo history."""
        return SessionSnapshot(
            paths=tuple(path.clone() for path in self._paths),
            selection=self.selection.clone(),
        )

    def restore(self, snapshot: SessionSnapshot) -> None:
        """Restore a snapshot; selection ids missing from it are dropped."""
        paths = tuple(path.clone() for path in snapshot.paths)
        valid = {point.id for path in paths for point in path.points}
        self._commit(paths, snapshot.selection.retained(valid))


def _trim_dangling_controls(points: list[PathPoint]) -> list[PathPoint]:
    """Strip off-curve points before the first and after the last on-curve.

    An open path must start on an on-curve point to be exported with a
    leading MOVE record.
    """
    on_curve = [i for i, p in enumerate(points) if p.is_on_curve]
    if not on_curve:
        return []
    return points[on_curve[0]: on_curve[-1] + 1]
