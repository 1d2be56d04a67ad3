"""Pen tool: draw new paths point by point."""

import logging
from typing import TYPE_CHECKING

from fontTools.pens.basePen import AbstractPen

from glyphedit.core.edit_type import EditType
from glyphedit.core.hit_test import SegmentHit
from glyphedit.core.mouse import MouseEvent
from glyphedit.core.path import CubicPath
from glyphedit.domain.geometry import Point
from glyphedit.domain.point import PathPoint
from glyphedit.tools.base import Tool, ToolId

if TYPE_CHECKING:
    from glyphedit.core.session import EditSession

logger = logging.getLogger(__name__)

# Half size, in pixels, of the marker drawn at the snapped segment point
SNAP_MARKER_SIZE = 4.0


class PenTool(Tool):
    """Place corner points to build a new cubic path.

    Points are kept by the tool until the path is finished: clicking near
    the first point (with enough points placed) closes it, and cancelling
    keeps it as an open path if it has at least two points. While not
    drawing, hovering near an existing segment snaps to it and a click
    inserts a point there instead.
    """

    tool_id = ToolId.PEN

    def __init__(self) -> None:
        self._points: list[PathPoint] = []
        self._drawing = False
        self._mouse_pos: Point | None = None
        self._snapped: SegmentHit | None = None

    @property
    def pending_points(self) -> list[PathPoint]:
        return list(self._points)

    @property
    def is_drawing(self) -> bool:
        return self._drawing

    @property
    def snapped_segment(self) -> SegmentHit | None:
        return self._snapped

    def left_click(self, event: MouseEvent, session: "EditSession") -> None:
        if self._snapped is not None:
            hit = self._snapped
            self._snapped = None
            session.insert_point_on_segment(hit.path_id, hit.info, hit.t)
            logger.debug("Inserted point on segment at t=%.4f", hit.t)
            return

        config = session.settings.pen
        design_pos = session.viewport.screen_to_design(event.pos)
        if len(self._points) >= config.min_close_points:
            if design_pos.distance(self._points[0].position) < config.close_path_distance:
                self._finish(session, closed=True)
                return

        self._points.append(PathPoint.on_curve(design_pos))
        self._drawing = True

    def mouse_moved(self, event: MouseEvent, session: "EditSession") -> None:
        self._mouse_pos = event.pos
        if self._drawing:
            self._snapped = None
        else:
            self._snapped = session.hit_test_segments(
                event.pos, session.settings.pen.curve_snap_distance
            )

    def cancel(self, session: "EditSession") -> None:
        if len(self._points) >= 2:
            self._finish(session, closed=False)
        else:
            self._reset()

    def edit_type(self) -> EditType | None:
        return EditType.NORMAL if self._drawing else None

    def paint(self, pen: AbstractPen, session: "EditSession") -> None:
        if self._drawing and self._points:
            screen = [session.viewport.to_screen(p.position) for p in self._points]
            pen.moveTo(screen[0].to_tuple())
            for pt in screen[1:]:
                pen.lineTo(pt.to_tuple())
            if self._mouse_pos is not None:
                if self._hovering_close(session):
                    pen.lineTo(screen[0].to_tuple())
                else:
                    pen.lineTo(self._mouse_pos.to_tuple())
            pen.endPath()

        if self._snapped is not None:
            center = session.viewport.to_screen(self._snapped.point())
            s = SNAP_MARKER_SIZE
            pen.moveTo((center.x - s, center.y - s))
            pen.lineTo((center.x + s, center.y - s))
            pen.lineTo((center.x + s, center.y + s))
            pen.lineTo((center.x - s, center.y + s))
            pen.closePath()

    def _hovering_close(self, session: "EditSession") -> bool:
        config = session.settings.pen
        if len(self._points) < config.min_close_points or self._mouse_pos is None:
            return False
        design_pos = session.viewport.screen_to_design(self._mouse_pos)
        return design_pos.distance(self._points[0].position) < config.close_path_distance

    def _finish(self, session: "EditSession", closed: bool) -> None:
        path = CubicPath(self._points, closed=closed)
        session.add_path(path)
        logger.debug("Committed %s path with %d points", "closed" if closed else "open", len(path))
        self._reset()

    def _reset(self) -> None:
        self._points = []
        self._drawing = False
