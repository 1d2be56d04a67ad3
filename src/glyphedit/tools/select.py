"""Selection tool: pick, marquee-select and drag points."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from fontTools.pens.basePen import AbstractPen

from glyphedit.core.edit_type import EditType
from glyphedit.core.mouse import Drag, MouseEvent
from glyphedit.domain.entity import EntityId
from glyphedit.domain.geometry import Point, Rect
from glyphedit.domain.selection import Selection
from glyphedit.tools.base import Tool, ToolId

if TYPE_CHECKING:
    from glyphedit.core.session import EditSession


@dataclass
class _DraggingPoints:
    last_pos: Point


@dataclass
class _Marquee:
    previous_selection: Selection
    rect: Rect
    toggle: bool


class SelectTool(Tool):
    """Select and move points.

    The selection is resolved when the button goes down, so a drag that
    starts on an unselected point selects and moves it in one gesture.
    Dragging from empty space draws a marquee; holding shift toggles the
    points inside it against the previous selection.
    """

    tool_id = ToolId.SELECT

    def __init__(self) -> None:
        self._state: _DraggingPoints | _Marquee | None = None
        self._hit: EntityId | None = None

    def left_down(self, event: MouseEvent, session: "EditSession") -> None:
        hit = session.hit_test_point(event.pos)
        self._hit = hit.entity if hit else None
        if hit is not None:
            if event.mods.shift:
                selection = session.selection.clone()
                selection.toggle(hit.entity)
                session.set_selection(selection)
            elif hit.entity not in session.selection:
                session.set_selection(Selection([hit.entity]))
        elif not event.mods.shift:
            session.set_selection(Selection())

    def left_click(self, event: MouseEvent, session: "EditSession") -> None:
        # A plain click narrows a multi-selection to the clicked point
        if self._hit is not None and not event.mods.shift:
            session.set_selection(Selection([self._hit]))

    def left_drag_began(self, drag: Drag, session: "EditSession") -> None:
        if self._hit is not None and self._hit in session.selection:
            start = session.viewport.screen_to_design(drag.start.pos)
            self._state = _DraggingPoints(last_pos=start)
            self._move_to(self._state, drag.current.pos, session)
        else:
            self._state = _Marquee(
                previous_selection=session.selection.clone(),
                rect=Rect.from_points(drag.start.pos, drag.current.pos),
                toggle=drag.start.mods.shift,
            )
            self._update_marquee(self._state, session)

    def left_drag_changed(self, drag: Drag, session: "EditSession") -> None:
        if isinstance(self._state, _DraggingPoints):
            self._move_to(self._state, drag.current.pos, session)
        elif isinstance(self._state, _Marquee):
            self._state.rect = Rect.from_points(drag.start.pos, drag.current.pos)
            self._update_marquee(self._state, session)

    def left_drag_ended(self, drag: Drag, session: "EditSession") -> None:
        self.left_drag_changed(drag, session)
        self._state = None

    def cancel(self, session: "EditSession") -> None:
        if isinstance(self._state, _Marquee):
            session.set_selection(self._state.previous_selection)
        self._state = None
        self._hit = None

    def edit_type(self) -> EditType | None:
        if isinstance(self._state, _DraggingPoints):
            return EditType.DRAG
        return None

    def paint(self, pen: AbstractPen, session: "EditSession") -> None:
        if not isinstance(self._state, _Marquee):
            return
        rect = self._state.rect
        pen.moveTo((rect.x0, rect.y0))
        pen.lineTo((rect.x1, rect.y0))
        pen.lineTo((rect.x1, rect.y1))
        pen.lineTo((rect.x0, rect.y1))
        pen.closePath()

    @property
    def is_dragging_points(self) -> bool:
        return isinstance(self._state, _DraggingPoints)

    @property
    def marquee(self) -> Rect | None:
        """Current marquee rectangle in screen space, if one is drawn."""
        return self._state.rect if isinstance(self._state, _Marquee) else None

    def _move_to(self, state: _DraggingPoints, screen_pos: Point, session: "EditSession") -> None:
        pos = session.viewport.screen_to_design(screen_pos)
        session.move_selection(pos - state.last_pos)
        state.last_pos = pos

    def _update_marquee(self, state: _Marquee, session: "EditSession") -> None:
        inside = session.points_in_screen_rect(state.rect)
        if state.toggle:
            session.set_selection(state.previous_selection.symmetric_difference(inside))
        else:
            session.set_selection(inside)
