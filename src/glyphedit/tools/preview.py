"""Preview tool: pan the canvas without editing."""

from typing import TYPE_CHECKING

from glyphedit.core.mouse import Drag, MouseEvent
from glyphedit.domain.geometry import Vec2
from glyphedit.tools.base import Tool, ToolId

if TYPE_CHECKING:
    from glyphedit.core.session import EditSession


class PreviewTool(Tool):
    """Drag to pan; cancelling puts the view back where the drag began."""

    tool_id = ToolId.PREVIEW

    def __init__(self) -> None:
        self._start_offset: Vec2 | None = None

    def left_down(self, event: MouseEvent, session: "EditSession") -> None:
        self._start_offset = session.viewport.offset

    def left_drag_began(self, drag: Drag, session: "EditSession") -> None:
        self.left_drag_changed(drag, session)

    def left_drag_changed(self, drag: Drag, session: "EditSession") -> None:
        if self._start_offset is not None:
            session.viewport.offset = self._start_offset + drag.delta_from_start()

    def left_drag_ended(self, drag: Drag, session: "EditSession") -> None:
        self.left_drag_changed(drag, session)

    def left_up(self, event: MouseEvent, session: "EditSession") -> None:
        self._start_offset = None

    def cancel(self, session: "EditSession") -> None:
        if self._start_offset is not None:
            session.viewport.offset = self._start_offset
        self._start_offset = None
