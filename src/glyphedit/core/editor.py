"""Editor orchestration.

The Editor sits between the host UI and an EditSession. It feeds pointer
events through the gesture recognizer to the active tool, interprets
keyboard shortcuts, and records the undo history: after every input that
changed the session, a snapshot is added as a new undo group or merged
into the current one according to the edit type.
"""

from collections.abc import Callable

import structlog
from fontTools.pens.basePen import AbstractPen
from fontTools.pens.transformPen import TransformPen

from glyphedit.config.settings import GlyphEditSettings
from glyphedit.core.edit_type import EditType
from glyphedit.core.mouse import Modifiers, Mouse, MouseEvent
from glyphedit.core.session import EditSession, NudgeDirection, SessionSnapshot
from glyphedit.core.undo import UndoState
from glyphedit.domain.geometry import Point
from glyphedit.domain.selection import Selection
from glyphedit.domain.glyph import FontMetrics, Glyph
from glyphedit.exceptions import UnknownToolError
from glyphedit.tools.base import ToolId
from glyphedit.tools.toolbox import tool_for_id
from glyphedit.utils.logging import EditLogger

DELETE_KEYS = frozenset({"Backspace", "Delete"})
SPACE_KEY = " "
ESCAPE_KEY = "Escape"
ARROW_KEYS = {
    "ArrowUp": NudgeDirection.UP,
    "ArrowDown": NudgeDirection.DOWN,
    "ArrowLeft": NudgeDirection.LEFT,
    "ArrowRight": NudgeDirection.RIGHT,
}


class Editor:
    """Input handling and undo for one editing session.

    Example:
        editor = Editor.from_glyph(glyph, metrics)
        editor.resize(800, 600)
        editor.mouse_down(MouseEvent(Point(400, 300), MouseButton.LEFT))
        editor.mouse_up(MouseEvent(Point(400, 300), MouseButton.LEFT))
        editor.key_down("ArrowUp")
    """

    def __init__(
        self,
        session: EditSession,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the editor.

        Args:
            session: Session to edit
            logger: Structured logger (module default if None)
        """
        self.session = session
        self.settings: GlyphEditSettings = session.settings
        self.mouse = Mouse(self.settings.gesture.drag_threshold)
        self.history: UndoState[SessionSnapshot] = UndoState(
            session.snapshot(), self.settings.undo.max_history
        )
        self.view_size: tuple[float, float] | None = None
        self._last_edit_type: EditType | None = None
        self._seen_revision = session.revision
        self._held_tool: ToolId | None = None
        self.edit_logger = EditLogger(logger)
        self.edit_logger.bind(glyph=session.glyph_name)

    @classmethod
    def from_glyph(
        cls,
        glyph: Glyph,
        metrics: FontMetrics | None = None,
        settings: GlyphEditSettings | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> "Editor":
        """Open a glyph in a new session and editor.

        Raises:
            ContourFormatError: If any contour is invalid
        """
        return cls(EditSession.from_glyph(glyph, metrics, settings), logger)

    # -- pointer input ---------------------------------------------------

    def mouse_down(self, event: MouseEvent) -> None:
        self._dispatch(lambda: self.mouse.mouse_down(event, self.session.tool, self.session))

    def mouse_moved(self, event: MouseEvent) -> None:
        self._dispatch(lambda: self.mouse.mouse_moved(event, self.session.tool, self.session))

    def mouse_up(self, event: MouseEvent) -> None:
        self._dispatch(lambda: self.mouse.mouse_up(event, self.session.tool, self.session))

    def cancel(self) -> None:
        """Abandon the gesture in progress (e.g. on escape or focus loss)."""
        self._dispatch(lambda: self.mouse.cancel(self.session.tool, self.session))

    def scroll_zoom(self, delta: float, anchor: Point) -> None:
        """Zoom from a scroll wheel delta, keeping ``anchor`` fixed.

        Args:
            delta: Scroll amount; positive zooms in
            anchor: Screen position under the pointer
        """
        if delta > 0:
            self.session.viewport.zoom_in(self.settings.viewport, anchor)
        elif delta < 0:
            self.session.viewport.zoom_out(self.settings.viewport, anchor)

    def _dispatch(self, action: Callable[[], None]) -> None:
        was_dragging = self.session.tool.edit_type() is EditType.DRAG
        before = self.session.selection.clone()
        action()
        changed = self.session.revision != self._seen_revision
        tool_edit = self.session.tool.edit_type()
        if was_dragging and tool_edit is not EditType.DRAG:
            if changed or self._last_edit_type is EditType.DRAG:
                self.record_edit(EditType.DRAG_END, before)
        elif changed:
            self.record_edit(tool_edit or EditType.NORMAL, before)

    # -- keyboard input --------------------------------------------------

    def key_down(self, key: str, mods: Modifiers | None = None) -> bool:
        """Handle a key press.

        Args:
            key: Key name ("a", "ArrowUp", "Backspace", " ", ...)
            mods: Modifier keys held

        Returns:
            True if the key was handled
        """
        mods = mods or Modifiers()

        if key == SPACE_KEY and not mods.command:
            if self._held_tool is None and self.session.tool_id is not ToolId.PREVIEW:
                self._held_tool = self.session.tool_id
                self.set_tool(ToolId.PREVIEW)
            return True

        if mods.command and key not in ARROW_KEYS:
            return self._command_key(key.lower(), mods)

        handled = False

        def tool_key() -> None:
            nonlocal handled
            handled = self.session.tool.key_down(key, mods, self.session)

        self._dispatch(tool_key)
        if handled:
            return True

        if key in DELETE_KEYS:
            self._apply(self.session.delete_selection, EditType.NORMAL)
        elif key == "t":
            self._apply(self.session.toggle_point_type, EditType.NORMAL)
        elif key == "r":
            self._apply(self.session.reverse_contours, EditType.NORMAL)
        elif key in ARROW_KEYS:
            direction = ARROW_KEYS[key]
            self._apply(
                lambda: self.session.nudge_selection(direction, mods.shift, mods.command),
                direction.edit_type,
            )
        elif key == ESCAPE_KEY:
            self.cancel()
        else:
            try:
                tool_id = ToolId.from_shortcut(key)
            except UnknownToolError:
                return False
            self.set_tool(tool_id)
        return True

    def key_up(self, key: str, mods: Modifiers | None = None) -> bool:
        """Handle a key release; releasing space restores the held tool."""
        mods = mods or Modifiers()
        if key == SPACE_KEY and self._held_tool is not None:
            held = self._held_tool
            self._held_tool = None
            self.set_tool(held)
            return True
        return self.session.tool.key_up(key, mods, self.session)

    def _command_key(self, key: str, mods: Modifiers) -> bool:
        if key == "z":
            if mods.shift:
                self.redo()
            else:
                self.undo()
        elif key in ("=", "+"):
            self.session.viewport.zoom_in(self.settings.viewport, self._view_center())
        elif key == "-":
            self.session.viewport.zoom_out(self.settings.viewport, self._view_center())
        elif key == "0":
            self.fit_view()
        else:
            return False
        return True

    def _apply(self, edit: Callable[[], bool], edit_type: EditType) -> bool:
        before = self.session.selection.clone()
        if edit():
            self.record_edit(edit_type, before)
            return True
        return False

    # -- tools and view --------------------------------------------------

    def set_tool(self, tool_id: ToolId) -> None:
        """Switch tools, cancelling the outgoing tool first."""
        old = self.session.tool_id
        if old is tool_id:
            return
        self.cancel()
        self.session.tool = tool_for_id(tool_id)
        self.edit_logger.log_tool_change(old.value, tool_id.value)

    def resize(self, width: float, height: float) -> None:
        """Set the view size; the first resize fits the glyph into view."""
        first = self.view_size is None
        self.view_size = (width, height)
        if first:
            self.fit_view()

    def fit_view(self) -> None:
        if self.view_size is None:
            return
        self.session.viewport.fit_glyph(
            self.session.metrics,
            self.session.metadata.advance_width,
            self.view_size,
            self.settings.viewport,
        )

    def _view_center(self) -> Point | None:
        if self.view_size is None:
            return None
        return Point(self.view_size[0] / 2.0, self.view_size[1] / 2.0)

    def paint(self, pen: AbstractPen) -> None:
        """Draw the outline and the tool overlay in screen coordinates."""
        self.session.draw(TransformPen(pen, self.session.viewport.affine()))
        self.session.tool.paint(pen, self.session)

    # -- undo ------------------------------------------------------------

    def record_edit(self, edit_type: EditType, selection_before: Selection | None = None) -> None:
        """Record the session state after an edit of the given type.

        Selection changes are not edits of their own, so the state below a
        new group is brought up to date with the selection the edit started
        from; undoing the group then returns to that selection.

        Args:
            edit_type: Kind of edit just made
            selection_before: Selection at the start of the edit, if known
        """
        new_group = edit_type.should_create_new_undo_group(self._last_edit_type)
        snapshot = self.session.snapshot()
        if new_group:
            if selection_before is not None:
                top = self.history.current
                self.history.replace_current(SessionSnapshot(top.paths, selection_before))
            self.history.add_undo_group(snapshot)
        else:
            self.history.update_current_undo(snapshot)
        self._last_edit_type = edit_type
        self._seen_revision = self.session.revision
        self.edit_logger.log_edit(edit_type.value, new_group, self.history.checkpoint_count)

    def undo(self) -> bool:
        """Restore the state before the newest undo group.

        Returns:
            True if there was something to undo
        """
        state = self.history.undo()
        if state is None:
            return False
        self._restore(state)
        self.edit_logger.log_undo(self.history.checkpoint_count)
        return True

    def redo(self) -> bool:
        """Reapply the most recently undone group.

        Returns:
            True if there was something to redo
        """
        state = self.history.redo()
        if state is None:
            return False
        self._restore(state)
        self.edit_logger.log_redo(self.history.checkpoint_count)
        return True

    def _restore(self, state: SessionSnapshot) -> None:
        self.session.restore(state)
        self._seen_revision = self.session.revision
        self._last_edit_type = None
