"""Unit tests for Editor keyboard handling, undo grouping and view control."""

from unittest.mock import Mock

import pytest
from fontTools.pens.recordingPen import RecordingPen

from glyphedit.core.editor import Editor
from glyphedit.core.mouse import Modifiers, MouseButton, MouseEvent
from glyphedit.domain import Point
from glyphedit.tools import ToolId

CMD = Modifiers(ctrl=True)
CMD_SHIFT = Modifiers(ctrl=True, shift=True)


def select_point(editor, x, y):
    """Click the point at design (x, y) with the default viewport."""
    event = MouseEvent(Point(x, -y), MouseButton.LEFT)
    editor.mouse_down(event)
    editor.mouse_up(event)
    (selected,) = editor.session.selection
    return selected


@pytest.fixture
def editor(square_glyph):
    return Editor.from_glyph(square_glyph)


class TestKeyboardEdits:
    """Tests for edit keys."""

    def test_arrow_nudges_coalesce(self, editor):
        """Test that repeated nudges in one direction are one undo step."""
        target = select_point(editor, 0, 0)
        for _ in range(3):
            assert editor.key_down("ArrowUp")
        assert editor.session.find_point(target).position == Point(0, 3)
        assert editor.history.checkpoint_count == 1
        editor.key_down("ArrowLeft")
        assert editor.history.checkpoint_count == 2
        editor.undo()
        assert editor.session.find_point(target).position == Point(0, 3)
        editor.undo()
        assert editor.session.find_point(target).position == Point(0, 0)

    def test_shift_and_command_nudges(self, editor):
        """Test the larger nudge steps."""
        target = select_point(editor, 100, 100)
        editor.key_down("ArrowRight", Modifiers(shift=True))
        assert editor.session.find_point(target).position == Point(110, 100)
        editor.key_down("ArrowDown", Modifiers(meta=True))
        assert editor.session.find_point(target).position == Point(110, 0)

    def test_nudge_without_selection_records_nothing(self, editor):
        """Test that a no-op edit adds no undo step."""
        editor.key_down("ArrowUp")
        assert editor.history.checkpoint_count == 0

    def test_delete_key(self, editor):
        """Test deleting the selection with backspace."""
        select_point(editor, 100, 100)
        assert editor.key_down("Backspace")
        assert len(editor.session.paths[0]) == 3
        assert editor.history.checkpoint_count == 1

    def test_toggle_and_reverse_keys(self, editor):
        """Test the t and r edit keys."""
        target = select_point(editor, 0, 0)
        editor.key_down("t")
        assert editor.session.find_point(target).is_smooth
        before = [p.id for p in editor.session.paths[0].points]
        editor.key_down("r")
        assert [p.id for p in editor.session.paths[0].points] == before[::-1]
        assert editor.history.checkpoint_count == 2

    def test_unknown_key(self, editor):
        """Test that unbound keys are not handled."""
        assert not editor.key_down("q")
        assert not editor.key_up("q")

    def test_tool_shortcuts(self, editor):
        """Test switching tools from the keyboard."""
        editor.key_down("p")
        assert editor.session.tool_id is ToolId.PEN
        editor.key_down("h")
        assert editor.session.tool_id is ToolId.PREVIEW
        editor.key_down("v")
        assert editor.session.tool_id is ToolId.SELECT


class TestUndo:
    """Tests for undo and redo through the editor."""

    def test_drag_is_one_step(self, editor):
        """Test that a whole drag undoes at once."""
        target = select_point(editor, 100, 100)
        editor.mouse_down(MouseEvent(Point(100, -100), MouseButton.LEFT))
        for x in (104, 108, 112, 116):
            editor.mouse_moved(MouseEvent(Point(x, -100), MouseButton.LEFT))
        editor.mouse_up(MouseEvent(Point(116, -100), MouseButton.LEFT))
        assert editor.session.find_point(target).position == Point(116, 100)
        assert editor.history.checkpoint_count == 1
        stats = editor.edit_logger.stats
        assert stats.undo_groups == 1
        assert stats.edit_types["drag_end"] == 1
        editor.undo()
        assert editor.session.find_point(target).position == Point(100, 100)

    def test_normal_edit_between_drags(self, editor):
        """Test that a discrete edit separates two drags."""
        select_point(editor, 100, 100)
        editor.mouse_down(MouseEvent(Point(100, -100), MouseButton.LEFT))
        editor.mouse_moved(MouseEvent(Point(110, -100), MouseButton.LEFT))
        editor.mouse_up(MouseEvent(Point(110, -100), MouseButton.LEFT))
        editor.key_down("t")
        editor.mouse_down(MouseEvent(Point(110, -100), MouseButton.LEFT))
        editor.mouse_moved(MouseEvent(Point(120, -100), MouseButton.LEFT))
        editor.mouse_up(MouseEvent(Point(120, -100), MouseButton.LEFT))
        assert editor.history.checkpoint_count == 3

    def test_command_z(self, editor):
        """Test undo and redo shortcuts."""
        target = select_point(editor, 0, 0)
        editor.key_down("ArrowUp")
        assert editor.key_down("z", CMD)
        assert editor.session.find_point(target).position == Point(0, 0)
        assert editor.key_down("Z", CMD_SHIFT)
        assert editor.session.find_point(target).position == Point(0, 1)

    def test_nothing_to_undo(self, editor):
        """Test undo and redo on an empty history."""
        assert not editor.undo()
        assert not editor.redo()

    def test_undo_resets_coalescing(self, editor):
        """Test that an edit after undo never merges into an older step."""
        target = select_point(editor, 0, 0)
        editor.key_down("t")
        editor.key_down("ArrowUp")
        editor.undo()
        editor.key_down("ArrowUp")
        assert editor.history.checkpoint_count == 2
        editor.undo()
        point = editor.session.find_point(target)
        assert point.position == Point(0, 0)
        assert point.is_smooth

    def test_new_edit_clears_redo(self, editor):
        """Test that editing after undo drops the redo stack."""
        select_point(editor, 0, 0)
        editor.key_down("ArrowUp")
        editor.undo()
        editor.key_down("ArrowDown")
        assert not editor.redo()

    def test_undo_keeps_selection_made_before_edit(self, editor):
        """Test that undo returns to the selection the edit started from."""
        target = select_point(editor, 0, 0)
        editor.key_down("ArrowUp")
        editor.undo()
        assert list(editor.session.selection) == [target]
        editor.key_down("ArrowUp")
        assert editor.session.find_point(target).position == Point(0, 1)

    def test_undo_restores_selection_between_edits(self, editor):
        """Test that each undo step restores its own starting selection."""
        first = select_point(editor, 0, 0)
        editor.key_down("t")
        second = select_point(editor, 100, 100)
        editor.key_down("t")
        editor.undo()
        assert list(editor.session.selection) == [second]
        editor.undo()
        assert list(editor.session.selection) == [first]

    def test_undo_of_drag_keeps_dragged_selection(self, editor):
        """Test that the points selected by a drag stay selected after undo."""
        target = select_point(editor, 100, 100)
        editor.mouse_down(MouseEvent(Point(100, -100), MouseButton.LEFT))
        editor.mouse_moved(MouseEvent(Point(120, -100), MouseButton.LEFT))
        editor.mouse_up(MouseEvent(Point(120, -100), MouseButton.LEFT))
        editor.undo()
        assert list(editor.session.selection) == [target]
        editor.redo()
        assert editor.session.find_point(target).position == Point(120, 100)
        assert list(editor.session.selection) == [target]

    def test_undo_restores_deleted_point(self, editor):
        """Test that undoing a delete brings the point back."""
        target = select_point(editor, 100, 100)
        editor.key_down("Delete")
        assert editor.session.find_point(target) is None
        editor.undo()
        assert editor.session.find_point(target) is not None


class TestView:
    """Tests for zoom, fit and painting."""

    def test_first_resize_fits(self, editor):
        """Test that the glyph is fitted on the first resize only."""
        editor.resize(1000, 500)
        assert editor.session.viewport.zoom == pytest.approx(0.4)
        editor.key_down("=", CMD)
        editor.resize(800, 800)
        assert editor.session.viewport.zoom == pytest.approx(0.44)
        editor.key_down("0", CMD)
        assert editor.session.viewport.zoom == pytest.approx(0.8 * 800 / 1000)

    def test_zoom_shortcuts_keep_center(self, editor):
        """Test that keyboard zoom is anchored on the view center."""
        editor.resize(1000, 500)
        center = Point(500, 250)
        before = editor.session.viewport.screen_to_design(center)
        editor.key_down("=", CMD)
        editor.key_down("-", CMD)
        editor.key_down("+", CMD)
        after = editor.session.viewport.screen_to_design(center)
        assert after.to_tuple() == pytest.approx(before.to_tuple())

    def test_unbound_command_key(self, editor):
        """Test that unknown command shortcuts are not handled."""
        assert not editor.key_down("k", CMD)

    def test_scroll_zoom(self, editor):
        """Test wheel zoom direction."""
        editor.scroll_zoom(1.0, Point(0, 0))
        assert editor.session.viewport.zoom == pytest.approx(1.1)
        editor.scroll_zoom(-1.0, Point(0, 0))
        editor.scroll_zoom(0.0, Point(0, 0))
        assert editor.session.viewport.zoom == pytest.approx(1.0)

    def test_paint_transforms_outline(self, editor):
        """Test that the outline is painted in screen coordinates."""
        pen = RecordingPen()
        editor.paint(pen)
        assert pen.value[0] == ("moveTo", ((100, 0),))
        assert pen.value[1] == ("lineTo", ((100, -100),))
        assert pen.value[-1] == ("closePath", ())

    def test_tool_change_is_logged(self, square_glyph):
        """Test that tool switches reach the structured logger."""
        logger = Mock()
        editor = Editor.from_glyph(square_glyph, logger=logger)
        editor.key_down("p")
        logger.bind.assert_called_once_with(glyph="square")
        logger.bind.return_value.info.assert_called_once_with(
            "Tool changed", old_tool="select", new_tool="pen"
        )
