"""End-to-end tests: read a real font, edit glyphs, write outlines back."""

import pytest
from fontTools.pens.ttGlyphPen import TTGlyphPointPen

from glyphedit import Editor
from glyphedit.core.mouse import MouseButton, MouseEvent
from glyphedit.core.path import QuadraticPath
from glyphedit.domain import ContourTag, Point, Vec2
from glyphedit.exceptions import FontLoadError
from glyphedit.io import FontReader, draw_glyph_points


def flat(coordinates):
    return [value for pt in coordinates for value in pt]


def to_truetype(glyph):
    pen = TTGlyphPointPen(None)
    draw_glyph_points(glyph, pen)
    return pen.glyph()


class TestReadFont:
    """Tests for reading the generated test font."""

    def test_font_properties(self, font_path):
        """Test basic font information."""
        with FontReader(font_path) as reader:
            assert reader.format == "TrueType"
            assert reader.units_per_em == 1000
            assert reader.glyph_count == 4
            metrics = reader.metrics
        assert (metrics.ascender, metrics.descender) == (800, -200)
        assert metrics.x_height == 500
        assert metrics.cap_height == 700

    def test_glyph_records(self, font_path):
        """Test the interchange records of TrueType glyphs."""
        with FontReader(font_path) as reader:
            square = reader.get_glyph("A")
            bowl = reader.get_glyph("O")
        assert square.metadata.codepoints == [0x41]
        assert square.metadata.advance_width == 600
        (contour,) = square.contours
        assert [(p.x, p.y) for p in contour.points] == [(100, 0), (100, 700), (500, 700), (500, 0)]
        assert all(p.tag is ContourTag.LINE for p in contour.points)
        assert [p.tag for p in bowl.contours[0].points] == [
            ContourTag.LINE,
            ContourTag.OFF_CURVE,
            ContourTag.QCURVE,
            ContourTag.LINE,
        ]

    def test_every_glyph_opens(self, font_path):
        """Test that all glyphs of the font can be edited."""
        with FontReader(font_path) as reader:
            glyphs = list(reader.iter_glyphs())
        editors = [Editor.from_glyph(glyph) for glyph in glyphs]
        assert [len(e.session.paths) for e in editors] == [0, 1, 1, 0]

    def test_invalid_file(self, tmp_path):
        """Test that a non-font file fails with FontLoadError."""
        path = tmp_path / "broken.ttf"
        path.write_bytes(b"this is not a font")
        with pytest.raises(FontLoadError):
            FontReader(path).load()


class TestEditingWorkflow:
    """Tests for complete editing sessions on font glyphs."""

    def test_drag_undo_redo_and_write_back(self, font_path):
        """Test dragging a corner and writing the outline to a TrueType glyph."""
        with FontReader(font_path) as reader:
            glyph = reader.get_glyph("A")
            metrics = reader.metrics
        editor = Editor.from_glyph(glyph, metrics)
        editor.resize(1000, 1000)
        viewport = editor.session.viewport
        assert viewport.zoom == pytest.approx(0.8)

        start = viewport.to_screen(Point(500, 700))
        end = start + Vec2(40, 0)
        editor.mouse_down(MouseEvent(start, MouseButton.LEFT))
        editor.mouse_moved(MouseEvent(start + Vec2(20, 0), MouseButton.LEFT))
        editor.mouse_moved(MouseEvent(end, MouseButton.LEFT))
        editor.mouse_up(MouseEvent(end, MouseButton.LEFT))
        assert editor.history.checkpoint_count == 1

        edited = editor.session.to_glyph()
        expected = [100, 0, 100, 700, 550, 700, 500, 0]
        assert flat((p.x, p.y) for p in edited.contours[0].points) == pytest.approx(expected)

        editor.undo()
        assert editor.session.to_glyph().contours == glyph.contours
        editor.redo()

        tt_glyph = to_truetype(editor.session.to_glyph())
        assert tt_glyph.numberOfContours == 1
        assert flat(tt_glyph.coordinates) == pytest.approx(expected)

    def test_quadratic_glyph(self, font_path):
        """Test reconstruction and round trip of a quadratic glyph."""
        with FontReader(font_path) as reader:
            glyph = reader.get_glyph("O")
        editor = Editor.from_glyph(glyph)
        (path,) = editor.session.paths
        assert isinstance(path, QuadraticPath)
        assert path.to_geometry() == [
            ("moveTo", ((100, 100),)),
            ("lineTo", ((100, 0),)),
            ("lineTo", ((0, 0),)),
            ("qCurveTo", ((0, 100), (100, 100))),
            ("closePath", ()),
        ]
        assert editor.session.to_glyph().contours == glyph.contours
        tt_glyph = to_truetype(editor.session.to_glyph())
        assert flat(tt_glyph.coordinates) == pytest.approx([0, 0, 0, 100, 100, 100, 100, 0])
        assert [bool(f & 1) for f in tt_glyph.flags] == [True, False, True, True]

    def test_draw_new_contour(self, font_path):
        """Test drawing a triangle into an empty glyph."""
        with FontReader(font_path) as reader:
            glyph = reader.get_glyph("space")
        editor = Editor.from_glyph(glyph)
        editor.key_down("p")
        for x, y in [(0, 0), (200, 0), (100, 200), (2, 2)]:
            event = MouseEvent(editor.session.viewport.to_screen(Point(x, y)), MouseButton.LEFT)
            editor.mouse_down(event)
            editor.mouse_up(event)
        exported = editor.session.to_glyph()
        (contour,) = exported.contours
        assert contour.is_closed
        # The first placed point is drawn first, the last one leads the records
        assert [(p.x, p.y) for p in contour.points] == [(100, 200), (0, 0), (200, 0)]
        assert editor.session.geometry()[0] == ("moveTo", ((0, 0),))
        assert to_truetype(exported).numberOfContours == 1
        editor.undo()
        assert editor.session.to_glyph().contours == []
