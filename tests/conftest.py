"""Shared fixtures for glyphedit tests."""

import pytest

from glyphedit.domain import Contour, ContourPoint, ContourTag, Glyph, GlyphMetadata


def make_contour(*records):
    """Build a contour from (x, y, tag) tuples."""
    return Contour([ContourPoint(x, y, tag) for x, y, tag in records])


@pytest.fixture
def square_glyph():
    """Glyph with one closed 100x100 square made of corner points."""
    square = make_contour(
        (0, 0, ContourTag.LINE),
        (100, 0, ContourTag.LINE),
        (100, 100, ContourTag.LINE),
        (0, 100, ContourTag.LINE),
    )
    return Glyph(GlyphMetadata("square", [0x25A1], 600), [square])


@pytest.fixture
def curve_glyph():
    """Glyph with an open cubic and a closed contour ending in a curve."""
    open_cubic = make_contour(
        (0, 0, ContourTag.MOVE),
        (10, 20, ContourTag.OFF_CURVE),
        (30, 20, ContourTag.OFF_CURVE),
        (40, 0, ContourTag.CURVE),
    )
    closed = make_contour(
        (200, 0, ContourTag.LINE),
        (200, 50, ContourTag.OFF_CURVE),
        (250, 100, ContourTag.OFF_CURVE),
        (300, 100, ContourTag.CURVE),
        (300, 0, ContourTag.LINE),
    )
    return Glyph(GlyphMetadata("curves", [], 500), [open_cubic, closed])


@pytest.fixture
def empty_glyph():
    """Glyph without contours."""
    return Glyph(GlyphMetadata("space", [0x20], 250), [])


@pytest.fixture
def font_path(tmp_path):
    """Small TrueType font with a square "A", a quadratic "O" and an empty space."""
    from fontTools.fontBuilder import FontBuilder
    from fontTools.pens.ttGlyphPen import TTGlyphPen

    square = TTGlyphPen(None)
    square.moveTo((100, 0))
    square.lineTo((100, 700))
    square.lineTo((500, 700))
    square.lineTo((500, 0))
    square.closePath()

    bowl = TTGlyphPen(None)
    bowl.moveTo((0, 0))
    bowl.qCurveTo((0, 100), (100, 100))
    bowl.lineTo((100, 0))
    bowl.closePath()

    glyphs = {
        ".notdef": TTGlyphPen(None).glyph(),
        "A": square.glyph(),
        "O": bowl.glyph(),
        "space": TTGlyphPen(None).glyph(),
    }

    builder = FontBuilder(1000, isTTF=True)
    builder.setupGlyphOrder(list(glyphs))
    builder.setupCharacterMap({0x41: "A", 0x4F: "O", 0x20: "space"})
    builder.setupGlyf(glyphs)
    builder.setupHorizontalMetrics(
        {".notdef": (500, 0), "A": (600, 100), "O": (400, 0), "space": (250, 0)}
    )
    builder.setupHorizontalHeader(ascent=800, descent=-200)
    builder.setupNameTable({"familyName": "Glyphedit Test", "styleName": "Regular"})
    builder.setupOS2(
        sTypoAscender=800,
        sTypoDescender=-200,
        usWinAscent=800,
        usWinDescent=200,
        sxHeight=500,
        sCapHeight=700,
    )
    builder.setupPost()

    path = tmp_path / "test.ttf"
    builder.save(str(path))
    return path
