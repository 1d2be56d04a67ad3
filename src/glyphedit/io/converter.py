"""Converters between fonttools and domain models.

This module extracts interchange glyphs and font metrics from a TTFont.
"""

from typing import Any

from fontTools.ttLib import TTFont

from glyphedit.domain.glyph import FontMetrics, Glyph, GlyphMetadata
from glyphedit.io.pens import ContourPointPen


def fonttools_glyph_to_domain(name: str, fonttools_glyph: Any, font: TTFont) -> Glyph:
    """Convert a fonttools glyph to an interchange Glyph.

    The outline is drawn through the point-pen protocol, so TrueType
    glyphs keep their exact point structure and CFF glyphs are converted
    by fontTools.

    Args:
        name: Name of the glyph
        fonttools_glyph: The fonttools glyph object from a GlyphSet
        font: The TTFont object for accessing metadata

    Returns:
        Interchange Glyph (contours are validated)

    Raises:
        ContourFormatError: If the outline cannot be represented
    """
    pen = ContourPointPen()
    fonttools_glyph.drawPoints(pen)

    glyph = Glyph(metadata=extract_glyph_metadata(name, font), contours=pen.contours)
    glyph.validate()
    return glyph


def extract_glyph_metadata(name: str, font: TTFont) -> GlyphMetadata:
    """Extract glyph metadata from font.

    Args:
        name: Glyph name
        font: The TTFont object

    Returns:
        GlyphMetadata object
    """
    hmtx = font.get("hmtx")
    advance_width = 0

    if hmtx and name in hmtx.metrics:
        advance_width, _lsb = hmtx.metrics[name]

    cmap = font.getBestCmap() or {}
    codepoints = sorted(code for code, glyph_name in cmap.items() if glyph_name == name)

    return GlyphMetadata(name=name, codepoints=codepoints, advance_width=advance_width)


def extract_font_metrics(font: TTFont) -> FontMetrics:
    """Extract vertical metrics from font.

    Prefers OS/2 typographic metrics and falls back to hhea.

    Args:
        font: The TTFont object

    Returns:
        FontMetrics object
    """
    upm = font["head"].unitsPerEm
    os2 = font.get("OS/2")
    hhea = font.get("hhea")

    if os2 is not None:
        ascender = os2.sTypoAscender
        descender = os2.sTypoDescender
    elif hhea is not None:
        ascender = hhea.ascent
        descender = hhea.descent
    else:
        ascender = upm * 0.8
        descender = -upm * 0.2

    x_height = getattr(os2, "sxHeight", None) if os2 is not None else None
    cap_height = getattr(os2, "sCapHeight", None) if os2 is not None else None

    return FontMetrics(
        units_per_em=upm,
        ascender=ascender,
        descender=descender,
        x_height=x_height or None,
        cap_height=cap_height or None,
    )
