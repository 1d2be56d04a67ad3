"""Font I/O layer for glyphedit.

This module connects the editor to fontTools. It reads glyphs out of
TTF/OTF fonts and converts outlines between fontTools point pens and
interchange contours.

Key classes and functions:
- FontReader: Load fonts and extract glyphs and metrics
- ContourPointPen: Record point-pen drawing as interchange contours
- draw_contour_points: Replay interchange contours into a point pen
"""

from glyphedit.io.pens import ContourPointPen, draw_contour_points, draw_glyph_points
from glyphedit.io.reader import FontReader

__all__ = [
    "ContourPointPen",
    "FontReader",
    "draw_contour_points",
    "draw_glyph_points",
]
