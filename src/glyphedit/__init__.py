"""Glyphedit - Vector outline editing engine for font glyphs.

Glyphedit keeps glyph contours as sequences of on-curve and off-curve points,
reconstructs bezier geometry from them, turns pointer input into editing
gestures and applies geometric edits with grouped undo.

Example:
    >>> from glyphedit import Editor, Glyph
    >>> editor = Editor.from_glyph(glyph, metrics)
    >>> editor.session.geometry()

The engine draws into fontTools pens and reads/writes contours as point
records, so it plugs into any fontTools based font pipeline.
"""

__version__ = "0.1.0"

from glyphedit.core.editor import Editor
from glyphedit.core.session import EditSession
from glyphedit.domain.glyph import FontMetrics, Glyph, GlyphMetadata

__all__ = [
    "EditSession",
    "Editor",
    "FontMetrics",
    "Glyph",
    "GlyphMetadata",
    "__version__",
]
