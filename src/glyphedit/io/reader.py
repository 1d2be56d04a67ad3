"""Font reader for opening glyphs from TTF/OTF fonts.

This module provides the FontReader class for loading font files and
extracting glyphs as interchange records ready to open in an editor.
"""

from collections.abc import Iterator
from pathlib import Path

from fontTools.ttLib import TTFont, TTLibError

from glyphedit.domain.glyph import FontMetrics, Glyph
from glyphedit.exceptions import FontLoadError, GlyphNotFoundError
from glyphedit.io.converter import extract_font_metrics, fonttools_glyph_to_domain


class FontReader:
    """Loads TTF/OTF fonts and extracts glyph data.

    Example:
        with FontReader(Path("font.ttf")) as reader:
            glyph = reader.get_glyph("a")
            editor = Editor.from_glyph(glyph, reader.metrics)
    """

    def __init__(self, font_path: Path) -> None:
        """Initialize the font reader.

        Args:
            font_path: Path to the TTF or OTF font file
        """
        self._font_path = font_path
        self._font: TTFont | None = None

    def load(self) -> None:
        """Load the font file.

        Raises:
            FileNotFoundError: If font file does not exist
            FontLoadError: If the file is not a font fontTools can read
        """
        if not self._font_path.exists():
            raise FileNotFoundError(f"Font file not found: {self._font_path}")

        try:
            self._font = TTFont(str(self._font_path))
        except TTLibError as e:
            raise FontLoadError(str(self._font_path), str(e)) from e

    def _require_font(self) -> TTFont:
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")
        return self._font

    @property
    def format(self) -> str:
        """Return font format.

        Returns:
            'TrueType' for TTF fonts, 'OpenType' for OTF fonts

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        font = self._require_font()
        if "CFF " in font or "CFF2" in font:
            return "OpenType"
        return "TrueType"

    @property
    def units_per_em(self) -> int:
        """Return font's units per em.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        return self._require_font()["head"].unitsPerEm  # type: ignore[attr-defined]

    @property
    def glyph_count(self) -> int:
        """Return total number of glyphs in the font.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        return self._require_font()["maxp"].numGlyphs

    @property
    def metrics(self) -> FontMetrics:
        """Return the font's vertical metrics.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        return extract_font_metrics(self._require_font())

    def glyph_names(self) -> list[str]:
        return list(self._require_font().getGlyphOrder())

    def get_glyph(self, name: str) -> Glyph:
        """Get a specific glyph by name.

        Args:
            name: Name of the glyph to retrieve

        Returns:
            Interchange glyph

        Raises:
            RuntimeError: If font has not been loaded yet
            GlyphNotFoundError: If the font has no glyph with that name
            ContourFormatError: If the glyph outline cannot be represented
        """
        font = self._require_font()
        if name not in font.getGlyphOrder():
            raise GlyphNotFoundError(name)

        glyph_set = font.getGlyphSet()
        return fonttools_glyph_to_domain(name=name, fonttools_glyph=glyph_set[name], font=font)

    def iter_glyphs(self) -> Iterator[Glyph]:
        """Iterate over all glyphs in glyph order.

        Yields:
            Interchange glyphs

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        for name in self.glyph_names():
            yield self.get_glyph(name)

    def close(self) -> None:
        """Close the font file and free resources."""
        if self._font is not None:
            self._font.close()
            self._font = None

    def __enter__(self) -> "FontReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
