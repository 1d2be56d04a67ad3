"""Glyph representation and metadata.

This module defines the interchange-level glyph handed between the editor
and font file collaborators: its metadata, the font's vertical metrics and
its outline contours as point records.
"""

from dataclasses import dataclass, field
from typing import Any

from glyphedit.domain.contour import Contour
from glyphedit.exceptions import ContourFormatError


@dataclass
class GlyphMetadata:
    """Metadata about a glyph.

    Attributes:
        name: Glyph name (e.g., "A", "B", "exclam")
        codepoints: Unicode code points mapped to the glyph
        advance_width: Horizontal advance width in font units
    """

    name: str
    codepoints: list[int] = field(default_factory=list)
    advance_width: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation of metadata
        """
        return {
            "name": self.name,
            "codepoints": list(self.codepoints),
            "advance_width": self.advance_width,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GlyphMetadata":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of metadata

        Returns:
            GlyphMetadata instance
        """
        return cls(
            name=data["name"],
            codepoints=list(data.get("codepoints", [])),
            advance_width=data.get("advance_width", 0.0),
        )


@dataclass(frozen=True)
class FontMetrics:
    """Vertical metrics of the font a glyph belongs to.

    Attributes:
        units_per_em: Size of the em square in font units
        ascender: Ascender height (positive)
        descender: Descender depth (negative)
        x_height: Height of lowercase x, if known
        cap_height: Height of capitals, if known
    """

    units_per_em: int = 1000
    ascender: float = 800.0
    descender: float = -200.0
    x_height: float | None = None
    cap_height: float | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "units_per_em": self.units_per_em,
            "ascender": self.ascender,
            "descender": self.descender,
            "x_height": self.x_height,
            "cap_height": self.cap_height,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FontMetrics":
        return cls(
            units_per_em=data.get("units_per_em", 1000),
            ascender=data.get("ascender", 800.0),
            descender=data.get("descender", -200.0),
            x_height=data.get("x_height"),
            cap_height=data.get("cap_height"),
        )


@dataclass
class Glyph:
    """A glyph as exchanged with font file collaborators.

    Attributes:
        metadata: Glyph metadata (name, codepoints, advance width)
        contours: Outline contours as point records
    """

    metadata: GlyphMetadata
    contours: list[Contour] = field(default_factory=list)

    @property
    def name(self) -> str:
        """Get glyph name from metadata."""
        return self.metadata.name

    def validate(self) -> None:
        """Validate every contour.

        Raises:
            ContourFormatError: If a contour is invalid; the error carries
                the index of the offending contour
        """
        for idx, contour in enumerate(self.contours):
            try:
                contour.validate()
            except ContourFormatError as e:
                raise ContourFormatError(e.details, contour_index=idx) from e

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with metadata and contours
        """
        return {
            "metadata": self.metadata.to_dict(),
            "contours": [c.to_dict() for c in self.contours],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Glyph":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with metadata and contours

        Returns:
            Glyph instance

        Raises:
            ContourFormatError: If any contour is invalid
        """
        return cls(
            metadata=GlyphMetadata.from_dict(data["metadata"]),
            contours=[Contour.from_dict(c) for c in data.get("contours", [])],
        )
