"""Exception hierarchy for Glyphedit."""


class GlyphEditError(Exception):
    """Base exception for all Glyphedit errors."""

    pass


class InterchangeError(GlyphEditError):
    """Errors related to point-record interchange data."""

    pass


class ContourFormatError(InterchangeError):
    """Contour records that cannot be turned into a path."""

    def __init__(self, details: str, contour_index: int | None = None) -> None:
        self.details = details
        self.contour_index = contour_index
        if contour_index is None:
            super().__init__(f"Invalid contour data: {details}")
        else:
            super().__init__(f"Invalid contour data in contour {contour_index}: {details}")


class FontError(GlyphEditError):
    """Errors related to reading glyphs out of a font."""

    pass


class FontLoadError(FontError):
    """Error loading a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")


class GlyphNotFoundError(FontError):
    """Requested glyph not found in font."""

    def __init__(self, glyph_name: str) -> None:
        self.glyph_name = glyph_name
        super().__init__(f"Glyph '{glyph_name}' not found in font")


class ToolError(GlyphEditError):
    """Errors related to editing tools."""

    pass


class UnknownToolError(ToolError):
    """No tool is registered for the requested id or shortcut."""

    def __init__(self, tool: str) -> None:
        self.tool = tool
        super().__init__(f"Unknown tool '{tool}'")
