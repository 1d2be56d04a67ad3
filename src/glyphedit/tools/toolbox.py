"""Construction of tools from their ids."""

from glyphedit.tools.base import Tool, ToolId
from glyphedit.tools.pen import PenTool
from glyphedit.tools.preview import PreviewTool
from glyphedit.tools.select import SelectTool

_TOOL_CLASSES: dict[ToolId, type[Tool]] = {
    ToolId.SELECT: SelectTool,
    ToolId.PEN: PenTool,
    ToolId.PREVIEW: PreviewTool,
}


def tool_for_id(tool_id: ToolId) -> Tool:
    """Create a fresh tool in its ready state."""
    return _TOOL_CLASSES[tool_id]()


def tool_for_shortcut(key: str) -> Tool:
    """Create the tool bound to a keyboard shortcut.

    Raises:
        UnknownToolError: If no tool uses the key
    """
    return tool_for_id(ToolId.from_shortcut(key))
