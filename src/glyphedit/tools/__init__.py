"""Editing tools for glyphedit.

Each tool turns recognized gestures into session edits:

- SelectTool: pick, marquee-select and drag points
- PenTool: draw new paths and insert points on segments
- PreviewTool: pan the canvas
"""

from glyphedit.tools.base import Tool, ToolId
from glyphedit.tools.pen import PenTool
from glyphedit.tools.preview import PreviewTool
from glyphedit.tools.select import SelectTool
from glyphedit.tools.toolbox import tool_for_id, tool_for_shortcut

__all__ = [
    "PenTool",
    "PreviewTool",
    "SelectTool",
    "Tool",
    "ToolId",
    "tool_for_id",
    "tool_for_shortcut",
]
