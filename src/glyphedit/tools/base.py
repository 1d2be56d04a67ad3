"""Tool identity and the interface every editing tool implements."""

from enum import Enum
from typing import TYPE_CHECKING, ClassVar

from fontTools.pens.basePen import AbstractPen

from glyphedit.core.edit_type import EditType
from glyphedit.core.mouse import Modifiers, MouseDelegate
from glyphedit.exceptions import UnknownToolError

if TYPE_CHECKING:
    from glyphedit.core.session import EditSession


class ToolId(Enum):
    """The closed set of editing tools."""

    SELECT = "select"
    PEN = "pen"
    PREVIEW = "preview"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @property
    def shortcut(self) -> str:
        """Keyboard shortcut that activates the tool."""
        return _SHORTCUTS[self]

    @classmethod
    def from_shortcut(cls, key: str) -> "ToolId":
        """Look up a tool by its keyboard shortcut.

        Raises:
            UnknownToolError: If no tool uses the key
        """
        for tool_id, shortcut in _SHORTCUTS.items():
            if shortcut == key.lower():
                return tool_id
        raise UnknownToolError(key)


_SHORTCUTS = {
    ToolId.SELECT: "v",
    ToolId.PEN: "p",
    ToolId.PREVIEW: "h",
}


class Tool(MouseDelegate):
    """Base class of editing tools.

    Tools receive gestures through the MouseDelegate hooks with the edit
    session as data, and change the session only through its edit methods.
    """

    tool_id: ClassVar[ToolId]

    def id(self) -> ToolId:
        return self.tool_id

    def paint(self, pen: AbstractPen, session: "EditSession") -> None:
        """Draw the tool overlay in screen coordinates into a segment pen."""
        pass

    def edit_type(self) -> EditType | None:
        """Edit the tool is currently in the middle of, if any."""
        return None

    def key_down(self, key: str, mods: Modifiers, session: "EditSession") -> bool:
        """Handle a key press.

        Returns:
            True if the tool consumed the key
        """
        return False

    def key_up(self, key: str, mods: Modifiers, session: "EditSession") -> bool:
        return False

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
