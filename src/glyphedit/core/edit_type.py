"""Edit kinds and the rule for merging edits into undo groups."""

from enum import Enum


class EditType(Enum):
    """Tag attached to each completed edit.

    - NORMAL: a discrete edit, always its own undo step
    - DRAG: an intermediate frame of a drag
    - DRAG_END: the final frame of a drag
    - NUDGE_*: an arrow-key nudge in one direction
    """

    NORMAL = "normal"
    DRAG = "drag"
    DRAG_END = "drag_end"
    NUDGE_UP = "nudge_up"
    NUDGE_DOWN = "nudge_down"
    NUDGE_LEFT = "nudge_left"
    NUDGE_RIGHT = "nudge_right"

    @property
    def is_nudge(self) -> bool:
        return self in _NUDGES

    def should_create_new_undo_group(self, previous: "EditType | None") -> bool:
        """Decide whether this edit opens a new undo group.

        Consecutive DRAG edits and consecutive nudges in the same direction
        update the current group. DRAG_END joins an open drag group and
        closes it; without an open drag it starts its own group.

        Args:
            previous: Type of the immediately preceding edit, or None

        Returns:
            True if a new checkpoint must be created
        """
        if previous is None:
            return True
        if previous is EditType.DRAG and self in (EditType.DRAG, EditType.DRAG_END):
            return False
        if self.is_nudge and self is previous:
            return False
        return True


_NUDGES = frozenset(
    {EditType.NUDGE_UP, EditType.NUDGE_DOWN, EditType.NUDGE_LEFT, EditType.NUDGE_RIGHT}
)
