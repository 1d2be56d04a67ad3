"""Bounded undo/redo history of editor states.

The history holds a base state plus a stack of checkpoints; the newest
checkpoint is the current state. Undo moves the newest checkpoint onto the
redo stack and returns the state below it.
"""

import logging
from collections import deque
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

MAX_UNDO_HISTORY = 128

T = TypeVar("T")


class UndoState(Generic[T]):
    """Undo history over immutable snapshots of type T.

    Example:
        history = UndoState(initial)
        history.add_undo_group(after_edit)
        restored = history.undo()  # -> initial
    """

    def __init__(self, initial: T, max_history: int = MAX_UNDO_HISTORY) -> None:
        """Initialize the history.

        Args:
            initial: State before any recorded edit
            max_history: Maximum number of checkpoints kept
        """
        if max_history < 1:
            raise ValueError("max_history must be at least 1")
        self._base = initial
        self._stack: deque[T] = deque()
        self._redo: list[T] = []
        self._max_history = max_history

    @property
    def current(self) -> T:
        """The state at the top of the history."""
        return self._stack[-1] if self._stack else self._base

    @property
    def checkpoint_count(self) -> int:
        """Number of undoable groups."""
        return len(self._stack)

    @property
    def redo_count(self) -> int:
        return len(self._redo)

    def can_undo(self) -> bool:
        return bool(self._stack)

    def can_redo(self) -> bool:
        return bool(self._redo)

    def add_undo_group(self, state: T) -> None:
        """Record ``state`` as a new checkpoint and drop the redo stack.

        When the history is full the oldest checkpoint becomes the new base.
        """
        self._stack.append(state)
        self._redo.clear()
        if len(self._stack) > self._max_history:
            self._base = self._stack.popleft()
            logger.debug("Undo history full, dropped oldest group")

    def update_current_undo(self, state: T) -> None:
        """Replace the newest checkpoint with ``state``.

        Starts a new group when there is no checkpoint to update.
        """
        if not self._stack:
            self.add_undo_group(state)
            return
        self._stack[-1] = state
        self._redo.clear()

    def replace_current(self, state: T) -> None:
        """Replace the state at the top of the history, base included.

        Unlike ``update_current_undo`` this never opens a group and keeps
        the redo stack.
        """
        if self._stack:
            self._stack[-1] = state
        else:
            self._base = state

    def undo(self) -> T | None:
        """Step back one group.

        Returns:
            The state to restore, or None if there is nothing to undo
        """
        if not self._stack:
            return None
        self._redo.append(self._stack.pop())
        return self.current

    def redo(self) -> T | None:
        """Step forward one group.

        Returns:
            The state to restore, or None if there is nothing to redo
        """
        if not self._redo:
            return None
        state = self._redo.pop()
        self._stack.append(state)
        return state

    def clear(self, base: T) -> None:
        """Forget all history, starting over from ``base``."""
        self._base = base
        self._stack.clear()
        self._redo.clear()
