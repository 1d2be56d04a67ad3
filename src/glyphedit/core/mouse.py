"""Pointer gesture recognition.

Mouse turns raw button and move events into clicks and drags and forwards
them to a MouseDelegate. A press becomes a drag once the pointer has moved
at least ``drag_threshold`` screen pixels from where the button went down;
releasing before that produces a click.

    Up --down--> Down --move >= threshold--> Dragging
    Down --up--> Up      (up, then click)
    Dragging --up--> Up  (drag ended, then up)
    any --cancel--> Up
"""

import logging
from dataclasses import dataclass, field, replace
from enum import Enum, auto
from typing import Any

from glyphedit.domain.geometry import Point, Vec2

logger = logging.getLogger(__name__)

DRAG_THRESHOLD = 3.0


class MouseButton(Enum):
    """Which button an event refers to."""

    LEFT = "left"
    RIGHT = "right"
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class Modifiers:
    """Keyboard modifiers held during an event."""

    shift: bool = False
    ctrl: bool = False
    alt: bool = False
    meta: bool = False

    @property
    def command(self) -> bool:
        """Platform command key: ctrl or meta."""
        return self.ctrl or self.meta


@dataclass(frozen=True, slots=True)
class MouseEvent:
    """A raw pointer event in screen space.

    Attributes:
        pos: Pointer position in screen pixels
        button: Button pressed or released, None for plain moves
        mods: Modifier keys held
    """

    pos: Point
    button: MouseButton | None = None
    mods: Modifiers = field(default_factory=Modifiers)


@dataclass(frozen=True, slots=True)
class Drag:
    """State of a drag gesture.

    Attributes:
        start: Event where the button went down
        previous: Event of the previous drag frame
        current: Event of this drag frame
    """

    start: MouseEvent
    previous: MouseEvent
    current: MouseEvent

    def delta_from_start(self) -> Vec2:
        return self.current.pos - self.start.pos

    def delta_from_previous(self) -> Vec2:
        return self.current.pos - self.previous.pos


class MouseDelegate:
    """Receiver of recognized gestures.

    Every hook is a no-op; subclasses override the ones they need. ``data``
    is whatever object the Mouse was given alongside the delegate, usually
    the edit session.
    """

    def left_down(self, event: MouseEvent, data: Any) -> None:
        pass

    def left_up(self, event: MouseEvent, data: Any) -> None:
        pass

    def left_click(self, event: MouseEvent, data: Any) -> None:
        pass

    def left_drag_began(self, drag: Drag, data: Any) -> None:
        pass

    def left_drag_changed(self, drag: Drag, data: Any) -> None:
        pass

    def left_drag_ended(self, drag: Drag, data: Any) -> None:
        pass

    def right_down(self, event: MouseEvent, data: Any) -> None:
        pass

    def right_up(self, event: MouseEvent, data: Any) -> None:
        pass

    def right_click(self, event: MouseEvent, data: Any) -> None:
        pass

    def right_drag_began(self, drag: Drag, data: Any) -> None:
        pass

    def right_drag_changed(self, drag: Drag, data: Any) -> None:
        pass

    def right_drag_ended(self, drag: Drag, data: Any) -> None:
        pass

    def other_down(self, event: MouseEvent, data: Any) -> None:
        pass

    def other_up(self, event: MouseEvent, data: Any) -> None:
        pass

    def other_click(self, event: MouseEvent, data: Any) -> None:
        pass

    def other_drag_began(self, drag: Drag, data: Any) -> None:
        pass

    def other_drag_changed(self, drag: Drag, data: Any) -> None:
        pass

    def other_drag_ended(self, drag: Drag, data: Any) -> None:
        pass

    def mouse_moved(self, event: MouseEvent, data: Any) -> None:
        pass

    def cancel(self, data: Any) -> None:
        pass


class GestureState(Enum):
    """Recognizer state."""

    UP = auto()
    DOWN = auto()
    DRAGGING = auto()


class Mouse:
    """Gesture recognizer feeding a MouseDelegate.

    Example:
        mouse = Mouse()
        mouse.mouse_down(MouseEvent(Point(0, 0), MouseButton.LEFT), tool, session)
        mouse.mouse_up(MouseEvent(Point(0, 0), MouseButton.LEFT), tool, session)
        # tool.left_up then tool.left_click were called
    """

    def __init__(self, drag_threshold: float = DRAG_THRESHOLD) -> None:
        self.drag_threshold = drag_threshold
        self._state = GestureState.UP
        self._down: MouseEvent | None = None
        self._drag: Drag | None = None

    @property
    def state(self) -> GestureState:
        return self._state

    def mouse_down(self, event: MouseEvent, delegate: MouseDelegate, data: Any) -> None:
        """Handle a button press; ignored unless no button is down."""
        if self._state is not GestureState.UP:
            logger.debug("Ignoring button down while %s", self._state.name)
            return
        button = event.button or MouseButton.LEFT
        event = replace(event, button=button)
        self._state = GestureState.DOWN
        self._down = event
        _hook(delegate, button, "down")(event, data)

    def mouse_moved(self, event: MouseEvent, delegate: MouseDelegate, data: Any) -> None:
        """Handle pointer motion."""
        if self._state is GestureState.UP:
            delegate.mouse_moved(event, data)
            return

        down = self._down
        if self._state is GestureState.DOWN and down is not None:
            current = replace(event, button=down.button)
            if current.pos.distance(down.pos) >= self.drag_threshold:
                self._drag = Drag(start=down, previous=down, current=current)
                self._state = GestureState.DRAGGING
                _hook(delegate, down.button, "drag_began")(self._drag, data)
            return

        drag = self._drag
        if drag is None:
            return
        current = replace(event, button=drag.start.button)
        self._drag = Drag(start=drag.start, previous=drag.current, current=current)
        _hook(delegate, drag.start.button, "drag_changed")(self._drag, data)

    def mouse_up(self, event: MouseEvent, delegate: MouseDelegate, data: Any) -> None:
        """Handle a button release; ignored when no button is down."""
        if self._state is GestureState.UP:
            return

        down = self._down
        if self._state is GestureState.DOWN and down is not None:
            button = down.button
            event = replace(event, button=button)
            self._reset()
            _hook(delegate, button, "up")(event, data)
            _hook(delegate, button, "click")(event, data)
            return

        last = self._drag
        if last is None:
            self._reset()
            return
        button = last.start.button
        event = replace(event, button=button)
        drag = Drag(start=last.start, previous=last.current, current=event)
        self._reset()
        _hook(delegate, button, "drag_ended")(drag, data)
        _hook(delegate, button, "up")(event, data)

    def cancel(self, delegate: MouseDelegate, data: Any) -> None:
        """Abandon any gesture in progress and tell the delegate."""
        self._reset()
        delegate.cancel(data)

    def _reset(self) -> None:
        self._state = GestureState.UP
        self._down = None
        self._drag = None


def _hook(delegate: MouseDelegate, button: MouseButton | None, action: str) -> Any:
    prefix = (button or MouseButton.LEFT).value
    return getattr(delegate, f"{prefix}_{action}")
