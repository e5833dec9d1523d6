"""Input event records and typed event dispatchers."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable, Deque, Dict, Generic, Type, TypeVar

T = TypeVar("T")

EventListener = Callable[[Any], Any]


class EventDispatcher(Generic[T]):
    """Keeps listeners for one kind of event and calls them when triggered.

    Handles are handed out from 1 upwards and listeners are called in
    handle order.
    """

    def __init__(self) -> None:
        self._listeners: Dict[int, Callable[[T], Any]] = {}
        self._last_handle = 0

    def add_listener(self, listener: Callable[[T], Any]) -> int:
        """Register a listener and return its handle."""
        self._last_handle += 1
        self._listeners[self._last_handle] = listener
        return self._last_handle

    def remove_listener(self, handle: int) -> None:
        """Forget the listener with the given handle; unknown handles are ignored."""
        self._listeners.pop(handle, None)

    def trigger(self, event: T) -> None:
        """Call every registered listener with the event."""
        for handle in sorted(self._listeners):
            self._listeners[handle](event)

    def __len__(self) -> int:
        return len(self._listeners)


_dispatchers: Dict[type, EventDispatcher[Any]] = {}


def dispatcher_for(event_type: Type[T]) -> EventDispatcher[T]:
    """Return the shared dispatcher for an event type, creating it on first use."""
    dispatcher = _dispatchers.get(event_type)
    if dispatcher is None:
        dispatcher = EventDispatcher()
        _dispatchers[event_type] = dispatcher
    return dispatcher


class EventManager:
    """Base class for back ends that poll input and dispatch events.

    Events handed to :meth:`post` wait until the next :meth:`update_events`,
    which sends each to the shared dispatcher for its type.
    """

    def __init__(self) -> None:
        self._pending: Deque[Any] = deque()

    def post(self, event: Any) -> None:
        """Queue an event for the next update."""
        self._pending.append(event)

    def update_events(self) -> None:
        """Dispatch every queued event in the order it was posted."""
        while self._pending:
            event = self._pending.popleft()
            dispatcher_for(type(event)).trigger(event)


@dataclass
class KeyboardEventData:
    """A key going down (pressed) or up."""

    key_code: int
    key_pressed: bool


@dataclass
class JoystickEventData:
    """A joystick button going down (pressed) or up."""

    button_code: int
    button_pressed: bool


@dataclass
class MouseEventData:
    """A mouse button or movement event with the pointer position."""

    mouse_button: int
    position_x: float
    position_y: float
    pressed: bool
    moved: bool


@dataclass
class TextEventData:
    """A character entered as a Unicode code point."""

    character: int

    @property
    def text(self) -> str:
        return chr(self.character)


class WindowEventType(IntEnum):
    LOST_FOCUS = 0
    GAIN_FOCUS = 1
    CLOSED = 2


@dataclass
class WindowEventData:
    """Something that happened to the window."""

    event_type: WindowEventType