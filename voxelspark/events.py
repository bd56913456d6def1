"""Input events and a type-filtered dispatcher."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from typing import Callable, ClassVar, TypeVar


class EventType(enum.IntFlag):
    """Kinds of event, as bit flags."""

    KEY_PRESSED = 1 << 0
    KEY_RELEASED = 1 << 1
    MOUSE_PRESSED = 1 << 2
    MOUSE_RELEASED = 1 << 3
    MOUSE_MOVED = 1 << 4


_TYPE_NAMES = {
    EventType.KEY_PRESSED: "KEY_PRESSED",
    EventType.KEY_RELEASED: "KEY_RELEASED",
    EventType.MOUSE_PRESSED: "MOUSE_PRESSED",
    EventType.MOUSE_RELEASED: "MOUSE_RELEASED",
    EventType.MOUSE_MOVED: "MOUSE_MOVED",
}


class Event:
    """Base event: a type and a flag telling whether a handler consumed it."""

    static_type: ClassVar[int] = 0

    def __init__(self, event_type: EventType) -> None:
        self.type = event_type
        self.handled = False

    def __str__(self) -> str:
        return "Event: "

    @staticmethod
    def type_to_string(event_type: EventType) -> str:
        """Name of a single event type, or "INVALID"."""
        return _TYPE_NAMES.get(event_type, "INVALID")


class KeyEvent(Event):
    """An event about one key."""

    static_type: ClassVar[int] = EventType.KEY_PRESSED | EventType.KEY_RELEASED

    def __init__(self, key_code: int, event_type: EventType) -> None:
        super().__init__(event_type)
        self.key_code = key_code


class KeyPressedEvent(KeyEvent):
    """A key went down, possibly as an auto-repeat."""

    static_type: ClassVar[int] = EventType.KEY_PRESSED

    def __init__(self, key_code: int, repeat: int, modifiers: int) -> None:
        super().__init__(key_code, EventType.KEY_PRESSED)
        self.repeat = repeat
        self.modifiers = modifiers

    def is_modifier(self, modifier: int) -> bool:
        """Whether any of the given modifier bits were held."""
        return bool(self.modifiers & modifier)


class KeyReleasedEvent(KeyEvent):
    """A key went up."""

    static_type: ClassVar[int] = EventType.KEY_RELEASED

    def __init__(self, key_code: int) -> None:
        super().__init__(key_code, EventType.KEY_RELEASED)


class MouseButtonEvent(Event):
    """An event about one mouse button at a position."""

    static_type: ClassVar[int] = EventType.MOUSE_PRESSED | EventType.MOUSE_RELEASED

    def __init__(self, button: int, x: float, y: float, event_type: EventType) -> None:
        super().__init__(event_type)
        self.button = button
        self.x = float(x)
        self.y = float(y)

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)


class MousePressedEvent(MouseButtonEvent):
    """A mouse button went down."""

    static_type: ClassVar[int] = EventType.MOUSE_PRESSED

    def __init__(self, button: int, x: float, y: float) -> None:
        super().__init__(button, x, y, EventType.MOUSE_PRESSED)

    def __str__(self) -> str:
        return "MouseReleasedEvent: (%d, %f, %f)" % (self.button, self.x, self.y)


class MouseReleasedEvent(MouseButtonEvent):
    """A mouse button went up."""

    static_type: ClassVar[int] = EventType.MOUSE_RELEASED

    def __init__(self, button: int, x: float, y: float) -> None:
        super().__init__(button, x, y, EventType.MOUSE_RELEASED)


class MouseMovedEvent(Event):
    """The cursor moved, optionally while dragging."""

    static_type: ClassVar[int] = EventType.MOUSE_MOVED

    def __init__(self, x: float, y: float, dragged: bool) -> None:
        super().__init__(EventType.MOUSE_MOVED)
        self.x = float(x)
        self.y = float(y)
        self.dragged = dragged

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)


class EventListener(ABC):
    """Anything that receives events."""

    @abstractmethod
    def on_event(self, event: Event) -> None:
        """Handle an event, marking it handled if consumed."""


E = TypeVar("E", bound=Event)


class EventDispatcher:
    """Routes one event to handlers whose event class matches its type."""

    def __init__(self, event: Event) -> None:
        self.event = event

    def dispatch(self, event_class: type[E], func: Callable[[E], bool]) -> None:
        """Call func if the event's type is among event_class's types.

        The handler's result becomes the event's handled flag.
        """
        if int(self.event.type) & int(event_class.static_type):
            self.event.handled = bool(func(self.event))  # type: ignore[arg-type]