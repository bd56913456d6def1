import pytest

from voxelspark.events import (
    Event,
    EventDispatcher,
    EventListener,
    EventType,
    KeyEvent,
    KeyPressedEvent,
    KeyReleasedEvent,
    MouseButtonEvent,
    MouseMovedEvent,
    MousePressedEvent,
    MouseReleasedEvent,
)


@pytest.mark.parametrize(
    "event_type, name",
    [
        (EventType.KEY_PRESSED, "KEY_PRESSED"),
        (EventType.KEY_RELEASED, "KEY_RELEASED"),
        (EventType.MOUSE_PRESSED, "MOUSE_PRESSED"),
        (EventType.MOUSE_RELEASED, "MOUSE_RELEASED"),
        (EventType.MOUSE_MOVED, "MOUSE_MOVED"),
    ],
)
def test_type_to_string(event_type, name):
    assert Event.type_to_string(event_type) == name


def test_type_to_string_invalid_for_combined_flags():
    combined = EventType.KEY_PRESSED | EventType.MOUSE_MOVED
    assert Event.type_to_string(combined) == "INVALID"


def test_base_string_and_initial_state():
    event = KeyReleasedEvent(65)
    assert str(event) == "Event: "
    assert event.handled is False
    assert event.type is EventType.KEY_RELEASED
    assert event.key_code == 65


def test_key_pressed_fields_and_modifiers():
    event = KeyPressedEvent(9, 1, 0b101)
    assert event.type is EventType.KEY_PRESSED
    assert event.key_code == 9
    assert event.repeat == 1
    assert event.modifiers == 0b101
    assert event.is_modifier(0b100) is True
    assert event.is_modifier(0b010) is False


def test_mouse_events_position():
    pressed = MousePressedEvent(1, 3, 4.5)
    released = MouseReleasedEvent(2, 7.0, 8.0)
    moved = MouseMovedEvent(1.0, 2.0, True)
    assert pressed.position == (3.0, 4.5)
    assert pressed.type is EventType.MOUSE_PRESSED
    assert released.button == 2
    assert released.type is EventType.MOUSE_RELEASED
    assert moved.position == (1.0, 2.0)
    assert moved.dragged is True


def test_mouse_pressed_string():
    event = MousePressedEvent(1, 2.0, 3.0)
    assert str(event) == "MouseReleasedEvent: (1, 2.000000, 3.000000)"


def test_dispatch_exact_type_sets_handled():
    event = KeyPressedEvent(1, 0, 0)
    seen = []

    def handler(e):
        seen.append(e)
        return True

    EventDispatcher(event).dispatch(KeyPressedEvent, handler)
    assert seen == [event]
    assert event.handled is True


def test_dispatch_group_type_matches_both_key_events():
    results = []
    for event in (KeyPressedEvent(1, 0, 0), KeyReleasedEvent(1)):
        EventDispatcher(event).dispatch(KeyEvent, lambda e: True)
        results.append(event.handled)
    assert results == [True, True]


def test_dispatch_skips_other_types():
    event = MouseMovedEvent(0, 0, False)
    calls = []
    EventDispatcher(event).dispatch(KeyPressedEvent, lambda e: calls.append(e) or True)
    EventDispatcher(event).dispatch(MouseButtonEvent, lambda e: calls.append(e) or True)
    assert calls == []
    assert event.handled is False


def test_dispatch_handler_result_overwrites_flag():
    event = MousePressedEvent(0, 0, 0)
    dispatcher = EventDispatcher(event)
    dispatcher.dispatch(MousePressedEvent, lambda e: True)
    dispatcher.dispatch(MouseButtonEvent, lambda e: False)
    assert event.handled is False


def test_event_listener_is_abstract():
    with pytest.raises(TypeError):
        EventListener()


def test_event_listener_subclass_receives_events():
    class Recorder(EventListener):
        def __init__(self):
            self.events = []

        def on_event(self, event):
            self.events.append(event)

    recorder = Recorder()
    event = KeyReleasedEvent(3)
    recorder.on_event(event)
    assert recorder.events == [event]