"""Overlay of debug panels toggled with Ctrl+Tab."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from voxelspark.application import Layer
from voxelspark.events import (
    Event,
    EventDispatcher,
    KeyPressedEvent,
    MouseMovedEvent,
)
from voxelspark.fonts import FontManager

MODIFIER_LEFT_CONTROL = 1 << 0
MODIFIER_LEFT_ALT = 1 << 1
MODIFIER_LEFT_SHIFT = 1 << 2
VK_TAB = 0x09

PROJECTION_WIDTH = 32.0
PROJECTION_HEIGHT = 18.0
PANEL_COLOR = 0xCF7F7F7F
LABEL_COLOR = 0xFFFFFFFF
PANEL_COUNT = 5


@dataclass(frozen=True)
class DebugPanel:
    """One labelled backdrop in the debug overlay."""

    label: str
    x: float
    y: float
    width: float
    height: float
    color: int
    label_x: float
    label_y: float
    label_color: int


class DebugLayer(Layer):
    """Hidden overlay that shows debug panels; Ctrl+Tab toggles it."""

    def __init__(
        self,
        font_manager: Optional[FontManager] = None,
        window_size: Optional[tuple[int, int]] = None,
    ) -> None:
        super().__init__()
        self.visible = False
        self.font_manager = font_manager
        self.window_size = window_size
        self.panels: list[DebugPanel] = []
        self.last_mouse_event: Optional[MouseMovedEvent] = None

    def init(self) -> None:
        """Scale the default font to the window and lay out the panels."""
        super().init()
        if self.font_manager is not None and self.window_size is not None:
            width, height = self.window_size
            self.font_manager.default().set_scale(
                width / PROJECTION_WIDTH, height / PROJECTION_HEIGHT
            )
        self.panels = []
        for i in range(PANEL_COUNT):
            y = PROJECTION_HEIGHT - (i + 1) * 1.7
            self.panels.append(
                DebugPanel(
                    label=f"Item {i + 1}",
                    x=0.0,
                    y=y,
                    width=6.0,
                    height=1.5,
                    color=PANEL_COLOR,
                    label_x=0.2,
                    label_y=y + 0.4,
                    label_color=LABEL_COLOR,
                )
            )

    def on_event(self, event: Event) -> None:
        dispatcher = EventDispatcher(event)
        dispatcher.dispatch(MouseMovedEvent, self.on_mouse_moved_event)
        dispatcher.dispatch(KeyPressedEvent, self.on_key_pressed_event)

    def on_mouse_moved_event(self, event: MouseMovedEvent) -> bool:
        """Remember the latest mouse motion; it is never consumed."""
        self.last_mouse_event = event
        return False

    def on_key_pressed_event(self, event: KeyPressedEvent) -> bool:
        """Toggle visibility on a fresh Ctrl+Tab press."""
        if event.repeat:
            return False
        if event.modifiers == MODIFIER_LEFT_CONTROL and event.key_code == VK_TAB:
            self.visible = not self.visible
            return True
        return False