"""Application main loop with layer and overlay stacks."""

from __future__ import annotations

from typing import Callable, ClassVar, Optional, Protocol

from voxelspark.events import Event
from voxelspark.timer import Timer

UPDATE_TICK = 1.0 / 60.0
"""Seconds between fixed updates."""


class Window(Protocol):
    """What the main loop needs from a window."""

    closed: bool

    def clear(self) -> None: ...

    def update_input(self) -> None: ...

    def update(self) -> None: ...


class Clock(Protocol):
    """Anything that reports seconds since it started."""

    def elapsed(self) -> float: ...


WindowFactory = Callable[[str, int, int, Callable[[Event], None]], Window]


class Layer:
    """A slice of the application that receives events, ticks, updates and renders."""

    def __init__(self) -> None:
        self.visible = True
        self.initialized = False
        self.ticks = 0
        self.updates = 0
        self.frames = 0

    def init(self) -> None:
        """Prepare the layer; called when it is pushed onto a stack."""
        self.initialized = True

    def on_event(self, event: Event) -> None:
        """Handle an event; set event.handled to stop propagation."""

    def on_tick(self) -> None:
        """Called once per second; counts the ticks received."""
        self.ticks += 1

    def on_update(self) -> None:
        """Called at the fixed update rate; counts the updates received."""
        self.updates += 1

    def on_render(self) -> None:
        """Called once per frame while visible; counts the frames rendered."""
        self.frames += 1


class Application:
    """Owns the window, the layer stacks and the fixed-step main loop."""

    _instance: ClassVar[Optional["Application"]] = None

    def __init__(
        self,
        name: str,
        width: int,
        height: int,
        *,
        window_factory: Optional[WindowFactory] = None,
        debug_layer: Optional[Layer] = None,
        clock_factory: Callable[[], Clock] = Timer,
    ) -> None:
        self.name = name
        self.width = width
        self.height = height
        self.window: Optional[Window] = None
        self.debug_layer = debug_layer
        self.running = False
        self.suspended = False
        self.fps = 0
        self.ups = 0
        self._window_factory = window_factory
        self._clock_factory = clock_factory
        self._layers: list[Layer] = []
        self._overlays: list[Layer] = []
        Application._instance = self

    @classmethod
    def get_application(cls) -> "Application":
        """The most recently created application."""
        if Application._instance is None:
            raise RuntimeError("no application has been created")
        return Application._instance

    @property
    def layers(self) -> list[Layer]:
        return list(self._layers)

    @property
    def overlays(self) -> list[Layer]:
        return list(self._overlays)

    def init(self) -> None:
        """Open the window and prepare the debug layer."""
        if self._window_factory is not None:
            self.window = self._window_factory(
                self.name, self.width, self.height, self.on_event
            )
        if self.debug_layer is not None:
            self.debug_layer.init()

    def push_layer(self, layer: Layer) -> None:
        self._layers.append(layer)
        layer.init()

    def pop_layer(self) -> Layer:
        if not self._layers:
            raise IndexError("pop from an empty layer stack")
        return self._layers.pop()

    def push_overlay(self, layer: Layer) -> None:
        self._overlays.append(layer)
        layer.init()

    def pop_overlay(self) -> Layer:
        if not self._overlays:
            raise IndexError("pop from an empty overlay stack")
        return self._overlays.pop()

    def start(self) -> None:
        """Initialise and run until the window closes or stop() is called."""
        self.init()
        self.running = True
        self.suspended = False
        self._run()

    def suspend(self) -> None:
        self.suspended = True

    def resume(self) -> None:
        self.suspended = False

    def stop(self) -> None:
        self.running = False

    def _run(self) -> None:
        window = self.window
        if window is None:
            raise RuntimeError("the application has no window to run in")
        clock = self._clock_factory()
        tick_timer = 0.0
        update_timer = 0.0
        frames = 0
        updates = 0
        while self.running:
            window.clear()
            if clock.elapsed() - update_timer > UPDATE_TICK:
                window.update_input()
                self.on_update()
                updates += 1
                update_timer += UPDATE_TICK
            self.on_render()
            frames += 1
            window.update()
            if clock.elapsed() - tick_timer > 1.0:
                tick_timer += 1.0
                self.fps = frames
                self.ups = updates
                frames = 0
                updates = 0
                self.on_tick()
            if window.closed:
                self.running = False

    def on_event(self, event: Event) -> None:
        """Offer an event to the debug layer, then overlays and layers, topmost first."""
        if self.debug_layer is not None:
            self.debug_layer.on_event(event)
            if event.handled:
                return
        for layer in [*reversed(self._overlays), *reversed(self._layers)]:
            layer.on_event(event)
            if event.handled:
                return

    def _all_layers(self) -> list[Layer]:
        head = [self.debug_layer] if self.debug_layer is not None else []
        return [*head, *self._overlays, *self._layers]

    def on_tick(self) -> None:
        for layer in self._all_layers():
            layer.on_tick()

    def on_update(self) -> None:
        for layer in self._all_layers():
            layer.on_update()

    def on_render(self) -> None:
        """Render visible layers, then overlays, then the debug layer on top."""
        tail = [self.debug_layer] if self.debug_layer is not None else []
        for layer in [*self._layers, *self._overlays, *tail]:
            if layer.visible:
                layer.on_render()