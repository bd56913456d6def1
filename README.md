# voxelspark

The core of a small voxel game in plain Python. It uses only the standard
library.

## Modules

- `voxelspark.stringformat`: `hex_value(value)` formats an integer as
  lower-case hex at least two digits wide. `hex_bytes(data)` formats each item
  as two hex digits followed by a space. Negative numbers are shown as
  unsigned 32-bit values. `hex_bytes` raises `ValueError` when the result
  would not fit `BUFFER_SIZE`.
- `voxelspark.timer`: `Timer` measures the seconds since it was created or
  since the last `reset()`. Read the value with `elapsed()`.
- `voxelspark.events`:
  - The `EventType` flags.
  - The events `KeyPressedEvent`, `KeyReleasedEvent`, `MousePressedEvent`,
    `MouseReleasedEvent` and `MouseMovedEvent`.
  - An `EventListener` base class.
  - An `EventDispatcher`. Its `dispatch(event_class, func)` calls `func` only
    when the event's type matches the class. The handler's return value is
    stored in `event.handled`.
- `voxelspark.components`: an `Entity` holds components such as
  `MeshComponent` and `TransformComponent`. `add_component` attaches one.
  `get_component(SomeComponent)` returns the first component of that kind, or
  `None` if there is none.
- `voxelspark.debugmenu`: `DebugMenu` keeps one visibility flag for the whole
  program. Call `DebugMenu.init()` first. Every other method raises
  `RuntimeError` until you have.
- `voxelspark.application`:
  - `Application` keeps a stack of layers, a stack of overlays and an
    optional debug layer.
  - Events go to the debug layer first, then to the overlays and then to the
    layers, topmost first. An event stops at the first receiver that sets
    `event.handled`.
  - `start()` runs a loop that updates 60 times a second and renders every
    frame. Once a second it records `fps` and `ups` and calls `on_tick`.
  - `Layer` is the base class for layers. By default it counts the ticks,
    updates and frames it receives.
- `voxelspark.debuglayer`: `DebugLayer` is a hidden layer. A fresh Ctrl+Tab
  key press shows or hides it. When it is initialised it lays out five
  labelled `DebugPanel` entries. If you give it a `FontManager` and a window
  size, it also scales the default font to fit the window.
- `voxelspark.fonts`:
  - `Font(name, filename, size)` reads a font file. `Font.from_data` builds a
    font from bytes you already hold.
  - `FontManager` keeps fonts in the order they were added.
    `get(name, size)` finds a font by name, and by size as well when one is
    given. `default()` returns the first font added.
- `voxelspark.blocks`:
  - `BlockKind` lists the block kinds (`AIR`, `STONE`, `DIRT`).
  - `Block.for_id` looks up a block. Unknown ids give air.
  - `cube_mesh()` returns the shared cube geometry: 24 vertices, 36 indices,
    normals and texture coordinates.
- `voxelspark.level`:
  - `Vec3` is the vector type.
  - `Level` is a 16×16×16 grid of block ids, filled at random: stone and dirt
    near the bottom, air above with scattered stone.
  - `get_block`, `set_block` and `cell_at` work on world positions. One block
    is 8 units across.
  - The ray casts are `raycast_block_id`, `raycast_collision`, `raycast_block`,
    `pick_block` and `raycast_pre_block_id`.
- `voxelspark.player`: a `Player` is a first-person walker. Each step, `apply`
  takes a `Controls` snapshot and does the following:
  - moves the player;
  - applies gravity and jumping;
  - turns the view with the mouse while the mouse is grabbed;
  - toggles the light and wireframe flags;
  - selects the block in view;
  - breaks the block in view on a left click;
  - places stone in front of it while the right button is held.

  `update()` does the same with the `controls` attribute.

## Installing

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
import random

from voxelspark.blocks import BlockKind
from voxelspark.events import EventDispatcher, KeyPressedEvent
from voxelspark.level import Level, Vec3
from voxelspark.player import Controls, Player

event = KeyPressedEvent(0x54, 0, 0)
EventDispatcher(event).dispatch(KeyPressedEvent, lambda e: e.key_code == 0x54)
assert event.handled

level = Level(rng=random.Random(0))
assert level.get_block((0.0, 0.0, 0.0)) == BlockKind.STONE

player = Player(Vec3(-45.0, 48.0, -45.0))
level.add(player)
player.apply(Controls(forward=True))
```

## What it does not do

The package draws nothing and opens no window.

- `Application.start()` needs a `window_factory` that returns an object with
  `clear()`, `update_input()`, `update()` and a `closed` flag. Without one,
  `start()` raises `RuntimeError`.
- Blocks name their texture files but never load them.
- Fonts keep the raw font bytes but do not rasterise glyphs.
- There is no sound and no saved game state.