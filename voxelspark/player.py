"""Entities that live in a level, and the first-person player."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

from voxelspark.blocks import BlockKind
from voxelspark.level import Level, Vec3, VecLike, _vec

SCREEN_CENTER = (960 // 2, 540 // 2)
"""Window point the cursor is pulled back to while the mouse is grabbed."""

GRAVITY = Vec3(0.0, -1.0, 0.0)
GROUND_PROBE_DISTANCE = 10.0

DEFAULT_SPEED = 0.7
DEFAULT_MOUSE_SENSITIVITY = 0.2
DEFAULT_JUMP_HEIGHT = 1.5
TARGET_SIZE = 0.2
"""Edge length of the crosshair square drawn in the middle of the screen."""

MAX_PITCH = 90.0
MIN_FALL_SPEED = -1.0
MAX_RISE_SPEED = 2.0
JUMP_ACCELERATION = 0.5
GRAVITY_ACCELERATION = 0.15


@dataclass(frozen=True)
class Controls:
    """Input state for one update.

    Held keys and buttons are true while down; the toggles and the left
    click are true only on the update in which they were typed or clicked.
    """

    forward: bool = False
    back: bool = False
    left: bool = False
    right: bool = False
    jump: bool = False
    escape: bool = False
    toggle_light: bool = False
    toggle_wireframe: bool = False
    left_click: bool = False
    right_held: bool = False
    mouse: tuple[float, float] = (float(SCREEN_CENTER[0]), float(SCREEN_CENTER[1]))


class LevelEntity(ABC):
    """Something with a position that belongs to a level."""

    def __init__(self, position: VecLike = Vec3()) -> None:
        self.position = _vec(position)
        self.level: Optional[Level] = None

    def init(self, level: Any) -> None:
        """Attach the entity to a level."""
        self.level = level

    @abstractmethod
    def update(self) -> None:
        """Advance the entity by one fixed step."""


class Player(LevelEntity):
    """First-person walker that looks, jumps, breaks and places blocks.

    The position is kept negated on the y axis, as the view transform uses it.
    """

    def __init__(self, spawn: VecLike) -> None:
        start = _vec(spawn)
        super().__init__(Vec3(start.x, -start.y, start.z))
        self.rotation = Vec3()
        self.mouse_sensitivity = DEFAULT_MOUSE_SENSITIVITY
        self.speed = DEFAULT_SPEED
        self.jump_height = DEFAULT_JUMP_HEIGHT
        self.dy = 0.0
        self.jumping = False
        self.light = True
        self.wireframe = False
        self.mouse_grabbed = False
        self.cursor_visible = False
        self.cursor_position: tuple[float, float] = (
            float(SCREEN_CENTER[0]),
            float(SCREEN_CENTER[1]),
        )
        self.controls = Controls()

    @property
    def eye_position(self) -> Vec3:
        """World position handed to the lighting as the player's position."""
        return -self.position

    def update(self) -> None:
        """Advance one step using the current controls."""
        self.apply(self.controls)

    def _level(self) -> Level:
        if self.level is None:
            raise RuntimeError("the player has not been added to a level")
        return self.level

    def _step(self, yaw: float, sign: float = 1.0) -> None:
        angle = math.radians(yaw)
        xa = -math.sin(angle) * self.speed * sign
        za = math.cos(angle) * self.speed * sign
        self.position = Vec3(self.position.x + xa, self.position.y, self.position.z + za)

    def _move(self, controls: Controls) -> None:
        yaw = self.rotation.y
        if controls.forward:
            self._step(yaw)
        if controls.back:
            self._step(yaw, -1.0)
        if controls.left:
            self._step(yaw - 90.0)
        if controls.right:
            self._step(yaw + 90.0)

    def _fall(self, level: Level, controls: Controls) -> None:
        on_ground = level.raycast_block_id(
            self.position, GRAVITY, GROUND_PROBE_DISTANCE
        ) > 1
        if not on_ground or self.jumping:
            self.position = Vec3(
                self.position.x, self.position.y - self.dy, self.position.z
            )
        self.dy = min(max(self.dy, MIN_FALL_SPEED), MAX_RISE_SPEED)
        if self.jumping:
            self.dy += JUMP_ACCELERATION
        if self.dy > self.jump_height:
            self.jumping = False
        if not self.jumping and self.dy > -self.jump_height:
            self.dy -= GRAVITY_ACCELERATION
        if controls.jump and not self.jumping and on_ground:
            self.jumping = True

    def _look(self, controls: Controls) -> None:
        if self.mouse_grabbed:
            mx = SCREEN_CENTER[0] - controls.mouse[0]
            my = SCREEN_CENTER[1] - controls.mouse[1]
            self.rotation = Vec3(
                self.rotation.x - my * self.mouse_sensitivity,
                self.rotation.y - mx * self.mouse_sensitivity,
                self.rotation.z,
            )
            self.cursor_position = (float(SCREEN_CENTER[0]), float(SCREEN_CENTER[1]))
        if controls.escape:
            self.mouse_grabbed = False
            self.cursor_visible = True
        pitch = min(max(self.rotation.x, -MAX_PITCH), MAX_PITCH)
        self.rotation = Vec3(pitch, self.rotation.y, self.rotation.z)

    def _edit(self, level: Level, controls: Controls) -> None:
        if controls.left_click:
            if not self.mouse_grabbed:
                self.mouse_grabbed = True
                self.cursor_visible = False
                return
            hit = level.pick_block(self.position, self.rotation)
            if hit is not None:
                level.set_block(hit, int(BlockKind.AIR))
        elif controls.right_held:
            spot = level.raycast_pre_block_id(self.position, self.rotation)
            if spot is not None and level.get_block(spot) == BlockKind.AIR:
                level.set_block(spot, int(BlockKind.STONE))

    def apply(self, controls: Controls) -> None:
        """Advance one step with the given input."""
        level = self._level()
        self._move(controls)
        self._fall(level, controls)
        if controls.toggle_light:
            self.light = not self.light
        self._look(controls)
        level.select_block(level.raycast_block(self.position, self.rotation))
        self._edit(level, controls)
        if controls.toggle_wireframe:
            self.wireframe = not self.wireframe