"""A fixed-size voxel level with ray marching queries."""

from __future__ import annotations

import itertools
import math
import random
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, ClassVar, Optional, Union

from voxelspark.blocks import BLOCK_SIZE, BlockKind


@dataclass(frozen=True)
class Vec3:
    """An immutable three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: "Vec3") -> "Vec3":
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vec3") -> "Vec3":
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> "Vec3":
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Vec3":
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> "Vec3":
        return Vec3(-self.x, -self.y, -self.z)

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))


VecLike = Union[Vec3, Iterable[float]]


def _vec(value: VecLike) -> Vec3:
    if isinstance(value, Vec3):
        return value
    x, y, z = value
    return Vec3(x, y, z)


class Level:
    """A 16x16x16 grid of block ids plus the entities living in it.

    World x maps to grid width, world y to height and world z to depth;
    one block spans BLOCK_SIZE world units.
    """

    WIDTH: ClassVar[int] = 16
    DEPTH: ClassVar[int] = 16
    HEIGHT: ClassVar[int] = 16

    NULL_BLOCK: ClassVar[int] = 0
    NULL_COORD: ClassVar[Vec3] = Vec3(-1.0, -1.0, -1.0)

    MAX_DISTANCE: ClassVar[float] = 32.0
    COLLISION_DISTANCE: ClassVar[float] = 2.0
    ITERATION: ClassVar[float] = 0.5

    def __init__(
        self, rng: Optional[random.Random] = None, entities: Iterable[Any] = ()
    ) -> None:
        rng = rng if rng is not None else random.Random()
        # Stored as [x][depth][height].
        self._blocks = [
            [[int(BlockKind.AIR)] * self.HEIGHT for _ in range(self.DEPTH)]
            for _ in range(self.WIDTH)
        ]
        for z, y, x in itertools.product(
            range(self.HEIGHT), range(self.DEPTH), range(self.WIDTH)
        ):
            self._blocks[x][y][z] = self._generate(z, rng)
        self.entities: list[Any] = []
        self.selected_block = Vec3()
        for entity in entities:
            self.add(entity)

    def _generate(self, height: int, rng: random.Random) -> int:
        if height < 1:
            return int(BlockKind.STONE)
        if height < 4 and rng.randrange(3) == 0:
            return int(BlockKind.DIRT)
        if height < 4:
            return int(BlockKind.STONE)
        if height < 5:
            return int(BlockKind.DIRT)
        if height < self.HEIGHT and rng.randrange(30) == 0:
            return int(BlockKind.STONE)
        return int(BlockKind.AIR)

    def add(self, entity: Any) -> None:
        """Attach an entity to this level and keep it for updates."""
        entity.init(self)
        self.entities.append(entity)

    def update(self) -> None:
        for entity in self.entities:
            entity.update()

    def select_block(self, block: VecLike) -> None:
        """Remember the grid cell (x, depth, height) under the cursor."""
        self.selected_block = _vec(block)

    def cell_at(self, position: VecLike) -> Optional[tuple[int, int, int]]:
        """Grid cell (x, y, z) holding a world position, or None outside the level."""
        cell = _vec(position) / BLOCK_SIZE
        if cell.x < 0 or cell.y < 0 or cell.z < 0:
            return None
        if cell.x >= self.WIDTH or cell.y >= self.HEIGHT or cell.z >= self.DEPTH:
            return None
        return (int(cell.x), int(cell.y), int(cell.z))

    def get_block(self, position: VecLike) -> int:
        """Block id at a world position, or NULL_BLOCK outside the level."""
        cell = self.cell_at(position)
        if cell is None:
            return self.NULL_BLOCK
        x, y, z = cell
        return self._blocks[x][z][y]

    def set_block(self, position: VecLike, block_id: int) -> None:
        """Store a block id at a world position; raises IndexError outside the level."""
        cell = self.cell_at(position)
        if cell is None:
            raise IndexError(f"position {_vec(position)} is outside the level")
        x, y, z = cell
        self._blocks[x][z][y] = int(block_id)

    def get_intersecting_block(self, entity: Any) -> int:
        """Block id at the entity's position."""
        return self.get_block(entity.position)

    @staticmethod
    def _ray_vector(rotation: VecLike) -> Vec3:
        rot = _vec(rotation)
        yaw = math.radians(rot.y - 90.0)
        return Vec3(math.cos(yaw), -math.tan(math.radians(rot.x)), math.sin(yaw))

    def _is_solid(self, block_id: int) -> bool:
        return block_id != BlockKind.AIR and block_id != self.NULL_BLOCK

    def _march(self, start: Vec3, direction: Vec3, distance: float) -> Iterator[Vec3]:
        position = start
        length = 0.0
        while length < distance:
            position = position + direction * self.ITERATION
            yield position
            length += self.ITERATION

    def _first_hit(
        self, position: VecLike, direction: Vec3, distance: float
    ) -> Optional[Vec3]:
        start = -_vec(position)
        return next(
            (
                point
                for point in self._march(start, direction, distance)
                if self._is_solid(self.get_block(point))
            ),
            None,
        )

    def raycast_block_id(
        self, position: VecLike, direction: VecLike, distance: float = MAX_DISTANCE
    ) -> int:
        """Id of the first solid block along a ray from the negated position."""
        hit = self._first_hit(position, _vec(direction), distance)
        return self.NULL_BLOCK if hit is None else self.get_block(hit)

    def raycast_collision(self, position: VecLike, direction: VecLike) -> int:
        """Id of a solid block within collision range, or NULL_BLOCK."""
        return self.raycast_block_id(position, direction, self.COLLISION_DISTANCE)

    def pick_block(self, position: VecLike, rotation: VecLike) -> Optional[Vec3]:
        """World point inside the first solid block in view, or None."""
        return self._first_hit(position, self._ray_vector(rotation), self.MAX_DISTANCE)

    def raycast_block(self, position: VecLike, rotation: VecLike) -> Vec3:
        """Grid cell (x, depth, height) of the block in view, or NULL_COORD."""
        hit = self._first_hit(position, self._ray_vector(rotation), self.MAX_DISTANCE)
        if hit is None:
            return self.NULL_COORD
        return Vec3(
            int(hit.x / BLOCK_SIZE), int(hit.z / BLOCK_SIZE), int(hit.y / BLOCK_SIZE)
        )

    def raycast_pre_block_id(
        self, position: VecLike, rotation: VecLike
    ) -> Optional[Vec3]:
        """World point where a new block goes in front of the one in view, or None."""
        ray = self._ray_vector(rotation)
        hit = self._first_hit(position, ray, self.MAX_DISTANCE)
        if hit is None:
            return None
        return (hit - ray) * self.ITERATION