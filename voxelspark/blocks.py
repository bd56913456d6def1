"""Block kinds of the voxel world and the cube mesh they share."""

from __future__ import annotations

import enum
import functools
from dataclasses import dataclass
from typing import ClassVar

BLOCK_SIZE = 8.0
"""Edge length of one block in world units."""

DIRT_TEXTURE = "res/dirt.png"
STONE_TEXTURE = "res/stone.png"

DEFAULT_COLOR = (0.3, 0.6, 0.2)


class BlockKind(enum.IntEnum):
    """Block identifiers as stored in a level."""

    AIR = 1
    STONE = 2
    DIRT = 3


@dataclass(frozen=True)
class CubeMesh:
    """Geometry of one cube: positions, triangle indices, normals and UVs."""

    vertices: tuple[float, ...]
    indices: tuple[int, ...]
    normals: tuple[float, ...]
    tex_coords: tuple[float, ...]

    @property
    def vertex_count(self) -> int:
        return len(self.vertices) // 3

    @property
    def index_count(self) -> int:
        return len(self.indices)


# Each face: its outward normal and four corners given as signs of the half size.
_FACES = (
    ((0.0, 0.0, 1.0), ((-1, -1, 1), (1, -1, 1), (1, 1, 1), (-1, 1, 1))),  # front
    ((0.0, 0.0, -1.0), ((-1, -1, -1), (-1, 1, -1), (1, 1, -1), (1, -1, -1))),  # back
    ((0.0, 1.0, 0.0), ((-1, 1, -1), (-1, 1, 1), (1, 1, 1), (1, 1, -1))),  # top
    ((0.0, -1.0, 0.0), ((-1, -1, -1), (1, -1, -1), (1, -1, 1), (-1, -1, 1))),  # bottom
    ((-1.0, 0.0, 0.0), ((-1, -1, -1), (-1, -1, 1), (-1, 1, 1), (-1, 1, -1))),  # left
    ((1.0, 0.0, 0.0), ((1, -1, -1), (1, 1, -1), (1, 1, 1), (1, -1, 1))),  # right
)

_FACE_UVS = ((0.0, 1.0), (1.0, 1.0), (1.0, 0.0), (0.0, 0.0))
_FACE_INDICES = (0, 1, 2, 2, 3, 0)


@functools.lru_cache(maxsize=None)
def cube_mesh() -> CubeMesh:
    """The shared block mesh: six faces of four corners, two triangles each."""
    half = BLOCK_SIZE / 2.0
    vertices: list[float] = []
    normals: list[float] = []
    tex_coords: list[float] = []
    indices: list[int] = []
    for face, (normal, corners) in enumerate(_FACES):
        base = face * len(corners)
        for corner in corners:
            vertices.extend(sign * half for sign in corner)
            normals.extend(normal)
        for uv in _FACE_UVS:
            tex_coords.extend(uv)
        indices.extend(base + offset for offset in _FACE_INDICES)
    return CubeMesh(tuple(vertices), tuple(indices), tuple(normals), tuple(tex_coords))


@dataclass(frozen=True)
class Block:
    """One kind of block: its identifier, texture and tint."""

    SIZE: ClassVar[float] = BLOCK_SIZE

    kind: BlockKind
    texture: str
    color: tuple[float, float, float] = DEFAULT_COLOR

    @property
    def id(self) -> int:
        return int(self.kind)

    @property
    def mesh(self) -> CubeMesh:
        return cube_mesh()

    def is_visible(self) -> bool:
        """Air is never drawn; every other block is."""
        return self.kind is not BlockKind.AIR

    @staticmethod
    def for_id(block_id: int) -> "Block":
        """The block drawn for an identifier; unknown identifiers draw as air."""
        if isinstance(block_id, bool) or not isinstance(block_id, int):
            raise TypeError(f"block id must be an integer, got {type(block_id).__name__}")
        try:
            kind = BlockKind(block_id)
        except ValueError:
            kind = BlockKind.AIR
        return _BLOCKS[kind]


_BLOCKS = {
    BlockKind.AIR: Block(BlockKind.AIR, DIRT_TEXTURE),
    BlockKind.STONE: Block(BlockKind.STONE, STONE_TEXTURE),
    BlockKind.DIRT: Block(BlockKind.DIRT, DIRT_TEXTURE),
}