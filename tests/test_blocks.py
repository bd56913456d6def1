import math

import pytest

from voxelspark.blocks import (
    BLOCK_SIZE,
    DIRT_TEXTURE,
    STONE_TEXTURE,
    Block,
    BlockKind,
    CubeMesh,
    cube_mesh,
)


def test_block_size_matches_mesh_extent():
    assert Block.for_id(2).SIZE == 8.0
    assert max(cube_mesh().vertices) == BLOCK_SIZE / 2.0


def test_mesh_counts_match_buffer_sizes():
    mesh = cube_mesh()
    assert len(mesh.vertices) == 6 * 4 * 3
    assert len(mesh.normals) == 6 * 4 * 3
    assert len(mesh.indices) == 6 * 6
    assert len(mesh.tex_coords) == 6 * 4 * 2
    assert mesh.vertex_count == 24
    assert mesh.index_count == 36


def test_mesh_is_shared():
    assert cube_mesh() is cube_mesh()
    assert Block.for_id(2).mesh is cube_mesh()


def test_mesh_indices_stay_in_range():
    mesh = cube_mesh()
    assert min(mesh.indices) == 0
    assert max(mesh.indices) == mesh.vertex_count - 1


def test_every_face_uses_its_own_quad():
    mesh = cube_mesh()
    faces = [mesh.indices[i : i + 6] for i in range(0, len(mesh.indices), 6)]
    for face in faces:
        assert len(set(face)) == 4
        assert face[0] == face[5]
        assert face[2] == face[3]
        assert max(face) - min(face) == 3


def test_vertices_are_cube_corners():
    mesh = cube_mesh()
    assert {abs(v) for v in mesh.vertices} == {BLOCK_SIZE / 2.0}


def test_vertices_lie_on_their_face_plane():
    mesh = cube_mesh()
    for i in range(mesh.vertex_count):
        vertex = mesh.vertices[i * 3 : i * 3 + 3]
        normal = mesh.normals[i * 3 : i * 3 + 3]
        assert math.isclose(math.sqrt(sum(n * n for n in normal)), 1.0)
        dot = sum(v * n for v, n in zip(vertex, normal))
        assert math.isclose(dot, BLOCK_SIZE / 2.0)


def test_tex_coords_are_unit_square():
    mesh = cube_mesh()
    assert set(mesh.tex_coords) == {0.0, 1.0}
    assert mesh.tex_coords[:8] == (0.0, 1.0, 1.0, 1.0, 1.0, 0.0, 0.0, 0.0)


def test_mesh_is_immutable():
    mesh = cube_mesh()
    with pytest.raises(AttributeError):
        mesh.vertices = ()
    assert isinstance(mesh, CubeMesh) and mesh.index_count == 36


@pytest.mark.parametrize(
    "block_id, kind, texture",
    [
        (1, BlockKind.AIR, DIRT_TEXTURE),
        (2, BlockKind.STONE, STONE_TEXTURE),
        (3, BlockKind.DIRT, DIRT_TEXTURE),
    ],
)
def test_for_id(block_id, kind, texture):
    block = Block.for_id(block_id)
    assert block.kind is kind
    assert block.id == block_id
    assert block.texture == texture


def test_texture_paths():
    assert Block.for_id(BlockKind.STONE).texture == "res/stone.png"
    assert Block.for_id(BlockKind.DIRT).texture == "res/dirt.png"


def test_unknown_ids_draw_as_air():
    assert Block.for_id(0) is Block.for_id(BlockKind.AIR)
    assert Block.for_id(99) is Block.for_id(BlockKind.AIR)


def test_for_id_returns_shared_instances():
    assert Block.for_id(2) is Block.for_id(BlockKind.STONE)


def test_for_id_rejects_non_integers():
    with pytest.raises(TypeError):
        Block.for_id("2")


def test_visibility():
    assert Block.for_id(BlockKind.AIR).is_visible() is False
    assert Block.for_id(BlockKind.STONE).is_visible() is True
    assert Block.for_id(BlockKind.DIRT).is_visible() is True


def test_default_color():
    assert Block.for_id(2).color == (0.3, 0.6, 0.2)