import pytest

from voxelspark.components import (
    Component,
    ComponentType,
    Entity,
    MeshComponent,
    TransformComponent,
)


def test_component_type_names():
    assert MeshComponent("m").component_type.name == "Mesh"
    assert TransformComponent("t").component_type.name == "Transform"


def test_instance_type_is_static_type():
    mesh = MeshComponent("mesh")
    assert mesh.component_type is MeshComponent.STATIC_TYPE
    assert Component().component_type is None


def test_get_component_finds_by_type():
    entity = Entity()
    mesh = MeshComponent("cube")
    transform = TransformComponent([[1, 0], [0, 1]])
    entity.add_component(mesh)
    entity.add_component(transform)
    assert entity.get_component(MeshComponent) is mesh
    assert entity.get_component(TransformComponent) is transform
    assert entity.get_component(MeshComponent).mesh == "cube"


def test_get_component_missing_returns_none():
    entity = Entity()
    entity.add_component(MeshComponent("m"))
    assert entity.get_component(TransformComponent) is None


def test_get_component_returns_first_match():
    entity = Entity()
    first = MeshComponent("a")
    entity.add_component(first)
    entity.add_component(MeshComponent("b"))
    assert entity.get_component(MeshComponent) is first


def test_get_component_base_class_raises():
    with pytest.raises(TypeError):
        Entity().get_component(Component)


def test_transform_is_mutable():
    entity = Entity()
    entity.add_component(TransformComponent("identity"))
    entity.get_component(TransformComponent).transform = "moved"
    assert entity.get_component(TransformComponent).transform == "moved"


def test_component_type_equality_by_name():
    assert ComponentType("Mesh") == MeshComponent("m").component_type