"""Entities made of typed components."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Optional, TypeVar


@dataclass(frozen=True)
class ComponentType:
    """Identity of a kind of component."""

    name: str


class Component:
    """Base for parts attached to an entity."""

    STATIC_TYPE: ClassVar[Optional[ComponentType]] = None

    def __init__(self) -> None:
        self.entity: Optional[Entity] = None

    @property
    def component_type(self) -> Optional[ComponentType]:
        return type(self).STATIC_TYPE


class MeshComponent(Component):
    """Attaches a mesh to an entity."""

    STATIC_TYPE: ClassVar[Optional[ComponentType]] = ComponentType("Mesh")

    def __init__(self, mesh: Any) -> None:
        super().__init__()
        self.mesh = mesh


class TransformComponent(Component):
    """Attaches a transform matrix to an entity."""

    STATIC_TYPE: ClassVar[Optional[ComponentType]] = ComponentType("Transform")

    def __init__(self, transform: Any) -> None:
        super().__init__()
        self.transform = transform


C = TypeVar("C", bound=Component)


@dataclass
class Entity:
    """A bag of components, looked up by component type."""

    components: list[Component] = field(default_factory=list)

    def add_component(self, component: Component) -> None:
        self.components.append(component)

    def get_component(self, component_class: type[C]) -> Optional[C]:
        """First component of the given class's type, or None."""
        wanted = component_class.STATIC_TYPE
        if wanted is None:
            raise TypeError(f"{component_class.__name__} has no component type")
        return next(
            (c for c in self.components if c.component_type is wanted),  # type: ignore[misc]
            None,
        )