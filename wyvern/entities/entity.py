"""Handles to entities living inside a dimension."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, TypeVar
from uuid import UUID

from wyvern.components import DataComponentType
from wyvern.entities.entity_components import EntityComponents
from wyvern.errors import ComponentNotFound

T = TypeVar("T")

PLAYER = "minecraft:player"


@dataclass(frozen=True)
class Entity:
    """A handle to an entity, addressed by its UUID within a dimension."""

    dimension: Any
    uuid: UUID

    def __hash__(self) -> int:
        return hash(self.uuid)

    def remove(self) -> None:
        self.dimension.remove_entity(self.uuid)

    def get(self, component: DataComponentType[T]) -> T:
        """Return a copy of one of the entity's components."""
        value = self.dimension.get_entity_component(self.uuid, component.name)
        if not isinstance(value, component.value_type):
            raise ComponentNotFound(component.name)
        return copy.deepcopy(value)

    def set(self, component: DataComponentType[T], value: T) -> None:
        self.dimension.set_entity_component(self.uuid, component.name, value)

    def is_human(self) -> bool:
        """Whether the entity is of the player type."""
        return self.get(EntityComponents.ENTITY_TYPE) == PLAYER