"""Per-tick entity behaviour: movement, gravity and worn equipment."""

from __future__ import annotations

import logging
import math
from typing import Any

from wyvern.entities.entity import Entity
from wyvern.entities.entity_components import EntityComponents
from wyvern.errors import ActorError, ComponentNotFound
from wyvern.item import EquipmentSlot, ItemStack

_log = logging.getLogger(__name__)

MOVE_ATTEMPTS = 9
VELOCITY_RETENTION = 0.9
GRAVITY = 0.08

_EQUIPMENT = (
    (EntityComponents.MAINHAND_ITEM, EquipmentSlot.MAINHAND),
    (EntityComponents.OFFHAND_ITEM, EquipmentSlot.OFFHAND),
    (EntityComponents.BODY_ITEM, EquipmentSlot.BODY),
    (EntityComponents.HELMET_ITEM, EquipmentSlot.HELMET),
    (EntityComponents.CHESTPLATE_ITEM, EquipmentSlot.CHESTPLATE),
    (EntityComponents.LEGGINGS_ITEM, EquipmentSlot.LEGGINGS),
    (EntityComponents.BOOTS_ITEM, EquipmentSlot.BOOTS),
)


def _optional(entity: Entity, kind, default=None):
    try:
        return entity.get(kind)
    except ComponentNotFound:
        return default


def entity_position(entity: Entity, dimension: Any) -> None:
    """Move an entity by its velocity and apply gravity, as enabled on it.

    With physics enabled the entity moves by its velocity into the first free
    (air) block; each blocked attempt halves the velocity. The velocity then
    decays. With gravity enabled the vertical velocity is reduced.
    """
    if _optional(entity, EntityComponents.PHYSICS_ENABLED) is True:
        velocity = _optional(entity, EntityComponents.VELOCITY)
        if velocity is not None:
            position = entity.get(EntityComponents.POSITION)
            for _ in range(MOVE_ATTEMPTS):
                moved = tuple(p + v for p, v in zip(position, velocity))
                block = dimension.get_block(tuple(math.floor(c) for c in moved))
                if block.is_air():
                    position = moved
                    break
                velocity = tuple(v / 2.0 for v in velocity)
            velocity = tuple(v * VELOCITY_RETENTION for v in velocity)
            entity.set(EntityComponents.POSITION, position)
            entity.set(EntityComponents.VELOCITY, velocity)

    if _optional(entity, EntityComponents.GRAVITY_ENABLED) is True:
        vx, vy, vz = _optional(entity, EntityComponents.VELOCITY, (0.0, 0.0, 0.0))
        entity.set(EntityComponents.VELOCITY, (vx, vy - GRAVITY, vz))


def _equipment(entity: Entity) -> list[tuple[EquipmentSlot, ItemStack]]:
    parts = []
    for kind, slot in _EQUIPMENT:
        item = _optional(entity, kind)
        if item is not None:
            parts.append((slot, item))
    return parts


def apply_entity_properties(dimension: Any) -> dict[int, list[tuple[EquipmentSlot, ItemStack]]]:
    """Run one tick of entity behaviour for every entity in ``dimension``.

    Returns the equipment worn by each entity that wears any, keyed by entity
    id (-1 for an entity without one). A failure for one entity is logged and
    does not stop the others.
    """
    worn: dict[int, list[tuple[EquipmentSlot, ItemStack]]] = {}
    for entity in dimension.all_entities():
        try:
            entity_position(entity, dimension)
            parts = _equipment(entity)
        except ActorError as error:
            _log.debug("entity %s update failed: %r", entity.uuid, error)
            continue
        if parts:
            worn[_optional(entity, EntityComponents.ENTITY_ID, -1)] = parts
    return worn