"""Component kinds carried by entities, and entity data records."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field

from wyvern.components import DataComponentHolder, DataComponentMap, DataComponentType


@dataclass(frozen=True)
class PlayerSkinData:
    """Signed skin texture data for a human entity."""

    texture: str
    signature: str


class EntityComponents:
    """Component kinds that entities carry."""

    ENTITY_TYPE = DataComponentType("minecraft:entity_type", str)
    POSITION = DataComponentType("minecraft:position", tuple)
    DIRECTION = DataComponentType("minecraft:direction", tuple)
    UUID = DataComponentType("minecraft:uuid", uuid.UUID)
    ENTITY_ID = DataComponentType("minecraft:entity_id", int)

    PLAYER_CONTROLLED = DataComponentType("minecraft:player_controlled", bool)
    PLAYER_SKIN = DataComponentType("minecraft:player_skin", PlayerSkinData)

    VELOCITY = DataComponentType("minecraft:velocity", tuple)
    PHYSICS_ENABLED = DataComponentType("minecraft:physics", bool)
    GRAVITY_ENABLED = DataComponentType("minecraft:gravity", bool)
    DRAG_ENABLED = DataComponentType("minecraft:drag", bool)

    MAINHAND_ITEM = DataComponentType("minecraft:equipment/mainhand")
    OFFHAND_ITEM = DataComponentType("minecraft:equipment/offhand")
    BODY_ITEM = DataComponentType("minecraft:equipment/body")
    HELMET_ITEM = DataComponentType("minecraft:equipment/helmet")
    CHESTPLATE_ITEM = DataComponentType("minecraft:equipment/chestplate")
    LEGGINGS_ITEM = DataComponentType("minecraft:equipment/leggings")
    BOOTS_ITEM = DataComponentType("minecraft:equipment/boots")


@dataclass
class EntityData(DataComponentHolder):
    """An entity's current components and those last sent to clients."""

    components: DataComponentMap = field(default_factory=DataComponentMap)
    last_components: DataComponentMap = field(default_factory=DataComponentMap)

    @property
    def component_map(self) -> DataComponentMap:
        return self.components