"""Item stacks and the components they carry."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from wyvern.components import DataComponentHolder, DataComponentMap, DataComponentType

AIR = "minecraft:air"


class EquipmentSlot(Enum):
    MAINHAND = "mainhand"
    OFFHAND = "offhand"
    HELMET = "helmet"
    CHESTPLATE = "chestplate"
    LEGGINGS = "leggings"
    BOOTS = "boots"
    BODY = "body"
    SADDLE = "saddle"


@dataclass(frozen=True)
class EquippableComponent:
    """Where an item is worn, the sound made on equipping, and its worn model."""

    slot: EquipmentSlot
    equip_sound: str
    model: str


class ItemComponents:
    """Component kinds that item stacks carry."""

    ITEM_COUNT = DataComponentType("minecraft:item_count", int)
    MAX_DAMAGE = DataComponentType("minecraft:max_damage", int)
    DAMAGE = DataComponentType("minecraft:damage", int)
    ITEM_MODEL = DataComponentType("minecraft:item_model", str)
    CUSTOM_DATA = DataComponentType("minecraft:custom_data", dict)
    ITEM_NAME = DataComponentType("minecraft:item_name")
    LORE = DataComponentType("minecraft:lore", list)
    EQUIPPABLE = DataComponentType("minecraft:equippable", EquippableComponent)
    CAN_BLOCK = DataComponentType("minecraft:can_block", bool)


@dataclass
class ItemStack(DataComponentHolder):
    """An item identifier and its components; new stacks hold one item."""

    id: str = AIR
    components: Optional[DataComponentMap] = None

    def __post_init__(self) -> None:
        if self.components is None:
            self.components = (
                DataComponentMap()
                .with_component(ItemComponents.ITEM_COUNT, 1)
                .with_component(ItemComponents.ITEM_MODEL, self.id)
            )

    @property
    def component_map(self) -> DataComponentMap:
        assert self.components is not None
        return self.components

    @classmethod
    def air(cls) -> ItemStack:
        return cls(AIR)

    def kind(self) -> str:
        return self.id