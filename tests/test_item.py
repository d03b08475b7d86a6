import pytest

from wyvern.errors import ComponentNotFound
from wyvern.item import EquipmentSlot, EquippableComponent, ItemComponents, ItemStack

STONE = "minecraft:stone"


def test_new_stack_defaults():
    stack = ItemStack(STONE)
    assert stack.get(ItemComponents.ITEM_COUNT) == 1
    assert stack.get(ItemComponents.ITEM_MODEL) == STONE
    assert stack.kind() == STONE


def test_air_and_default():
    assert ItemStack.air().kind() == "minecraft:air"
    assert ItemStack() == ItemStack.air()
    assert ItemStack.air().get(ItemComponents.ITEM_MODEL) == "minecraft:air"


def test_equality_follows_components():
    first, second = ItemStack(STONE), ItemStack(STONE)
    assert first == second
    second.set(ItemComponents.ITEM_COUNT, 64)
    assert first != second
    assert second.get(ItemComponents.ITEM_COUNT) == 64


def test_with_component_chains():
    stack = ItemStack(STONE)
    assert stack.with_component(ItemComponents.CAN_BLOCK, True) is stack
    assert stack.get(ItemComponents.CAN_BLOCK) is True


def test_missing_component():
    with pytest.raises(ComponentNotFound):
        ItemStack(STONE).get(ItemComponents.DAMAGE)


def test_wrong_value_type_is_not_found():
    stack = ItemStack(STONE)
    stack.set(ItemComponents.DAMAGE, "5")
    with pytest.raises(ComponentNotFound):
        stack.get(ItemComponents.DAMAGE)


def test_equippable_round_trip():
    component = EquippableComponent(EquipmentSlot.HELMET, "minecraft:item.armor.equip_iron", "iron")
    stack = ItemStack("minecraft:iron_helmet").with_component(ItemComponents.EQUIPPABLE, component)
    assert stack.get(ItemComponents.EQUIPPABLE) == component


def test_get_returns_copy():
    stack = ItemStack(STONE).with_component(ItemComponents.LORE, ["first"])
    lore = stack.get(ItemComponents.LORE)
    lore.append("second")
    assert stack.get(ItemComponents.LORE) == ["first"]


def test_equipment_slots():
    names = []
    for slot in EquipmentSlot:
        component = EquippableComponent(slot, "minecraft:item.armor.equip_generic", "model")
        stack = ItemStack(STONE).with_component(ItemComponents.EQUIPPABLE, component)
        names.append(stack.get(ItemComponents.EQUIPPABLE).slot.name)
    assert names == [
        "MAINHAND",
        "OFFHAND",
        "HELMET",
        "CHESTPLATE",
        "LEGGINGS",
        "BOOTS",
        "BODY",
        "SADDLE",
    ]