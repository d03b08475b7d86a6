import pytest

from wyvern.components import DataComponentType
from wyvern.entities.attributes import AttributeContainer
from wyvern.errors import ComponentNotFound

MAX_HEALTH = DataComponentType("minecraft:max_health", float)
SCALE = DataComponentType("minecraft:scale", float)
ODD = DataComponentType("minecraft:odd")


def test_set_and_get():
    container = AttributeContainer()
    container.set(MAX_HEALTH, 20.0)
    assert container.get(MAX_HEALTH) == 20.0


def test_missing_attribute_raises():
    with pytest.raises(ComponentNotFound):
        AttributeContainer().get(SCALE)


def test_with_component_chains():
    container = AttributeContainer()
    result = container.with_component(MAX_HEALTH, 10.0).with_component(SCALE, 2.0)
    assert result is container
    assert container.as_properties() == [("minecraft:max_health", 10.0), ("minecraft:scale", 2.0)]


def test_non_float_value_is_zero():
    container = AttributeContainer().with_component(ODD, "text")
    assert container.as_properties() == [("minecraft:odd", 0.0)]


def test_empty_container_has_no_properties():
    assert AttributeContainer().as_properties() == []


def test_equality_follows_values():
    left = AttributeContainer().with_component(MAX_HEALTH, 20.0)
    right = AttributeContainer().with_component(MAX_HEALTH, 20.0)
    assert left == right
    right.set(MAX_HEALTH, 5.0)
    assert left != right