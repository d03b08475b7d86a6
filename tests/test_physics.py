import pytest

from wyvern.blocks.state import BlockState
from wyvern.dimension import Dimension
from wyvern.entities.entity_components import EntityComponents
from wyvern.entities.physics import apply_entity_properties, entity_position
from wyvern.errors import IndexOutOfBounds
from wyvern.item import EquipmentSlot, ItemStack

STONE = BlockState("minecraft:stone")


@pytest.fixture
def dim():
    return Dimension("minecraft:overworld")


def _mover(dim, position, velocity):
    entity = dim.spawn_entity("minecraft:zombie")
    entity.set(EntityComponents.PHYSICS_ENABLED, True)
    entity.set(EntityComponents.POSITION, position)
    entity.set(EntityComponents.VELOCITY, velocity)
    return entity


def test_moves_into_free_space(dim):
    entity = _mover(dim, (0.5, 0.5, 0.5), (0.25, 0.0, 0.0))
    entity_position(entity, dim)
    assert entity.get(EntityComponents.POSITION) == pytest.approx((0.75, 0.5, 0.5))
    assert entity.get(EntityComponents.VELOCITY)[0] == pytest.approx(0.25 * 0.9)


def test_blocked_move_is_shortened(dim):
    dim.set_block((1, 0, 0), STONE)
    entity = _mover(dim, (0.5, 0.5, 0.5), (1.0, 0.0, 0.0))
    entity_position(entity, dim)
    x = entity.get(EntityComponents.POSITION)[0]
    assert 0.5 < x < 1.0
    assert entity.get(EntityComponents.VELOCITY)[0] < 0.9
    assert dim.get_block((1, 0, 0)).name == "minecraft:stone"


def test_fully_blocked_entity_stays(dim):
    dim.set_block((0, 0, 0), STONE)
    entity = _mover(dim, (0.5, 0.5, 0.5), (0.01, 0.0, 0.0))
    entity_position(entity, dim)
    assert entity.get(EntityComponents.POSITION) == (0.5, 0.5, 0.5)
    velocity = entity.get(EntityComponents.VELOCITY)
    assert 0.0 < velocity[0] < 0.01 * 0.9


def test_physics_disabled_leaves_entity(dim):
    entity = dim.spawn_entity("minecraft:zombie")
    entity.set(EntityComponents.VELOCITY, (1.0, 0.0, 0.0))
    entity_position(entity, dim)
    assert entity.get(EntityComponents.POSITION) == (0.0, 0.0, 0.0)
    assert entity.get(EntityComponents.VELOCITY) == (1.0, 0.0, 0.0)


def test_gravity_reduces_vertical_velocity(dim):
    entity = dim.spawn_entity("minecraft:zombie")
    entity.set(EntityComponents.GRAVITY_ENABLED, True)
    entity_position(entity, dim)
    assert entity.get(EntityComponents.VELOCITY)[1] == pytest.approx(-0.08)
    assert entity.get(EntityComponents.POSITION) == (0.0, 0.0, 0.0)


def test_move_beyond_chunk_limits_raises(dim):
    dim.set_chunk_limits(-1, -1)
    entity = _mover(dim, (0.5, 0.5, 0.5), (0.25, 0.0, 0.0))
    with pytest.raises(IndexOutOfBounds):
        entity_position(entity, dim)


def test_apply_reports_equipment_in_slot_order(dim):
    entity = dim.spawn_entity("minecraft:zombie")
    boots = ItemStack("minecraft:iron_boots")
    sword = ItemStack("minecraft:diamond_sword")
    entity.set(EntityComponents.BOOTS_ITEM, boots)
    entity.set(EntityComponents.MAINHAND_ITEM, sword)
    dim.spawn_entity("minecraft:pig")
    worn = apply_entity_properties(dim)
    entity_id = entity.get(EntityComponents.ENTITY_ID)
    assert list(worn) == [entity_id]
    assert worn[entity_id] == [(EquipmentSlot.MAINHAND, sword), (EquipmentSlot.BOOTS, boots)]


def test_apply_moves_entities(dim):
    entity = _mover(dim, (0.5, 0.5, 0.5), (0.25, 0.0, 0.0))
    assert apply_entity_properties(dim) == {}
    assert entity.get(EntityComponents.POSITION) == pytest.approx((0.75, 0.5, 0.5))


def test_apply_survives_failures(dim):
    dim.set_chunk_limits(-1, -1)
    entity = _mover(dim, (0.5, 0.5, 0.5), (0.25, 0.0, 0.0))
    assert apply_entity_properties(dim) == {}
    assert entity.get(EntityComponents.POSITION) == (0.5, 0.5, 0.5)