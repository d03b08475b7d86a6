# wyvern

Data-driven building blocks for a block-game server, in plain Python with no
third-party dependencies. State lives in typed component maps; blocks, chunks,
dimensions, entities, items and inventories are built on top of them, and an
event bus delivers server events to handlers.

## Modules

- `wyvern.errors` – `ActorError` and its subclasses `ActorDoesNotExist`,
  `ActorIsNotLoaded`, `IndexOutOfBounds` (also an `IndexError`), `BadRequest`
  (also a `ValueError`), `ComponentNotFound` (also a `LookupError`) and
  `ActorHasBeenDropped`.
- `wyvern.components` – `DataComponentType` (a name plus the type values must
  have), `DataComponentMap` (`set`, `with_component`, `get`, `contains`,
  `contains_type`, `keys`, `remove`, `copy`), `DataComponentPatch.from_maps`
  to find added/changed and removed keys between two maps, and the
  `DataComponentHolder` mixin. `get` returns a deep copy and raises
  `ComponentNotFound` when the key is missing or holds a value of another type.
- `wyvern.blocks.properties` – the enums `BlockDirection`, `Axis`, `BedPart`,
  `Half`, `StairShape` and `BlockType`; `str()` of a member is its property
  string (`"inner_left"`, `"x"`, ...).
- `wyvern.blocks.block_components` – `BlockComponents` (`WATERLOGGED`, `AXIS`,
  `FACING`, `AGE`, `CUSTOM_DATA`, ...), `components_to_array` and
  `array_to_components`, which convert between components and sorted string
  properties such as `{"axis": "y", "waterlogged": "true"}`. Unknown names and
  unparsable values are skipped.
- `wyvern.blocks.state` – `BlockState` (a block id plus components) with
  `air()`, `is_air()`, `to_dict()` and `from_dict()` using the `Name` /
  `Properties` layout.
- `wyvern.blocks.structure` – `StructureBlock`, `Structure` (`place`,
  `to_dict`, `from_dict`) and `split_structure`, which groups blocks into
  pieces keyed by piece coordinates.
- `wyvern.chunk` – `ChunkSection` (16×16×16 blocks with a count of non-air
  blocks) and `Chunk`, a column of sections.
- `wyvern.dimension` – `Dimension`: generates chunks on demand through a
  pluggable generator, within optional chunk limits; sets and gets blocks;
  spawns, looks up and removes entities; `collect_entity_updates` reports
  entities whose position or direction changed since the last call.
- `wyvern.entities.entity_components` – `EntityComponents`, `PlayerSkinData`
  and `EntityData`.
- `wyvern.entities.entity` – `Entity`, a handle (dimension plus UUID) with
  `get`, `set`, `remove` and `is_human`.
- `wyvern.entities.physics` – `entity_position` (velocity, collision with
  non-air blocks, velocity decay, gravity) and `apply_entity_properties`,
  which runs that for every entity of a dimension and returns worn equipment
  keyed by entity id.
- `wyvern.entities.attributes` – `AttributeContainer` with `as_properties()`.
- `wyvern.item` – `ItemStack` (new stacks hold a count of 1 and a model equal
  to their id), `ItemComponents`, `EquipmentSlot`, `EquippableComponent`.
- `wyvern.inventory` – the `Inventory` base class and `DataInventory`, an
  in-memory inventory; reading an empty slot raises `IndexOutOfBounds`.
- `wyvern.events` – the event classes (`PlayerJoinEvent`, `ChunkLoadEvent`,
  `ChatMessageEvent`, ...) and `EventBus` with `add_handler` and `dispatch`.

## Examples

Blocks in a dimension:

```python
from wyvern.dimension import Dimension
from wyvern.blocks.state import BlockState
from wyvern.blocks.block_components import BlockComponents
from wyvern.blocks.properties import Axis

world = Dimension("minecraft:overworld")
log = BlockState("minecraft:oak_log").with_component(BlockComponents.AXIS, Axis.Y)
world.set_block((3, 64, -5), log)

world.get_block((3, 64, -5)).get(BlockComponents.AXIS)   # Axis.Y
world.get_block((0, 0, 0)).is_air()                      # True
log.to_dict()   # {'Name': 'minecraft:oak_log', 'Properties': {'axis': 'y'}}
```

Entities:

```python
from wyvern.entities.entity_components import EntityComponents
from wyvern.entities.physics import apply_entity_properties

zombie = world.spawn_entity("minecraft:zombie")
zombie.set(EntityComponents.PHYSICS_ENABLED, True)
zombie.set(EntityComponents.VELOCITY, (1.0, 0.0, 0.0))

apply_entity_properties(world)
zombie.get(EntityComponents.POSITION)    # (1.0, 0.0, 0.0)
world.collect_entity_updates()           # one EntityUpdate for the zombie
```

Component patches:

```python
from wyvern.components import DataComponentMap, DataComponentPatch

before = DataComponentMap().with_component(EntityComponents.ENTITY_ID, 7)
after = DataComponentMap().with_component(EntityComponents.PLAYER_CONTROLLED, False)

patch = DataComponentPatch.from_maps(before, after)
patch.added_fields.keys()   # ['minecraft:player_controlled']
patch.removed_fields        # ['minecraft:entity_id']
```

Events:

```python
from wyvern.events import EventBus, ChatMessageEvent

bus = EventBus()
bus.add_handler(ChatMessageEvent, lambda event: print(event.message))
bus.dispatch(ChatMessageEvent(player=None, message="hello"))
```

Handlers run in registration order on the calling thread; one that raises is
logged and the rest still run. Registering or dispatching a type the bus does
not carry (for example `StopBreakBlockEvent`) raises `TypeError`.

## What it does not do

This package holds game state and logic only. It does not accept client
connections, speak a network protocol, or send packets: `collect_entity_updates`
and `apply_entity_properties` return what changed rather than delivering it.
It has no server, no tick loop and no command line. Nothing is written to
disk: structures convert to and from plain dictionaries, and
`split_structure` returns its pieces in memory. There is no registry of block,
item or entity types; any identifier string is accepted.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```