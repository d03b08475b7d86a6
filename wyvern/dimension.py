"""Dimensions: chunked block storage plus the entities living in it."""

from __future__ import annotations

import itertools
import threading
import uuid as uuid_module
from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence
from uuid import UUID

from wyvern.blocks.state import BlockState
from wyvern.chunk import SECTION_SIZE, Chunk
from wyvern.components import DataComponentMap, DataComponentPatch
from wyvern.entities.entity import PLAYER, Entity
from wyvern.entities.entity_components import EntityComponents, EntityData, PlayerSkinData
from wyvern.errors import ComponentNotFound, IndexOutOfBounds

ChunkGenerator = Callable[[Chunk, int, int], None]
ChunkLoadListener = Callable[["Dimension", tuple[int, int]], None]

_I32_MAX = 2**31 - 1


def _div_trunc(value: int, divisor: int) -> int:
    quotient = abs(value) // abs(divisor)
    return quotient if (value >= 0) == (divisor > 0) else -quotient


def _no_op_generator(chunk: Chunk, x: int, z: int) -> None:
    return None


@dataclass(frozen=True)
class EntityUpdate:
    """A position and direction change of an entity, and the players to tell."""

    entity_id: int
    position: tuple
    direction: tuple
    recipients: tuple[UUID, ...]


class Dimension:
    """A world of chunks generated on demand, holding entities by UUID."""

    def __init__(
        self,
        name: str,
        dim_type: str = "minecraft:overworld",
        *,
        min_y: int = -64,
        height: int = 384,
        new_entity_id: Optional[Callable[[], int]] = None,
        on_chunk_load: Optional[ChunkLoadListener] = None,
    ) -> None:
        self.name = name
        self.dim_type = dim_type
        self.min_y = min_y
        self.height = height
        self._chunks: dict[tuple[int, int], Chunk] = {}
        self._entities: dict[UUID, EntityData] = {}
        self._chunk_generator: ChunkGenerator = _no_op_generator
        self._chunk_max = (_I32_MAX, _I32_MAX)
        self._new_entity_id = new_entity_id or itertools.count(1).__next__
        self._on_chunk_load = on_chunk_load
        self._lock = threading.RLock()

    def __repr__(self) -> str:
        return f"Dimension({self.name!r})"

    # Chunks and blocks

    def set_chunk_generator(self, function: ChunkGenerator) -> None:
        """Replace the function called as ``function(chunk, x, z)`` for each new chunk."""
        with self._lock:
            self._chunk_generator = function

    def set_chunk_limits(self, x: int, y: int) -> None:
        """Set the largest chunk coordinates this dimension will generate."""
        with self._lock:
            self._chunk_max = (x, y)

    def try_initialize_chunk(self, pos: Sequence[int]) -> None:
        """Generate the chunk at ``pos`` if it is missing and within the limits."""
        x, z = pos
        with self._lock:
            key = (x, z)
            if key in self._chunks or x > self._chunk_max[0] or z > self._chunk_max[1]:
                return
            min_sections = _div_trunc(self.min_y, SECTION_SIZE)
            max_sections = _div_trunc(self.min_y + self.height, SECTION_SIZE)
            chunk = Chunk(min_sections, max_sections)
            self._chunk_generator(chunk, x, z)
            self._chunks[key] = chunk
            if self._on_chunk_load is not None:
                self._on_chunk_load(self, key)

    def chunk_count(self) -> int:
        with self._lock:
            return len(self._chunks)

    @staticmethod
    def _split(position: Sequence[int]) -> tuple[tuple[int, int], tuple[int, int, int]]:
        x, y, z = position
        return (x // SECTION_SIZE, z // SECTION_SIZE), (x % SECTION_SIZE, y, z % SECTION_SIZE)

    def set_block(self, position: Sequence[int], block_state: BlockState) -> None:
        """Set the block at world coordinates; chunks beyond the limits are left alone."""
        chunk_pos, local = self._split(position)
        with self._lock:
            self.try_initialize_chunk(chunk_pos)
            chunk = self._chunks.get(chunk_pos)
            if chunk is not None:
                chunk.set_block_at(local, block_state)

    def get_block(self, position: Sequence[int]) -> BlockState:
        """Return a copy of the block state at world coordinates."""
        chunk_pos, local = self._split(position)
        with self._lock:
            self.try_initialize_chunk(chunk_pos)
            chunk = self._chunks.get(chunk_pos)
            if chunk is None:
                raise IndexOutOfBounds(f"chunk {chunk_pos} lies beyond the chunk limits")
            return chunk.get_block_at(local)

    # Entities

    def _fresh_uuid(self) -> UUID:
        new = uuid_module.uuid4()
        while new in self._entities:
            new = uuid_module.uuid4()
        return new

    def _insert_entity(
        self, entity_uuid: UUID, entity_id: int, entity_type: str, player_controlled: bool
    ) -> DataComponentMap:
        components = DataComponentMap()
        components.set(EntityComponents.ENTITY_ID, entity_id)
        components.set(EntityComponents.UUID, entity_uuid)
        components.set(EntityComponents.ENTITY_TYPE, entity_type)
        components.set(EntityComponents.POSITION, (0.0, 0.0, 0.0))
        components.set(EntityComponents.DIRECTION, (0.0, 0.0))
        components.set(EntityComponents.VELOCITY, (0.0, 0.0, 0.0))
        components.set(EntityComponents.PLAYER_CONTROLLED, player_controlled)
        self._entities[entity_uuid] = EntityData(components=components)
        return components

    def spawn_entity(self, entity_type: str) -> Entity:
        """Spawn an entity of the given type at the origin and return a handle to it."""
        with self._lock:
            entity_uuid = self._fresh_uuid()
            self._insert_entity(entity_uuid, self._new_entity_id(), entity_type, False)
            return Entity(self, entity_uuid)

    def spawn_human_entity(self, skin: PlayerSkinData) -> Entity:
        """Spawn a non-player human entity wearing ``skin``."""
        with self._lock:
            entity_uuid = self._fresh_uuid()
            components = self._insert_entity(entity_uuid, self._new_entity_id(), PLAYER, False)
            components.set(EntityComponents.PLAYER_SKIN, skin)
            return Entity(self, entity_uuid)

    def spawn_player_entity(self, uuid: UUID, entity_id: int) -> Entity:
        """Add the entity of a connected player under its own UUID and id."""
        with self._lock:
            self._insert_entity(uuid, entity_id, PLAYER, True)
            return Entity(self, uuid)

    def remove_entity(self, uuid: UUID) -> None:
        with self._lock:
            self._entities.pop(uuid, None)

    def get_entity(self, uuid: UUID) -> Entity:
        return Entity(self, uuid)

    def get_entity_by_id(self, entity_id: int) -> Entity:
        with self._lock:
            for entity_uuid, data in self._entities.items():
                try:
                    if data.get(EntityComponents.ENTITY_ID) == entity_id:
                        return Entity(self, entity_uuid)
                except ComponentNotFound:
                    continue
        raise IndexOutOfBounds(f"no entity with id {entity_id}")

    def entities(self) -> list[Entity]:
        """Handles to every entity that is not controlled by a player."""
        with self._lock:
            return [
                Entity(self, data.get(EntityComponents.UUID))
                for data in self._entities.values()
                if not data.get(EntityComponents.PLAYER_CONTROLLED)
            ]

    def all_entities(self) -> list[Entity]:
        """Handles to every entity, players included."""
        with self._lock:
            return [Entity(self, data.get(EntityComponents.UUID)) for data in self._entities.values()]

    def players(self) -> list[UUID]:
        """UUIDs of the player-controlled entities."""
        with self._lock:
            return [
                data.get(EntityComponents.UUID)
                for data in self._entities.values()
                if data.get(EntityComponents.PLAYER_CONTROLLED)
            ]

    def set_entity_component(self, uuid: UUID, key: str, value: Any) -> None:
        """Store a component on an entity; unknown entities are ignored."""
        with self._lock:
            data = self._entities.get(uuid)
            if data is not None:
                data.components.set_raw(key, value)

    def get_entity_component(self, uuid: UUID, key: str) -> Any:
        with self._lock:
            data = self._entities.get(uuid)
            if data is None:
                raise ComponentNotFound(key)
            return data.components.get_raw(key)

    def collect_entity_updates(self) -> list[EntityUpdate]:
        """Report entities whose position or direction changed since the last call."""
        with self._lock:
            recipients = tuple(self.players())
            updates = []
            for data in self._entities.values():
                patch = DataComponentPatch.from_maps(data.last_components, data.components)
                entity_id = data.get(EntityComponents.ENTITY_ID)
                added = patch.added_fields
                if added.contains_type(EntityComponents.POSITION) or added.contains_type(
                    EntityComponents.DIRECTION
                ):
                    updates.append(
                        EntityUpdate(
                            entity_id,
                            data.get(EntityComponents.POSITION),
                            data.get(EntityComponents.DIRECTION),
                            recipients,
                        )
                    )
                data.last_components = data.components.copy()
            return updates