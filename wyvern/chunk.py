"""Chunks of a dimension, split into 16x16x16 block sections."""

from __future__ import annotations

import copy
from typing import Any, Optional, Sequence

from wyvern.blocks.block_components import BlockComponents
from wyvern.blocks.state import BlockState
from wyvern.errors import IndexOutOfBounds

SECTION_SIZE = 16
SECTION_VOLUME = SECTION_SIZE**3

Position = tuple[int, int, int]


def _local_position(pos: Sequence[int]) -> Position:
    x, y, z = pos
    if not all(0 <= coord < SECTION_SIZE for coord in (x, y, z)):
        raise IndexOutOfBounds(f"position {tuple(pos)} lies outside of a chunk section")
    return (x, y, z)


class ChunkSection:
    """A 16x16x16 cube of block states with a count of its non-air blocks."""

    __slots__ = ("block_count", "_blocks", "_block_meta")

    def __init__(self) -> None:
        air = BlockState.air()
        self.block_count = 0
        self._blocks: list[BlockState] = [air] * SECTION_VOLUME
        self._block_meta: dict[Position, Any] = {}

    @staticmethod
    def index_from_pos(pos: Sequence[int]) -> int:
        """Flat index of a local position, ordered by y, then z, then x."""
        x, y, z = pos
        return y * SECTION_SIZE * SECTION_SIZE + z * SECTION_SIZE + x

    def set_block_at(self, pos: Sequence[int], block: BlockState) -> None:
        local = _local_position(pos)
        index = self.index_from_pos(local)
        stored = copy.deepcopy(block)
        custom_data = None
        has_custom_data = BlockComponents.CUSTOM_DATA in stored.components
        if has_custom_data:
            custom_data = stored.components.remove(BlockComponents.CUSTOM_DATA)

        was_air = self._blocks[index].is_air()
        if was_air and not stored.is_air():
            self.block_count += 1
        elif not was_air and stored.is_air():
            self.block_count -= 1

        self._blocks[index] = stored
        if has_custom_data:
            self._block_meta[local] = custom_data

    def get_block_at(self, pos: Sequence[int]) -> BlockState:
        """Return a copy of the block state at a local position."""
        local = _local_position(pos)
        state = copy.deepcopy(self._blocks[self.index_from_pos(local)])
        if local in self._block_meta:
            state.set(BlockComponents.CUSTOM_DATA, copy.deepcopy(self._block_meta[local]))
        return state


class Chunk:
    """A column of sections from ``min_sections`` up to, not including, ``max_sections``."""

    def __init__(self, min_sections: int, max_sections: int) -> None:
        self.min_sections = min_sections
        self.max_sections = max_sections
        self.sections = [ChunkSection() for _ in range(max_sections - min_sections)]

    def section_at(self, section: int) -> Optional[ChunkSection]:
        """Return the section with the given vertical index, or None outside the chunk."""
        index = section - self.min_sections
        if 0 <= index < len(self.sections):
            return self.sections[index]
        return None

    def set_block_at(self, pos: Sequence[int], block: BlockState) -> None:
        """Set a block; positions above or below the chunk are ignored."""
        x, y, z = pos
        section = self.section_at(y // SECTION_SIZE)
        if section is not None:
            section.set_block_at((x, y % SECTION_SIZE, z), block)

    def get_block_at(self, pos: Sequence[int]) -> BlockState:
        """Return the block at a position, or air outside the chunk."""
        x, y, z = pos
        section = self.section_at(y // SECTION_SIZE)
        if section is None:
            return BlockState.air()
        return section.get_block_at((x, y % SECTION_SIZE, z))