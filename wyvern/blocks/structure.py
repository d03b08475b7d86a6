"""Structures: palettes of block states placed at relative positions."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

from wyvern.blocks.state import BlockState
from wyvern.errors import IndexOutOfBounds

Position = tuple[int, int, int]


def _ivec3(value: Any, what: str) -> Position:
    if (
        not isinstance(value, (list, tuple))
        or len(value) != 3
        or not all(isinstance(c, int) and not isinstance(c, bool) for c in value)
    ):
        raise ValueError(f"{what} must be a list of three integers")
    x, y, z = value
    return (x, y, z)


def _int(value: Any, what: str) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueError(f"{what} must be an integer")
    return value


def _div_euclid(value: int, divisor: int) -> int:
    remainder = value % abs(divisor)
    return (value - remainder) // divisor


@dataclass(frozen=True)
class StructureBlock:
    """A block of a structure: a relative position and a palette index."""

    pos: Position
    state: int


@dataclass
class Structure:
    """A set of blocks sharing a palette of block states."""

    size: Position
    blocks: list[StructureBlock] = field(default_factory=list)
    palette: list[BlockState] = field(default_factory=list)
    data_version: int = 0

    def _palette_entry(self, index: int) -> BlockState:
        if not 0 <= index < len(self.palette):
            raise IndexOutOfBounds(f"palette index {index} out of range")
        return self.palette[index]

    def place(self, dimension: Any, base_position: Sequence[int]) -> None:
        """Set every block of the structure in ``dimension``, offset by ``base_position``."""
        bx, by, bz = base_position
        for block in self.blocks:
            state = self._palette_entry(block.state)
            x, y, z = block.pos
            dimension.set_block((bx + x, by + y, bz + z), copy.deepcopy(state))

    def to_dict(self) -> dict[str, Any]:
        return {
            "size": list(self.size),
            "blocks": [{"pos": list(block.pos), "state": block.state} for block in self.blocks],
            "palette": [state.to_dict() for state in self.palette],
            "DataVersion": self.data_version,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Structure:
        if not isinstance(data, Mapping):
            raise ValueError("structure must be a mapping")
        for key in ("size", "blocks", "palette", "DataVersion"):
            if key not in data:
                raise ValueError(f"structure is missing {key!r}")
        raw_blocks = data["blocks"]
        raw_palette = data["palette"]
        if not isinstance(raw_blocks, (list, tuple)) or not isinstance(raw_palette, (list, tuple)):
            raise ValueError("structure 'blocks' and 'palette' must be lists")
        blocks = []
        for raw in raw_blocks:
            if not isinstance(raw, Mapping) or "pos" not in raw or "state" not in raw:
                raise ValueError("structure block needs 'pos' and 'state'")
            blocks.append(
                StructureBlock(_ivec3(raw["pos"], "block pos"), _int(raw["state"], "block state"))
            )
        return cls(
            size=_ivec3(data["size"], "size"),
            blocks=blocks,
            palette=[BlockState.from_dict(entry) for entry in raw_palette],
            data_version=_int(data["DataVersion"], "DataVersion"),
        )


def split_structure(
    structure: Structure, piece_size: Sequence[int]
) -> dict[Position, Structure]:
    """Group the blocks of a structure into pieces keyed by piece coordinates.

    Blocks keep their original positions; every piece shares the full palette.
    """
    size = _ivec3(tuple(piece_size), "piece size")
    if 0 in size:
        raise ValueError("piece size must not contain zero")
    pieces: dict[Position, Structure] = {}
    for block in structure.blocks:
        px, py, pz = (_div_euclid(c, d) for c, d in zip(block.pos, size))
        key = (px, py, pz)
        piece = pieces.get(key)
        if piece is None:
            piece = pieces[key] = Structure(size, [], copy.deepcopy(structure.palette), 0)
        piece.blocks.append(block)
    return pieces