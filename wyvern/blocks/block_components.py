"""Block state components and their string property forms."""

from __future__ import annotations

import re
from enum import Enum
from typing import Any, Callable

from wyvern.blocks.properties import Axis, BlockDirection, BlockType, Half, StairShape
from wyvern.components import DataComponentMap, DataComponentType
from wyvern.errors import ComponentNotFound


class BlockComponents:
    """Component kinds that block states carry."""

    WATERLOGGED = DataComponentType("minecraft:waterlogged", bool)
    POWERED = DataComponentType("minecraft:powered", bool)
    OPEN = DataComponentType("minecraft:open", bool)

    AXIS = DataComponentType("minecraft:axis", Axis)
    FACING = DataComponentType("minecraft:facing", BlockDirection)
    HALF = DataComponentType("minecraft:half", Half)
    STAIR_SHAPE = DataComponentType("minecraft:stair/shape", StairShape)

    AGE = DataComponentType("minecraft:age", int)
    SNOWY = DataComponentType("minecraft:snowy", bool)

    BANNER_ROTATION = DataComponentType("minecraft:banner/rotation", int)
    TNT_UNSTABLE = DataComponentType("minecraft:tnt/unstable", bool)
    BLOCK_TYPE = DataComponentType("minecraft:type", BlockType)
    WATER_LEVEL = DataComponentType("minecraft:water/level", int)

    FACING_NORTH = DataComponentType("minecraft:north", bool)
    FACING_SOUTH = DataComponentType("minecraft:south", bool)
    FACING_EAST = DataComponentType("minecraft:east", bool)
    FACING_WEST = DataComponentType("minecraft:west", bool)

    CUSTOM_DATA = DataComponentType("minecraft:custom_data")


_I32 = re.compile(r"[+-]?[0-9]+", re.ASCII)
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def _parse_bool(text: str) -> bool:
    if text == "true":
        return True
    if text == "false":
        return False
    raise ValueError(f"not a boolean: {text!r}")


def _parse_i32(text: str) -> int:
    if not _I32.fullmatch(text):
        raise ValueError(f"not an integer: {text!r}")
    value = int(text)
    if not _I32_MIN <= value <= _I32_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def _format(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


_PROPERTIES: tuple[tuple[str, DataComponentType, Callable[[str], Any]], ...] = (
    ("waterlogged", BlockComponents.WATERLOGGED, _parse_bool),
    ("powered", BlockComponents.POWERED, _parse_bool),
    ("open", BlockComponents.OPEN, _parse_bool),
    ("axis", BlockComponents.AXIS, Axis),
    ("facing", BlockComponents.FACING, BlockDirection),
    ("half", BlockComponents.HALF, Half),
    ("shape", BlockComponents.STAIR_SHAPE, StairShape),
    ("age", BlockComponents.AGE, _parse_i32),
    ("snowy", BlockComponents.SNOWY, _parse_bool),
    ("rotation", BlockComponents.BANNER_ROTATION, _parse_i32),
    ("unstable", BlockComponents.TNT_UNSTABLE, _parse_bool),
    ("type", BlockComponents.BLOCK_TYPE, BlockType),
    ("level", BlockComponents.WATER_LEVEL, _parse_i32),
    ("north", BlockComponents.FACING_NORTH, _parse_bool),
    ("south", BlockComponents.FACING_SOUTH, _parse_bool),
    ("east", BlockComponents.FACING_EAST, _parse_bool),
    ("west", BlockComponents.FACING_WEST, _parse_bool),
)

_BY_PROPERTY = {name: (kind, parse) for name, kind, parse in _PROPERTIES}


def components_to_array(components: DataComponentMap) -> dict[str, str]:
    """Render the known block components as sorted string properties."""
    result: dict[str, str] = {}
    for name, kind, _ in _PROPERTIES:
        try:
            value = components.get(kind)
        except ComponentNotFound:
            continue
        result[name] = _format(value)
    return dict(sorted(result.items()))


def array_to_components(array: dict[str, str]) -> DataComponentMap:
    """Parse string properties into components, skipping unknown or invalid ones."""
    components = DataComponentMap()
    for name, text in sorted(array.items()):
        entry = _BY_PROPERTY.get(name)
        if entry is None:
            continue
        kind, parse = entry
        try:
            value = parse(text)
        except ValueError:
            continue
        components.set(kind, value)
    return components