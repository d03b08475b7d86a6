"""Block states: a block identifier plus its components."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from wyvern.blocks.block_components import array_to_components, components_to_array
from wyvern.components import DataComponentHolder, DataComponentMap

AIR = "minecraft:air"


@dataclass
class BlockState(DataComponentHolder):
    """A block identifier together with its state components."""

    block: str
    components: DataComponentMap = field(default_factory=DataComponentMap)

    @property
    def component_map(self) -> DataComponentMap:
        return self.components

    @property
    def name(self) -> str:
        return self.block

    @classmethod
    def air(cls) -> BlockState:
        return cls(AIR)

    def is_air(self) -> bool:
        return self.block == AIR

    def to_dict(self) -> dict[str, Any]:
        """Encode as a structure palette entry with Name and Properties."""
        data: dict[str, Any] = {"Name": self.block}
        properties = components_to_array(self.components)
        if properties:
            data["Properties"] = properties
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> BlockState:
        name = data.get("Name")
        if not isinstance(name, str):
            raise ValueError("block state needs a string 'Name'")
        properties = data.get("Properties", {})
        if not isinstance(properties, Mapping) or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in properties.items()
        ):
            raise ValueError("block state 'Properties' must map strings to strings")
        return cls(name, array_to_components(dict(properties)))