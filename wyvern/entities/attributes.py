"""Entity attribute containers."""

from __future__ import annotations

from dataclasses import dataclass, field

from wyvern.components import DataComponentHolder, DataComponentMap


@dataclass
class AttributeContainer(DataComponentHolder):
    """Attribute values of an entity, keyed by attribute identifier."""

    attributes: DataComponentMap = field(default_factory=DataComponentMap)

    @property
    def component_map(self) -> DataComponentMap:
        return self.attributes

    def as_properties(self) -> list[tuple[str, float]]:
        """List each attribute with its value; values that are not floats count as 0.0."""
        return [
            (key, value if isinstance(value, float) else 0.0)
            for key, value in self.attributes.items()
        ]