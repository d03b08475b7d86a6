"""Typed data components stored in maps keyed by identifier."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Generic, Iterator, TypeVar

from wyvern.errors import ComponentNotFound

T = TypeVar("T")


@dataclass(frozen=True)
class DataComponentType(Generic[T]):
    """A named component kind; values read through it must be of ``value_type``."""

    name: str
    value_type: Any = field(default=object, compare=False, repr=False)


def _same_value(left: Any, right: Any) -> bool:
    return type(left) is type(right) and left == right


def _key_of(key: str | DataComponentType) -> str:
    return key.name if isinstance(key, DataComponentType) else key


class DataComponentMap:
    """A mapping from component identifiers to values."""

    __slots__ = ("_inner",)

    def __init__(self, items: dict[str, Any] | None = None) -> None:
        self._inner: dict[str, Any] = dict(items) if items else {}

    def set(self, kind: DataComponentType[T], value: T) -> None:
        self._inner[kind.name] = value

    def with_component(self, kind: DataComponentType[T], value: T) -> DataComponentMap:
        """Set a component and return this map, for chaining."""
        self.set(kind, value)
        return self

    def get(self, kind: DataComponentType[T]) -> T:
        """Return a copy of the value stored for ``kind``."""
        try:
            value = self._inner[kind.name]
        except KeyError:
            raise ComponentNotFound(kind.name) from None
        if not isinstance(value, kind.value_type):
            raise ComponentNotFound(kind.name)
        return copy.deepcopy(value)

    def contains(self, key: str) -> bool:
        return key in self._inner

    def contains_type(self, kind: DataComponentType) -> bool:
        return kind.name in self._inner

    def keys(self) -> list[str]:
        return list(self._inner)

    def items(self) -> list[tuple[str, Any]]:
        return list(self._inner.items())

    def get_raw(self, key: str) -> Any:
        """Return the stored value for an identifier without a type check."""
        try:
            return self._inner[key]
        except KeyError:
            raise ComponentNotFound(key) from None

    def set_raw(self, key: str, value: Any) -> None:
        self._inner[key] = value

    def remove(self, key: str | DataComponentType) -> Any:
        """Remove a component, returning its value or None if it was absent."""
        return self._inner.pop(_key_of(key), None)

    def copy(self) -> DataComponentMap:
        return DataComponentMap(self._inner)

    def __copy__(self) -> DataComponentMap:
        return self.copy()

    def __contains__(self, key: object) -> bool:
        if isinstance(key, (str, DataComponentType)):
            return _key_of(key) in self._inner
        return False

    def __iter__(self) -> Iterator[str]:
        return iter(self._inner)

    def __len__(self) -> int:
        return len(self._inner)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DataComponentMap):
            return NotImplemented
        if self._inner.keys() != other._inner.keys():
            return False
        return all(_same_value(value, other._inner[key]) for key, value in self._inner.items())

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"DataComponentMap({self._inner!r})"


@dataclass
class DataComponentPatch:
    """The difference between a prototype map and a newer form of it."""

    added_fields: DataComponentMap = field(default_factory=DataComponentMap)
    removed_fields: list[str] = field(default_factory=list)

    @classmethod
    def from_maps(
        cls, prototype: DataComponentMap, new_form: DataComponentMap
    ) -> DataComponentPatch:
        added = DataComponentMap()
        for key, value in new_form.items():
            if not prototype.contains(key) or not _same_value(value, prototype.get_raw(key)):
                added.set_raw(key, value)
        removed = [key for key in prototype.keys() if not new_form.contains(key)]
        return cls(added, removed)


class DataComponentHolder(ABC):
    """Mixin for objects whose state lives in a DataComponentMap."""

    @property
    @abstractmethod
    def component_map(self) -> DataComponentMap:
        """The map holding this object's components."""

    def set(self, kind: DataComponentType[T], value: T) -> None:
        self.component_map.set(kind, value)

    def with_component(self, kind: DataComponentType[T], value: T):
        """Set a component and return this object, for chaining."""
        self.component_map.set(kind, value)
        return self

    def get(self, kind: DataComponentType[T]) -> T:
        return self.component_map.get(kind)