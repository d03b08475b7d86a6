"""Inventories: slots holding item stacks."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from typing import Callable

from wyvern.errors import IndexOutOfBounds
from wyvern.item import ItemStack


class Inventory(ABC):
    """Anything with numbered item slots."""

    @abstractmethod
    def get_slot(self, slot: int) -> ItemStack:
        """Return a copy of the item in a slot."""

    @abstractmethod
    def set_slot(self, slot: int, item: ItemStack) -> None:
        """Put an item into a slot."""


class DataInventory(Inventory):
    """An inventory held in memory; empty slots are absent."""

    def __init__(self) -> None:
        self._slots: dict[int, ItemStack] = {}

    @classmethod
    def new_filled(cls, slots: int, factory: Callable[[], ItemStack]) -> DataInventory:
        """Create an inventory whose first ``slots`` slots hold ``factory()``."""
        inventory = cls()
        for index in range(slots):
            inventory._slots[index] = factory()
        return inventory

    def get_slot(self, slot: int) -> ItemStack:
        try:
            return copy.deepcopy(self._slots[slot])
        except KeyError:
            raise IndexOutOfBounds(f"slot {slot} is empty") from None

    def set_slot(self, slot: int, item: ItemStack) -> None:
        if slot < 0:
            raise IndexOutOfBounds(f"slot {slot} is negative")
        self._slots[slot] = item

    def __repr__(self) -> str:
        return "DataInventory(slots=...)"