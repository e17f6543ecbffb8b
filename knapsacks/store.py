# knapsacks/store.py
# -*- coding: utf-8 -*-
"""
The in-memory item store shared by all solvers.

Items are kept in a list indexed 0..N where index 0 holds a sentinel item
(value 0, weight 0) so that item ``i`` of the instance is simply ``items[i]``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from numbers import Real
from typing import Iterable, List, Sequence, Tuple, Union

from knapsacks.errors import MalformedInputError

logger = logging.getLogger(__name__)

Weight = Union[int, float]


@dataclass(frozen=True)
class Item:
    """
    An item that may or may not be chosen for the knapsack.

    Attributes
    ----------
    index : int
        1-based position in the instance (0 is reserved for the sentinel).
    value : int
        Nonnegative value gained if the item is packed.
    weight : int or float
        Nonnegative weight (capacity consumption).
    """
    index: int
    value: int
    weight: Weight

    def __post_init__(self) -> None:
        if self.index < 0:
            raise MalformedInputError(f"Item index must be >= 0, got {self.index}.")
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise MalformedInputError(f"Item[{self.index}] value must be an integer, got {self.value!r}.")
        if self.value < 0:
            raise MalformedInputError(f"Item[{self.index}] value must be >= 0.")
        if isinstance(self.weight, bool) or not isinstance(self.weight, Real):
            raise MalformedInputError(f"Item[{self.index}] weight must be a number, got {self.weight!r}.")
        if self.weight < 0:
            raise MalformedInputError(f"Item[{self.index}] weight must be >= 0.")

    def __str__(self) -> str:
        return f"Item{{#{self.index}/${self.value}/{self.weight}kg}}"


SENTINEL = Item(0, 0, 0)


class ItemStore:
    """
    Ordered, read-only collection of items plus the knapsack capacity.

    Build it with :func:`load` (or :meth:`ItemStore.from_pairs`); the solvers only
    ever read from it.
    """

    def __init__(self, capacity: int, items: Sequence[Item]):
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise MalformedInputError(f"Capacity must be an integer, got {capacity!r}.")
        if capacity < 0:
            raise MalformedInputError(f"Capacity must be >= 0, got {capacity}.")
        for position, item in enumerate(items, start=1):
            if item.index != position:
                raise MalformedInputError(
                    f"Item indices must be dense and 1-based; position {position} holds index {item.index}."
                )

        self._capacity = capacity
        self._items: Tuple[Item, ...] = (SENTINEL, *items)
        self._total_value = sum(item.value for item in items)

    @classmethod
    def from_pairs(cls, capacity: int, pairs: Iterable[Tuple[int, Weight]]) -> "ItemStore":
        """Builds a store from ``(value, weight)`` pairs, numbering the items from 1."""
        items = [Item(index, value, weight) for index, (value, weight) in enumerate(pairs, start=1)]
        return cls(capacity, items)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def item_count(self) -> int:
        return len(self._items) - 1

    @property
    def total_value(self) -> int:
        return self._total_value

    @property
    def items(self) -> Tuple[Item, ...]:
        """All items including the sentinel at index 0."""
        return self._items

    @property
    def has_integer_weights(self) -> bool:
        return all(isinstance(item.weight, int) for item in self._items)

    def __getitem__(self, index: int) -> Item:
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self):
        # The sentinel is an implementation detail; iteration yields real items only.
        return iter(self._items[1:])

    def values(self) -> List[int]:
        """Item values in index order, excluding the sentinel."""
        return [item.value for item in self._items[1:]]

    def weights(self) -> List[Weight]:
        """Item weights in index order, excluding the sentinel."""
        return [item.weight for item in self._items[1:]]

    def __repr__(self) -> str:
        return f"ItemStore(capacity={self._capacity}, item_count={self.item_count})"


def load(capacity: int, item_count: int, items: Iterable[Tuple[int, Weight]]) -> ItemStore:
    """
    Constructs the item store from already-parsed records.

    Args:
        capacity (int): Total weight limit of the knapsack.
        item_count (int): Number of items the caller expects.
        items (Iterable[Tuple[int, Weight]]): ``(value, weight)`` pairs in input order.

    Returns:
        ItemStore: The validated store.

    Raises:
        MalformedInputError: If the record count does not match ``item_count`` or a
            record is invalid.
    """
    pairs = list(items)
    if isinstance(item_count, bool) or not isinstance(item_count, int) or item_count < 0:
        raise MalformedInputError(f"Item count must be a non-negative integer, got {item_count!r}.")
    if len(pairs) != item_count:
        raise MalformedInputError(f"Header specified {item_count} items, but {len(pairs)} were given.")

    store = ItemStore.from_pairs(capacity, pairs)
    logger.debug(f"Loaded {store.item_count} items with capacity {store.capacity} (total value {store.total_value}).")
    return store
