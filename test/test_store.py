# test/test_store.py

import pytest

from dataclasses import FrozenInstanceError

from knapsacks.errors import MalformedInputError
from knapsacks.store import SENTINEL, Item, ItemStore, load


def test_load_adds_sentinel_at_index_zero():
    store = load(10, 3, [(60, 5), (100, 4), (120, 6)])
    assert len(store) == store.item_count + 1 == 4
    assert store[0] is SENTINEL
    assert [item.index for item in store] == [1, 2, 3]
    assert store.total_value == 280


def test_load_rejects_count_mismatch():
    with pytest.raises(MalformedInputError):
        load(10, 2, [(60, 5)])


@pytest.mark.parametrize("capacity", [-1, 2.5, True])
def test_invalid_capacity(capacity):
    with pytest.raises(MalformedInputError):
        ItemStore.from_pairs(capacity, [(1, 1)])


@pytest.mark.parametrize("value, weight", [(-1, 1), (1, -1), (1.5, 1), (1, "2")])
def test_invalid_item(value, weight):
    with pytest.raises(MalformedInputError):
        Item(1, value, weight)


def test_items_are_immutable():
    item = Item(1, 60, 5)
    with pytest.raises(FrozenInstanceError):
        item.value = 6


def test_items_must_be_numbered_densely():
    with pytest.raises(MalformedInputError):
        ItemStore(10, [Item(1, 60, 5), Item(3, 100, 4)])


def test_item_string():
    assert str(Item(2, 100, 4)) == "Item{#2/$100/4kg}"


def test_empty_store():
    store = load(7, 0, [])
    assert store.item_count == 0
    assert store.total_value == 0
    assert list(store) == []
