# test/test_generator.py

import pytest

from knapsacks.errors import MalformedInputError
from knapsacks.knapsack import Knapsack
from knapsacks.utils.generator import (
    CORRELATIONS, generate_knapsack_instance, load_instance_from_file, save_instance_to_file
)


def write(tmp_path, text, name="instance.txt"):
    path = tmp_path / name
    path.write_text(text)
    return str(path)


# --- Loading ---

def test_load_well_formed_file(tmp_path):
    path = write(tmp_path, "10 3\n60 5\n100 4\n120 6\n")
    store = load_instance_from_file(path)

    assert store.capacity == 10
    assert store.item_count == 3
    assert store.values() == [60, 100, 120]
    assert store.weights() == [5, 4, 6]
    assert store[0].value == 0 and store[0].weight == 0


def test_blank_lines_are_ignored(tmp_path):
    path = write(tmp_path, "\n10 2\n\n60 5\n100 4\n\n")
    assert load_instance_from_file(path).item_count == 2


def test_real_weights_are_accepted(tmp_path):
    path = write(tmp_path, "10 2\n60 5.5\n100 4.25\n")
    assert load_instance_from_file(path).weights() == [5.5, 4.25]


@pytest.mark.parametrize("text", [
    "",                        # no header
    "10\n60 5\n",              # header missing the item count
    "ten 1\n60 5\n",           # non-numeric capacity
    "10 2\n60 5\n",            # fewer items than announced
    "10 1\n60 5\n100 4\n",     # more items than announced
    "10 1\n60\n",              # missing weight
    "10 1\n60 5 7\n",          # extra field
    "10 1\n6.5 5\n",           # non-integer value
    "10 1\n-60 5\n",           # negative value
    "10 1\n60 -5\n",           # negative weight
    "-10 1\n60 5\n",           # negative capacity
])
def test_malformed_files_are_rejected(tmp_path, text):
    path = write(tmp_path, text)
    with pytest.raises(MalformedInputError):
        load_instance_from_file(path)


def test_binary_file_is_rejected(tmp_path):
    path = tmp_path / "instance.bin"
    path.write_bytes(b"\xff\xfe\x00\x81 10 3\n\x9c\x00")
    with pytest.raises(MalformedInputError):
        load_instance_from_file(str(path))


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_instance_from_file(str(tmp_path / "does_not_exist.txt"))


def test_knapsack_from_file(tmp_path):
    path = write(tmp_path, "10 3\n60 5\n100 4\n120 6\n")
    knapsack = Knapsack.from_file(path)
    assert knapsack.exact_value_via_memo() == 220


# --- Generating ---

@pytest.mark.parametrize("correlation", CORRELATIONS)
def test_generated_instance_shape(correlation):
    items, capacity = generate_knapsack_instance(
        n=30, correlation=correlation, max_weight=50, max_value=80, capacity_ratio=0.5, seed=7
    )
    assert len(items) == 30
    assert all(1 <= w <= 50 and v >= 1 for v, w in items)
    assert capacity == int(sum(w for _, w in items) * 0.5)
    if correlation == "subset_sum":
        assert all(v == w for v, w in items)


def test_same_seed_same_instance():
    first = generate_knapsack_instance(10, "uncorrelated", 20, 20, 0.5, seed=11)
    second = generate_knapsack_instance(10, "uncorrelated", 20, 20, 0.5, seed=11)
    assert first == second


@pytest.mark.parametrize("kwargs", [
    {"correlation": "anticorrelated", "capacity_ratio": 0.5},
    {"correlation": "uncorrelated", "capacity_ratio": 0.0},
    {"correlation": "uncorrelated", "capacity_ratio": 1.5},
])
def test_invalid_generation_parameters(kwargs):
    with pytest.raises(ValueError):
        generate_knapsack_instance(n=5, max_weight=10, max_value=10, **kwargs)


def test_saved_instance_loads_back(tmp_path):
    items, capacity = generate_knapsack_instance(25, "weakly_correlated", 40, 40, 0.3, seed=5)
    path = str(tmp_path / "generated.txt")
    save_instance_to_file(items, capacity, path)

    store = load_instance_from_file(path)
    assert store.capacity == capacity
    assert list(zip(store.values(), store.weights())) == items
