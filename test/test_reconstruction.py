# test/test_reconstruction.py

import pytest

from knapsacks.errors import PreconditionError
from knapsacks.knapsack import Knapsack
from knapsacks.solvers.classic.dp_solver import TabulationSolver
from knapsacks.solvers.classic.memo_solver import MemoizedSolver
from knapsacks.solvers.classic.reconstruction import SolutionReconstructor, reconstruct_from_table
from knapsacks.store import ItemStore
from knapsacks.utils.generator import generate_knapsack_instance


def test_textbook_case_picks_items_two_and_three():
    knapsack = Knapsack.load(10, 3, [(60, 5), (100, 4), (120, 6)])
    assert knapsack.exact_value_via_memo() == 220

    items = knapsack.reconstruct_included_items()

    # Discovery order: last item first.
    assert [item.index for item in items] == [3, 2]
    assert sum(item.weight for item in items) == 10
    assert sum(item.value for item in items) == 220


def test_reconstruction_before_solving_is_rejected():
    knapsack = Knapsack.load(10, 3, [(60, 5), (100, 4), (120, 6)])
    with pytest.raises(PreconditionError):
        knapsack.reconstruct_included_items()


def test_reconstruction_after_switching_store_is_rejected():
    solver = MemoizedSolver()
    solver.solve(ItemStore.from_pairs(10, [(60, 5), (100, 4), (120, 6)]))
    solver.bind(ItemStore.from_pairs(5, [(1, 1)]))
    with pytest.raises(PreconditionError):
        SolutionReconstructor(solver).reconstruct()


def test_no_items_gives_empty_set():
    knapsack = Knapsack.load(50, 0, [])
    assert knapsack.exact_value_via_memo() == 0
    assert knapsack.reconstruct_included_items() == []


def test_all_items_too_heavy_gives_empty_set():
    knapsack = Knapsack.load(5, 3, [(100, 10), (200, 20), (300, 30)])
    assert knapsack.exact_value_via_memo() == 0
    assert knapsack.reconstruct_included_items() == []


def test_ties_resolve_toward_exclusion():
    """
    Two identical items: either one is optimal. Since an equal value means 'excluded',
    the walk skips item 2 and packs item 1.
    """
    knapsack = Knapsack.load(5, 2, [(5, 5), (5, 5)])
    assert knapsack.exact_value_via_memo() == 5
    assert [item.index for item in knapsack.reconstruct_included_items()] == [1]


@pytest.mark.parametrize("seed", range(10))
def test_reconstructed_set_is_feasible_and_optimal(seed):
    items, capacity = generate_knapsack_instance(
        n=15, correlation="weakly_correlated", max_weight=25, max_value=60, capacity_ratio=0.35, seed=seed
    )
    knapsack = Knapsack.load(capacity, len(items), items)
    optimal = knapsack.exact_value_via_memo()

    chosen = knapsack.reconstruct_included_items()

    assert sum(item.weight for item in chosen) <= capacity
    assert sum(item.value for item in chosen) == optimal
    assert len({item.index for item in chosen}) == len(chosen)


@pytest.mark.parametrize("seed", range(10))
def test_table_reconstruction_matches_memo_reconstruction(seed):
    items, capacity = generate_knapsack_instance(
        n=10, correlation="uncorrelated", max_weight=20, max_value=30, capacity_ratio=0.5, seed=seed
    )
    store = ItemStore.from_pairs(capacity, items)

    memo = MemoizedSolver()
    memo.solve(store)
    from_memo = SolutionReconstructor(memo).reconstruct()

    table = TabulationSolver({"keep_history": True}).solve(store)["table"]
    from_table = reconstruct_from_table(store, table)

    assert [item.index for item in from_table] == [item.index for item in from_memo]


def test_table_reconstruction_needs_full_history():
    store = ItemStore.from_pairs(10, [(60, 5), (100, 4), (120, 6)])
    result = TabulationSolver().solve(store)
    with pytest.raises(PreconditionError):
        reconstruct_from_table(store, result.get("table", []))


def test_reconstruction_logs_totals(caplog):
    knapsack = Knapsack.load(10, 3, [(60, 5), (100, 4), (120, 6)])
    knapsack.exact_value_via_memo()
    with caplog.at_level("INFO"):
        knapsack.reconstruct_included_items()
    assert "Maximized value of items in knapsack: 220. Total weight: 10" in caplog.text
