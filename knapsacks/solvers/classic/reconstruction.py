# knapsacks/solvers/classic/reconstruction.py
"""
Recovers the set of packed items from the tables built by the exact solvers.

Both routines walk backwards from the last item. If the best value with items
1..i equals the best value with items 1..i-1 at the same residual capacity, item i
was left out; otherwise it was packed and its weight is taken off the capacity.

Because the memoized solver breaks ties toward leaving an item out, the walk is
deterministic. When several item sets reach the same optimal value, a solver that
broke ties the other way could report a different (equally optimal) set.
"""
import logging
from typing import List, Sequence

from knapsacks.errors import PreconditionError
from knapsacks.solvers.classic.memo_solver import MemoizedSolver
from knapsacks.store import Item, ItemStore

logger = logging.getLogger(__name__)


class SolutionReconstructor:
    """Backtracks over the memo cache of a MemoizedSolver that has already solved its instance."""

    def __init__(self, solver: MemoizedSolver):
        self.solver = solver

    def reconstruct(self) -> List[Item]:
        """
        Returns the packed items in the order they were discovered (highest index first).

        Raises:
            PreconditionError: If the solver has not solved its instance yet.
        """
        if not self.solver.is_solved:
            raise PreconditionError("Run the memoized solver before reconstructing the item set.")

        store = self.solver.store
        residual = store.capacity
        chosen = []

        for i in range(store.item_count, 0, -1):
            current = self.solver.cached_value(residual, i)
            previous = self.solver.cached_value(residual, i - 1)
            logger.debug(f"K({residual}, {i}) = {current}, K({residual}, {i - 1}) = {previous}")

            if current == previous:
                continue
            chosen.append(store[i])
            residual -= store[i].weight

        log_summary(store, chosen)
        return chosen


def reconstruct_from_table(store: ItemStore, table: Sequence[Sequence[int]]) -> List[Item]:
    """
    Backtracks over a full-history tabulation table (table[i][x] for items 1..i and capacity x).

    Raises:
        PreconditionError: If the table does not have N+1 rows of length W+1.
    """
    if len(table) != store.item_count + 1 or any(len(row) != store.capacity + 1 for row in table):
        raise PreconditionError("A full-history table with N+1 rows of length W+1 is required; "
                                "solve with {'keep_history': True} first.")

    residual = store.capacity
    chosen = []
    for i in range(store.item_count, 0, -1):
        if table[i][residual] != table[i - 1][residual]:
            chosen.append(store[i])
            residual -= store[i].weight

    log_summary(store, chosen)
    return chosen


def log_summary(store: ItemStore, chosen: List[Item]):
    total_value = sum(item.value for item in chosen)
    total_weight = sum(item.weight for item in chosen)
    logger.info(f"Knapsack's total capacity: {store.capacity}. Maximized value of items in knapsack: "
                f"{total_value}. Total weight: {total_weight}")
