# knapsacks/solvers/classic/memo_solver.py
import sys
import time
from contextlib import contextmanager
from enum import Enum
from typing import Dict, Any, Tuple

from knapsacks.errors import PreconditionError
from knapsacks.solvers.interface import SolverInterface
from knapsacks.store import ItemStore

# Memo keys are (residual capacity, item index) tuples.
MemoKey = Tuple[int, int]


class SolverState(Enum):
    UNINITIALIZED = "uninitialized"
    SOLVED = "solved"


@contextmanager
def recursion_limit(limit: int):
    """Temporarily raises the interpreter recursion limit to at least `limit`."""
    previous = sys.getrecursionlimit()
    if limit > previous:
        sys.setrecursionlimit(limit)
    try:
        yield
    finally:
        sys.setrecursionlimit(previous)


class MemoizedSolver(SolverInterface):
    """
    An exact solver for the 0-1 Knapsack Problem using top-down recursion with
    memoization.

    K[(w, i)] holds the maximum value achievable using items 1..i and a knapsack
    of residual capacity w. The cache is kept after solving so that the item set
    can be recovered by SolutionReconstructor.
    """
    def __init__(self, config: Dict[str, Any] = None):
        super().__init__(config)
        self.name = "Memoized Recursion"
        self.recursion_margin = int(self.config.get("recursion_margin", 100))
        self.store = None
        self.cache: Dict[MemoKey, int] = {}
        self.state = SolverState.UNINITIALIZED
        self.cache_hits = 0

    def bind(self, store: ItemStore):
        """Attaches the solver to a store, discarding any cache built for a different one."""
        if store is not self.store:
            self.store = store
            self.reset()

    def reset(self):
        self.cache = {}
        self.cache_hits = 0
        self.state = SolverState.UNINITIALIZED

    @property
    def is_solved(self) -> bool:
        return self.state is SolverState.SOLVED

    def solve(self, store: ItemStore) -> Dict[str, Any]:
        self.bind(store)
        start_time = time.perf_counter()

        value = self.solve_subproblem(store.item_count, store.capacity)
        self.state = SolverState.SOLVED

        end_time = time.perf_counter()
        self.summary("%s: optimal value %s (%d cached states, %d cache hits).",
                     self.name, value, len(self.cache), self.cache_hits)

        return {
            "value": value,
            "time": end_time - start_time,
            "cache_size": len(self.cache),
            "solution": []  # Use SolutionReconstructor to recover the item set.
        }

    def solve_subproblem(self, i: int, w) -> int:
        """
        Returns the maximum value achievable using items 1..i and capacity w.

        Raises:
            PreconditionError: If no store is bound, or (i, w) lies outside [0, N] x [0, W].
        """
        if self.store is None:
            raise PreconditionError("No item store is bound to the memoized solver; call solve() or bind() first.")
        if not 0 <= i <= self.store.item_count:
            raise PreconditionError(f"Item index {i} is outside [0, {self.store.item_count}].")
        if not 0 <= w <= self.store.capacity:
            raise PreconditionError(f"Capacity {w} is outside [0, {self.store.capacity}].")

        # One frame per item plus whatever the caller already uses.
        with recursion_limit(self.store.item_count + self.recursion_margin + stack_depth()):
            return self._recurse(i, w)

    def _recurse(self, i: int, w) -> int:
        key = (w, i)
        if key in self.cache:
            self.cache_hits += 1
            self.trace("Key found! %s", key)
            return self.cache[key]

        if i < 1:
            self.cache[key] = 0
            return 0

        item = self.store[i]
        if item.weight > w:
            self.trace("Item %d weight %s is greater than w=%s.", i, item.weight, w)
            value = self._recurse(i - 1, w)
        else:
            self.trace("Item %d weight %s fits in w=%s.", i, item.weight, w)
            without_item = self._recurse(i - 1, w)
            with_item = self._recurse(i - 1, w - item.weight) + item.value
            # Ties resolve toward leaving the item out.
            value = with_item if with_item > without_item else without_item

        self.cache[key] = value
        return value

    def cached_value(self, w, i: int) -> int:
        """Looks up K[(w, i)] without computing it."""
        try:
            return self.cache[(w, i)]
        except KeyError:
            raise PreconditionError(f"State (w={w}, i={i}) was never visited by the memoized solver.") from None


def stack_depth() -> int:
    """Current depth of the Python call stack."""
    frame = sys._getframe()
    depth = 0
    while frame is not None:
        depth += 1
        frame = frame.f_back
    return depth
