# knapsacks/knapsack.py
"""
One-stop access to the three solvers for a single instance.

    >>> k = Knapsack.load(10, 3, [(60, 5), (100, 4), (120, 6)])
    >>> k.exact_value_via_memo()
    220
    >>> [item.index for item in k.reconstruct_included_items()]
    [3, 2]
"""
import logging
from typing import Any, Dict, Iterable, List, Tuple

from knapsacks.solvers.classic.dp_solver import FPTASSolver, TabulationSolver
from knapsacks.solvers.classic.memo_solver import MemoizedSolver
from knapsacks.solvers.classic.reconstruction import SolutionReconstructor
from knapsacks.store import Item, ItemStore, load

logger = logging.getLogger(__name__)


class Knapsack:
    """
    Holds an ItemStore and one instance of each solver.

    The memoized solver keeps its cache between calls, so repeated calls to
    exact_value_via_memo() are answered from the cache and
    reconstruct_included_items() can read it.
    """

    def __init__(self, store: ItemStore, config: Dict[str, Any] = None):
        self.store = store
        self.config = config if config is not None else {}
        self.memo_solver = MemoizedSolver(self.config)
        self.tabulation_solver = TabulationSolver(self.config)
        self.fptas_solver = FPTASSolver(self.config)
        self.memo_solver.bind(store)

    @classmethod
    def load(cls, capacity: int, item_count: int, items: Iterable[Tuple[int, int]],
             config: Dict[str, Any] = None) -> "Knapsack":
        return cls(load(capacity, item_count, items), config)

    @classmethod
    def from_file(cls, filepath: str, config: Dict[str, Any] = None) -> "Knapsack":
        # Imported here to keep the core free of file handling.
        from knapsacks.utils.generator import load_instance_from_file
        return cls(load_instance_from_file(filepath), config)

    def exact_value_via_memo(self) -> int:
        return self.memo_solver.solve(self.store)["value"]

    def exact_value_via_tabulation(self) -> int:
        return self.tabulation_solver.solve(self.store)["value"]

    def approx_value(self, accuracy_percent: float) -> int:
        return self.fptas_solver.approximate(self.store, accuracy_percent)

    def reconstruct_included_items(self) -> List[Item]:
        """Only valid after exact_value_via_memo(); raises PreconditionError otherwise."""
        return SolutionReconstructor(self.memo_solver).reconstruct()

    def __repr__(self) -> str:
        return f"Knapsack({self.store!r})"
