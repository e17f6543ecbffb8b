# knapsacks/solvers/classic/dp_solver.py
import math
import time
import warnings
from typing import Dict, Any, List

from knapsacks.errors import AccuracyBoundWarning, PreconditionError
from knapsacks.solvers.interface import SolverInterface
from knapsacks.store import ItemStore


class TabulationSolver(SolverInterface):
    """
    A solver for the 0-1 Knapsack Problem using bottom-up Dynamic Programming
    over capacity.

    By default only two rows of length W+1 are kept ('prev' and 'curr'), so the
    space used is O(W). With config {'keep_history': True} every row is kept,
    which costs O(N*W) space but lets reconstruct_from_table() recover the item
    set without recursion.
    """
    def __init__(self, config: Dict[str, Any] = None):
        super().__init__(config)
        self.keep_history = bool(self.config.get("keep_history", False))
        self.name = "2D DP (full history)" if self.keep_history else "2-row DP"

    def solve(self, store: ItemStore) -> Dict[str, Any]:
        if not store.has_integer_weights:
            raise PreconditionError(f"{self.name} indexes rows by capacity and needs integer weights.")

        n = store.item_count
        capacity = store.capacity
        start_time = time.perf_counter()

        prev = [0] * (capacity + 1)
        curr = [0] * (capacity + 1)
        history: List[List[int]] = [list(prev)] if self.keep_history else []

        for i in range(1, n + 1):
            item = store[i]
            for x in range(capacity + 1):
                if item.weight <= x:
                    curr[x] = max(prev[x], prev[x - item.weight] + item.value)
                else:
                    curr[x] = prev[x]
            self.trace("Row %d: best value at full capacity is %s.", i, curr[capacity])

            # The current row becomes the previous row for the next item.
            prev[:] = curr
            if self.keep_history:
                history.append(list(curr))

        end_time = time.perf_counter()
        value = curr[capacity]
        self.summary("%s: optimal value %s.", self.name, value)

        result = {
            "value": value,
            "time": end_time - start_time,
            "solution": []
        }
        if self.keep_history:
            result["table"] = history
        return result


class FPTASSolver(SolverInterface):
    """
    A solver for the 0-1 Knapsack Problem using a Fully Polynomial-Time
    Approximation Scheme (FPTAS).

    Item values are divided by a scaling divisor m derived from the requested
    accuracy, then a DP over (scaled) value finds the minimum weight needed to
    reach each value. The answer is guaranteed to be within a factor of
    (1 - epsilon) of the optimal value, unless m had to be clamped to 1.

    Only values are discretized, so item weights do not need to be integers.
    The store is never modified; the scaled values live in a private list.
    """
    def __init__(self, config: Dict[str, Any] = None):
        super().__init__(config)
        self.name = "FPTAS (on value)"
        # Accuracy in percent, e.g. 90 for a result within 10% of the optimum.
        self.accuracy = float(self.config.get("accuracy", 90))

    def solve(self, store: ItemStore) -> Dict[str, Any]:
        return self.run(store, self.accuracy)

    def approximate(self, store: ItemStore, accuracy_percent: float) -> int:
        """Returns only the approximate optimal value for the given accuracy."""
        return self.run(store, accuracy_percent)["value"]

    def run(self, store: ItemStore, accuracy_percent: float) -> Dict[str, Any]:
        if not 0 < accuracy_percent <= 100:
            raise ValueError(f"Accuracy must be in (0, 100], got {accuracy_percent}.")

        n = store.item_count
        start_time = time.perf_counter()

        if n == 0:
            return {"value": 0, "time": time.perf_counter() - start_time, "solution": [],
                    "scaling_divisor": 1, "accuracy_guaranteed": True}

        epsilon = (100 - accuracy_percent) / 100.0
        # m is the divisor; each value is rounded down to a multiple of m.
        m = int((epsilon * store.total_value) / n)
        accuracy_guaranteed = True
        if m == 0:
            accuracy_guaranteed = False
            message = (f"With accuracy {accuracy_percent}% the computed scaling divisor is 0. "
                       f"Using m = 1 instead; the accuracy bound may not be met.")
            self.logger.warning(message)
            warnings.warn(message, AccuracyBoundWarning, stacklevel=2)
            m = 1

        scaled_values = [0] + [item.value // m for item in store]
        total_scaled_value = sum(scaled_values)

        # table[i][x]: minimum weight needed to reach scaled value >= x using items 1..i.
        table = [[math.inf] * (total_scaled_value + 1) for _ in range(n + 1)]
        table[0][0] = 0

        for i in range(1, n + 1):
            item_weight = store[i].weight
            item_scaled_value = scaled_values[i]
            above, row = table[i - 1], table[i]
            for x in range(total_scaled_value + 1):
                prev_needed = 0 if x - item_scaled_value < 0 else above[x - item_scaled_value]
                if prev_needed == math.inf:
                    row[x] = above[x]
                else:
                    row[x] = min(above[x], item_weight + prev_needed)
            self.trace("Row %d of the value table done (scaled value %d).", i, item_scaled_value)

        # Find the largest scaled value whose minimum weight fits in the knapsack.
        final_value = 0
        for x in range(total_scaled_value, -1, -1):
            if table[n][x] <= store.capacity:
                final_value = x * m
                break

        end_time = time.perf_counter()
        self.summary("%s: approximate value %s at %s%% accuracy (m=%d).",
                     self.name, final_value, accuracy_percent, m)

        return {
            "value": final_value,
            "time": end_time - start_time,
            "solution": [],
            "scaling_divisor": m,
            "accuracy_guaranteed": accuracy_guaranteed
        }
