# knapsacks/solvers/interface.py
import logging
from abc import ABC, abstractmethod
from typing import Dict, Any

from knapsacks.store import ItemStore

# Verbosity levels understood by every solver.
QUIET = 0
SUMMARY = 1
TRACE = 2


class SolverInterface(ABC):
    """
    An abstract base class (interface) that all solver classes must implement.
    This ensures that every solver, exact or approximate, can be used in a
    consistent way by the facade and the evaluation scripts.
    """

    def __init__(self, config: Dict[str, Any] = None):
        """
        Initializes the solver with its configuration.

        Args:
            config (Dict[str, Any], optional): A dictionary containing configuration
                                              parameters for the solver. Recognised by
                                              all solvers is 'verbosity' (0 quiet,
                                              1 summary, 2 per-step trace). Defaults to None.
        """
        self.config = config if config is not None else {}
        self.name = "Unnamed Solver"
        self.verbosity = int(self.config.get("verbosity", QUIET))
        self.logger = logging.getLogger(f"{type(self).__module__}.{type(self).__name__}")

    def trace(self, message: str, *args):
        """Emits a per-step debug message when the solver runs at TRACE verbosity."""
        if self.verbosity >= TRACE:
            self.logger.debug(message, *args)

    def summary(self, message: str, *args):
        """Emits a one-line result message when the solver runs at SUMMARY verbosity or above."""
        if self.verbosity >= SUMMARY:
            self.logger.info(message, *args)

    @abstractmethod
    def solve(self, store: ItemStore) -> Dict[str, Any]:
        """
        Solve the instance held by an item store.
        This method MUST be implemented by all subclasses.

        Args:
            store (ItemStore): The loaded instance.

        Returns:
            Dict[str, Any]: A dictionary containing the results, for example:
                            {'value': 220, 'time': 0.05, 'solution': [...]}
        """
        pass
