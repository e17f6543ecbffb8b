# knapsacks/errors.py
# -*- coding: utf-8 -*-
"""
Common exceptions and warnings for the knapsack solvers.
"""


class KnapsackError(Exception):
    """Base class for all errors raised by this package."""


class MalformedInputError(KnapsackError, ValueError):
    """Raised when an instance file or item list violates the expected format."""


class PreconditionError(KnapsackError, RuntimeError):
    """Raised when an operation is called in a state where it cannot give a meaningful answer."""


class AccuracyBoundWarning(UserWarning):
    """Issued when the FPTAS had to clamp its scaling divisor and can no longer guarantee the requested accuracy."""
