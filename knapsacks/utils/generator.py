# knapsacks/utils/generator.py
# -*- coding: utf-8 -*-

"""
This module provides core functions to generate, save and load instances of the
0/1 knapsack problem. It is configuration-agnostic.

Instance files are plain text:

    <capacity> <itemCount>
    <value_1> <weight_1>
    <value_2> <weight_2>
    ...
"""

import logging
import random
from typing import List, Optional, Tuple, Union

from knapsacks.errors import MalformedInputError
from knapsacks.store import ItemStore, load

# Get a logger instance for this module.
# It will inherit the configuration set by the main script.
logger = logging.getLogger(__name__)

CORRELATIONS = ('uncorrelated', 'weakly_correlated', 'strongly_correlated', 'subset_sum')


def generate_knapsack_instance(
    n: int,
    correlation: str,
    max_weight: int,
    max_value: int,
    capacity_ratio: float,
    seed: Optional[int] = None
) -> Tuple[List[Tuple[int, int]], int]:
    """
    Generate an instance of the knapsack problem.

    Args:
        n (int): Number of items to generate.
        correlation (str): Type of correlation between item values and weights.
            Options: 'uncorrelated', 'weakly_correlated',
                    'strongly_correlated', 'subset_sum'.
        max_weight (int): Maximum weight for a single item.
        max_value (int): Maximum value for a single item (used when uncorrelated).
        capacity_ratio (float): Ratio of knapsack capacity to the total weight of all items (between 0.0 and 1.0).
        seed (int, optional): Seed for a private random generator, for reproducible instances.

    Returns:
        Tuple[List[Tuple[int, int]], int]:
            - A list of items, each represented as a tuple (value, weight).
            - The computed knapsack capacity.
    """
    if correlation not in CORRELATIONS:
        raise ValueError(f"Correlation type must be one of {', '.join(CORRELATIONS)}")
    if not (0.0 < capacity_ratio <= 1.0):
        raise ValueError("Capacity ratio must be between 0.0 and 1.0")

    rng = random.Random(seed)
    items = []
    total_weight = 0

    for _ in range(n):
        weight = rng.randint(1, max_weight)
        value = 0

        if correlation == 'uncorrelated':
            value = rng.randint(1, max_value)
        elif correlation == 'weakly_correlated':
            noise = int(max_value / 4)
            value = max(1, weight + rng.randint(-noise, noise))
        elif correlation == 'strongly_correlated':
            noise = int(max_value / 10)
            value = max(1, weight + rng.randint(-noise, noise))
        elif correlation == 'subset_sum':
            value = weight

        items.append((value, weight))
        total_weight += weight

    capacity = int(total_weight * capacity_ratio)

    return items, capacity


def save_instance_to_file(items: List[Tuple[int, int]], capacity: int, filepath: str):
    """
    Saves an instance in the '<capacity> <itemCount>' text format.
    Note: This function does not create the directory. The calling script is responsible.
    """
    with open(filepath, 'w') as f:
        f.write(f"{capacity} {len(items)}\n")
        for value, weight in items:
            f.write(f"{value} {weight}\n")
    logger.debug(f"Instance successfully saved to {filepath}")


def _parse_number(token: str, filepath: str, line_no: int, allow_real: bool = False) -> Union[int, float]:
    try:
        return int(token)
    except ValueError:
        if not allow_real:
            raise MalformedInputError(f"{filepath}:{line_no}: expected an integer, got '{token}'.") from None
    try:
        return float(token)
    except ValueError:
        raise MalformedInputError(f"{filepath}:{line_no}: expected a number, got '{token}'.") from None


def load_instance_from_file(filepath: str) -> ItemStore:
    """
    Loads a knapsack instance from a text file.

    Values must be integers; weights may be integers or reals. Blank lines are ignored.

    Raises:
        FileNotFoundError: If the file does not exist.
        MalformedInputError: If the header or an item line is malformed, a number is
            negative, or the number of items does not match the header.
    """
    pairs = []

    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            lines = [(line_no, line.split()) for line_no, line in enumerate(f, start=1)]
    except UnicodeDecodeError as e:
        raise MalformedInputError(f"{filepath}: not a text file ({e.reason}).") from e
    lines = [(line_no, fields) for line_no, fields in lines if fields]

    if not lines:
        raise MalformedInputError(f"{filepath}: file is empty, expected a '<capacity> <itemCount>' header.")

    header_no, header = lines[0]
    if len(header) != 2:
        raise MalformedInputError(f"{filepath}:{header_no}: header must be '<capacity> <itemCount>'.")
    capacity = _parse_number(header[0], filepath, header_no)
    expected_num_items = _parse_number(header[1], filepath, header_no)

    for line_no, fields in lines[1:]:
        if len(fields) != 2:
            raise MalformedInputError(f"{filepath}:{line_no}: item line must be '<value> <weight>'.")
        value = _parse_number(fields[0], filepath, line_no)
        weight = _parse_number(fields[1], filepath, line_no, allow_real=True)
        if value < 0 or weight < 0:
            raise MalformedInputError(f"{filepath}:{line_no}: values and weights must be non-negative.")
        pairs.append((value, weight))

    if capacity < 0:
        raise MalformedInputError(f"{filepath}:{header_no}: capacity must be non-negative.")

    store = load(capacity, expected_num_items, pairs)
    logger.debug(f"Instance successfully loaded from {filepath} ({store.item_count} items).")
    return store
