# knapsacks/evaluation/reporting.py
import logging
import os
from typing import List, Optional

import numpy as np
import pandas as pd

from knapsacks.store import Item

logger = logging.getLogger(__name__)

SEPARATOR = "=" * 64


def save_results_to_csv(results_df: pd.DataFrame, save_path: str):
    """
    Saves the aggregated evaluation results DataFrame to a CSV file.

    Args:
        results_df (pd.DataFrame): The DataFrame containing the results.
        save_path (str): The full path to save the CSV file.
    """
    output_dir = os.path.dirname(save_path)
    if output_dir:
        os.makedirs(output_dir, exist_ok=True)

    results_df.to_csv(save_path, index=False)
    logger.info(f"Evaluation results successfully saved to {save_path}")


def add_error_columns(results_df: pd.DataFrame, exact_column: str = 'exact_value') -> pd.DataFrame:
    """
    Adds absolute and relative (percent) error of 'value' against an exact value column.
    Rows whose exact value is 0 get a relative error of 0 when the value is 0 as well.
    """
    df = results_df.copy()
    exact = df[exact_column].to_numpy(dtype=float)
    value = df['value'].to_numpy(dtype=float)

    df['abs_error'] = np.abs(exact - value)
    with np.errstate(divide='ignore', invalid='ignore'):
        rel = np.where(exact > 0, df['abs_error'].to_numpy() / exact * 100.0, 0.0)
    df['rel_error_pct'] = rel
    return df


def summarize_by_solver(results_df: pd.DataFrame) -> pd.DataFrame:
    """Average time (ms) and number of mismatches against the expected answer, per solver.
    Only rows flagged 'exact' are checked; approximate values are expected to fall short."""
    df = results_df.copy()
    df['time_ms'] = df['time_seconds'] * 1000.0
    df['mismatch'] = df['exact'] & df['expected'].notna() & (df['value'] != df['expected'])
    return (df.groupby('solver', sort=False)
              .agg(instances=('dataset', 'count'), avg_time_ms=('time_ms', 'mean'), mismatches=('mismatch', 'sum'))
              .reset_index())


def format_dataset_header(dataset: str, expected: Optional[int]) -> str:
    if expected is None:
        return f"{SEPARATOR}\nNow running methods for file {dataset}..."
    return f"{SEPARATOR}\nExpected answer for file {dataset}: {expected}. Now running methods..."


def format_items(items: List[Item]) -> str:
    return "[" + ", ".join(str(item) for item in items) + "]"
