# evaluate_solvers.py
import argparse
import json
import logging
import os
import sys
import time

import pandas as pd
from tqdm import tqdm

from knapsacks.errors import KnapsackError
from knapsacks.evaluation.plotting import plot_evaluation_times
from knapsacks.evaluation.reporting import (
    format_dataset_header, format_items, save_results_to_csv, summarize_by_solver
)
from knapsacks.knapsack import Knapsack
from knapsacks.utils.config_loader import cfg
from knapsacks.utils.logger import setup_logger
from knapsacks.utils.run_utils import create_run_name


def evaluate_dataset(dataset: dict, solver_config: dict, accuracy: float, logger: logging.Logger) -> list:
    """
    Runs every solver on one dataset, prints the packed items and returns one result row per solver.
    """
    name = os.path.basename(dataset['path'])
    expected = dataset.get('expected')
    knapsack = Knapsack.from_file(dataset['path'], config=solver_config)
    store = knapsack.store
    logger.info(format_dataset_header(name, expected))

    rows = []

    def record(solver: str, value: int, elapsed: float, exact: bool = True):
        rows.append({
            "dataset": name,
            "n": store.item_count,
            "capacity": store.capacity,
            "solver": solver,
            "value": value,
            "expected": expected,
            "exact": exact,
            "time_seconds": elapsed,
        })
        status = "" if expected is None or not exact else (" (OK)" if value == expected else " (MISMATCH)")
        logger.info(f"{solver}: {value}{status} in {elapsed * 1000:.1f} ms")

    start_time = time.perf_counter()
    memo_value = knapsack.exact_value_via_memo()
    record(knapsack.memo_solver.name, memo_value, time.perf_counter() - start_time)

    start_time = time.perf_counter()
    tab_value = knapsack.exact_value_via_tabulation()
    record(knapsack.tabulation_solver.name, tab_value, time.perf_counter() - start_time)

    start_time = time.perf_counter()
    approx = knapsack.approx_value(accuracy)
    record(f"{knapsack.fptas_solver.name} @ {accuracy:g}%", approx, time.perf_counter() - start_time, exact=False)

    if memo_value != tab_value:
        logger.error(f"Exact solvers disagree on {name}: memoized {memo_value} vs tabulation {tab_value}.")

    items = knapsack.reconstruct_included_items()
    logger.info(f"Items in the knapsack: {format_items(items)}")
    return rows


def main():
    """
    Runs the exact and approximate solvers on every configured dataset, checks
    them against the expected answers and saves a CSV report and a time plot.
    """
    parser = argparse.ArgumentParser(description="Evaluate the knapsack solvers on a set of datasets.")
    parser.add_argument(
        "datasets",
        nargs="*",
        help="Instance files to evaluate. Defaults to the datasets listed in configs/config.yaml."
    )
    parser.add_argument(
        "--accuracy",
        type=float,
        default=cfg.evaluation.accuracy,
        help="Accuracy in percent for the FPTAS solver."
    )
    parser.add_argument(
        "--verbosity",
        type=int,
        default=None,
        help="Solver verbosity: 0 quiet, 1 summary, 2 per-step trace. Overrides the config."
    )
    parser.add_argument(
        "--no-plot",
        action="store_true",
        help="Skip the time comparison plot."
    )
    args = parser.parse_args()

    solver_config = dict(cfg.solvers)
    if args.verbosity is not None:
        solver_config['verbosity'] = args.verbosity

    # --- 1. Create a unique name and directory for this evaluation run ---
    run_name = create_run_name(cfg, "eval")
    run_dir = os.path.join(cfg.paths.artifacts, "runs", "evaluation", run_name)
    os.makedirs(run_dir, exist_ok=True)

    setup_logger(run_name="evaluation_session", log_dir=run_dir, verbosity=solver_config.get('verbosity', 1))
    logger = logging.getLogger(__name__)
    logger.info(f"--- Starting New Evaluation Run: {run_name} ---")

    if args.datasets:
        datasets = [{"file": os.path.basename(p), "path": os.path.abspath(p), "expected": None} for p in args.datasets]
    else:
        datasets = cfg.evaluation.datasets
    if not datasets:
        logger.critical("No datasets given on the command line or in config.yaml. Exiting.")
        sys.exit(1)

    with open(os.path.join(run_dir, "run_info.json"), 'w') as f:
        json.dump({"run_name": run_name, "args": vars(args), "solver_config": solver_config,
                   "datasets": datasets}, f, indent=4)

    # --- 2. Run Evaluation Loop ---
    raw_results = []
    failures = 0
    for dataset in tqdm(datasets, desc="Evaluating datasets"):
        try:
            raw_results.extend(evaluate_dataset(dataset, solver_config, args.accuracy, logger))
        except (OSError, KnapsackError) as e:
            failures += 1
            logger.error(f"Failed to evaluate {dataset['path']}: {e}")

    if not raw_results:
        logger.critical("No dataset could be evaluated.")
        sys.exit(1)

    # --- 3. Reports ---
    results_df = pd.DataFrame(raw_results)
    save_results_to_csv(results_df, os.path.join(run_dir, "evaluation_results.csv"))
    summary_df = summarize_by_solver(results_df)
    logger.info("Summary by solver:\n" + summary_df.to_string(index=False))

    if not args.no_plot:
        plot_evaluation_times(results_df, os.path.join(run_dir, "evaluation_times.png"))

    logger.info(f"--- Evaluation Run {run_name} complete. Artifacts saved in: {run_dir} ---")
    if failures or summary_df['mismatches'].sum() > 0:
        sys.exit(1)


if __name__ == '__main__':
    main()
