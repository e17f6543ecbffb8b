# sweep_accuracy.py
import argparse
import logging
import os
import warnings

import pandas as pd
from tqdm import tqdm

from knapsacks.errors import AccuracyBoundWarning
from knapsacks.evaluation.plotting import plot_accuracy_tradeoff
from knapsacks.evaluation.reporting import add_error_columns, save_results_to_csv
from knapsacks.knapsack import Knapsack
from knapsacks.utils.config_loader import cfg
from knapsacks.utils.logger import setup_logger
from knapsacks.utils.run_utils import create_run_name


def sweep_dataset(path: str, accuracies: list, solver_config: dict) -> list:
    """Runs the FPTAS at every accuracy on one dataset and returns one row per accuracy."""
    knapsack = Knapsack.from_file(path, config=solver_config)
    exact_value = knapsack.exact_value_via_tabulation()
    rows = []
    for accuracy in accuracies:
        # The clamp warning is already logged by the solver; record it in the row instead.
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", category=AccuracyBoundWarning)
            result = knapsack.fptas_solver.run(knapsack.store, accuracy)
        rows.append({
            "dataset": os.path.basename(path),
            "accuracy": accuracy,
            "value": result["value"],
            "exact_value": exact_value,
            "scaling_divisor": result["scaling_divisor"],
            "accuracy_guaranteed": result["accuracy_guaranteed"],
            "time_seconds": result["time"],
        })
    return rows


def main():
    """
    Shows the FPTAS accuracy/runtime trade-off: solves each dataset exactly once,
    then approximately at every accuracy in evaluation.sweep_accuracies.
    """
    parser = argparse.ArgumentParser(description="Sweep the FPTAS over several accuracy levels.")
    parser.add_argument("datasets", nargs="*", help="Instance files. Defaults to the datasets in config.yaml.")
    parser.add_argument("--accuracies", type=float, nargs="+", default=cfg.evaluation.sweep_accuracies)
    args = parser.parse_args()

    run_name = create_run_name(cfg, "sweep")
    run_dir = os.path.join(cfg.paths.artifacts, "runs", "sweep", run_name)
    os.makedirs(run_dir, exist_ok=True)
    setup_logger(run_name="accuracy_sweep", log_dir=run_dir)
    logger = logging.getLogger(__name__)

    paths = [os.path.abspath(p) for p in args.datasets] or [d['path'] for d in cfg.evaluation.datasets]
    accuracies = sorted(args.accuracies, reverse=True)
    logger.info(f"Sweeping accuracies {accuracies} over {len(paths)} dataset(s).")

    raw_results = []
    for path in tqdm(paths, desc="Sweeping datasets"):
        raw_results.extend(sweep_dataset(path, accuracies, dict(cfg.solvers)))

    sweep_df = add_error_columns(pd.DataFrame(raw_results))
    save_results_to_csv(sweep_df, os.path.join(run_dir, "accuracy_sweep.csv"))

    # m comes from the total value, so unclamped rows can still fall short of (1 - epsilon) x OPT.
    bound = sweep_df['exact_value'] * sweep_df['accuracy'] / 100.0
    violations = sweep_df[sweep_df['accuracy_guaranteed'] & (sweep_df['value'] < bound)]
    if not violations.empty:
        logger.warning("Below the requested fraction of the optimum:\n" + violations.to_string(index=False))

    plot_accuracy_tradeoff(sweep_df, os.path.join(run_dir, "accuracy_tradeoff.png"))
    logger.info(f"--- Sweep {run_name} complete. Artifacts saved in: {run_dir} ---")


if __name__ == '__main__':
    main()
