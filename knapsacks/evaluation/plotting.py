# knapsacks/evaluation/plotting.py
import logging

import matplotlib.pyplot as plt
import pandas as pd
import seaborn as sns

logger = logging.getLogger(__name__)


def plot_accuracy_tradeoff(sweep_df: pd.DataFrame, save_path: str):
    """
    Plots the FPTAS relative error and solve time against the requested accuracy.

    Args:
        sweep_df (pd.DataFrame): One row per (dataset, accuracy) with columns
                                 'dataset', 'accuracy', 'rel_error_pct' and 'time_seconds'.
        save_path (str): The path to save the plot image.
    """
    logger.info("Generating FPTAS accuracy trade-off plot...")
    plt.style.use('seaborn-v0_8-whitegrid')
    fig, axes = plt.subplots(2, 1, figsize=(12, 10), sharex=True)
    fig.suptitle('FPTAS: Error and Time vs. Requested Accuracy', fontsize=16)

    df = sweep_df.copy()
    df['time_ms'] = df['time_seconds'] * 1000.0

    sns.lineplot(ax=axes[0], data=df, x='accuracy', y='rel_error_pct', hue='dataset', marker='o')
    axes[0].set_title('Relative Error against the Exact Optimum')
    axes[0].set_ylabel('Relative Error (%)')

    sns.lineplot(ax=axes[1], data=df, x='accuracy', y='time_ms', hue='dataset', marker='o')
    axes[1].set_title('Solve Time')
    axes[1].set_ylabel('Time (ms)')
    axes[1].set_yscale('log')  # time grows quickly as accuracy approaches 100%
    axes[1].set_xlabel('Requested Accuracy (%)')

    plt.tight_layout(rect=[0, 0.03, 1, 0.97])
    try:
        plt.savefig(save_path, dpi=300)
        logger.info(f"Trade-off plot saved to {save_path}")
    finally:
        plt.close(fig)


def plot_evaluation_times(results_df: pd.DataFrame, save_path: str):
    """Plots a comparison of solve times for all solvers on every dataset."""
    logger.info("Generating evaluation time comparison plot...")
    plt.style.use('seaborn-v0_8-whitegrid')
    plt.figure(figsize=(12, 7))

    df = results_df.copy()
    df['time_ms'] = df['time_seconds'] * 1000.0
    sns.barplot(data=df, x='dataset', y='time_ms', hue='solver')

    plt.title('Solver Performance: Time per Dataset', fontsize=16)
    plt.xlabel('Dataset', fontsize=12)
    plt.ylabel('Time (ms)', fontsize=12)
    plt.yscale('log')
    plt.legend(title='Solver')
    plt.tight_layout()
    plt.savefig(save_path, dpi=300)
    plt.close()
    logger.info(f"Time comparison plot saved to {save_path}")
