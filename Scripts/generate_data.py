# generate_data.py
# -*- coding: utf-8 -*-

"""
This is the single entry point for generating knapsack datasets.
It uses the 'generation' section of 'configs/config.yaml' and the core functions
from 'knapsacks/utils/generator.py'. Command line options override the config.
"""

import argparse
import logging
import os
import random
from typing import Optional

from tqdm import tqdm

from knapsacks.utils.config_loader import cfg
from knapsacks.utils.logger import setup_logger
import knapsacks.utils.generator as gen


def create_dataset(
    dataset_name: str,
    output_dir: str,
    instance_params: dict,
    n: int,
    num_instances: int = 1,
    seed: Optional[int] = None
) -> list:
    """
    Creates a dataset of knapsack instances of size n.

    Args:
        dataset_name (str): A name for the generation task, used in log messages.
        output_dir (str): The directory to save the instance files.
        instance_params (dict): 'correlation', 'max_weight', 'max_value' and 'capacity_ratio_range'.
        n (int): Number of items per instance.
        num_instances (int): The number of instances to generate.
        seed (int, optional): Seed for reproducible datasets.

    Returns:
        list: The paths of the files written.
    """
    logger = logging.getLogger(__name__)
    logger.info(f"--- Starting dataset generation: '{dataset_name}' ---")
    os.makedirs(output_dir, exist_ok=True)

    rng = random.Random(seed)
    written = []
    for i in tqdm(range(num_instances), desc=f"Generating {dataset_name}"):
        ratio_range = instance_params['capacity_ratio_range']
        randomized_ratio = rng.uniform(ratio_range[0], ratio_range[1])
        items, capacity = gen.generate_knapsack_instance(
            n=n,
            correlation=instance_params['correlation'],
            max_weight=instance_params['max_weight'],
            max_value=instance_params['max_value'],
            capacity_ratio=randomized_ratio,
            seed=rng.randrange(2 ** 32)
        )

        filename = os.path.join(output_dir, f"knapsack_n{n}_{instance_params['correlation']}_{i + 1}.txt")
        gen.save_instance_to_file(items, capacity, filename)
        written.append(filename)

    logger.info(f"--- Dataset generation '{dataset_name}' complete. Files saved in '{output_dir}'. ---")
    return written


def main():
    gen_cfg = cfg.generation
    parser = argparse.ArgumentParser(description="Generate random 0/1 knapsack instances.")
    parser.add_argument("--n", type=int, default=gen_cfg.n, help="Number of items per instance.")
    parser.add_argument("--num-instances", type=int, default=gen_cfg.num_instances)
    parser.add_argument("--correlation", choices=gen.CORRELATIONS, default=gen_cfg.correlation)
    parser.add_argument("--output-dir", default=cfg.paths.data_generated)
    parser.add_argument("--seed", type=int, default=gen_cfg.seed)
    args = parser.parse_args()

    # --- Configure logger ONCE for this script run ---
    setup_logger(run_name="data_generation", log_dir=cfg.paths.logs)

    create_dataset(
        dataset_name=f"n{args.n}-{args.correlation}",
        output_dir=args.output_dir,
        instance_params={
            'correlation': args.correlation,
            'max_weight': gen_cfg.max_weight,
            'max_value': gen_cfg.max_value,
            'capacity_ratio_range': gen_cfg.capacity_ratio_range,
        },
        n=args.n,
        num_instances=args.num_instances,
        seed=args.seed
    )


if __name__ == '__main__':
    main()
