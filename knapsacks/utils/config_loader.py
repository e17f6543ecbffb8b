# knapsacks/utils/config_loader.py
import yaml
import os
import logging
from types import SimpleNamespace
from typing import Dict, Any

from knapsacks.solvers.classic.dp_solver import TabulationSolver, FPTASSolver
from knapsacks.solvers.classic.memo_solver import MemoizedSolver

logger = logging.getLogger(__name__)

# A registry to map algorithm names from YAML to solver classes.
SOLVER_REGISTRY = {
    "Memoized Recursion": MemoizedSolver,
    "2-row DP": TabulationSolver,
    "FPTAS": FPTASSolver,
}

# Sections that solvers consume as plain dicts rather than namespaces.
_KEEP_AS_DICT = ('algorithms_to_test', 'solvers')


def _post_process_config(config_dict: Dict[str, Any]) -> Dict[str, Any]:
    """
    Processes the raw config dict to add absolute paths and resolve solver names.
    This function contains all logic that cannot be represented in a static YAML file.
    """
    # --- 1. Define Project Root and Build Absolute Paths ---
    project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))

    if 'paths' in config_dict:
        for key, rel_path in config_dict['paths'].items():
            config_dict['paths'][key] = os.path.join(project_root, rel_path)
        config_dict['paths']['root'] = project_root

    # --- 2. Resolve dataset files against the data directory ---
    if 'evaluation' in config_dict:
        eval_cfg = config_dict['evaluation']
        data_dir = config_dict.get('paths', {}).get('data', project_root)
        for dataset in eval_cfg.get('datasets', []):
            dataset['path'] = os.path.join(data_dir, dataset['file'])
            dataset.setdefault('expected', None)

        # --- 3. Map Algorithm Names to Classes ---
        if 'algorithms_to_test' in eval_cfg:
            unknown = [name for name in eval_cfg['algorithms_to_test'] if name not in SOLVER_REGISTRY]
            for name in unknown:
                logger.warning(f"Algorithm '{name}' defined in config.yaml but not found in SOLVER_REGISTRY. Skipping.")
            eval_cfg['algorithms_to_test'] = {
                name: SOLVER_REGISTRY[name] for name in eval_cfg['algorithms_to_test'] if name in SOLVER_REGISTRY
            }

    return config_dict


def load_config(config_path: str = 'configs/config.yaml') -> SimpleNamespace:
    """
    Loads, processes, and returns the project configuration from a YAML file
    as a SimpleNamespace object for dot notation access.

    The 'solvers' section stays a dict so it can be handed to solver constructors as is.
    """
    project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
    full_config_path = config_path if os.path.isabs(config_path) else os.path.join(project_root, config_path)

    try:
        with open(full_config_path, 'r') as f:
            config_dict = yaml.safe_load(f) or {}
    except FileNotFoundError:
        raise FileNotFoundError(f"Configuration file not found at: {full_config_path}")

    processed_config = _post_process_config(config_dict)

    # Convert the final dictionary to a SimpleNamespace for easy attribute access
    def dict_to_namespace(d: Dict) -> Any:
        for k, v in d.items():
            if k in _KEEP_AS_DICT:
                continue
            if isinstance(v, dict):
                d[k] = dict_to_namespace(v)
        return SimpleNamespace(**d)

    return dict_to_namespace(processed_config)


# --- A single, global config instance for easy import across the scripts ---
# Other modules can simply use: from knapsacks.utils.config_loader import cfg
cfg = load_config()
