# knapsacks/utils/run_utils.py
import datetime
from types import SimpleNamespace


def create_run_name(config: SimpleNamespace, mode: str) -> str:
    """
    Creates a unique and informative name for an evaluation run.

    Args:
        config (SimpleNamespace): The configuration object for the run.
        mode (str): What the run does, e.g. 'eval' or 'sweep'.

    Returns:
        str: A unique name, e.g., '20250715_105500_eval_acc90' or '20250715_105500_sweep'
    """
    timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")

    try:
        if mode == "eval":
            run_name = f"{timestamp}_eval_acc{config.evaluation.accuracy:g}"
        else:
            run_name = f"{timestamp}_{mode}"
    except AttributeError:
        # Fallback if the evaluation section is missing
        run_name = f"{timestamp}_{mode}"

    return run_name
