# knapsacks/utils/logger.py
import logging
import sys
import os
from datetime import datetime

# Solver verbosity (see configs/config.yaml) -> console log level.
_VERBOSITY_LEVELS = {0: logging.WARNING, 1: logging.INFO, 2: logging.DEBUG}


def console_level_for(verbosity: int) -> int:
    """Maps a solver verbosity to the level the console handler should show."""
    return _VERBOSITY_LEVELS.get(verbosity, logging.DEBUG if verbosity > 2 else logging.INFO)


def build_console_handler(verbosity: int = 1) -> logging.Handler:
    """Stdout handler showing WARNING and above at verbosity 0, INFO at 1, DEBUG at 2."""
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level_for(verbosity))
    console_handler.setFormatter(logging.Formatter(
        "%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    ))
    return console_handler


def setup_logger(run_name: str, log_dir: str, verbosity: int = 1) -> str:
    """
    Configures the root logger for the entire application.
    This should be called only ONCE at the application's entry point.

    Everything from DEBUG up goes to a timestamped file in log_dir; what reaches
    the console depends on verbosity (see build_console_handler).

    Returns:
        str: The path of the log file, or an empty string if logging was already configured.
    """
    logger = logging.getLogger()

    # prevent reconfiguration of the logger
    if logger.hasHandlers():
        return ""

    logger.setLevel(logging.DEBUG)

    # 1. File handler to log messages to a file
    os.makedirs(log_dir, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_filepath = os.path.join(log_dir, f"{run_name}_{timestamp}.log")

    file_handler = logging.FileHandler(log_filepath, mode='w')
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"
    ))
    logger.addHandler(file_handler)

    # 2. Console handler to log messages to stdout
    logger.addHandler(build_console_handler(verbosity))

    logger.info(f"Logger initialized. All subsequent logs will be saved to: {log_filepath}")
    return log_filepath
