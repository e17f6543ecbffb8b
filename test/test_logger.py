# test/test_logger.py

import logging

import pytest

from knapsacks.utils.logger import build_console_handler, console_level_for


@pytest.mark.parametrize("verbosity, level", [
    (0, logging.WARNING),
    (1, logging.INFO),
    (2, logging.DEBUG),
    (5, logging.DEBUG),
])
def test_console_level_follows_verbosity(verbosity, level):
    assert console_level_for(verbosity) == level
    assert build_console_handler(verbosity).level == level


def test_quiet_console_prints_warnings_only(capsys):
    logger = logging.getLogger("knapsacks.test_quiet_console")
    logger.propagate = False
    logger.setLevel(logging.DEBUG)
    handler = build_console_handler(0)
    logger.addHandler(handler)
    try:
        logger.info("solver summary")
        logger.warning("divisor clamped")
    finally:
        logger.removeHandler(handler)

    out = capsys.readouterr().out
    assert "solver summary" not in out
    assert "divisor clamped" in out
