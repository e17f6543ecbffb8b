# test/test_config.py

import os

from knapsacks.solvers.classic.dp_solver import FPTASSolver
from knapsacks.utils.config_loader import SOLVER_REGISTRY, cfg, load_config


def test_project_config_loads():
    assert os.path.isabs(cfg.paths.data)
    assert isinstance(cfg.solvers, dict)
    assert set(cfg.evaluation.algorithms_to_test) <= set(SOLVER_REGISTRY)
    for dataset in cfg.evaluation.datasets:
        assert os.path.exists(dataset['path'])


def test_unknown_algorithms_are_dropped(tmp_path, caplog):
    config_file = tmp_path / "config.yaml"
    config_file.write_text(
        "paths:\n"
        "  data: data\n"
        "solvers:\n"
        "  verbosity: 1\n"
        "evaluation:\n"
        "  algorithms_to_test: ['FPTAS', 'Gurobi']\n"
        "  datasets:\n"
        "    - file: example.txt\n"
    )

    config = load_config(str(config_file))

    assert config.evaluation.algorithms_to_test == {"FPTAS": FPTASSolver}
    assert config.evaluation.datasets[0]['expected'] is None
    assert config.evaluation.datasets[0]['path'].endswith(os.path.join("data", "example.txt"))
    assert config.solvers == {"verbosity": 1}
    assert "Gurobi" in caplog.text
