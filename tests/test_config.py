import logging
import pytest

import gpreg
from gpreg import config


def test_version():
    assert isinstance(gpreg.__version__, str)
    assert gpreg.__version__ == config.get_config().version


def test_logger():
    logger = config.get_logger()
    assert logger.name == "gpreg"
    level = logger.level
    try:
        config.set_log_level(logging.DEBUG)
        assert logger.level == logging.DEBUG
    finally:
        config.set_log_level(level)


def test_optimizer_options():
    opts = config.get_optimizer_options()
    assert opts["max_iterations"] == 100
    assert opts["max_line_search_steps"] == 50
    assert opts["max_direction_restarts"] == 25
    assert opts["max_lbfgs_rank"] == 15
    opts["max_iterations"] = 1
    assert config.get_optimizer_options()["max_iterations"] == 100
    with pytest.raises(ValueError):
        config.set_optimizer_options(maxiter=3)


def test_config_str_and_update():
    cfg = config.get_config()
    assert "GPRegConfig" in str(cfg)
    assert "GPRegConfig" in repr(cfg)
    seed = cfg.seed
    try:
        assert cfg.update(seed=42).seed == 42
    finally:
        cfg.update(seed=seed)
