# gpreg/config.py
import os
import logging

# Read version from VERSION file
_version_file = os.path.join(os.path.dirname(__file__), "..", "VERSION")
try:
    with open(os.path.abspath(_version_file), "r") as f:
        __version__ = f.read().strip()
except FileNotFoundError:
    __version__ = "0.0.0"

# Solver budgets used by GaussianProcess.learn_hyperparameters
_DEFAULT_OPTIMIZER_OPTIONS = {
    "max_iterations": 100,
    "max_line_search_steps": 50,
    "max_direction_restarts": 25,
    "max_lbfgs_rank": 15,
    "ftol": 1e-9,
    "gtol": 1e-6,
}


class _GPRegConfig:
    def __init__(self):
        self.version = __version__
        self.dtype = float
        self.seed = 1234
        self.optimizer_options = dict(_DEFAULT_OPTIMIZER_OPTIONS)
        # logger lives in config
        self.logger = logging.getLogger("gpreg")
        if not self.logger.handlers:
            h = logging.StreamHandler()
            h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
            self.logger.addHandler(h)
        self.logger.setLevel(os.environ.get("GPREG_LOG_LEVEL", "INFO").upper())

    def __str__(self):
        return (
            f"GPRegConfig("
            f"version={self.version}, "
            f"dtype={self.dtype}, "
            f"seed={self.seed}, "
            f"optimizer_options={self.optimizer_options})"
        )

    def __repr__(self):
        return (
            f"<GPRegConfig "
            f"version={self.version!r}, "
            f"dtype={self.dtype!r}, "
            f"seed={self.seed!r}, "
            f"optimizer_options={self.optimizer_options!r}>"
        )

    def update(self, **kwargs):
        for k, v in kwargs.items():
            setattr(self, k, v)
        return self


_config = _GPRegConfig()


def get_config():
    return _config


def get_logger():
    return _config.logger


def set_log_level(level):
    _config.logger.setLevel(level)


def get_optimizer_options():
    """Return a copy of the default optimizer budgets."""
    return dict(_config.optimizer_options)


def set_optimizer_options(**kwargs):
    """Override default optimizer budgets ('max_iterations', 'max_lbfgs_rank', ...)."""
    unknown = set(kwargs) - set(_DEFAULT_OPTIMIZER_OPTIONS)
    if unknown:
        raise ValueError(f"Unknown optimizer options: {sorted(unknown)}")
    _config.optimizer_options.update(kwargs)


def reset_optimizer_options():
    _config.optimizer_options = dict(_DEFAULT_OPTIMIZER_OPTIONS)
