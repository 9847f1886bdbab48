# gpreg/__init__.py

from . import config
from . import num
from . import kernel
from . import core
from .core import GaussianProcess, PointSet, NotPositiveDefiniteError

__all__ = [
    "num",
    "kernel",
    "core",
    "GaussianProcess",
    "PointSet",
    "NotPositiveDefiniteError",
    "__version__",
]

__version__ = config.get_config().version
