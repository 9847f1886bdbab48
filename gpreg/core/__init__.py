# gpreg/core/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------

"""
Core components of the gpreg package.

This subpackage contains the regression engine: training point store,
covariance construction, Cholesky-based posterior computations,
training log-likelihood and the hyperparameter optimizer.

Public API
----------
GaussianProcess : class
    GP regression model with cached factorization.
PointSet : class
    Shared ordered store of training inputs.
TrainingLogLikelihood : class
    Negative log marginal likelihood and its gradient.
NotPositiveDefiniteError : exception
    Raised when a covariance matrix cannot be factorized.
"""

from .points import PointSet
from .linalg import NotPositiveDefiniteError
from .likelihood import TrainingLogLikelihood
from .optimizer import minimize
from .model import GaussianProcess

__all__ = [
    "GaussianProcess",
    "PointSet",
    "TrainingLogLikelihood",
    "NotPositiveDefiniteError",
    "minimize",
]
