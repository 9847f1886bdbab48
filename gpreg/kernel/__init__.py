# gpreg/kernel/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Normalized kernels for Gaussian process regression.

Modules
-------
base
    Kernel base class (evaluation, mutable hyperparameters, gradient).
squared_exponential
    Squared-exponential kernel with analytic gradient.
matern
    Matérn family of kernels with half-integer regularity.

Public API
-----------
Kernel, SquaredExponentialKernel, MaternKernel, maternp_kernel
"""

from .base import Kernel
from .squared_exponential import SquaredExponentialKernel
from .matern import MaternKernel, maternp_kernel

__all__ = [
    "Kernel",
    "SquaredExponentialKernel",
    "MaternKernel",
    "maternp_kernel",
]
