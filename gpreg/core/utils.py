# gpreg/core/utils.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Small utilities used across `gpreg.core` modules.

This file hosts:
- Precondition checks run by GaussianProcess constructors
- Shape/type conversion helpers for query points and targets
"""
import gpreg.num as gnp
from gpreg.kernel import Kernel
from .points import PointSet


def validate_kernel(kernel):
    """Raise TypeError unless `kernel` provides evaluate() and params."""
    if kernel is None:
        raise TypeError("kernel must not be None")
    if isinstance(kernel, Kernel):
        return
    if not callable(getattr(kernel, "evaluate", None)) or not hasattr(kernel, "params"):
        raise TypeError(
            "kernel must provide an evaluate(a, b) method and a params array"
        )


def validate_noise(noise):
    if not noise > 0.0:
        raise ValueError(f"noise must be > 0, got {noise}")


def validate_capacity(max_points, num_points):
    if max_points < 1:
        raise ValueError(f"max_points must be >= 1, got {max_points}")
    if num_points > max_points:
        raise ValueError(
            f"{num_points} points exceed the capacity max_points={max_points}"
        )


def as_point_set(points):
    """Return `points` if already a PointSet (shared), else wrap a copy."""
    if isinstance(points, PointSet):
        return points
    if points is None:
        raise ValueError("points must not be None")
    return PointSet(points)


def as_targets(targets, num_points):
    """Convert targets to a 1D array and check their count."""
    targets = gnp.asarray(targets)
    if targets.ndim == 2:
        assert targets.shape[1] == 1, "targets should only have one column if it's a 2D array"
        targets = targets.reshape(-1)
    elif targets.ndim != 1:
        raise ValueError("targets should be 1D or a 2D column array")
    if targets.shape[0] != num_points:
        raise ValueError(
            f"points and targets must have the same length ({num_points} != {targets.shape[0]})"
        )
    return targets


def as_query(x, dimension):
    """Convert a query point to a 1D array of the training dimension."""
    x = gnp.asarray(x).reshape(-1)
    if dimension is not None and x.shape[0] != dimension:
        raise ValueError(
            f"query has dimension {x.shape[0]}, training points have dimension {dimension}"
        )
    return x
