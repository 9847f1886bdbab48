# gpreg/num.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""NumPy numerical layer for gpreg.

Imported as ``gnp`` throughout the package. Re-exports the numpy /
scipy routines used by the regression engine, with float64 defaults,
plus a seedable package-level random generator.
"""

import builtins
from typing import Any, Callable, Union

import numpy
from numpy import (
    copy,
    where,
    allclose,
    vstack,
    zeros_like,
    diag,
    tril,
    arange,
    sqrt,
    exp,
    log,
    sum,
    dot,
    outer,
    einsum,
    all,
    any,
    maximum,
)
from numpy import pi, inf
from numpy import finfo
from numpy.linalg import norm
from scipy.special import gammaln
from scipy.linalg import cholesky as _scipy_cholesky
from scipy.linalg import cho_solve

from gpreg.config import get_config

Scalar = Union[int, float]
ArrayLike = Any

_config = get_config()
_np_dtype = numpy.float64

fmax = finfo(_np_dtype).max

_LINALG_ERROR_KEYWORDS = (
    "singular",
    "not positive definite",
    "not positive-definite",
    "cholesky",
    "leading minor",
    "lapack",
    "array must not contain infs or nans",
)

# ..................................................


def _is_linalg_exception(exc: Exception) -> bool:
    if isinstance(exc, numpy.linalg.LinAlgError):
        return True
    msg = str(exc).lower()
    return builtins.any(keyword in msg for keyword in _LINALG_ERROR_KEYWORDS)


# ..................................................


def array(x, dtype=None):
    return numpy.array(x, dtype=_np_dtype if dtype is None else dtype)


def asarray(x, dtype=None):
    if dtype is not None:
        return numpy.asarray(x, dtype=dtype)
    out = numpy.asarray(x)
    if numpy.issubdtype(out.dtype, numpy.integer) or numpy.issubdtype(
        out.dtype, numpy.floating
    ):
        return out.astype(_np_dtype, copy=False)
    return out


def empty(shape, dtype=None):
    return numpy.empty(shape, dtype=_np_dtype if dtype is None else dtype)


def zeros(shape, dtype=None):
    return numpy.zeros(shape, dtype=_np_dtype if dtype is None else dtype)


def ones(shape, dtype=None):
    return numpy.ones(shape, dtype=_np_dtype if dtype is None else dtype)


def full(shape, fill_value, dtype=None):
    return numpy.full(shape, fill_value, dtype=_np_dtype if dtype is None else dtype)


def eye(n, m=None, k=0, dtype=None):
    return numpy.eye(n, M=m, k=k, dtype=_np_dtype if dtype is None else dtype)


def inftobigf(a, bigf=fmax / 1000.0):
    return where(numpy.isinf(a), numpy.full_like(a, bigf), a)


# ..................................................


def derivative_finite_diff(f: Callable[[Scalar], ArrayLike], x: Scalar, h: Scalar):
    """
    5-point central difference derivative of f w.r.t. scalar x.
    """
    f_x_p2 = f(x + 2 * h)
    f_x_p1 = f(x + h)
    f_x_m1 = f(x - h)
    f_x_m2 = f(x - 2 * h)
    return (-f_x_p2 + 8 * f_x_p1 - 8 * f_x_m1 + f_x_m2) / (12.0 * h)


def grad(f: Callable[[ArrayLike], ArrayLike], h: float = 1e-5):
    """
    Return function that computes gradient of scalar f via finite differences.

    Uses 5-point central difference formula for accuracy.
    Suitable for low to moderate dimensional problems.
    """

    def grad_f(x: ArrayLike) -> ArrayLike:
        x_arr = asarray(x)
        grad_vec = zeros_like(x_arr)
        for i in range(x_arr.shape[0]):

            def f_i(xi_scalar):
                x_copy = copy(x_arr)
                x_copy[i] = xi_scalar
                return f(x_copy)

            grad_vec[i] = derivative_finite_diff(f_i, float(x_arr[i]), h)
        return grad_vec

    return grad_f


# ..................................................


def cholesky(A):
    """Lower-triangular Cholesky factor of a symmetric positive-definite A."""
    return _scipy_cholesky(A, lower=True, check_finite=True)


def cholesky_solve_factor(L, b):
    """Solve (L L^T) x = b given the lower-triangular factor L."""
    return cho_solve((L, True), b, check_finite=False)


def logdet_from_cholesky(L):
    return 2.0 * sum(log(diag(L)))


# ..................................................

# Build one global RNG (or let the user set the seed somewhere):
_np_rng = numpy.random.default_rng(seed=_config.seed)


def set_seed(seed: int) -> None:
    """Set the global NumPy generator seed."""
    global _np_rng
    _config.seed = seed
    _np_rng = numpy.random.default_rng(seed=seed)


def uniform(low, high, size, rng=None):
    rng = _np_rng if rng is None else rng
    return rng.uniform(low, high, size=size).astype(_np_dtype, copy=False)


def normal(loc, scale, size, rng=None):
    rng = _np_rng if rng is None else rng
    return rng.normal(loc=loc, scale=scale, size=size).astype(_np_dtype, copy=False)
