# gpreg/core/linalg.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Cholesky factorization and solves for the posterior computations.

Factorization failures are surfaced as `NotPositiveDefiniteError`
instead of letting NaNs propagate into predictions.
"""
import numpy
import gpreg.num as gnp


class NotPositiveDefiniteError(numpy.linalg.LinAlgError):
    """Raised when a covariance matrix cannot be Cholesky-factorized."""


def cholesky_factor(K):
    """Return the lower-triangular Cholesky factor C of K (K = C Cᵀ).

    Parameters
    ----------
    K : array_like, shape (n, n)
        Symmetric positive-definite matrix. n may be zero.

    Raises
    ------
    NotPositiveDefiniteError
        If K is not positive definite or contains non-finite values.
    """
    n = K.shape[0]
    if n == 0:
        return gnp.zeros((0, 0))
    try:
        return gnp.cholesky(K)
    except (numpy.linalg.LinAlgError, ValueError) as exc:
        if not gnp._is_linalg_exception(exc):
            raise
        raise NotPositiveDefiniteError(
            f"Covariance matrix of size {n}x{n} is not positive definite: {exc}"
        ) from exc


def cholesky_solve(C, b):
    """Solve K x = b given the lower-triangular factor C of K."""
    if C.shape[0] == 0:
        return gnp.zeros(b.shape)
    return gnp.cholesky_solve_factor(C, b)


def log_determinant(C):
    """log|K| from the Cholesky factor C of K."""
    if C.shape[0] == 0:
        return 0.0
    return gnp.logdet_from_cholesky(C)


def inverse_from_cholesky(C):
    """K^{-1} from the Cholesky factor C of K."""
    n = C.shape[0]
    return cholesky_solve(C, gnp.eye(n))
