# gpreg/core/likelihood.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Negative log marginal likelihood of the training data.

The cost object is the objective minimized when learning kernel
hyperparameters. The training covariance is built exactly as in
`gpreg.core.covariance` (unit prior variance, noise on the diagonal).
"""
import gpreg.num as gnp
from .covariance import compute_covariance, compute_covariance_gradient
from .linalg import (
    NotPositiveDefiniteError,
    cholesky_factor,
    cholesky_solve,
    log_determinant,
    inverse_from_cholesky,
)


class TrainingLogLikelihood:
    """Negative log-likelihood of zero-mean GP training data.

    .. math::
        L(\\theta) = \\frac{1}{2}\\left(z^T K_\\theta^{-1} z
                     + \\log|K_\\theta| + n \\log 2\\pi\\right)

    Parameters
    ----------
    points : gpreg.core.PointSet
        Training inputs.
    targets : gnp.array
        Targets. May be a capacity-sized buffer; only the first
        ``len(points)`` entries are used.
    kernel : gpreg.kernel.Kernel
        Kernel whose ``params`` are the optimization variables.
    noise : float
        Nugget on the diagonal.

    Notes
    -----
    The parameters passed to the evaluation methods are written into
    ``kernel.params`` only for the duration of the call, then the
    previous values are restored.
    """

    def __init__(self, points, targets, kernel, noise):
        self.points = points
        self.targets = targets
        self.kernel = kernel
        self.noise = noise

    def __call__(self, params):
        return self.value_and_gradient(params)

    def _zi(self):
        return gnp.asarray(self.targets)[: len(self.points)]

    def _swap_params(self, params):
        saved = gnp.copy(self.kernel.params)
        if params is not None:
            self.kernel.params[:] = gnp.asarray(params).reshape(-1)
        return saved

    def _factorize(self):
        K = compute_covariance(self.kernel, self.points, self.noise)
        C = cholesky_factor(K)
        return C

    def negative_log_likelihood(self, params=None):
        """Value of the criterion; +inf if the covariance is not SPD."""
        saved = self._swap_params(params)
        try:
            zi = self._zi()
            n = zi.shape[0]
            try:
                C = self._factorize()
            except NotPositiveDefiniteError:
                return gnp.inf
            Kinv_zi = cholesky_solve(C, zi)
            norm2 = gnp.dot(zi, Kinv_zi)
            return float(0.5 * (n * gnp.log(2.0 * gnp.pi) + log_determinant(C) + norm2))
        finally:
            self.kernel.params[:] = saved

    def log_likelihood(self, params=None):
        return -self.negative_log_likelihood(params)

    def value_and_gradient(self, params=None):
        """Return (L, dL/dparams).

        dL/dθ_k = 1/2 tr((K^{-1} - α αᵀ) dK/dθ_k), with α = K^{-1} z.
        """
        saved = self._swap_params(params)
        try:
            zi = self._zi()
            n = zi.shape[0]
            q = saved.shape[0]
            try:
                C = self._factorize()
            except NotPositiveDefiniteError:
                return gnp.inf, gnp.zeros((q,))
            alpha = cholesky_solve(C, zi)
            value = 0.5 * (
                n * gnp.log(2.0 * gnp.pi) + log_determinant(C) + gnp.dot(zi, alpha)
            )
            W = inverse_from_cholesky(C) - gnp.outer(alpha, alpha)
            dK = compute_covariance_gradient(self.kernel, self.points)
            gradient = 0.5 * gnp.einsum("ij,kji->k", W, dK)
            return float(value), gradient
        finally:
            self.kernel.params[:] = saved

    def gradient(self, params=None):
        return self.value_and_gradient(params)[1]
