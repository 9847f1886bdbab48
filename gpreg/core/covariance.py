# gpreg/core/covariance.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Training covariance and cross-covariance.

The prior variance is normalized to one: the diagonal of the training
covariance is ``1 + noise`` whatever the kernel returns for k(x, x).
"""
import gpreg.num as gnp


def compute_covariance(kernel, points, noise, out=None):
    """Fill the top-left (n, n) block of `out` with the training covariance.

    Parameters
    ----------
    kernel : gpreg.kernel.Kernel
    points : gpreg.core.PointSet
    noise : float
        Nugget added to the unit prior variance on the diagonal.
    out : gnp.array, shape (m, m), m >= n, optional
        Preallocated buffer. Entries outside the (n, n) block are left
        untouched.

    Returns
    -------
    K : gnp.array, shape (n, n)
        View on the filled block of `out`.
    """
    n = len(points)
    if out is None:
        out = gnp.empty((n, n))
    for i in range(n):
        out[i, i] = 1.0 + noise
        for j in range(i):
            out[i, j] = kernel.evaluate(points[i], points[j])
            out[j, i] = out[i, j]
    return out[:n, :n]


def compute_covariance_gradient(kernel, points):
    """Derivatives of the training covariance w.r.t. kernel parameters.

    Returns
    -------
    dK : gnp.array, shape (q, n, n)
        dK[k] = d K / d params[k]. The diagonal is zero since it does
        not depend on the kernel.
    """
    n = len(points)
    q = gnp.asarray(kernel.params).shape[0]
    dK = gnp.zeros((q, n, n))
    for i in range(n):
        for j in range(i):
            g = kernel.gradient(points[i], points[j])
            dK[:, i, j] = g
            dK[:, j, i] = g
    return dK


def cross_covariance(kernel, points, x, out=None):
    """Kernel similarity between query `x` and every training point."""
    n = len(points)
    if out is None:
        out = gnp.empty((n,))
    for i in range(n):
        out[i] = kernel.evaluate(points[i], x)
    return out[:n]
