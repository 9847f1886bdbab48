# gpreg/kernel/matern.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
from math import sqrt
import gpreg.num as gnp
from .base import Kernel


def maternp_kernel(p: int, h):
    """Matérn kernel with half-integer regularity :math:`\\nu = p + 1/2`.

    Using the half-integer simplification (Watson 1922; Abramowitz & Stegun):

    .. math::
        K(h) = \\exp(-2\\sqrt{\\nu}\\,h)\\,
               \\frac{\\Gamma(p+1)}{\\Gamma(2p+1)}
               \\sum_{i=0}^{p} \\frac{(p+i)!}{i!(p-i)!}\\,(4\\sqrt{\\nu}h)^{\\,p-i}

    Parameters
    ----------
    p : int
        Nonnegative integer with :math:`\\nu = p+1/2`.
    h : float or gnp.array
        Scaled distances.

    Returns
    -------
    float or gnp.array
        Kernel values, equal to one at h = 0.
    """
    gln = gnp.gammaln(gnp.arange(2 * p + 2))
    h = gnp.inftobigf(gnp.asarray(h))
    c = 2.0 * sqrt(p + 0.5)
    twoch = 2.0 * c * h
    polynomial = gnp.ones(h.shape)
    for i in range(p):
        exp_log_combination = gnp.exp(
            gln[p + 1] - gln[2 * p + 1] + gln[p + i + 1] - gln[i + 1] - gln[p - i + 1]
        )
        polynomial += exp_log_combination * (twoch ** (p - i))
    return gnp.exp(-c * h) * polynomial


class MaternKernel(Kernel):
    """Matérn kernel, :math:`\\nu = p + 1/2`.

    p = 0 is the exponential kernel, p = 1 Matérn 3/2, p = 2 Matérn 5/2.
    The gradient uses the finite-difference default of :class:`Kernel`.
    """

    def __init__(self, p, loginvrho):
        if int(p) != p or p < 0:
            raise ValueError("p must be a nonnegative integer")
        super().__init__(loginvrho)
        self.p = int(p)

    def __repr__(self):
        return f"MaternKernel(p={self.p}, loginvrho={self._params.tolist()})"

    def evaluate(self, a, b):
        h = self.scaled_distance(a, b)
        return float(maternp_kernel(self.p, h))
