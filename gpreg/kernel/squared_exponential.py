# gpreg/kernel/squared_exponential.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
import gpreg.num as gnp
from .base import Kernel


class SquaredExponentialKernel(Kernel):
    """Squared-exponential (Gaussian) kernel.

    .. math::
        k(a, b) = \\exp(-h^2 / 2), \\quad
        h^2 = \\sum_j (a_j - b_j)^2 / \\rho_j^2
    """

    def evaluate(self, a, b):
        h = self.scaled_distance(a, b)
        return float(gnp.exp(-0.5 * h**2))

    def gradient(self, a, b):
        a = gnp.asarray(a).reshape(-1)
        b = gnp.asarray(b).reshape(-1)
        k = self.evaluate(a, b)
        invrho2 = gnp.exp(2.0 * self._params)
        sq = (a - b) ** 2
        if self._params.shape[0] == 1:
            return gnp.array([-k * invrho2[0] * gnp.sum(sq)])
        return -k * invrho2 * sq
