# gpreg/kernel/base.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Base class for normalized, stationary kernels.
"""
import gpreg.num as gnp


class Kernel:
    """Normalized kernel with a mutable hyperparameter vector.

    Subclasses implement :meth:`evaluate`. Kernels are normalized so that
    ``evaluate(x, x) == 1``; the prior variance of the GP is therefore
    one, and observation noise is added by the model on the diagonal.

    Attributes
    ----------
    params : gnp.array, shape (q,)
        Hyperparameters, here log inverse length scales
        :math:`\\log(1/\\rho_j)`, either one (isotropic) or one per
        input dimension (anisotropic). The array is shared: any holder
        of the kernel sees in-place updates ``kernel.params[:] = p``.

    Notes
    -----
    A GP built on this kernel caches its covariance matrix. Mutating
    ``params`` from outside the GP requires calling
    ``GaussianProcess.refresh()`` before the next prediction.
    """

    def __init__(self, loginvrho):
        loginvrho = gnp.array(loginvrho).reshape(-1)
        if loginvrho.shape[0] == 0:
            raise ValueError("A kernel needs at least one hyperparameter.")
        self._params = loginvrho

    def __repr__(self):
        return f"{self.__class__.__name__}(loginvrho={self._params.tolist()})"

    @property
    def params(self):
        return self._params

    @params.setter
    def params(self, value):
        value = gnp.asarray(value).reshape(-1)
        if value.shape != self._params.shape:
            raise ValueError(
                f"Expected {self._params.shape[0]} hyperparameters, got {value.shape[0]}"
            )
        # keep identity of the shared array
        self._params[:] = value

    @property
    def num_params(self):
        return self._params.shape[0]

    def copy(self):
        other = self.__class__.__new__(self.__class__)
        other.__dict__.update(self.__dict__)
        other._params = gnp.copy(self._params)
        return other

    def scaled_distance(self, a, b, loginvrho=None):
        """Euclidean distance between a and b after scaling by 1/rho."""
        loginvrho = self._params if loginvrho is None else loginvrho
        a = gnp.asarray(a).reshape(-1)
        b = gnp.asarray(b).reshape(-1)
        if a.shape != b.shape:
            raise ValueError(f"Dimension mismatch: {a.shape[0]} vs {b.shape[0]}")
        if loginvrho.shape[0] not in (1, a.shape[0]):
            raise ValueError(
                f"Kernel has {loginvrho.shape[0]} length scales, points have dimension {a.shape[0]}"
            )
        invrho = gnp.exp(loginvrho)
        return gnp.sqrt(gnp.sum((invrho * (a - b)) ** 2))

    def evaluate(self, a, b):
        raise NotImplementedError("Implement kernel evaluation")

    def __call__(self, a, b):
        return self.evaluate(a, b)

    def gradient(self, a, b):
        """Derivative of evaluate(a, b) w.r.t. each hyperparameter.

        Default implementation uses 5-point finite differences.
        """
        saved = gnp.copy(self._params)

        def f(p):
            self._params[:] = p
            return self.evaluate(a, b)

        try:
            return gnp.grad(f)(saved)
        finally:
            self._params[:] = saved
