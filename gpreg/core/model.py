# gpreg/core/model.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Gaussian process regression model with cached factorization.
"""
import gpreg.num as gnp
from gpreg.config import get_logger

from . import utils
from .covariance import compute_covariance, cross_covariance
from .linalg import NotPositiveDefiniteError, cholesky_factor, cholesky_solve
from .likelihood import TrainingLogLikelihood
from .optimizer import minimize
from .points import PointSet

_logger = get_logger()


class GaussianProcess:
    """Gaussian Process regression with a normalized kernel.

    The model holds a kernel, a set of training points with scalar
    targets and a positive noise (nugget). At construction, and after
    every mutating operation, it rebuilds

    - the training covariance K, with K[i, i] = 1 + noise and
      K[i, j] = kernel.evaluate(x_i, x_j),
    - the lower-triangular Cholesky factor C of K,
    - the regressed vector alpha = K^{-1} z,

    so that predictions only read cached state.

    Internal buffers are allocated once with capacity `max_points`; only
    the first `num_points` entries are meaningful.

    Attributes
    ----------
    kernel : gpreg.kernel.Kernel
        Shared kernel. :meth:`learn_hyperparameters` updates its params
        in place, which is visible to any other holder.
    noise : float
        Positive nugget added to the unit prior variance.
    points : gpreg.core.PointSet
        Shared training inputs.
    max_points : int
        Capacity of the internal buffers.

    Notes
    -----
    The model does not detect external changes of the kernel params or
    the point set; call :meth:`refresh` after such changes. Concurrent
    use requires the caller to serialize :meth:`learn_hyperparameters`,
    :meth:`add_point` and :meth:`refresh` against predictions.

    Examples
    --------
    >>> import gpreg as gp
    >>> kernel = gp.kernel.SquaredExponentialKernel([0.0])
    >>> model = gp.GaussianProcess(kernel, 0.1, [[0.0], [1.0]], [1.0, -1.0])
    >>> mean, variance = model.evaluate([0.5])
    """

    def __init__(self, kernel, noise, points, targets, max_points=None):
        """
        Parameters
        ----------
        kernel : gpreg.kernel.Kernel
        noise : float
            Must be > 0.
        points : PointSet or array_like, shape (n, d)
            A PointSet is shared, an array is copied into a new PointSet.
        targets : array_like, shape (n,)
        max_points : int, optional
            Buffer capacity, defaults to n.
        """
        utils.validate_kernel(kernel)
        utils.validate_noise(noise)
        points = utils.as_point_set(points)
        if max_points is None:
            max_points = len(points)
        utils.validate_capacity(max_points, len(points))
        targets = utils.as_targets(targets, len(points))

        self.kernel = kernel
        self.noise = float(noise)
        self.points = points
        self.max_points = int(max_points)

        self._targets = gnp.zeros((self.max_points,))
        self._regressed = gnp.zeros((self.max_points,))
        self._covariance = gnp.zeros((self.max_points, self.max_points))
        self._cholesky = gnp.zeros((0, 0))

        self._targets[: len(points)] = targets
        self.refresh()

    @classmethod
    def from_points(cls, kernel, noise, points, max_points=None, rng=None):
        """Build a model on given points with targets drawn from N(0, 0.1²).

        Parameters
        ----------
        rng : numpy.random.Generator, optional
            Defaults to the package generator (see ``gnp.set_seed``).
        """
        utils.validate_kernel(kernel)
        points = utils.as_point_set(points)
        targets = gnp.normal(0.0, 0.1, len(points), rng=rng)
        return cls(kernel, noise, points, targets, max_points)

    @classmethod
    def from_random(cls, kernel, noise, dimension, max_points, rng=None):
        """Build a model on ``max_points // 10 + 1`` random points.

        Coordinates are drawn from U(-1, 1) and targets from N(0, 0.1²).
        """
        utils.validate_kernel(kernel)
        if max_points < 1:
            raise ValueError(f"max_points must be >= 1, got {max_points}")
        if dimension < 1:
            raise ValueError(f"dimension must be >= 1, got {dimension}")
        n = max_points // 10 + 1
        points = PointSet(gnp.uniform(-1.0, 1.0, (n, dimension), rng=rng))
        targets = gnp.normal(0.0, 0.1, n, rng=rng)
        return cls(kernel, noise, points, targets, max_points)

    def __repr__(self):
        output = str("<gpreg.core.GaussianProcess object> " + hex(id(self)))
        return output

    def __str__(self):
        return (
            f"Gaussian Process:\n"
            f"  Kernel: {self.kernel!r}\n"
            f"  Noise: {self.noise}\n"
            f"  Points: {self.num_points} / {self.max_points}\n"
            f"  Input dimension: {self.input_dimension}"
        )

    # ------------------------------------------------------------------
    # Read-only views on cached state
    # ------------------------------------------------------------------
    @property
    def num_points(self):
        return len(self.points)

    @property
    def input_dimension(self):
        return self.points.dimension

    @property
    def targets(self):
        return self._targets[: self.num_points]

    @property
    def covariance(self):
        n = self.num_points
        return self._covariance[:n, :n]

    @property
    def regressed(self):
        return self._regressed[: self.num_points]

    @property
    def cholesky_factor(self):
        return self._cholesky

    # ------------------------------------------------------------------
    # State maintenance
    # ------------------------------------------------------------------
    def refresh(self):
        """Recompute covariance, Cholesky factor and regressed vector.

        Must be called after any change of the shared kernel params or
        point set made outside of this object. Points appended to the
        shared PointSet directly get a zero target; use add_point to
        supply one.

        Raises
        ------
        NotPositiveDefiniteError
            If the covariance cannot be factorized.
        """
        n = self.num_points
        utils.validate_capacity(self.max_points, n)
        # factorize a fresh matrix; cached state is only replaced on success
        K = compute_covariance(self.kernel, self.points, self.noise)
        cholesky = cholesky_factor(K)
        regressed = cholesky_solve(cholesky, self._targets[:n])
        self._covariance[:n, :n] = K
        self._cholesky = cholesky
        self._regressed[:n] = regressed
        _logger.debug("Covariance and Cholesky factor rebuilt for %d points", n)

    def add_point(self, x, target):
        """Append a training pair and recompute the cached state.

        If the new covariance cannot be factorized, the point is removed
        again and the model is left as it was before the call.

        Raises
        ------
        ValueError
            If the capacity `max_points` is reached or `x` has the wrong
            dimension.
        NotPositiveDefiniteError
            If the covariance with the new point is not positive definite.
        """
        n = self.num_points
        if n >= self.max_points:
            raise ValueError(f"Capacity max_points={self.max_points} reached")
        self.points.append(x)
        self._targets[n] = float(target)
        try:
            self.refresh()
        except NotPositiveDefiniteError:
            self.points.pop()
            self._targets[n] = 0.0
            raise

    # ------------------------------------------------------------------
    # Posterior
    # ------------------------------------------------------------------
    def _posterior(self, cross):
        mean = gnp.dot(cross, self.regressed)
        variance = 1.0 - gnp.dot(cross, cholesky_solve(self._cholesky, cross))
        return float(mean), float(variance)

    def evaluate(self, x):
        """Posterior mean and variance at a query point.

        Parameters
        ----------
        x : array_like, shape (d,)

        Returns
        -------
        mean : float
        variance : float
            Not clamped: round-off can make it slightly negative near
            training points.
        """
        x = utils.as_query(x, self.input_dimension)
        cross = cross_covariance(self.kernel, self.points, x)
        return self._posterior(cross)

    def evaluate_training_point(self, i):
        """Posterior mean and variance at the i-th training point.

        Reuses the i-th column of the cached covariance, with the noise
        removed from its diagonal entry.

        Raises
        ------
        IndexError
            If i is not in [0, num_points).
        """
        n = self.num_points
        if not 0 <= i < n:
            raise IndexError(f"Training point index {i} out of range [0, {n})")
        cross = gnp.copy(self._covariance[:n, i])
        cross[i] -= self.noise
        return self._posterior(cross)

    def predict(self, xt, zero_neg_variances=True):
        """Posterior means and variances at several query points.

        Parameters
        ----------
        xt : array_like, shape (m, d)
        zero_neg_variances : bool, optional
            Clamp negative variances to zero (default True).

        Returns
        -------
        zt_posterior_mean : gnp.array, shape (m,)
        zt_posterior_variance : gnp.array, shape (m,)
        """
        xt = gnp.asarray(xt)
        if xt.ndim == 1:
            xt = xt.reshape(-1, 1)
        m = xt.shape[0]
        zt_posterior_mean = gnp.empty((m,))
        zt_posterior_variance = gnp.empty((m,))
        for k in range(m):
            zt_posterior_mean[k], zt_posterior_variance[k] = self.evaluate(xt[k])

        if zero_neg_variances and gnp.any(zt_posterior_variance < 0.0):
            _logger.warning(
                "%d negative posterior variance(s) set to zero",
                int(gnp.sum(zt_posterior_variance < 0.0)),
            )
            zt_posterior_variance = gnp.maximum(zt_posterior_variance, 0.0)
        return zt_posterior_mean, zt_posterior_variance

    # ------------------------------------------------------------------
    # Hyperparameters
    # ------------------------------------------------------------------
    def make_log_likelihood(self):
        """Cost object over the current points, targets, kernel and noise."""
        return TrainingLogLikelihood(self.points, self._targets, self.kernel, self.noise)

    def log_likelihood(self):
        """Training log marginal likelihood at the current kernel params."""
        return self.make_log_likelihood().log_likelihood()

    def learn_hyperparameters(self, options=None, restore_on_failure=False):
        """Maximize the training log-likelihood w.r.t. the kernel params.

        The kernel params are copied into a flat vector, optimized with
        L-BFGS-B and written back into ``kernel.params``. Covariance,
        Cholesky factor and regressed vector are then recomputed, whatever
        the outcome.

        Parameters
        ----------
        options : dict, optional
            Optimizer budgets, see :func:`gpreg.core.optimizer.minimize`.
        restore_on_failure : bool, optional
            If True and the optimizer does not report a usable solution,
            restore the params held before the call. By default (False)
            the kernel keeps the params returned by the optimizer even on
            failure.

        Returns
        -------
        success : bool
            Whether the optimizer reports a usable solution.
        """
        cost = self.make_log_likelihood()
        initial_params = gnp.copy(self.kernel.params)
        initial_nll = cost.negative_log_likelihood()
        _logger.info(
            "Learning %d kernel hyperparameter(s) on %d points (nll=%.6g)",
            initial_params.shape[0],
            self.num_points,
            initial_nll,
        )

        final_params, success = minimize(cost, initial_params, options=options)

        if success or not restore_on_failure:
            self.kernel.params[:] = final_params
        else:
            self.kernel.params[:] = initial_params

        self.refresh()

        if success:
            _logger.info(
                "Hyperparameter learning done (nll=%.6g, params=%s)",
                cost.negative_log_likelihood(),
                self.kernel.params.tolist(),
            )
        else:
            _logger.warning(
                "Hyperparameter learning did not reach a usable solution; "
                "kernel params %s",
                "restored" if restore_on_failure else "set to the best params visited",
            )
        return success
