import numpy as np
import pytest
from scipy.stats import multivariate_normal

import gpreg.num as gnp
from gpreg import PointSet
from gpreg.core import TrainingLogLikelihood
from gpreg.core.covariance import compute_covariance
from gpreg.kernel import Kernel, SquaredExponentialKernel, MaternKernel


class ScaledConstantKernel(Kernel):
    """Off-diagonal similarity exp(params[0]); not SPD for params[0] > 0."""

    def evaluate(self, a, b):
        return float(gnp.exp(self.params[0]))


def dataset(n=10, d=2, seed=0):
    rng = np.random.default_rng(seed)
    xi = rng.uniform(-1.0, 1.0, (n, d))
    zi = np.cos(2.0 * xi[:, 0]) - xi[:, 1]
    return PointSet(xi), zi


def test_value_matches_gaussian_density():
    points, zi = dataset()
    kernel = SquaredExponentialKernel([0.2, -0.1])
    cost = TrainingLogLikelihood(points, zi, kernel, 0.05)
    K = compute_covariance(kernel, points, 0.05)
    expected = -multivariate_normal.logpdf(zi, mean=np.zeros(len(zi)), cov=K)
    assert cost.negative_log_likelihood() == pytest.approx(expected, rel=1e-10)
    assert cost.log_likelihood() == pytest.approx(-expected, rel=1e-10)


def test_uses_only_active_targets():
    points, zi = dataset(n=6)
    buffer = np.full(20, 123.0)
    buffer[:6] = zi
    kernel = SquaredExponentialKernel([0.0])
    a = TrainingLogLikelihood(points, buffer, kernel, 0.1)
    b = TrainingLogLikelihood(points, zi, kernel, 0.1)
    assert a.negative_log_likelihood() == b.negative_log_likelihood()


@pytest.mark.parametrize(
    "kernel, rtol",
    [
        (SquaredExponentialKernel([0.3]), 1e-6),
        (SquaredExponentialKernel([0.3, -0.4]), 1e-6),
        (MaternKernel(2, [0.1, 0.2]), 1e-4),
    ],
)
def test_gradient_matches_finite_differences(kernel, rtol):
    points, zi = dataset(n=8)
    cost = TrainingLogLikelihood(points, zi, kernel, 0.01)
    p = gnp.copy(kernel.params)
    value, gradient = cost.value_and_gradient(p)
    numerical = gnp.grad(cost.negative_log_likelihood)(p)
    assert value == pytest.approx(cost.negative_log_likelihood(p))
    assert gnp.allclose(gradient, numerical, rtol=rtol, atol=1e-6)
    assert gnp.allclose(cost.gradient(p), gradient)


def test_evaluation_restores_kernel_params():
    points, zi = dataset()
    kernel = SquaredExponentialKernel([0.2, -0.1])
    view = kernel.params
    cost = TrainingLogLikelihood(points, zi, kernel, 0.05)
    J0 = cost.negative_log_likelihood()
    J1, _ = cost([1.5, 1.5])
    assert J1 != J0
    assert kernel.params is view
    assert gnp.allclose(kernel.params, gnp.asarray([0.2, -0.1]))


def test_not_positive_definite_gives_inf():
    points, zi = dataset(n=4)
    kernel = ScaledConstantKernel([0.0])
    cost = TrainingLogLikelihood(points, zi, kernel, 0.1)
    assert np.isfinite(cost.negative_log_likelihood([-3.0]))
    assert cost.negative_log_likelihood([1.0]) == np.inf
    value, gradient = cost.value_and_gradient([1.0])
    assert value == np.inf
    assert gnp.allclose(gradient, 0.0)
    assert kernel.params[0] == 0.0


def test_empty_training_set():
    kernel = SquaredExponentialKernel([0.0])
    cost = TrainingLogLikelihood(PointSet(dimension=1), np.zeros(3), kernel, 0.1)
    value, gradient = cost.value_and_gradient()
    assert value == 0.0
    assert gnp.allclose(gradient, 0.0)
