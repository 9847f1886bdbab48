import math
import pytest
import gpreg.num as gnp
from gpreg.kernel import Kernel, SquaredExponentialKernel, MaternKernel, maternp_kernel


class ConstantKernel(Kernel):
    def evaluate(self, a, b):
        return float(gnp.exp(self.params[0]))


@pytest.mark.parametrize(
    "kernel",
    [
        SquaredExponentialKernel([0.3]),
        SquaredExponentialKernel([0.3, -0.2]),
        MaternKernel(0, [0.1]),
        MaternKernel(1, [0.1, 0.5]),
        MaternKernel(2, [-0.4]),
    ],
)
def test_normalized_and_symmetric(kernel):
    a = gnp.asarray([0.1, -0.3])
    b = gnp.asarray([-0.7, 0.4])
    assert kernel.evaluate(a, a) == pytest.approx(1.0)
    assert kernel.evaluate(a, b) == pytest.approx(kernel.evaluate(b, a))
    assert 0.0 < kernel.evaluate(a, b) < 1.0


def test_squared_exponential_value():
    k = SquaredExponentialKernel([math.log(2.0)])
    a, b = gnp.asarray([0.0]), gnp.asarray([0.5])
    assert k.evaluate(a, b) == pytest.approx(math.exp(-0.5 * (2.0 * 0.5) ** 2))


def test_squared_exponential_analytic_gradient_matches_finite_differences():
    for params in ([0.2], [0.2, -0.5, 0.1]):
        k = SquaredExponentialKernel(params)
        a = gnp.asarray([0.1, 0.4, -0.3])
        b = gnp.asarray([-0.2, 0.0, 0.5])
        g_analytic = k.gradient(a, b)
        g_numeric = Kernel.gradient(k, a, b)
        assert g_analytic.shape == (len(params),)
        assert gnp.allclose(g_analytic, g_numeric, rtol=1e-6, atol=1e-9)


def test_finite_difference_gradient_restores_params():
    k = MaternKernel(1, [0.3])
    before = gnp.copy(k.params)
    g = k.gradient(gnp.asarray([0.0]), gnp.asarray([0.4]))
    assert g.shape == (1,)
    assert g[0] < 0.0  # shorter length scale, smaller correlation
    assert gnp.allclose(k.params, before)


def test_matern_special_cases():
    h = gnp.asarray([0.0, 0.3, 1.2])
    c0 = math.sqrt(2.0)
    assert gnp.allclose(maternp_kernel(0, h), gnp.exp(-c0 * h))
    c1 = 2.0 * math.sqrt(1.5)
    assert gnp.allclose(maternp_kernel(1, h), (1.0 + c1 * h) * gnp.exp(-c1 * h))


def test_params_are_mutable_in_place():
    k = SquaredExponentialKernel([0.0, 0.0])
    view = k.params
    k.params[:] = [1.0, 2.0]
    assert view is k.params
    k.params = [3.0, 4.0]
    assert view is k.params
    assert gnp.allclose(view, gnp.asarray([3.0, 4.0]))
    with pytest.raises(ValueError):
        k.params = [1.0]


def test_copy_is_independent():
    k = MaternKernel(2, [0.5])
    k2 = k.copy()
    k2.params[:] = [1.5]
    assert k.params[0] == 0.5
    assert k2.p == 2


def test_invalid_kernels():
    with pytest.raises(ValueError):
        SquaredExponentialKernel([])
    with pytest.raises(ValueError):
        MaternKernel(-1, [0.0])
    with pytest.raises(ValueError):
        MaternKernel(1.5, [0.0])


def test_dimension_mismatch():
    k = SquaredExponentialKernel([0.0, 0.0])
    with pytest.raises(ValueError):
        k.evaluate([0.0, 1.0, 2.0], [0.0, 1.0, 2.0])
    with pytest.raises(ValueError):
        k.evaluate([0.0, 1.0], [0.0])


def test_custom_kernel_uses_default_gradient():
    k = ConstantKernel([math.log(0.5)])
    g = k.gradient([0.0], [1.0])
    assert g[0] == pytest.approx(0.5, rel=1e-8)
