'''
Gaussian process regression in 1D.

A squared-exponential kernel with a fixed length scale is conditioned on
a few noisy evaluations of a smooth function, and the posterior mean and
variance are computed on a regular grid.

----
Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
Copyright (c) 2022-2026, CentraleSupelec
License: GPLv3 (see LICENSE)
'''
import math
import numpy as np
import gpreg as gp


def twobumps(x):
    return 0.8 * np.sin(3.0 * x) + 0.4 * np.exp(-20.0 * (x - 0.3) ** 2)


def generate_data(noise_std, rng):
    """Create a 1D dataset with noisy observed values."""
    xt = np.linspace(-1.0, 1.0, 200).reshape(-1, 1)
    zt = twobumps(xt).reshape(-1)

    ind = [10, 45, 80, 100, 130, 160, 190]
    xi = xt[ind]
    zi = zt[ind] + noise_std * rng.standard_normal(len(ind))
    return xt, zt, xi, zi


def main():
    rng = np.random.default_rng(0)
    noise_std = 1e-1
    xt, zt, xi, zi = generate_data(noise_std, rng)

    kernel = gp.kernel.SquaredExponentialKernel([math.log(1 / 0.3)])
    model = gp.GaussianProcess(kernel, noise_std**2, xi, zi)

    zpm, zpv = model.predict(xt)
    return xt, zt, xi, zi, zpm, zpv


def visualize(xt, zt, xi, zi, zpm, zpv):
    fig = gp.plot.Figure(isinteractive=True)
    fig.plot(xt, zt, "C0", linestyle=(0, (5, 5)), linewidth=1)
    fig.plotdata(xi, zi)
    fig.plotgp(xt, zpm, zpv)
    fig.xylabels("x", "z")
    fig.title("GP regression, squared-exponential kernel")
    fig.show(grid=True, legend=True)


if __name__ == "__main__":
    import gpreg.plot  # noqa: F401

    visualize(*main())
