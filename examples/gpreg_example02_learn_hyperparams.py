'''
Learning the length scale of a Matérn 5/2 kernel by maximum likelihood.

The model starts with a poor length scale; learn_hyperparameters()
maximizes the training log marginal likelihood and the posterior is
recomputed with the learned kernel.

----
Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
Copyright (c) 2022-2026, CentraleSupelec
License: GPLv3 (see LICENSE)
'''
import math
import numpy as np
import gpreg as gp


def main():
    rng = np.random.default_rng(1)
    xi = np.sort(rng.uniform(-1.0, 1.0, 15)).reshape(-1, 1)
    zi = np.sin(4.0 * xi).reshape(-1)
    xt = np.linspace(-1.0, 1.0, 100).reshape(-1, 1)

    kernel = gp.kernel.MaternKernel(2, [math.log(1 / 2.0)])
    model = gp.GaussianProcess(kernel, 1e-4, xi, zi)

    loglik_before = model.log_likelihood()
    success = model.learn_hyperparameters()
    loglik_after = model.log_likelihood()

    print(f"success: {success}")
    print(f"log-likelihood: {loglik_before:.4f} -> {loglik_after:.4f}")
    print(f"length scale: {math.exp(-kernel.params[0]):.4f}")

    zpm, zpv = model.predict(xt)
    return xt, xi, zi, zpm, zpv, loglik_before, loglik_after


def visualize(xt, xi, zi, zpm, zpv):
    fig = gp.plot.Figure(isinteractive=True)
    fig.plotdata(xi, zi)
    fig.plotgp(xt, zpm, zpv)
    fig.xylabels("x", "z")
    fig.title("Matérn 5/2, maximum likelihood length scale")
    fig.show(grid=True, legend=True)


if __name__ == "__main__":
    import gpreg.plot  # noqa: F401

    xt, xi, zi, zpm, zpv, _, _ = main()
    visualize(xt, xi, zi, zpm, zpv)
