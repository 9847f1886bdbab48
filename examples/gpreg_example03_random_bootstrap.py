'''
Randomly initialized model in 3D, grown point by point.

from_random() draws max_points // 10 + 1 training points; add_point()
then fills the preallocated capacity, and each training point is
re-evaluated from the cached covariance.

----
Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
Copyright (c) 2022-2026, CentraleSupelec
License: GPLv3 (see LICENSE)
'''
import numpy as np
import gpreg as gp


def main():
    rng = np.random.default_rng(2)
    dim, max_points = 3, 30
    kernel = gp.kernel.SquaredExponentialKernel(np.zeros(dim))
    model = gp.GaussianProcess.from_random(kernel, 0.01, dim, max_points, rng=rng)

    while model.num_points < max_points:
        x = rng.uniform(-1.0, 1.0, dim)
        model.add_point(x, np.sum(x**2))

    evaluations = [model.evaluate_training_point(i) for i in range(model.num_points)]
    print(model)
    return model, evaluations


if __name__ == "__main__":
    main()
