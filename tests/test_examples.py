import os
import importlib.util
import unittest

_EXAMPLES_DIR = os.path.join(os.path.dirname(__file__), "..", "examples")


def load_example(name):
    path = os.path.join(_EXAMPLES_DIR, name + ".py")
    spec = importlib.util.spec_from_file_location(name, path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestExamples(unittest.TestCase):
    def test_01(self):
        xt, zt, xi, zi, zpm, zpv = load_example("gpreg_example01_1d_regression").main()
        self.assertEqual(zpm.shape, (200,))
        self.assertTrue((zpv >= 0.0).all())

    def test_02(self):
        out = load_example("gpreg_example02_learn_hyperparams").main()
        loglik_before, loglik_after = out[-2], out[-1]
        self.assertGreaterEqual(loglik_after, loglik_before)

    def test_03(self):
        model, evaluations = load_example("gpreg_example03_random_bootstrap").main()
        self.assertEqual(model.num_points, 30)
        self.assertEqual(len(evaluations), 30)


if __name__ == "__main__":
    unittest.main()
