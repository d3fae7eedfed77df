import unittest
import warnings

import numpy as np

from src.tensornn.infrastructure.ops.activation_cpu import (
    exp_forward_cpu,
    relu_forward_cpu,
    softmax_forward_cpu,
)


class TestReluOps(unittest.TestCase):
    def setUp(self) -> None:
        np.random.seed(0)

    def test_known_values(self):
        x = np.array([-1.0, 0.0, 2.0, -3.0], dtype=np.float32)
        y = relu_forward_cpu(x)
        np.testing.assert_array_equal(y, [0.0, 0.0, 2.0, 0.0])
        self.assertEqual(y.dtype, np.float32)

    def test_matches_max_with_zero_for_random_input(self):
        x = np.random.randn(4, 5, 3).astype(np.float32)
        y = relu_forward_cpu(x)
        self.assertEqual(y.shape, x.shape)
        np.testing.assert_array_equal(y, np.where(x > 0, x, 0.0).astype(np.float32))

    def test_nan_propagates(self):
        y = relu_forward_cpu(np.array([np.nan, -1.0], dtype=np.float32))
        self.assertTrue(np.isnan(y[0]))
        self.assertEqual(y[1], 0.0)

    def test_input_not_modified(self):
        x = np.array([-1.0, 1.0], dtype=np.float32)
        relu_forward_cpu(x)
        np.testing.assert_array_equal(x, [-1.0, 1.0])


class TestSoftmaxOps(unittest.TestCase):
    def setUp(self) -> None:
        np.random.seed(0)

    def test_two_zeros(self):
        y = softmax_forward_cpu(np.zeros(2, dtype=np.float32))
        np.testing.assert_allclose(y, [0.5, 0.5], rtol=1e-7)

    def test_sums_to_one_and_preserves_shape(self):
        x = np.random.randn(3, 4, 2).astype(np.float32)
        y = softmax_forward_cpu(x)
        self.assertEqual(y.shape, x.shape)
        self.assertEqual(y.dtype, np.float32)
        self.assertAlmostEqual(float(np.sum(y, dtype=np.float64)), 1.0, places=5)

    def test_normalization_is_global_not_per_row(self):
        x = np.array([[0.0, 0.0, 0.0], [1.0, 1.0, 1.0]], dtype=np.float32)
        y = softmax_forward_cpu(x)
        e = np.exp(x.astype(np.float64))
        np.testing.assert_allclose(y, e / e.sum(), rtol=1e-6)
        # rows individually do not sum to one
        self.assertFalse(np.allclose(y.sum(axis=1), 1.0))

    def test_no_max_subtraction_overflow_gives_nan_silently(self):
        x = np.array([1000.0, 0.0], dtype=np.float32)
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            y = softmax_forward_cpu(x)
        self.assertTrue(np.isnan(y[0]))
        self.assertEqual(y[1], 0.0)

    def test_exp_matches_numpy(self):
        x = np.linspace(-3, 3, 7).astype(np.float32)
        np.testing.assert_allclose(exp_forward_cpu(x), np.exp(x), rtol=1e-6)


if __name__ == "__main__":
    unittest.main()
