import unittest

import numpy as np

from src.tensornn.domain._errors import ElementCountMismatchError, InvalidShapeError
from src.tensornn.domain._shape import Shape
from src.tensornn.infrastructure.tensor import Tensor


class TestTensorConstruction(unittest.TestCase):
    def test_shape_and_elements(self):
        t = Tensor((2, 3), [1, 2, 3, 4, 5, 6])
        self.assertEqual(t.shape, Shape(2, 3))
        self.assertEqual(t.rank, 2)
        self.assertEqual(t.elements.dtype, np.float32)
        self.assertEqual(t.elements.shape, (6,))
        np.testing.assert_array_equal(t.elements, np.arange(1, 7, dtype=np.float32))

    def test_accepts_shape_instance(self):
        t = Tensor(Shape(4), [0.0, 1.0, 2.0, 3.0])
        self.assertEqual(t.shape.dimensions, (4,))

    def test_element_count_must_match_volume(self):
        with self.assertRaises(ElementCountMismatchError):
            Tensor((2, 3), [1.0] * 5)
        with self.assertRaises(ElementCountMismatchError):
            Tensor((2, 3), [1.0] * 7)

    def test_invalid_shape_rejected(self):
        with self.assertRaises(InvalidShapeError):
            Tensor((2, -3), [])

    def test_empty_tensor(self):
        t = Tensor((0, 3), [])
        self.assertEqual(t.shape.volume, 0)
        self.assertEqual(t.elements.size, 0)

    def test_scalar_tensor(self):
        t = Tensor((), [2.5])
        self.assertEqual(t.rank, 0)
        self.assertEqual(t.to_numpy().shape, ())

    def test_nested_input_is_flattened_row_major(self):
        t = Tensor((2, 2), [[1.0, 2.0], [3.0, 4.0]])
        np.testing.assert_array_equal(t.elements, [1.0, 2.0, 3.0, 4.0])

    def test_source_is_copied(self):
        src = np.array([1.0, 2.0, 3.0], dtype=np.float32)
        t = Tensor((3,), src)
        src[0] = 100.0
        self.assertEqual(t[0], 1.0)

    def test_elements_are_read_only(self):
        t = Tensor((3,), [1.0, 2.0, 3.0])
        with self.assertRaises(ValueError):
            t.elements[0] = 5.0

    def test_to_numpy_returns_writable_shaped_copy(self):
        t = Tensor((2, 2), [1.0, 2.0, 3.0, 4.0])
        arr = t.to_numpy()
        self.assertEqual(arr.shape, (2, 2))
        arr[0, 0] = -1.0
        self.assertEqual(t[0, 0], 1.0)


class TestTensorFactories(unittest.TestCase):
    def test_zeros(self):
        t = Tensor.zeros((2, 3))
        self.assertEqual(t.shape, (2, 3))
        np.testing.assert_array_equal(t.to_numpy(), np.zeros((2, 3), dtype=np.float32))

    def test_ones(self):
        t = Tensor.ones(Shape(3, 1))
        np.testing.assert_array_equal(t.to_numpy(), np.ones((3, 1), dtype=np.float32))

    def test_from_numpy_takes_shape_and_casts(self):
        arr = np.arange(24, dtype=np.float64).reshape(2, 3, 4)
        t = Tensor.from_numpy(arr)
        self.assertEqual(t.shape, (2, 3, 4))
        self.assertEqual(t.elements.dtype, np.float32)
        np.testing.assert_array_equal(t.to_numpy(), arr.astype(np.float32))


class TestTensorEquality(unittest.TestCase):
    def test_equal_tensors(self):
        a = Tensor((2, 2), [1.0, 2.0, 3.0, 4.0])
        b = Tensor.from_numpy(np.array([[1.0, 2.0], [3.0, 4.0]]))
        self.assertEqual(a, b)

    def test_same_elements_different_shape_not_equal(self):
        a = Tensor((4,), [1.0, 2.0, 3.0, 4.0])
        b = Tensor((2, 2), [1.0, 2.0, 3.0, 4.0])
        self.assertNotEqual(a, b)

    def test_nan_never_equal(self):
        a = Tensor((1,), [float("nan")])
        self.assertNotEqual(a, Tensor((1,), [float("nan")]))

    def test_not_hashable(self):
        with self.assertRaises(TypeError):
            hash(Tensor((1,), [1.0]))

    def test_repr_mentions_shape_and_elements(self):
        r = repr(Tensor((2,), [1.0, 2.0]))
        self.assertIn("(2,)", r)
        self.assertIn("[1.0, 2.0]", r)


if __name__ == "__main__":
    unittest.main()
