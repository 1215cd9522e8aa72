import unittest

import numpy as np

from fixedrational import Rational


class NumpyInteropTests(unittest.TestCase):
    def test_list_broadcasting(self):
        vector = [Rational(1, 2), Rational(2, 3)]
        shifted = Rational(1, 6) + vector
        self.assertTrue(all(isinstance(item, Rational) for item in shifted))
        np.testing.assert_allclose([float(item) for item in shifted], [2 / 3, 5 / 6])

        diff = vector - Rational(1, 3)
        self.assertTrue(all(isinstance(item, Rational) for item in diff))
        np.testing.assert_allclose([float(item) for item in diff], [1 / 6, 1 / 3])

        halves = (Rational(1), Rational(3)) / Rational(2)
        self.assertEqual(list(halves), [Rational(1, 2), Rational(3, 2)])

    def test_numpy_array_operations_with_scalar(self):
        vector = np.array([0.25, 0.5, 0.75])
        result = Rational(1, 4) + vector
        self.assertEqual(result.dtype, object)
        self.assertTrue(all(isinstance(item, Rational) for item in result))
        np.testing.assert_allclose([float(item) for item in result], [0.5, 0.75, 1.0])

        reflected = vector - Rational(1, 4)
        self.assertEqual(reflected.dtype, object)
        np.testing.assert_allclose([float(item) for item in reflected], [0.0, 0.25, 0.5])

    def test_numpy_array_operations_with_object_array(self):
        vector = np.array([Rational(1, 2), Rational(1, 3)], dtype=object)
        result = vector + Rational(1, 6)
        np.testing.assert_allclose([float(item) for item in result], [2 / 3, 1 / 2])

    def test_numpy_ufunc_support(self):
        vector = np.array([Rational(1, 2), Rational(3, 4)], dtype=object)
        result = np.add(vector, Rational(1, 4))
        np.testing.assert_allclose([float(item) for item in result], [0.75, 1.0])

        result = np.remainder(vector, Rational(1, 3))
        self.assertEqual(list(result), [Rational(1, 6), Rational(1, 12)])

        result = np.divide(Rational(1), vector)
        self.assertEqual(list(result), [Rational(2), Rational(4, 3)])

    def test_numpy_scalar_operands(self):
        value = np.int64(3) * Rational(1, 6)
        self.assertEqual(value, Rational(1, 2))
        self.assertIsInstance(value, Rational)

    def test_unsupported_ufunc(self):
        with self.assertRaises(TypeError):
            np.sqrt(Rational(1, 4))

    def test_extended_values_in_arrays(self):
        vector = np.array([Rational(1, 2), Rational(0)], dtype=object)
        result = Rational(1) / vector
        self.assertEqual(result[0], Rational(2))
        self.assertTrue(result[1].is_infinite)


if __name__ == "__main__":  # pragma: no cover - direct execution helper
    unittest.main()
