from unittest import TestCase
import unittest

import numpy as np

from fastmatrix.domain._dtype import DType
from fastmatrix.domain._errors import InvalidArgumentTypeError
from fastmatrix.infrastructure.dtype._conversion import (
    coerce,
    convert,
    storage_type,
    zero,
)


class TestStorageType(TestCase):

    def test_storage_mapping(self):
        self.assertEqual(storage_type("uint8"), np.dtype(np.uint8))
        self.assertEqual(storage_type("uint8Clamped"), np.dtype(np.uint8))
        self.assertEqual(storage_type(DType.UINT16), np.dtype(np.uint16))
        self.assertEqual(storage_type("uint32"), np.dtype(np.uint32))
        self.assertEqual(storage_type("float32"), np.dtype(np.float32))
        self.assertEqual(storage_type("float64"), np.dtype(np.float64))


class TestCoerce(TestCase):

    def test_unsigned_wraps_and_truncates(self):
        out = coerce([-1, 300, 2.9, 255, 256], "uint8")
        self.assertEqual(out.dtype, np.uint8)
        np.testing.assert_array_equal(out, [255, 44, 2, 255, 0])

    def test_unsigned_non_finite_become_zero(self):
        out = coerce([np.nan, np.inf, -np.inf], "uint16")
        np.testing.assert_array_equal(out, [0, 0, 0])

    def test_uint32_wraps_modulo_2_32(self):
        out = coerce([2**32 + 5, -1], "uint32")
        np.testing.assert_array_equal(out, [5, 2**32 - 1])

    def test_clamped_rounds_half_even_and_saturates(self):
        out = coerce([300, -5, 2.5, 3.5, 1.4, np.nan], "uint8Clamped")
        np.testing.assert_array_equal(out, [255, 0, 2, 4, 1, 0])

    def test_float32_rounds_to_single_precision(self):
        out = coerce([0.1], "float32")
        self.assertEqual(out.dtype, np.float32)
        self.assertEqual(out[0], np.float32(0.1))

    def test_float64_is_unchanged(self):
        out = coerce([0.1, -2.5], "float64")
        np.testing.assert_array_equal(out, [0.1, -2.5])

    def test_result_is_flat_new_buffer(self):
        src = np.array([[1.0, 2.0], [3.0, 4.0]])
        out = coerce(src, "float64")
        self.assertEqual(out.shape, (4,))
        out[0] = 99.0
        self.assertEqual(src[0, 0], 1.0)

    def test_non_numeric_rejected(self):
        with self.assertRaises(InvalidArgumentTypeError):
            coerce(["a", "b"], "uint8")
        with self.assertRaises(InvalidArgumentTypeError):
            coerce(None, "uint8")


class TestConvert(TestCase):

    def test_returns_python_numbers(self):
        v = convert(300, "uint8")
        self.assertIsInstance(v, int)
        self.assertEqual(v, 44)

        f = convert(1.5, "float64")
        self.assertIsInstance(f, float)
        self.assertEqual(f, 1.5)

    def test_booleans_convert_as_integers(self):
        self.assertEqual(convert(True, "uint8"), 1)
        self.assertEqual(convert(False, "float32"), 0.0)

    def test_rejects_non_scalars(self):
        for bad in ([1], (1, 2), {"a": 1}, np.array([1, 2])):
            with self.assertRaises(InvalidArgumentTypeError):
                convert(bad, "uint8")

    def test_rejects_non_numeric(self):
        with self.assertRaises(InvalidArgumentTypeError):
            convert("abc", "float64")

    def test_zero(self):
        self.assertEqual(zero("uint8"), 0)
        self.assertIsInstance(zero("float64"), float)
        self.assertEqual(zero("float64"), 0.0)


if __name__ == "__main__":
    unittest.main()
