from unittest import TestCase
import itertools
import unittest

import numpy as np

from fastmatrix.domain._dtype import DType
from fastmatrix.domain._errors import (
    DimensionMismatchError,
    IndexOutOfRangeError,
    InvalidArgumentTypeError,
    InvalidDatatypeError,
)
from fastmatrix.infrastructure.matrix._matrix import FastMatrix


class TestFastMatrixConstruction(TestCase):

    def test_from_nested_lists(self):
        m = FastMatrix([[1, 2], [3, 4]])
        self.assertEqual(m.shape, (2, 2))
        self.assertEqual(m.ndim, 2)
        self.assertIs(m.dtype, DType.UINT32)
        self.assertEqual(m.buffer.dtype, np.uint32)
        np.testing.assert_array_equal(m.buffer, [1, 2, 3, 4])

    def test_metadata_accessors(self):
        m = FastMatrix([[1, 2, 3]], dtype="float32")
        self.assertEqual(m.storage(), "typedarray")
        self.assertEqual(m.datatype(), "float32")
        self.assertEqual(m.size(), [1, 3])

    def test_size_returns_a_copy(self):
        m = FastMatrix([1, 2])
        m.size().append(5)
        self.assertEqual(m.size(), [2])

    def test_empty(self):
        for m in (FastMatrix(), FastMatrix([])):
            self.assertEqual(m.shape, (0,))
            self.assertEqual(len(m.buffer), 0)
            self.assertEqual(m.to_array(), [])

    def test_from_tuples(self):
        self.assertEqual(FastMatrix(((1, 2), (3, 4))).shape, (2, 2))

    def test_from_ndarray(self):
        m = FastMatrix(np.arange(6).reshape(2, 3), dtype="float64")
        self.assertEqual(m.shape, (2, 3))
        self.assertEqual(m.to_array(), [[0.0, 1.0, 2.0], [3.0, 4.0, 5.0]])

    def test_from_existing_matrix_is_deep_copy(self):
        src = FastMatrix([[1, 2], [3, 4]], dtype="uint8")
        m = FastMatrix(src)
        self.assertIs(m.dtype, DType.UINT8)
        self.assertEqual(m.to_array(), src.to_array())

        m.set([0, 0], 9)
        self.assertEqual(src.get([0, 0]), 1)

    def test_explicit_dtype_overrides_existing(self):
        m = FastMatrix(FastMatrix([1, 2], dtype="uint8"), dtype="float64")
        self.assertIs(m.dtype, DType.FLOAT64)

    def test_nested_matrices_are_expanded(self):
        m = FastMatrix([FastMatrix([1, 2]), FastMatrix([3, 4])])
        self.assertEqual(m.to_array(), [[1, 2], [3, 4]])

    def test_values_are_narrowed_on_construction(self):
        m = FastMatrix([-1, 256, 2.7], dtype="uint8")
        self.assertEqual(m.to_array(), [255, 0, 2])

    def test_ragged_data_rejected(self):
        for bad in ([[1, 2], [3]], [[1, 2], 3], [1, [2]]):
            with self.assertRaises(DimensionMismatchError, msg=repr(bad)):
                FastMatrix(bad)

    def test_invalid_inputs_rejected(self):
        with self.assertRaises(InvalidArgumentTypeError):
            FastMatrix(5)
        with self.assertRaises(InvalidArgumentTypeError):
            FastMatrix(["a"])
        with self.assertRaises(InvalidArgumentTypeError):
            FastMatrix(np.array(5))
        with self.assertRaises(InvalidDatatypeError):
            FastMatrix([1], dtype="int8")

    def test_create_builds_same_class(self):
        m = FastMatrix([1, 2], dtype="uint8")
        other = m.create([[1.5]], dtype="float64")
        self.assertIsInstance(other, FastMatrix)
        self.assertEqual(other.to_array(), [[1.5]])
        self.assertEqual(m.create().shape, (0,))

    def test_repr(self):
        self.assertEqual(
            repr(FastMatrix([[1, 2], [3, 4]])), "FastMatrix(shape=(2, 2), dtype=uint32)"
        )


class TestFastMatrixGetSet(TestCase):

    def setUp(self):
        self.m = FastMatrix([[1, 2], [3, 4]])

    def test_get_scalar(self):
        self.assertEqual(self.m.get([0, 1]), 2)
        self.assertIsInstance(self.m.get([0, 1]), int)

    def test_get_partial_returns_view(self):
        row = self.m.get([1])
        np.testing.assert_array_equal(row, [3, 4])
        self.assertTrue(np.shares_memory(row, self.m.buffer))

        row[0] = 30
        self.assertEqual(self.m.get([1, 0]), 30)

    def test_set_then_get_for_every_coordinate(self):
        m = FastMatrix(np.zeros((2, 3, 4)), dtype="uint16")
        for v, coord in enumerate(itertools.product(range(2), range(3), range(4))):
            m.set(list(coord), v + 1)
        for v, coord in enumerate(itertools.product(range(2), range(3), range(4))):
            self.assertEqual(m.get(list(coord)), v + 1)
        np.testing.assert_array_equal(m.buffer, np.arange(1, 25))

    def test_addressing_is_row_major(self):
        ref = np.arange(24).reshape(2, 3, 4)
        m = FastMatrix(ref)
        self.assertEqual(m.get([1, 2, 3]), 23)
        self.assertEqual(m.get([0, 2, 1]), ref[0, 2, 1])
        np.testing.assert_array_equal(m.get([1, 1]), ref[1, 1])
        np.testing.assert_array_equal(m.get([1]), ref[1].ravel())

    def test_set_returns_self_and_narrows(self):
        m = FastMatrix([0], dtype="uint8")
        self.assertIs(m.set([0], 300), m)
        self.assertEqual(m.get([0]), 44)

        c = FastMatrix([0], dtype="uint8Clamped")
        c.set([0], 300)
        self.assertEqual(c.get([0]), 255)

    def test_set_partial_region(self):
        self.m.set([1], [7, 8])
        self.assertEqual(self.m.to_array(), [[1, 2], [7, 8]])

        self.m.set([0], np.array([5, 6]))
        self.assertEqual(self.m.to_array(), [[5, 6], [7, 8]])

    def test_set_partial_length_mismatch_leaves_matrix_unchanged(self):
        with self.assertRaises(DimensionMismatchError):
            self.m.set([1], [7, 8, 9])
        self.assertEqual(self.m.to_array(), [[1, 2], [3, 4]])

    def test_get_errors(self):
        with self.assertRaises(IndexOutOfRangeError):
            self.m.get([2, 0])
        with self.assertRaises(IndexOutOfRangeError):
            self.m.get([-1, 0])
        with self.assertRaises(DimensionMismatchError):
            self.m.get([0, 0, 0])
        with self.assertRaises(InvalidArgumentTypeError):
            self.m.get([])
        with self.assertRaises(InvalidArgumentTypeError):
            self.m.get(0)
        with self.assertRaises(InvalidArgumentTypeError):
            self.m.get([0.5, 0])

    def test_failed_set_leaves_matrix_unchanged(self):
        with self.assertRaises(IndexOutOfRangeError):
            self.m.set([0, 2], 9)
        with self.assertRaises(InvalidArgumentTypeError):
            self.m.set([0, 0], "x")
        with self.assertRaises(InvalidArgumentTypeError):
            self.m.set([0, 0], [1, 2])
        self.assertEqual(self.m.to_array(), [[1, 2], [3, 4]])


class TestFastMatrixCopyAndIteration(TestCase):

    def test_clone_is_value_equal_and_independent(self):
        m = FastMatrix([[1, 2], [3, 4]], dtype="float32")
        c = m.clone()
        self.assertIsNot(c, m)
        self.assertEqual(c.shape, m.shape)
        self.assertIs(c.dtype, m.dtype)
        self.assertEqual(c.to_array(), m.to_array())
        self.assertFalse(np.shares_memory(c.buffer, m.buffer))

        c.set([0, 0], 99)
        self.assertEqual(m.get([0, 0]), 1)

    def test_map_keeps_shape_and_dtype(self):
        m = FastMatrix([[1, 2], [3, 4]], dtype="uint8")
        out = m.map(lambda value, index, matrix: value * 100)
        self.assertEqual(out.shape, (2, 2))
        self.assertIs(out.dtype, DType.UINT8)
        self.assertEqual(out.to_array(), [[100, 200], [44, 144]])
        self.assertEqual(m.to_array(), [[1, 2], [3, 4]])

    def test_map_passes_index_and_owner(self):
        m = FastMatrix([5, 6, 7])
        seen = []
        m.map(lambda value, index, matrix: seen.append((value, index, matrix)) or 0)
        self.assertEqual([(v, i) for v, i, _ in seen], [(5, 0), (6, 1), (7, 2)])
        self.assertTrue(all(owner is m for _, _, owner in seen))

    def test_for_each_visits_row_major(self):
        m = FastMatrix([[1, 2], [3, 4]])
        seen = []
        self.assertIsNone(m.for_each(lambda value, index, matrix: seen.append((value, index))))
        self.assertEqual(seen, [(1, 0), (2, 1), (3, 2), (4, 3)])

    def test_value_of_aliases_buffer(self):
        m = FastMatrix([1, 2, 3])
        m.value_of()[0] = 10
        self.assertEqual(m.get([0]), 10)


if __name__ == "__main__":
    unittest.main()
