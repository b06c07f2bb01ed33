from unittest import TestCase
import unittest

import numpy as np

from fastmatrix.domain._errors import InvalidArgumentTypeError
from fastmatrix.domain._index import IIndex
from fastmatrix.infrastructure.matrix._index import Index


class TestIndexSelectors(TestCase):

    def test_scalar_and_list(self):
        idx = Index(0, [1, 2])
        self.assertEqual(idx.to_array(), [[0], [1, 2]])
        self.assertEqual(idx.size(), [1, 2])
        self.assertFalse(idx.is_scalar())

    def test_all_scalars_is_scalar(self):
        self.assertTrue(Index(1, 1).is_scalar())
        self.assertTrue(Index(3).is_scalar())

    def test_single_element_list_is_not_scalar(self):
        self.assertFalse(Index([1], 1).is_scalar())

    def test_range(self):
        self.assertEqual(Index(range(3)).to_array(), [[0, 1, 2]])
        self.assertEqual(Index(range(0)).size(), [0])

    def test_slice(self):
        self.assertEqual(Index(slice(1, 5, 2)).to_array(), [[1, 3]])
        self.assertEqual(Index(slice(None, 2)).to_array(), [[0, 1]])

    def test_numpy_selectors(self):
        self.assertEqual(Index(np.array([2, 0])).to_array(), [[2, 0]])
        self.assertTrue(Index(np.int64(1)).is_scalar())

    def test_to_array_is_a_copy(self):
        idx = Index([1, 2])
        idx.to_array()[0].append(7)
        self.assertEqual(idx.to_array(), [[1, 2]])

    def test_satisfies_protocol(self):
        self.assertIsInstance(Index(0), IIndex)

    def test_repr(self):
        self.assertEqual(repr(Index(0, [1, 2])), "Index(0, [1, 2])")

    def test_rejects_bad_selectors(self):
        bad_args = [
            (),
            (-1,),
            ([0, -1],),
            ("a",),
            (1.5,),
            (True,),
            (slice(1, None),),
            (slice(0, 3, 0),),
            (slice(-1, 3),),
            (np.zeros((2, 2), dtype=int),),
        ]
        for args in bad_args:
            with self.assertRaises(InvalidArgumentTypeError, msg=repr(args)):
                Index(*args)


if __name__ == "__main__":
    unittest.main()
