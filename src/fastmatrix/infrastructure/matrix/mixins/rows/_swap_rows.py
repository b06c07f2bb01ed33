"""
In-place row exchange for two-dimensional FastMatrix instances.
"""

from __future__ import annotations

from abc import ABC

from typing_extensions import Self

from .....domain._errors import InvalidArgumentTypeError, UnsupportedRankError
from ..._shape_indexer import is_integer, validate_index


class MatrixMixinRows(ABC):
    """
    Mixin implementing `swap_rows` on `FastMatrix`.
    """

    def swap_rows(self, i: int, j: int) -> Self:
        """
        Swap rows i and j in place.

        Each row spans ``len(buffer) // rows`` flat elements; the two spans are
        exchanged element by element. Applying the same swap twice restores
        the original content.

        Parameters
        ----------
        i : int
            First row index.
        j : int
            Second row index.

        Returns
        -------
        FastMatrix
            This matrix.

        Raises
        ------
        InvalidArgumentTypeError
            If `i` or `j` is not an integer.
        UnsupportedRankError
            If the matrix is not two-dimensional.
        IndexOutOfRangeError
            If `i` or `j` is outside ``[0, rows)``.
        """
        if not is_integer(i) or not is_integer(j):
            raise InvalidArgumentTypeError("Row index must be positive integers")
        if len(self._shape) != 2:
            raise UnsupportedRankError("swap_rows", len(self._shape))

        rows = self._shape[0]
        i = validate_index(i, rows)
        j = validate_index(j, rows)
        if i == j:
            return self

        width = len(self._buffer) // rows
        a = slice(i * width, (i + 1) * width)
        b = slice(j * width, (j + 1) * width)

        buf = self._buffer
        tmp = buf[a].copy()
        buf[a] = buf[b]
        buf[b] = tmp
        return self
