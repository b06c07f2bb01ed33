"""
Diagonal extraction and diagonal-matrix construction for FastMatrix.

For a ``rows x columns`` matrix and offset ``k`` (``k > 0``: superdiagonal,
``k < 0``: subdiagonal) the diagonal has
``n = min(rows - max(-k, 0), columns - max(k, 0))`` entries, entry ``i`` being
``data[i + max(-k, 0)][i + max(k, 0)]``. An offset beyond the matrix yields an
empty diagonal.

Only rank 2 is supported.
"""

from __future__ import annotations

import operator
from abc import ABC
from typing import Any, Optional, Sequence, Tuple, Type, TypeVar, Union

import numpy as np

from .....domain._dtype import DType
from .....domain._errors import (
    DimensionMismatchError,
    InvalidArgumentTypeError,
    UnsupportedRankError,
)
from .....domain._matrix import IMatrixLike
from .....domain.types._numpy import NDArrayLike
from ..._normalize import flatten_values, resolve_dtype
from ..._shape_indexer import normalize_shape
from ....dtype._conversion import coerce, convert, storage_type, zero

M = TypeVar("M", bound="MatrixMixinDiagonal")


def _check_offset(k: Any) -> int:
    if isinstance(k, bool):
        raise InvalidArgumentTypeError("The parameter k must be an integer number")
    try:
        return operator.index(k)
    except TypeError as e:
        raise InvalidArgumentTypeError(
            "The parameter k must be an integer number"
        ) from e


def _diagonal_offsets(rows: int, columns: int, k: int) -> Tuple[int, np.ndarray]:
    k_super = k if k > 0 else 0
    k_sub = -k if k < 0 else 0
    n = max(min(rows - k_sub, columns - k_super), 0)
    i = np.arange(n, dtype=np.intp)
    return n, (i + k_sub) * columns + (i + k_super)


class MatrixMixinDiagonal(ABC):
    """
    Mixin implementing `diagonal` and `from_diagonal` on `FastMatrix`.
    """

    def diagonal(self, k: int = 0) -> Any:
        """
        Get the k-th diagonal of a two-dimensional matrix.

        Parameters
        ----------
        k : int, optional
            Diagonal offset. Defaults to 0 (main diagonal).

        Returns
        -------
        FastMatrix
            A new one-dimensional matrix (same dtype) holding a copy of the
            diagonal values.

        Raises
        ------
        UnsupportedRankError
            If the matrix is not two-dimensional.
        InvalidArgumentTypeError
            If `k` is not an integer.
        """
        if len(self._shape) != 2:
            raise UnsupportedRankError("diagonal", len(self._shape))
        k = _check_offset(k)

        rows, columns = self._shape
        n, offsets = _diagonal_offsets(rows, columns, k)
        return type(self)._from_buffer(self._buffer[offsets], [n], self._dtype)

    @classmethod
    def from_diagonal(
        cls: Type[M],
        size: Sequence[int],
        value: Any,
        k: int = 0,
        default: Any = None,
        dtype: Optional[Union[str, DType]] = None,
    ) -> M:
        """
        Create a diagonal matrix.

        Parameters
        ----------
        size : Sequence[int]
            ``[rows, columns]``; both must be positive integers.
        value : Any
            The diagonal values: a scalar or 0-d array (broadcast to every
            diagonal entry), a flat sequence or array of exactly ``n`` values,
            or a one-dimensional matrix of length ``n``.
        k : int, optional
            Diagonal offset. Defaults to 0.
        default : Any, optional
            Value for every off-diagonal entry, converted per the dtype.
            Defaults to the dtype's zero.
        dtype : str or DType, optional
            Element type. Defaults to the value matrix's dtype when `value` is
            a matrix, else the configured default.

        Returns
        -------
        FastMatrix
            A new ``rows x columns`` matrix.

        Raises
        ------
        UnsupportedRankError
            If `size` does not have exactly two entries.
        InvalidArgumentTypeError
            If a size entry is not a positive integer or `k` is not an integer.
        DimensionMismatchError
            If a sequence or matrix value does not hold exactly ``n`` values.
        """
        shape = normalize_shape(size)
        if len(shape) != 2:
            raise UnsupportedRankError("diagonal", len(shape))
        if any(s < 1 for s in shape):
            raise InvalidArgumentTypeError("Size values must be positive integers")
        k = _check_offset(k)

        rows, columns = shape
        n, offsets = _diagonal_offsets(rows, columns, k)

        if isinstance(value, IMatrixLike):
            dt = resolve_dtype(dtype, value.datatype())
            value_size = list(value.size())
            if value_size != [n]:
                raise DimensionMismatchError(value_size, [n])
            values = coerce(flatten_values(value), dt)
        elif isinstance(value, (list, tuple)) or (
            isinstance(value, NDArrayLike) and np.ndim(value) >= 1
        ):
            dt = resolve_dtype(dtype)
            if len(value) != n:
                raise DimensionMismatchError(len(value), n)
            values = coerce(flatten_values(value), dt)
            if values.size != n:
                raise DimensionMismatchError(int(values.size), n)
        else:
            dt = resolve_dtype(dtype)
            values = np.full(n, convert(value, dt), dtype=storage_type(dt))

        fill = zero(dt) if default is None else convert(default, dt)
        buf = np.full(rows * columns, fill, dtype=storage_type(dt))
        buf[offsets] = values
        return cls._from_buffer(buf, shape, dt)
