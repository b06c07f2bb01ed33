"""
Buffer reallocation and shape reinterpretation for FastMatrix.

- `resize`  allocates a new buffer of ``prod(size)`` elements, copies as many
  leading elements as fit (linear copy, no shape-aware remapping) and fills the
  remaining slots with the default value.
- `reshape` reinterprets the existing buffer under a new shape with exactly the
  same element count; no data moves.

Both run in place by default or on a clone when ``copy=True``. Views issued by
the matrix before an in-place call no longer describe its layout afterwards.
"""

from __future__ import annotations

import logging
from abc import ABC
from typing import Any, Sequence

import numpy as np
from typing_extensions import Self

from .....domain._errors import DimensionMismatchError
from ..._shape_indexer import normalize_shape, product
from ....dtype._conversion import convert, storage_type, zero

logger = logging.getLogger(__name__)


class MatrixMixinShape(ABC):
    """
    Mixin implementing `resize` and `reshape` on `FastMatrix`.
    """

    def resize(self, size: Sequence[int], default: Any = None, copy: bool = False) -> Self:
        """
        Resize the matrix to the given size.

        Parameters
        ----------
        size : Sequence[int]
            The new shape. Must contain at least one non-negative integer.
        default : Any, optional
            Value written into slots beyond the old buffer length, converted
            per the dtype. Defaults to the dtype's zero.
        copy : bool, optional
            If True, resize and return a clone; this matrix is untouched.

        Returns
        -------
        FastMatrix
            The resized matrix (self, or the clone when `copy` is True).

        Raises
        ------
        InvalidArgumentTypeError
            If `size` is not a sequence of non-negative integers, or `default`
            is not numeric.
        DimensionMismatchError
            If `size` is empty.

        Notes
        -----
        Elements are copied linearly. Growing a non-trailing dimension does not
        keep rows aligned; pad along trailing dimensions first when that
        matters.
        """
        new_shape = normalize_shape(size)
        fill = zero(self._dtype) if default is None else convert(default, self._dtype)

        target = self.clone() if copy else self
        old = target._buffer
        length = product(new_shape)

        buf = np.full(length, fill, dtype=storage_type(target._dtype))
        keep = min(length, len(old))
        buf[:keep] = old[:keep]

        logger.debug(
            "resize %s -> %s (%d kept, %d filled)",
            list(target._shape),
            new_shape,
            keep,
            length - keep,
        )
        target._assign(buf, new_shape, target._dtype)
        return target

    def reshape(self, shape: Sequence[int], copy: bool = False) -> Self:
        """
        Reinterpret the buffer under a new shape.

        Parameters
        ----------
        shape : Sequence[int]
            The new shape; its product must equal the current element count.
        copy : bool, optional
            If True, reshape and return a clone; this matrix is untouched.

        Returns
        -------
        FastMatrix
            The reshaped matrix (self, or the clone when `copy` is True).

        Raises
        ------
        DimensionMismatchError
            If the element counts differ, or `shape` is empty.
        """
        new_shape = normalize_shape(shape)
        length = product(new_shape)
        if length != len(self._buffer):
            raise DimensionMismatchError(len(self._buffer), length)

        target = self.clone() if copy else self
        logger.debug("reshape %s -> %s", list(target._shape), new_shape)
        target._assign(target._buffer, new_shape, target._dtype)
        return target
