"""
Concrete FastMatrix implementation (NumPy backend).

`FastMatrix` is a dense, rank-N matrix stored as one contiguous 1-D NumPy
buffer in row-major order, plus an explicit shape and a dtype tag. It
satisfies the domain-level `IFastMatrix` protocol.

This module holds the core: construction from a classified source, metadata
accessors, scalar and partial-coordinate `get`/`set`, `clone`, and element
iteration. Every other operation group (subset, resize/reshape, diagonal,
row swap, nested views, serialization) is contributed by a mixin from
`.mixins`.

Design notes
------------
- State is ``_buffer`` (owned ``np.ndarray``), ``_shape`` (list of ints),
  ``_dtype`` (`DType`) and ``_indexer`` (`ShapeIndexer` for the shape). All
  four are replaced together by `_assign`, which checks
  ``len(buffer) == prod(shape)``.
- Coordinates are addressed with suffix-product plane sizes throughout; a
  coordinate shorter than the shape addresses a contiguous run and `get`
  returns it as an aliasing view.
- Writes go through the dtype's narrowing rule (`dtype._conversion`).
"""

from __future__ import annotations

from typing import Any, Callable, List, Optional, Sequence, Tuple, Union

import numpy as np
from typing_extensions import Self

from ...domain._dtype import DType
from ...domain._errors import DimensionMismatchError
from ...domain._matrix import IFastMatrix
from ...domain._sources import classify_source
from ..dtype._conversion import coerce, convert, storage_type
from ._normalize import flatten_values, normalize_source
from ._shape_indexer import ShapeIndexer, product
from .mixins import _MatrixAllMixin

Number = Union[int, float]


class FastMatrix(_MatrixAllMixin, IFastMatrix):
    """
    Dense matrix backed by a typed contiguous buffer.

    Parameters
    ----------
    data : Any, optional
        One of:
        - None: an empty matrix of shape ``[0]``
        - another matrix (anything exposing ``size``, ``to_array`` and
          ``datatype``): deep-copied, its dtype inherited
        - a record mapping ``{data, shape, dtype}`` (see `to_record`)
        - nested lists/tuples or a NumPy array; nested matrices are expanded
          to plain lists first
    dtype : str or DType, optional
        Element type. Defaults to the source's dtype if it has one, else the
        configured ``matrix.default_dtype``.

    Raises
    ------
    InvalidArgumentTypeError
        If `data` is of an unsupported kind or holds non-numeric values.
    InvalidDatatypeError
        If `dtype` is not a supported tag.
    DimensionMismatchError
        If nested data is not rectangular, or a record's data length differs
        from the product of its shape.

    Examples
    --------
    >>> m = FastMatrix([[1, 2], [3, 4]])
    >>> m.get([0, 1])
    2
    >>> m.get([1]).tolist()
    [3, 4]
    """

    def __init__(self, data: Any = None, dtype: Optional[Union[str, DType]] = None) -> None:
        buffer, shape, dt = normalize_source(classify_source(data), dtype)
        self._assign(buffer, shape, dt)

    def _assign(self, buffer: np.ndarray, shape: Sequence[int], dtype: DType) -> None:
        """
        Replace buffer, shape and dtype together.

        Raises
        ------
        DimensionMismatchError
            If ``len(buffer) != prod(shape)``.
        """
        shape = [int(s) for s in shape]
        if len(buffer) != product(shape):
            raise DimensionMismatchError(len(buffer), product(shape))
        if buffer.dtype != storage_type(dtype) or buffer.ndim != 1:
            buffer = coerce(buffer, dtype)

        self._buffer = np.ascontiguousarray(buffer)
        self._shape = shape
        self._dtype = DType.parse(dtype)
        self._indexer = ShapeIndexer(shape)

    @classmethod
    def _from_buffer(cls, buffer: np.ndarray, shape: Sequence[int], dtype: DType) -> Self:
        """
        Wrap an already-built flat buffer without going through source
        classification. The buffer is owned by the new instance.
        """
        obj = cls.__new__(cls)
        obj._assign(buffer, shape, dtype)
        return obj

    # ---------------------------------------------------------------------
    # Metadata
    # ---------------------------------------------------------------------
    @property
    def shape(self) -> Tuple[int, ...]:
        return tuple(self._shape)

    @property
    def dtype(self) -> DType:
        return self._dtype

    @property
    def ndim(self) -> int:
        return len(self._shape)

    @property
    def buffer(self) -> np.ndarray:
        """
        Return the owned flat buffer.

        Notes
        -----
        The returned array aliases the matrix storage and is replaced by
        `resize`; see the aliasing contract in `domain._matrix`.
        """
        return self._buffer

    def storage(self) -> str:
        return "typedarray"

    def datatype(self) -> str:
        return self._dtype.value

    def size(self) -> List[int]:
        """
        Return a copy of the shape as a list.
        """
        return list(self._shape)

    def value_of(self) -> np.ndarray:
        return self._buffer

    def create(self, data: Any = None, dtype: Optional[Union[str, DType]] = None) -> Self:
        """
        Create a new matrix of the same class.
        """
        return type(self)(data, dtype)

    def clone(self) -> Self:
        """
        Return a fully independent copy (buffer, shape and dtype).
        """
        return type(self)._from_buffer(self._buffer.copy(), self._shape, self._dtype)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(shape={self.shape}, dtype={self._dtype.value})"

    # ---------------------------------------------------------------------
    # Coordinate access
    # ---------------------------------------------------------------------
    def get(self, index: Sequence[int]) -> Union[Number, np.ndarray]:
        """
        Get a single element or a contiguous region.

        Parameters
        ----------
        index : Sequence[int]
            Zero-based coordinate. A full-depth coordinate addresses one
            element; a shorter one addresses the run spanning all trailing
            dimensions.

        Returns
        -------
        int or float or np.ndarray
            The element as a Python number, or a flat view aliasing the
            addressed run.

        Raises
        ------
        InvalidArgumentTypeError
            If `index` is not a non-empty sequence of integers.
        DimensionMismatchError
            If `index` is longer than the shape.
        IndexOutOfRangeError
            If a coordinate is outside its dimension.
        """
        coord = self._indexer.check(index)
        start, length = self._indexer.region(coord)
        if len(coord) == len(self._shape):
            return self._buffer[start].item()
        return self._buffer[start : start + length]

    def set(self, index: Sequence[int], value: Any) -> Self:
        """
        Replace a single element or a contiguous region.

        Parameters
        ----------
        index : Sequence[int]
            Zero-based coordinate (full or partial, as for `get`).
        value : Any
            A scalar for a full-depth coordinate. For a partial coordinate, a
            scalar, nested sequence, array or matrix whose flattened length
            equals the addressed run.

        Returns
        -------
        FastMatrix
            This matrix.

        Raises
        ------
        DimensionMismatchError
            If the flattened value length differs from the run length.
        InvalidArgumentTypeError
            If the coordinate or value is of the wrong kind.
        IndexOutOfRangeError
            If a coordinate is outside its dimension.
        """
        coord = self._indexer.check(index)
        start, length = self._indexer.region(coord)

        if len(coord) == len(self._shape):
            self._buffer[start] = convert(value, self._dtype)
            return self

        values = coerce(flatten_values(value), self._dtype)
        if values.size != length:
            raise DimensionMismatchError(length, int(values.size))
        self._buffer[start : start + length] = values
        return self

    # ---------------------------------------------------------------------
    # Element iteration
    # ---------------------------------------------------------------------
    def map(self, fn: Callable[[Number, int, Any], Any]) -> Self:
        """
        Create a new matrix by applying a callback to every element.

        Parameters
        ----------
        fn : Callable[[value, index, matrix], Any]
            Called with each element, its flat index and this matrix; its
            results are converted per the dtype.

        Returns
        -------
        FastMatrix
            A new matrix with the same shape and dtype.
        """
        results = [fn(v, i, self) for i, v in enumerate(self._buffer.tolist())]
        return type(self)._from_buffer(
            coerce(results, self._dtype), self._shape, self._dtype
        )

    def for_each(self, fn: Callable[[Number, int, Any], Any]) -> None:
        for i, v in enumerate(self._buffer.tolist()):
            fn(v, i, self)
