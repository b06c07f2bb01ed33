"""
Matrix interface definitions.

This module defines the domain-level interfaces for dense matrices using
structural typing:

- `IMatrixLike` is the minimal surface an external matrix must expose to be
  accepted as a construction source, a replacement value, or a diagonal value
  source (`size`, `to_array`, `datatype`).
- `IFastMatrix` mirrors the full public surface of the NumPy-backed
  `FastMatrix`, so domain code can type against it without importing the
  infrastructure layer.

Aliasing contract
-----------------
Partial-coordinate `get`, `views`, `value_of` and the `buffer` property return
objects that alias the owner's storage. They stay valid only while the owner
is neither written to nor resized/reshaped: any `set`, `subset` write,
`resize`, `reshape` or `swap_rows` on the owner invalidates them. No runtime
guard enforces this; it is a caller obligation. Mutating operations require
exclusive access; concurrent callers must serialize access externally.
"""

from __future__ import annotations

from typing import (
    Any,
    Callable,
    List,
    Optional,
    Protocol,
    Sequence,
    Tuple,
    Union,
    runtime_checkable,
)

from ._dtype import DType
from ._index import IIndex
from .types._numpy import NDArrayLike

Number = Union[int, float]


@runtime_checkable
class IMatrixLike(Protocol):
    """
    Minimal matrix interface accepted for interoperability.
    """

    def size(self) -> List[int]:
        """
        Return the matrix shape as a list of extents.
        """
        ...

    def to_array(self) -> List[Any]:
        """
        Return the matrix contents as nested Python lists.
        """
        ...

    def datatype(self) -> Optional[str]:
        """
        Return the element type tag, or None if unknown.
        """
        ...


@runtime_checkable
class IFastMatrix(IMatrixLike, Protocol):
    """
    Dense, rank-N matrix backed by a single contiguous typed buffer.

    Elements are laid out in row-major order (the last dimension varies
    fastest). The buffer length always equals the product of the shape, the
    shape has at least one dimension (an empty matrix has shape ``[0]``), and
    the dtype is fixed at construction.
    """

    # ---------------------------------------------------------------------
    # Metadata
    # ---------------------------------------------------------------------
    @property
    def shape(self) -> Tuple[int, ...]:
        """
        Return the shape of the matrix.

        Returns
        -------
        tuple[int, ...]
            One extent per dimension.
        """
        ...

    @property
    def dtype(self) -> DType:
        """
        Return the element type of the matrix.
        """
        ...

    @property
    def ndim(self) -> int:
        """
        Return the number of dimensions.
        """
        ...

    def storage(self) -> str:
        """
        Return the storage format name (``"typedarray"``).
        """
        ...

    # ---------------------------------------------------------------------
    # Coordinate access
    # ---------------------------------------------------------------------
    def get(self, index: Sequence[int]) -> Union[Number, NDArrayLike]:
        """
        Read an element or a contiguous region.

        Parameters
        ----------
        index : Sequence[int]
            A coordinate with at most `ndim` entries.

        Returns
        -------
        Number or NDArrayLike
            A scalar for a full-depth coordinate, otherwise a flat view
            aliasing the contiguous run addressed by the partial coordinate.

        Raises
        ------
        InvalidArgumentTypeError
            If `index` is not a non-empty sequence of integers.
        DimensionMismatchError
            If `index` has more entries than the matrix has dimensions.
        IndexOutOfRangeError
            If any coordinate is outside its dimension.
        """
        ...

    def set(self, index: Sequence[int], value: Any) -> "IFastMatrix":
        """
        Write an element or a contiguous region in place.

        Parameters
        ----------
        index : Sequence[int]
            A coordinate with at most `ndim` entries.
        value : Any
            A scalar for a full-depth coordinate. For a partial coordinate,
            any value whose flattened element count equals the addressed
            region length.

        Returns
        -------
        IFastMatrix
            This matrix.

        Raises
        ------
        DimensionMismatchError
            If the flattened value length differs from the region length.
        """
        ...

    def subset(self, index: IIndex, replacement: Any = None) -> Any:
        """
        Read or replace the region selected by an index selector.

        Parameters
        ----------
        index : IIndex
            Per-dimension coordinate sets.
        replacement : Any, optional
            If given (including ``0``), the values written into the selected
            region. If None, the region is read.

        Returns
        -------
        Any
            On read, a new matrix holding a copy of the region, or a bare
            element when the selector is scalar. On write, this matrix.
        """
        ...

    # ---------------------------------------------------------------------
    # Structural operations
    # ---------------------------------------------------------------------
    def resize(
        self, size: Sequence[int], default: Any = None, copy: bool = False
    ) -> "IFastMatrix":
        """
        Reallocate the buffer for a new shape.

        Leading elements are copied linearly; new slots receive `default`
        (the dtype's zero when omitted).
        """
        ...

    def reshape(self, shape: Sequence[int], copy: bool = False) -> "IFastMatrix":
        """
        Reinterpret the buffer under a new shape of identical element count.
        """
        ...

    def clone(self) -> "IFastMatrix":
        """
        Return a fully independent copy.
        """
        ...

    def diagonal(self, k: int = 0) -> "IFastMatrix":
        """
        Return the `k`-th diagonal of a two-dimensional matrix as a vector.
        """
        ...

    def swap_rows(self, i: int, j: int) -> "IFastMatrix":
        """
        Exchange rows `i` and `j` of a two-dimensional matrix in place.
        """
        ...

    # ---------------------------------------------------------------------
    # Element iteration
    # ---------------------------------------------------------------------
    def map(self, fn: Callable[[Number, int, Any], Any]) -> "IFastMatrix":
        """
        Return a new matrix holding ``fn(value, flat_index, self)`` per element.
        """
        ...

    def for_each(self, fn: Callable[[Number, int, Any], Any]) -> None:
        """
        Call ``fn(value, flat_index, self)`` for every element.
        """
        ...

    # ---------------------------------------------------------------------
    # Export
    # ---------------------------------------------------------------------
    def views(self) -> Any:
        """
        Return nested lists whose leaves alias the innermost rows.
        """
        ...

    def value_of(self) -> NDArrayLike:
        """
        Return the flat buffer (aliasing).
        """
        ...

    def to_record(self) -> dict:
        """
        Return a persisted record ``{kind, data, shape, dtype}``.
        """
        ...
