"""
Argument, shape, and rank exceptions for FastMatrix.

This module defines the error types raised by the matrix core when a call
violates one of its contracts. Every failure is raised synchronously at the
point of violation; none of these conditions is transient, so callers are
expected to fix the offending argument rather than retry.

All concrete errors derive from `FastMatrixError` and from the closest
built-in exception (`TypeError`, `ValueError`, `IndexError`) so that generic
handlers keep working.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence, Union

Extent = Union[int, Sequence[int], str]


def _format_extent(value: Extent) -> str:
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(str(v) for v in value) + "]"
    return str(value)


class FastMatrixError(Exception):
    """
    Common base class for every error raised by FastMatrix.
    """


class InvalidArgumentTypeError(FastMatrixError, TypeError):
    """
    Raised when an argument has the wrong kind or structure.

    Typical triggers are an unsupported construction input, a coordinate that
    is not a sequence of integers, a non-integer diagonal offset, or a value
    that cannot be converted to a number.
    """


class InvalidDatatypeError(InvalidArgumentTypeError):
    """
    Raised when a dtype tag does not name a supported element type.

    Attributes
    ----------
    datatype : Any
        The rejected tag, as supplied by the caller.
    """

    def __init__(self, datatype: Any) -> None:
        """
        Initialize the InvalidDatatypeError.

        Parameters
        ----------
        datatype : Any
            The unsupported dtype tag.
        """
        super().__init__(f"Invalid datatype: {datatype!r}")
        self.datatype = datatype


class DimensionMismatchError(FastMatrixError, ValueError):
    """
    Raised when two dimensions or lengths that must agree do not.

    The error carries the offending quantity, the quantity it was compared
    against, and the comparator describing the violated relation. For example
    an index of rank 3 applied to a rank-2 matrix is reported as
    ``DimensionMismatchError(3, 2, ">")``.

    Attributes
    ----------
    actual : int or Sequence[int] or str
        The observed dimension or length.
    expected : int or Sequence[int] or str
        The dimension or length that was required.
    comparator : str
        Relation between `actual` and `expected` that triggered the error.
    """

    def __init__(
        self, actual: Extent, expected: Extent, comparator: str = "!="
    ) -> None:
        """
        Initialize the DimensionMismatchError.

        Parameters
        ----------
        actual : int or Sequence[int] or str
            The observed dimension or length.
        expected : int or Sequence[int] or str
            The required dimension or length.
        comparator : str, optional
            Relation that was found to hold. Defaults to ``"!="``.
        """
        super().__init__(
            f"Dimension mismatch ({_format_extent(actual)} {comparator} "
            f"{_format_extent(expected)})"
        )
        self.actual = actual
        self.expected = expected
        self.comparator = comparator


class IndexOutOfRangeError(FastMatrixError, IndexError):
    """
    Raised when a coordinate falls outside ``[min, max)``.

    Attributes
    ----------
    index : int
        The rejected coordinate.
    min : int
        Inclusive lower bound.
    max : Optional[int]
        Exclusive upper bound, or None when only the lower bound applies.
    """

    def __init__(self, index: int, min: int = 0, max: Optional[int] = None) -> None:
        """
        Initialize the IndexOutOfRangeError.

        Parameters
        ----------
        index : int
            The rejected coordinate.
        min : int, optional
            Inclusive lower bound. Defaults to 0.
        max : Optional[int], optional
            Exclusive upper bound.
        """
        if index < min:
            message = f"Index out of range ({index} < {min})"
        elif max is not None and index >= max:
            message = f"Index out of range ({index} > {max - 1})"
        else:
            message = f"Index out of range ({index})"
        super().__init__(message)
        self.index = index
        self.min = min
        self.max = max


class UnsupportedRankError(FastMatrixError, ValueError):
    """
    Raised when a rank-specific operation is invoked on another rank.

    Diagonal extraction/construction and row exchange are defined for
    two-dimensional matrices only.

    Attributes
    ----------
    operation : str
        Name of the rejected operation (e.g., "diagonal", "swap_rows").
    rank : int
        Rank of the matrix the operation was invoked on.
    supported : int
        The only rank the operation accepts.
    """

    def __init__(self, operation: str, rank: int, supported: int = 2) -> None:
        """
        Initialize the UnsupportedRankError.

        Parameters
        ----------
        operation : str
            Name of the rejected operation.
        rank : int
            Rank of the offending matrix or size vector.
        supported : int, optional
            Supported rank. Defaults to 2.
        """
        super().__init__(
            f"{operation} supports only {supported}-dimensional matrices, "
            f"got rank {rank}."
        )
        self.operation = operation
        self.rank = rank
        self.supported = supported
