"""
Row-major coordinate <-> offset arithmetic over a shape vector.

For a shape ``S = [s0, ..., sk-1]`` the plane size (suffix product) of
dimension ``i`` is ``s(i+1) * ... * s(k-1)``, the number of flat buffer
elements spanned by one unit step along that dimension; the last dimension's
plane size is 1. The offset of a coordinate ``c`` is ``sum(c[i] * plane[i])``.

A coordinate shorter than the shape addresses a contiguous run: it starts at
the partial offset and spans ``plane[len(c) - 1]`` elements.

This one scheme is used for scalar access, partial views, index-set subsets
and nested views alike.
"""

from __future__ import annotations

import numbers
from typing import Any, List, Sequence, Tuple

from ...domain._errors import (
    DimensionMismatchError,
    IndexOutOfRangeError,
    InvalidArgumentTypeError,
)
from ...domain.types._numpy import NDArrayLike


def is_integer(value: Any) -> bool:
    """True for integral numbers other than bool."""
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def validate_index(index: Any, extent: int) -> int:
    """
    Validate a single coordinate against a dimension extent.

    Raises
    ------
    InvalidArgumentTypeError
        If `index` is not an integer.
    IndexOutOfRangeError
        If `index` is outside ``[0, extent)``.
    """
    if not is_integer(index):
        raise InvalidArgumentTypeError(f"Index must be an integer (value: {index!r})")
    index = int(index)
    if index < 0 or index >= extent:
        raise IndexOutOfRangeError(index, 0, extent)
    return index


def normalize_shape(shape: Any) -> List[int]:
    """
    Validate a shape (size vector) and return it as a list of ints.

    Raises
    ------
    InvalidArgumentTypeError
        If `shape` is not a sequence of non-negative integers.
    DimensionMismatchError
        If `shape` is empty.
    """
    if isinstance(shape, NDArrayLike):
        shape = shape.tolist()
    if not isinstance(shape, (list, tuple)):
        raise InvalidArgumentTypeError(
            f"Array expected for shape, got {type(shape).__name__}"
        )
    if len(shape) == 0:
        raise DimensionMismatchError(0, 1, "<")
    for extent in shape:
        if not is_integer(extent) or extent < 0:
            raise InvalidArgumentTypeError(
                f"Shape entries must be non-negative integers, got {list(shape)}"
            )
    return [int(extent) for extent in shape]


def product(values: Sequence[int]) -> int:
    total = 1
    for v in values:
        total *= int(v)
    return total


def plane_sizes(shape: Sequence[int]) -> Tuple[int, ...]:
    """
    Suffix products of `shape`: ``plane[i] = prod(shape[i+1:])``.
    """
    planes = [1] * len(shape)
    for i in range(len(shape) - 2, -1, -1):
        planes[i] = planes[i + 1] * int(shape[i + 1])
    return tuple(planes)


class ShapeIndexer:
    """
    Pure offset arithmetic for one shape.

    Parameters
    ----------
    shape : Sequence[int]
        Validated shape (at least one dimension).
    """

    __slots__ = ("_shape", "_planes")

    def __init__(self, shape: Sequence[int]) -> None:
        self._shape = tuple(int(s) for s in shape)
        self._planes = plane_sizes(self._shape)

    @property
    def shape(self) -> Tuple[int, ...]:
        return self._shape

    @property
    def plane_sizes(self) -> Tuple[int, ...]:
        return self._planes

    @property
    def numel(self) -> int:
        return product(self._shape)

    def check(self, coord: Any) -> Tuple[int, ...]:
        """
        Validate a full or partial coordinate.

        Returns
        -------
        tuple[int, ...]
            The coordinate as plain ints.

        Raises
        ------
        InvalidArgumentTypeError
            If `coord` is not a non-empty sequence of integers.
        DimensionMismatchError
            If `coord` is longer than the shape.
        IndexOutOfRangeError
            If an entry is outside its dimension.
        """
        if isinstance(coord, NDArrayLike):
            coord = coord.tolist()
        if not isinstance(coord, (list, tuple)):
            raise InvalidArgumentTypeError(
                f"Array expected for index, got {type(coord).__name__}"
            )
        if len(coord) > len(self._shape):
            raise DimensionMismatchError(len(coord), len(self._shape), ">")
        if len(coord) == 0:
            raise InvalidArgumentTypeError("Index must contain at least one coordinate")
        return tuple(validate_index(c, s) for c, s in zip(coord, self._shape))

    def offset(self, coord: Sequence[int]) -> int:
        """Flat offset of a validated (full or partial) coordinate."""
        return sum(c * p for c, p in zip(coord, self._planes))

    def region(self, coord: Sequence[int]) -> Tuple[int, int]:
        """
        Return ``(start, length)`` of the run addressed by a validated
        coordinate; a full-depth coordinate has length 1.
        """
        return self.offset(coord), self._planes[len(coord) - 1]

    def coordinate(self, offset: int) -> Tuple[int, ...]:
        """
        Inverse of `offset` for full-depth coordinates.

        Raises
        ------
        IndexOutOfRangeError
            If `offset` is outside the buffer.
        """
        offset = validate_index(offset, self.numel)
        coord = []
        for plane in self._planes:
            c, offset = divmod(offset, plane)
            coord.append(c)
        return tuple(coord)
