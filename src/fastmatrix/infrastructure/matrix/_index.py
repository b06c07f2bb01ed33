"""
Concrete index selector.

`Index` builds the per-dimension coordinate sets consumed by
`FastMatrix.subset`. Each constructor argument describes one dimension:

- ``int``                 : a single coordinate (scalar dimension)
- ``range``               : the coordinates of the range
- ``slice``               : ``slice(start, stop[, step])`` with an explicit
                            stop; start defaults to 0 and step to 1
- list / tuple / 1-D int array : an ordered set of coordinates

Coordinates are zero-based and never wrapped, so negative values are
rejected. Bounds against a concrete matrix are checked by the subset engine.
"""

from __future__ import annotations

from typing import Any, List, Tuple

from ...domain._errors import InvalidArgumentTypeError
from ...domain._index import IIndex
from ...domain.types._numpy import NDArrayLike
from ._shape_indexer import is_integer


def _non_negative(values: List[Any], selector: Any) -> List[int]:
    for v in values:
        if not is_integer(v) or v < 0:
            raise InvalidArgumentTypeError(
                f"Index coordinates must be non-negative integers, got {selector!r}"
            )
    return [int(v) for v in values]


def _normalize_selector(selector: Any) -> Tuple[List[int], bool]:
    if is_integer(selector):
        return _non_negative([selector], selector), True

    if isinstance(selector, range):
        return _non_negative(list(selector), selector), False

    if isinstance(selector, slice):
        if selector.stop is None:
            raise InvalidArgumentTypeError(f"Slice selector needs a stop: {selector!r}")
        start = 0 if selector.start is None else selector.start
        step = 1 if selector.step is None else selector.step
        _non_negative([start, selector.stop], selector)
        if not is_integer(step) or step <= 0:
            raise InvalidArgumentTypeError(f"Slice step must be positive: {selector!r}")
        return list(range(int(start), int(selector.stop), int(step))), False

    if isinstance(selector, NDArrayLike):
        if selector.ndim != 1:
            raise InvalidArgumentTypeError(
                f"Array selectors must be one-dimensional, got ndim={selector.ndim}"
            )
        return _non_negative(selector.tolist(), selector), False

    if isinstance(selector, (list, tuple)):
        return _non_negative(list(selector), selector), False

    raise InvalidArgumentTypeError(
        f"Unsupported index selector ({type(selector).__name__})"
    )


class Index(IIndex):
    """
    Per-dimension coordinate-set selector.

    Parameters
    ----------
    *selectors : Any
        One selector per addressed dimension (see module docstring).

    Examples
    --------
    >>> Index(0, [1, 2]).to_array()
    [[0], [1, 2]]
    >>> Index(1, 1).is_scalar()
    True
    """

    __slots__ = ("_dimensions", "_scalars")

    def __init__(self, *selectors: Any) -> None:
        if not selectors:
            raise InvalidArgumentTypeError("Index requires at least one dimension")

        dimensions: List[List[int]] = []
        scalars: List[bool] = []
        for selector in selectors:
            coords, scalar = _normalize_selector(selector)
            dimensions.append(coords)
            scalars.append(scalar)

        self._dimensions = tuple(tuple(d) for d in dimensions)
        self._scalars = tuple(scalars)

    def size(self) -> List[int]:
        return [len(d) for d in self._dimensions]

    def to_array(self) -> List[List[int]]:
        return [list(d) for d in self._dimensions]

    def is_scalar(self) -> bool:
        return all(self._scalars)

    def __repr__(self) -> str:
        parts = [
            str(d[0]) if scalar else repr(list(d))
            for d, scalar in zip(self._dimensions, self._scalars)
        ]
        return f"Index({', '.join(parts)})"
