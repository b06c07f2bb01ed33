"""
Domain-level structural typing for NumPy-like n-dimensional arrays.

This module defines :class:`NDArrayLike`, a backend-agnostic Protocol
representing objects that behave like NumPy ``ndarray`` instances, without
introducing a dependency on NumPy in the domain layer.

It is used in two places:
- to type the aliasing buffer views handed out by the matrix core
  (partial-coordinate `get`, nested views), and
- to recognize array inputs (construction data, replacement values,
  selectors) structurally at runtime.
"""

from __future__ import annotations

from typing import Any, Protocol, Tuple, runtime_checkable


@runtime_checkable
class NDArrayLike(Protocol):
    """
    Structural interface for objects that behave like NumPy ndarrays.

    Notes
    -----
    - This is a *Protocol*, not a concrete base class.
    - Only the members the matrix core relies on are modeled.
    """

    @property
    def shape(self) -> Tuple[int, ...]:
        """
        Shape of the array as a tuple of dimension sizes.
        """
        ...

    @property
    def ndim(self) -> int:
        """
        Number of dimensions of the array.
        """
        ...

    @property
    def dtype(self) -> Any:
        """
        Data type descriptor of the array elements.
        """
        ...

    def tolist(self) -> Any:
        """
        Return the array contents as (nested) Python lists of scalars.
        """
        ...

    def __len__(self) -> int: ...
