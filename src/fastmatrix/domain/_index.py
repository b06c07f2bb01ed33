"""
Index selector interface definitions.

An index selector describes, per dimension, either a single coordinate or an
ordered set of coordinates. The subset engine consumes selectors only through
this structural contract, so any object exposing these three methods can be
used to address a matrix.
"""

from __future__ import annotations

from typing import List, Protocol, runtime_checkable


@runtime_checkable
class IIndex(Protocol):
    """
    Per-dimension coordinate-set selector.

    Notes
    -----
    - Dimension ``d`` of the selector addresses dimension ``d`` of the matrix.
      A selector may cover fewer dimensions than the matrix; trailing matrix
      dimensions are then taken whole.
    - Coordinates are zero-based and are not wrapped; negative values are
      invalid.
    """

    def size(self) -> List[int]:
        """
        Return the number of coordinates selected in each dimension.

        Returns
        -------
        list[int]
            One count per selector dimension. A scalar dimension counts as 1.
        """
        ...

    def to_array(self) -> List[List[int]]:
        """
        Return the selected coordinates, one ordered list per dimension.

        Returns
        -------
        list[list[int]]
            Nested coordinate lists. A scalar dimension yields a one-element
            list.
        """
        ...

    def is_scalar(self) -> bool:
        """
        Indicate whether every dimension selects exactly one coordinate given
        as a scalar.

        Returns
        -------
        bool
            True if the selector addresses a single element.
        """
        ...
