"""
Nested-sequence views and copies of a FastMatrix.

The builder walks the shape recursively. At the innermost dimension it exposes
the contiguous run of the row as a leaf; outer dimensions collect their
children into lists. Child ``i`` of dimension ``d`` starts at
``offset + i * plane[d]``.

Leaves are either aliasing NumPy views (`views`) or materialized Python lists
(`to_array`). View leaves are valid only while the owner is not written to,
resized or reshaped.
"""

from __future__ import annotations

from abc import ABC
from typing import Any, List


class MatrixMixinNested(ABC):
    """
    Mixin implementing `to_array` and `views` on `FastMatrix`.
    """

    def to_array(self) -> List[Any]:
        """
        Return the matrix as nested Python lists, independent of the buffer.

        Returns
        -------
        list
            Nested lists of Python numbers; ``[]`` for an empty matrix.
        """
        return self._nest(copy=True)

    def views(self) -> Any:
        """
        Return nested lists whose leaves are NumPy views over the innermost
        rows. For a one-dimensional matrix this is a single view.
        """
        return self._nest(copy=False)

    def _nest(self, copy: bool) -> Any:
        shape = self._shape
        planes = self._indexer.plane_sizes
        buf = self._buffer
        last = len(shape) - 1

        def build(level: int, offset: int) -> Any:
            if level == last:
                leaf = buf[offset : offset + shape[level]]
                return leaf.tolist() if copy else leaf
            return [
                build(level + 1, offset + i * planes[level])
                for i in range(shape[level])
            ]

        return build(0, 0)
