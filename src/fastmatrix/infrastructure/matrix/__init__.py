"""
NumPy-backed matrix implementation.

Public API
----------
- ``FastMatrix`` : the concrete dense matrix
- ``Index``      : the concrete per-dimension index selector
- ``ShapeIndexer`` : row-major coordinate/offset arithmetic
"""

from ._matrix import FastMatrix
from ._index import Index
from ._shape_indexer import ShapeIndexer

__all__ = [
    FastMatrix.__name__,
    Index.__name__,
    ShapeIndexer.__name__,
]
