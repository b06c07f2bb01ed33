"""
fastmatrix: dense rank-N matrices backed by a single typed contiguous buffer.

Quick start
-----------
>>> from fastmatrix import FastMatrix, Index
>>> m = FastMatrix([[1, 2], [3, 4]], dtype="float64")
>>> m.get([0, 1])
2.0
>>> m.diagonal().to_array()
[1.0, 4.0]
>>> m.subset(Index(1, 1))
4.0
"""

from .domain import (
    FastMatrixError,
    InvalidArgumentTypeError,
    InvalidDatatypeError,
    DimensionMismatchError,
    IndexOutOfRangeError,
    UnsupportedRankError,
    DType,
    IIndex,
    IMatrixLike,
    IFastMatrix,
)
from .infrastructure import config, coerce, convert, FastMatrix, Index

__version__ = "0.1.0"

__all__ = [
    FastMatrix.__name__,
    Index.__name__,
    DType.__name__,
    IIndex.__name__,
    IMatrixLike.__name__,
    IFastMatrix.__name__,
    FastMatrixError.__name__,
    InvalidArgumentTypeError.__name__,
    InvalidDatatypeError.__name__,
    DimensionMismatchError.__name__,
    IndexOutOfRangeError.__name__,
    UnsupportedRankError.__name__,
    "config",
    coerce.__name__,
    convert.__name__,
]
