"""
Backend-agnostic contracts for FastMatrix: errors, dtype tags, structural
interfaces and construction sources. Nothing in this package imports NumPy.
"""

from ._errors import (
    FastMatrixError,
    InvalidArgumentTypeError,
    InvalidDatatypeError,
    DimensionMismatchError,
    IndexOutOfRangeError,
    UnsupportedRankError,
)
from ._dtype import DType
from ._index import IIndex
from ._matrix import IMatrixLike, IFastMatrix
from ._sources import (
    FromExisting,
    FromRecord,
    FromNestedSequence,
    Empty,
    MatrixSource,
    classify_source,
)
from .types import NDArrayLike

__all__ = [
    FastMatrixError.__name__,
    InvalidArgumentTypeError.__name__,
    InvalidDatatypeError.__name__,
    DimensionMismatchError.__name__,
    IndexOutOfRangeError.__name__,
    UnsupportedRankError.__name__,
    DType.__name__,
    IIndex.__name__,
    IMatrixLike.__name__,
    IFastMatrix.__name__,
    FromExisting.__name__,
    FromRecord.__name__,
    FromNestedSequence.__name__,
    Empty.__name__,
    "MatrixSource",
    classify_source.__name__,
    NDArrayLike.__name__,
]
