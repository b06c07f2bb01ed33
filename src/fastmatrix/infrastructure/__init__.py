"""
Concrete runtime implementation of the FastMatrix contracts (NumPy backend).
"""

from ._config import config
from .dtype import coerce, convert
from .matrix import FastMatrix, Index, ShapeIndexer

__all__ = [
    "config",
    coerce.__name__,
    convert.__name__,
    FastMatrix.__name__,
    Index.__name__,
    ShapeIndexer.__name__,
]
