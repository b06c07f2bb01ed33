"""
Diagonal extraction and diagonal-matrix construction for FastMatrix.
"""

from ._diagonal import MatrixMixinDiagonal

__all__ = [
    MatrixMixinDiagonal.__name__,
]
