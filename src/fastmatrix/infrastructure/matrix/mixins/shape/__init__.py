"""
Resize and reshape for FastMatrix.
"""

from ._resize_reshape import MatrixMixinShape

__all__ = [
    MatrixMixinShape.__name__,
]
