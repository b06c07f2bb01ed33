"""
Index-set addressing for FastMatrix.

Public API
----------
- ``MatrixMixinSubset``
"""

from ._subset import MatrixMixinSubset

__all__ = [
    MatrixMixinSubset.__name__,
]
