"""
Record and JSON serialization for FastMatrix.

Public API
----------
- ``MatrixMixinSerialization``
"""

from ._record import MatrixMixinSerialization

__all__ = [
    MatrixMixinSerialization.__name__,
]
