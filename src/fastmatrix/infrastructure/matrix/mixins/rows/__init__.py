from ._swap_rows import MatrixMixinRows

__all__ = [
    MatrixMixinRows.__name__,
]
