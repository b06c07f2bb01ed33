from ._nested_views import MatrixMixinNested

__all__ = [
    MatrixMixinNested.__name__,
]
