from ._conversion import coerce, convert, storage_type, zero

__all__ = [
    coerce.__name__,
    convert.__name__,
    storage_type.__name__,
    zero.__name__,
]
