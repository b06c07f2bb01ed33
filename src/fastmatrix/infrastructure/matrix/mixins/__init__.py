"""
Operation mixins composed into `FastMatrix`.

Each subpackage contributes one group of operations as a mixin class; they
all rely on the attributes set by `FastMatrix._assign` (``_buffer``,
``_shape``, ``_dtype``, ``_indexer``) and on ``FastMatrix._from_buffer``.
"""

from .subset import MatrixMixinSubset
from .shape import MatrixMixinShape
from .diagonal import MatrixMixinDiagonal
from .rows import MatrixMixinRows
from .nested import MatrixMixinNested
from .serialization import MatrixMixinSerialization


class _MatrixAllMixin(
    MatrixMixinSubset,
    MatrixMixinShape,
    MatrixMixinDiagonal,
    MatrixMixinRows,
    MatrixMixinNested,
    MatrixMixinSerialization,
):
    pass


__all__ = [_MatrixAllMixin.__name__]
