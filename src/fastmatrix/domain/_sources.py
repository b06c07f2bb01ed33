"""
Construction sources for FastMatrix.

A matrix can be built from exactly one of four inputs. Instead of sniffing the
argument at every use site, construction first classifies it into one of the
tagged variants below; each variant then has its own validated normalization
path into ``(buffer, shape, dtype)``.

- `FromExisting`        : another matrix (deep-copied)
- `FromRecord`          : a persisted record ``{data, shape, dtype}``
- `FromNestedSequence`  : nested lists/tuples or an ndarray-like object
- `Empty`               : no data; shape ``[0]``
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union

from ._errors import InvalidArgumentTypeError
from ._matrix import IMatrixLike
from .types._numpy import NDArrayLike


@dataclass(frozen=True)
class FromExisting:
    matrix: IMatrixLike


@dataclass(frozen=True)
class FromRecord:
    record: Mapping


@dataclass(frozen=True)
class FromNestedSequence:
    data: Any


@dataclass(frozen=True)
class Empty:
    pass


MatrixSource = Union[FromExisting, FromRecord, FromNestedSequence, Empty]
"""Tagged union of the accepted construction inputs."""


def classify_source(data: Any) -> MatrixSource:
    """
    Classify a raw construction argument into a `MatrixSource` variant.

    Parameters
    ----------
    data : Any
        A variant instance (returned unchanged), None, a matrix-like object,
        a record mapping with ``data`` and ``shape`` (or legacy ``size``)
        keys, a list/tuple, or an ndarray-like object.

    Returns
    -------
    MatrixSource
        The matching variant.

    Raises
    ------
    InvalidArgumentTypeError
        If `data` matches none of the accepted inputs.
    """
    if data is None:
        return Empty()
    if isinstance(data, (FromExisting, FromRecord, FromNestedSequence, Empty)):
        return data
    if isinstance(data, IMatrixLike):
        return FromExisting(data)
    if isinstance(data, Mapping):
        if "data" in data and ("shape" in data or "size" in data):
            return FromRecord(data)
        raise InvalidArgumentTypeError(
            "Record must provide 'data' and 'shape' entries, "
            f"got keys {sorted(str(k) for k in data)}"
        )
    if isinstance(data, (list, tuple)) or isinstance(data, NDArrayLike):
        return FromNestedSequence(data)
    raise InvalidArgumentTypeError(
        f"Unsupported type of data ({type(data).__name__})"
    )
