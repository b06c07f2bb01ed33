"""
Normalization of construction sources and values into flat buffers.

Each `MatrixSource` variant has its own path into ``(buffer, shape, dtype)``:

- `Empty`              -> empty buffer, shape ``[0]``
- `FromExisting`       -> deep copy of the other matrix's values; its dtype is
                          inherited when it names a supported type
- `FromRecord`         -> validated flat data + shape + dtype
- `FromNestedSequence` -> nested matrices replaced by plain lists, shape taken
                          from the first element at each depth, rectangularity
                          checked, then flattened in row-major order

Explicit dtypes passed by the caller are validated strictly. Dtypes inherited
from a source fall back to the configured default when absent or unknown.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, List, Optional, Tuple

import numpy as np

from ...domain._dtype import DType
from ...domain._errors import (
    DimensionMismatchError,
    InvalidArgumentTypeError,
    InvalidDatatypeError,
)
from ...domain._matrix import IMatrixLike
from ...domain._sources import (
    Empty,
    FromExisting,
    FromNestedSequence,
    FromRecord,
    MatrixSource,
)
from ...domain.types._numpy import NDArrayLike
from .._config import default_dtype, record_kind
from ..dtype._conversion import coerce, storage_type
from ._shape_indexer import normalize_shape, product

logger = logging.getLogger(__name__)


def resolve_dtype(explicit: Any = None, inherited: Any = None) -> DType:
    """
    Pick the dtype for a new matrix.

    An explicit dtype always wins and must be valid. Otherwise an inherited
    dtype is used if it names a supported type, else the configured default.
    """
    if explicit is not None:
        return DType.parse(explicit)
    if inherited is not None:
        try:
            return DType.parse(inherited)
        except InvalidDatatypeError:
            logger.debug("ignoring unsupported source dtype %r", inherited)
    return default_dtype()


def preprocess(data: Any) -> List[Any]:
    """
    Replace nested matrices and arrays by plain nested lists.
    """
    out = []
    for elem in data:
        if isinstance(elem, IMatrixLike):
            out.append(preprocess(elem.to_array()))
        elif isinstance(elem, NDArrayLike):
            out.append(elem.tolist())
        elif isinstance(elem, (list, tuple)):
            out.append(preprocess(elem))
        else:
            out.append(elem)
    return out


def nested_shape(data: List[Any]) -> List[int]:
    """
    Shape of a nested list, read from the first element at each depth.
    """
    shape = []
    level = data
    while isinstance(level, list):
        shape.append(len(level))
        if not level:
            break
        level = level[0]
    return shape


def validate_nested(data: List[Any], shape: List[int], dim: int = 0) -> None:
    """
    Check that a nested list is rectangular with the given shape.

    Raises
    ------
    DimensionMismatchError
        On the first ragged or over-deep level found.
    """
    if len(data) != shape[dim]:
        raise DimensionMismatchError(len(data), shape[dim])

    if dim < len(shape) - 1:
        for child in data:
            if not isinstance(child, list):
                raise DimensionMismatchError(0, shape[dim + 1])
            validate_nested(child, shape, dim + 1)
    else:
        for child in data:
            if isinstance(child, list):
                raise DimensionMismatchError(len(shape) + 1, len(shape), ">")


def flatten(data: List[Any], out: Optional[List[Any]] = None) -> List[Any]:
    """Row-major flattening of a (preprocessed) nested list."""
    if out is None:
        out = []
    for elem in data:
        if isinstance(elem, list):
            flatten(elem, out)
        else:
            out.append(elem)
    return out


def flatten_values(value: Any) -> Any:
    """
    Flatten a replacement value (scalar, nested sequence, array, or matrix)
    into a flat sequence of elements. A scalar yields a one-element list.
    """
    if isinstance(value, IMatrixLike):
        value = value.to_array()
    if isinstance(value, NDArrayLike):
        return np.ravel(np.asarray(value))
    if isinstance(value, (list, tuple)):
        return flatten(preprocess(value))
    return [value]


def _from_nested(data: Any, dtype: DType) -> Tuple[np.ndarray, List[int]]:
    if isinstance(data, NDArrayLike):
        if data.ndim == 0:
            raise InvalidArgumentTypeError("Array data must have at least one dimension")
        shape = [int(s) for s in data.shape]
        return coerce(data, dtype), shape

    nested = preprocess(data)
    shape = nested_shape(nested)
    validate_nested(nested, shape)
    return coerce(flatten(nested), dtype), shape


def _from_record(record: Mapping, dtype: Any) -> Tuple[np.ndarray, List[int], DType]:
    kind = record.get("kind")
    if kind is not None and kind != record_kind():
        raise InvalidArgumentTypeError(
            f"Record kind {kind!r} does not match {record_kind()!r}"
        )

    shape = normalize_shape(record["shape"] if "shape" in record else record["size"])
    dt = resolve_dtype(dtype, record.get("dtype", record.get("datatype")))

    data = record["data"]
    if isinstance(data, NDArrayLike):
        data = np.ravel(np.asarray(data))
    elif not isinstance(data, (list, tuple)):
        raise InvalidArgumentTypeError(
            f"Record data must be a flat sequence, got {type(data).__name__}"
        )
    if len(data) != product(shape):
        raise DimensionMismatchError(len(data), product(shape))

    return coerce(data, dt), shape, dt


def normalize_source(
    source: MatrixSource, dtype: Any = None
) -> Tuple[np.ndarray, List[int], DType]:
    """
    Turn a classified construction source into ``(buffer, shape, dtype)``.

    Parameters
    ----------
    source : MatrixSource
        Output of `classify_source`.
    dtype : Any, optional
        Explicit element type requested by the caller.

    Returns
    -------
    tuple
        A freshly allocated flat buffer, the shape, and the dtype.
    """
    if isinstance(source, Empty):
        dt = resolve_dtype(dtype)
        return np.zeros(0, dtype=storage_type(dt)), [0], dt

    if isinstance(source, FromExisting):
        other = source.matrix
        dt = resolve_dtype(dtype, other.datatype())
        buffer, shape = _from_nested(other.to_array(), dt)
        expected = normalize_shape(other.size())
        if product(expected) == 0:
            return np.zeros(0, dtype=storage_type(dt)), expected, dt
        if shape != expected:
            raise DimensionMismatchError(shape, expected)
        return buffer, shape, dt

    if isinstance(source, FromRecord):
        if not isinstance(source.record, Mapping):
            raise InvalidArgumentTypeError(
                f"Record must be a mapping, got {type(source.record).__name__}"
            )
        try:
            return _from_record(source.record, dtype)
        except KeyError as e:
            raise InvalidArgumentTypeError(f"Record is missing {e}") from e

    if isinstance(source, FromNestedSequence):
        dt = resolve_dtype(dtype)
        buffer, shape = _from_nested(source.data, dt)
        return buffer, shape, dt

    raise InvalidArgumentTypeError(f"Unsupported source {type(source).__name__}")
