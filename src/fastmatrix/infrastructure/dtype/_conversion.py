"""
Dtype-aware numeric conversion (NumPy backend).

Every write into a matrix buffer goes through the narrowing rule of the
matrix dtype. NumPy's own casts do not implement those rules (out-of-range
integer casts are undefined or raise), so the rules are applied explicitly on
a float64 intermediate before the final cast:

- unsigned integers : NaN/inf -> 0, truncate toward zero, reduce modulo
                      ``2**bits``
- clamped 8-bit     : NaN -> 0, round half to even, saturate to ``[0, 255]``
- float32           : round to single precision (overflow -> inf)
- float64           : unchanged
"""

from __future__ import annotations

from typing import Any, Dict, Union

import numpy as np

from ...domain._dtype import DType
from ...domain._errors import InvalidArgumentTypeError

Number = Union[int, float]

_STORAGE_TYPES: Dict[DType, type] = {
    DType.UINT8: np.uint8,
    DType.UINT16: np.uint16,
    DType.UINT32: np.uint32,
    DType.FLOAT32: np.float32,
    DType.FLOAT64: np.float64,
    DType.UINT8_CLAMPED: np.uint8,
}


def storage_type(dtype: Union[DType, str]) -> np.dtype:
    """
    Return the NumPy storage dtype for a dtype tag.
    """
    return np.dtype(_STORAGE_TYPES[DType.parse(dtype)])


def _as_float64(values: Any) -> np.ndarray:
    if values is None:
        raise InvalidArgumentTypeError("Numeric values expected, got None")
    try:
        return np.asarray(values, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentTypeError(
            f"Numeric values expected, got {type(values).__name__}"
        ) from e


def coerce(values: Any, dtype: Union[DType, str]) -> np.ndarray:
    """
    Convert values to a flat buffer of the dtype's storage type.

    Parameters
    ----------
    values : Any
        A scalar, a flat or rectangular nested sequence, or an array.
    dtype : DType or str
        Target element type.

    Returns
    -------
    np.ndarray
        A new C-contiguous 1-D array holding the narrowed values.

    Raises
    ------
    InvalidArgumentTypeError
        If `values` cannot be interpreted as numbers.
    """
    dt = DType.parse(dtype)
    src = np.ravel(_as_float64(values))

    with np.errstate(over="ignore", invalid="ignore"):
        if dt.is_float:
            return np.array(src, dtype=storage_type(dt), copy=True)

        if dt.is_clamped:
            out = np.clip(np.rint(np.nan_to_num(src, nan=0.0)), 0.0, 255.0)
        else:
            out = np.trunc(src)
            out[~np.isfinite(out)] = 0.0
            out = np.mod(out, float(2**dt.bits))

        return out.astype(storage_type(dt))


def convert(value: Any, dtype: Union[DType, str]) -> Number:
    """
    Convert a single scalar per the dtype's narrowing rule.

    Used for fill and default values (resize, diagonal construction) so that
    they are stored exactly as an element write would store them.

    Parameters
    ----------
    value : Any
        Scalar value (int, float, bool, or anything with ``__float__``).
    dtype : DType or str
        Target element type.

    Returns
    -------
    int or float
        The narrowed value as a plain Python number.

    Raises
    ------
    InvalidArgumentTypeError
        If `value` is not a scalar or not numeric.
    """
    if isinstance(value, (list, tuple, dict)) or np.ndim(value) != 0:
        raise InvalidArgumentTypeError(
            f"Scalar value expected, got {type(value).__name__}"
        )
    return coerce(value, dtype)[0].item()


def zero(dtype: Union[DType, str]) -> Number:
    """Return the dtype's zero."""
    return convert(0, dtype)
