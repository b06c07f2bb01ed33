"""
Element type tags for FastMatrix buffers.

A dtype tag selects the fixed-width element type of a matrix buffer and, with
it, the narrowing rule applied on every write. The tags mirror the classic
typed-array family: unsigned 8/16/32-bit integers (wrap-around), an 8-bit
clamped integer (round then saturate), and 32/64-bit IEEE floats.

This module stays free of NumPy; the mapping from tag to storage type lives
in the infrastructure layer.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict

from ._errors import InvalidDatatypeError


class DType(str, Enum):
    """
    Supported element types.

    The member value is the persisted tag (e.g., ``"uint32"``), so a
    `DType` compares equal to its tag string.
    """

    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    UINT8_CLAMPED = "uint8Clamped"

    @property
    def bits(self) -> int:
        """Element width in bits."""
        return _DTYPE_INFO[self]["bits"]

    @property
    def is_integer(self) -> bool:
        """True for the wrap-around unsigned integer types."""
        return _DTYPE_INFO[self]["kind"] == "uint"

    @property
    def is_clamped(self) -> bool:
        """True for the saturating 8-bit type."""
        return _DTYPE_INFO[self]["kind"] == "clamped"

    @property
    def is_float(self) -> bool:
        """True for the IEEE floating point types."""
        return _DTYPE_INFO[self]["kind"] == "float"

    @classmethod
    def parse(cls, value: Any) -> "DType":
        """
        Resolve a dtype tag.

        Parameters
        ----------
        value : Any
            A `DType` member or a tag string. Matching is case-insensitive and
            ignores underscores, so ``"uint8_clamped"`` resolves to
            `DType.UINT8_CLAMPED`.

        Returns
        -------
        DType
            The matching member.

        Raises
        ------
        InvalidDatatypeError
            If `value` does not name a supported type.
        """
        if isinstance(value, DType):
            return value
        if isinstance(value, str):
            key = value.strip().replace("_", "").lower()
            for member in cls:
                if member.value.lower() == key:
                    return member
        raise InvalidDatatypeError(value)

    def __str__(self) -> str:
        return self.value


_DTYPE_INFO: Dict[DType, Dict[str, Any]] = {
    DType.UINT8: {"bits": 8, "kind": "uint"},
    DType.UINT16: {"bits": 16, "kind": "uint"},
    DType.UINT32: {"bits": 32, "kind": "uint"},
    DType.FLOAT32: {"bits": 32, "kind": "float"},
    DType.FLOAT64: {"bits": 64, "kind": "float"},
    DType.UINT8_CLAMPED: {"bits": 8, "kind": "clamped"},
}
