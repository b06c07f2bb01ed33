"""
Persisted-record and JSON serialization for FastMatrix.

Record format
-------------
{
  "kind": "FastMatrix",
  "data": [<flat row-major values>],
  "shape": [<extents>],
  "dtype": "<tag>"
}

`to_json(compact=True)` replaces the ``data`` list by a base64 payload of the
buffer bytes (see `encoding._b64`); `from_json` accepts both forms.
Reading validates ``len(data) == prod(shape)`` and never truncates or pads.
"""

from __future__ import annotations

import json
import logging
from abc import ABC
from collections.abc import Mapping
from typing import Any, Dict, Type, TypeVar

from .....domain._errors import InvalidArgumentTypeError
from .....domain._sources import FromRecord
from ...._config import config, record_kind
from ....encoding._b64 import buffer_to_payload, payload_to_buffer

logger = logging.getLogger(__name__)

M = TypeVar("M", bound="MatrixMixinSerialization")


class MatrixMixinSerialization(ABC):
    """
    Mixin implementing record and JSON round trips on `FastMatrix`.
    """

    def to_record(self) -> Dict[str, Any]:
        """
        Return a JSON-compatible record with a materialized copy of the data.
        """
        return {
            "kind": record_kind(),
            "data": self._buffer.tolist(),
            "shape": list(self._shape),
            "dtype": self._dtype.value,
        }

    @classmethod
    def from_record(cls: Type[M], record: Mapping) -> M:
        """
        Rebuild a matrix from a record produced by `to_record`.

        ``size`` and ``datatype`` are accepted as aliases of ``shape`` and
        ``dtype``.

        Raises
        ------
        InvalidArgumentTypeError
            If `record` is not a mapping, misses entries, or has a foreign
            ``kind``.
        DimensionMismatchError
            If ``len(data) != prod(shape)``.
        """
        if not isinstance(record, Mapping):
            raise InvalidArgumentTypeError(
                f"Record must be a mapping, got {type(record).__name__}"
            )
        return cls(FromRecord(record))

    def to_json(self, compact: bool = False) -> str:
        record = self.to_record()
        if compact:
            record["data"] = buffer_to_payload(self._buffer)
        return json.dumps(record, indent=config.get("json.indent"))

    @classmethod
    def from_json(cls: Type[M], text: str) -> M:
        try:
            record = json.loads(text)
        except json.JSONDecodeError as e:
            raise InvalidArgumentTypeError(f"Invalid JSON record: {e}") from e
        if not isinstance(record, dict):
            raise InvalidArgumentTypeError("JSON record must be an object")

        if isinstance(record.get("data"), Mapping):
            record["data"] = payload_to_buffer(record["data"])
            logger.debug("decoded base64 payload of %d element(s)", len(record["data"]))

        return cls.from_record(record)
