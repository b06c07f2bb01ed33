from __future__ import annotations

import base64
from typing import Any, Dict

import numpy as np

from ...domain._errors import InvalidArgumentTypeError


def bytes_to_b64_str(b: bytes) -> str:
    """
    Encode raw bytes into a base64 ASCII string (JSON-safe).
    """
    return base64.b64encode(b).decode("ascii")


def b64_str_to_bytes(s: str) -> bytes:
    """
    Decode a base64 ASCII string back into raw bytes.
    """
    return base64.b64decode(s.encode("ascii"), validate=True)


def buffer_to_payload(buf: np.ndarray) -> Dict[str, Any]:
    """
    Serialize a flat matrix buffer into a JSON-safe payload.

    Returns
    -------
    dict
        {
          "b64": "<base64>",
          "dtype": "<numpy dtype str>",
          "shape": [n],
          "order": "C"
        }

    Notes
    -----
    Multi-byte elements are always written little-endian so payloads are
    portable across hosts.
    """
    a = np.ravel(np.asarray(buf))
    a = np.ascontiguousarray(a, dtype=a.dtype.newbyteorder("<"))
    return {
        "b64": bytes_to_b64_str(a.tobytes(order="C")),
        "dtype": a.dtype.str,  # e.g. "<u4", "|u1"
        "shape": list(a.shape),
        "order": "C",
    }


def payload_to_buffer(payload: Dict[str, Any]) -> np.ndarray:
    """
    Deserialize a payload produced by `buffer_to_payload` into a flat array.

    Notes
    -----
    - Uses np.frombuffer (zero-copy view on the bytes object), then copies so
      the result owns its memory.
    - The decoded element count must match ``payload["shape"]``.

    Raises
    ------
    InvalidArgumentTypeError
        If the payload is malformed.
    """
    try:
        b = b64_str_to_bytes(str(payload["b64"]))
        dtype = np.dtype(str(payload["dtype"]))
        shape = tuple(int(x) for x in payload["shape"])
        arr = np.frombuffer(b, dtype=dtype).reshape(shape)
    except (KeyError, TypeError, ValueError) as e:
        raise InvalidArgumentTypeError(f"Malformed buffer payload: {e}") from e

    return np.array(arr.ravel(), dtype=dtype.newbyteorder("="), copy=True)
