from ._b64 import (
    bytes_to_b64_str,
    b64_str_to_bytes,
    buffer_to_payload,
    payload_to_buffer,
)

__all__ = [
    bytes_to_b64_str.__name__,
    b64_str_to_bytes.__name__,
    buffer_to_payload.__name__,
    payload_to_buffer.__name__,
]
