"""
Library configuration for FastMatrix.

Configuration is managed with donfig. Values can be set programmatically,
temporarily through ``config.set(...)`` used as a context manager, or through
environment variables of the form ``FASTMATRIX_MATRIX__DEFAULT_DTYPE=float64``
(double underscore for nested keys).

Keys
----
matrix.default_dtype : str
    Element type used when a matrix is built without an explicit dtype and
    its source carries none. Defaults to ``"uint32"``.
matrix.record_kind : str
    The ``kind`` tag written to persisted records and required on read.
json.indent : Optional[int]
    Indentation used by `FastMatrix.to_json`.
"""

from __future__ import annotations

from donfig import Config

from ..domain._dtype import DType

config = Config(
    "fastmatrix",
    defaults=[
        {
            "matrix": {"default_dtype": "uint32", "record_kind": "FastMatrix"},
            "json": {"indent": None},
        }
    ],
)


def default_dtype() -> DType:
    """
    Return the configured default element type.

    Raises
    ------
    InvalidDatatypeError
        If the configured value is not a supported tag.
    """
    return DType.parse(config.get("matrix.default_dtype"))


def record_kind() -> str:
    return str(config.get("matrix.record_kind"))
