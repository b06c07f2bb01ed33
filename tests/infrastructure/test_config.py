from unittest import TestCase
import json
import unittest

from fastmatrix import FastMatrix, config
from fastmatrix.domain._dtype import DType
from fastmatrix.domain._errors import InvalidArgumentTypeError, InvalidDatatypeError
from fastmatrix.infrastructure._config import default_dtype, record_kind


class TestConfigDefaults(TestCase):

    def test_defaults(self):
        self.assertIs(default_dtype(), DType.UINT32)
        self.assertEqual(record_kind(), "FastMatrix")
        self.assertIsNone(config.get("json.indent"))

    def test_default_dtype_applies_to_new_matrices(self):
        self.assertIs(FastMatrix([1, 2]).dtype, DType.UINT32)
        self.assertIs(FastMatrix().dtype, DType.UINT32)


class TestConfigOverrides(TestCase):

    def test_default_dtype_override(self):
        with config.set({"matrix.default_dtype": "float64"}):
            m = FastMatrix([1.5, 2.5])
            self.assertIs(m.dtype, DType.FLOAT64)
            self.assertEqual(m.get([0]), 1.5)
        self.assertIs(FastMatrix([1]).dtype, DType.UINT32)

    def test_explicit_dtype_wins_over_config(self):
        with config.set({"matrix.default_dtype": "float64"}):
            self.assertIs(FastMatrix([1], dtype="uint8").dtype, DType.UINT8)

    def test_invalid_configured_dtype_fails_on_use(self):
        with config.set({"matrix.default_dtype": "int128"}):
            with self.assertRaises(InvalidDatatypeError):
                FastMatrix([1])

    def test_record_kind_override(self):
        m = FastMatrix([1, 2])
        with config.set({"matrix.record_kind": "Matrix"}):
            record = m.to_record()
            self.assertEqual(record["kind"], "Matrix")
            FastMatrix.from_record(record)
        with self.assertRaises(InvalidArgumentTypeError):
            FastMatrix.from_record(record)

    def test_json_indent(self):
        m = FastMatrix([1, 2])
        self.assertNotIn("\n", m.to_json())
        with config.set({"json.indent": 2}):
            text = m.to_json()
        self.assertIn("\n", text)
        self.assertEqual(json.loads(text)["data"], [1, 2])


if __name__ == "__main__":
    unittest.main()
