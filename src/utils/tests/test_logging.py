"""Unit tests for structured JSON logging."""

import json
import logging
import sys
import unittest

from utils.logging import JSONFormatter, setup_structured_logging


def _record(msg="hello", **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="test.logger", level=logging.INFO, pathname=__file__, lineno=1,
        msg=msg, args=(), exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter(unittest.TestCase):
    """Test cases for JSONFormatter."""

    def setUp(self):
        self.formatter = JSONFormatter()

    def test_standard_fields(self):
        data = json.loads(self.formatter.format(_record()))

        self.assertEqual(data["level"], "INFO")
        self.assertEqual(data["logger"], "test.logger")
        self.assertEqual(data["message"], "hello")
        self.assertTrue(data["timestamp"].endswith("Z"))
        self.assertNotIn("lineno", data)

    def test_extra_fields_included(self):
        data = json.loads(self.formatter.format(_record(userId="u-1", email="a@b.com")))

        self.assertEqual(data["userId"], "u-1")
        self.assertEqual(data["email"], "a@b.com")

    def test_credentials_redacted(self):
        data = json.loads(self.formatter.format(_record(password="Pass1234", token="abc.def.ghi")))

        self.assertEqual(data["password"], "[REDACTED]")
        self.assertEqual(data["token"], "[REDACTED]")

    def test_exception_included(self):
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = _record()
            record.exc_info = sys.exc_info()

        data = json.loads(self.formatter.format(record))
        self.assertIn("RuntimeError: boom", data["exception"])

    def test_non_serializable_extra_is_stringified(self):
        data = json.loads(self.formatter.format(_record(obj=object())))
        self.assertIn("object", data["obj"])


class TestSetupStructuredLogging(unittest.TestCase):
    """Test cases for setup_structured_logging()."""

    def setUp(self):
        root = logging.getLogger()
        self._handlers = root.handlers[:]
        self._level = root.level

    def tearDown(self):
        root = logging.getLogger()
        root.handlers = self._handlers
        root.setLevel(self._level)

    def test_installs_json_handler(self):
        setup_structured_logging("debug")

        root = logging.getLogger()
        self.assertEqual(root.level, logging.DEBUG)
        self.assertEqual(len(root.handlers), 1)
        self.assertIsInstance(root.handlers[0].formatter, JSONFormatter)


if __name__ == '__main__':
    unittest.main()
