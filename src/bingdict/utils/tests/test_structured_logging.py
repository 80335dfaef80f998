"""Tests for structured JSON logging."""

import json
import logging
import sys
import unittest

from bingdict.utils.logging import JSONFormatter, setup_structured_logging


class TestJSONFormatter(unittest.TestCase):
    """Test JSONFormatter output."""

    def _record(self, **extra) -> logging.LogRecord:
        record = logging.LogRecord(
            name="bingdict.services.translation_service",
            level=logging.DEBUG,
            pathname=__file__,
            lineno=1,
            msg="Translation found",
            args=(),
            exc_info=None,
        )
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_base_fields(self):
        """Test level, logger and message are present."""
        data = json.loads(JSONFormatter().format(self._record()))

        self.assertEqual(data["level"], "DEBUG")
        self.assertEqual(data["logger"], "bingdict.services.translation_service")
        self.assertEqual(data["message"], "Translation found")
        self.assertTrue(data["timestamp"].endswith("Z"))

    def test_extra_fields_kept_unescaped(self):
        """Test extra fields are merged and CJK is written as-is."""
        output = JSONFormatter().format(self._record(query="词典", gender_count=2))
        data = json.loads(output)

        self.assertEqual(data["query"], "词典")
        self.assertEqual(data["gender_count"], 2)
        self.assertIn("词典", output)

    def test_exception_included(self):
        """Test exc_info is formatted into the exception field."""
        try:
            raise ValueError("boom")
        except ValueError:
            record = self._record()
            record.exc_info = sys.exc_info()

        data = json.loads(JSONFormatter().format(record))
        self.assertIn("ValueError: boom", data["exception"])


class TestSetupStructuredLogging(unittest.TestCase):
    """Test setup_structured_logging()."""

    def setUp(self):
        self.logger = logging.getLogger("bingdict")
        self._saved = (self.logger.handlers[:], self.logger.level, self.logger.propagate)

    def tearDown(self):
        self.logger.handlers, level, self.logger.propagate = self._saved
        self.logger.setLevel(level)

    def test_configures_package_logger(self):
        """Test the package logger gets a single JSON handler."""
        handler = setup_structured_logging(logging.DEBUG)

        self.assertEqual(self.logger.handlers, [handler])
        self.assertIsInstance(handler.formatter, JSONFormatter)
        self.assertEqual(self.logger.level, logging.DEBUG)
        self.assertFalse(self.logger.propagate)


if __name__ == "__main__":
    unittest.main()
