"""
Unit tests for logging setup.
"""

import json
import logging

import pytest

from fars.utils.logging import JsonFormatter, configure_logging


class TestJsonFormatter:

    def test_extra_fields_merged(self):
        record = logging.LogRecord(
            "fars.data.years", logging.WARNING, __file__, 1,
            "invalid year: %s", ("bogus",), None,
        )
        record.year = "bogus"

        payload = json.loads(JsonFormatter().format(record))

        assert payload["level"] == "WARNING"
        assert payload["logger"] == "fars.data.years"
        assert payload["msg"] == "invalid year: bogus"
        assert payload["year"] == "bogus"


class TestConfigureLogging:

    def test_single_handler_on_repeat(self):
        root = logging.getLogger()
        before = len([h for h in root.handlers if not getattr(h, "_fars_handler", False)])

        first = configure_logging("INFO")
        second = configure_logging("INFO", json_format=True)

        try:
            assert first not in root.handlers
            assert second in root.handlers
            assert len(root.handlers) == before + 1
            assert isinstance(second.formatter, JsonFormatter)
            assert root.level == logging.INFO
        finally:
            root.removeHandler(second)
            root.setLevel(logging.WARNING)

    def test_unknown_level(self):
        with pytest.raises(ValueError, match="LOUD"):
            configure_logging("loud")
