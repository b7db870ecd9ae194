"""
Unit tests for core.logger module.

Tests:
- Logger initialization
- format_kv_pairs escaping and truncation
- Level methods in key=value and JSON modes
- StructuredFormatter output
"""

import json
import logging
from unittest.mock import MagicMock

import pytest

from zwnotify.core.logger import Logger, StructuredFormatter, format_kv_pairs


class TestInit:
    """Logger initialization."""

    def test_name(self):
        logger = Logger("registry")
        assert logger._logger.name == "registry"

    def test_default_not_json(self):
        assert Logger("test")._json_output is False

    def test_default_max_value_length(self):
        assert Logger("test")._max_value_length == 1000


class TestFormatKvPairs:
    """Key-value pairs formatting and escaping."""

    def test_simple(self):
        assert format_kv_pairs({"count": 3}) == " count=3"

    def test_with_spaces(self):
        assert format_kv_pairs({"error": "bad key"}) == ' error="bad key"'

    def test_with_double_quotes(self):
        assert format_kv_pairs({"key": 'say "hi"'}) == ' key="say \\"hi\\""'

    def test_empty_value(self):
        assert format_kv_pairs({"key": ""}) == ' key=""'

    def test_empty_dict(self):
        assert format_kv_pairs({}) == ""

    def test_truncation(self):
        result = format_kv_pairs({"key": "x" * 1500}, max_value_length=1000)
        assert "truncated 500 chars" in result

    def test_no_truncation(self):
        assert "truncated" not in format_kv_pairs({"key": "x" * 1500}, max_value_length=None)

    def test_custom_prefix(self):
        assert format_kv_pairs({"key": "val"}, prefix="") == "key=val"


class TestLogLevels:
    """All log levels route through the stdlib logger."""

    @pytest.fixture
    def mock_logger(self):
        logger = Logger("test")
        mock = MagicMock()
        logger._logger = mock
        return logger, mock

    @pytest.mark.parametrize(
        ("method", "level"),
        [
            ("debug", logging.DEBUG),
            ("info", logging.INFO),
            ("warning", logging.WARNING),
            ("error", logging.ERROR),
        ],
    )
    def test_level(self, mock_logger, method, level):
        logger, mock = mock_logger
        getattr(logger, method)("event_name", count=1)
        mock.log.assert_called_once()
        args, kwargs = mock.log.call_args
        assert args == (level, "event_name")
        assert kwargs["extra"] == {"structured_kv": {"count": 1}}
        assert kwargs["exc_info"] is False

    def test_exception_includes_traceback(self, mock_logger):
        logger, mock = mock_logger
        logger.exception("boom")
        assert mock.log.call_args[1]["exc_info"] is True

    def test_no_kwargs_no_extra(self, mock_logger):
        logger, mock = mock_logger
        logger.info("plain")
        assert mock.log.call_args[1]["extra"] == {}

    def test_extra_values_truncated(self):
        logger = Logger("test", max_value_length=5)
        mock = MagicMock()
        logger._logger = mock
        logger.info("msg", data="abcdefgh")
        value = mock.log.call_args[1]["extra"]["structured_kv"]["data"]
        assert value.startswith("abcde...")


class TestJsonOutput:
    """JSON output mode."""

    def test_json_record(self):
        logger = Logger("registry", json_output=True)
        mock = MagicMock()
        mock.name = "registry"
        logger._logger = mock
        logger.error("notification_config_load_failed", error="bad")
        level, payload = mock.log.call_args[0]
        assert level == logging.ERROR
        parsed = json.loads(payload)
        assert parsed["message"] == "notification_config_load_failed"
        assert parsed["level"] == "error"
        assert parsed["logger"] == "registry"
        assert parsed["error"] == "bad"
        assert "timestamp" in parsed


class TestStructuredFormatter:
    """StructuredFormatter rendering."""

    def test_with_structured_kv(self):
        record = logging.LogRecord("registry", logging.ERROR, __file__, 1, "failed", None, None)
        record.structured_kv = {"error": "The config file is malformed!"}
        output = StructuredFormatter().format(record)
        assert output == 'error registry failed error="The config file is malformed!"'

    def test_without_structured_kv(self):
        record = logging.LogRecord("cli", logging.INFO, __file__, 1, "hello", None, None)
        assert StructuredFormatter().format(record) == "info cli hello"
