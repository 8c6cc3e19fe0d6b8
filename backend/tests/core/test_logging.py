"""
Tests for core/logging module

Formatters, logger adapter, correlation context and the LogTimer context
manager.
"""

import pytest
import logging
import json
from unittest.mock import MagicMock
from studygenie.core.logging import (
    StructuredFormatter,
    DevelopmentFormatter,
    LoggerAdapter,
    setup_logging,
    get_logger,
    set_request_id,
    set_document_id,
    clear_context,
    LogTimer,
    request_id_var,
    document_id_var,
)


def _record(msg="Test message", level=logging.INFO, exc_info=None):
    return logging.LogRecord(
        name="test.module",
        level=level,
        pathname="/path/to/file.py",
        lineno=42,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )


class TestStructuredFormatter:
    """Test suite for StructuredFormatter"""

    def test_format_basic_log(self):
        """Test basic log record formatting to JSON"""
        parsed = json.loads(StructuredFormatter().format(_record()))

        assert parsed["level"] == "INFO"
        assert parsed["message"] == "Test message"
        assert "timestamp" in parsed
        assert parsed["logger"] == "test.module"

    def test_format_includes_extra_fields(self):
        record = _record()
        record.extra_data = {"custom_field": "custom_value"}
        record.file_name = "notes.pdf"

        parsed = json.loads(StructuredFormatter().format(record))

        assert parsed["extra"]["custom_field"] == "custom_value"
        assert parsed["extra"]["file_name"] == "notes.pdf"

    def test_format_redacts_secrets(self):
        record = _record()
        record.extra_data = {"api_key": "abc", "config": {"token": "xyz", "model": "m"}}

        parsed = json.loads(StructuredFormatter().format(record))

        assert parsed["extra"]["api_key"] == "***REDACTED***"
        assert parsed["extra"]["config"]["token"] == "***REDACTED***"
        assert parsed["extra"]["config"]["model"] == "m"

    def test_format_includes_correlation_ids(self):
        set_request_id("req-1")
        set_document_id("doc-1")

        parsed = json.loads(StructuredFormatter().format(_record()))

        assert parsed["request_id"] == "req-1"
        assert parsed["document_id"] == "doc-1"

    def test_format_with_exception(self):
        """Test log record with exception info"""
        try:
            raise ValueError("Test exception")
        except ValueError:
            import sys
            exc_info = sys.exc_info()

        parsed = json.loads(StructuredFormatter().format(_record("Error occurred", logging.ERROR, exc_info)))

        assert parsed["level"] == "ERROR"
        assert parsed["exception"]["type"] == "ValueError"
        assert parsed["exception"]["message"] == "Test exception"

    def test_format_non_serializable_extra(self):
        record = _record()
        record.payload = object()

        parsed = json.loads(StructuredFormatter().format(record))

        assert "payload" in parsed["extra"]


class TestDevelopmentFormatter:
    """Test suite for DevelopmentFormatter"""

    def test_format_basic_log(self):
        result = DevelopmentFormatter().format(_record())

        assert "Test message" in result
        assert "INFO" in result

    def test_format_shows_context(self):
        set_request_id("12345678abcdef")
        set_document_id("87654321fedcba")

        result = DevelopmentFormatter().format(_record())

        assert "req:12345678" in result
        assert "doc:87654321" in result


class TestLoggerAdapter:
    """Test suite for LoggerAdapter"""

    def test_process_adds_extra_context(self):
        adapter = LoggerAdapter(MagicMock(), extra={"component": "test"})

        msg, kwargs = adapter.process("Test message", {"extra": {}})

        assert msg == "Test message"
        assert kwargs["extra"]["component"] == "test"

    def test_process_preserves_existing_extra(self):
        adapter = LoggerAdapter(MagicMock(), extra={"component": "test"})

        _, kwargs = adapter.process("Test message", {"extra": {"file_name": "a.pdf"}})

        assert kwargs["extra"]["component"] == "test"
        assert kwargs["extra"]["file_name"] == "a.pdf"

    def test_process_adds_correlation_ids(self):
        set_request_id("req-9")
        set_document_id("doc-9")
        adapter = LoggerAdapter(MagicMock(), extra={})

        _, kwargs = adapter.process("msg", {})

        assert kwargs["extra"]["request_id"] == "req-9"
        assert kwargs["extra"]["document_id"] == "doc-9"

    def test_explicit_document_id_wins(self):
        set_document_id("doc-context")
        adapter = LoggerAdapter(MagicMock(), extra={})

        _, kwargs = adapter.process("msg", {"extra": {"document_id": "doc-explicit"}})

        assert kwargs["extra"]["document_id"] == "doc-explicit"

    def test_process_does_not_mutate_caller_extra(self):
        adapter = LoggerAdapter(MagicMock(), extra={"component": "test"})
        caller_extra = {"size": 1}

        adapter.process("msg", {"extra": caller_extra})

        assert caller_extra == {"size": 1}


class TestSetupLogging:
    """Test suite for setup_logging function"""

    def test_setup_logging_with_level(self):
        setup_logging(level="DEBUG")

        assert logging.getLogger().level == logging.DEBUG

    def test_setup_logging_json_mode(self):
        setup_logging(use_json=True)

        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0].formatter, StructuredFormatter)

    def test_setup_logging_with_file(self, tmp_path):
        log_file = tmp_path / "logs" / "app.jsonl"
        setup_logging(log_file=log_file)

        logging.getLogger("studygenie.test").warning("to file")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert log_file.exists()
        lines = log_file.read_text(encoding="utf-8").strip().splitlines()
        assert json.loads(lines[-1])["message"] == "to file"

        for handler in logging.getLogger().handlers[:]:
            handler.close()
            logging.getLogger().removeHandler(handler)


class TestGetLogger:
    def test_get_logger_with_extra(self):
        logger = get_logger("test.module", component="test_component")

        assert isinstance(logger, logging.LoggerAdapter)
        assert logger.extra["component"] == "test_component"


class TestContextVariables:
    """Test suite for context variable functions"""

    def test_set_and_clear_context(self):
        set_request_id("req-123")
        set_document_id("doc-456")

        assert request_id_var.get() == "req-123"
        assert document_id_var.get() == "doc-456"

        clear_context()

        assert request_id_var.get() is None
        assert document_id_var.get() is None


class TestLogTimer:
    """Test suite for LogTimer context manager"""

    def test_log_timer_records_duration(self):
        mock_logger = MagicMock()

        with LogTimer(mock_logger, "test_operation") as timer:
            pass

        assert timer.duration is not None
        assert timer.duration >= 0
        assert mock_logger.log.call_count == 2
        assert "Completed: test_operation" in mock_logger.log.call_args[0][1]

    def test_log_timer_with_exception(self):
        mock_logger = MagicMock()

        with pytest.raises(ValueError):
            with LogTimer(mock_logger, "failing_operation"):
                raise ValueError("Test error")

        mock_logger.error.assert_called_once()
        assert mock_logger.error.call_args.kwargs["exc_info"] is True

    def test_log_timer_custom_level(self):
        mock_logger = MagicMock()

        with LogTimer(mock_logger, "debug_operation", level=logging.DEBUG):
            pass

        assert mock_logger.log.call_args[0][0] == logging.DEBUG
