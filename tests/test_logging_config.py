"""
Tests for structured JSON logging configuration.

This module tests:
- JSONFormatter (JSON log output)
- setup_logging() (logging configuration)
- log_with_context() (context field helper)

Tests follow AAA (Arrange, Act, Assert) pattern.
"""

import io
import json
import logging

import pytest

from employee_api.core.logging_config import (
    JSONFormatter,
    setup_logging,
    get_logger,
    log_with_context,
)


def _capture(name: str) -> tuple[logging.Logger, io.StringIO]:
    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO)
    logger.handlers = []
    logger.propagate = False

    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(JSONFormatter())
    logger.addHandler(handler)
    return logger, stream


class TestJSONFormatter:
    """Tests for JSON log formatter."""

    def test_basic_message(self):
        """
        Test JSONFormatter outputs valid JSON.

        Arrange: Create logger with JSONFormatter
        Act: Log a message
        Assert: Output is valid JSON with required fields
        """
        # Arrange
        logger, stream = _capture("test_logger")

        # Act
        logger.info("Test message")

        # Assert
        log_data = json.loads(stream.getvalue().strip())
        assert log_data["level"] == "INFO"
        assert log_data["message"] == "Test message"
        assert log_data["logger"] == "test_logger"
        assert "timestamp" in log_data

    def test_extra_fields_included(self):
        # Arrange
        logger, stream = _capture("test_logger_extra")

        # Act
        logger.info("Employee created", extra={"employee_id": 7, "request_id": "abc"})

        # Assert
        log_data = json.loads(stream.getvalue().strip())
        assert log_data["employee_id"] == 7
        assert log_data["request_id"] == "abc"

    def test_none_extra_fields_dropped(self):
        # Arrange
        logger, stream = _capture("test_logger_none")

        # Act
        logger.info("Request completed", extra={"employee_id": None})

        # Assert
        log_data = json.loads(stream.getvalue().strip())
        assert "employee_id" not in log_data

    def test_exception_included(self):
        # Arrange
        logger, stream = _capture("test_logger_exc")

        # Act
        try:
            raise ValueError("boom")
        except ValueError:
            logger.exception("Failed")

        # Assert
        log_data = json.loads(stream.getvalue().strip())
        assert log_data["level"] == "ERROR"
        assert "ValueError: boom" in log_data["exception"]

    def test_record_internals_not_leaked(self):
        # Arrange
        logger, stream = _capture("test_logger_internals")

        # Act
        logger.warning("Careful")

        # Assert
        log_data = json.loads(stream.getvalue().strip())
        for internal in ("msg", "args", "lineno", "pathname", "taskName"):
            assert internal not in log_data


class TestSetupLogging:
    """Tests for setup_logging()."""

    @pytest.fixture(autouse=True)
    def restore_root_logger(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        root.handlers = handlers
        root.setLevel(level)

    def test_json_handler_installed(self):
        # Act
        setup_logging(level="DEBUG", json_format=True)

        # Assert
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JSONFormatter)

    def test_plain_formatter_when_json_disabled(self):
        # Act
        setup_logging(level="INFO", json_format=False)

        # Assert
        formatter = logging.getLogger().handlers[0].formatter
        assert not isinstance(formatter, JSONFormatter)

    def test_noisy_loggers_suppressed(self):
        # Act
        setup_logging(level="DEBUG")

        # Assert
        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
        assert logging.getLogger("httpx").level == logging.WARNING


class TestLogWithContext:
    """Tests for log_with_context()."""

    def test_context_fields_logged(self):
        # Arrange
        logger, stream = _capture("test_logger_context")

        # Act
        log_with_context(
            logger,
            "info",
            "Employee deleted",
            request_id="req-1",
            employee_id=3,
            status_code=None,
        )

        # Assert
        log_data = json.loads(stream.getvalue().strip())
        assert log_data["message"] == "Employee deleted"
        assert log_data["request_id"] == "req-1"
        assert log_data["employee_id"] == 3
        assert "status_code" not in log_data

    def test_exception_attached_when_requested(self):
        # Arrange
        logger, stream = _capture("test_logger_context_exc")

        # Act
        try:
            raise RuntimeError("disk full")
        except RuntimeError:
            log_with_context(logger, "error", "Request failed", employee_id="7", exc_info=True)

        # Assert
        log_data = json.loads(stream.getvalue().strip())
        assert log_data["employee_id"] == "7"
        assert "RuntimeError: disk full" in log_data["exception"]

    def test_get_logger_returns_named_logger(self):
        assert get_logger("employee_api.test").name == "employee_api.test"
