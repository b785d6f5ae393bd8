"""
Tests for structured JSON logging configuration.

This module tests:
- JSONFormatter (JSON log output)
- setup_logging() (logging configuration)
- get_logger() (logger factory)
- log_with_context() (entity context helper)

Tests follow AAA (Arrange, Act, Assert) pattern.
"""

import io
import json
import logging

import pytest

from northwind.core.logging_config import (
    JSONFormatter,
    get_logger,
    log_with_context,
    setup_logging,
)


@pytest.fixture
def json_logger():
    """Logger writing JSON lines into an in-memory stream."""
    def _make(name: str, level: int = logging.INFO):
        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.handlers = []
        logger.propagate = False

        stream = io.StringIO()
        handler = logging.StreamHandler(stream)
        handler.setFormatter(JSONFormatter())
        logger.addHandler(handler)
        return logger, stream

    return _make


class TestJSONFormatter:
    """Tests for JSON log formatter."""

    def test_json_formatter_basic_message(self, json_logger):
        """
        Test JSONFormatter outputs valid JSON.

        Arrange: Create logger with JSONFormatter
        Act: Log a message
        Assert: Output is valid JSON with required fields
        """
        # Arrange
        logger, stream = json_logger("test_logger")

        # Act
        logger.info("Test message")

        # Assert
        log_data = json.loads(stream.getvalue().strip())

        assert log_data["level"] == "INFO"
        assert log_data["message"] == "Test message"
        assert "timestamp" in log_data
        assert log_data["logger"] == "test_logger"

    def test_json_formatter_entity_fields(self, json_logger):
        logger, stream = json_logger("test_logger_entity")

        logger.info(
            "Product created",
            extra={"entity": "Product", "entity_id": 1, "category_id": 1},
        )

        log_data = json.loads(stream.getvalue().strip())
        assert log_data["entity"] == "Product"
        assert log_data["entity_id"] == 1
        assert log_data["category_id"] == 1

    def test_json_formatter_with_exception(self, json_logger):
        """
        Test JSONFormatter includes exception details.

        Arrange: Create logger with JSONFormatter
        Act: Log exception
        Assert: Exception info included in JSON output
        """
        # Arrange
        logger, stream = json_logger("test_logger_exc", logging.ERROR)

        # Act
        try:
            raise ValueError("Test exception")
        except ValueError:
            logger.error("Error occurred", exc_info=True)

        # Assert
        log_data = json.loads(stream.getvalue().strip())

        assert log_data["level"] == "ERROR"
        assert "ValueError: Test exception" in log_data["exception"]

    def test_json_formatter_serializes_unknown_types(self, json_logger):
        from decimal import Decimal

        logger, stream = json_logger("test_logger_decimal")

        logger.info("Price set", extra={"unit_price": Decimal("18.00")})

        log_data = json.loads(stream.getvalue().strip())
        assert log_data["unit_price"] == "18.00"


class TestSetupLogging:
    """Tests for logging setup function."""

    def test_setup_logging_configures_root_logger(self):
        setup_logging(level="INFO", json_format=True)

        root_logger = logging.getLogger()
        assert root_logger.level == logging.INFO
        assert isinstance(root_logger.handlers[0].formatter, JSONFormatter)

    def test_setup_logging_with_debug_level(self):
        setup_logging(level="DEBUG", json_format=True)

        assert logging.getLogger().level == logging.DEBUG

    def test_setup_logging_with_simple_format(self):
        setup_logging(level="INFO", json_format=False)

        handler = logging.getLogger().handlers[0]
        assert not isinstance(handler.formatter, JSONFormatter)
        assert isinstance(handler.formatter, logging.Formatter)

    def test_setup_logging_quiets_sqlalchemy(self):
        setup_logging(level="DEBUG")

        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING


class TestGetLogger:
    """Tests for get_logger factory function."""

    def test_get_logger_returns_logger(self):
        logger = get_logger("test_module")

        assert isinstance(logger, logging.Logger)
        assert logger.name == "test_module"


class TestLogWithContext:
    """Tests for log_with_context helper function."""

    def test_log_with_context_includes_entity_fields(self, json_logger):
        """
        Test log_with_context includes entity and constraint fields.

        Arrange: Create logger with JSONFormatter
        Act: Call log_with_context with all fields
        Assert: All fields included in log output
        """
        # Arrange
        logger, stream = json_logger("test_context", logging.DEBUG)

        # Act
        log_with_context(
            logger,
            "warning",
            "Foreign key violation",
            entity="Product",
            entity_id=1,
            constraint="Product.CategoryId",
            detail="FOREIGN KEY constraint failed",
        )

        # Assert
        log_data = json.loads(stream.getvalue().strip())

        assert log_data["level"] == "WARNING"
        assert log_data["entity"] == "Product"
        assert log_data["entity_id"] == 1
        assert log_data["constraint"] == "Product.CategoryId"
        assert log_data["detail"] == "FOREIGN KEY constraint failed"

    def test_log_with_context_omits_unset_fields(self, json_logger):
        logger, stream = json_logger("test_context_unset")

        log_with_context(logger, "info", "Category created", entity="Category")

        log_data = json.loads(stream.getvalue().strip())
        assert log_data["entity"] == "Category"
        assert "entity_id" not in log_data
        assert "constraint" not in log_data
