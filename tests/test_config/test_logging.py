"""Testes para config.logging.

Cobre: configure_logging, get_logger, log_fallback,
CorrelationIdFilter, create_json_formatter.
"""

from __future__ import annotations

import json
import logging
from unittest.mock import MagicMock

import pytest

from config.logging import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    CorrelationIdFilter,
    configure_logging,
    create_json_formatter,
    get_logger,
    log_fallback,
)
from config.logging.config import DEFAULT_SERVICE_NAME, VALID_LOG_LEVELS


def _record(msg: str = "message", level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord(
        name="test.logger",
        level=level,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers = handlers
    root.setLevel(level)


class TestConfigureLogging:
    """Testes para configure_logging."""

    def test_default_level(self, restore_root_logger: logging.Logger) -> None:
        configure_logging()
        assert restore_root_logger.level == logging.INFO

    def test_level_is_case_insensitive(self, restore_root_logger: logging.Logger) -> None:
        configure_logging(level="warning")
        assert restore_root_logger.level == logging.WARNING

    def test_invalid_level_raises(self) -> None:
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="INVALID")

    def test_replaces_handlers(self, restore_root_logger: logging.Logger) -> None:
        restore_root_logger.handlers = [logging.NullHandler(), logging.NullHandler()]
        configure_logging()
        assert len(restore_root_logger.handlers) == 1

    def test_adds_correlation_filter(self, restore_root_logger: logging.Logger) -> None:
        configure_logging(correlation_id_getter=lambda: "custom-corr-id")
        handler = restore_root_logger.handlers[0]
        assert any(isinstance(f, CorrelationIdFilter) for f in handler.filters)

    def test_constants(self) -> None:
        assert {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} == VALID_LOG_LEVELS
        assert DEFAULT_SERVICE_NAME == "ma_onboarding"


def test_get_logger_same_name_returns_same_instance() -> None:
    assert get_logger("same.module") is get_logger("same.module")


class TestLogFallback:
    """Testes para log_fallback."""

    def test_basic(self) -> None:
        logger = MagicMock(spec=logging.Logger)
        log_fallback(logger, "discovery_extractor")
        call_args = logger.info.call_args
        assert call_args[0] == ("Fallback applied for %s", "discovery_extractor")
        extra = call_args[1]["extra"]
        assert extra == {"fallback_used": True, "component": "discovery_extractor"}

    def test_with_reason_and_elapsed(self) -> None:
        logger = MagicMock(spec=logging.Logger)
        log_fallback(logger, "plan_generation", reason="parse_error", elapsed_ms=12.5)
        extra = logger.info.call_args[1]["extra"]
        assert extra["reason"] == "parse_error"
        assert extra["elapsed_ms"] == 12.5


class TestCorrelationIdFilter:
    """Testes para CorrelationIdFilter."""

    def test_adds_correlation_id_from_getter(self) -> None:
        record = _record()
        assert CorrelationIdFilter("ma_onboarding", lambda: "corr-123").filter(record) is True
        assert record.correlation_id == "corr-123"
        assert record.service == "ma_onboarding"

    def test_preserves_explicit_correlation_id(self) -> None:
        record = _record()
        record.correlation_id = "explicit-id"
        CorrelationIdFilter("svc", lambda: "from-getter").filter(record)
        assert record.correlation_id == "explicit-id"

    def test_empty_string_without_getter(self) -> None:
        record = _record()
        CorrelationIdFilter("svc", None).filter(record)
        assert record.correlation_id == ""


class TestCreateJsonFormatter:
    """Testes para create_json_formatter e constantes."""

    def test_required_fields(self) -> None:
        expected = {"asctime", "levelname", "name", "message", "correlation_id", "service"}
        assert set(REQUIRED_LOG_FIELDS) == expected
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}

    def test_formats_record_as_json_with_extras(self) -> None:
        formatter = create_json_formatter()
        record = _record("deployment_fallback", logging.WARNING)
        record.correlation_id = "abc-123"
        record.service = "ma_onboarding"
        record.fallback_deployment = "gpt-4.1-mini"

        payload = json.loads(formatter.format(record))

        assert payload["message"] == "deployment_fallback"
        assert payload["level"] == "WARNING"
        assert payload["logger"] == "test.logger"
        assert payload["correlation_id"] == "abc-123"
        assert payload["fallback_deployment"] == "gpt-4.1-mini"
