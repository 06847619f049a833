"""
Unit tests for structured logging configuration.
"""

import json
import logging
from pathlib import Path
from unittest.mock import MagicMock

import httpx
import pytest

from logicboxes.config.settings import ResellerConfig
from logicboxes.logging_config import (
    clear_correlation_id,
    get_correlation_id,
    get_logger,
    log_api_call,
    log_validation_failure,
    redact_params,
    set_correlation_id,
    setup_logging,
)
from logicboxes.sdk.adapters.http import HttpAdapter
from logicboxes.sdk.api import HOSTS, ApiCore


class TestLoggingConfiguration:
    """Test structured logging configuration functionality."""

    def test_setup_logging_default(self):
        """Test setup_logging with default parameters."""
        setup_logging()

        logger = get_logger("test")
        assert hasattr(logger, "info") and hasattr(logger, "warning")

    def test_setup_logging_with_level(self):
        """Test setup_logging with custom log level."""
        setup_logging(level="DEBUG")
        assert logging.getLogger().level == logging.DEBUG

    def test_setup_logging_json_file(self, temp_dir: Path):
        """Test JSON lines are written to the log file."""
        log_file = temp_dir / "logs" / "sdk.log"
        setup_logging(level="INFO", log_file=log_file, json_format=True)

        get_logger("test").info("test_message", key="value")

        lines = [line for line in log_file.read_text().splitlines() if line.strip()]
        entry = json.loads(lines[-1])
        assert entry["event"] == "test_message"
        assert entry["key"] == "value"
        assert entry["level"] == "info"

    def test_correlation_id_is_attached(self, temp_dir: Path):
        log_file = temp_dir / "sdk.log"
        setup_logging(level="INFO", log_file=log_file, json_format=True)

        set_correlation_id("req-123")
        try:
            get_logger("test").info("correlated")
        finally:
            clear_correlation_id()

        entry = json.loads(log_file.read_text().strip().splitlines()[-1])
        assert entry["correlation_id"] == "req-123"


class TestCorrelationId:
    def test_generated_when_missing(self):
        correlation_id = set_correlation_id()
        assert get_correlation_id() == correlation_id
        assert len(correlation_id) == 36
        clear_correlation_id()
        assert get_correlation_id() is None


class TestLogHelpers:
    def test_successful_call_logs_info(self):
        logger = MagicMock()
        log_api_call(logger, "GET", "domains", "search", 200, 12.5)

        logger.info.assert_called_once()
        _, kwargs = logger.info.call_args
        assert kwargs["namespace"] == "domains"
        assert kwargs["api_name"] == "search"
        assert kwargs["status_code"] == 200

    def test_failed_call_logs_warning(self):
        logger = MagicMock()
        log_api_call(logger, "POST", "customers", "v2/signup", 500, 3.0)
        logger.warning.assert_called_once()
        logger.info.assert_not_called()

    def test_call_without_response_logs_warning(self):
        logger = MagicMock()
        log_api_call(logger, "GET", "products", "promo-details", None, 1.0)
        logger.warning.assert_called_once()

    def test_validation_failure(self):
        logger = MagicMock()
        log_validation_failure(logger, "SignUpForm", "password", "rcpassword")

        args, kwargs = logger.warning.call_args
        assert args == ("validation_failure",)
        assert kwargs["record"] == "SignUpForm"
        assert kwargs["rule"] == "rcpassword"

    def test_redact_params(self):
        redacted = redact_params({"auth-userid": "1", "api-key": "secret", "passwd": "Secr3t!"})
        assert redacted == {"auth-userid": "1", "api-key": "***", "passwd": "***"}


class _RecordingHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.messages = []

    def emit(self, record: logging.LogRecord) -> None:
        self.messages.append(record.getMessage())


class TestCredentialsStayOutOfLogs:
    """Test that a full request never writes the API key to any logger."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("level", ["INFO", "DEBUG"])
    async def test_api_key_not_logged(self, level):
        setup_logging(level=level)
        handler = _RecordingHandler()
        logging.getLogger().addHandler(handler)
        try:
            adapter = HttpAdapter(base_url=HOSTS[False])
            adapter._client = httpx.AsyncClient(
                base_url=adapter.base_url,
                transport=httpx.MockTransport(lambda request: httpx.Response(200, json={})),
            )
            core = ApiCore(ResellerConfig(reseller_id="1", api_key="TOPSECRET"), adapter=adapter)
            assert await core.fetch("GET", "products", "promo-details") == {}
            await core.aclose()
        finally:
            logging.getLogger().removeHandler(handler)

        assert any("api_call" in message for message in handler.messages)
        assert [m for m in handler.messages if "TOPSECRET" in m] == []
        if level == "DEBUG":
            assert any("api_request" in m and "***" in m for m in handler.messages)

    def test_http_client_loggers_are_quieted(self):
        setup_logging(level="DEBUG")
        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("httpcore").level == logging.WARNING
