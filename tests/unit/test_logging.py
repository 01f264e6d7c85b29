"""Tests for the structlog-backed logger."""

from unittest.mock import MagicMock, patch

import pytest
from structlog.testing import capture_logs

from external_api.logging import (
    Logger,
    configure_logging,
    create_logger,
    reset_logging,
)
from external_api.protocols import LoggerProtocol


@pytest.fixture(autouse=True)
def _fresh_logging():
    reset_logging()
    yield
    reset_logging()


class TestLogger:
    def test_implements_protocol(self):
        assert isinstance(Logger(), LoggerProtocol)

    def test_create_logger_binds_component(self):
        logger = create_logger("external_api_bridge", scope="room1")
        assert logger.context == {"component": "external_api_bridge", "scope": "room1"}

    def test_bind_merges_context(self):
        logger = create_logger("a").bind(scope="room1")
        assert logger.context == {"component": "a", "scope": "room1"}

    def test_delegates_to_base_logger(self):
        base = MagicMock()
        logger = Logger(base_logger=base)
        logger.info("external_api_bridge_started", scope="room1")
        base.info.assert_called_once_with("external_api_bridge_started", scope="room1")

    def test_bind_keeps_injected_base_logger(self):
        base = MagicMock()
        child = Logger(base_logger=base).bind(component="external_api_bridge")
        child.info("external_api_bridge_started")

        base.bind.assert_called_once_with(component="external_api_bridge")
        base.bind.return_value.info.assert_called_once_with("external_api_bridge_started")
        assert child.context == {"component": "external_api_bridge"}

    def test_captured_output(self):
        with capture_logs() as logs:
            create_logger("external_api").warning("something_odd", reason="test")
        assert logs[0]["event"] == "something_odd"
        assert logs[0]["log_level"] == "warning"
        assert logs[0]["reason"] == "test"


class TestConfigureLogging:
    def test_configure_once(self):
        with patch("external_api.logging.structlog.configure") as configure:
            configure_logging(level="DEBUG", json_output=False)
            configure_logging(level="ERROR")
        configure.assert_called_once()

    def test_reset_allows_reconfigure(self):
        with patch("external_api.logging.structlog.configure") as configure:
            configure_logging()
            reset_logging()
            configure_logging()
        assert configure.call_count == 2
