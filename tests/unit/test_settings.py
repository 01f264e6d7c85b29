"""Tests for BridgeSettings."""

import pytest
from pydantic import ValidationError

from external_api.config import BridgeSettings, get_settings, reset_settings, set_settings


class TestBridgeSettings:
    def test_defaults(self):
        settings = BridgeSettings(_env_file=None)
        assert settings.log_level == "INFO"
        assert settings.json_logs is True
        assert settings.log_events is False

    def test_reads_prefixed_env(self, monkeypatch):
        monkeypatch.setenv("EXTERNAL_API_LOG_LEVEL", "debug")
        monkeypatch.setenv("EXTERNAL_API_LOG_EVENTS", "true")
        settings = BridgeSettings(_env_file=None)
        assert settings.log_level == "DEBUG"
        assert settings.log_events is True

    def test_rejects_unknown_level(self):
        with pytest.raises(ValidationError):
            BridgeSettings(_env_file=None, log_level="chatty")

    def test_log_status(self, mock_logger):
        BridgeSettings(_env_file=None).log_status(mock_logger)
        mock_logger.info.assert_called_once_with(
            "external_api_settings",
            log_level="INFO",
            json_logs=True,
            log_events=False,
        )


class TestSettingsGetter:
    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_set_and_reset(self):
        custom = BridgeSettings(_env_file=None, log_level="ERROR")
        set_settings(custom)
        assert get_settings() is custom
        reset_settings()
        assert get_settings() is not custom
