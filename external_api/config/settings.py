"""Settings for the external API bridge.

Only the ambient stack (logging) is configurable. Event names, payload
shapes and destination resolution are fixed by the bridge contract and are
not exposed here.
"""

from typing import Optional, TYPE_CHECKING

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

if TYPE_CHECKING:
    from external_api.protocols import LoggerProtocol

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class BridgeSettings(BaseSettings):
    """Bridge settings, read from EXTERNAL_API_* environment variables or .env."""

    log_level: str = "INFO"
    json_logs: bool = True

    log_events: bool = False
    """Debug-log every event handed to the host dispatch.

    Event payloads may carry room URLs; keep disabled outside development.
    """

    model_config = SettingsConfigDict(
        env_prefix="EXTERNAL_API_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(_LOG_LEVELS)}, got '{v}'"
            )
        return level

    def log_status(self, logger: "LoggerProtocol") -> None:
        """Log current settings using structured logging."""
        logger.info(
            "external_api_settings",
            log_level=self.log_level,
            json_logs=self.json_logs,
            log_events=self.log_events,
        )


_settings: Optional[BridgeSettings] = None


def get_settings() -> BridgeSettings:
    """Get global settings instance.

    Creates a new BridgeSettings instance lazily if none exists.
    Prefer dependency injection over this global getter for testability.
    """
    global _settings
    if _settings is None:
        _settings = BridgeSettings()
    return _settings


def set_settings(settings_instance: BridgeSettings) -> None:
    """Set the global settings instance. Primarily for testing."""
    global _settings
    _settings = settings_instance


def reset_settings() -> None:
    """Reset the global settings instance.

    Forces re-creation on next get_settings() call.
    """
    global _settings
    _settings = None


__all__ = [
    "BridgeSettings",
    "get_settings",
    "reset_settings",
    "set_settings",
]
