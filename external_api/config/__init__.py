"""Configuration package for external_api.

Config ownership map:
  settings.py - logging settings from EXTERNAL_API_* env vars / .env
"""

from external_api.config.settings import (
    BridgeSettings,
    get_settings,
    reset_settings,
    set_settings,
)

__all__ = [
    "BridgeSettings",
    "get_settings",
    "reset_settings",
    "set_settings",
]
