"""Logging infrastructure for the external API bridge.

Components receive a LoggerProtocol by injection and bind their component
name. The structlog pipeline is configured once by the composition root.

Usage:
    from external_api.logging import configure_logging, create_logger

    # At application startup (once)
    configure_logging(level="INFO", json_output=True)

    # Create logger for injection
    logger = create_logger("external_api_bridge", scope="room1")
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Dict, Optional

import structlog

from external_api.protocols import LoggerProtocol

# Module state
_CONFIGURED = False


class Logger:
    """LoggerProtocol implementation backed by structlog."""

    def __init__(
        self,
        base_logger: Any = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        """Initialize logger.

        Args:
            base_logger: Underlying structlog logger (created if None)
            context: Context fields to bind onto base_logger
        """
        self._logger = base_logger or structlog.get_logger()
        self._context = context or {}

        if self._context:
            self._logger = self._logger.bind(**self._context)

    @property
    def context(self) -> Dict[str, Any]:
        return dict(self._context)

    def debug(self, msg: str, **kwargs: Any) -> None:
        self._logger.debug(msg, **kwargs)

    def info(self, msg: str, **kwargs: Any) -> None:
        self._logger.info(msg, **kwargs)

    def warning(self, msg: str, **kwargs: Any) -> None:
        self._logger.warning(msg, **kwargs)

    def error(self, msg: str, **kwargs: Any) -> None:
        self._logger.error(msg, **kwargs)

    def bind(self, **kwargs: Any) -> "Logger":
        """Create child logger with additional context.

        The child wraps this logger's underlying logger, so an injected
        base_logger keeps receiving the calls.
        """
        child = Logger(base_logger=self._logger.bind(**kwargs))
        child._context = {**self._context, **kwargs}
        return child


def configure_logging(
    level: str = "INFO",
    *,
    json_output: bool = True,
) -> None:
    """Configure stdlib logging and structlog.

    Only the first call has an effect.

    Args:
        level: Default log level (DEBUG, INFO, WARNING, ERROR)
        json_output: If True, output JSON; if False, console format
    """
    global _CONFIGURED

    if _CONFIGURED:
        return

    log_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        stream=sys.stdout,
    )

    timestamper = structlog.processors.TimeStamper(fmt="iso", utc=True)

    if json_output:
        renderer = structlog.processors.JSONRenderer(sort_keys=True)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            timestamper,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        cache_logger_on_first_use=True,
    )

    _CONFIGURED = True


def reset_logging() -> None:
    """Allow configure_logging() to run again. Primarily for testing."""
    global _CONFIGURED
    _CONFIGURED = False
    structlog.reset_defaults()


def create_logger(component: str, **context: Any) -> LoggerProtocol:
    """Create a logger for dependency injection.

    Args:
        component: Component name (e.g., "external_api_bridge")
        **context: Additional context to bind

    Returns:
        LoggerProtocol implementation
    """
    return Logger(context={"component": component, **context})


__all__ = [
    "Logger",
    "configure_logging",
    "create_logger",
    "reset_logging",
]
