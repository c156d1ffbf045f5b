"""Structured logging for runtimex.

Usage:
    from runtimex.logging import configure_logging, create_logger

    # At application startup (once)
    configure_logging(level="INFO", json_output=True)

    # Create logger for injection
    logger = create_logger("loader")
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Dict, Optional

import structlog

from runtimex.protocols import LoggerProtocol
from runtimex.settings import get_settings

# Module state
_CONFIGURED = False


class Logger:
    """LoggerProtocol implementation backed by structlog.

    Context is handed to structlog.get_logger(), whose lazy proxy resolves
    the structlog configuration on the first log call. A Logger built
    before configure_logging() still follows it.
    """

    def __init__(
        self,
        base_logger: Any = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        """Initialize logger.

        Args:
            base_logger: Underlying structlog logger (lazy proxy if None)
            context: Bound context fields
        """
        self._context = context or {}
        if base_logger is None:
            self._logger = structlog.get_logger(**self._context)
        elif self._context:
            self._logger = base_logger.bind(**self._context)
        else:
            self._logger = base_logger

    def debug(self, msg: str, **kwargs: Any) -> None:
        self._logger.debug(msg, **kwargs)

    def info(self, msg: str, **kwargs: Any) -> None:
        self._logger.info(msg, **kwargs)

    def warning(self, msg: str, **kwargs: Any) -> None:
        self._logger.warning(msg, **kwargs)

    def error(self, msg: str, **kwargs: Any) -> None:
        self._logger.error(msg, **kwargs)

    def critical(self, msg: str, **kwargs: Any) -> None:
        """Log critical message. Fatal reports go through here."""
        self._logger.critical(msg, **kwargs)

    def bind(self, **kwargs: Any) -> "Logger":
        """Create child logger with additional context."""
        return Logger(context={**self._context, **kwargs})


def is_logging_configured() -> bool:
    """True once configure_logging() or any other structlog setup has run."""
    return _CONFIGURED or structlog.is_configured()


def configure_logging(
    level: Optional[str] = None,
    *,
    json_output: Optional[bool] = None,
) -> None:
    """Configure logging for processes using runtimex.

    This should be called ONCE at application startup. Arguments left as
    None are taken from RuntimexSettings. Output goes to stderr since fatal
    reports are operator diagnostics.

    Args:
        level: Default log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_output: If True, output JSON; if False, console format
    """
    global _CONFIGURED

    if _CONFIGURED:
        return

    settings = get_settings()
    if level is None:
        level = settings.log_level
    if json_output is None:
        json_output = settings.json_output

    log_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        stream=sys.stderr,
    )

    timestamper = structlog.processors.TimeStamper(fmt="iso", utc=True)

    if json_output:
        renderer = structlog.processors.JSONRenderer(sort_keys=True)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

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
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    _CONFIGURED = True


def create_logger(
    component: str,
    **context: Any,
) -> LoggerProtocol:
    """Create a logger for dependency injection.

    Args:
        component: Component name (e.g., "terminator", "loader")
        **context: Additional context to bind

    Returns:
        LoggerProtocol implementation
    """
    return Logger(context={"component": component, **context})


__all__ = [
    "Logger",
    "configure_logging",
    "create_logger",
    "is_logging_configured",
]
