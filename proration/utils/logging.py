"""
Structured logging configuration.

Features:
- JSON output for production (machine-parseable)
- Pretty console output for development
- Personal data filtering for user records
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import Processor

from proration import __version__
from proration.config import Environment, get_settings

PERSONAL_KEYS = frozenset({"name", "user_name", "email", "phone"})


def filter_personal_data(
    logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """
    Mask personal data in log entries.

    User names and contact details never reach the log output; ids and
    amounts pass through untouched.
    """

    def mask_value(key: str, value: Any) -> Any:
        if key.lower() in PERSONAL_KEYS and value is not None:
            return "***REDACTED***"
        return value

    return {k: mask_value(k, v) for k, v in event_dict.items()}


def add_service_info(
    logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Add service metadata to all log entries."""
    event_dict["service"] = get_settings().service_name
    event_dict["version"] = __version__
    return event_dict


def configure_logging() -> None:
    """
    Configure structured logging.

    Production: JSON output to stdout
    Development: Pretty colored console output
    """
    settings = get_settings()

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        filter_personal_data,
        add_service_info,
    ]

    if settings.environment == Environment.PRODUCTION:
        processors: list[Processor] = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=settings.debug),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.log_level.value),
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a logger instance with the given name."""
    return structlog.get_logger(name)
