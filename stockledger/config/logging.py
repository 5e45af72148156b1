"""
Structured logging configuration using structlog.

Provides JSON logging for production and colored console output for development.
Ledger events carry money amounts as floats; they are logged at currency
precision so 16.900000000000002 shows up as 16.9.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import Processor

from stockledger.config.settings import get_settings

# Event keys holding currency amounts
MONEY_FIELDS = frozenset(
    {
        "base_cost",
        "total_cost",
        "new_average_cost",
        "selling_price",
        "price",
        "price_before",
        "suggested_price",
        "unit_price",
        "total_price",
    }
)


def add_app_context(
    logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Add application context to log events."""
    settings = get_settings()
    event_dict["app"] = settings.app_name
    event_dict["version"] = settings.app_version
    event_dict["environment"] = settings.environment
    return event_dict


def round_money_fields(
    logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Round currency amounts to the configured precision."""
    precision = get_settings().pricing.currency_precision
    for key in MONEY_FIELDS.intersection(event_dict):
        value = event_dict[key]
        if isinstance(value, float):
            event_dict[key] = round(value, precision)
    return event_dict


def configure_logging(log_level: str | None = None) -> None:
    """
    Configure structlog for the application.

    Args:
        log_level: Overrides the LOG_LEVEL setting (e.g. "DEBUG" for the
            CLI's --verbose flag).
    """
    settings = get_settings()

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        add_app_context,
        round_money_fields,
    ]

    if settings.environment == "development":
        processors = shared_processors + [structlog.dev.ConsoleRenderer(colors=True)]
    else:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    level = getattr(logging, (log_level or settings.log_level).upper())

    # stderr keeps CLI output (stdout) clean for piping CSV
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level)
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger("stockledger").setLevel(level)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)
