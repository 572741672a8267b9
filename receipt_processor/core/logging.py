"""
Structured logging setup with structlog
"""
import logging
import sys
from typing import Any

import structlog

from receipt_processor.core.exceptions import ConfigurationError


def setup_logging(log_level: str = "INFO", is_debug: bool = False) -> None:
    """
    Configure structured logging

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        is_debug: Debug mode (human readable console output)

    Raises:
        ConfigurationError: If the log level is unknown
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ConfigurationError(
            f"Unknown log level: {log_level}",
            details={"log_level": log_level}
        )

    # Standard library logging (uvicorn, fastapi)
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    # Console output in debug mode, JSON in production
    if is_debug:
        processors.append(structlog.dev.ConsoleRenderer())
    else:
        processors.extend([
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer()
        ])

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> Any:
    """
    Get a logger for a module

    Args:
        name: Module name

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)
