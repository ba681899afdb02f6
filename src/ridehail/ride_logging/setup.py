"""Logging setup for the ride-hailing services."""

import logging
import sys
from typing import TextIO

from ridehail.settings import LoggingSettings

from .context import ContextFilter
from .filters import DefaultCorrelationFilter, PIIFilter
from .formatters import DevFormatter, JSONFormatter

# Third-party loggers that are too chatty at DEBUG.
QUIET_LOGGERS = ("faker", "asyncio")


def setup_logging(
    level: str = "INFO",
    json_output: bool = False,
    environment: str = "development",
    stream: TextIO | None = None,
) -> logging.Handler:
    """Install a single handler on the root logger and return it.

    Filters run in order: PII masking first, so context values injected
    afterwards are never rewritten.
    """
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(JSONFormatter(environment) if json_output else DevFormatter())
    for log_filter in (PIIFilter(), ContextFilter(), DefaultCorrelationFilter()):
        handler.addFilter(log_filter)

    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level.upper()))

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return handler


def setup_logging_from_settings(
    settings: LoggingSettings, stream: TextIO | None = None
) -> logging.Handler:
    return setup_logging(
        level=settings.level,
        json_output=settings.format == "json",
        environment=settings.environment,
        stream=stream,
    )
