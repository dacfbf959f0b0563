"""Logging setup for the fountaintree command line.

Library modules log through ``structlog.get_logger(__name__)`` and never
configure anything themselves. The CLI calls :func:`configure_logging`
once it has resolved settings; only the ``fountaintree`` stdlib logger
receives handlers, so a host application's root logger is left alone.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Any

import structlog
from structlog.processors import (
    CallsiteParameter,
    CallsiteParameterAdder,
    TimeStamper,
    add_log_level,
    format_exc_info,
)
from structlog.stdlib import ProcessorFormatter, add_logger_name, filter_by_level

from fountaintree.config.settings import FountainTreeSettings

LOGGER_NAME = "fountaintree"


def _renderer(log_format: str) -> Any:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    if log_format == "structured":
        return structlog.processors.KeyValueRenderer(
            key_order=["timestamp", "level", "logger", "event"], drop_missing=True
        )
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(settings: FountainTreeSettings) -> logging.Logger:
    """Attach handlers for ``settings`` to the ``fountaintree`` logger.

    Calling it again replaces the handlers from the previous call.

    Args:
        settings: Resolved settings carrying the log level, format and file

    Returns:
        The configured ``fountaintree`` stdlib logger
    """
    level = logging.getLevelName(settings.log_level)
    formatter = ProcessorFormatter(
        processor=_renderer(settings.log_format),
        foreign_pre_chain=[TimeStamper(fmt="iso"), add_log_level, add_logger_name],
    )

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if settings.log_file:
        settings.log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                settings.log_file,
                maxBytes=10 * 1024 * 1024,  # 10MB
                backupCount=5,
                encoding="utf-8",
            )
        )

    package_logger = logging.getLogger(LOGGER_NAME)
    for old in package_logger.handlers[:]:
        package_logger.removeHandler(old)
        old.close()
    for handler in handlers:
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False

    processors: list[Any] = [
        filter_by_level,
        add_logger_name,
        add_log_level,
        TimeStamper(fmt="iso"),
    ]
    if settings.debug:
        processors.append(
            CallsiteParameterAdder(
                parameters=[
                    CallsiteParameter.FILENAME,
                    CallsiteParameter.LINENO,
                    CallsiteParameter.FUNC_NAME,
                ]
            )
        )
    processors += [format_exc_info, ProcessorFormatter.wrap_for_formatter]

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
    return package_logger
