"""Structured logging for the selectorcraft logger namespace."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

from selectorcraft.config.settings import Settings, get_settings

LOGGER_NAME = "selectorcraft"


def _is_own_handler(handler: logging.Handler) -> bool:
    return getattr(handler, "selectorcraft_handler", False)


def setup_logging(
    log_level: str = "INFO", json_output: bool = False, stream: TextIO | None = None
) -> logging.Logger:
    """Route structlog events through a handler on the ``selectorcraft`` logger.

    The root logger is left alone; repeated calls replace the previously
    installed handler.
    """
    stream = stream or sys.stderr
    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if json_output or not stream.isatty():
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    handler = logging.StreamHandler(stream)
    handler.selectorcraft_handler = True  # type: ignore[attr-defined]
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                renderer,
            ],
        )
    )

    package_logger = logging.getLogger(LOGGER_NAME)
    for old in [h for h in package_logger.handlers if _is_own_handler(h)]:
        package_logger.removeHandler(old)
    package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    package_logger.propagate = False

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *pre_chain,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    return package_logger


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """Apply logging configuration from settings."""
    settings = settings or get_settings()
    return setup_logging(log_level=settings.log_level, json_output=settings.json_logs)
