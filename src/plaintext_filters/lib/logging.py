"""CLI logging setup: stdlib records from the library rendered by structlog.

Library modules log through ``logging.getLogger(__name__)`` and stay silent
until a host or the CLI attaches a handler.
"""

from __future__ import annotations

import logging as std_logging
import sys

import structlog

PACKAGE_LOGGER = "plaintext_filters"


def _level_from_verbosity(verbosity: int) -> int:
    if verbosity <= 0:
        return std_logging.WARNING
    if verbosity == 1:
        return std_logging.INFO
    return std_logging.DEBUG


def configure_logging(json_mode: bool = False, verbosity: int = 0) -> None:
    """Render ``plaintext_filters`` log records to stderr through structlog."""

    renderer: structlog.typing.Processor = (
        structlog.processors.JSONRenderer()
        if json_mode
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_logger_name,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )
    # stdout carries only filter output.
    handler = std_logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    logger = std_logging.getLogger(PACKAGE_LOGGER)
    logger.handlers = [handler]
    logger.setLevel(_level_from_verbosity(verbosity))
    logger.propagate = False
