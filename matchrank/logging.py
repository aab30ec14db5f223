"""
Structured logging for matchrank.

Loggers are structlog loggers wrapped over stdlib loggers, so a library
caller sees nothing until their application (or the CLI) configures
stdlib logging.
"""

import logging
import sys

import structlog

renderer = structlog.dev.ConsoleRenderer(colors=False)

processors = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.add_log_level,
    structlog.processors.TimeStamper(fmt="%H:%M:%S"),
    renderer,
]


def configure_logging(level: str = "WARNING"):
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        stream=sys.stderr,
        format="%(message)s",
        force=True,
    )


def get_logger(name: str | None = None):
    return structlog.wrap_logger(
        logging.getLogger(name or "matchrank"),
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
    )
