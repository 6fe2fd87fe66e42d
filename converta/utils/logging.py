"""
Structured logging configuration.
JSON logs when the engine runs inside a service, readable logs for local runs.
"""
import logging
import sys
import structlog
from typing import Any

from ..config import settings


def setup_logging(
    log_level: str | None = None,
    log_format: str | None = None,
    force: bool = False,
) -> None:
    """
    Configure structured logging.

    Args:
        log_level: Overrides settings.log_level
        log_format: Overrides settings.log_format ("json" or "console")
        force: Replace root handlers already installed by the host application

    Logs go to stderr so reports printed on stdout stay clean. Without
    force, an application that already configured logging keeps its setup.
    """
    level = log_level or settings.log_level
    fmt = log_format or settings.log_format

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if fmt == "json":
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer()
        ]
    else:
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level),
        force=force,
    )


def get_logger(name: str) -> Any:
    """Get a structured logger instance."""
    return structlog.get_logger(name)


# Initialize on import
setup_logging()
