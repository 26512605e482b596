"""structlog configuration.

Only the API layer logs, and always through structlog, so events go straight
to a print logger without a detour through the standard logging module.
"""

import logging
import sys
from typing import TextIO

import structlog

from tasklist.config import Settings


def setup_logging(settings: Settings, stream: TextIO | None = None) -> None:
    """Configure structlog to write one line per event to ``stream``.

    "json" renders each event as a JSON object, "dev" as a readable console
    line. Events below ``settings.log_level`` are dropped.
    """
    if settings.log_format == "json":
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    # Loggers stay uncached so structlog.testing.capture_logs sees module-level loggers.
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(stream or sys.stderr),
        cache_logger_on_first_use=False,
    )
