"""Logging configuration for X News Search."""

import logging
import sys

import structlog

# HTTP libraries log every request at INFO
QUIET_LOGGERS = ("httpx", "httpcore")


def setup_logging(log_level: str = "WARNING", json_output: bool = False) -> None:
    """Configure structlog to write filtered events to stderr.

    Stdout is reserved for search results so ``--json`` output can be piped.

    Args:
        log_level: Minimum level (DEBUG, INFO, WARNING, ERROR)
        json_output: Emit one JSON object per line instead of console text
    """
    level = getattr(logging, log_level.upper(), logging.WARNING)

    if json_output:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
