"""Structured logging setup.

JSON output in production, human-readable console output in development.
Call configure_logging once on startup; modules obtain their logger with
``structlog.get_logger()``.
"""

import logging
from typing import Optional

import structlog

from .config import LadderConfig


def configure_logging(
    level: str = "INFO",
    json_output: bool = False,
    config: Optional[LadderConfig] = None,
) -> None:
    """Configure structlog processors and the minimum log level.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_output: Render events as JSON lines instead of console output
        config: If given, its log_level overrides ``level`` and JSON output is
            used when log_json is set or the environment is production
    """
    if config is not None:
        level = config.log_level
        json_output = config.log_json or config.is_production

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper(), logging.INFO)
        ),
        cache_logger_on_first_use=False,
    )
