"""
Structured logging for the engine.

structlog is configured once here; modules call get_logger(__name__).
Output level is governed by the stdlib logging configuration of the host app.
"""

from __future__ import annotations

import logging

import structlog


structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer(),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def set_level(level: int = logging.INFO) -> None:
    """Convenience for scripts and notebooks: route engine logs to stderr at `level`."""
    logging.basicConfig(format="%(message)s", level=level)
    logging.getLogger().setLevel(level)
