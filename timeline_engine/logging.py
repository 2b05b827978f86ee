"""
Centralized structlog configuration for the timeline engine.

Logs are rendered as JSON with ISO timestamps and the level, and written to
stderr so command output on stdout stays machine readable.
"""

from __future__ import annotations

import logging
import sys

import structlog

from timeline_engine.config import get_settings


def _normalize_log_level(level: str | None, environment: str) -> int:
    if level:
        normalized = level.strip().upper()
    else:
        normalized = "INFO" if environment.lower() == "production" else "DEBUG"
    return logging.getLevelNamesMapping().get(normalized, logging.INFO)


def configure_logging() -> None:
    """Configure structlog with JSON output on stderr."""

    settings = get_settings()
    resolved_level = _normalize_log_level(settings.log_level, settings.environment)
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.EventRenamer("message"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(resolved_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
    )


configure_logging()

logger = structlog.get_logger("timeline-engine").bind(
    service="timeline-engine",
    environment=get_settings().environment,
)
