"""structlog setup."""

from __future__ import annotations

import logging

import structlog

from catalogd.core.models.config import LogConfig


def configure_logging(config: LogConfig | None = None) -> None:
    """Configure structlog processors from the log settings.

    Structured output renders one JSON object per line, otherwise the
    colored console renderer is used.
    """
    config = config or LogConfig()
    level = getattr(logging, config.level)

    processors: list[structlog.typing.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]
    if config.structured:
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=False,
    )
