"""Observability – structlog configuration."""
from __future__ import annotations

import logging
from typing import Any

import structlog

from searchlight.config import SearchlightSettings, get_settings


def configure_logging(
    level: int | str | None = None,
    *,
    json: bool | None = None,
    settings: SearchlightSettings | None = None,
) -> None:
    """Configure structlog on top of stdlib logging.

    Explicit *level* / *json* arguments win over *settings*, which default to
    :func:`~searchlight.config.get_settings`.
    """
    settings = settings or get_settings()
    if level is None:
        level = settings.log_level_number
    elif isinstance(level, str):
        level = logging.getLevelName(level.upper())
    if json is None:
        json = settings.json_logs

    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    structlog.configure(
        processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    renderer: Any = (
        structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer(colors=False)
    )
    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    root = logging.getLogger("searchlight")
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)
    root.propagate = False


__all__ = ["configure_logging"]
