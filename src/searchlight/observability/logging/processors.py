"""Observability – get_logger helper."""
from __future__ import annotations

import logging
from typing import Any

import structlog


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger backed by the stdlib logger *name*.

    Events go through stdlib logging, so nothing is printed until
    :func:`~searchlight.observability.logging.configure_logging` (or the
    application's own logging setup) attaches a handler, and stdlib levels
    apply.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
        **initial_values,
    )


__all__ = ["get_logger"]
