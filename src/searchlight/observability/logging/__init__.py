"""Observability – structured logging helpers."""
from searchlight.observability.logging.factory import configure_logging
from searchlight.observability.logging.processors import get_logger

__all__ = ["configure_logging", "get_logger"]
