"""Observability – logging for search declaration and execution."""
from searchlight.observability.logging import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
