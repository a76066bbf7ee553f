"""Observability – structured logging for resolution runs."""
from feature_resolution.observability.logging import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
