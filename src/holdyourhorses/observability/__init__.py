"""Observability – structured logging."""
from holdyourhorses.observability.logging import JsonLoggerFactory, get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
