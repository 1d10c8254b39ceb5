"""Observability – structlog configuration and logger helper."""
from holdyourhorses.observability.logging.factory import JsonLoggerFactory
from holdyourhorses.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
