"""Observability – structured logging helpers."""
from optindex.observability.logging.factory import JsonLoggerFactory
from optindex.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
