"""Observability – structured logging helpers."""
from catalog_search.observability.logging.factory import JsonLoggerFactory
from catalog_search.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
