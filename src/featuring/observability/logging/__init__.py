"""Observability – structured logging helpers."""
from featuring.observability.logging.factory import (
    ConsoleLoggerFactory,
    JsonLoggerFactory,
    resolve_level,
)
from featuring.observability.logging.processors import get_logger

__all__ = [
    "ConsoleLoggerFactory",
    "JsonLoggerFactory",
    "get_logger",
    "resolve_level",
]
