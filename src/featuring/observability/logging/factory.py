"""Observability – JsonLoggerFactory, ConsoleLoggerFactory."""
from __future__ import annotations

import logging
from typing import Any

import structlog


def resolve_level(level: int | str) -> int:
    """Return the numeric value of *level*, given as a number or a name such as ``"debug"``."""
    if isinstance(level, int):
        return level
    try:
        return logging.getLevelNamesMapping()[level.upper()]
    except KeyError:
        raise ValueError(f"Unknown log level: {level!r}") from None


def _install(renderer: Any, level: int | str) -> None:
    """Route structlog through the stdlib root logger, rendering with *renderer*."""
    numeric = resolve_level(level)
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(numeric)


class JsonLoggerFactory:
    """Configure structlog to render JSON lines on stderr."""

    @staticmethod
    def configure(level: int | str = logging.INFO) -> None:
        _install(structlog.processors.JSONRenderer(), level)


class ConsoleLoggerFactory:
    """Configure structlog to render human-readable lines on stderr."""

    @staticmethod
    def configure(level: int | str = logging.INFO) -> None:
        _install(structlog.dev.ConsoleRenderer(colors=False), level)


__all__ = ["ConsoleLoggerFactory", "JsonLoggerFactory", "resolve_level"]
