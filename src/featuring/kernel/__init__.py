"""Kernel – framework-agnostic building blocks."""

from featuring.kernel.errors import ApplicationError, BaseError

__all__ = ["ApplicationError", "BaseError"]
