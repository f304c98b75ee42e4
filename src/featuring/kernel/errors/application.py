"""Application-layer errors – raised by library use cases."""

from __future__ import annotations

from featuring.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
