"""Application feature flags – error types.

Messages identify the scope as ``global`` or by its quoted name, e.g.
``"FIZZ" feature in "example" scope is not active``.
"""

from __future__ import annotations

from typing import Sequence

from featuring.kernel.errors import ApplicationError


def format_scope(scope: str | None) -> str:
    """Render *scope* for messages: ``global`` or ``"name"``."""
    return "global" if scope is None else f'"{scope}"'


class FeatureError(ApplicationError):
    """Base class for feature flag errors."""

    default_code = "feature_error"


class DuplicateInitializationError(FeatureError):
    """A scope's features were initialized more than once."""

    default_code = "duplicate_initialization"

    def __init__(self, scope: str | None) -> None:
        if scope is None:
            message = "Global features have already been initialized"
        else:
            message = f"{format_scope(scope)} scope features have already been initialized"
        super().__init__(message, detail={"scope": scope})
        self.scope = scope


class InactiveFeatureError(FeatureError):
    """A required feature is not active."""

    default_code = "inactive_feature"

    def __init__(self, name: str, scope: str | None) -> None:
        super().__init__(
            f'"{name}" feature in {format_scope(scope)} scope is not active',
            detail={"name": name, "scope": scope},
        )
        self.name = name
        self.scope = scope


class NoActiveFeatureError(FeatureError):
    """None of the named features are active."""

    default_code = "no_active_feature"

    def __init__(self, names: Sequence[str], scope: str | None) -> None:
        super().__init__(
            f"No named features in {format_scope(scope)} scope are active",
            detail={"scope": scope},
        )
        self.names = tuple(names)
        self.scope = scope


__all__ = [
    "DuplicateInitializationError",
    "FeatureError",
    "InactiveFeatureError",
    "NoActiveFeatureError",
    "format_scope",
]
