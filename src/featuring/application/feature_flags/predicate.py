"""Application feature flags – activation predicate, guards and conditional calls.

These functions are shared by the registry, its scoped facade, feature handles
and the standalone :class:`~featuring.application.feature_flags.features.Features`.
A ``flag_set`` of ``None`` means the scope was never initialized and is queried
as if it were empty.
"""

from __future__ import annotations

from typing import Callable

from featuring.application.feature_flags.errors import (
    InactiveFeatureError,
    NoActiveFeatureError,
)
from featuring.application.feature_flags.flag_set import FlagNames, FlagSet, coerce_names

Action = Callable[[], object]


def first_inactive(names: FlagNames, flag_set: FlagSet | None) -> str | None:
    """Return the first of *names* that is not active, or ``None``."""
    for name in coerce_names(names):
        if flag_set is None or name not in flag_set:
            return name
    return None


def all_active(names: FlagNames, flag_set: FlagSet | None) -> bool:
    """Every name is active.  Requiring no names is always satisfied."""
    return first_inactive(names, flag_set) is None


def any_active(names: FlagNames, flag_set: FlagSet | None) -> bool:
    """At least one name is active.  No names is never satisfied."""
    if flag_set is None:
        return False
    return any(name in flag_set for name in coerce_names(names))


def verify_all(names: FlagNames, flag_set: FlagSet | None, scope: str | None) -> None:
    name = first_inactive(names, flag_set)
    if name is not None:
        raise InactiveFeatureError(name, scope)


def verify_any(names: FlagNames, flag_set: FlagSet | None, scope: str | None) -> None:
    if not any_active(names, flag_set):
        raise NoActiveFeatureError(coerce_names(names), scope)


def require_action(action: Action | None, method: str) -> Action:
    if action is None:
        raise TypeError(f"{method}() missing required argument: 'action'")
    return action


def when_all(names: FlagNames, flag_set: FlagSet | None, action: Action) -> bool:
    """Invoke *action* if all *names* are active; return whether it ran."""
    if all_active(names, flag_set):
        action()
        return True
    return False


def when_any(names: FlagNames, flag_set: FlagSet | None, action: Action) -> bool:
    """Invoke *action* if any of *names* is active; return whether it ran."""
    if any_active(names, flag_set):
        action()
        return True
    return False


__all__ = [
    "Action",
    "all_active",
    "any_active",
    "first_inactive",
    "require_action",
    "verify_all",
    "verify_any",
    "when_all",
    "when_any",
]
