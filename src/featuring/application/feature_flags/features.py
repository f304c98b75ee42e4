"""Application feature flags – Features, a standalone set of active flags.

Unlike :class:`~featuring.application.feature_flags.registry.FeatureRegistry`
there are no scopes: each instance owns the names it was built with and
reports errors against the global scope.
"""

from __future__ import annotations

from typing import Iterator

from featuring.application.feature_flags import predicate
from featuring.application.feature_flags.flag_set import FlagNames, FlagSet, coerce_names
from featuring.application.feature_flags.predicate import Action


class Features:
    """Immutable collection of active feature names."""

    __slots__ = ("_names", "_flag_set")

    def __init__(self, names: FlagNames = None) -> None:
        self._names = coerce_names(names)
        self._flag_set = FlagSet.of(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._flag_set

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f"Features({list(self._names)!r})"

    def get(self) -> list[str]:
        """Return the names this instance was built with, in order."""
        return list(self._names)

    def active(self, names: FlagNames) -> bool:
        return predicate.all_active(names, self._flag_set)

    def any_active(self, names: FlagNames) -> bool:
        return predicate.any_active(names, self._flag_set)

    active_any = any_active

    def verify(self, names: FlagNames) -> Features:
        predicate.verify_all(names, self._flag_set, None)
        return self

    def verify_any(self, names: FlagNames) -> Features:
        predicate.verify_any(names, self._flag_set, None)
        return self

    def when(self, names: FlagNames = None, action: Action | None = None) -> Features:
        predicate.when_all(names, self._flag_set, predicate.require_action(action, "when"))
        return self

    def when_any(self, names: FlagNames = None, action: Action | None = None) -> Features:
        predicate.when_any(names, self._flag_set, predicate.require_action(action, "when_any"))
        return self


__all__ = ["Features"]
