"""Application feature flags – Feature handle for a single named flag."""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING

from featuring.application.feature_flags.predicate import Action, all_active, verify_all

if TYPE_CHECKING:
    from featuring.application.feature_flags.registry import FeatureRegistry


@dataclasses.dataclass(frozen=True)
class Feature:
    """A named flag within a scope of a :class:`FeatureRegistry`.

    The scope is looked up every time the handle is queried, so a handle
    may be created before its scope is initialized.
    """

    name: str
    registry: FeatureRegistry = dataclasses.field(repr=False)
    scope: str | None = None

    def active(self) -> bool:
        return all_active(self.name, self.registry.lookup(self.scope))

    def using(self, scope: str | None) -> Feature:
        """Return a new handle for the same flag in *scope*."""
        return dataclasses.replace(self, scope=scope)

    def verify(self) -> Feature:
        """Raise :class:`InactiveFeatureError` unless this flag is active."""
        verify_all(self.name, self.registry.lookup(self.scope), self.scope)
        return self

    def when(self, action: Action) -> Feature:
        """Invoke *action* if this flag is active."""
        if self.active():
            action()
        return self


__all__ = ["Feature"]
