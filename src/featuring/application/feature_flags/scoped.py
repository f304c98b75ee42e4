"""Application feature flags – ScopedRegistry facade."""

from __future__ import annotations

from typing import TYPE_CHECKING

from featuring.application.feature_flags import predicate
from featuring.application.feature_flags.feature import Feature
from featuring.application.feature_flags.flag_set import FlagNames, FlagSet
from featuring.application.feature_flags.predicate import Action

if TYPE_CHECKING:
    from featuring.application.feature_flags.registry import FeatureRegistry


class ScopedRegistry:
    """A :class:`FeatureRegistry` view with one scope applied to every call.

    Methods keep the registry's signatures; any ``scope`` passed to them is
    ignored in favour of the bound one.
    """

    def __init__(self, registry: FeatureRegistry, scope: str | None) -> None:
        self._registry = registry
        self._scope = scope

    @property
    def scope(self) -> str | None:
        return self._scope

    @property
    def registry(self) -> FeatureRegistry:
        return self._registry

    def __call__(self, name: str, scope: str | None = None) -> Feature:  # noqa: ARG002
        return self.feature(name)

    def __repr__(self) -> str:
        return f"ScopedRegistry(scope={self._scope!r})"

    def init(self, names: FlagNames = None, scope: str | None = None) -> ScopedRegistry:  # noqa: ARG002
        self._registry.init(names, self._scope)
        return self

    initialize = init

    def initialized(self, scope: str | None = None) -> bool:  # noqa: ARG002
        return self._registry.initialized(self._scope)

    def lookup(self, scope: str | None = None) -> FlagSet | None:  # noqa: ARG002
        return self._registry.lookup(self._scope)

    def get(self, scope: str | None = None) -> list[str]:  # noqa: ARG002
        return self._registry.get(self._scope)

    def scopes(self) -> set[str]:
        return self._registry.scopes()

    def feature(self, name: str, scope: str | None = None) -> Feature:  # noqa: ARG002
        return self._registry.feature(name, self._scope)

    def using(self, scope: str | None) -> ScopedRegistry:
        return ScopedRegistry(self._registry, scope)

    def active(self, names: FlagNames, scope: str | None = None) -> bool:  # noqa: ARG002
        return predicate.all_active(names, self.lookup())

    def any_active(self, names: FlagNames, scope: str | None = None) -> bool:  # noqa: ARG002
        return predicate.any_active(names, self.lookup())

    active_any = any_active

    def verify(self, names: FlagNames, scope: str | None = None) -> ScopedRegistry:  # noqa: ARG002
        predicate.verify_all(names, self.lookup(), self._scope)
        return self

    def verify_any(self, names: FlagNames, scope: str | None = None) -> ScopedRegistry:  # noqa: ARG002
        predicate.verify_any(names, self.lookup(), self._scope)
        return self

    def when(
        self,
        names: FlagNames = None,
        action: Action | None = None,
        scope: str | None = None,  # noqa: ARG002
    ) -> ScopedRegistry:
        predicate.when_all(names, self.lookup(), predicate.require_action(action, "when"))
        return self

    def when_any(
        self,
        names: FlagNames = None,
        action: Action | None = None,
        scope: str | None = None,  # noqa: ARG002
    ) -> ScopedRegistry:
        predicate.when_any(names, self.lookup(), predicate.require_action(action, "when_any"))
        return self


__all__ = ["ScopedRegistry"]
