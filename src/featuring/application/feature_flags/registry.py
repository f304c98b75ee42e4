"""Application feature flags – FeatureRegistry.

A registry maps scopes to the :class:`FlagSet` they were initialized with.
``None`` is the global scope; any string, including ``""``, is a named scope.
Each scope is written once and is then fixed for the life of the registry::

    features = FeatureRegistry().init(["FOO", "BAR"], "example")

    features.active(["FOO", "BAR"], "example")     # True
    features.active(["FOO", "BAR"])                # False, global never initialized
    features.any_active(["FOO", "BUZZ"], "example")  # True
    features.verify("FIZZ", "example")             # raises InactiveFeatureError

Applications own their registry and pass it where it is needed; tests create
a fresh one per case.
"""

from __future__ import annotations

import threading

from featuring.application.feature_flags import predicate
from featuring.application.feature_flags.errors import DuplicateInitializationError
from featuring.application.feature_flags.feature import Feature
from featuring.application.feature_flags.flag_set import FlagNames, FlagSet
from featuring.application.feature_flags.predicate import Action
from featuring.application.feature_flags.scoped import ScopedRegistry
from featuring.observability.logging import get_logger

_log = get_logger(__name__)


class FeatureRegistry:
    """Write-once mapping of scope to active feature names."""

    def __init__(self) -> None:
        self._global: FlagSet | None = None
        self._scoped: dict[str, FlagSet] = {}
        self._lock = threading.Lock()

    def __call__(self, name: str, scope: str | None = None) -> Feature:
        return self.feature(name, scope)

    def __repr__(self) -> str:
        return f"FeatureRegistry(global={self._global is not None}, scopes={sorted(self._scoped)!r})"

    # ------------------------------------------------------------------
    # Storage
    # ------------------------------------------------------------------

    def init(self, names: FlagNames = None, scope: str | None = None) -> FeatureRegistry:
        """Initialize *scope* with *names*.

        Raises:
            DuplicateInitializationError: If *scope* was already initialized.
        """
        flag_set = FlagSet.of(names)
        with self._lock:
            if self.lookup(scope) is not None:
                _log.warning("feature_scope_already_initialized", scope=scope)
                raise DuplicateInitializationError(scope)
            if scope is None:
                self._global = flag_set
            else:
                self._scoped[scope] = flag_set
        _log.debug("feature_scope_initialized", scope=scope, count=len(flag_set))
        return self

    initialize = init

    def initialized(self, scope: str | None = None) -> bool:
        return self.lookup(scope) is not None

    def lookup(self, scope: str | None = None) -> FlagSet | None:
        """Return the flag set of *scope*, or ``None`` if never initialized."""
        if scope is None:
            return self._global
        return self._scoped.get(scope)

    def get(self, scope: str | None = None) -> list[str]:
        """Return the names of the active features in *scope*."""
        flag_set = self.lookup(scope)
        return flag_set.names() if flag_set is not None else []

    def scopes(self) -> set[str]:
        """Return every initialized named scope.  The global scope is never included."""
        return set(self._scoped)

    def feature(self, name: str, scope: str | None = None) -> Feature:
        return Feature(name, self, scope)

    def using(self, scope: str | None) -> ScopedRegistry:
        """Return a facade that applies *scope* to every call."""
        return ScopedRegistry(self, scope)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def active(self, names: FlagNames, scope: str | None = None) -> bool:
        """Return whether all *names* are active in *scope*."""
        return predicate.all_active(names, self.lookup(scope))

    def any_active(self, names: FlagNames, scope: str | None = None) -> bool:
        """Return whether any of *names* is active in *scope*."""
        return predicate.any_active(names, self.lookup(scope))

    active_any = any_active

    def verify(self, names: FlagNames, scope: str | None = None) -> FeatureRegistry:
        """Raise :class:`InactiveFeatureError` for the first inactive name."""
        predicate.verify_all(names, self.lookup(scope), scope)
        return self

    def verify_any(self, names: FlagNames, scope: str | None = None) -> FeatureRegistry:
        """Raise :class:`NoActiveFeatureError` unless any of *names* is active."""
        predicate.verify_any(names, self.lookup(scope), scope)
        return self

    def when(
        self,
        names: FlagNames = None,
        action: Action | None = None,
        scope: str | None = None,
    ) -> FeatureRegistry:
        """Invoke *action* if all *names* are active in *scope*.

        Omitting *names* always invokes *action*.
        """
        predicate.when_all(names, self.lookup(scope), predicate.require_action(action, "when"))
        return self

    def when_any(
        self,
        names: FlagNames = None,
        action: Action | None = None,
        scope: str | None = None,
    ) -> FeatureRegistry:
        """Invoke *action* if any of *names* is active in *scope*.

        Omitting *names* never invokes *action*.
        """
        predicate.when_any(names, self.lookup(scope), predicate.require_action(action, "when_any"))
        return self


__all__ = ["FeatureRegistry"]
