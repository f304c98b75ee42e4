"""Property-based tests for activation semantics."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from featuring.application.feature_flags import FeatureRegistry, Features
from featuring.testing.generators import flag_names_strategy, scope_strategy


@given(flag_names_strategy(min_size=1))
def test_all_named_features_are_active(names: list[str]) -> None:
    features = Features(names)
    assert features.active(names)
    assert features.any_active(names)


@given(flag_names_strategy(unique=True), flag_names_strategy(unique=True))
def test_disjoint_names_are_inactive(active: list[str], other: list[str]) -> None:
    queried = [name for name in other if name not in active]
    features = Features(active)
    assert features.any_active(queried) is False
    assert features.active(queried) is (not queried)


@given(flag_names_strategy())
def test_empty_queries(names: list[str]) -> None:
    features = Features(names)
    assert features.active([])
    assert not features.any_active([])


@given(flag_names_strategy(min_size=1).filter(lambda ns: any(n.lower() != n for n in ns)))
def test_case_sensitive(names: list[str]) -> None:
    lowered = [name.lower() for name in names if name.lower() not in names]
    features = Features(names)
    assert not features.any_active(lowered)


@given(scope_strategy(), flag_names_strategy(), st.lists(scope_strategy(), max_size=4))
def test_scopes_do_not_interact(scope: str | None, names: list[str], others: list[str | None]) -> None:
    registry = FeatureRegistry().init(names, scope)
    for other in others:
        if other == scope:
            continue
        assert not registry.initialized(other)
        assert registry.get(other) == []
        assert not registry.any_active(names, other)
    assert registry.active(names, scope)
