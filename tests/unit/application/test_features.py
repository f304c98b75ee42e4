"""Unit tests for the standalone Features collection."""

from __future__ import annotations

import pytest

from featuring.application.feature_flags import (
    Features,
    InactiveFeatureError,
    NoActiveFeatureError,
)
from featuring.testing.fakes import CallRecorder


class TestFeaturesConstruction:
    def test_get_round_trips_input(self) -> None:
        assert Features(["FOO", "BAR", "FOO"]).get() == ["FOO", "BAR", "FOO"]

    def test_single_name(self) -> None:
        assert Features("FOO").get() == ["FOO"]

    def test_no_names(self) -> None:
        assert Features().get() == []
        assert Features(None).get() == []
        assert len(Features([])) == 0

    def test_input_is_copied(self) -> None:
        names = ["FOO", "BAR"]
        features = Features(names)
        names.append("FIZZ")
        names[0] = "CHANGED"
        assert features.get() == ["FOO", "BAR"]
        assert not features.active("FIZZ")
        assert features.active("FOO")

    def test_get_returns_fresh_list(self) -> None:
        features = Features(["FOO"])
        features.get().append("BAR")
        assert features.get() == ["FOO"]

    def test_container_protocol(self) -> None:
        features = Features(["FOO", "BAR"])
        assert "FOO" in features
        assert "foo" not in features
        assert list(features) == ["FOO", "BAR"]
        assert len(features) == 2
        assert repr(features) == "Features(['FOO', 'BAR'])"

    def test_instances_are_independent(self) -> None:
        first = Features(["FOO"])
        second = Features(["BAR"])
        assert first.active("FOO") and not first.active("BAR")
        assert second.active("BAR") and not second.active("FOO")


class TestFeaturesQueries:
    def test_active(self) -> None:
        features = Features(["FOO", "BAR"])
        assert features.active(["FOO", "BAR"])
        assert features.active("FOO")
        assert not features.active(["FOO", "FIZZ"])
        assert not features.active("foo")

    def test_active_no_names(self) -> None:
        assert Features().active([])
        assert Features(["FOO"]).active(None)

    def test_any_active(self) -> None:
        features = Features(["FOO", "BAR"])
        assert features.any_active(["FIZZ", "BAR"])
        assert not features.any_active(["FIZZ", "BUZZ"])
        assert not features.any_active([])
        assert Features.active_any is Features.any_active


class TestFeaturesGuards:
    def test_verify_returns_self(self) -> None:
        features = Features(["FOO"])
        assert features.verify("FOO") is features
        assert features.verify([]) is features

    def test_verify_raises_for_first_inactive(self) -> None:
        with pytest.raises(InactiveFeatureError) as exc_info:
            Features(["FOO"]).verify(["FOO", "MISSING", "OTHER"])
        assert exc_info.value.name == "MISSING"
        assert exc_info.value.message == '"MISSING" feature in global scope is not active'

    def test_verify_any(self) -> None:
        features = Features(["FOO"])
        assert features.verify_any(["BAR", "FOO"]) is features
        with pytest.raises(NoActiveFeatureError):
            features.verify_any(["BAR"])
        with pytest.raises(NoActiveFeatureError):
            features.verify_any([])


class TestFeaturesWhen:
    def test_when(self) -> None:
        features = Features(["FOO"])
        action = CallRecorder()
        assert features.when("FOO", action) is features
        features.when(["FOO", "BAR"], action)
        assert action.calls == 1

    def test_when_without_names_always_invokes(self) -> None:
        action = CallRecorder()
        Features().when(action=action)
        Features().when([], action)
        assert action.calls == 2

    def test_when_any(self) -> None:
        features = Features(["FOO"])
        action = CallRecorder()
        assert features.when_any(["BAR", "FOO"], action) is features
        features.when_any(["BAR"], action)
        features.when_any([], action)
        features.when_any(action=action)
        assert action.calls == 1

    def test_action_errors_propagate(self) -> None:
        with pytest.raises(ValueError, match="bad"):
            Features(["FOO"]).when_any("FOO", CallRecorder(error=ValueError("bad")))
