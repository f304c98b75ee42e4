"""Testing fixtures – pytest fixtures for feature flag tests."""
from featuring.testing.fixtures.feature_flags import call_recorder, feature_registry

__all__ = ["call_recorder", "feature_registry"]
