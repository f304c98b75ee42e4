from featuring.testing.fixtures import call_recorder, feature_registry  # noqa: F401
