"""Application feature flags – registries, handles and standalone flag sets."""
from featuring.application.feature_flags.bootstrap import (
    configure_logging,
    features_from_settings,
    registry_from_settings,
)
from featuring.application.feature_flags.errors import (
    DuplicateInitializationError,
    FeatureError,
    InactiveFeatureError,
    NoActiveFeatureError,
)
from featuring.application.feature_flags.feature import Feature
from featuring.application.feature_flags.features import Features
from featuring.application.feature_flags.flag_set import FlagNames, FlagSet, coerce_names
from featuring.application.feature_flags.registry import FeatureRegistry
from featuring.application.feature_flags.scoped import ScopedRegistry

__all__ = [
    "DuplicateInitializationError",
    "Feature",
    "FeatureError",
    "FeatureRegistry",
    "Features",
    "FlagNames",
    "FlagSet",
    "InactiveFeatureError",
    "NoActiveFeatureError",
    "ScopedRegistry",
    "coerce_names",
    "configure_logging",
    "features_from_settings",
    "registry_from_settings",
]
