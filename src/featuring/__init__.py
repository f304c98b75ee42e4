"""
featuring – feature flag queries with scopes, guards and conditional calls.

Import path convention::

    from featuring import FeatureRegistry, Features
    from featuring.application.feature_flags import InactiveFeatureError
    from featuring.config.settings import EnvSettingsLoader, FeaturingSettings
"""

from featuring.application.feature_flags import (
    DuplicateInitializationError,
    Feature,
    FeatureError,
    FeatureRegistry,
    Features,
    FlagSet,
    InactiveFeatureError,
    NoActiveFeatureError,
    ScopedRegistry,
)

__version__ = "0.1.0"
__all__ = [
    "DuplicateInitializationError",
    "Feature",
    "FeatureError",
    "FeatureRegistry",
    "Features",
    "FlagSet",
    "InactiveFeatureError",
    "NoActiveFeatureError",
    "ScopedRegistry",
    "__version__",
]
