"""Application – feature flag use cases (framework-agnostic)."""

from featuring.application.feature_flags import (
    Feature,
    FeatureRegistry,
    Features,
    ScopedRegistry,
)

__all__ = [
    "Feature",
    "FeatureRegistry",
    "Features",
    "ScopedRegistry",
]
