"""Application feature flags – build registries and feature sets from settings."""

from __future__ import annotations

from featuring.application.feature_flags.features import Features
from featuring.application.feature_flags.registry import FeatureRegistry
from featuring.config.settings import FeaturingSettings
from featuring.observability.logging import ConsoleLoggerFactory, JsonLoggerFactory


def configure_logging(settings: FeaturingSettings) -> None:
    """Apply ``settings.log_level`` to structlog and the stdlib root logger.

    Output is JSON when ``settings.json_logs`` is set, console lines otherwise.
    """
    factory = JsonLoggerFactory if settings.json_logs else ConsoleLoggerFactory
    factory.configure(settings.log_level)


def registry_from_settings(
    settings: FeaturingSettings,
    registry: FeatureRegistry | None = None,
) -> FeatureRegistry:
    """Initialize ``settings.scope`` (global when empty) with ``settings.features``.

    A new registry is created unless one is given.
    """
    if registry is None:
        registry = FeatureRegistry()
    return registry.init(settings.features, settings.scope or None)


def features_from_settings(settings: FeaturingSettings) -> Features:
    return Features(settings.features)


__all__ = ["configure_logging", "features_from_settings", "registry_from_settings"]
