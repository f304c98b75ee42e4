"""Config settings – FeaturingSettings.

Read from the environment with :class:`EnvSettingsLoader`::

    FEATURING_FEATURES=FOO,BAR
    FEATURING_SCOPE=example        # empty or unset for the global scope
    FEATURING_LOG_LEVEL=DEBUG
    FEATURING_JSON_LOGS=true
"""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from featuring.config.settings.base import Settings
from featuring.config.validation import InvalidSettingValueError

LOG_LEVELS = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"})


@dataclasses.dataclass
class FeaturingSettings(Settings):
    _prefix: ClassVar[str] = "FEATURING"

    features: list[str] = dataclasses.field(default_factory=list)
    scope: str = ""
    log_level: str = "INFO"
    json_logs: bool = False

    def _validate(self) -> None:
        if self.log_level.upper() not in LOG_LEVELS:
            raise InvalidSettingValueError(
                "log_level", self.log_level, f"expected one of {sorted(LOG_LEVELS)}"
            )


__all__ = ["FeaturingSettings", "LOG_LEVELS"]
