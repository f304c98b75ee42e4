"""Config validation errors raised while loading ``FEATURING_*`` settings."""
from featuring.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Configuration could not be loaded or is invalid."""

    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """No environment variable was set for a field without a default."""

    default_code = "missing_required_setting"

    def __init__(self, env_key: str) -> None:
        super().__init__(f"Required setting '{env_key}' is missing", detail={"setting": env_key})
        self.setting_name = env_key


class InvalidSettingValueError(ConfigError):
    """A setting was read but failed validation."""

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}",
            detail={"setting": setting_name, "value": value, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
