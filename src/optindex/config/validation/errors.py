"""Config validation errors.

Every error names the environment variable the operator set (for
example ``OPTINDEX_STRATEGY``), not the dataclass field behind it.
"""
from __future__ import annotations

from typing import Iterable

from optindex.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be loaded or failed validation."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """An environment variable without a default is unset."""
    default_code = "missing_required_setting"

    def __init__(self, env_key: str) -> None:
        super().__init__(f"{env_key} must be set", detail={"env_key": env_key})
        self.setting_name = env_key


class InvalidSettingValueError(ConfigError):
    """An environment variable is set to a value the settings reject.

    ``allowed`` lists the accepted values when the setting is an enumeration
    (strategy names, log levels) and is empty otherwise.
    """
    default_code = "invalid_setting_value"

    def __init__(
        self,
        env_key: str,
        value: object,
        reason: str,
        *,
        allowed: Iterable[str] = (),
    ) -> None:
        self.allowed: tuple[str, ...] = tuple(allowed)
        message = f"{env_key}={value!r} rejected: {reason}"
        if self.allowed:
            message += f" (accepted: {', '.join(self.allowed)})"
        super().__init__(
            message,
            detail={"env_key": env_key, "value": value, "allowed": list(self.allowed)},
        )
        self.setting_name = env_key
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
