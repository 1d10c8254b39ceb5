"""Config validation errors raised while building a limiter's configuration."""
from holdyourhorses.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Limiter configuration could not be loaded or constructed."""
    default_code = "config_error"


class InvalidSettingValueError(ConfigError):
    """A limiter parameter was supplied but cannot be used.

    Raised for unparsable ``RATE_LIMITER_*`` values as well as for
    out-of-range constructor arguments such as a negative ``max_tokens``.
    """
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"{setting_name}={value!r} rejected: {reason}",
            detail={"setting": setting_name, "value": repr(value)},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError"]
