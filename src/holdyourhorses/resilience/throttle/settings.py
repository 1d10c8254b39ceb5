"""Resilience – limiter settings (``RATE_LIMITER_*`` environment variables)."""
from __future__ import annotations

import dataclasses

from holdyourhorses.config.settings import Settings
from holdyourhorses.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class LimiterSettings(Settings):
    """Bucket capacity and refresh interval for a limiter.

    Loaded from ``RATE_LIMITER_MAX_TOKENS`` and
    ``RATE_LIMITER_REFRESH_INTERVAL`` by :class:`EnvSettingsLoader`.
    """

    _prefix = "RATE_LIMITER"

    max_tokens: int = 3
    refresh_interval: float = 1.0

    def _validate(self) -> None:
        if self.max_tokens < 0:
            raise InvalidSettingValueError("max_tokens", self.max_tokens, "must be >= 0")
        if self.refresh_interval <= 0:
            raise InvalidSettingValueError("refresh_interval", self.refresh_interval, "must be > 0")


__all__ = ["LimiterSettings"]
