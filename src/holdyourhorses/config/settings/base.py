"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import ClassVar


@dataclasses.dataclass
class Settings:
    """Dataclass whose fields map one-to-one onto environment variables.

    ``_prefix`` namespaces the variables: field ``max_tokens`` of a class
    with prefix ``RATE_LIMITER`` is read from ``RATE_LIMITER_MAX_TOKENS``.
    Every field should carry a default so a bare environment still yields a
    working configuration.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    @classmethod
    def env_key(cls, field_name: str) -> str:
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    def _validate(self) -> None:
        """Raise :class:`InvalidSettingValueError` for out-of-range values."""


__all__ = ["Settings"]
