"""Application-layer errors – outcomes decided by this library itself."""

from __future__ import annotations

from typing import Any

from holdyourhorses.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class RateLimitedError(ApplicationError):
    """No token was available when the request was attempted.

    Delivered through the completion channel as ``Err(RateLimitedError)``;
    the limiter never raises it.  ``retry_after_seconds`` is the time left
    until the next refill boundary, or ``None`` when the bucket has no
    capacity at all.  Tokens come back only strictly after that boundary.
    """

    default_code = "rate_limited"

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        *,
        retry_after_seconds: float | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.retry_after_seconds = retry_after_seconds

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["retry_after_seconds"] = self.retry_after_seconds
        return base


__all__ = ["ApplicationError", "RateLimitedError"]
