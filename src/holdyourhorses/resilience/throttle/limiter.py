"""Resilience – rate-limiting transport decorators.

Both limiters gate every request through a shared :class:`TokenBucket`.
Admitted requests reach the wrapped transport untouched; rejected ones
complete immediately with ``Err(RateLimitedError)`` and never touch it.
"""
from __future__ import annotations

from holdyourhorses.adapters.http.transport import (
    AsyncTransport,
    Completion,
    FetchResult,
    Transport,
)
from holdyourhorses.kernel.errors import RateLimitedError
from holdyourhorses.kernel.time import Clock, SystemClock
from holdyourhorses.kernel.types import Err
from holdyourhorses.observability.logging import get_logger
from holdyourhorses.resilience.throttle.settings import LimiterSettings
from holdyourhorses.resilience.throttle.token_bucket import Admission, TokenBucket

_log = get_logger(__name__)


class _BucketGate:
    """Shared construction and admission bookkeeping for both limiters."""

    def __init__(
        self,
        max_tokens: int = 3,
        refresh_interval: float = 1.0,
        clock: Clock | None = None,
    ) -> None:
        self._bucket = TokenBucket(
            max_tokens=max_tokens,
            refresh_interval=refresh_interval,
            clock=clock if clock is not None else SystemClock(),
        )

    @property
    def max_tokens(self) -> int:
        return self._bucket.max_tokens

    @property
    def refresh_interval(self) -> float:
        return self._bucket.refresh_interval

    @property
    def tokens(self) -> int:
        return self._bucket.tokens

    def _admit(self, address: str) -> Admission:
        admission = self._bucket.try_acquire()
        if admission.admitted:
            _log.debug("request_admitted", address=address, tokens=admission.tokens)
        else:
            _log.info("request_rate_limited", address=address, retry_after=admission.retry_after)
        return admission

    @staticmethod
    def _rejection(admission: Admission) -> FetchResult:
        return Err(RateLimitedError(retry_after_seconds=admission.retry_after))


class TokenBucketLimiter(_BucketGate):
    """Callback-style :class:`Transport` that rate limits another one.

    Usage::

        limiter = TokenBucketLimiter(HttpxTransport(), max_tokens=2, refresh_interval=1.0)
        limiter.fetch("https://example.com", on_complete)
    """

    def __init__(
        self,
        transport: Transport,
        max_tokens: int = 3,
        refresh_interval: float = 1.0,
        clock: Clock | None = None,
    ) -> None:
        super().__init__(max_tokens, refresh_interval, clock)
        self._transport = transport

    @classmethod
    def from_settings(
        cls,
        transport: Transport,
        settings: LimiterSettings,
        clock: Clock | None = None,
    ) -> "TokenBucketLimiter":
        return cls(transport, settings.max_tokens, settings.refresh_interval, clock)

    def fetch(self, address: str, on_complete: Completion) -> None:
        admission = self._admit(address)
        if admission.admitted:
            self._transport.fetch(address, on_complete)
            return
        on_complete(self._rejection(admission))

    def __repr__(self) -> str:
        return (
            f"TokenBucketLimiter(max_tokens={self.max_tokens}, "
            f"refresh_interval={self.refresh_interval}, transport={self._transport!r})"
        )


class AsyncTokenBucketLimiter(_BucketGate):
    """Awaitable :class:`AsyncTransport` that rate limits another one.

    Admission never awaits, so concurrent tasks on one loop are decided in
    the order they reach :meth:`fetch`.
    """

    def __init__(
        self,
        transport: AsyncTransport,
        max_tokens: int = 3,
        refresh_interval: float = 1.0,
        clock: Clock | None = None,
    ) -> None:
        super().__init__(max_tokens, refresh_interval, clock)
        self._transport = transport

    @classmethod
    def from_settings(
        cls,
        transport: AsyncTransport,
        settings: LimiterSettings,
        clock: Clock | None = None,
    ) -> "AsyncTokenBucketLimiter":
        return cls(transport, settings.max_tokens, settings.refresh_interval, clock)

    async def fetch(self, address: str) -> FetchResult:
        admission = self._admit(address)
        if admission.admitted:
            return await self._transport.fetch(address)
        return self._rejection(admission)

    def __repr__(self) -> str:
        return (
            f"AsyncTokenBucketLimiter(max_tokens={self.max_tokens}, "
            f"refresh_interval={self.refresh_interval}, transport={self._transport!r})"
        )


__all__ = ["AsyncTokenBucketLimiter", "TokenBucketLimiter"]
