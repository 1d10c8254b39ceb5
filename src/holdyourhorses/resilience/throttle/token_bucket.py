from __future__ import annotations

import math
import threading
from dataclasses import dataclass, field

from holdyourhorses.config.validation import InvalidSettingValueError
from holdyourhorses.kernel.time import Clock, SystemClock

__all__ = [
    "Admission",
    "TokenBucket",
]


@dataclass(frozen=True)
class Admission:
    """Outcome of a single :meth:`TokenBucket.try_acquire` call.

    *tokens* is the count left after the decision.  *retry_after* is only set
    on rejection: seconds until the next refill boundary, or ``None`` when
    the bucket can never hold a token.  Refill is strict, so a retry lands
    only once *strictly more* than ``retry_after`` has passed; a retry at
    exactly that offset is rejected again.
    """

    admitted: bool
    tokens: int
    retry_after: float | None = None


@dataclass
class TokenBucket:
    """Token bucket that restores a full bucket per elapsed refresh interval.

    *max_tokens* – capacity ceiling, may be 0.
    *refresh_interval* – seconds per refill boundary, strictly positive.
    *clock* – zero-argument callable returning the current instant.

    A refill happens only once *strictly more* than ``refresh_interval`` has
    passed since the previous one; it adds ``max_tokens`` per whole interval
    elapsed, capped at ``max_tokens``.
    """

    max_tokens: int = 3
    refresh_interval: float = 1.0  # seconds
    clock: Clock = field(default_factory=SystemClock, compare=False)
    _tokens: int = field(init=False)
    _last_refill: float = field(init=False)
    _lock: threading.Lock = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        if isinstance(self.max_tokens, bool) or not isinstance(self.max_tokens, int):
            raise InvalidSettingValueError("max_tokens", self.max_tokens, "must be an integer")
        if self.max_tokens < 0:
            raise InvalidSettingValueError("max_tokens", self.max_tokens, "must be >= 0")
        if not self.refresh_interval > 0:
            raise InvalidSettingValueError("refresh_interval", self.refresh_interval, "must be > 0")
        self._tokens = self.max_tokens
        self._last_refill = self.clock()
        self._lock = threading.Lock()

    @property
    def tokens(self) -> int:
        """Tokens currently held, without applying a pending refill."""
        return self._tokens

    @property
    def last_refill(self) -> float:
        return self._last_refill

    def _refill(self, now: float) -> None:
        elapsed = now - self._last_refill
        if elapsed > self.refresh_interval:
            whole_intervals = math.floor(elapsed / self.refresh_interval)
            self._tokens = min(self.max_tokens, self._tokens + whole_intervals * self.max_tokens)
            self._last_refill = now

    def _retry_after(self, now: float) -> float | None:
        if self.max_tokens == 0:
            return None
        return max(0.0, self._last_refill + self.refresh_interval - now)

    def try_acquire(self) -> Admission:
        """Refill, then take one token if any is left."""
        with self._lock:
            now = self.clock()
            self._refill(now)
            if self._tokens > 0:
                self._tokens -= 1
                return Admission(admitted=True, tokens=self._tokens)
            return Admission(admitted=False, tokens=0, retry_after=self._retry_after(now))
