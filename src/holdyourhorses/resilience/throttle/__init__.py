"""Resilience – token bucket rate limiting."""
from holdyourhorses.resilience.throttle.limiter import AsyncTokenBucketLimiter, TokenBucketLimiter
from holdyourhorses.resilience.throttle.settings import LimiterSettings
from holdyourhorses.resilience.throttle.token_bucket import Admission, TokenBucket

__all__ = [
    "Admission",
    "AsyncTokenBucketLimiter",
    "LimiterSettings",
    "TokenBucket",
    "TokenBucketLimiter",
]
