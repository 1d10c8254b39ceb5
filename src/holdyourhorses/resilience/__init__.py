"""Resilience – throttling."""
from holdyourhorses.resilience.throttle import (
    Admission,
    AsyncTokenBucketLimiter,
    LimiterSettings,
    TokenBucket,
    TokenBucketLimiter,
)

__all__ = [
    "Admission",
    "AsyncTokenBucketLimiter",
    "LimiterSettings",
    "TokenBucket",
    "TokenBucketLimiter",
]
