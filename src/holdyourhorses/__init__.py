"""
holdyourhorses – token-bucket rate limiting for outbound HTTP requests.

Import path convention::

    from holdyourhorses.resilience.throttle import TokenBucketLimiter
    from holdyourhorses.adapters.http import HttpxTransport
    from holdyourhorses.kernel.errors import RateLimitedError
    from holdyourhorses.kernel.time import FrozenClock
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
