"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError     (application.py)
    │   └── RateLimitedError
    └── InfrastructureError  (infrastructure.py)
        ├── ConnectionError
        ├── TimeoutError
        └── ExternalServiceError

Configuration errors live in :mod:`holdyourhorses.config.validation` and
derive from :class:`ApplicationError`.
"""

from holdyourhorses.kernel.errors.application import ApplicationError, RateLimitedError
from holdyourhorses.kernel.errors.base import BaseError
from holdyourhorses.kernel.errors.infrastructure import (
    ConnectionError,
    ExternalServiceError,
    InfrastructureError,
    TimeoutError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "ConnectionError",
    "ExternalServiceError",
    "InfrastructureError",
    "RateLimitedError",
    "TimeoutError",
]
