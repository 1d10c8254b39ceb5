"""Infrastructure errors – failures reported by a transport."""

from __future__ import annotations

from typing import Any

from holdyourhorses.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """I/O failure on the way to or from the remote resource."""

    default_code = "infrastructure_error"


class ConnectionError(InfrastructureError):  # noqa: A001
    """Failed to connect to the remote host."""

    default_code = "connection_error"

    def __init__(
        self,
        resource: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Could not connect to '{resource}'", **kwargs)
        self.resource = resource


class TimeoutError(InfrastructureError):  # noqa: A001
    """The request exceeded the transport's timeout."""

    default_code = "infrastructure_timeout"


class ExternalServiceError(InfrastructureError):
    """The remote service answered with an unexpected response."""

    default_code = "external_service_error"

    def __init__(
        self,
        service: str,
        message: str | None = None,
        *,
        status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"External service '{service}' error", **kwargs)
        self.service = service
        self.status_code = status_code


__all__ = [
    "ConnectionError",
    "ExternalServiceError",
    "InfrastructureError",
    "TimeoutError",
]
