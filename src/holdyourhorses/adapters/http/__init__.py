"""HTTP adapter – transport ports and httpx implementations."""
from holdyourhorses.adapters.http.client import AsyncHttpxTransport, HttpxTransport, map_httpx_error
from holdyourhorses.adapters.http.transport import (
    AsyncTransport,
    Completion,
    FetchResult,
    Payload,
    Transport,
)

__all__ = [
    "AsyncHttpxTransport",
    "AsyncTransport",
    "Completion",
    "FetchResult",
    "HttpxTransport",
    "Payload",
    "Transport",
    "map_httpx_error",
]
