"""HTTP adapter – httpx-backed transports."""
from __future__ import annotations

from concurrent.futures import Executor, Future
from typing import Any

import httpx

from holdyourhorses.adapters.http.transport import Completion, FetchResult
from holdyourhorses.kernel.errors import (
    ConnectionError as TransportConnectionError,
    ExternalServiceError,
    InfrastructureError,
    TimeoutError as TransportTimeoutError,
)
from holdyourhorses.kernel.types import Err, Ok
from holdyourhorses.observability.logging import get_logger

_log = get_logger(__name__)


def map_httpx_error(exc: httpx.HTTPError | httpx.InvalidURL, method: str, url: str) -> InfrastructureError:
    """Translate an httpx failure into the infrastructure error hierarchy."""
    if isinstance(exc, httpx.InvalidURL):
        return ExternalServiceError(service=url, message=f"Invalid URL for {method}: {url!r}", cause=exc)
    if isinstance(exc, httpx.TimeoutException):
        return TransportTimeoutError(f"HTTP request timed out: {method} {url}", cause=exc)
    if isinstance(exc, httpx.ConnectError):
        return TransportConnectionError(url, cause=exc)
    if isinstance(exc, httpx.HTTPStatusError):
        return ExternalServiceError(
            service=url,
            message=f"HTTP {exc.response.status_code} from {method} {url}",
            status_code=exc.response.status_code,
            cause=exc,
        )
    return ExternalServiceError(service=url, message=str(exc), cause=exc)


class HttpxTransport:
    """Callback transport over a synchronous ``httpx.Client``.

    Without an *executor* the request runs inline and *on_complete* fires
    before :meth:`fetch` returns.  With one, the request and its completion
    run on a worker thread.  Either way every httpx failure, a malformed
    address included, reaches *on_complete* as ``Err``.
    """

    def __init__(
        self,
        client: httpx.Client | None = None,
        *,
        timeout: float = 10.0,
        executor: Executor | None = None,
        **kwargs: Any,
    ) -> None:
        self._owns_client = client is None
        self._client = client if client is not None else httpx.Client(timeout=timeout, **kwargs)
        self._executor = executor

    def __enter__(self) -> "HttpxTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def fetch(self, address: str, on_complete: Completion) -> None:
        if self._executor is None:
            on_complete(self._get(address))
            return
        future = self._executor.submit(self._complete, address, on_complete)
        future.add_done_callback(self._report_completion_failure)

    def _complete(self, address: str, on_complete: Completion) -> None:
        on_complete(self._get(address))

    def _get(self, address: str) -> FetchResult:
        try:
            response = self._client.get(address)
            response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            return Err(map_httpx_error(exc, "GET", address))
        return Ok((response.content, response))

    @staticmethod
    def _report_completion_failure(future: Future[None]) -> None:
        exc = future.exception()
        if exc is not None:
            _log.error("completion_callback_failed", error=repr(exc))


class AsyncHttpxTransport:
    """Awaitable transport over ``httpx.AsyncClient``."""

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        timeout: float = 10.0,
        **kwargs: Any,
    ) -> None:
        self._owns_client = client is None
        self._client = client if client is not None else httpx.AsyncClient(timeout=timeout, **kwargs)

    async def __aenter__(self) -> "AsyncHttpxTransport":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def fetch(self, address: str) -> FetchResult:
        try:
            response = await self._client.get(address)
            response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            return Err(map_httpx_error(exc, "GET", address))
        return Ok((response.content, response))


__all__ = ["AsyncHttpxTransport", "HttpxTransport", "map_httpx_error"]
