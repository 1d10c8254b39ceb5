"""Testing fakes – TransportSpy and AsyncTransportStub."""
from __future__ import annotations

import asyncio
import dataclasses
import threading

import httpx

from holdyourhorses.adapters.http.transport import Completion, FetchResult
from holdyourhorses.kernel.types import Err, Ok


def ok_response(address: str, data: bytes = b"", status_code: int = 200) -> FetchResult:
    """Build a successful fetch result for *address*."""
    response = httpx.Response(
        status_code,
        content=data,
        request=httpx.Request("GET", address),
    )
    return Ok((data, response))


@dataclasses.dataclass(frozen=True)
class RecordedRequest:
    address: str
    on_complete: Completion


class TransportSpy:
    """Callback transport that records requests and completes them on demand.

    Nothing completes until the test calls :meth:`complete_all_requests`,
    :meth:`fail_all_requests` or :meth:`complete`.
    """

    def __init__(self) -> None:
        self._requests: list[RecordedRequest] = []
        self._lock = threading.Lock()

    @property
    def requests(self) -> list[RecordedRequest]:
        with self._lock:
            return list(self._requests)

    @property
    def addresses(self) -> list[str]:
        return [r.address for r in self.requests]

    def fetch(self, address: str, on_complete: Completion) -> None:
        with self._lock:
            self._requests.append(RecordedRequest(address, on_complete))

    def complete(self, index: int, result: FetchResult) -> None:
        self.requests[index].on_complete(result)

    def complete_all_requests(self, data: bytes = b"") -> None:
        for request in self.requests:
            request.on_complete(ok_response(request.address, data))

    def fail_all_requests(self, error: BaseException) -> None:
        for request in self.requests:
            request.on_complete(Err(error))


class AsyncTransportStub:
    """Async transport returning a canned result and recording addresses.

    Each call yields to the event loop once so that concurrent callers
    interleave the way real I/O would.
    """

    def __init__(self, result: FetchResult | None = None) -> None:
        self._result = result
        self.addresses: list[str] = []

    async def fetch(self, address: str) -> FetchResult:
        self.addresses.append(address)
        await asyncio.sleep(0)
        if self._result is not None:
            return self._result
        return ok_response(address)


__all__ = ["AsyncTransportStub", "RecordedRequest", "TransportSpy", "ok_response"]
