"""HTTP adapter – Transport ports.

Any object with a matching ``fetch`` satisfies a port; limiters implement
the same port, so they can be stacked or dropped in wherever a transport is
expected.
"""
from __future__ import annotations

from typing import Callable, Protocol, runtime_checkable

import httpx

from holdyourhorses.kernel.types import Result

type Payload = tuple[bytes, httpx.Response]
type FetchResult = Result[Payload, BaseException]
type Completion = Callable[[FetchResult], None]


@runtime_checkable
class Transport(Protocol):
    """Port: fetch *address* and hand the outcome to *on_complete*.

    Implementations may call *on_complete* before returning or later, on any
    thread.
    """

    def fetch(self, address: str, on_complete: Completion) -> None: ...


@runtime_checkable
class AsyncTransport(Protocol):
    """Port: awaitable fetch returning the outcome directly."""

    async def fetch(self, address: str) -> FetchResult: ...


__all__ = ["AsyncTransport", "Completion", "FetchResult", "Payload", "Transport"]
