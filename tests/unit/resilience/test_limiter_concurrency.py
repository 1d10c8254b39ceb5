"""Unit tests – TokenBucketLimiter under concurrent callers."""

from __future__ import annotations

import threading

from holdyourhorses.adapters.http import FetchResult
from holdyourhorses.kernel.errors import RateLimitedError
from holdyourhorses.kernel.time import FrozenClock
from holdyourhorses.resilience.throttle import TokenBucketLimiter
from holdyourhorses.testing.fakes import TransportSpy

ANY_URL = "https://any-url.com"


def _hammer(sut: TokenBucketLimiter, threads: int, calls_per_thread: int) -> list[FetchResult]:
    """Call ``sut.fetch`` from many threads released at the same moment."""
    rejections: list[FetchResult] = []
    lock = threading.Lock()
    barrier = threading.Barrier(threads)

    def on_complete(result: FetchResult) -> None:
        with lock:
            rejections.append(result)

    def worker() -> None:
        barrier.wait()
        for _ in range(calls_per_thread):
            sut.fetch(ANY_URL, on_complete)

    workers = [threading.Thread(target=worker) for _ in range(threads)]
    for t in workers:
        t.start()
    for t in workers:
        t.join()
    return rejections


class TestConcurrentCallers:
    def test_admits_exactly_available_tokens(self) -> None:
        transport = TransportSpy()
        sut = TokenBucketLimiter(transport, max_tokens=10, refresh_interval=1.0, clock=FrozenClock())

        rejections = _hammer(sut, threads=16, calls_per_thread=5)

        assert len(transport.requests) == 10
        assert len(rejections) == 70
        assert all(isinstance(r.error, RateLimitedError) for r in rejections)
        assert sut.tokens == 0

    def test_refill_is_applied_once(self) -> None:
        clock = FrozenClock()
        transport = TransportSpy()
        sut = TokenBucketLimiter(transport, max_tokens=4, refresh_interval=1.0, clock=clock)
        for _ in range(4):
            sut.fetch(ANY_URL, lambda _: None)
        clock.set(1.5)

        _hammer(sut, threads=12, calls_per_thread=3)

        assert len(transport.requests) == 8
        assert sut.tokens == 0

    def test_transport_called_outside_the_lock(self) -> None:
        """A transport that re-enters the limiter must not deadlock."""
        inner_results: list[FetchResult] = []

        class ReentrantTransport:
            def __init__(self) -> None:
                self.limiter: TokenBucketLimiter | None = None
                self.calls = 0

            def fetch(self, address, on_complete) -> None:
                self.calls += 1
                if self.calls == 1:
                    assert self.limiter is not None
                    self.limiter.fetch(address, inner_results.append)

        transport = ReentrantTransport()
        sut = TokenBucketLimiter(transport, max_tokens=1, clock=FrozenClock())
        transport.limiter = sut

        sut.fetch(ANY_URL, lambda _: None)

        assert transport.calls == 1
        assert isinstance(inner_results[0].error, RateLimitedError)
