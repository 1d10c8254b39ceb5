"""Testing fakes – in-memory doubles for the transport and clock ports."""
from holdyourhorses.kernel.time import FrozenClock
from holdyourhorses.testing.fakes.transport import (
    AsyncTransportStub,
    RecordedRequest,
    TransportSpy,
    ok_response,
)

__all__ = [
    "AsyncTransportStub",
    "FrozenClock",
    "RecordedRequest",
    "TransportSpy",
    "ok_response",
]
