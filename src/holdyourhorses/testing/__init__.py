"""Testing – in-memory doubles and pytest fixtures for rate-limited transports."""
from holdyourhorses.testing.fakes import AsyncTransportStub, FrozenClock, TransportSpy

__all__ = ["AsyncTransportStub", "FrozenClock", "TransportSpy"]
