"""Testing fixtures – pytest fixtures for the fake doubles.

Re-export them from a ``conftest.py``::

    from holdyourhorses.testing.fixtures import frozen_clock, transport_spy
"""
import pytest

from holdyourhorses.testing.fakes import FrozenClock, TransportSpy


@pytest.fixture
def frozen_clock() -> FrozenClock:
    """Pytest fixture: a FrozenClock pinned to instant 0.0."""
    return FrozenClock(0.0)


@pytest.fixture
def transport_spy() -> TransportSpy:
    """Pytest fixture: an empty TransportSpy."""
    return TransportSpy()


__all__ = ["frozen_clock", "transport_spy"]
