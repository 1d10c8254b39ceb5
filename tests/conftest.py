"""Shared pytest fixtures."""

from holdyourhorses.testing.fixtures import frozen_clock, transport_spy  # noqa: F401
