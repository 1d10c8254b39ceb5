"""Kernel time – Clock port + implementations."""
from holdyourhorses.kernel.time.clock import Clock, FrozenClock, MonotonicClock, SystemClock

__all__ = ["Clock", "FrozenClock", "MonotonicClock", "SystemClock"]
