"""Kernel value types – public re-export surface."""

from holdyourhorses.kernel.types.result import Err, Ok, Result

__all__ = ["Err", "Ok", "Result"]
