"""Kernel – errors, value types and time shared by every layer."""
