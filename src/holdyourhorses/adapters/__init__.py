"""Adapters – concrete transports for the rate limiter."""
