"""Exceptions raised by the seeded byte generator."""


class InvalidArgumentError(ValueError):
    """Raised when a requested output length is negative."""
