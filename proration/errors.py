"""Exceptions raised by the proration package."""

from __future__ import annotations


class ProrationError(Exception):
    """Base class for proration errors."""


class ParseError(ProrationError, ValueError):
    """Raised when a billing month is not a valid ``YYYY-MM`` string."""

    def __init__(self, value: object, reason: str = "expected YYYY-MM"):
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid billing month {value!r}: {reason}")
