"""Utilities package."""

from proration.utils.logging import configure_logging, get_logger
from proration.utils.validation import Subscription, User, YearMonth

__all__ = [
    "configure_logging",
    "get_logger",
    "Subscription",
    "User",
    "YearMonth",
]
