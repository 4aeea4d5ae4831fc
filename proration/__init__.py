"""Prorated monthly subscription billing."""

__version__ = "0.1.0"

from proration.calculator import bill_for, billable_days_for, round_to_cents
from proration.dates import (
    first_day_of_month,
    inclusive_day_span,
    last_day_of_month,
    next_day,
)
from proration.errors import ParseError, ProrationError
from proration.utils.validation import Subscription, User, YearMonth

__all__ = [
    "__version__",
    "bill_for",
    "billable_days_for",
    "round_to_cents",
    "first_day_of_month",
    "last_day_of_month",
    "next_day",
    "inclusive_day_span",
    "ParseError",
    "ProrationError",
    "Subscription",
    "User",
    "YearMonth",
]
