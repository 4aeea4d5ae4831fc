"""Prorated monthly billing.

A subscription's monthly price is charged per active user, prorated by the
number of days each user had access during the billed month. Both
``activated_on`` and ``deactivated_on`` are inclusive.
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import ROUND_HALF_EVEN, ROUND_HALF_UP, Context, Decimal, localcontext

from proration.dates import inclusive_day_span
from proration.errors import ParseError
from proration.utils.logging import get_logger
from proration.utils.validation import Subscription, User, YearMonth

logger = get_logger(__name__)

CENT = Decimal("0.01")
ZERO = Decimal("0.00")


def round_to_cents(amount: Decimal) -> Decimal:
    """Round to two decimal places, halves away from zero.

    Runs in its own context so the caller's precision never truncates the
    integer part.
    """
    prec = max(amount.adjusted() + 4, 1)
    with localcontext(Context(prec=prec, rounding=ROUND_HALF_UP)):
        return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def _to_year_month(month: str | YearMonth) -> YearMonth:
    if isinstance(month, YearMonth):
        return month
    try:
        return YearMonth.parse(month)
    except ParseError as exc:
        logger.warning("invalid_billing_month", value=exc.value, reason=exc.reason)
        raise


def billable_days_for(user: User, month: str | YearMonth) -> int:
    """Days of ``month`` during which ``user`` had access (0 if none)."""
    period = _to_year_month(month)
    start = max(user.activated_on, period.first_day)
    if user.deactivated_on is None:
        end = period.last_day
    else:
        end = min(user.deactivated_on, period.last_day)
    return inclusive_day_span(start, end)


def bill_for(
    month: str | YearMonth,
    subscription: Subscription | None,
    users: Iterable[User],
) -> Decimal:
    """
    Compute the monthly charge for a subscription.

    Args:
        month: Billing month as ``YYYY-MM`` (or an already parsed YearMonth)
        subscription: Active subscription, or None when the customer has none
        users: Users of the customer; may be empty. Any iterable is accepted

    Returns:
        Amount due in dollars, rounded to cents. ``0.00`` when there is no
        subscription or no user was active during the month.

    Raises:
        ParseError: If ``month`` is not a valid ``YYYY-MM`` string
    """
    period = _to_year_month(month)

    if subscription is None:
        return ZERO
    users = list(users)
    if not users:
        return ZERO

    billable_days = sum(billable_days_for(user, period) for user in users)

    # price * days / day_count in one division keeps full months exact;
    # 8 spare digits keep the quotient far finer than a cent
    numerator = subscription.monthly_price_in_dollars * billable_days
    with localcontext(Context(prec=len(str(numerator)) + 8, rounding=ROUND_HALF_EVEN)):
        total = Decimal(numerator) / period.day_count
    amount = round_to_cents(total)

    logger.debug(
        "bill_computed",
        month=str(period),
        customer_id=subscription.customer_id,
        user_count=len(users),
        billable_days=billable_days,
        amount=str(amount),
    )
    return amount
