"""Pytest configuration and fixtures."""

from datetime import date

import pytest

from proration.config import get_settings
from proration.utils.validation import Subscription, User


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached per process; reset around each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def subscription() -> Subscription:
    """A $30 per user per month subscription."""
    return Subscription(id=763, customer_id=328, monthly_price_in_dollars=30)


@pytest.fixture
def make_user():
    """Factory for users of customer 328."""

    def _make(activated_on: date, deactivated_on: date | None = None, user_id: int = 1) -> User:
        return User(
            id=user_id,
            name=f"Employee #{user_id}",
            customer_id=328,
            activated_on=activated_on,
            deactivated_on=deactivated_on,
        )

    return _make


@pytest.fixture
def sample_users() -> list[User]:
    """The two users from the April 2022 example."""
    return [
        User(
            id=1,
            name="Employee #1",
            customer_id=1,
            activated_on=date(2021, 11, 4),
            deactivated_on=date(2022, 4, 10),
        ),
        User(
            id=2,
            name="Employee #2",
            customer_id=1,
            activated_on=date(2021, 12, 4),
            deactivated_on=None,
        ),
    ]
