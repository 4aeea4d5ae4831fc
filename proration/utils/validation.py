"""
Input records using Pydantic models.

Subscriptions and users arrive already parsed from the caller's store; these
models pin their shape and normalise dates before any proration happens.
"""

import re
from datetime import date, datetime, timezone
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from proration.dates import first_day_of_month, inclusive_day_span, last_day_of_month
from proration.errors import ParseError

YEAR_MONTH_PATTERN = re.compile(r"([0-9]{4})-([0-9]{2})")


class Subscription(BaseModel):
    """
    A billable plan active for the whole month being billed.

    The price is charged per active user per month.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    customer_id: Annotated[int, Field(alias="customerId")]
    monthly_price_in_dollars: Annotated[int, Field(ge=0, alias="monthlyPriceInDollars")]


class User(BaseModel):
    """
    A customer's user and the dates they had access.

    ``deactivated_on`` is the last day the user had access and is billed;
    ``None`` means the user is still active.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    name: str
    customer_id: Annotated[int, Field(alias="customerId")]
    activated_on: Annotated[date, Field(alias="activatedOn")]
    deactivated_on: Annotated[date | None, Field(default=None, alias="deactivatedOn")]

    @field_validator("activated_on", "deactivated_on", mode="before")
    @classmethod
    def truncate_datetime(cls, v: Any) -> Any:
        """Reduce datetimes to their UTC calendar date."""
        if isinstance(v, datetime):
            if v.tzinfo is not None:
                v = v.astimezone(timezone.utc)
            return v.date()
        return v


class YearMonth(BaseModel):
    """A single calendar month, written ``YYYY-MM``."""

    model_config = ConfigDict(frozen=True)

    year: Annotated[int, Field(ge=1, le=9999)]
    month: Annotated[int, Field(ge=1, le=12)]

    @classmethod
    def parse(cls, value: str) -> "YearMonth":
        """Parse a ``YYYY-MM`` string, raising ParseError on anything else."""
        if not isinstance(value, str):
            raise ParseError(value, "expected a string")
        match = YEAR_MONTH_PATTERN.fullmatch(value)
        if match is None:
            raise ParseError(value)
        year, month = int(match.group(1)), int(match.group(2))
        if year < 1:
            raise ParseError(value, "year out of range")
        if not 1 <= month <= 12:
            raise ParseError(value, "month out of range")
        return cls(year=year, month=month)

    @property
    def first_day(self) -> date:
        return first_day_of_month(date(self.year, self.month, 1))

    @property
    def last_day(self) -> date:
        return last_day_of_month(self.first_day)

    @property
    def day_count(self) -> int:
        return inclusive_day_span(self.first_day, self.last_day)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"
