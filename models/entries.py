"""
Snapshot entries: the caller-supplied rows of a financial state.

Every model is frozen. Money inputs are clamped at construction: NaN/inf and
negative amounts become 0, so nothing downstream has to re-check them.
Rates follow a different rule: an unset or non-finite rate stays None and the
engine falls back to its category default.
"""

from __future__ import annotations

import math
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from assumptions.defaults import AssetCategory, DebtCategory
from core.utils import clamp_money
from tax.engine import IncomeType


def _money(v):
    return clamp_money(v)


def _optional_rate(v, *, allow_negative: bool = False):
    if v is None:
        return None
    x = float(v)
    if not math.isfinite(x):
        return None
    return x if allow_negative else max(x, 0.0)


class _Entry(BaseModel):
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    id: str = Field(..., min_length=1)


class Asset(_Entry):
    category: str
    amount: float = 0.0
    roi: Optional[float] = None  # annual %, may be negative
    monthly_contribution: float = 0.0

    @field_validator("amount", "monthly_contribution", mode="before")
    @classmethod
    def clamp_amounts(cls, v):
        return _money(v)

    @field_validator("roi", mode="before")
    @classmethod
    def clean_roi(cls, v):
        return _optional_rate(v, allow_negative=True)

    @property
    def kind(self) -> AssetCategory:
        return AssetCategory.from_label(self.category)

    @property
    def annual_return_pct(self) -> float:
        return self.roi if self.roi is not None else 0.0


class Debt(_Entry):
    category: str
    amount: float = 0.0
    interest_rate: Optional[float] = None  # annual %
    monthly_payment: Optional[float] = None

    @field_validator("amount", mode="before")
    @classmethod
    def clamp_amount(cls, v):
        return _money(v)

    @field_validator("interest_rate", mode="before")
    @classmethod
    def clean_rate(cls, v):
        return _optional_rate(v)

    @field_validator("monthly_payment", mode="before")
    @classmethod
    def clean_payment(cls, v):
        return None if v is None else _money(v)

    @property
    def kind(self) -> DebtCategory:
        return DebtCategory.from_label(self.category)

    @property
    def is_mortgage(self) -> bool:
        return self.kind.is_mortgage

    @property
    def annual_rate_pct(self) -> float:
        """Stated rate, else the category's suggested rate."""
        if self.interest_rate is not None:
            return self.interest_rate
        return self.kind.default_rate_pct

    @property
    def effective_payment(self) -> float:
        """Stated payment, else interest-only at the effective rate."""
        if self.monthly_payment is not None:
            return self.monthly_payment
        return self.amount * self.annual_rate_pct / 100.0 / 12.0


class Property(_Entry):
    name: str
    value: float = 0.0
    mortgage: float = 0.0
    interest_rate: Optional[float] = None
    monthly_payment: Optional[float] = None
    amortization_years: Optional[int] = None
    year_purchased: Optional[int] = None
    appreciation: Optional[float] = None  # annual %, negative for depreciating assets

    @field_validator("value", "mortgage", mode="before")
    @classmethod
    def clamp_amounts(cls, v):
        return _money(v)

    @field_validator("interest_rate", mode="before")
    @classmethod
    def clean_rate(cls, v):
        return _optional_rate(v)

    @field_validator("appreciation", mode="before")
    @classmethod
    def clean_appreciation(cls, v):
        return _optional_rate(v, allow_negative=True)

    @field_validator("monthly_payment", mode="before")
    @classmethod
    def clean_payment(cls, v):
        return None if v is None else _money(v)

    @field_validator("amortization_years", mode="before")
    @classmethod
    def positive_term(cls, v):
        if v is None:
            return None
        x = float(v)
        return int(x) if math.isfinite(x) and x > 0 else None

    @property
    def equity(self) -> float:
        return max(0.0, self.value - self.mortgage)


class PriceQuote(BaseModel):
    """A price observation from an external market-data source."""

    model_config = ConfigDict(frozen=True)

    price: float
    timestamp: datetime

    @field_validator("price", mode="before")
    @classmethod
    def clamp_price(cls, v):
        return _money(v)


class StockHolding(_Entry):
    ticker: str
    shares: float = 0.0
    manual_price: Optional[float] = None
    cost_basis: Optional[float] = None
    last_fetched_price: Optional[float] = None
    last_updated: Optional[datetime] = None

    @field_validator("ticker")
    @classmethod
    def upper_ticker(cls, v: str) -> str:
        return v.upper()

    @field_validator("shares", mode="before")
    @classmethod
    def clamp_shares(cls, v):
        return _money(v)

    @field_validator("manual_price", "cost_basis", "last_fetched_price", mode="before")
    @classmethod
    def clean_prices(cls, v):
        return None if v is None else _money(v)

    @property
    def price(self) -> float:
        if self.manual_price is not None:
            return self.manual_price
        if self.last_fetched_price is not None:
            return self.last_fetched_price
        return 0.0

    @property
    def value(self) -> float:
        return self.shares * self.price

    @property
    def unrealized_gain(self) -> Optional[float]:
        if self.cost_basis is None:
            return None
        return self.value - self.shares * self.cost_basis

    def with_quote(self, quote: PriceQuote) -> "StockHolding":
        return self.model_copy(update={"last_fetched_price": quote.price, "last_updated": quote.timestamp})


class IncomeFrequency(str, Enum):
    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    SEMI_ANNUALLY = "semi-annually"
    ANNUALLY = "annually"

    @property
    def per_month(self) -> float:
        return _PER_MONTH[self]


_PER_MONTH = {
    IncomeFrequency.WEEKLY: 52 / 12,
    IncomeFrequency.BIWEEKLY: 26 / 12,
    IncomeFrequency.MONTHLY: 1.0,
    IncomeFrequency.QUARTERLY: 1 / 3,
    IncomeFrequency.SEMI_ANNUALLY: 1 / 6,
    IncomeFrequency.ANNUALLY: 1 / 12,
}


class IncomeItem(_Entry):
    category: str
    amount: float = 0.0
    frequency: IncomeFrequency = IncomeFrequency.MONTHLY
    income_type: IncomeType = IncomeType.EMPLOYMENT

    @field_validator("amount", mode="before")
    @classmethod
    def clamp_amount(cls, v):
        return _money(v)

    @property
    def monthly_amount(self) -> float:
        return self.amount * self.frequency.per_month


class ExpenseItem(_Entry):
    category: str
    amount: float = 0.0  # monthly

    @field_validator("amount", mode="before")
    @classmethod
    def clamp_amount(cls, v):
        return _money(v)


class Goal(_Entry):
    name: str
    target_amount: float = 0.0
    current_amount: float = 0.0

    @field_validator("target_amount", "current_amount", mode="before")
    @classmethod
    def clamp_amounts(cls, v):
        return _money(v)

    @property
    def is_met(self) -> bool:
        return self.current_amount >= self.target_amount
