"""
Suggested rates for entries the user left blank.

Debt and asset categories are closed enumerations. A free-form label is mapped
onto them with `from_label`, which falls back to OTHER (0%) for anything
unrecognized.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Dict, Optional


class DebtCategory(str, Enum):
    MORTGAGE = "Mortgage"
    CAR_LOAN = "Car Loan"
    STUDENT_LOAN = "Student Loan"
    CREDIT_CARD = "Credit Card"
    LINE_OF_CREDIT = "Line of Credit"
    PERSONAL_LOAN = "Personal Loan"
    OTHER = "Other"

    @classmethod
    def from_label(cls, label: Optional[str]) -> "DebtCategory":
        return _lookup_label(cls, label)

    @property
    def default_rate_pct(self) -> float:
        return _DEBT_RATES[self]

    @property
    def is_mortgage(self) -> bool:
        return self is DebtCategory.MORTGAGE


class AssetCategory(str, Enum):
    SAVINGS = "Savings"
    SAVINGS_ACCOUNT = "Savings Account"
    CHECKING = "Checking"
    TFSA = "TFSA"
    RRSP = "RRSP"
    RESP = "RESP"
    FHSA = "FHSA"
    LIRA = "LIRA"
    K401 = "401k"
    IRA = "IRA"
    ROTH_IRA = "Roth IRA"
    BROKERAGE = "Brokerage"
    PLAN_529 = "529"
    HSA = "HSA"
    OTHER = "Other"

    @classmethod
    def from_label(cls, label: Optional[str]) -> "AssetCategory":
        return _lookup_label(cls, label)

    @property
    def default_return_pct(self) -> float:
        return _ASSET_RETURNS[self]


_DEBT_RATES: Dict[DebtCategory, float] = {
    DebtCategory.MORTGAGE: 5.0,
    DebtCategory.CAR_LOAN: 6.0,
    DebtCategory.STUDENT_LOAN: 5.5,
    DebtCategory.CREDIT_CARD: 19.9,
    DebtCategory.LINE_OF_CREDIT: 9.0,
    DebtCategory.PERSONAL_LOAN: 10.0,
    DebtCategory.OTHER: 0.0,
}

# Long-run nominal return suggestions, % per year
_ASSET_RETURNS: Dict[AssetCategory, float] = {
    AssetCategory.K401: 7.0,
    AssetCategory.IRA: 7.0,
    AssetCategory.ROTH_IRA: 7.0,
    AssetCategory.BROKERAGE: 7.0,
    AssetCategory.TFSA: 5.0,
    AssetCategory.RRSP: 5.0,
    AssetCategory.RESP: 5.0,
    AssetCategory.FHSA: 5.0,
    AssetCategory.LIRA: 5.0,
    AssetCategory.SAVINGS: 2.0,
    AssetCategory.SAVINGS_ACCOUNT: 2.0,
    AssetCategory.CHECKING: 0.5,
    AssetCategory.PLAN_529: 6.0,
    AssetCategory.HSA: 6.0,
    AssetCategory.OTHER: 0.0,
}


def _lookup_label(enum_cls, label):
    if label is None:
        return enum_cls.OTHER
    key = str(label).strip().lower()
    for member in enum_cls:
        if member.value.lower() == key:
            return member
    return enum_cls.OTHER


def default_debt_rate(label: Optional[str]) -> float:
    """Suggested annual rate (%) for a debt category label; 0 when unrecognized."""
    return DebtCategory.from_label(label).default_rate_pct


def default_asset_return(label: Optional[str]) -> float:
    """Suggested annual return (%) for an asset category label; 0 when unrecognized."""
    return AssetCategory.from_label(label).default_return_pct


_HOME_RE = re.compile(r"\b(home|house|condo|townhouse|apartment|duplex|triplex|rental|cottage|cabin)\b")
_VEHICLE_RE = re.compile(r"\b(car|vehicle|truck|suv|van|motorcycle|boat)\b")


def default_appreciation(name: str) -> Optional[float]:
    """
    Suggested annual appreciation (%) from a property's name.
    Real estate +3, vehicles -15, anything else None (no suggestion).
    """
    lower = (name or "").lower()
    if _HOME_RE.search(lower):
        return 3.0
    if _VEHICLE_RE.search(lower):
        return -15.0
    return None
