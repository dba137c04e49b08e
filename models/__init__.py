"""
Snapshot models: frozen pydantic value objects describing a household's
accounts, cash flows and what-if modifications.
"""

from .entries import (
    Asset,
    Debt,
    ExpenseItem,
    Goal,
    IncomeFrequency,
    IncomeItem,
    PriceQuote,
    Property,
    StockHolding,
)
from .state import EMPTY_MODIFICATION, FinancialState, ScenarioModification

__all__ = [
    "Asset",
    "Debt",
    "ExpenseItem",
    "Goal",
    "IncomeFrequency",
    "IncomeItem",
    "PriceQuote",
    "Property",
    "StockHolding",
    "EMPTY_MODIFICATION",
    "FinancialState",
    "ScenarioModification",
]
