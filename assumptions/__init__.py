"""
Assumptions: return scenarios and the closed category -> default-rate tables
used when a snapshot leaves a rate unset.
"""

from .defaults import (
    AssetCategory,
    DebtCategory,
    default_appreciation,
    default_asset_return,
    default_debt_rate,
)
from .scenario import ReturnScenario

__all__ = [
    "AssetCategory",
    "DebtCategory",
    "ReturnScenario",
    "default_appreciation",
    "default_asset_return",
    "default_debt_rate",
]
