"""
FinancialState (the full snapshot handed to the engine) and
ScenarioModification (a what-if delta applied to it).
"""

from __future__ import annotations

from typing import Dict, FrozenSet, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.utils import clamp_money, finite_or_zero
from tax.jurisdictions import Jurisdiction

from .entries import Asset, Debt, ExpenseItem, Goal, IncomeItem, Property, StockHolding


class FinancialState(BaseModel):
    """
    One household snapshot.

    `surplus_target_id` names the asset that receives positive monthly surplus
    (and any windfall) during projection. When it is None, surplus accumulates
    in an unallocated cash balance that earns nothing.

    When `jurisdiction` is set, income items are gross and are taxed before the
    surplus is computed. When it is None, income is taken as already net.
    """

    model_config = ConfigDict(frozen=True)

    assets: Tuple[Asset, ...] = ()
    debts: Tuple[Debt, ...] = ()
    income: Tuple[IncomeItem, ...] = ()
    expenses: Tuple[ExpenseItem, ...] = ()
    goals: Tuple[Goal, ...] = ()
    properties: Tuple[Property, ...] = ()
    stocks: Tuple[StockHolding, ...] = ()

    surplus_target_id: Optional[str] = None
    jurisdiction: Optional[Jurisdiction] = None

    # signed monthly delta on top of the income items (what-if adjustments)
    monthly_income_adjustment: float = 0.0
    # one-time cash on hand not held in any listed asset
    unallocated_cash: float = 0.0

    @field_validator("monthly_income_adjustment", mode="before")
    @classmethod
    def finite_adjustment(cls, v):
        return finite_or_zero(v)

    @field_validator("unallocated_cash", mode="before")
    @classmethod
    def clamp_cash(cls, v):
        return clamp_money(v)

    def asset_by_id(self, asset_id: str) -> Optional[Asset]:
        for a in self.assets:
            if a.id == asset_id:
                return a
        return None


class ScenarioModification(BaseModel):
    """
    What-if delta. The default instance is the identity modification.

    windfall is a one-time month-0 inflow into the surplus target (or the
    unallocated cash balance when the state names no target).
    """

    model_config = ConfigDict(frozen=True)

    excluded_debt_ids: FrozenSet[str] = Field(default_factory=frozenset)
    contribution_overrides: Dict[str, float] = Field(default_factory=dict)
    income_adjustment: float = 0.0
    windfall: float = 0.0

    @field_validator("income_adjustment", mode="before")
    @classmethod
    def finite_adjustment(cls, v):
        return finite_or_zero(v)

    @field_validator("windfall", mode="before")
    @classmethod
    def clamp_windfall(cls, v):
        return clamp_money(v)

    @field_validator("contribution_overrides", mode="before")
    @classmethod
    def clamp_overrides(cls, v):
        return {str(k): clamp_money(x) for k, x in dict(v or {}).items()}

    @property
    def is_identity(self) -> bool:
        return (
            not self.excluded_debt_ids
            and not self.contribution_overrides
            and self.income_adjustment == 0
            and self.windfall == 0
        )


EMPTY_MODIFICATION = ScenarioModification()
