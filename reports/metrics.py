"""
Snapshot totals and dashboard metrics for a FinancialState (no projection).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

import pandas as pd

from engine.cashflow import monthly_cash_flow
from models.state import FinancialState

RUNWAY_TARGET_MONTHS = 3.0
MAX_HEALTHY_DEBT_TO_ASSET = 1.0


@dataclass(frozen=True)
class SnapshotTotals:
    liquid_assets: float
    stock_value: float
    property_value: float
    property_equity: float
    mortgage_debt: float
    consumer_debt: float
    monthly_income: float
    monthly_after_tax_income: float
    monthly_expenses: float
    monthly_contributions: float

    @property
    def total_debts(self) -> float:
        return self.consumer_debt + self.mortgage_debt

    @property
    def gross_assets(self) -> float:
        return self.liquid_assets + self.stock_value + self.property_value


def compute_totals(state: FinancialState, year: Optional[int] = None) -> SnapshotTotals:
    """
    Sum the snapshot. Debts categorised as Mortgage count as mortgage debt
    alongside property mortgages.
    """
    flow = monthly_cash_flow(state, year)
    return SnapshotTotals(
        liquid_assets=sum(a.amount for a in state.assets) + state.unallocated_cash,
        stock_value=sum(s.value for s in state.stocks),
        property_value=sum(p.value for p in state.properties),
        property_equity=sum(p.equity for p in state.properties),
        mortgage_debt=sum(p.mortgage for p in state.properties)
        + sum(d.amount for d in state.debts if d.is_mortgage),
        consumer_debt=sum(d.amount for d in state.debts if not d.is_mortgage),
        monthly_income=flow.monthly_income,
        monthly_after_tax_income=flow.monthly_after_tax_income,
        monthly_expenses=flow.monthly_expenses,
        monthly_contributions=flow.monthly_contributions,
    )


@dataclass(frozen=True)
class SnapshotMetrics:
    net_worth: float
    monthly_surplus: float
    runway_months: float
    debt_to_asset_ratio: float
    flags: Dict[str, bool] = field(default_factory=dict)

    def to_dataframe(self) -> pd.DataFrame:
        """Convert to a display-friendly table."""
        rows = [
            {"Metric": "Net Worth", "Value": round(self.net_worth, 2), "Unit": "currency",
             "Healthy": self.flags.get("net_worth")},
            {"Metric": "Monthly Surplus", "Value": round(self.monthly_surplus, 2), "Unit": "currency",
             "Healthy": self.flags.get("monthly_surplus")},
            {"Metric": "Financial Runway", "Value": round(self.runway_months, 1), "Unit": "months",
             "Healthy": self.flags.get("runway")},
            {"Metric": "Debt-to-Asset Ratio", "Value": round(self.debt_to_asset_ratio, 2), "Unit": "ratio",
             "Healthy": self.flags.get("debt_to_asset")},
        ]
        return pd.DataFrame(rows)


def compute_metrics(state: FinancialState, year: Optional[int] = None) -> SnapshotMetrics:
    """
    Headline metrics.

    monthly_surplus is after-tax income minus expenses; contributions are
    savings and are not subtracted. Runway is liquid assets over monthly
    expenses (0 when there are no expenses).
    """
    t = compute_totals(state, year)
    net_worth = t.liquid_assets + t.stock_value + t.property_equity - sum(d.amount for d in state.debts)
    surplus = t.monthly_after_tax_income - t.monthly_expenses
    runway = t.liquid_assets / t.monthly_expenses if t.monthly_expenses > 0 else 0.0
    ratio = t.total_debts / t.gross_assets if t.gross_assets > 0 else 0.0

    return SnapshotMetrics(
        net_worth=net_worth,
        monthly_surplus=surplus,
        runway_months=runway,
        debt_to_asset_ratio=ratio,
        flags={
            "net_worth": net_worth >= 0,
            "monthly_surplus": surplus > 0,
            "runway": runway >= RUNWAY_TARGET_MONTHS,
            "debt_to_asset": ratio <= MAX_HEALTHY_DEBT_TO_ASSET,
        },
    )
