"""
Projection engine: amortization, asset growth, cash flow and the monthly
net-worth runner.
"""

from .amortization import (
    AmortizationYear,
    DebtPayoffResult,
    MortgageSchedule,
    calculate_debt_payoff,
    calculate_mortgage_schedule,
    level_payment,
    mortgage_breakdown,
    remaining_amortization_years,
    step_balance,
    suggest_monthly_payment,
)
from .cashflow import CashFlow, monthly_cash_flow
from .downsample import downsample_points
from .growth import AssetProjection, project_assets
from .runner import Milestone, ProjectionPoint, ProjectionResult, project_finances

__all__ = [
    "AmortizationYear",
    "DebtPayoffResult",
    "MortgageSchedule",
    "calculate_debt_payoff",
    "calculate_mortgage_schedule",
    "level_payment",
    "mortgage_breakdown",
    "remaining_amortization_years",
    "step_balance",
    "suggest_monthly_payment",
    "CashFlow",
    "monthly_cash_flow",
    "downsample_points",
    "AssetProjection",
    "project_assets",
    "Milestone",
    "ProjectionPoint",
    "ProjectionResult",
    "project_finances",
]
