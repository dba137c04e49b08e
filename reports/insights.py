"""
Plain-language insights for the snapshot dashboard.

Each rule emits at most one insight. Order is fixed: runway, surplus,
savings rate, debt interest, tax, net worth.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from engine.cashflow import monthly_cash_flow
from models.state import FinancialState
from tax.engine import IncomeType

from .metrics import compute_metrics, compute_totals

HIGH_INTEREST_PCT = 15.0
HIGH_EFFECTIVE_TAX_RATE = 0.30


class InsightType(str, Enum):
    RUNWAY = "runway"
    SURPLUS = "surplus"
    SAVINGS_RATE = "savings-rate"
    DEBT_INTEREST = "debt-interest"
    TAX = "tax"
    NET_WORTH = "net-worth"


@dataclass(frozen=True)
class Insight:
    id: str
    type: InsightType
    message: str


def _dollars(amount: float) -> str:
    return f"${abs(amount):,.0f}"


def _runway(months_covered: float) -> Optional[Insight]:
    months = int(months_covered)
    if months >= 12:
        return Insight("runway-strong", InsightType.RUNWAY,
                       f"That's about {months} months of expenses covered, a strong safety net.")
    if months >= 3:
        return Insight("runway-solid", InsightType.RUNWAY,
                       f"About {months} months of expenses covered. You're building a solid buffer.")
    if months >= 1:
        plural = "s" if months > 1 else ""
        return Insight("runway-building", InsightType.RUNWAY,
                       f"About {months} month{plural} of expenses covered. Every bit of savings "
                       "strengthens your safety net.")
    return None


def _surplus(surplus: float, income: float) -> Optional[Insight]:
    cents = round(surplus, 2)
    if cents > 0:
        return Insight("surplus-positive", InsightType.SURPLUS,
                       f"You're spending less than you earn each month; that {_dollars(surplus)} "
                       "surplus is building your future.")
    if cents == 0 and income > 0:
        return Insight("surplus-balanced", InsightType.SURPLUS,
                       "You're breaking even each month. Small adjustments could start building surplus.")
    return None


def _savings_rate(rate_pct: float) -> Optional[Insight]:
    if rate_pct >= 20:
        return Insight("savings-rate-great", InsightType.SAVINGS_RATE,
                       f"You're saving {rate_pct:.0f}% of your income. That's excellent financial discipline.")
    if rate_pct >= 10:
        return Insight("savings-rate-good", InsightType.SAVINGS_RATE,
                       f"You're saving {rate_pct:.0f}% of your income, a healthy habit that adds up over time.")
    return None


def _debt_interest(state: FinancialState) -> Optional[Insight]:
    charging = [d for d in state.debts if d.annual_rate_pct > 0 and d.amount > 0]
    if not charging:
        return None
    # first listed wins a tie
    highest = max(charging, key=lambda d: d.annual_rate_pct)
    rate = highest.annual_rate_pct
    if rate >= HIGH_INTEREST_PCT:
        return Insight("debt-high-interest", InsightType.DEBT_INTEREST,
                       f"Your {highest.category} has a {rate:g}% interest rate. Paying this down "
                       "first could save you the most in interest costs.")
    if len(charging) >= 2:
        return Insight("debt-priority", InsightType.DEBT_INTEREST,
                       f"Focus extra payments on your {highest.category} ({rate:g}% APR) first. "
                       "The avalanche method saves the most on interest.")
    return None


def _tax(effective_rate: float, annual_tax: float, has_capital_gains: bool) -> Optional[Insight]:
    if effective_rate <= 0:
        return None
    pct = f"{effective_rate * 100:.1f}%"
    if has_capital_gains:
        return Insight("tax-capital-gains", InsightType.TAX,
                       f"Your effective tax rate is {pct}. Capital gains income is taxed at a lower "
                       "rate than employment income.")
    if effective_rate > HIGH_EFFECTIVE_TAX_RATE:
        return Insight("tax-rate-high", InsightType.TAX,
                       f"Your effective tax rate is {pct}. Tax-advantaged accounts (TFSA, RRSP, 401k) "
                       "can help reduce your tax burden.")
    if annual_tax > 0:
        return Insight("tax-rate-info", InsightType.TAX,
                       f"Your effective tax rate is {pct}, about {_dollars(annual_tax)} annually "
                       "in estimated taxes.")
    return None


def _net_worth(net_worth: float, gross_assets: float) -> Optional[Insight]:
    if net_worth > 0:
        return Insight("networth-positive", InsightType.NET_WORTH,
                       f"Your net worth is positive at {_dollars(net_worth)}. Your assets outweigh your debts.")
    if net_worth < 0 and gross_assets > 0:
        return Insight("networth-growing", InsightType.NET_WORTH,
                       "Your debts currently exceed your assets. This is common with mortgages and "
                       "loans, and every payment brings you closer to positive net worth.")
    return None


def generate_insights(state: FinancialState, year: Optional[int] = None) -> List[Insight]:
    """
    Insights for a snapshot.

    Runway and savings rate use expenses without contributions, matching
    compute_metrics. The surplus insight uses the cash-flow surplus, which
    does subtract contributions. The effective tax rate is annual tax over
    gross annual income.
    """
    flow = monthly_cash_flow(state, year)
    totals = compute_totals(state, year)
    metrics = compute_metrics(state, year)

    income = flow.monthly_after_tax_income
    rate_pct = metrics.monthly_surplus / income * 100 if income > 0 else 0.0
    gross_annual = flow.monthly_income * 12.0
    effective = flow.annual_tax / gross_annual if gross_annual > 0 else 0.0
    has_gains = any(i.income_type == IncomeType.CAPITAL_GAINS for i in state.income)

    found = [
        _runway(metrics.runway_months),
        _surplus(flow.surplus, income),
        _savings_rate(rate_pct),
        _debt_interest(state),
        _tax(effective, flow.annual_tax, has_gains),
        _net_worth(metrics.net_worth, totals.gross_assets),
    ]
    return [i for i in found if i is not None]
