"""
Monthly cash flow of a snapshot.

Surplus = after-tax income - expenses - explicit asset contributions.
Debt payments are not deducted here; households record them as expense items.

Tax is applied only when the state carries a jurisdiction. Ordinary income
(employment + other, plus the signed income adjustment) and capital gains are
annualised and taxed as two separate streams.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from core.config import DEFAULT_CONFIG
from models.state import FinancialState
from tax.engine import IncomeType, compute_tax


@dataclass(frozen=True)
class CashFlow:
    monthly_income: float
    monthly_after_tax_income: float
    monthly_expenses: float
    monthly_contributions: float
    annual_tax: float
    surplus: float

    @property
    def monthly_tax(self) -> float:
        return self.annual_tax / 12.0


def _income_split(state: FinancialState):
    ordinary = 0.0
    gains = 0.0
    for item in state.income:
        if item.income_type == IncomeType.CAPITAL_GAINS:
            gains += item.monthly_amount
        else:
            ordinary += item.monthly_amount
    ordinary = max(0.0, ordinary + state.monthly_income_adjustment)
    return ordinary, gains


def monthly_cash_flow(state: FinancialState, year: Optional[int] = None) -> CashFlow:
    """
    Parameters
    ----------
    state : FinancialState
    year : int, optional
        Tax year for the bracket tables (defaults to the engine's tax year).

    Raises
    ------
    UnknownRegionError, UnsupportedYearError
        When the state's jurisdiction cannot be resolved.
    """
    tax_year = DEFAULT_CONFIG.tax_year if year is None else year
    ordinary, gains = _income_split(state)
    income = ordinary + gains

    annual_tax = 0.0
    if state.jurisdiction is not None:
        annual_tax += compute_tax(ordinary * 12, IncomeType.EMPLOYMENT, state.jurisdiction, tax_year).total_tax
        annual_tax += compute_tax(gains * 12, IncomeType.CAPITAL_GAINS, state.jurisdiction, tax_year).total_tax

    after_tax = income - annual_tax / 12.0
    expenses = sum(e.amount for e in state.expenses)
    contributions = sum(a.monthly_contribution for a in state.assets)

    return CashFlow(
        monthly_income=income,
        monthly_after_tax_income=after_tax,
        monthly_expenses=expenses,
        monthly_contributions=contributions,
        annual_tax=annual_tax,
        surplus=after_tax - expenses - contributions,
    )
