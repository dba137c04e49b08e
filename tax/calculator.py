"""
Progressive tax arithmetic over a BracketTable.

All functions are total: NaN / negative income behaves as zero and an empty
table (no income tax) contributes nothing.
"""

from __future__ import annotations

import math

from .brackets import BracketTable
from .tables import CA_CAPITAL_GAINS


def _taxable(income: float) -> float:
    x = float(income)
    if not math.isfinite(x):
        # +inf income is not a meaningful input either
        return 0.0
    return max(x, 0.0)


def gross_bracket_tax(taxable_income: float, table: BracketTable) -> float:
    """Sum of per-band tax before any basic personal amount credit."""
    income = _taxable(taxable_income)
    if income <= 0 or table.is_empty:
        return 0.0
    return sum(b.span(income) * b.rate for b in table.brackets)


def calculate_progressive_tax(taxable_income: float, table: BracketTable) -> float:
    """
    Progressive tax net of the BPA credit.

    Parameters
    ----------
    taxable_income : float
        Annual taxable income. Values <= 0 (or NaN) yield 0.
    table : BracketTable
        Validated bracket table; an empty table yields 0.

    Returns
    -------
    float
        max(0, gross - BPA x lowest rate). Never negative.
    """
    gross = gross_bracket_tax(taxable_income, table)
    if gross <= 0:
        return 0.0
    return max(0.0, gross - table.bpa_credit)


def marginal_rate(taxable_income: float, table: BracketTable) -> float:
    """Rate of the band containing `taxable_income` (0 for no income or no tax)."""
    income = _taxable(taxable_income)
    if income <= 0 or table.is_empty:
        return 0.0
    for b in table.brackets:
        if income <= b.upper:
            return b.rate
    return table.brackets[-1].rate


def calculate_canadian_capital_gains_inclusion(gain: float) -> float:
    """
    Taxable portion of a Canadian capital gain.
    First 250k of the gain at 50%, the excess at 2/3.
    """
    g = _taxable(gain)
    if g <= 0:
        return 0.0
    s = CA_CAPITAL_GAINS
    first = min(g, s.first_tier_limit)
    excess = max(g - s.first_tier_limit, 0.0)
    return first * s.first_tier_rate + excess * s.second_tier_rate
