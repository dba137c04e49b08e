"""
Jurisdiction-aware income tax for one income stream.

Canada: capital gains are converted to taxable income via the inclusion
schedule, then taxed federally and provincially with BPA credits.
United States: the federal standard deduction is subtracted from income
(not credited); long-term capital gains use their own federal table and are
taxed as ordinary income by the state.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from .calculator import (
    calculate_canadian_capital_gains_inclusion,
    calculate_progressive_tax,
    gross_bracket_tax,
    marginal_rate,
)
from .jurisdictions import (
    Country,
    Jurisdiction,
    get_canadian_brackets,
    get_us_brackets,
    get_us_capital_gains_table,
)
from .tables import CA_CAPITAL_GAINS, CURRENT_TAX_YEAR


class IncomeType(str, Enum):
    EMPLOYMENT = "employment"
    CAPITAL_GAINS = "capital-gains"
    OTHER = "other"


@dataclass(frozen=True)
class TaxResult:
    federal_tax: float = 0.0
    regional_tax: float = 0.0
    total_tax: float = 0.0
    effective_rate: float = 0.0
    after_tax_income: float = 0.0
    marginal_rate: float = 0.0


def _canadian(income: float, income_type: IncomeType, region: str, year: int) -> TaxResult:
    tables = get_canadian_brackets(region, year)
    is_gain = income_type == IncomeType.CAPITAL_GAINS
    taxable = calculate_canadian_capital_gains_inclusion(income) if is_gain else income

    federal = calculate_progressive_tax(taxable, tables.federal)
    provincial = calculate_progressive_tax(taxable, tables.provincial)

    marginal = marginal_rate(taxable, tables.federal) + marginal_rate(taxable, tables.provincial)
    if is_gain:
        s = CA_CAPITAL_GAINS
        marginal *= s.first_tier_rate if income <= s.first_tier_limit else s.second_tier_rate

    return _result(income, federal, provincial, marginal)


def _american(income: float, income_type: IncomeType, region: str, year: int) -> TaxResult:
    tables = get_us_brackets(region, year)
    state = calculate_progressive_tax(income, tables.state)
    state_marginal = marginal_rate(income, tables.state)

    if income_type == IncomeType.CAPITAL_GAINS:
        ltcg = get_us_capital_gains_table(year)
        federal = calculate_progressive_tax(income, ltcg)
        federal_marginal = marginal_rate(income, ltcg)
    else:
        deduction = tables.federal.basic_personal_amount
        taxable = max(0.0, income - deduction)
        federal = gross_bracket_tax(taxable, tables.federal)
        federal_marginal = marginal_rate(taxable, tables.federal)

    return _result(income, federal, state, federal_marginal + state_marginal)


def _result(income: float, federal: float, regional: float, marginal: float) -> TaxResult:
    total = federal + regional
    return TaxResult(
        federal_tax=federal,
        regional_tax=regional,
        total_tax=total,
        effective_rate=total / income if income > 0 else 0.0,
        after_tax_income=income - total,
        marginal_rate=marginal,
    )


def compute_tax(
    annual_income: float,
    income_type: IncomeType | str,
    jurisdiction: Jurisdiction,
    year: int = CURRENT_TAX_YEAR,
) -> TaxResult:
    """
    Federal + regional tax on one annual income stream.

    Parameters
    ----------
    annual_income : float
        Gross annual amount. <= 0 (or NaN) returns an all-zero result.
    income_type : IncomeType or str
        "employment", "capital-gains" or "other".
    jurisdiction : Jurisdiction
        Country + province/state.
    year : int
        Tax year; only tabulated years are accepted.

    Raises
    ------
    UnknownRegionError, UnsupportedYearError
        Propagated from table resolution, even for zero income.
    """
    kind = IncomeType(income_type)
    income = float(annual_income)
    if not math.isfinite(income) or income <= 0:
        # a bad jurisdiction raises even for zero income
        _resolve_only(jurisdiction, year)
        return TaxResult()

    if jurisdiction.country == Country.CA:
        return _canadian(income, kind, jurisdiction.region, year)
    return _american(income, kind, jurisdiction.region, year)


def _resolve_only(jurisdiction: Jurisdiction, year: int) -> None:
    if jurisdiction.country == Country.CA:
        get_canadian_brackets(jurisdiction.region, year)
    else:
        get_us_brackets(jurisdiction.region, year)
