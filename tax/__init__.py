"""
Tax package: bracket tables, progressive tax, capital gains inclusion and
jurisdiction-aware income tax.
"""

from .brackets import BracketTable, CapitalGainsSchedule, TaxBracket, build_table
from .calculator import (
    calculate_canadian_capital_gains_inclusion,
    calculate_progressive_tax,
    gross_bracket_tax,
    marginal_rate,
)
from .engine import IncomeType, TaxResult, compute_tax
from .jurisdictions import (
    CanadianBrackets,
    Country,
    Jurisdiction,
    JurisdictionTables,
    USBrackets,
    get_canadian_brackets,
    get_us_brackets,
    get_us_capital_gains_table,
    resolve_jurisdiction,
    supported_regions,
)
from .tables import CURRENT_TAX_YEAR, US_NO_INCOME_TAX_STATES

__all__ = [
    "BracketTable",
    "CapitalGainsSchedule",
    "TaxBracket",
    "build_table",
    "calculate_canadian_capital_gains_inclusion",
    "calculate_progressive_tax",
    "gross_bracket_tax",
    "marginal_rate",
    "IncomeType",
    "TaxResult",
    "compute_tax",
    "CanadianBrackets",
    "Country",
    "Jurisdiction",
    "JurisdictionTables",
    "USBrackets",
    "get_canadian_brackets",
    "get_us_brackets",
    "get_us_capital_gains_table",
    "resolve_jurisdiction",
    "supported_regions",
    "CURRENT_TAX_YEAR",
    "US_NO_INCOME_TAX_STATES",
]
