"""
Age-group benchmarks for CA and US households, keyed by survey year.

Canada: Statistics Canada, Survey of Financial Security (SFS) 2023 (CAD)
United States: Federal Reserve, Survey of Consumer Finances (SCF) 2022 (USD)

Values stay in local currency; no conversion is applied. New surveys are added
as new year keys.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Tuple

import pandas as pd

from core.errors import UnsupportedYearError
from models.state import FinancialState
from tax.jurisdictions import Country

from .metrics import compute_metrics, compute_totals


@dataclass(frozen=True)
class AgeGroupBenchmark:
    age_min: int
    age_max: int
    label: str
    median_net_worth: float
    median_savings_rate: float  # decimal, 0.10 = 10%
    median_debt_to_income: float
    recommended_emergency_months: int

    def covers(self, age: int) -> bool:
        return self.age_min <= age <= self.age_max


def _groups(rows) -> Tuple[AgeGroupBenchmark, ...]:
    return tuple(AgeGroupBenchmark(*row) for row in rows)


#   age_min, age_max, label, median net worth, savings rate, debt-to-income, emergency months
CA_BENCHMARKS_2023 = _groups([
    (18, 24, "18-24", 5_000, 0.05, 0.3, 3),
    (25, 34, "25-34", 48_800, 0.10, 1.5, 3),
    (35, 44, "35-44", 234_400, 0.12, 1.7, 4),
    (45, 54, "45-54", 351_400, 0.15, 1.3, 5),
    (55, 64, "55-64", 543_200, 0.18, 0.8, 6),
    (65, 120, "65+", 543_600, 0.20, 0.3, 6),
])

US_BENCHMARKS_2022 = _groups([
    (18, 24, "18-24", 8_000, 0.05, 0.4, 3),
    (25, 34, "25-34", 39_000, 0.10, 1.3, 3),
    (35, 44, "35-44", 135_600, 0.12, 1.5, 4),
    (45, 54, "45-54", 247_200, 0.15, 1.1, 5),
    (55, 64, "55-64", 364_500, 0.18, 0.7, 6),
    (65, 120, "65+", 409_900, 0.20, 0.3, 6),
])

BENCHMARKS: Dict[Country, Dict[int, Tuple[AgeGroupBenchmark, ...]]] = {
    Country.CA: {2023: CA_BENCHMARKS_2023},
    Country.US: {2022: US_BENCHMARKS_2022},
}

DATA_SOURCES: Dict[Country, str] = {
    Country.CA: "Statistics Canada, Survey of Financial Security (SFS) 2023",
    Country.US: "Federal Reserve, Survey of Consumer Finances (SCF) 2022",
}


def _country(country: Country | str) -> Country:
    return Country(str(country.value if isinstance(country, Country) else country).upper())


def _survey(surveys: Mapping[int, Tuple[AgeGroupBenchmark, ...]], year: Optional[int]):
    if year is None:
        return surveys[max(surveys)]
    if year not in surveys:
        raise UnsupportedYearError(
            f"No benchmark survey for year {year}. Available: {sorted(surveys)}"
        )
    return surveys[year]


def benchmarks_for_country(
    country: Country | str, survey_year: Optional[int] = None
) -> Tuple[AgeGroupBenchmark, ...]:
    """All age groups for `country`; the latest survey unless `survey_year` is given."""
    return _survey(BENCHMARKS[_country(country)], survey_year)


def benchmark_for_age(
    age: int, country: Country | str, survey_year: Optional[int] = None
) -> Optional[AgeGroupBenchmark]:
    """The age group containing `age`, or None outside 18..120."""
    for group in benchmarks_for_country(country, survey_year):
        if group.covers(age):
            return group
    return None


@dataclass(frozen=True)
class BenchmarkComparison:
    metric: str
    user_value: float
    benchmark_value: float
    unit: str  # currency | percent | months | ratio
    above_benchmark: bool  # at or better than the benchmark
    message: str


def _fmt_currency(n: float) -> str:
    a = abs(n)
    if a >= 1_000_000:
        return f"${n / 1_000_000:.1f}M"
    if a >= 1_000:
        return f"${n / 1_000:.0f}k"
    return f"${n:.0f}"


def compute_benchmark_comparisons(
    age: int,
    country: Country | str,
    net_worth: float,
    savings_rate: float,
    emergency_months: float,
    debt_to_income: float,
    survey_year: Optional[int] = None,
) -> List[BenchmarkComparison]:
    """
    Compare a household against the median of its age group.

    Parameters
    ----------
    age : int
    country : Country or str
    net_worth : float
    savings_rate : float
        Monthly surplus over monthly income, as a decimal.
    emergency_months : float
        Months of expenses covered by liquid assets.
    debt_to_income : float
        Total debts over annual income. Lower is better.
    survey_year : int, optional

    Returns
    -------
    list of BenchmarkComparison
        Net worth, savings rate, emergency fund and debt-to-income, in that
        order. Empty when no age group covers `age`.
    """
    b = benchmark_for_age(age, country, survey_year)
    if b is None:
        return []

    nw_ok = net_worth >= b.median_net_worth
    sr_ok = savings_rate >= b.median_savings_rate
    ef_ok = emergency_months >= b.recommended_emergency_months
    di_ok = debt_to_income <= b.median_debt_to_income

    return [
        BenchmarkComparison(
            "Net Worth", net_worth, b.median_net_worth, "currency", nw_ok,
            f"Your net worth is above the median for your age group ({b.label}). Great progress!"
            if nw_ok else
            f"The median net worth for the {b.label} age group is "
            f"{_fmt_currency(b.median_net_worth)}. You're building toward it.",
        ),
        BenchmarkComparison(
            "Savings Rate", savings_rate, b.median_savings_rate, "percent", sr_ok,
            "Your savings rate is above the median for your age group. Keep it up!"
            if sr_ok else
            f"A {b.median_savings_rate:.0%} savings rate is a solid target for your age group.",
        ),
        BenchmarkComparison(
            "Emergency Fund", emergency_months, b.recommended_emergency_months, "months", ef_ok,
            f"You have more than the recommended {b.recommended_emergency_months} months "
            "of emergency fund. Well done!"
            if ef_ok else
            f"Building toward {b.recommended_emergency_months} months of expenses is a great "
            "goal for your age group.",
        ),
        BenchmarkComparison(
            "Debt-to-Income", debt_to_income, b.median_debt_to_income, "ratio", di_ok,
            "Your debt-to-income ratio is better than the median for your age group."
            if di_ok else
            f"A debt-to-income ratio around {b.median_debt_to_income:.1f} is typical for your "
            "age group; mortgages and student loans are normal.",
        ),
    ]


def compare_state_to_benchmarks(
    state: FinancialState,
    age: int,
    country: Country | str | None = None,
    year: Optional[int] = None,
) -> List[BenchmarkComparison]:
    """
    Benchmark comparisons computed from a snapshot.

    The country defaults to the state's jurisdiction. Savings rate is the
    dashboard surplus over after-tax income; debt-to-income is all debts
    (mortgages included) over gross annual income. Both are 0 without income.
    """
    if country is None:
        if state.jurisdiction is None:
            raise ValueError("country is required when the state has no jurisdiction")
        country = state.jurisdiction.country

    totals = compute_totals(state, year)
    metrics = compute_metrics(state, year)
    after_tax = totals.monthly_after_tax_income
    annual_income = totals.monthly_income * 12.0

    return compute_benchmark_comparisons(
        age,
        country,
        net_worth=metrics.net_worth,
        savings_rate=metrics.monthly_surplus / after_tax if after_tax > 0 else 0.0,
        emergency_months=metrics.runway_months,
        debt_to_income=totals.total_debts / annual_income if annual_income > 0 else 0.0,
    )


def comparisons_to_dataframe(comparisons: List[BenchmarkComparison]) -> pd.DataFrame:
    """Metric / Value / Benchmark / Unit table for display."""
    return pd.DataFrame(
        [
            {"Metric": c.metric, "Value": c.user_value, "Benchmark": c.benchmark_value,
             "Unit": c.unit, "At or above": c.above_benchmark}
            for c in comparisons
        ],
        columns=["Metric", "Value", "Benchmark", "Unit", "At or above"],
    )
