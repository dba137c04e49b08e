"""
Net-worth projection runner.

Walks a FinancialState forward month by month (0..years*12). Every account is
stepped independently:

  assets      grow at their scenario-scaled return plus their own contribution;
              the surplus target (or the unallocated cash balance when none is
              named) also receives the positive monthly surplus
  debts       step_balance at their own rate/payment, falling back to the
              category default rate and an interest-only payment
  properties  value compounds at scenario-scaled appreciation; the mortgage
              steps like a debt, paying the suggested level payment when unset
  stocks      held at their static value

The run is a pure function of (state, years, scenario, config).
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import List, Optional, Tuple

import pandas as pd

from assumptions.defaults import default_appreciation
from assumptions.scenario import ReturnScenario
from core.config import DEFAULT_CONFIG, EngineConfig
from core.log import get_logger
from core.utils import annual_pct_to_monthly_rate, month_starts
from models.entries import Property
from models.state import FinancialState

from .amortization import remaining_amortization_years, step_balance, suggest_monthly_payment
from .cashflow import monthly_cash_flow
from .growth import asset_monthly_rate, check_surplus_target, grow

log = get_logger(__name__)


@dataclass(frozen=True)
class ProjectionPoint:
    month: int
    year: float
    total_assets: float
    total_debts: float
    consumer_debts: float
    mortgage_debts: float
    property_equity: float
    net_worth: float


@dataclass(frozen=True)
class Milestone:
    label: str
    month: int
    value: float


@dataclass(frozen=True)
class ProjectionResult:
    points: Tuple[ProjectionPoint, ...]
    debt_free_month: Optional[int]
    consumer_debt_free_month: Optional[int]
    mortgage_free_month: Optional[int]
    milestones: Tuple[Milestone, ...]
    monthly_surplus: float = 0.0

    def point_at_year(self, year: int) -> Optional[ProjectionPoint]:
        month = int(year) * 12
        if 0 <= month < len(self.points):
            return self.points[month]
        return None

    def to_dataframe(self, start=None) -> pd.DataFrame:
        """One row per month; adds a month-start `date` column when `start` is given."""
        df = pd.DataFrame([asdict(p) for p in self.points])
        if start is not None and len(df):
            df.insert(0, "date", month_starts(pd.Timestamp(start), len(df)))
        return df


def milestone_label(value: float) -> str:
    """100_000 -> '$100k', 1_000_000 -> '$1M', 2_500_000 -> '$2.5M'."""
    if value >= 1_000_000:
        millions = value / 1_000_000
        return f"${millions:.0f}M" if value % 1_000_000 == 0 else f"${millions:.1f}M"
    return f"${value / 1_000:.0f}k"


def _property_appreciation(p: Property) -> float:
    if p.appreciation is not None:
        return p.appreciation
    return default_appreciation(p.name) or 0.0


def _mortgage_terms(p: Property, config: EngineConfig) -> Tuple[float, float]:
    """(monthly_rate, monthly_payment) for a property's mortgage."""
    rate_pct = p.interest_rate if p.interest_rate is not None else config.default_mortgage_rate_pct
    if p.monthly_payment is not None:
        payment = p.monthly_payment
    else:
        years_left = remaining_amortization_years(
            p.amortization_years,
            p.year_purchased,
            config.as_of_year,
            default_years=config.default_amortization_years,
        )
        payment = suggest_monthly_payment(p.mortgage, rate_pct, years_left)
    return annual_pct_to_monthly_rate(rate_pct), payment


def project_finances(
    state: FinancialState,
    years: int,
    scenario: ReturnScenario | str = ReturnScenario.MODERATE,
    config: EngineConfig = DEFAULT_CONFIG,
) -> ProjectionResult:
    """
    Project net worth month by month.

    Parameters
    ----------
    state : FinancialState
        Snapshot at month 0.
    years : int
        Horizon in whole years, 0..config.max_projection_years.
    scenario : ReturnScenario or str
        Return multiplier for assets and property appreciation.
    config : EngineConfig
        Tax year, milestone thresholds, mortgage defaults.

    Returns
    -------
    ProjectionResult with years*12 + 1 points.

    Raises
    ------
    ValueError
        Horizon out of range or unknown surplus target.
    KeyError
        Unknown scenario name.
    UnknownRegionError, UnsupportedYearError
        Jurisdiction cannot be resolved for after-tax surplus.
    """
    if int(years) != years or not 0 <= years <= config.max_projection_years:
        raise ValueError(
            f"years must be an integer in [0, {config.max_projection_years}], got {years!r}"
        )
    sc = ReturnScenario.parse(scenario)
    check_surplus_target(state.assets, state.surplus_target_id)

    cash_flow = monthly_cash_flow(state, config.tax_year)
    surplus = max(cash_flow.surplus, 0.0)
    total_months = int(years) * 12

    log.debug(
        "projection_start",
        years=int(years),
        scenario=sc.value,
        n_assets=len(state.assets),
        n_debts=len(state.debts),
        n_properties=len(state.properties),
        monthly_surplus=cash_flow.surplus,
    )

    # assets: [balance, monthly_rate, inflow]
    assets = []
    for a in state.assets:
        inflow = a.monthly_contribution + (surplus if a.id == state.surplus_target_id else 0.0)
        assets.append([a.amount, asset_monthly_rate(a, sc), inflow])
    cash = state.unallocated_cash
    cash_inflow = surplus if state.surplus_target_id is None else 0.0

    # debts: [balance, monthly_rate, payment, is_mortgage]
    debts = [
        [d.amount, annual_pct_to_monthly_rate(d.annual_rate_pct), d.effective_payment, d.is_mortgage]
        for d in state.debts
    ]

    # properties: [value, appreciation_rate, mortgage, mortgage_rate, payment]
    props = []
    for p in state.properties:
        m_rate, payment = _mortgage_terms(p, config)
        appreciation = annual_pct_to_monthly_rate(sc.scale(_property_appreciation(p)))
        props.append([p.value, appreciation, p.mortgage, m_rate, payment])

    stocks_total = sum(s.value for s in state.stocks)
    tolerance = config.payoff_tolerance

    points: List[ProjectionPoint] = []
    milestones: List[Milestone] = []
    pending = sorted(config.milestone_thresholds)
    debt_free = consumer_free = mortgage_free = None

    for m in range(total_months + 1):
        asset_total = sum(a[0] for a in assets) + cash + stocks_total
        consumer = sum(d[0] for d in debts if not d[3])
        mortgage_debt = sum(d[0] for d in debts if d[3])
        prop_mortgage = sum(p[2] for p in props)
        equity = sum(max(0.0, p[0] - p[2]) for p in props)
        net_worth = asset_total + equity - consumer - mortgage_debt

        points.append(
            ProjectionPoint(
                month=m,
                year=round(m / 12, 1),
                total_assets=asset_total,
                total_debts=consumer + mortgage_debt + prop_mortgage,
                consumer_debts=consumer,
                mortgage_debts=mortgage_debt + prop_mortgage,
                property_equity=equity,
                net_worth=net_worth,
            )
        )

        while pending and net_worth >= pending[0]:
            threshold = pending.pop(0)
            milestones.append(Milestone(label=milestone_label(threshold), month=m, value=threshold))

        consumer_clear = consumer <= tolerance
        mortgage_clear = mortgage_debt + prop_mortgage <= tolerance
        if consumer_free is None and consumer_clear:
            consumer_free = m
        if mortgage_free is None and mortgage_clear:
            mortgage_free = m
        if debt_free is None and consumer_clear and mortgage_clear:
            debt_free = m

        if m == total_months:
            break

        for a in assets:
            a[0] = grow(a[0], a[1], a[2])
        cash += cash_inflow
        for d in debts:
            d[0], _ = step_balance(d[0], d[1], d[2])
        for p in props:
            p[0] = grow(p[0], p[1], 0.0)
            p[2], _ = step_balance(p[2], p[3], p[4])

    return ProjectionResult(
        points=tuple(points),
        debt_free_month=debt_free,
        consumer_debt_free_month=consumer_free,
        mortgage_free_month=mortgage_free,
        milestones=tuple(milestones),
        monthly_surplus=cash_flow.surplus,
    )
