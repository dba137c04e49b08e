"""
Baseline vs. modified projection.

Both runs are recomputed on every call; nothing is cached.
Delta months are modified - baseline, so a negative value means the
modification clears that debt sooner.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import pandas as pd

from assumptions.scenario import ReturnScenario
from core.config import DEFAULT_CONFIG, EngineConfig
from core.log import get_logger
from engine.runner import ProjectionResult, project_finances
from models.state import FinancialState, ScenarioModification

from .modification import apply_modification

log = get_logger(__name__)


@dataclass(frozen=True)
class NetWorthDelta:
    year: int
    baseline: float
    scenario: float
    delta: float


@dataclass(frozen=True)
class ScenarioComparison:
    baseline: ProjectionResult
    scenario: ProjectionResult
    net_worth_deltas: Tuple[NetWorthDelta, ...]
    debt_free_delta_months: Optional[int]
    consumer_debt_free_delta_months: Optional[int]
    mortgage_free_delta_months: Optional[int]

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame(
            [
                {"year": d.year, "baseline": d.baseline, "scenario": d.scenario, "delta": d.delta}
                for d in self.net_worth_deltas
            ],
            columns=["year", "baseline", "scenario", "delta"],
        )


def _delta(modified: Optional[int], baseline: Optional[int]) -> Optional[int]:
    if modified is None or baseline is None:
        return None
    return modified - baseline


def compare_scenarios(
    state: FinancialState,
    modification: ScenarioModification,
    years: int = 10,
    scenario: ReturnScenario | str = ReturnScenario.MODERATE,
    config: EngineConfig = DEFAULT_CONFIG,
) -> ScenarioComparison:
    """
    Project `state` with and without `modification` and diff the results.

    Net-worth deltas are reported for each of config.report_years that falls
    within the horizon. Errors from either run propagate unchanged.
    """
    baseline = project_finances(state, years, scenario, config)
    modified = project_finances(apply_modification(state, modification), years, scenario, config)

    deltas = []
    for y in config.report_years:
        if not 0 <= y <= years:
            continue
        b = baseline.point_at_year(y).net_worth
        s = modified.point_at_year(y).net_worth
        deltas.append(NetWorthDelta(year=y, baseline=b, scenario=s, delta=s - b))

    result = ScenarioComparison(
        baseline=baseline,
        scenario=modified,
        net_worth_deltas=tuple(deltas),
        debt_free_delta_months=_delta(modified.debt_free_month, baseline.debt_free_month),
        consumer_debt_free_delta_months=_delta(
            modified.consumer_debt_free_month, baseline.consumer_debt_free_month
        ),
        mortgage_free_delta_months=_delta(modified.mortgage_free_month, baseline.mortgage_free_month),
    )
    log.debug(
        "scenario_compared",
        years=years,
        deltas={d.year: d.delta for d in deltas},
        debt_free_delta_months=result.debt_free_delta_months,
    )
    return result
