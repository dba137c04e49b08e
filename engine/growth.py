"""
Per-asset growth under a return scenario.

Monthly step: balance = balance * (1 + annual_pct * multiplier / 1200) + inflow

The inflow is the asset's own contribution; the single surplus target also
receives the positive monthly surplus. Assets never share an accumulator, so
each balance depends only on its own inputs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence

import numpy as np

from assumptions.scenario import ReturnScenario
from core.utils import annual_pct_to_monthly_rate
from models.entries import Asset


@dataclass(frozen=True)
class AssetProjection:
    asset_id: str
    category: str
    current_value: float
    milestone_values: Dict[int, float]


def grow(balance: float, monthly_rate: float, inflow: float) -> float:
    return balance * (1.0 + monthly_rate) + inflow


def asset_monthly_rate(asset: Asset, scenario: ReturnScenario) -> float:
    return annual_pct_to_monthly_rate(scenario.scale(asset.annual_return_pct))


def check_surplus_target(assets: Iterable[Asset], surplus_target_id: Optional[str]) -> None:
    if surplus_target_id is None:
        return
    ids = [a.id for a in assets]
    if surplus_target_id not in ids:
        raise ValueError(f"Unknown surplus target '{surplus_target_id}'. Available: {ids}")


def project_assets(
    assets: Sequence[Asset],
    scenario: ReturnScenario | str = ReturnScenario.MODERATE,
    milestone_years: Sequence[int] = (10, 20, 30),
    surplus: float = 0.0,
    surplus_target_id: Optional[str] = None,
) -> List[AssetProjection]:
    """
    Balance of each asset at each requested year.

    Parameters
    ----------
    assets : sequence of Asset
    scenario : ReturnScenario or str
        Multiplier on every asset's annual return.
    milestone_years : sequence of int
        Years (>= 0) to sample; year 0 is the current value.
    surplus : float
        Monthly surplus; only a positive surplus is allocated.
    surplus_target_id : str, optional
        Asset receiving the surplus. Must name one of `assets`.

    Returns
    -------
    list of AssetProjection, in input order.
    """
    sc = ReturnScenario.parse(scenario)
    years = sorted({int(y) for y in milestone_years})
    if any(y < 0 for y in years):
        raise ValueError(f"milestone_years must be >= 0, got {list(milestone_years)}")
    check_surplus_target(assets, surplus_target_id)

    extra = max(float(surplus), 0.0) if np.isfinite(surplus) else 0.0
    horizon = years[-1] * 12 if years else 0
    wanted = {y * 12: y for y in years}

    out = []
    for a in assets:
        rate = asset_monthly_rate(a, sc)
        inflow = a.monthly_contribution + (extra if a.id == surplus_target_id else 0.0)
        balance = a.amount
        snapshots = {}
        if 0 in wanted:
            snapshots[0] = balance
        for m in range(1, horizon + 1):
            balance = grow(balance, rate, inflow)
            if m in wanted:
                snapshots[wanted[m]] = balance
        out.append(
            AssetProjection(
                asset_id=a.id,
                category=a.category,
                current_value=a.amount,
                milestone_values=snapshots,
            )
        )
    return out
