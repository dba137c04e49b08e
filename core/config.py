"""
Engine configuration.
Frozen; one instance is shared by baseline and scenario runs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class EngineConfig:
    tax_year: int = 2025

    # projection horizon bound (years); 30y x 12 = 360 simulated months
    max_projection_years: int = 30

    # net-worth milestones (reference amounts) and comparator report years
    milestone_thresholds: Tuple[float, ...] = (
        100_000,
        250_000,
        500_000,
        1_000_000,
        2_500_000,
        5_000_000,
    )
    report_years: Tuple[int, ...] = (5, 10, 20, 30)

    # chart output size
    downsample_max_points: int = 120

    # amortization loop controls
    payoff_tolerance: float = 0.01  # balances under one cent count as paid
    max_amortization_months: int = 1200  # 100-year cap

    # mortgage suggestions when the caller leaves rate / payment unset
    default_mortgage_rate_pct: float = 5.0
    default_amortization_years: int = 25

    # calendar year the snapshot was taken; None means "purchase year unknown"
    as_of_year: Optional[int] = None


DEFAULT_CONFIG = EngineConfig()
