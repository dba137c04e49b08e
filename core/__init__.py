"""
Core package: configuration, error kinds, logging, and shared numeric utilities.
No business logic lives here.
"""

from .config import DEFAULT_CONFIG, EngineConfig
from .errors import (
    BracketTableError,
    EngineError,
    UnknownRegionError,
    UnsupportedYearError,
)
from .utils import (
    annual_pct_to_monthly_rate,
    clamp_money,
    format_duration,
    month_starts,
    round_money,
)

__all__ = [
    "DEFAULT_CONFIG",
    "EngineConfig",
    "BracketTableError",
    "EngineError",
    "UnknownRegionError",
    "UnsupportedYearError",
    "annual_pct_to_monthly_rate",
    "clamp_money",
    "format_duration",
    "month_starts",
    "round_money",
]
