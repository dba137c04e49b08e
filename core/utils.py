from __future__ import annotations

import math
from typing import Optional

import numpy as np
import pandas as pd


def clamp_money(value: Optional[float], floor: float = 0.0) -> float:
    """Coerce a money input to a finite float no lower than `floor` (None/NaN/inf -> floor)."""
    if value is None:
        return floor
    x = float(value)
    if not math.isfinite(x):
        return floor
    return max(x, floor)


def finite_or_zero(value: Optional[float]) -> float:
    """Like clamp_money but keeps the sign (rates, signed adjustments)."""
    if value is None:
        return 0.0
    x = float(value)
    return x if math.isfinite(x) else 0.0


def annual_pct_to_monthly_rate(annual_pct: float) -> float:
    """7.5 (% per year) -> 0.00625 per month, simple division as lenders quote it."""
    return annual_pct / 100.0 / 12.0


def round_money(x, decimals: int = 2):
    """Half away from zero rounding (vectorized); Python's round() is banker's rounding."""
    m = 10 ** decimals
    arr = np.asarray(x, dtype=float)
    out = np.sign(arr) * (np.floor(np.abs(arr) * m + 0.5) / m)
    if out.ndim == 0:
        return float(out)
    return out


def format_duration(total_months: float) -> str:
    """Render a month count as e.g. '2 years 1 month'."""
    if not math.isfinite(total_months):
        return "Never"
    if total_months <= 0:
        return "Paid off"

    total_months = int(total_months)
    years, months = divmod(total_months, 12)
    year_str = "1 year" if years == 1 else f"{years} years"
    month_str = "1 month" if months == 1 else f"{months} months"

    if years == 0:
        return month_str
    if months == 0:
        return year_str
    return f"{year_str} {month_str}"


def month_starts(start: pd.Timestamp, n_months: int) -> pd.DatetimeIndex:
    """
    Month-start dates for projection months 0..n_months-1.
    A mid-month start rolls forward to the next month start, so month 0 is never in the past.
    """
    ts = pd.Timestamp(start)
    first = ts if ts.is_month_start else (ts.to_period("M") + 1).to_timestamp(how="start")
    return pd.date_range(first, periods=n_months, freq="MS")
