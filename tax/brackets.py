"""
Bracket table value objects.

A BracketTable is an ordered, gap-free run of marginal bands covering [0, inf)
plus a basic personal amount (BPA). An empty table means "no income tax here".
Tables are validated on construction.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, Sequence, Tuple

from core.errors import BracketTableError


@dataclass(frozen=True)
class TaxBracket:
    lower: float
    upper: float  # math.inf for the top band
    rate: float  # e.g. 0.205 for 20.5%

    def span(self, taxable_income: float) -> float:
        """Portion of `taxable_income` that falls inside this band."""
        if taxable_income <= self.lower:
            return 0.0
        return min(taxable_income, self.upper) - self.lower


@dataclass(frozen=True)
class BracketTable:
    brackets: Tuple[TaxBracket, ...] = ()
    basic_personal_amount: float = 0.0
    name: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "brackets", tuple(self.brackets))
        _validate(self)

    @property
    def is_empty(self) -> bool:
        return len(self.brackets) == 0

    @property
    def lowest_rate(self) -> float:
        return self.brackets[0].rate if self.brackets else 0.0

    @property
    def bpa_credit(self) -> float:
        """BPA converted to a non-refundable credit at the lowest rate."""
        return self.basic_personal_amount * self.lowest_rate


@dataclass(frozen=True)
class CapitalGainsSchedule:
    """Two-tier inclusion rates applied progressively to the gain itself."""
    first_tier_limit: float
    first_tier_rate: float
    second_tier_rate: float


def build_table(
    name: str,
    bands: Sequence[Tuple[float, float]],
    *,
    basic_personal_amount: float = 0.0,
) -> BracketTable:
    """
    Build a table from (upper_threshold, rate) pairs, low to high.
    Each band starts where the previous one ended; the last upper must be math.inf.
    """
    brackets = []
    lower = 0.0
    for upper, rate in bands:
        brackets.append(TaxBracket(lower=lower, upper=float(upper), rate=float(rate)))
        lower = float(upper)
    return BracketTable(
        brackets=tuple(brackets),
        basic_personal_amount=float(basic_personal_amount),
        name=name,
    )


def _validate(table: BracketTable) -> None:
    label = table.name or "bracket table"
    bpa = table.basic_personal_amount
    if not math.isfinite(bpa) or bpa < 0:
        raise BracketTableError(f"{label}: basic personal amount must be a finite non-negative number, got {bpa!r}")

    brackets: Iterable[TaxBracket] = table.brackets
    prev_upper = 0.0
    for i, b in enumerate(brackets):
        if b.lower != prev_upper:
            if i == 0:
                raise BracketTableError(f"{label}: first bracket must start at 0, starts at {b.lower}")
            raise BracketTableError(
                f"{label}: bracket {i} starts at {b.lower} but bracket {i - 1} ends at {prev_upper} (gap or overlap)"
            )
        if not b.upper > b.lower:
            raise BracketTableError(f"{label}: bracket {i} has non-increasing bounds [{b.lower}, {b.upper})")
        # zero-rate bottom bands are real (DE, MO, ND, OH, SC, US LTCG); a 100% band is not
        if not (0.0 <= b.rate < 1.0):
            raise BracketTableError(f"{label}: bracket {i} rate {b.rate} outside [0, 1)")
        prev_upper = b.upper

    if table.brackets and not math.isinf(table.brackets[-1].upper):
        raise BracketTableError(f"{label}: last bracket must be open-ended, ends at {table.brackets[-1].upper}")
