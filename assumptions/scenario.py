"""
Return scenarios.

A scenario is a single multiplier applied to every asset return rate and
property appreciation rate in a projection run. Contributions, surplus and
debt rates are not scaled.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict


class ReturnScenario(str, Enum):
    CONSERVATIVE = "conservative"
    MODERATE = "moderate"
    OPTIMISTIC = "optimistic"

    @property
    def multiplier(self) -> float:
        return _MULTIPLIERS[self]

    def scale(self, annual_pct: float) -> float:
        return annual_pct * self.multiplier

    @classmethod
    def parse(cls, value: "ReturnScenario | str") -> "ReturnScenario":
        """Accept a member or its (case-insensitive) name."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        for member in cls:
            if member.value == key:
                return member
        raise KeyError(f"Unknown scenario '{value}'. Available: {[m.value for m in cls]}")


_MULTIPLIERS: Dict[ReturnScenario, float] = {
    ReturnScenario.CONSERVATIVE: 0.7,
    ReturnScenario.MODERATE: 1.0,
    ReturnScenario.OPTIMISTIC: 1.3,
}
