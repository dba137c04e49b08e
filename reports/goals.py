"""
Savings-goal tracking, independent of the net-worth projection.

Each month the positive surplus is split evenly across goals that are not yet
met. A goal already met at the start is reached at month 0.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from models.entries import Goal


@dataclass(frozen=True)
class GoalMilestone:
    goal_id: str
    name: str
    target_amount: float
    month_reached: Optional[int]  # None if not reached within the horizon


def track_goals(goals: Sequence[Goal], monthly_surplus: float, years: int) -> List[GoalMilestone]:
    if years < 0:
        raise ValueError(f"years must be >= 0, got {years}")

    per_month = max(float(monthly_surplus), 0.0)
    current = [g.current_amount for g in goals]
    reached: List[Optional[int]] = [None] * len(goals)

    for m in range(int(years) * 12 + 1):
        for i, g in enumerate(goals):
            if reached[i] is None and current[i] >= g.target_amount:
                reached[i] = m
        unmet = [i for i in range(len(goals)) if reached[i] is None]
        if not unmet or per_month <= 0:
            break
        share = per_month / len(unmet)
        for i in unmet:
            current[i] += share

    return [
        GoalMilestone(goal_id=g.id, name=g.name, target_amount=g.target_amount, month_reached=reached[i])
        for i, g in enumerate(goals)
    ]
