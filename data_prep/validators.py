"""
Data quality validation for a FinancialState before it enters the engine.

Catches problems early:
- Surplus target that names no asset
- Jurisdiction with no bracket tables
- Duplicate ids
- Payments that never pay a debt down
- Spending or saving more than comes in
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from core.config import DEFAULT_CONFIG
from core.errors import EngineError
from engine.amortization import calculate_debt_payoff
from engine.cashflow import monthly_cash_flow
from models.state import FinancialState
from tax.jurisdictions import resolve_jurisdiction


@dataclass
class ValidationResult:
    """Collects all validation warnings/errors for a snapshot."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def summary(self) -> str:
        lines = []
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  ✗ {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  ⚠ {w}")
        if not lines:
            lines.append("✓ All checks passed.")
        return "\n".join(lines)


def _duplicates(ids: Iterable[str]) -> List[str]:
    return sorted(k for k, n in Counter(ids).items() if n > 1)


def validate_state(state: FinancialState, year: Optional[int] = None) -> ValidationResult:
    """
    Run all validation checks on a snapshot.
    Returns a ValidationResult with errors (the engine would refuse the
    snapshot) and warnings (informational).
    """
    result = ValidationResult()
    tax_year = DEFAULT_CONFIG.tax_year if year is None else year

    # --- Surplus target ---
    asset_ids = [a.id for a in state.assets]
    if state.surplus_target_id is not None and state.surplus_target_id not in asset_ids:
        result.errors.append(
            f"Surplus target '{state.surplus_target_id}' is not an asset id. Available: {asset_ids}"
        )

    # --- Jurisdiction ---
    jurisdiction_ok = True
    if state.jurisdiction is not None:
        try:
            resolve_jurisdiction(state.jurisdiction, tax_year)
        except EngineError as exc:
            jurisdiction_ok = False
            result.errors.append(f"Jurisdiction cannot be resolved: {exc}")

    # --- Duplicate ids ---
    for label, items in [
        ("asset", state.assets),
        ("debt", state.debts),
        ("income", state.income),
        ("expense", state.expenses),
        ("goal", state.goals),
        ("property", state.properties),
        ("stock", state.stocks),
    ]:
        dups = _duplicates(i.id for i in items)
        if dups:
            result.warnings.append(f"Duplicate {label} ids: {dups}")

    # --- Debts ---
    for d in state.debts:
        if d.amount <= 0:
            continue
        if d.monthly_payment is None:
            result.warnings.append(
                f"Debt '{d.id}' ({d.category}) has no payment; projected as interest-only at "
                f"{d.annual_rate_pct:g}%."
            )
            continue
        payoff = calculate_debt_payoff(d.amount, d.annual_rate_pct, d.monthly_payment)
        if not payoff.covers_interest:
            result.warnings.append(
                f"Debt '{d.id}' ({d.category}): payment {d.monthly_payment:,.2f} does not cover "
                f"monthly interest; the balance will grow."
            )

    # --- Property mortgages ---
    for p in state.properties:
        if p.mortgage > p.value:
            result.warnings.append(f"Property '{p.id}' ({p.name}) is under water (mortgage > value).")
        if p.mortgage <= 0 or p.monthly_payment is None:
            continue
        rate = p.interest_rate if p.interest_rate is not None else DEFAULT_CONFIG.default_mortgage_rate_pct
        payoff = calculate_debt_payoff(p.mortgage, rate, p.monthly_payment)
        if not payoff.covers_interest:
            result.warnings.append(
                f"Property '{p.id}' ({p.name}): mortgage payment does not cover monthly interest."
            )

    # --- Assets ---
    for a in state.assets:
        if a.roi is None and a.kind.default_return_pct > 0:
            result.warnings.append(
                f"Asset '{a.id}' ({a.category}) has no return rate; projected at 0% "
                f"(typical: {a.kind.default_return_pct:g}%)."
            )

    # --- Cash flow ---
    if jurisdiction_ok:
        flow = monthly_cash_flow(state, tax_year)
        if flow.monthly_contributions > flow.monthly_after_tax_income:
            result.warnings.append(
                f"Monthly contributions ({flow.monthly_contributions:,.2f}) exceed after-tax income "
                f"({flow.monthly_after_tax_income:,.2f})."
            )
        if flow.surplus < 0:
            result.warnings.append(
                f"Negative monthly surplus ({flow.surplus:,.2f}); nothing is allocated to savings."
            )

    return result
