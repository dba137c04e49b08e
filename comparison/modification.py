"""Apply a ScenarioModification to a FinancialState."""

from __future__ import annotations

from models.state import FinancialState, ScenarioModification


def apply_modification(state: FinancialState, mod: ScenarioModification) -> FinancialState:
    """
    Return a new state with `mod` applied; `state` is not changed.

    - debts whose id is in excluded_debt_ids are removed
    - contribution overrides replace asset contributions (unknown ids ignored)
    - income_adjustment is added to the state's monthly income adjustment
    - windfall is added at month 0 to the surplus target, or to unallocated
      cash when the state names no target
    """
    if mod.is_identity:
        return state

    debts = tuple(d for d in state.debts if d.id not in mod.excluded_debt_ids)

    assets = []
    for a in state.assets:
        update = {}
        if a.id in mod.contribution_overrides:
            update["monthly_contribution"] = mod.contribution_overrides[a.id]
        if mod.windfall > 0 and a.id == state.surplus_target_id:
            update["amount"] = a.amount + mod.windfall
        assets.append(a.model_copy(update=update) if update else a)

    cash = state.unallocated_cash
    if mod.windfall > 0 and state.surplus_target_id is None:
        cash += mod.windfall

    return state.model_copy(
        update={
            "debts": debts,
            "assets": tuple(assets),
            "monthly_income_adjustment": state.monthly_income_adjustment + mod.income_adjustment,
            "unallocated_cash": cash,
        }
    )
