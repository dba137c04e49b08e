"""
Debt and mortgage amortization.

One monthly step (step_balance) is shared by the payoff calculator, the
mortgage schedule and the projection runner:

    interest  = balance * monthly_rate
    balance'  = max(0, balance + interest - payment)

Payoff exists only when payment > first-month interest. Otherwise the result
is flagged (covers_interest=False, balance_grows=True) and no loop is run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

import pandas as pd
from dateutil.relativedelta import relativedelta

from core.config import DEFAULT_CONFIG, EngineConfig
from core.log import get_logger
from core.utils import annual_pct_to_monthly_rate, clamp_money, format_duration, round_money

log = get_logger(__name__)

NON_COVERING_TEXT = "Payment doesn't cover interest"


def level_payment(balance: float, monthly_rate: float, n_months: int) -> float:
    """Standard fully-amortizing level payment (PMT) with near-zero rate guard."""
    if n_months <= 0:
        return float(balance)
    if abs(monthly_rate) < 1e-12:
        return float(balance) / n_months
    return float(balance) * (monthly_rate * (1 + monthly_rate) ** n_months) / (
        (1 + monthly_rate) ** n_months - 1
    )


def step_balance(balance: float, monthly_rate: float, payment: float) -> Tuple[float, float]:
    """
    Advance one month. Returns (new_balance, interest_charged).
    A paid-off balance stays at 0 and accrues nothing.
    """
    if balance <= 0:
        return 0.0, 0.0
    interest = balance * monthly_rate
    return max(0.0, balance + interest - payment), interest


def mortgage_breakdown(principal: float, annual_rate_pct: float, monthly_payment: float) -> Tuple[float, float]:
    """
    First-month split of a payment into (interest_portion, principal_portion).
    The principal portion is 0 when the payment does not cover interest.
    """
    bal = clamp_money(principal)
    interest = bal * annual_pct_to_monthly_rate(clamp_money(annual_rate_pct))
    principal_part = max(0.0, min(clamp_money(monthly_payment) - interest, bal))
    return interest, principal_part


def suggest_monthly_payment(principal: float, annual_rate_pct: float, years: int = 25) -> float:
    """Level payment that retires `principal` in `years`, rounded to whole dollars."""
    bal = clamp_money(principal)
    if bal <= 0:
        return 0.0
    n = max(int(years), 1) * 12
    return round_money(level_payment(bal, annual_pct_to_monthly_rate(clamp_money(annual_rate_pct)), n), 0)


def remaining_amortization_years(
    amortization_years: Optional[int],
    year_purchased: Optional[int],
    as_of_year: Optional[int],
    default_years: int = 25,
) -> int:
    """Years left on the original term (at least 1)."""
    term = amortization_years if amortization_years and amortization_years > 0 else default_years
    if year_purchased is None or as_of_year is None:
        return term
    elapsed = max(0, as_of_year - year_purchased)
    return max(1, term - elapsed)


def _covers_interest(balance: float, monthly_rate: float, payment: float) -> bool:
    return payment > balance * monthly_rate


@dataclass(frozen=True)
class DebtPayoffResult:
    covers_interest: bool
    months: int
    total_interest: float
    payoff_duration: str
    balance_grows: bool = False
    capped: bool = False

    def payoff_date(self, as_of) -> Optional[pd.Timestamp]:
        """Calendar date of the final payment, None if the debt never amortizes."""
        if not self.covers_interest or self.capped:
            return None
        return pd.Timestamp(pd.Timestamp(as_of).to_pydatetime() + relativedelta(months=self.months))


def calculate_debt_payoff(
    principal: float,
    annual_rate_pct: float,
    monthly_payment: float,
    config: EngineConfig = DEFAULT_CONFIG,
) -> DebtPayoffResult:
    """
    Month-by-month payoff of a single debt.

    Parameters
    ----------
    principal : float
        Current balance. <= 0 means already paid off.
    annual_rate_pct : float
        Annual rate in percent (19.9 for 19.9%).
    monthly_payment : float
        Fixed payment applied every month.

    Returns
    -------
    DebtPayoffResult
        months, total interest (rounded to cents) and a duration label.
        A payment that does not exceed the first month's interest returns
        covers_interest=False, months=0, total_interest=0, balance_grows=True.
    """
    bal = clamp_money(principal)
    rate = annual_pct_to_monthly_rate(clamp_money(annual_rate_pct))
    pay = clamp_money(monthly_payment)

    if bal <= 0:
        return DebtPayoffResult(True, 0, 0.0, format_duration(0))
    if not _covers_interest(bal, rate, pay):
        return DebtPayoffResult(False, 0, 0.0, NON_COVERING_TEXT, balance_grows=True)

    months, total_interest, _, capped = _amortize(bal, rate, pay, config)
    return DebtPayoffResult(
        covers_interest=True,
        months=months,
        total_interest=round_money(total_interest),
        payoff_duration=format_duration(months),
        capped=capped,
    )


@dataclass(frozen=True)
class AmortizationYear:
    year: int
    interest: float
    principal: float
    balance: float


@dataclass(frozen=True)
class MortgageSchedule:
    covers_interest: bool
    months: int
    total_interest: float
    first_year_avg_monthly_interest: float
    last_year_avg_monthly_interest: float
    years: Tuple[AmortizationYear, ...] = field(default_factory=tuple)
    payoff_duration: str = ""

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame(
            [
                {"year": y.year, "interest": y.interest, "principal": y.principal, "balance": y.balance}
                for y in self.years
            ],
            columns=["year", "interest", "principal", "balance"],
        )


def calculate_mortgage_schedule(
    principal: float,
    annual_rate_pct: float,
    monthly_payment: float,
    config: EngineConfig = DEFAULT_CONFIG,
) -> MortgageSchedule:
    """
    Same loop as calculate_debt_payoff, sampled yearly.

    The final year may be partial; its average monthly interest is taken over
    the months actually paid in that year.
    """
    bal = clamp_money(principal)
    rate = annual_pct_to_monthly_rate(clamp_money(annual_rate_pct))
    pay = clamp_money(monthly_payment)

    if bal <= config.payoff_tolerance:
        return MortgageSchedule(True, 0, 0.0, 0.0, 0.0, (), format_duration(0))
    if not _covers_interest(bal, rate, pay):
        first_interest = bal * rate
        return MortgageSchedule(False, 0, 0.0, first_interest, first_interest, (), NON_COVERING_TEXT)

    months, total_interest, monthly, _ = _amortize(bal, rate, pay, config, record=True)

    years = []
    for start in range(0, len(monthly), 12):
        chunk = monthly[start:start + 12]
        interest = sum(i for i, _ in chunk)
        paid = sum(p for _, p in chunk)
        end_balance = bal - sum(p for _, p in monthly[:start + len(chunk)])
        years.append(
            AmortizationYear(
                year=start // 12 + 1,
                interest=round_money(interest),
                principal=round_money(paid),
                balance=round_money(max(0.0, end_balance)),
            )
        )

    first = monthly[:12]
    last = monthly[(len(monthly) - 1) // 12 * 12:]
    return MortgageSchedule(
        covers_interest=True,
        months=months,
        total_interest=round_money(total_interest),
        first_year_avg_monthly_interest=sum(i for i, _ in first) / len(first),
        last_year_avg_monthly_interest=sum(i for i, _ in last) / len(last),
        years=tuple(years),
        payoff_duration=format_duration(months),
    )


def _amortize(balance: float, monthly_rate: float, payment: float, config: EngineConfig, record: bool = False):
    """
    Core loop. Returns (months, total_interest, [(interest, principal)...], capped).
    Stops once the balance is within config.payoff_tolerance of zero.
    """
    months = 0
    total_interest = 0.0
    monthly = []
    cap = config.max_amortization_months
    while balance > config.payoff_tolerance and months < cap:
        new_balance, interest = step_balance(balance, monthly_rate, payment)
        if record:
            monthly.append((interest, balance - new_balance))
        total_interest += interest
        balance = new_balance
        months += 1

    capped = balance > config.payoff_tolerance
    if capped:
        log.warning(
            "amortization_cap_reached",
            months=months,
            remaining_balance=balance,
            monthly_payment=payment,
        )
    return months, total_interest, monthly, capped

