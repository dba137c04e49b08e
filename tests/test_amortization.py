"""
Tests for debt payoff, mortgage schedules and payment helpers.
"""

import math

import pandas as pd
import pytest

from core.config import EngineConfig
from core.utils import format_duration
from engine.amortization import (
    NON_COVERING_TEXT,
    calculate_debt_payoff,
    calculate_mortgage_schedule,
    level_payment,
    mortgage_breakdown,
    remaining_amortization_years,
    step_balance,
    suggest_monthly_payment,
)


class TestDebtPayoff:
    """Tests for calculate_debt_payoff."""

    def test_payment_below_interest(self):
        """Test that a payment below the first month's interest is flagged."""
        r = calculate_debt_payoff(15_000, 50, 100)
        assert r.covers_interest is False
        assert r.balance_grows is True
        assert r.months == 0
        assert r.total_interest == 0
        assert r.payoff_duration == NON_COVERING_TEXT

    def test_payment_equal_to_interest_does_not_cover(self):
        """Test that a payment equal to interest never retires the balance."""
        r = calculate_debt_payoff(12_000, 12, 120)
        assert r.covers_interest is False

    def test_zero_payment(self):
        """Test payoff with no payment."""
        assert calculate_debt_payoff(1_000, 5, 0).covers_interest is False

    def test_already_paid_off(self):
        """Test that a zero balance needs no months."""
        r = calculate_debt_payoff(0, 19.9, 100)
        assert r.covers_interest is True
        assert r.months == 0
        assert r.payoff_duration == "Paid off"

    def test_zero_rate(self):
        """Test payoff at 0% interest."""
        r = calculate_debt_payoff(1_000, 0, 100)
        assert r.months == 10
        assert r.total_interest == 0
        assert r.payoff_duration == "10 months"

    def test_zero_rate_partial_last_payment(self):
        """Test that a partial final payment counts as a month."""
        assert calculate_debt_payoff(1_050, 0, 100).months == 11

    def test_level_payment_retires_in_term(self):
        """Test that the level payment retires the loan in its term."""
        pay = level_payment(10_000, 0.01, 12)
        assert pay == pytest.approx(888.49, abs=0.01)
        r = calculate_debt_payoff(10_000, 12, pay)
        assert r.months == 12
        assert r.total_interest == pytest.approx(661.85, abs=0.02)
        assert r.payoff_duration == "1 year"

    @pytest.mark.parametrize(
        "principal,rate,payment",
        [(500, 0, 1), (15_000, 6, 300), (2_000, 19.9, 50), (250_000, 4.5, 1_400), (10, 30, 10)],
    )
    def test_terminates_with_non_negative_interest(self, principal, rate, payment):
        """Test that payoff terminates with non-negative interest."""
        r = calculate_debt_payoff(principal, rate, payment)
        assert r.covers_interest
        assert 0 < r.months <= 1200
        assert not r.capped
        assert r.total_interest >= 0

    def test_cap_is_reported(self):
        """Test that hitting the month cap is reported."""
        r = calculate_debt_payoff(100_000, 12, 1_000.01)
        assert r.covers_interest
        assert r.capped
        assert r.months == 1200
        assert r.payoff_date("2025-01-01") is None

    def test_custom_cap(self):
        """Test a configured month cap."""
        r = calculate_debt_payoff(10_000, 0, 1, config=EngineConfig(max_amortization_months=24))
        assert r.capped and r.months == 24

    def test_payoff_date(self):
        """Test calendar payoff date from an as-of date."""
        r = calculate_debt_payoff(1_200, 0, 100)
        assert r.payoff_date(pd.Timestamp("2025-01-31")) == pd.Timestamp("2026-01-31")

    def test_nan_inputs_are_clamped(self):
        """Test that NaN inputs are treated as zero."""
        r = calculate_debt_payoff(float("nan"), 5, 100)
        assert r.months == 0 and r.covers_interest


class TestMortgageSchedule:
    """Tests for calculate_mortgage_schedule."""

    def test_twenty_five_year_schedule(self):
        """Test a 25-year mortgage schedule."""
        payment = suggest_monthly_payment(300_000, 5, 25)
        s = calculate_mortgage_schedule(300_000, 5, payment)
        assert s.covers_interest
        assert 290 <= s.months <= 300
        assert len(s.years) == math.ceil(s.months / 12)
        assert s.years[0].year == 1
        assert s.years[-1].balance == pytest.approx(0, abs=0.01)
        assert sum(y.principal for y in s.years) == pytest.approx(300_000, abs=1)
        assert s.first_year_avg_monthly_interest > s.last_year_avg_monthly_interest
        assert s.first_year_avg_monthly_interest == pytest.approx(1_250, rel=0.02)

    def test_balances_decrease(self):
        """Test that yearly balances decrease."""
        s = calculate_mortgage_schedule(100_000, 4, 1_000)
        balances = [y.balance for y in s.years]
        assert balances == sorted(balances, reverse=True)

    def test_matches_payoff_calculator(self):
        """Test that the schedule agrees with calculate_debt_payoff."""
        s = calculate_mortgage_schedule(200_000, 6, 1_500)
        p = calculate_debt_payoff(200_000, 6, 1_500)
        assert s.months == p.months
        assert s.total_interest == p.total_interest

    def test_non_covering(self):
        """Test a schedule whose payment does not cover interest."""
        s = calculate_mortgage_schedule(500_000, 6, 2_000)
        assert not s.covers_interest
        assert s.years == ()
        assert s.first_year_avg_monthly_interest == pytest.approx(2_500)

    def test_sub_cent_balance_is_already_paid(self):
        """Test that a balance within the payoff tolerance needs no payments."""
        s = calculate_mortgage_schedule(0.005, 5, 100)
        assert s.covers_interest
        assert s.months == 0
        assert s.years == ()
        assert s.first_year_avg_monthly_interest == 0.0
        assert s.last_year_avg_monthly_interest == 0.0
        assert s.months == calculate_debt_payoff(0.005, 5, 100).months

    def test_to_dataframe(self):
        """Test conversion to a yearly table."""
        df = calculate_mortgage_schedule(24_000, 0, 1_000).to_dataframe()
        assert list(df.columns) == ["year", "interest", "principal", "balance"]
        assert list(df["year"]) == [1, 2]
        assert df["interest"].sum() == 0
        assert list(df["balance"]) == [12_000, 0]


class TestPaymentHelpers:

    def test_suggest_monthly_payment_rounds_to_dollars(self):
        """Test that suggested payments round to whole dollars."""
        assert suggest_monthly_payment(300_000, 5, 25) == 1_754

    def test_suggest_zero_principal(self):
        """Test the suggested payment for no principal."""
        assert suggest_monthly_payment(0, 5) == 0

    def test_level_payment_zero_rate(self):
        """Test level payment at 0% interest."""
        assert level_payment(12_000, 0.0, 12) == 1_000

    def test_mortgage_breakdown(self):
        """Test the first-month interest and principal split."""
        interest, principal = mortgage_breakdown(300_000, 5, 1_754)
        assert interest == pytest.approx(1_250)
        assert principal == pytest.approx(504)

    def test_breakdown_non_covering(self):
        """Test the breakdown when the payment is below interest."""
        assert mortgage_breakdown(300_000, 5, 1_000)[1] == 0

    def test_remaining_years(self):
        """Test remaining amortization from the purchase year."""
        assert remaining_amortization_years(25, 2015, 2025) == 15
        assert remaining_amortization_years(None, None, 2025) == 25
        assert remaining_amortization_years(20, 1990, 2025) == 1
        assert remaining_amortization_years(30, 2020, None) == 30

    def test_step_balance(self):
        """Test a single month's balance step."""
        assert step_balance(0, 0.01, 100) == (0.0, 0.0)
        assert step_balance(100, 0.01, 200) == (0.0, 1.0)
        new, interest = step_balance(1_000, 0.01, 100)
        assert interest == pytest.approx(10)
        assert new == pytest.approx(910)


class TestFormatDuration:

    @pytest.mark.parametrize(
        "months,text",
        [
            (0, "Paid off"),
            (-3, "Paid off"),
            (1, "1 month"),
            (11, "11 months"),
            (12, "1 year"),
            (13, "1 year 1 month"),
            (25, "2 years 1 month"),
            (50, "4 years 2 months"),
            (math.inf, "Never"),
        ],
    )
    def test_format(self, months, text):
        """Test duration wording."""
        assert format_duration(months) == text
