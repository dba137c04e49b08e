"""
Tests for snapshot cash flow, dashboard metrics and goal tracking.
"""

import pytest

from engine.cashflow import monthly_cash_flow
from models import Asset, Debt, ExpenseItem, FinancialState, Goal, IncomeItem, Property, StockHolding
from reports import compute_metrics, compute_totals, track_goals


class TestCashFlow:

    def test_net_income_without_jurisdiction(self, household):
        """Test cash flow without a jurisdiction."""
        cf = monthly_cash_flow(household)
        assert cf.monthly_income == 6_300
        assert cf.annual_tax == 0
        assert cf.monthly_expenses == 2_550
        assert cf.monthly_contributions == 300
        assert cf.surplus == pytest.approx(3_450)

    @pytest.mark.parametrize(
        "frequency,monthly",
        [
            ("weekly", 1_200 * 52 / 12),
            ("biweekly", 1_200 * 26 / 12),
            ("monthly", 1_200),
            ("quarterly", 400),
            ("semi-annually", 200),
            ("annually", 100),
        ],
    )
    def test_frequency_normalization(self, frequency, monthly):
        """Test monthly normalisation of each frequency."""
        state = FinancialState(income=[IncomeItem(id="i", category="Salary", amount=1_200, frequency=frequency)])
        assert monthly_cash_flow(state).monthly_income == pytest.approx(monthly)

    def test_taxed_when_jurisdiction_set(self, household, ontario):
        """Test that income is taxed when a jurisdiction is set."""
        state = household.model_copy(update={"jurisdiction": ontario})
        cf = monthly_cash_flow(state)
        assert cf.annual_tax > 0
        assert cf.monthly_after_tax_income == pytest.approx(6_300 - cf.annual_tax / 12)
        assert cf.monthly_tax == pytest.approx(cf.annual_tax / 12)

    def test_capital_gains_taxed_separately(self, texas):
        """Test that capital gains are taxed as their own stream."""
        state = FinancialState(
            income=[IncomeItem(id="g", category="Dividends", amount=60_000, frequency="annually",
                               income_type="capital-gains")],
            jurisdiction=texas,
        )
        cf = monthly_cash_flow(state)
        assert cf.annual_tax == pytest.approx((60_000 - 48_350) * 0.15)

    def test_adjustment_floors_ordinary_income(self):
        """Test that a negative adjustment floors income at zero."""
        state = FinancialState(
            income=[IncomeItem(id="i", category="Salary", amount=1_000)],
            monthly_income_adjustment=-2_500,
        )
        assert monthly_cash_flow(state).monthly_income == 0


class TestMetrics:

    def test_totals(self, household):
        """Test snapshot totals."""
        t = compute_totals(household)
        assert t.liquid_assets == 65_500
        assert t.property_equity == 170_000
        assert t.mortgage_debt == 280_000
        assert t.consumer_debt == 17_000
        assert t.total_debts == 297_000
        assert t.gross_assets == 515_500

    def test_mortgage_category_debt(self):
        """Test that Mortgage-category debts count as mortgage debt."""
        state = FinancialState(debts=[Debt(id="d", category="mortgage", amount=100_000)])
        t = compute_totals(state)
        assert t.mortgage_debt == 100_000
        assert t.consumer_debt == 0

    def test_metrics(self, household):
        """Test headline metrics and flags."""
        m = compute_metrics(household)
        assert m.net_worth == pytest.approx(65_500 + 170_000 - 17_000)
        assert m.monthly_surplus == pytest.approx(6_300 - 2_550)
        assert m.runway_months == pytest.approx(65_500 / 2_550)
        assert m.debt_to_asset_ratio == pytest.approx(297_000 / 515_500)
        assert m.flags == {"net_worth": True, "monthly_surplus": True, "runway": True, "debt_to_asset": True}

    def test_empty_state(self):
        """Test metrics of an empty snapshot."""
        m = compute_metrics(FinancialState())
        assert m.net_worth == 0
        assert m.runway_months == 0
        assert m.debt_to_asset_ratio == 0
        assert m.flags["monthly_surplus"] is False

    def test_stocks_count_in_net_worth(self):
        """Test that stocks count toward net worth."""
        state = FinancialState(stocks=[StockHolding(id="s", ticker="AAPL", shares=2, last_fetched_price=150)])
        assert compute_metrics(state).net_worth == 300

    def test_to_dataframe(self, household):
        """Test conversion to a metric table."""
        df = compute_metrics(household).to_dataframe()
        assert list(df["Metric"]) == ["Net Worth", "Monthly Surplus", "Financial Runway", "Debt-to-Asset Ratio"]
        assert df["Healthy"].all()


class TestGoals:

    def test_even_split_across_unmet_goals(self):
        """Test the even surplus split across unmet goals."""
        goals = [
            Goal(id="g1", name="Trip", target_amount=1_000, current_amount=0),
            Goal(id="g2", name="Fund", target_amount=3_000, current_amount=0),
        ]
        g1, g2 = track_goals(goals, 500, 2)
        # 250/month each until g1 is met at month 4, then 500/month to g2
        assert g1.month_reached == 4
        assert g2.month_reached == 8

    def test_already_met(self):
        """Test a goal met at the start."""
        [g] = track_goals([Goal(id="g", name="Done", target_amount=100, current_amount=150)], 0, 5)
        assert g.month_reached == 0

    def test_never_reached(self):
        """Test a goal not reached within the horizon."""
        [g] = track_goals([Goal(id="g", name="Far", target_amount=1_000_000, current_amount=0)], 100, 1)
        assert g.month_reached is None
        assert g.target_amount == 1_000_000

    def test_no_surplus(self):
        """Test that goals do not progress without surplus."""
        [g] = track_goals([Goal(id="g", name="Car", target_amount=1_000, current_amount=10)], -200, 10)
        assert g.month_reached is None

    def test_negative_years(self):
        """Test that a negative horizon raises."""
        with pytest.raises(ValueError):
            track_goals([], 100, -1)
