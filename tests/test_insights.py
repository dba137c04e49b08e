"""
Tests for dashboard insights.
"""

from models import Asset, Debt, ExpenseItem, FinancialState, IncomeItem
from reports import InsightType, generate_insights


def _ids(state):
    return [i.id for i in generate_insights(state)]


class TestGenerateInsights:

    def test_household(self, household):
        """Test the full insight set for a healthy household."""
        insights = generate_insights(household)
        assert [i.id for i in insights] == [
            "runway-strong",
            "surplus-positive",
            "savings-rate-great",
            "debt-high-interest",
            "networth-positive",
        ]
        messages = {i.id: i.message for i in insights}
        assert "25 months" in messages["runway-strong"]
        assert "$3,450" in messages["surplus-positive"]
        assert "60%" in messages["savings-rate-great"]
        assert "Credit Card has a 19.9%" in messages["debt-high-interest"]
        assert "$218,500" in messages["networth-positive"]

    def test_empty_state(self):
        """Test that an empty snapshot yields no insights."""
        assert generate_insights(FinancialState()) == []

    def test_types(self, household):
        """Test that each insight carries its type."""
        kinds = [i.type for i in generate_insights(household)]
        assert kinds == [
            InsightType.RUNWAY,
            InsightType.SURPLUS,
            InsightType.SAVINGS_RATE,
            InsightType.DEBT_INTEREST,
            InsightType.NET_WORTH,
        ]

    def test_runway_building(self):
        """Test singular and plural month wording."""
        expenses = [ExpenseItem(id="e", category="Rent", amount=1_000)]
        one = FinancialState(assets=[Asset(id="a", category="Savings Account", amount=1_500)], expenses=expenses)
        two = FinancialState(assets=[Asset(id="a", category="Savings Account", amount=2_000)], expenses=expenses)
        [r1] = [i for i in generate_insights(one) if i.type == InsightType.RUNWAY]
        [r2] = [i for i in generate_insights(two) if i.type == InsightType.RUNWAY]
        assert r1.id == r2.id == "runway-building"
        assert "About 1 month of" in r1.message
        assert "About 2 months" in r2.message

    def test_break_even(self):
        """Test the balanced-surplus insight."""
        state = FinancialState(
            income=[IncomeItem(id="i", category="Salary", amount=1_000)],
            expenses=[ExpenseItem(id="e", category="Rent", amount=1_000)],
        )
        assert _ids(state) == ["surplus-balanced"]

    def test_good_savings_rate(self):
        """Test the 10-20% savings band."""
        state = FinancialState(
            income=[IncomeItem(id="i", category="Salary", amount=1_000)],
            expenses=[ExpenseItem(id="e", category="Rent", amount=850)],
        )
        assert "savings-rate-good" in _ids(state)

    def test_debt_priority(self):
        """Test avalanche advice when no debt is high-interest."""
        state = FinancialState(debts=[
            Debt(id="d1", category="Car Loan", amount=10_000, interest_rate=6),
            Debt(id="d2", category="Line of Credit", amount=5_000, interest_rate=9),
        ])
        [debt] = [i for i in generate_insights(state) if i.type == InsightType.DEBT_INTEREST]
        assert debt.id == "debt-priority"
        assert "Line of Credit (9% APR)" in debt.message

    def test_single_low_rate_debt(self):
        """Test that one low-rate debt gets no interest insight."""
        state = FinancialState(debts=[Debt(id="d", category="Car Loan", amount=10_000, interest_rate=6)])
        assert all(i.type != InsightType.DEBT_INTEREST for i in generate_insights(state))

    def test_negative_net_worth(self):
        """Test encouragement when debts exceed assets."""
        state = FinancialState(
            assets=[Asset(id="a", category="Savings Account", amount=1_000)],
            debts=[Debt(id="d", category="Student Loan", amount=5_000, interest_rate=5.5)],
        )
        assert "networth-growing" in _ids(state)

    def test_tax_info(self, household, ontario):
        """Test the effective-rate insight for employment income."""
        state = household.model_copy(update={"jurisdiction": ontario})
        ids = _ids(state)
        assert "tax-rate-info" in ids
        assert ids.index("tax-rate-info") == ids.index("networth-positive") - 1

    def test_tax_capital_gains(self, texas):
        """Test the capital-gains tax insight."""
        state = FinancialState(
            income=[IncomeItem(id="g", category="Dividends", amount=120_000, frequency="annually",
                               income_type="capital-gains")],
            jurisdiction=texas,
        )
        assert "tax-capital-gains" in _ids(state)

    def test_high_tax_rate(self, california):
        """Test the high effective-rate insight."""
        state = FinancialState(
            income=[IncomeItem(id="i", category="Salary", amount=2_000_000, frequency="annually")],
            jurisdiction=california,
        )
        assert "tax-rate-high" in _ids(state)
