"""
Tests for snapshot validation.
"""

from data_prep.validators import ValidationResult, validate_state
from models import Asset, Debt, ExpenseItem, FinancialState, IncomeItem, Property
from tax import Jurisdiction


class TestValidateState:

    def test_clean_state(self, household):
        """Test that a clean state validates."""
        r = validate_state(household)
        assert r.is_valid
        assert r.warnings == []
        assert "All checks passed" in r.summary()

    def test_unknown_surplus_target(self, household):
        """Test the unknown surplus target error."""
        r = validate_state(household.model_copy(update={"surplus_target_id": "zz"}))
        assert not r.is_valid
        assert any("Surplus target 'zz'" in e for e in r.errors)

    def test_unresolvable_jurisdiction(self, household):
        """Test the unresolvable jurisdiction error."""
        bad = household.model_copy(update={"jurisdiction": Jurisdiction(country="US", region="XX")})
        r = validate_state(bad)
        assert not r.is_valid
        assert any("Jurisdiction" in e for e in r.errors)

    def test_unsupported_year(self, household, ontario):
        """Test the unsupported tax year error."""
        r = validate_state(household.model_copy(update={"jurisdiction": ontario}), year=2019)
        assert not r.is_valid

    def test_duplicate_ids(self):
        """Test the duplicate id warning."""
        state = FinancialState(assets=[Asset(id="a", category="TFSA", roi=5), Asset(id="a", category="RRSP", roi=5)])
        r = validate_state(state)
        assert r.is_valid
        assert any("Duplicate asset ids: ['a']" in w for w in r.warnings)

    def test_non_covering_payment(self):
        """Test the non-covering payment warning."""
        state = FinancialState(debts=[Debt(id="d", category="Credit Card", amount=15_000, interest_rate=50,
                                           monthly_payment=100)])
        r = validate_state(state)
        assert any("does not cover" in w for w in r.warnings)

    def test_missing_payment(self):
        """Test the missing payment warning."""
        r = validate_state(FinancialState(debts=[Debt(id="d", category="Car Loan", amount=5_000)]))
        assert any("interest-only" in w for w in r.warnings)

    def test_under_water_property(self):
        """Test the under-water property warning."""
        r = validate_state(FinancialState(properties=[Property(id="p", name="Condo", value=100, mortgage=200)]))
        assert any("under water" in w for w in r.warnings)

    def test_negative_surplus_and_overcontribution(self):
        """Test negative surplus and over-contribution warnings."""
        state = FinancialState(
            assets=[Asset(id="a", category="TFSA", roi=5, monthly_contribution=2_000)],
            income=[IncomeItem(id="i", category="Salary", amount=1_000)],
            expenses=[ExpenseItem(id="e", category="Rent", amount=500)],
        )
        r = validate_state(state)
        assert any("exceed" in w for w in r.warnings)
        assert any("Negative monthly surplus" in w for w in r.warnings)

    def test_missing_return_rate(self):
        """Test the missing return rate warning."""
        r = validate_state(FinancialState(assets=[Asset(id="a", category="401k", amount=1)]))
        assert any("typical: 7%" in w for w in r.warnings)

    def test_summary_lists_everything(self):
        """Test that the summary lists errors and warnings."""
        r = ValidationResult(errors=["bad"], warnings=["odd"])
        text = r.summary()
        assert "ERRORS (1)" in text and "bad" in text
        assert "WARNINGS (1)" in text and "odd" in text
