"""Shared fixtures for engine tests."""

import pytest

from models import (
    Asset,
    Debt,
    ExpenseItem,
    FinancialState,
    Goal,
    IncomeItem,
    Property,
)
from tax import Jurisdiction


@pytest.fixture
def household() -> FinancialState:
    """A typical household: three accounts, a car loan, a home with a mortgage."""
    return FinancialState(
        assets=[
            Asset(id="a1", category="Savings Account", amount=12_000, roi=2),
            Asset(id="a2", category="TFSA", amount=35_000, roi=5, monthly_contribution=300),
            Asset(id="a3", category="Brokerage", amount=18_500, roi=7),
        ],
        debts=[
            Debt(id="d1", category="Car Loan", amount=15_000, interest_rate=6, monthly_payment=450),
            Debt(id="d2", category="Credit Card", amount=2_000, interest_rate=19.9, monthly_payment=200),
        ],
        income=[
            IncomeItem(id="i1", category="Salary", amount=5_500),
            IncomeItem(id="i2", category="Freelance", amount=800),
        ],
        expenses=[
            ExpenseItem(id="e1", category="Mortgage Payment", amount=1_800),
            ExpenseItem(id="e2", category="Groceries", amount=600),
            ExpenseItem(id="e3", category="Subscriptions", amount=150),
        ],
        goals=[
            Goal(id="g1", name="Rainy Day Fund", target_amount=20_000, current_amount=14_500),
            Goal(id="g2", name="New Car", target_amount=42_000, current_amount=13_500),
        ],
        properties=[
            Property(
                id="p1",
                name="Home",
                value=450_000,
                mortgage=280_000,
                interest_rate=5,
                monthly_payment=1_800,
                appreciation=0,
            ),
        ],
        surplus_target_id="a2",
    )


@pytest.fixture
def ontario() -> Jurisdiction:
    return Jurisdiction(country="CA", region="ON")


@pytest.fixture
def california() -> Jurisdiction:
    return Jurisdiction(country="US", region="CA")


@pytest.fixture
def texas() -> Jurisdiction:
    return Jurisdiction(country="US", region="TX")
