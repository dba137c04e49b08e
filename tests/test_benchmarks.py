"""
Tests for age-group benchmark lookups and comparisons.
"""

import pytest

from core.errors import UnsupportedYearError
from models import FinancialState
from reports import (
    benchmark_for_age,
    benchmarks_for_country,
    compare_state_to_benchmarks,
    comparisons_to_dataframe,
    compute_benchmark_comparisons,
)
from tax import Country


class TestBenchmarkLookup:

    def test_age_group_for_country(self):
        """Test that an age resolves to its country's age group."""
        ca = benchmark_for_age(30, "CA")
        us = benchmark_for_age(30, Country.US)
        assert ca.label == us.label == "25-34"
        assert ca.median_net_worth == 48_800
        assert us.median_net_worth == 39_000

    def test_bounds(self):
        """Test that ages outside 18..120 have no group."""
        assert benchmark_for_age(17, "CA") is None
        assert benchmark_for_age(121, "US") is None
        assert benchmark_for_age(18, "us").label == "18-24"
        assert benchmark_for_age(120, "ca").label == "65+"

    @pytest.mark.parametrize("country", ["CA", "US"])
    def test_groups_are_contiguous(self, country):
        """Test that age groups cover 18..120 without gaps."""
        groups = benchmarks_for_country(country)
        assert groups[0].age_min == 18
        assert groups[-1].age_max == 120
        for prev, nxt in zip(groups, groups[1:]):
            assert nxt.age_min == prev.age_max + 1

    def test_survey_year(self):
        """Test explicit and unknown survey years."""
        assert len(benchmarks_for_country("US", 2022)) == 6
        with pytest.raises(UnsupportedYearError, match="Available"):
            benchmarks_for_country("CA", 2019)


class TestComparisons:

    def test_order_and_flags(self):
        """Test metric order and at-or-above flags."""
        out = compute_benchmark_comparisons(30, "CA", 50_000, 0.08, 2, 1.0)
        assert [c.metric for c in out] == ["Net Worth", "Savings Rate", "Emergency Fund", "Debt-to-Income"]
        assert [c.above_benchmark for c in out] == [True, False, False, True]
        assert [c.unit for c in out] == ["currency", "percent", "months", "ratio"]

    def test_messages_quote_the_benchmark(self):
        """Test that below-benchmark messages name the target."""
        nw, sr, ef, di = compute_benchmark_comparisons(30, "CA", 1_000, 0.0, 0, 5.0)
        assert "$49k" in nw.message
        assert "10%" in sr.message
        assert "3 months" in ef.message
        assert "1.5" in di.message

    def test_lower_debt_to_income_is_better(self):
        """Test that debt-to-income equal to the median counts as at-or-above."""
        *_, di = compute_benchmark_comparisons(40, "US", 0, 0, 0, 1.5)
        assert di.above_benchmark
        assert di.benchmark_value == 1.5

    def test_no_group(self):
        """Test that an uncovered age gives no comparisons."""
        assert compute_benchmark_comparisons(10, "CA", 0, 0, 0, 0) == []


class TestStateComparisons:

    def test_household(self, household):
        """Test comparisons derived from a snapshot."""
        nw, sr, ef, di = compare_state_to_benchmarks(household, 30, "CA")
        assert nw.user_value == pytest.approx(218_500)
        assert sr.user_value == pytest.approx(3_750 / 6_300)
        assert ef.user_value == pytest.approx(65_500 / 2_550)
        assert di.user_value == pytest.approx(297_000 / 75_600)
        assert [c.above_benchmark for c in (nw, sr, ef, di)] == [True, True, True, False]

    def test_country_from_jurisdiction(self, household, texas):
        """Test that the country defaults to the state's jurisdiction."""
        state = household.model_copy(update={"jurisdiction": texas})
        nw, *_ = compare_state_to_benchmarks(state, 50)
        assert nw.benchmark_value == 247_200

    def test_country_required(self, household):
        """Test that a state without jurisdiction needs an explicit country."""
        with pytest.raises(ValueError):
            compare_state_to_benchmarks(household, 30)

    def test_no_income(self):
        """Test that ratios are 0 without income."""
        _, sr, _, di = compare_state_to_benchmarks(FinancialState(), 30, "US")
        assert sr.user_value == 0
        assert di.user_value == 0

    def test_to_dataframe(self, household):
        """Test conversion to a display table."""
        df = comparisons_to_dataframe(compare_state_to_benchmarks(household, 30, "CA"))
        assert list(df.columns) == ["Metric", "Value", "Benchmark", "Unit", "At or above"]
        assert len(df) == 4
