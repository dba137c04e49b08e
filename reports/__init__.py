"""Snapshot reports: dashboard metrics, benchmarks, insights and goal tracking."""

from .benchmarks import (
    AgeGroupBenchmark,
    BenchmarkComparison,
    benchmark_for_age,
    benchmarks_for_country,
    compare_state_to_benchmarks,
    comparisons_to_dataframe,
    compute_benchmark_comparisons,
)
from .goals import GoalMilestone, track_goals
from .insights import Insight, InsightType, generate_insights
from .metrics import SnapshotMetrics, SnapshotTotals, compute_metrics, compute_totals

__all__ = [
    "AgeGroupBenchmark",
    "BenchmarkComparison",
    "GoalMilestone",
    "Insight",
    "InsightType",
    "SnapshotMetrics",
    "SnapshotTotals",
    "benchmark_for_age",
    "benchmarks_for_country",
    "compare_state_to_benchmarks",
    "comparisons_to_dataframe",
    "compute_benchmark_comparisons",
    "compute_metrics",
    "compute_totals",
    "generate_insights",
    "track_goals",
]
