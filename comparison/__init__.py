"""What-if comparison: apply a modification and diff two projection runs."""

from .comparator import NetWorthDelta, ScenarioComparison, compare_scenarios
from .modification import apply_modification

__all__ = ["NetWorthDelta", "ScenarioComparison", "apply_modification", "compare_scenarios"]
