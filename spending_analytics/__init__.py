"""
spending_analytics
~~~~~~~~~~~~~~~~~~

Spending analytics for the personal finance backend. Pure functions turn a
list of dated expense records into a continuous monthly series, the
distribution of a month across its three thirds and the month's pace
against recent months, plus rule-based insights on top of each. Nothing
here performs I/O; callers fetch records and pass them in.
"""

from .analyzer import SpendingAnalyzer
from .evolution import MonthlyEvolutionResult, compute_monthly_evolution
from .pace import DEFAULT_MONTH_PACE_CONFIG, MonthPaceConfig, MonthPaceResult, compute_month_pace
from .records import ExpenseRecord, parse_expense_records
from .summary import RangeSummary, build_range_summary
from .thirds import MonthThirdsMetrics, compute_month_thirds

__all__ = [
    "DEFAULT_MONTH_PACE_CONFIG",
    "ExpenseRecord",
    "MonthPaceConfig",
    "MonthPaceResult",
    "MonthThirdsMetrics",
    "MonthlyEvolutionResult",
    "RangeSummary",
    "SpendingAnalyzer",
    "build_range_summary",
    "compute_month_pace",
    "compute_month_thirds",
    "compute_monthly_evolution",
    "parse_expense_records",
]
