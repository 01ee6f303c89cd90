"""Rule-based insight classifiers built on top of the analytics builders."""

from .evolution import MonthlyEvolutionInsight, build_monthly_evolution_insight
from .pace import MonthPaceInsight, build_month_pace_insight
from .summary import MonthSummaryInsight, build_month_summary_insight
from .thirds import MonthThirdsInsight, build_month_thirds_insight, classify_thirds

__all__ = [
    "MonthPaceInsight",
    "MonthSummaryInsight",
    "MonthThirdsInsight",
    "MonthlyEvolutionInsight",
    "build_month_pace_insight",
    "build_month_summary_insight",
    "build_month_thirds_insight",
    "build_monthly_evolution_insight",
    "classify_thirds",
]
