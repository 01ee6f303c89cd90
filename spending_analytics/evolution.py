from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import asdict, dataclass, field
from datetime import date
from typing import Any, Dict, Iterable, List, Optional

from .dates import (
    last_n_month_keys,
    month_key_from_date,
    month_label,
    year_to_date_month_keys,
)
from .records import ExpenseRecord, parse_expense_records

logger = logging.getLogger(__name__)

ALL_CATEGORIES = "all"

PERIOD_LAST_6_MONTHS = "last_6_months"
PERIOD_LAST_12_MONTHS = "last_12_months"
PERIOD_YEAR_TO_DATE = "year_to_date"
EVOLUTION_PERIODS = (PERIOD_LAST_6_MONTHS, PERIOD_LAST_12_MONTHS, PERIOD_YEAR_TO_DATE)


@dataclass
class MonthlyPoint:
    month_key: str
    label: str
    total: float


@dataclass
class MonthToMonthComparison:
    current_month_key: str
    previous_month_key: str
    current_label: str
    prev_label: str
    current_total: float
    previous_total: float
    delta_amount: float
    delta_pct: Optional[float]


@dataclass
class CategoryComparison:
    category_id: str
    current_total: float
    previous_total: float
    delta_amount: float
    delta_pct: Optional[float]


@dataclass
class MonthlyEvolutionResult:
    """Continuous monthly series plus closed-month comparisons."""

    series: List[MonthlyPoint]
    in_progress_month_key: str
    headline_comparison: Optional[MonthToMonthComparison]
    month_delta_pct_by_month_key: Dict[str, Optional[float]]
    category_comparisons: List[CategoryComparison] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def safe_pct_change(current: float, previous: float) -> Optional[float]:
    # No percentage against an empty month
    if previous == 0:
        return None
    return (current - previous) / previous * 100


def month_keys_for_period(period: str, today: date) -> Optional[List[str]]:
    anchor = month_key_from_date(today)
    if period == PERIOD_LAST_12_MONTHS:
        return last_n_month_keys(anchor, 12)
    if period == PERIOD_LAST_6_MONTHS:
        return last_n_month_keys(anchor, 6)
    if period == PERIOD_YEAR_TO_DATE:
        return year_to_date_month_keys(anchor)
    return None


def group_monthly_totals(
    records: Iterable[ExpenseRecord],
    category_id: str = ALL_CATEGORIES,
) -> Dict[str, float]:
    totals: Dict[str, float] = defaultdict(float)
    for record in records:
        if category_id != ALL_CATEGORIES and record.category_id != category_id:
            continue
        totals[record.month_key] += record.amount
    return dict(totals)


def build_series(
    month_keys: List[str],
    totals_by_month_key: Dict[str, float],
    language: Optional[str] = None,
) -> List[MonthlyPoint]:
    return [
        MonthlyPoint(
            month_key=month_key,
            label=month_label(month_key, language) or month_key,
            total=totals_by_month_key.get(month_key, 0.0),
        )
        for month_key in month_keys
    ]


def compute_headline_comparison(
    series: List[MonthlyPoint],
    in_progress_month_key: str,
) -> Optional[MonthToMonthComparison]:
    closed = [point for point in series if point.month_key != in_progress_month_key]
    if len(closed) < 2:
        return None

    current, previous = closed[-1], closed[-2]
    return MonthToMonthComparison(
        current_month_key=current.month_key,
        previous_month_key=previous.month_key,
        current_label=current.label,
        prev_label=previous.label,
        current_total=current.total,
        previous_total=previous.total,
        delta_amount=current.total - previous.total,
        delta_pct=safe_pct_change(current.total, previous.total),
    )


def compute_month_delta_pct_map(
    series: List[MonthlyPoint],
    in_progress_month_key: str,
) -> Dict[str, Optional[float]]:
    """
    Tooltip deltas: only between two adjacent closed months whose earlier
    total is non-zero; None everywhere else.
    """
    deltas: Dict[str, Optional[float]] = {}
    previous: Optional[MonthlyPoint] = None
    for point in series:
        deltas[point.month_key] = None
        if (
            previous is not None
            and point.month_key != in_progress_month_key
            and previous.month_key != in_progress_month_key
        ):
            deltas[point.month_key] = safe_pct_change(point.total, previous.total)
        previous = point
    return deltas


def compute_category_comparisons(
    records: Iterable[ExpenseRecord],
    comparison: Optional[MonthToMonthComparison],
    category_id: str = ALL_CATEGORIES,
) -> List[CategoryComparison]:
    """
    Per-category totals for the headline month pair. Categories that appear
    or disappear between the two months are included with a 0 on one side.
    """
    if comparison is None:
        return []

    current: Dict[str, float] = defaultdict(float)
    previous: Dict[str, float] = defaultdict(float)
    for record in records:
        if category_id != ALL_CATEGORIES and record.category_id != category_id:
            continue
        if record.month_key == comparison.current_month_key:
            current[record.category_id] += record.amount
        elif record.month_key == comparison.previous_month_key:
            previous[record.category_id] += record.amount

    comparisons = []
    for cat in sorted(set(current) | set(previous)):
        cur, prev = current.get(cat, 0.0), previous.get(cat, 0.0)
        comparisons.append(
            CategoryComparison(
                category_id=cat,
                current_total=cur,
                previous_total=prev,
                delta_amount=cur - prev,
                delta_pct=safe_pct_change(cur, prev),
            )
        )
    return comparisons


def compute_monthly_evolution(
    expenses: Optional[Iterable[Any]],
    period: str,
    category_id: str = ALL_CATEGORIES,
    today: Optional[date] = None,
    language: Optional[str] = None,
) -> Optional[MonthlyEvolutionResult]:
    """
    Build the month-by-month series for ``period`` anchored at today's month.

    The in-progress month (today's) is part of the series but never takes
    part in percentage comparisons. Returns None for an unknown period.
    """
    today = today or date.today()
    month_keys = month_keys_for_period(period, today)
    if month_keys is None:
        logger.debug(f"Unknown evolution period: {period!r}")
        return None

    in_progress_month_key = month_key_from_date(today)
    records = parse_expense_records(expenses)

    totals = group_monthly_totals(records, category_id)
    series = build_series(month_keys, totals, language)
    headline = compute_headline_comparison(series, in_progress_month_key)

    return MonthlyEvolutionResult(
        series=series,
        in_progress_month_key=in_progress_month_key,
        headline_comparison=headline,
        month_delta_pct_by_month_key=compute_month_delta_pct_map(series, in_progress_month_key),
        category_comparisons=compute_category_comparisons(records, headline, category_id),
    )
