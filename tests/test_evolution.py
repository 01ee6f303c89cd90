from datetime import date

import pytest

from spending_analytics.evolution import compute_monthly_evolution
from spending_analytics.insights import build_monthly_evolution_insight

TODAY = date(2025, 3, 1)

sample_expenses = [
    {"date": "2025-01-05", "categoryId": "comida", "amount": 100},
    {"date": "2025-02-10", "categoryId": "otros", "amount": 200},
]


def test_series_is_continuous_and_anchored_at_today():
    result = compute_monthly_evolution(sample_expenses, "last_6_months", today=TODAY)

    assert [p.month_key for p in result.series] == [
        "2024-10", "2024-11", "2024-12", "2025-01", "2025-02", "2025-03",
    ]
    totals = {p.month_key: p.total for p in result.series}
    assert totals["2025-01"] == 100
    assert totals["2025-02"] == 200
    assert totals["2025-03"] == 0
    assert totals["2024-10"] == 0
    assert result.in_progress_month_key == "2025-03"
    assert result.series[3].label == "Ene 2025"


def test_headline_compares_last_two_closed_months():
    result = compute_monthly_evolution(sample_expenses, "last_6_months", today=TODAY)
    headline = result.headline_comparison

    assert headline.current_month_key == "2025-02"
    assert headline.previous_month_key == "2025-01"
    assert headline.delta_amount == 100
    assert headline.delta_pct == pytest.approx(100.0)


def test_headline_delta_pct_is_none_when_previous_month_is_empty():
    result = compute_monthly_evolution(
        [{"date": "2025-02-10", "amount": 200}], "last_6_months", today=TODAY
    )
    assert result.headline_comparison.delta_amount == 200
    assert result.headline_comparison.delta_pct is None


def test_headline_is_none_without_two_closed_months():
    result = compute_monthly_evolution(sample_expenses, "year_to_date", today=date(2025, 1, 20))
    assert [p.month_key for p in result.series] == ["2025-01"]
    assert result.headline_comparison is None

    result = compute_monthly_evolution(sample_expenses, "year_to_date", today=date(2025, 2, 20))
    assert result.headline_comparison is None


def test_month_delta_map_only_between_closed_months():
    result = compute_monthly_evolution(sample_expenses, "last_6_months", today=TODAY)
    deltas = result.month_delta_pct_by_month_key

    assert set(deltas) == {p.month_key for p in result.series}
    assert deltas["2024-10"] is None  # first month
    assert deltas["2025-01"] is None  # previous month total is 0
    assert deltas["2025-02"] == pytest.approx(100.0)
    assert deltas["2025-03"] is None  # in progress


def test_category_filter_applies_before_aggregation():
    result = compute_monthly_evolution(sample_expenses, "last_6_months", category_id="comida", today=TODAY)
    totals = {p.month_key: p.total for p in result.series}
    assert totals["2025-01"] == 100
    assert totals["2025-02"] == 0
    assert result.headline_comparison.delta_amount == -100


def test_invalid_records_are_dropped():
    expenses = sample_expenses + [
        {"date": "2025-02-xx", "amount": 50},
        {"date": "2025-02-11", "amount": float("nan")},
        {"amount": 80},
    ]
    result = compute_monthly_evolution(expenses, "last_12_months", today=TODAY)
    assert len(result.series) == 12
    assert sum(p.total for p in result.series) == 300


def test_unknown_period_returns_none():
    assert compute_monthly_evolution(sample_expenses, "last_3_weeks", today=TODAY) is None


def test_category_comparisons_cover_both_months():
    result = compute_monthly_evolution(sample_expenses, "last_6_months", today=TODAY)
    comparisons = {c.category_id: c for c in result.category_comparisons}

    assert comparisons["comida"].delta_amount == -100
    assert comparisons["comida"].delta_pct == pytest.approx(-100.0)
    assert comparisons["otros"].previous_total == 0
    assert comparisons["otros"].delta_pct is None


def test_evolution_is_idempotent():
    first = compute_monthly_evolution(sample_expenses, "last_12_months", today=TODAY)
    second = compute_monthly_evolution(sample_expenses, "last_12_months", today=TODAY)
    assert first.to_dict() == second.to_dict()


def test_evolution_insight_ranks_drivers_by_absolute_change():
    expenses = [
        {"date": "2025-01-03", "categoryId": "comida", "amount": 100},
        {"date": "2025-01-04", "categoryId": "ocio", "amount": 500},
        {"date": "2025-01-05", "categoryId": "hogar", "amount": 50},
        {"date": "2025-02-03", "categoryId": "comida", "amount": 400},
        {"date": "2025-02-04", "categoryId": "ocio", "amount": 100},
        {"date": "2025-02-05", "categoryId": "salud", "amount": 30},
        {"date": "2025-02-06", "categoryId": "ropa", "amount": 10},
    ]
    evolution = compute_monthly_evolution(expenses, "last_6_months", today=TODAY)
    insight = build_monthly_evolution_insight(evolution)

    assert insight.headline["current_label"] == "Feb 2025"
    assert insight.headline["prev_label"] == "Ene 2025"
    assert [d.category_id for d in insight.top_up] == ["comida", "salud"]
    assert [d.category_id for d in insight.top_down] == ["ocio", "hogar"]
    assert insight.top_up[0].label == "Comida"


def test_evolution_insight_without_drivers():
    evolution = compute_monthly_evolution(sample_expenses, "last_6_months", category_id="comida", today=TODAY)
    insight = build_monthly_evolution_insight(evolution, category_id="comida")
    assert insight.headline is not None
    assert insight.top_up == [] and insight.top_down == []

    empty = build_monthly_evolution_insight(
        compute_monthly_evolution([], "year_to_date", today=date(2025, 1, 2))
    )
    assert empty.headline is None
