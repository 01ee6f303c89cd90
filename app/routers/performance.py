import logging
from datetime import date
from typing import Dict, Optional

from fastapi import APIRouter, HTTPException
from pydantic import ValidationError

from app.core.config import settings
from app.models.analytics import AnalyticsRequest, BundleRequest, EvolutionRequest, PaceRequest, ThirdsRequest
from spending_analytics import MonthPaceConfig, SpendingAnalyzer
from spending_analytics.dates import days_in_month, is_valid_month_key, month_key_from_date, month_label
from spending_analytics.insights import (
    build_month_pace_insight,
    build_month_thirds_insight,
    build_monthly_evolution_insight,
)
from spending_analytics.thirds import third_range_labels

router = APIRouter()
logger = logging.getLogger(__name__)


def analyzer_for(body: AnalyticsRequest, pace_config: Optional[MonthPaceConfig] = None) -> SpendingAnalyzer:
    return SpendingAnalyzer(
        pace_config=pace_config or settings.pace_config(),
        currency=body.currency or settings.DEFAULT_CURRENCY,
        language=body.language or settings.DEFAULT_LANGUAGE,
    )


def language_of(body: AnalyticsRequest) -> str:
    return body.language or settings.DEFAULT_LANGUAGE


def pace_config_for(body: PaceRequest) -> MonthPaceConfig:
    merged = settings.pace_config().model_dump()
    if body.config:
        merged.update(body.config.model_dump(exclude_none=True))
    try:
        return MonthPaceConfig(**merged)
    except ValidationError as e:
        logger.warning(f"Rejected pace config overrides: {e.error_count()} error(s)")
        raise HTTPException(status_code=422, detail=f"Invalid pace config: {e}")


@router.post("/evolution")
def monthly_evolution(body: EvolutionRequest) -> Dict:
    """
    Month-by-month totals for the requested period, closed-month comparisons
    and the category drivers behind the last change.
    """
    analyzer = analyzer_for(body)
    evolution = analyzer.monthly_evolution(body.expenses, body.period, body.category_id, body.today)
    if evolution is None:
        raise HTTPException(status_code=400, detail=f"Unsupported period: {body.period}")

    return {
        "evolution": evolution.to_dict(),
        "insight": build_monthly_evolution_insight(evolution, body.category_id, language_of(body)).to_dict(),
    }


@router.post("/thirds")
def month_thirds(body: ThirdsRequest) -> Dict:
    if body.month_key is not None and not is_valid_month_key(body.month_key):
        raise HTTPException(status_code=400, detail="monthKey must follow YYYY-MM format")

    month_key = body.month_key or month_key_from_date(body.today or date.today())
    analyzer = analyzer_for(body)
    metrics = analyzer.month_thirds(body.expenses, month_key)
    label = month_label(month_key, language_of(body))

    return {
        "month_key": month_key,
        "metrics": metrics.to_dict() if metrics else None,
        "ranges": third_range_labels(month_key, language_of(body)),
        "insight": build_month_thirds_insight(metrics, body.period, label, language_of(body)).to_dict(),
    }


@router.post("/pace")
def month_pace(body: PaceRequest) -> Dict:
    if not is_valid_month_key(body.selected_month_key):
        raise HTTPException(status_code=400, detail="selectedMonthKey must follow YYYY-MM format")

    analyzer = analyzer_for(body, pace_config_for(body))
    pace = analyzer.month_pace(body.expenses, body.selected_month_key, body.day_limit)
    label = month_label(body.selected_month_key, language_of(body))

    return {
        "pace": pace.to_dict() if pace else None,
        "days_in_month": days_in_month(body.selected_month_key),
        "insight": build_month_pace_insight(
            pace,
            body.period,
            label,
            body.currency or settings.DEFAULT_CURRENCY,
            language_of(body),
        ).to_dict(),
    }


@router.post("/bundle")
def performance_bundle(body: BundleRequest) -> Dict:
    """
    Evolution, thirds, pace and summary with their insights in one call.
    """
    try:
        analyzer = analyzer_for(body)
        report = analyzer.performance_report(
            body.expenses,
            period=body.period,
            today=body.today,
            evolution_period=body.evolution_period,
            category_id=body.category_id,
        )
        logger.info(f"Performance bundle built for {report['selected_month_key']}")
        return report
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error building performance bundle: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Internal server error: {str(e)}")
