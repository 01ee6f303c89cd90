"""
Insights Router
Ready-to-send text for quick replies on chat channels
"""
import logging
from datetime import date
from typing import Dict

from fastapi import APIRouter, HTTPException

from app.core.config import settings
from app.models.analytics import MonthSummaryRequest
from spending_analytics import build_range_summary
from spending_analytics.dates import month_key_from_date, month_start
from spending_analytics.insights import build_month_summary_insight

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/month")
def month_insight(body: MonthSummaryRequest) -> Dict:
    """
    Month-to-date summary message: total so far and the top categories.
    """
    try:
        today = body.today or date.today()
        summary = build_range_summary(
            body.expenses,
            month_start(month_key_from_date(today)),
            today.isoformat(),
        )
        insight = build_month_summary_insight(
            summary,
            currency=body.currency or settings.DEFAULT_CURRENCY,
            language=body.language or settings.DEFAULT_LANGUAGE,
        )
        logger.info(f"Month insight built: kind={insight.kind}, records={summary.count}")
        return insight.to_dict()
    except Exception as e:
        logger.error(f"Error building month insight: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Error building month insight: {str(e)}")
