from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from ..formatting import format_money, format_pct_short, round_half_up
from ..pace import (
    CONFIDENCE_NONE,
    STATUS_ACELERADO,
    STATUS_CONTENIDO,
    MonthPaceResult,
)
from .messages import message
from .rules import Rule, first_match
from .thirds import PERIOD_PREVIOUS

SEVERITY_GOOD = "good"
SEVERITY_INFO = "info"
SEVERITY_WARN = "warn"

SEVERITY_BY_STATUS = {
    STATUS_ACELERADO: SEVERITY_WARN,
    STATUS_CONTENIDO: SEVERITY_GOOD,
}


@dataclass
class MonthPaceInsight:
    status: str
    headline: str
    severity: str
    delta_pct: Optional[float]
    confidence: str
    baseline_months_used_count: int
    note: Optional[str] = None
    key: str = "month_pace"

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        if data["note"] is None:
            data.pop("note")
        return data


PACE_RULES = (
    Rule("no_calculable", lambda pace: pace is None, "no pace result"),
    Rule(
        "sin_referencia",
        lambda pace: pace.status is None or pace.delta_pct is None or pace.ratio is None,
        "no usable baseline",
    ),
    Rule("status", lambda pace: True, "baseline available"),
)


def _comparison(delta_pct: float, language: Optional[str]) -> str:
    rounded = round_half_up(delta_pct, 1)
    if rounded > 0:
        return message("pace.comparison.above", language, pct=format_pct_short(rounded, language))
    if rounded < 0:
        return message("pace.comparison.below", language, pct=format_pct_short(-rounded, language))
    return message("pace.comparison.flat", language)


def _months(count: int, language: Optional[str]) -> str:
    if count == 1:
        return message("pace.months.one", language)
    return message("pace.months.many", language, count=count)


def build_month_pace_insight(
    pace: Optional[MonthPaceResult],
    period: str = "current_month",
    month_label: str = "",
    currency: Optional[str] = None,
    language: Optional[str] = None,
) -> MonthPaceInsight:
    """
    Headline for the month pace card.

    Without a baseline the headline falls back to the daily average spent so
    far; with one it states the status and how far above or below the
    reference the month is running.
    """
    tense = "previous" if period == PERIOD_PREVIOUS else "current"
    kind = first_match(PACE_RULES, pace).kind

    if kind == "no_calculable":
        return MonthPaceInsight(
            status="no_calculable",
            headline=message("pace.no_calculable", language),
            note=message("pace.no_calculable.note", language, month=month_label),
            severity=SEVERITY_INFO,
            delta_pct=None,
            confidence=CONFIDENCE_NONE,
            baseline_months_used_count=0,
        )

    baseline_count = len(pace.baseline_months_used)

    if kind == "sin_referencia":
        return MonthPaceInsight(
            status="sin_referencia",
            headline=message(
                f"pace.no_reference.{tense}",
                language,
                month=month_label,
                avg=format_money(pace.avg_daily_actual, currency, language),
            ),
            note=message("pace.no_reference.note", language),
            severity=SEVERITY_INFO,
            delta_pct=None,
            confidence=pace.confidence,
            baseline_months_used_count=baseline_count,
        )

    headline = message(
        f"pace.status.{tense}",
        language,
        month=month_label,
        status=message(f"pace.status.{pace.status}", language),
        comparison=_comparison(pace.delta_pct, language),
        months=_months(baseline_count, language),
    )
    return MonthPaceInsight(
        status=pace.status,
        headline=headline,
        severity=SEVERITY_BY_STATUS.get(pace.status, SEVERITY_INFO),
        delta_pct=pace.delta_pct,
        confidence=pace.confidence,
        baseline_months_used_count=baseline_count,
    )
