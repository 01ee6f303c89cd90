from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping, Optional, Union

from ..categories import category_label
from ..dates import day_month_label
from ..formatting import format_money, format_pct_short
from ..summary import CategoryShare, RangeSummary
from .messages import message

MAX_SHOWN_CATEGORIES = 3
MIN_CATEGORIES_FOR_TOP3 = 5


@dataclass
class MonthSummaryInsight:
    kind: str
    confidence: str
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def confidence_from_count(count: int) -> str:
    if count <= 1:
        return "low"
    if count <= 4:
        return "medium"
    return "high"


def _as_summary(summary: Union[RangeSummary, Mapping[str, Any], None]) -> RangeSummary:
    if isinstance(summary, RangeSummary):
        return summary
    summary = summary or {}
    categories = [
        CategoryShare(
            category_id=str(c.get("category_id") or c.get("categoryId") or ""),
            amount=float(c.get("amount") or 0),
            percent=float(c.get("percent") or 0),
        )
        for c in summary.get("categories") or []
    ]
    return RangeSummary(
        total=float(summary.get("total") or 0),
        categories=[c for c in categories if c.category_id],
        meta=dict(summary.get("meta") or {}),
    )


def build_month_summary_insight(
    summary: Union[RangeSummary, Mapping[str, Any], None],
    currency: Optional[str] = None,
    language: Optional[str] = None,
) -> MonthSummaryInsight:
    """
    Month-to-date message: total, up to three top categories and, when at
    least five categories are active, the combined share of the top three.
    """
    data = _as_summary(summary)
    count = data.count

    if count == 0:
        return MonthSummaryInsight(
            kind="no_data",
            confidence="low",
            message=message("summary.no_data", language),
        )

    as_of = day_month_label(data.meta.get("to"), language) or ""
    lines = [
        message(
            "summary.as_of",
            language,
            date=as_of,
            total=format_money(data.total, currency, language),
        )
    ]

    for idx, cat in enumerate(data.categories[:MAX_SHOWN_CATEGORIES]):
        params = dict(
            rank=idx + 1,
            label=category_label(cat.category_id, language),
            amount=format_money(cat.amount, currency, language),
            pct=format_pct_short(cat.percent, language),
        )
        lines.append(message("summary.top" if idx == 0 else "summary.rank", language, **params))

    if len(data.categories) >= MIN_CATEGORIES_FOR_TOP3:
        top3 = sum(c.percent for c in data.categories[:MAX_SHOWN_CATEGORIES])
        lines.append(message("summary.top3", language, pct=format_pct_short(top3, language)))

    return MonthSummaryInsight(
        kind="summary",
        confidence=confidence_from_count(count),
        message="\n".join(lines),
    )
