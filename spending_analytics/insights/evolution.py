from __future__ import annotations

import math
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from ..categories import category_label
from ..evolution import ALL_CATEGORIES, MonthlyEvolutionResult
from .messages import message

MAX_DRIVERS = 2


@dataclass
class CategoryDriver:
    category_id: str
    label: str
    delta_amount: float


@dataclass
class MonthlyEvolutionInsight:
    """Headline of the last closed month plus the categories that moved most."""

    headline: Optional[Dict[str, Any]]
    top_up: List[CategoryDriver] = field(default_factory=list)
    top_down: List[CategoryDriver] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def build_monthly_evolution_insight(
    evolution: Optional[MonthlyEvolutionResult],
    category_id: str = ALL_CATEGORIES,
    language: Optional[str] = None,
) -> MonthlyEvolutionInsight:
    comparison = evolution.headline_comparison if evolution else None
    if comparison is None:
        return MonthlyEvolutionInsight(headline=None)

    headline = {
        "current_label": comparison.current_label or message("evolution.current_label", language),
        "prev_label": comparison.prev_label or message("evolution.prev_label", language),
        "current_total": comparison.current_total,
        "delta_pct": comparison.delta_pct,
    }

    # Drivers only make sense across all categories
    if category_id != ALL_CATEGORIES:
        return MonthlyEvolutionInsight(headline=headline)

    moves = [c for c in evolution.category_comparisons if math.isfinite(c.delta_amount)]

    def drivers(items) -> List[CategoryDriver]:
        ranked = sorted(items, key=lambda c: -abs(c.delta_amount))[:MAX_DRIVERS]
        return [
            CategoryDriver(
                category_id=c.category_id,
                label=category_label(c.category_id, language),
                delta_amount=c.delta_amount,
            )
            for c in ranked
        ]

    return MonthlyEvolutionInsight(
        headline=headline,
        top_up=drivers(c for c in moves if c.delta_amount > 0),
        top_down=drivers(c for c in moves if c.delta_amount < 0),
    )
