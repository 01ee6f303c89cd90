from __future__ import annotations

from collections import defaultdict
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from .records import parse_expense_records


@dataclass
class CategoryShare:
    category_id: str
    amount: float
    percent: float  # 0..100


@dataclass
class RangeSummary:
    total: float
    categories: List[CategoryShare] = field(default_factory=list)
    meta: Dict[str, Any] = field(default_factory=dict)

    @property
    def count(self) -> int:
        return int(self.meta.get("count", 0))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def build_range_summary(
    expenses: Optional[Iterable[Any]],
    date_from: Optional[str] = None,
    date_to: Optional[str] = None,
) -> RangeSummary:
    """
    Total, record count and category ranking for an inclusive date range.

    Categories are sorted by amount (descending); ties keep category id
    order so the ranking is stable across calls.
    """
    totals: Dict[str, float] = defaultdict(float)
    count = 0
    for record in parse_expense_records(expenses):
        if date_from and record.date < date_from:
            continue
        if date_to and record.date > date_to:
            continue
        totals[record.category_id] += record.amount
        count += 1

    total = sum(totals.values())
    categories = [
        CategoryShare(
            category_id=category_id,
            amount=amount,
            percent=amount / total * 100 if total > 0 else 0.0,
        )
        for category_id, amount in sorted(totals.items(), key=lambda item: (-item[1], item[0]))
    ]
    return RangeSummary(
        total=total,
        categories=categories,
        meta={"count": count, "from": date_from, "to": date_to},
    )
