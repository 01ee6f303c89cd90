from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, Optional, Tuple

from .dates import days_in_month as month_length
from .dates import month_short
from .records import parse_expense_records

THIRD_KEYS = ("T1", "T2", "T3")

STATE_PENDING = "no_iniciado"
STATE_IN_PROGRESS = "en_curso"
STATE_CLOSED = "cerrado"


@dataclass
class MonthThirdsMetrics:
    """Raw distribution of one month's spend across its three day-ranges."""

    month_key: str
    days_in_month: int
    n_expenses: int
    active_days: int
    first_day_with_expense: Optional[int]
    total_month: float
    total_t1: float
    total_t2: float
    total_t3: float
    pct_t1: float
    pct_t2: float
    pct_t3: float

    def pct_by_third(self) -> Dict[str, float]:
        return {"T1": self.pct_t1, "T2": self.pct_t2, "T3": self.pct_t3}

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def third_bounds(days_in_month: int) -> Tuple[int, int]:
    """
    Last day of T1 and T2 for a month of ``days_in_month`` days.

    T1 = 1..ceil(D/3), T2 = next day..ceil(2D/3), T3 = the rest.
    """
    return math.ceil(days_in_month / 3), math.ceil(2 * days_in_month / 3)


def third_for_day(day: int, days_in_month: int) -> str:
    end_t1, end_t2 = third_bounds(days_in_month)
    if day <= end_t1:
        return "T1"
    if day <= end_t2:
        return "T2"
    return "T3"


def third_states(today_day: int, days_in_month: int = 30) -> Dict[str, str]:
    """
    State of each third of the month as seen on ``today_day``.

    T3 never reads as closed from inside the month; a finished month is
    treated as closed by the caller.
    """
    end_t1, end_t2 = third_bounds(days_in_month)
    states = {}
    start = 1
    for key, end in zip(THIRD_KEYS, (end_t1, end_t2, days_in_month)):
        if today_day < start:
            states[key] = STATE_PENDING
        elif today_day <= end:
            states[key] = STATE_IN_PROGRESS
        else:
            states[key] = STATE_CLOSED
        start = end + 1
    return states


def third_range_labels(month_key: str, language: Optional[str] = None) -> Optional[Dict[str, str]]:
    """{'T1': '01–11 Dic', 'T2': '12–21 Dic', 'T3': '22–31 Dic'}"""
    days = month_length(month_key)
    if days is None:
        return None
    end_t1, end_t2 = third_bounds(days)
    mon = month_short(int(month_key[5:7]), language)
    return {
        "T1": f"01–{end_t1:02d} {mon}",
        "T2": f"{end_t1 + 1:02d}–{end_t2:02d} {mon}",
        "T3": f"{end_t2 + 1:02d}–{days:02d} {mon}",
    }


def compute_month_thirds(
    expenses: Optional[Iterable[Any]],
    month_key: Optional[str] = None,
    days_in_month: Optional[int] = None,
) -> Optional[MonthThirdsMetrics]:
    """
    Split one month's spend into T1/T2/T3 and report each share of the total.

    When ``month_key`` is omitted the month is inferred from the first valid
    record. Records from other months are ignored. Returns None when the
    month has no records at all.
    """
    records = parse_expense_records(expenses)
    if not records:
        return None

    month_key = month_key or records[0].month_key
    days = days_in_month or month_length(month_key)
    if not days:
        return None

    totals = {"T1": 0.0, "T2": 0.0, "T3": 0.0}
    active = set()
    first_day: Optional[int] = None
    n_expenses = 0

    for record in records:
        if record.month_key != month_key:
            continue
        day = record.day
        if day > days:
            continue
        n_expenses += 1
        active.add(day)
        if first_day is None or day < first_day:
            first_day = day
        if record.amount <= 0:
            continue
        totals[third_for_day(day, days)] += record.amount

    if n_expenses == 0:
        return None

    total_month = totals["T1"] + totals["T2"] + totals["T3"]

    def share(amount: float) -> float:
        return amount / total_month if total_month > 0 else 0.0

    return MonthThirdsMetrics(
        month_key=month_key,
        days_in_month=days,
        n_expenses=n_expenses,
        active_days=len(active),
        first_day_with_expense=first_day,
        total_month=total_month,
        total_t1=totals["T1"],
        total_t2=totals["T2"],
        total_t3=totals["T3"],
        pct_t1=share(totals["T1"]),
        pct_t2=share(totals["T2"]),
        pct_t3=share(totals["T3"]),
    )
