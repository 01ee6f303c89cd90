"""
Thirds insight: reads a MonthThirdsMetrics and says whether the month's
spend was concentrated, bimodal, evenly spread or only slightly tilted.

Decision table (first match wins), all gaps in integer percentage points:

    no_data            metrics missing or total_month <= 0
    insufficient_data  active_days < 3
    bimodal            top-low >= 22, top-mid <= 8, top-low >= 10, mid-low >= 10
    concentrated       top-mid >= 10
    spread             top-low <= 12
    gray               anything else
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional, Tuple

from ..formatting import round_half_up
from ..thirds import MonthThirdsMetrics
from .messages import message
from .rules import Rule, first_match

PERIOD_CURRENT = "current_month"
PERIOD_PREVIOUS = "previous_month"

MIN_ACTIVE_DAYS = 3
BIMODAL_MIN_SPREAD_PTS = 22
BIMODAL_MAX_TOP_GAP_PTS = 8
BIMODAL_MIN_LOW_GAP_PTS = 10
DOMINANCE_MIN_GAP_PTS = 10
SPREAD_MAX_PTS = 12


@dataclass
class MonthThirdsInsight:
    kind: str
    headline: str
    note: Optional[str] = None
    focus: Optional[Tuple[str, ...]] = None

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        return {k: v for k, v in data.items() if v is not None}


@dataclass
class ThirdsShape:
    """Thirds ranked by share, with the gaps the rules look at."""

    ranked: List[Tuple[str, int]]

    @property
    def top(self) -> Tuple[str, int]:
        return self.ranked[0]

    @property
    def mid(self) -> Tuple[str, int]:
        return self.ranked[1]

    @property
    def low(self) -> Tuple[str, int]:
        return self.ranked[2]

    @property
    def spread(self) -> int:
        return self.top[1] - self.low[1]

    @property
    def top_gap(self) -> int:
        return self.top[1] - self.mid[1]

    @property
    def low_gap(self) -> int:
        return self.mid[1] - self.low[1]


def to_points(fraction: float) -> int:
    return int(round_half_up(fraction * 100))


def rank_thirds(metrics: MonthThirdsMetrics) -> ThirdsShape:
    # sorted() is stable: on equal shares T1 ranks before T2 before T3
    ranked = sorted(metrics.pct_by_third().items(), key=lambda item: -item[1])
    return ThirdsShape(ranked=[(key, to_points(pct)) for key, pct in ranked])


SHAPE_RULES = (
    Rule(
        "bimodal",
        lambda s: s.spread >= BIMODAL_MIN_SPREAD_PTS
        and s.top_gap <= BIMODAL_MAX_TOP_GAP_PTS
        and s.spread >= BIMODAL_MIN_LOW_GAP_PTS
        and s.low_gap >= BIMODAL_MIN_LOW_GAP_PTS,
        "two peaks well above the lowest third",
    ),
    Rule("concentrated", lambda s: s.top_gap >= DOMINANCE_MIN_GAP_PTS, "one third dominates"),
    Rule("spread", lambda s: s.spread <= SPREAD_MAX_PTS, "all thirds close together"),
    Rule("gray", lambda s: True, "slight lean without concentration"),
)


def classify_thirds(metrics: Optional[MonthThirdsMetrics]) -> Tuple[str, Optional[ThirdsShape]]:
    """Kind of insight for ``metrics``, independent of wording."""
    if metrics is None or metrics.total_month <= 0:
        return "no_data", None
    if metrics.active_days < MIN_ACTIVE_DAYS:
        return "insufficient_data", None
    shape = rank_thirds(metrics)
    return first_match(SHAPE_RULES, shape).kind, shape


def build_month_thirds_insight(
    metrics: Optional[MonthThirdsMetrics],
    period: str = PERIOD_CURRENT,
    month_label: str = "",
    language: Optional[str] = None,
) -> MonthThirdsInsight:
    kind, shape = classify_thirds(metrics)
    tense = "previous" if period == PERIOD_PREVIOUS else "current"

    if kind == "no_data":
        return MonthThirdsInsight(kind=kind, headline=message("thirds.no_data", language))

    if kind == "insufficient_data":
        note_key = "thirds.note.one_day" if metrics.active_days <= 1 else "thirds.note.few_days"
        return MonthThirdsInsight(
            kind=kind,
            headline=message(f"thirds.insufficient_data.{tense}", language, month=month_label),
            note=message(note_key, language),
        )

    top_key = shape.top[0]
    if kind == "bimodal":
        low_key = shape.low[0]
        peaks = tuple(key for key in ("T1", "T2", "T3") if key != low_key)
        headline = message(
            f"thirds.bimodal.{tense}",
            language,
            month=month_label,
            peaks=message(f"thirds.peaks.{low_key}", language),
        )
        return MonthThirdsInsight(kind=kind, headline=headline, focus=peaks)

    headline = message(
        f"thirds.{kind}.{tense}",
        language,
        month=month_label,
        third=message(f"thirds.name.{top_key}", language),
        timing=message(f"thirds.timing.{top_key}", language),
    )
    focus = None if kind == "spread" else (top_key,)
    return MonthThirdsInsight(kind=kind, headline=headline, focus=focus)
