from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, Iterable, Mapping, Optional, Union

from .dates import (
    days_in_month,
    month_end,
    month_key_from_date,
    month_label,
    month_start,
    shift_month_key,
)
from .evolution import ALL_CATEGORIES, PERIOD_LAST_6_MONTHS, MonthlyEvolutionResult, compute_monthly_evolution
from .formatting import DEFAULT_CURRENCY
from .insights import (
    build_month_pace_insight,
    build_month_summary_insight,
    build_month_thirds_insight,
    build_monthly_evolution_insight,
)
from .insights.thirds import PERIOD_CURRENT, PERIOD_PREVIOUS
from .pace import MonthPaceConfig, MonthPaceResult, compute_month_pace, resolve_config
from .records import parse_expense_records
from .summary import RangeSummary, build_range_summary
from .thirds import STATE_CLOSED, MonthThirdsMetrics, compute_month_thirds, third_range_labels, third_states

logger = logging.getLogger(__name__)


class SpendingAnalyzer:
    """
    Stateless analytics helper shared by the API routes and any batch job.

    Holds only display preferences and the pace configuration; every method
    is a pure function of its arguments, with ``today`` injectable.
    """

    def __init__(
        self,
        pace_config: Union[MonthPaceConfig, Mapping[str, Any], None] = None,
        currency: str = DEFAULT_CURRENCY,
        language: str = "es-CO",
    ) -> None:
        self._pace_config = resolve_config(pace_config)
        self._currency = currency
        self._language = language

    @property
    def pace_config(self) -> MonthPaceConfig:
        return self._pace_config

    def monthly_evolution(
        self,
        expenses: Iterable[Any],
        period: str = PERIOD_LAST_6_MONTHS,
        category_id: str = ALL_CATEGORIES,
        today: Optional[date] = None,
    ) -> Optional[MonthlyEvolutionResult]:
        return compute_monthly_evolution(expenses, period, category_id, today, self._language)

    def month_thirds(self, expenses: Iterable[Any], month_key: Optional[str] = None) -> Optional[MonthThirdsMetrics]:
        return compute_month_thirds(expenses, month_key)

    def month_pace(
        self,
        expenses: Iterable[Any],
        selected_month_key: str,
        day_limit: int,
    ) -> Optional[MonthPaceResult]:
        return compute_month_pace(expenses, selected_month_key, day_limit, self._pace_config)

    def month_summary(
        self,
        expenses: Iterable[Any],
        date_from: Optional[str] = None,
        date_to: Optional[str] = None,
    ) -> RangeSummary:
        return build_range_summary(expenses, date_from, date_to)

    def performance_report(
        self,
        expenses: Iterable[Any],
        period: str = PERIOD_CURRENT,
        today: Optional[date] = None,
        evolution_period: str = PERIOD_LAST_6_MONTHS,
        category_id: str = ALL_CATEGORIES,
    ) -> Dict[str, Any]:
        """
        Every metric and insight for the current month (up to ``today``) or
        the previous, closed month.
        """
        today = today or date.today()
        records = parse_expense_records(expenses)
        current_key = month_key_from_date(today)

        if period == PERIOD_PREVIOUS:
            selected = shift_month_key(current_key, -1)
            day_limit = days_in_month(selected)
            date_to = month_end(selected)
            states = {key: STATE_CLOSED for key in ("T1", "T2", "T3")}
        else:
            period = PERIOD_CURRENT
            selected = current_key
            day_limit = today.day
            date_to = today.isoformat()
            states = third_states(today.day, days_in_month(selected))

        label = month_label(selected, self._language)
        logger.info(f"Building performance report for {selected} ({period}) from {len(records)} records")

        evolution = self.monthly_evolution(records, evolution_period, category_id, today)
        thirds = self.month_thirds(records, selected)
        pace = self.month_pace(records, selected, day_limit)
        summary = self.month_summary(records, month_start(selected), date_to)

        return {
            "period": period,
            "selected_month_key": selected,
            "month_label": label,
            "evolution": evolution.to_dict() if evolution else None,
            "thirds": thirds.to_dict() if thirds else None,
            "third_states": states,
            "third_ranges": third_range_labels(selected, self._language),
            "pace": pace.to_dict() if pace else None,
            "summary": summary.to_dict(),
            "insights": {
                "evolution": build_monthly_evolution_insight(evolution, category_id, self._language).to_dict(),
                "thirds": build_month_thirds_insight(thirds, period, label, self._language).to_dict(),
                "pace": build_month_pace_insight(
                    pace, period, label, self._currency, self._language
                ).to_dict(),
                "summary": build_month_summary_insight(summary, self._currency, self._language).to_dict(),
            },
        }
