"""
Month pace: cumulative spend of a selected month against a baseline built
from up to three consecutive prior months.

The baseline at each day is the median (never the mean) of the qualifying
months' cumulative spend at the equivalent day, which keeps one unusual
month from dragging the reference.
"""
from __future__ import annotations

import logging
import statistics
from collections import defaultdict
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Iterable, List, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .dates import days_in_month, is_valid_month_key, shift_month_key
from .records import ExpenseRecord, parse_expense_records

logger = logging.getLogger(__name__)

STATUS_CONTENIDO = "contenido"
STATUS_NORMAL = "normal"
STATUS_ACELERADO = "acelerado"

CONFIDENCE_NONE = "sin_referencia"
CONFIDENCE_PRELIMINARY = "preliminar"
CONFIDENCE_SOLID = "solida"


class MonthPaceConfig(BaseModel):
    """Validity rules for baseline months and the status thresholds on R."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    min_active_days: int = Field(default=8, ge=0, alias="minActiveDays")
    max_first_expense_day: int = Field(default=15, ge=1, le=31, alias="maxFirstExpenseDay")
    threshold_contenido: float = Field(default=0.9, gt=0, alias="thresholdContenido")
    threshold_acelerado: float = Field(default=1.1, gt=0, alias="thresholdAcelerado")
    max_baseline_months: Literal[1, 2, 3] = Field(default=3, alias="maxBaselineMonths")

    @model_validator(mode="after")
    def _check_thresholds(self) -> "MonthPaceConfig":
        if self.threshold_contenido > self.threshold_acelerado:
            raise ValueError("threshold_contenido must not exceed threshold_acelerado")
        return self


DEFAULT_MONTH_PACE_CONFIG = MonthPaceConfig()

# camelCase key -> field name
CONFIG_FIELD_BY_ALIAS = {
    info.alias: name for name, info in MonthPaceConfig.model_fields.items() if info.alias
}


def resolve_config(
    config: Union[MonthPaceConfig, Mapping[str, Any], None] = None,
) -> MonthPaceConfig:
    """
    Merge partial overrides over the defaults. Keys may use either the field
    name or its camelCase alias; unknown keys raise ValidationError.
    """
    if config is None:
        return DEFAULT_MONTH_PACE_CONFIG
    if isinstance(config, MonthPaceConfig):
        return config
    merged = DEFAULT_MONTH_PACE_CONFIG.model_dump()
    for key, value in config.items():
        merged[CONFIG_FIELD_BY_ALIAS.get(key, key)] = value
    return MonthPaceConfig(**merged)


@dataclass
class MonthSeries:
    month_key: str
    days_in_month: int
    # index 0 is unused so that index == day of month
    daily_totals: List[float]
    daily_cumulative: List[float]
    active_days: int
    first_day_with_expense: Optional[int]


@dataclass
class MonthPaceResult:
    selected_month_key: str
    day_limit: int
    actual_to_day: float
    baseline_to_day: Optional[float]
    avg_daily_actual: float
    ratio: Optional[float]
    delta_pct: Optional[float]
    status: Optional[str]
    confidence: str
    baseline_months_used: List[str]
    meta: Dict[str, Any] = field(default_factory=dict)
    chart: List[Dict[str, float]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def build_month_series(month_key: str, records: Iterable[ExpenseRecord]) -> Optional[MonthSeries]:
    days = days_in_month(month_key)
    if not days:
        return None

    daily_totals = [0.0] * (days + 1)
    daily_cumulative = [0.0] * (days + 1)
    active = set()
    first_day: Optional[int] = None

    for record in records:
        day = record.day
        # e.g. day 31 in a 30-day month
        if day > days:
            continue
        if record.amount <= 0:
            continue
        daily_totals[day] += record.amount
        active.add(day)
        if first_day is None or day < first_day:
            first_day = day

    for day in range(1, days + 1):
        daily_cumulative[day] = daily_cumulative[day - 1] + daily_totals[day]

    return MonthSeries(
        month_key=month_key,
        days_in_month=days,
        daily_totals=daily_totals,
        daily_cumulative=daily_cumulative,
        active_days=len(active),
        first_day_with_expense=first_day,
    )


def baseline_rejection(series: MonthSeries, config: MonthPaceConfig) -> Optional[str]:
    """Why a prior month cannot serve as baseline, or None when it qualifies."""
    if series.first_day_with_expense is None:
        return f"{series.month_key}: no expenses"
    if series.active_days < config.min_active_days:
        return f"{series.month_key}: {series.active_days} active days < {config.min_active_days}"
    if series.first_day_with_expense > config.max_first_expense_day:
        return (
            f"{series.month_key}: first expense on day {series.first_day_with_expense} "
            f"> {config.max_first_expense_day}"
        )
    return None


def classify_ratio(ratio: float, config: MonthPaceConfig) -> str:
    if ratio < config.threshold_contenido:
        return STATUS_CONTENIDO
    if ratio > config.threshold_acelerado:
        return STATUS_ACELERADO
    return STATUS_NORMAL


def confidence_for(valid_months: int) -> str:
    if valid_months >= 2:
        return CONFIDENCE_SOLID
    if valid_months == 1:
        return CONFIDENCE_PRELIMINARY
    return CONFIDENCE_NONE


def group_by_month(records: Iterable[ExpenseRecord]) -> Dict[str, List[ExpenseRecord]]:
    grouped: Dict[str, List[ExpenseRecord]] = defaultdict(list)
    for record in records:
        grouped[record.month_key].append(record)
    return grouped


def compute_month_pace(
    expenses: Optional[Iterable[Any]],
    selected_month_key: str,
    day_limit: int,
    config: Union[MonthPaceConfig, Mapping[str, Any], None] = None,
) -> Optional[MonthPaceResult]:
    """
    Compare the selected month's cumulative spend up to ``day_limit`` with
    the median cumulative spend of qualifying prior months.

    ``expenses`` should span the selected month and the prior months used as
    baseline. Returns None for a malformed ``selected_month_key``.
    """
    cfg = resolve_config(config)

    if not is_valid_month_key(selected_month_key):
        return None

    by_month = group_by_month(parse_expense_records(expenses))
    selected = build_month_series(selected_month_key, by_month.get(selected_month_key, []))
    if selected is None:
        return None

    try:
        limit = int(day_limit)
    except (TypeError, ValueError, OverflowError):
        limit = 1
    limit = max(1, min(limit, selected.days_in_month))

    actual_to_day = selected.daily_cumulative[limit]
    avg_daily_actual = actual_to_day / limit

    valid_series: List[MonthSeries] = []
    reasons: List[str] = []
    for offset in range(1, cfg.max_baseline_months + 1):
        month_key = shift_month_key(selected_month_key, -offset)
        if month_key is None:
            continue
        series = build_month_series(month_key, by_month.get(month_key, []))
        if series is None:
            continue
        rejection = baseline_rejection(series, cfg)
        if rejection:
            reasons.append(rejection)
            continue
        valid_series.append(series)

    if reasons:
        logger.debug(f"Baseline months skipped for {selected_month_key}: {reasons}")

    baseline_cumulative: Optional[List[float]] = None
    baseline_to_day: Optional[float] = None
    if valid_series:
        baseline_cumulative = [0.0] * (limit + 1)
        for day in range(1, limit + 1):
            baseline_cumulative[day] = statistics.median(
                s.daily_cumulative[min(day, s.days_in_month)] for s in valid_series
            )
        baseline_to_day = baseline_cumulative[limit]
    else:
        reasons.append("no valid prior months for baseline")

    ratio: Optional[float] = None
    delta_pct: Optional[float] = None
    status: Optional[str] = None
    if baseline_to_day is not None and baseline_to_day > 0:
        ratio = actual_to_day / baseline_to_day
        delta_pct = (ratio - 1) * 100
        status = classify_ratio(ratio, cfg)

    chart: List[Dict[str, float]] = []
    for day in range(1, limit + 1):
        point = {"day": day, "actual": selected.daily_cumulative[day]}
        if baseline_cumulative is not None:
            point["baseline"] = baseline_cumulative[day]
        chart.append(point)

    return MonthPaceResult(
        selected_month_key=selected_month_key,
        day_limit=limit,
        actual_to_day=actual_to_day,
        baseline_to_day=baseline_to_day,
        avg_daily_actual=avg_daily_actual,
        ratio=ratio,
        delta_pct=delta_pct,
        status=status,
        confidence=confidence_for(len(valid_series)),
        baseline_months_used=[s.month_key for s in valid_series],
        meta={
            "valid_months_found": len(valid_series),
            "reasons_no_baseline": reasons or None,
        },
        chart=chart,
    )
