from datetime import date
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

EvolutionPeriod = Literal["last_6_months", "last_12_months", "year_to_date"]
MonthPeriod = Literal["current_month", "previous_month"]


class AnalyticsRequest(BaseModel):
    """
    Records are passed as loose mappings; invalid ones are skipped by the
    analytics parse step instead of failing the whole request.
    """

    model_config = ConfigDict(populate_by_name=True)

    expenses: List[Dict[str, Any]] = Field(default_factory=list)
    today: Optional[date] = None
    currency: Optional[str] = None
    language: Optional[str] = None


class EvolutionRequest(AnalyticsRequest):
    period: EvolutionPeriod = "last_6_months"
    category_id: str = Field(default="all", alias="categoryId")


class ThirdsRequest(AnalyticsRequest):
    month_key: Optional[str] = Field(default=None, alias="monthKey")
    period: MonthPeriod = "current_month"


class PaceConfigOverrides(BaseModel):
    """Partial month pace config; unknown keys are rejected rather than ignored."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    min_active_days: Optional[int] = Field(default=None, alias="minActiveDays")
    max_first_expense_day: Optional[int] = Field(default=None, alias="maxFirstExpenseDay")
    threshold_contenido: Optional[float] = Field(default=None, alias="thresholdContenido")
    threshold_acelerado: Optional[float] = Field(default=None, alias="thresholdAcelerado")
    max_baseline_months: Optional[Literal[1, 2, 3]] = Field(default=None, alias="maxBaselineMonths")


class PaceRequest(AnalyticsRequest):
    selected_month_key: str = Field(alias="selectedMonthKey")
    day_limit: int = Field(alias="dayLimit")
    period: MonthPeriod = "current_month"
    config: Optional[PaceConfigOverrides] = None


class BundleRequest(AnalyticsRequest):
    period: MonthPeriod = "current_month"
    evolution_period: EvolutionPeriod = Field(default="last_6_months", alias="evolutionPeriod")
    category_id: str = Field(default="all", alias="categoryId")


class MonthSummaryRequest(AnalyticsRequest):
    pass
