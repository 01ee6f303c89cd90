from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from spending_analytics import MonthPaceConfig


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    # App settings
    PROJECT_NAME: str = "SpendingAnalytics"
    API_PREFIX: str = "/api"
    DEBUG: bool = Field(default=False)
    LOG_LEVEL: str = Field(default="INFO")
    CORS_ORIGINS: list[str] = Field(default=["http://localhost:3000", "http://localhost:8000"])

    # Display defaults (overridable per request)
    DEFAULT_CURRENCY: str = "COP"
    DEFAULT_LANGUAGE: str = "es-CO"

    # Month pace knobs
    PACE_MIN_ACTIVE_DAYS: int = 8
    PACE_MAX_FIRST_EXPENSE_DAY: int = 15
    PACE_THRESHOLD_CONTENIDO: float = 0.9
    PACE_THRESHOLD_ACELERADO: float = 1.1
    PACE_MAX_BASELINE_MONTHS: Literal[1, 2, 3] = 3

    def pace_config(self) -> MonthPaceConfig:
        return MonthPaceConfig(
            min_active_days=self.PACE_MIN_ACTIVE_DAYS,
            max_first_expense_day=self.PACE_MAX_FIRST_EXPENSE_DAY,
            threshold_contenido=self.PACE_THRESHOLD_CONTENIDO,
            threshold_acelerado=self.PACE_THRESHOLD_ACELERADO,
            max_baseline_months=self.PACE_MAX_BASELINE_MONTHS,
        )


settings = Settings()
