from __future__ import annotations

import logging
import math
import re
from datetime import date, datetime
from typing import Any, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
DEFAULT_CATEGORY = "otros"


class ExpenseRecord(BaseModel):
    """A single dated expense, already scoped to one user and one currency."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    date: str
    category_id: str = Field(default=DEFAULT_CATEGORY, alias="categoryId")
    amount: float
    currency: Optional[str] = None

    @field_validator("date", mode="before")
    @classmethod
    def _normalize_date(cls, value: Any) -> Any:
        if isinstance(value, datetime):
            return value.date().isoformat()
        if isinstance(value, date):
            return value.isoformat()
        if isinstance(value, str):
            # Timestamps such as '2025-11-01T12:00:00Z' keep their calendar date
            return value.strip()[:10]
        return value

    @field_validator("date")
    @classmethod
    def _check_date(cls, value: str) -> str:
        if not DATE_RE.match(value):
            raise ValueError("date must be YYYY-MM-DD")
        month, day = int(value[5:7]), int(value[8:10])
        if not 1 <= month <= 12 or not 1 <= day <= 31:
            raise ValueError("date out of range")
        return value

    @field_validator("category_id", mode="before")
    @classmethod
    def _default_category(cls, value: Any) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            return DEFAULT_CATEGORY
        return value

    @field_validator("amount", mode="before")
    @classmethod
    def _reject_bool_amount(cls, value: Any) -> Any:
        # bool is an int subclass; lax mode would read True as 1.0
        if isinstance(value, bool):
            raise ValueError("amount must be a number")
        return value

    @field_validator("amount")
    @classmethod
    def _check_amount(cls, value: float) -> float:
        if not math.isfinite(value):
            raise ValueError("amount must be finite")
        if value < 0:
            raise ValueError("amount must be non-negative")
        return value

    @property
    def month_key(self) -> str:
        return self.date[:7]

    @property
    def day(self) -> int:
        return int(self.date[8:10])


def parse_expense_record(raw: Any) -> Optional[ExpenseRecord]:
    """Validate one raw record; returns None instead of raising."""
    if isinstance(raw, ExpenseRecord):
        return raw
    if isinstance(raw, BaseModel):
        raw = raw.model_dump(by_alias=False)
    if not isinstance(raw, dict):
        logger.debug(f"Dropping non-mapping expense record: {raw!r}")
        return None
    try:
        return ExpenseRecord.model_validate(raw)
    except ValidationError as e:
        logger.debug(f"Dropping invalid expense record {raw!r}: {e.error_count()} error(s)")
        return None


def parse_expense_records(raw_records: Optional[Iterable[Any]]) -> List[ExpenseRecord]:
    """
    Convert loose expense payloads into strict ExpenseRecord values.

    Records with a missing or malformed date, or a boolean, non-finite or
    negative amount, are skipped. Already-parsed records pass through untouched.
    """
    if not raw_records:
        return []

    records: List[ExpenseRecord] = []
    dropped = 0
    for raw in raw_records:
        record = parse_expense_record(raw)
        if record is None:
            dropped += 1
            continue
        records.append(record)

    if dropped:
        logger.debug(f"Skipped {dropped} invalid expense record(s) out of {dropped + len(records)}")
    return records
