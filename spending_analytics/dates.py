"""
Month-key and calendar helpers shared by every analytics builder.

All helpers work on plain ``YYYY-MM`` / ``YYYY-MM-DD`` strings so that
bucketing never depends on the server timezone. They are total: malformed
input gives ``None`` (or an empty list) instead of raising.
"""
from __future__ import annotations

import calendar
import re
from datetime import date
from typing import List, Optional

MONTH_KEY_RE = re.compile(r"^\d{4}-\d{2}$")

# Upper bound for continuous month ranges (20 years)
MAX_MONTH_SPAN = 240

MONTH_SHORT = {
    "es": ["Ene", "Feb", "Mar", "Abr", "May", "Jun", "Jul", "Ago", "Sep", "Oct", "Nov", "Dic"],
    "en": ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"],
}

DEFAULT_LANGUAGE = "es"


def language_code(language: Optional[str]) -> str:
    """Reduce a locale tag ("es-CO", "en_US") to a supported language code."""
    if not language:
        return DEFAULT_LANGUAGE
    code = language.replace("_", "-").split("-")[0].lower()
    return code if code in MONTH_SHORT else DEFAULT_LANGUAGE


def _split_month_key(month_key: Optional[str]) -> Optional[tuple]:
    if not isinstance(month_key, str) or not MONTH_KEY_RE.match(month_key):
        return None
    year, month = int(month_key[:4]), int(month_key[5:7])
    if month < 1 or month > 12:
        return None
    return year, month


def is_valid_month_key(month_key: Optional[str]) -> bool:
    return _split_month_key(month_key) is not None


def month_key_from_date_str(date_str: Optional[str]) -> Optional[str]:
    """'2025-12-31' -> '2025-12'."""
    if not isinstance(date_str, str) or len(date_str) < 7:
        return None
    month_key = date_str[:7]
    return month_key if is_valid_month_key(month_key) else None


def month_key_from_date(value: date) -> str:
    return f"{value.year:04d}-{value.month:02d}"


def day_from_date_str(date_str: Optional[str], zero_based: bool = False) -> Optional[int]:
    """
    Day of month from 'YYYY-MM-DD' (1..31, or 0..30 when ``zero_based``).
    """
    if not isinstance(date_str, str) or len(date_str) < 10:
        return None
    chunk = date_str[8:10]
    if not chunk.isdigit():
        return None
    day = int(chunk)
    if day < 1 or day > 31:
        return None
    return day - 1 if zero_based else day


def days_in_month(month_key: Optional[str]) -> Optional[int]:
    parts = _split_month_key(month_key)
    if parts is None:
        return None
    return calendar.monthrange(*parts)[1]


def month_start(month_key: Optional[str]) -> Optional[str]:
    if not is_valid_month_key(month_key):
        return None
    return f"{month_key}-01"


def month_end(month_key: Optional[str]) -> Optional[str]:
    days = days_in_month(month_key)
    if not days:
        return None
    return f"{month_key}-{days:02d}"


def shift_month_key(month_key: Optional[str], delta_months: int) -> Optional[str]:
    """
    Move a month key N months forward (positive) or backward (negative).

    shift_month_key("2026-01", -1) -> "2025-12"
    """
    parts = _split_month_key(month_key)
    if parts is None:
        return None
    year, month = parts
    index = year * 12 + (month - 1) + int(delta_months)
    if index < 0:
        return None
    next_year, next_month0 = divmod(index, 12)
    if next_year > 9999:
        return None
    return f"{next_year:04d}-{next_month0 + 1:02d}"


def month_keys_between(start_month_key: str, end_month_key: str) -> List[str]:
    """Continuous ascending list of month keys, both ends inclusive."""
    start = _split_month_key(start_month_key)
    end = _split_month_key(end_month_key)
    if start is None or end is None or start > end:
        return []

    keys: List[str] = []
    current = start_month_key
    for _ in range(MAX_MONTH_SPAN):
        keys.append(current)
        if current == end_month_key:
            break
        current = shift_month_key(current, 1)
        if current is None:
            break
    return keys


def last_n_month_keys(anchor_month_key: str, n: int) -> List[str]:
    """last_n_month_keys("2026-01", 3) -> ["2025-11", "2025-12", "2026-01"]"""
    if not is_valid_month_key(anchor_month_key):
        return []
    count = int(n)
    if count <= 0:
        return []
    start = shift_month_key(anchor_month_key, -(count - 1))
    if start is None:
        return [anchor_month_key]
    return month_keys_between(start, anchor_month_key)


def year_to_date_month_keys(anchor_month_key: str) -> List[str]:
    if not is_valid_month_key(anchor_month_key):
        return []
    return month_keys_between(f"{anchor_month_key[:4]}-01", anchor_month_key)


def month_short(month: int, language: Optional[str] = None) -> str:
    if month < 1 or month > 12:
        return ""
    return MONTH_SHORT[language_code(language)][month - 1]


def month_label(month_key: Optional[str], language: Optional[str] = None) -> Optional[str]:
    """'2026-01' -> 'Ene 2026' (es) / 'Jan 2026' (en)."""
    parts = _split_month_key(month_key)
    if parts is None:
        return None
    year, month = parts
    return f"{month_short(month, language)} {year}"


def day_month_label(date_str: Optional[str], language: Optional[str] = None) -> Optional[str]:
    """'2026-02-13' -> '13 Feb'."""
    month_key = month_key_from_date_str(date_str)
    day = day_from_date_str(date_str)
    if month_key is None or day is None:
        return None
    return f"{day:02d} {month_short(int(month_key[5:7]), language)}"
