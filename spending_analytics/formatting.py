"""
Display formatting used by the insight layer only. Builders never format.
"""
from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from .dates import language_code

DEFAULT_CURRENCY = "COP"

ZERO_DECIMAL_CURRENCIES = {"COP", "CLP", "JPY"}

NARROW_SYMBOLS = {
    "COP": "$",
    "USD": "$",
    "MXN": "$",
    "CLP": "$",
    "ARS": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "BRL": "R$",
    "PEN": "S/",
}

# (thousands, decimal)
SEPARATORS = {
    "es": (".", ","),
    "en": (",", "."),
}

SUFFIX_SYMBOL_IN_ES = {"EUR"}


def round_half_up(value: float, digits: int = 0) -> float:
    """Round halves away from zero: 0.125 -> 0.13, 54.55 -> 54.6 (one digit)."""
    if not math.isfinite(value):
        return value
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def format_number(value: float, decimals: int, language: Optional[str] = None) -> str:
    thousands, decimal = SEPARATORS[language_code(language)]
    raw = f"{abs(value):,.{decimals}f}"
    text = raw.replace(",", "\0").replace(".", decimal).replace("\0", thousands)
    return f"-{text}" if value < 0 and text.strip("0.,") else text


def format_money(value: float, currency: Optional[str] = None, language: Optional[str] = None) -> str:
    """
    Money with a narrow symbol: '$ 120.000' (COP, es), '€120.00' (EUR, en),
    '120,00 €' (EUR, es). Unknown currencies fall back to their ISO code.
    """
    cur = (currency or DEFAULT_CURRENCY).upper()
    lang = language_code(language)
    amount = value if isinstance(value, (int, float)) and math.isfinite(value) else 0.0
    decimals = 0 if cur in ZERO_DECIMAL_CURRENCIES else 2
    number = format_number(round_half_up(amount, decimals), decimals, lang)
    symbol = NARROW_SYMBOLS.get(cur, cur)

    if lang == "es":
        if cur in SUFFIX_SYMBOL_IN_ES or symbol == cur:
            return f"{number} {symbol}"
        return f"{symbol} {number}"
    if symbol == cur:
        return f"{symbol} {number}"
    return f"{symbol}{number}"


def format_pct_short(pct: float, language: Optional[str] = None) -> str:
    """One decimal without a trailing '.0': 41.66 -> '41,7%' (es), 40.0 -> '40%'."""
    value = round_half_up(pct, 1)
    if value == int(value):
        return f"{int(value)}%"
    return f"{format_number(value, 1, language)}%"
