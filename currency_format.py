"""
currency_format.py - Locale-aware currency display.

Usage:
    format_currency(112500, "USD")           # "$112,500.00"
    format_currency(112500, "EUR", "de_DE")  # "112.500,00 €"
"""

from __future__ import annotations

import math
from typing import Any, Optional

from babel.numbers import format_currency as _babel_format_currency

import config

SUPPORTED_CURRENCIES = ("USD", "EUR")


def _to_amount(amount: Any) -> float:
    try:
        value = float(amount)
    except (TypeError, ValueError):
        return 0.0
    return value if math.isfinite(value) else 0.0


def format_currency(amount: Any, currency_code: str = "USD", locale: Optional[str] = None) -> str:
    """
    Formats an amount with the currency's symbol and the locale's grouping rules.

    Non-numeric, missing or non-finite amounts render as zero. The currency code
    is not validated here.
    """
    return _babel_format_currency(
        _to_amount(amount),
        currency_code,
        locale=locale or config.DEFAULT_LOCALE,
    )
