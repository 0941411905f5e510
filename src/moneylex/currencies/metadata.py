"""ISO 4217 currency metadata via Babel CLDR data.

Provides the set of known currency codes, their minor units (decimal digits)
and display symbols. All types are immutable and hashable; results are cached.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cache, lru_cache
from typing import TypeIs

from babel.numbers import get_currency_precision, get_currency_symbol, list_currencies

from moneylex.constants import (
    DEFAULT_DECIMAL_DIGITS,
    ISO_CURRENCY_CODE_LENGTH,
    MAX_LOCALE_CACHE_SIZE,
)
from moneylex.locale_utils import get_babel_locale, normalize_locale

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Type aliases
    "CurrencyCode",
    # Data classes
    "CurrencyInfo",
    # Lookup functions
    "currency_codes",
    "decimal_digits",
    "get_currency",
    # Type guards
    "is_currency_code",
]


type CurrencyCode = str
"""ISO 4217 currency code (e.g., 'USD', 'EUR', 'GBP')."""


@dataclass(frozen=True, slots=True)
class CurrencyInfo:
    """ISO 4217 currency data with localized presentation.

    Attributes:
        code: ISO 4217 currency code (e.g., 'USD', 'EUR').
        decimal_digits: Standard decimal places (0, 2, 3, or 4).
        symbol: Locale-specific symbol (e.g., '$', 'US$', 'USD').
    """

    code: CurrencyCode
    decimal_digits: int
    symbol: str


def _is_code_shaped(value: str) -> bool:
    return len(value) == ISO_CURRENCY_CODE_LENGTH and value.isascii() and value.isalpha()


@cache
def currency_codes() -> frozenset[CurrencyCode]:
    """Return every currency code known to CLDR, including historical ones.

    Combines Babel's global currency list with the English display-name table,
    which also carries retired codes such as ADP or FRF.
    """
    codes = set(list_currencies()) | set(get_babel_locale("en").currencies)
    return frozenset(code for code in codes if _is_code_shaped(code) and code.isupper())


def is_currency_code(value: object) -> TypeIs[CurrencyCode]:
    """Check if value is a known ISO 4217 code (case-insensitive).

    Args:
        value: Object to check.

    Returns:
        True if value is a known ISO 4217 currency code.
    """
    return isinstance(value, str) and value.upper() in currency_codes()


@lru_cache(maxsize=512)
def decimal_digits(code: str) -> int:
    """Return the number of minor units for a currency.

    Unknown codes fall back to the ISO 4217 default of 2; known codes without
    an explicit CLDR entry get the same default from Babel.

    Example:
        >>> decimal_digits("JPY"), decimal_digits("BHD"), decimal_digits("CLF")
        (0, 3, 4)
    """
    code_upper = code.upper()
    if code_upper not in currency_codes():
        return DEFAULT_DECIMAL_DIGITS
    return get_currency_precision(code_upper)


@lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _get_currency_impl(code_upper: str, locale_norm: str) -> CurrencyInfo | None:
    if code_upper not in currency_codes():
        return None
    return CurrencyInfo(
        code=code_upper,
        decimal_digits=decimal_digits(code_upper),
        symbol=get_currency_symbol(code_upper, locale=locale_norm),
    )


def get_currency(code: str, locale: str = "en") -> CurrencyInfo | None:
    """Look up ISO 4217 currency by code.

    Args:
        code: ISO 4217 currency code (e.g., 'USD', 'EUR'). Case-insensitive.
        locale: Locale for symbol localization (default: 'en'). Accepts BCP-47
            (en-US) or POSIX (en_US) formats; normalized internally.

    Returns:
        CurrencyInfo if found, None if unknown code.

    Thread-safe. Results cached per normalized (code, locale) pair.
    """
    return _get_currency_impl(code.upper(), normalize_locale(locale))
