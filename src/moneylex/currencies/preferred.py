"""Regional preference tables for symbols shared by several currencies.

'$', '£', '¥', 'kr' and 'Rs' each name many currencies. For a region the
tables below give the currency a reader there most likely means. Regions
without an entry fall back to the family default: USD, GBP, JPY, DKK, INR.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping
from functools import lru_cache
from types import MappingProxyType

from babel.numbers import get_territory_currencies

from moneylex.constants import DEFAULT_PREFERRED_CURRENCIES, MAX_LOCALE_CACHE_SIZE

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Family lookups
    "dollar_symbol",
    "pound_symbol",
    "yen_symbol",
    "krone_symbol",
    "rupee_symbol",
    # Ranked lists
    "preferred_currencies",
    "territory_currencies",
]

# ============================================================================
# REGION TABLES
# ============================================================================

_DOLLAR: Mapping[str, str] = MappingProxyType({
    "AG": "XCD", "AI": "XCD", "AR": "ARS", "AU": "AUD", "BB": "BBD", "BM": "BMD",
    "BN": "BND", "BS": "BSD", "BZ": "BZD", "CA": "CAD", "CC": "AUD", "CK": "NZD",
    "CL": "CLP", "CO": "COP", "CU": "CUP", "CX": "AUD", "DM": "XCD", "FJ": "FJD",
    "GD": "XCD", "GY": "GYD", "HK": "HKD", "JM": "JMD", "KI": "AUD", "KN": "XCD",
    "KY": "KYD", "LC": "XCD", "LR": "LRD", "MS": "XCD", "MX": "MXN", "NA": "NAD",
    "NF": "AUD", "NR": "AUD", "NU": "NZD", "NZ": "NZD", "PN": "NZD", "SB": "SBD",
    "SG": "SGD", "SR": "SRD", "TK": "NZD", "TT": "TTD", "TV": "AUD", "TW": "TWD",
    "UY": "UYU", "VC": "XCD",
})

_POUND: Mapping[str, str] = MappingProxyType({
    "EG": "EGP", "FK": "FKP", "GI": "GIP", "LB": "LBP", "SD": "SDG", "SH": "SHP",
    "SS": "SSP", "SY": "SYP",
})

_YEN: Mapping[str, str] = MappingProxyType({"CN": "CNY"})

_KRONE: Mapping[str, str] = MappingProxyType({
    "IS": "ISK", "NO": "NOK", "SE": "SEK", "SJ": "NOK", "BV": "NOK",
})

_RUPEE: Mapping[str, str] = MappingProxyType({
    "ID": "IDR", "LK": "LKR", "MU": "MUR", "NP": "NPR", "PK": "PKR", "SC": "SCR",
})

_DEFAULT_DOLLAR, _DEFAULT_POUND, _DEFAULT_YEN, _DEFAULT_KRONE, _DEFAULT_RUPEE = (
    DEFAULT_PREFERRED_CURRENCIES
)

# ============================================================================
# FAMILY LOOKUPS
# ============================================================================


def dollar_symbol(region: str) -> str:
    """Currency a region means by '$' (USD where it has no dollar of its own)."""
    return _DOLLAR.get(region.upper(), _DEFAULT_DOLLAR)


def pound_symbol(region: str) -> str:
    """Currency a region means by '£'."""
    return _POUND.get(region.upper(), _DEFAULT_POUND)


def yen_symbol(region: str) -> str:
    """Currency a region means by '¥'."""
    return _YEN.get(region.upper(), _DEFAULT_YEN)


def krone_symbol(region: str) -> str:
    """Currency a region means by 'kr'."""
    return _KRONE.get(region.upper(), _DEFAULT_KRONE)


def rupee_symbol(region: str) -> str:
    """Currency a region means by 'Rs' or '₨'."""
    return _RUPEE.get(region.upper(), _DEFAULT_RUPEE)


# ============================================================================
# RANKED LISTS
# ============================================================================


def preferred_currencies(region: str | None = None) -> tuple[str, ...]:
    """Return the five family choices for a region.

    Args:
        region: ISO 3166 region code (case-insensitive), or None

    Returns:
        Dollar, pound, yen, krone and rupee choices in that order; the global
        default for None.

    Example:
        >>> preferred_currencies("AU")
        ('AUD', 'GBP', 'JPY', 'DKK', 'INR')
        >>> preferred_currencies("PK")
        ('USD', 'GBP', 'JPY', 'DKK', 'PKR')
    """
    if region is None:
        return DEFAULT_PREFERRED_CURRENCIES
    return (
        dollar_symbol(region),
        pound_symbol(region),
        yen_symbol(region),
        krone_symbol(region),
        rupee_symbol(region),
    )


@lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _territory_currencies_impl(region_upper: str) -> tuple[str, ...]:
    return tuple(get_territory_currencies(region_upper))


def territory_currencies(region: str) -> tuple[str, ...]:
    """Return the currencies currently legal tender in a region (CLDR).

    Args:
        region: ISO 3166 region code (case-insensitive)

    Returns:
        Currency codes in CLDR order, empty for unknown regions.

    Thread-safe. Result cached per normalized region.
    """
    return _territory_currencies_impl(region.upper())
