"""Currency data: ISO 4217 metadata, regional preferences and symbol tables.

All data comes from Babel's bundled CLDR database; tables are built lazily
and cached.

Python 3.13+.
"""

from .metadata import (
    CurrencyCode,
    CurrencyInfo,
    currency_codes,
    decimal_digits,
    get_currency,
    is_currency_code,
)
from .preferred import (
    dollar_symbol,
    krone_symbol,
    pound_symbol,
    preferred_currencies,
    rupee_symbol,
    territory_currencies,
    yen_symbol,
)
from .symbols import CurrencyMatch, CurrencySymbols

__all__ = [
    "CurrencyCode",
    "CurrencyInfo",
    "CurrencyMatch",
    "CurrencySymbols",
    "currency_codes",
    "decimal_digits",
    "dollar_symbol",
    "get_currency",
    "is_currency_code",
    "krone_symbol",
    "pound_symbol",
    "preferred_currencies",
    "rupee_symbol",
    "territory_currencies",
    "yen_symbol",
]
