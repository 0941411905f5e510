"""Hypothesis strategies for MoneyLex property-based testing.

Usage:
    from tests.strategies import money_amounts, grouped_numbers
    from tests.strategies.money import formatted_money
"""

from .money import (
    FORMAT_LOCALES,
    ROUND_TRIP_AMOUNTS,
    ROUND_TRIP_CURRENCIES,
    formatted_money,
    grouped_numbers,
    money_amounts,
    unambiguous_symbols,
)

__all__ = [
    "FORMAT_LOCALES",
    "ROUND_TRIP_AMOUNTS",
    "ROUND_TRIP_CURRENCIES",
    "formatted_money",
    "grouped_numbers",
    "money_amounts",
    "unambiguous_symbols",
]
