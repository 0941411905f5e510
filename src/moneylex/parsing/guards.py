"""Type guard functions for parse result narrowing.

Provides TypeIs-based type guards so mypy narrows values produced by the
parsers (or read back from storage) to usable money and amounts.

Python 3.13+ with TypeIs support (PEP 742).

Note: All guards accept None and any other object and return False. This
keeps call sites to a single check instead of isinstance() plus finiteness.

Example:
    >>> from decimal import Decimal
    >>> from moneylex import parse
    >>> from moneylex.parsing.guards import is_valid_money
    >>> result = parse("EUR 11,40", "de-DE")
    >>> if is_valid_money(result):
    ...     gross = result.amount * Decimal("1.21")
"""

from decimal import Decimal
from typing import TypeIs

from moneylex.currencies.metadata import is_currency_code
from moneylex.money import Money

__all__ = [
    "is_valid_amount",
    "is_valid_money",
]


def is_valid_amount(value: object) -> TypeIs[Decimal]:
    """Type guard: Check if value is a finite Decimal (not None/NaN/Infinity).

    Args:
        value: Amount from NumberParser.parse() or Money.amount

    Returns:
        True if value is a finite Decimal, False otherwise

    Example:
        >>> is_valid_amount(Decimal("1234.56"))
        True
        >>> is_valid_amount(Decimal("NaN")), is_valid_amount(1.5)
        (False, False)
    """
    return isinstance(value, Decimal) and value.is_finite()


def is_valid_money(value: object) -> TypeIs[Money]:
    """Type guard: Check if value is Money with a known code and finite amount.

    Args:
        value: Result of a money parser (may be None)

    Returns:
        True if value is Money with an ISO 4217 code and a finite amount

    Example:
        >>> is_valid_money(Money("EUR", Decimal("11.40")))
        True
        >>> is_valid_money(Money("XYZ", Decimal("1")))
        False
    """
    return (
        isinstance(value, Money)
        and is_currency_code(value.currency)
        and is_valid_amount(value.amount)
    )
