"""Money value type.

A Money pairs an ISO 4217 currency code with an exact decimal amount.
Amounts are never floats: floats given to money() go through str() so
money("EUR", 11.4) holds Decimal("11.4"), not the binary approximation.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Decimal

from .currencies.metadata import decimal_digits

__all__ = [
    "Money",
    "money",
]


@dataclass(frozen=True, slots=True)
class Money:
    """An amount of a single currency.

    Immutable, thread-safe, hashable. Equality compares the currency code and
    the numeric amount, so Money("EUR", Decimal("11.40")) equals
    Money("EUR", Decimal("11.4")).

    Attributes:
        currency: ISO 4217 currency code (e.g., 'EUR')
        amount: Exact decimal amount (may be negative)
    """

    currency: str
    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            msg = f"Money.amount must be Decimal, got {type(self.amount).__name__}"
            raise TypeError(msg)

    def __str__(self) -> str:
        return f"{self.currency} {self.amount}"

    @property
    def decimals(self) -> int:
        """Minor units of the currency (2 for EUR, 0 for JPY, 3 for BHD)."""
        return decimal_digits(self.currency)

    def quantized(self) -> Money:
        """Return a copy rounded to the currency's minor units (banker's rounding)."""
        exponent = Decimal(1).scaleb(-self.decimals)
        return Money(self.currency, self.amount.quantize(exponent, rounding=ROUND_HALF_EVEN))


def money(currency: str, amount: Decimal | int | float | str) -> Money:
    """Create a Money from a currency code and any numeric amount.

    Args:
        currency: ISO 4217 code, case-insensitive
        amount: Decimal, int, float (converted via str) or numeric string

    Returns:
        Money with an uppercase currency code

    Example:
        >>> money("eur", 11.4)
        Money(currency='EUR', amount=Decimal('11.4'))
    """
    match amount:
        case Decimal():
            value = amount
        case bool():
            msg = "Money amount must be numeric, got bool"
            raise TypeError(msg)
        case float():
            value = Decimal(str(amount))
        case int() | str():
            value = Decimal(amount)
        case _:
            msg = f"Money amount must be numeric, got {type(amount).__name__}"
            raise TypeError(msg)
    return Money(currency.upper(), value)
