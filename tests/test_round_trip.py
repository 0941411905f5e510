"""Round trips through Babel: format money for a locale, then parse it back.

The external formatter writes every amount with the locale's own symbols,
separators and currency placement; parsing the result with the same locale
must give back the displayed amount.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from babel.numbers import format_currency
from hypothesis import given, settings

from moneylex import Money, money, parse
from tests.strategies import (
    FORMAT_LOCALES,
    ROUND_TRIP_AMOUNTS,
    ROUND_TRIP_CURRENCIES,
    formatted_money,
)


@pytest.mark.parametrize("amount", ROUND_TRIP_AMOUNTS, ids=str)
@pytest.mark.parametrize("code", ROUND_TRIP_CURRENCIES)
@pytest.mark.parametrize("locale", FORMAT_LOCALES)
def test_babel_round_trip(locale: str, code: str, amount: Decimal) -> None:
    text = format_currency(amount, code, locale=locale)
    assert parse(text, locale) == money(code, amount).quantized()


class TestRoundTripExamples:
    """Spot checks of formatted output that exercise the hard cases."""

    def test_narrow_nbsp_grouping(self) -> None:
        text = format_currency(Decimal("1234567.89"), "EUR", locale="fr_FR")
        assert "\u202f" in text
        assert parse(text, "fr-FR") == money("EUR", "1234567.89")

    def test_apostrophe_grouping(self) -> None:
        text = format_currency(Decimal("1234567.89"), "CHF", locale="de_CH")
        assert parse(text, "de-CH") == money("CHF", "1234567.89")

    def test_three_decimal_tie_uses_locale(self) -> None:
        text = format_currency(Decimal("156.89"), "BHD", locale="de_DE")
        assert parse(text, "de-DE") == money("BHD", "156.890")


@pytest.mark.fuzz
@given(case=formatted_money())
@settings(deadline=None)
def test_formatted_money_property(case: tuple[str, str, Money]) -> None:
    """PROPERTY: Babel-formatted money parses back to the displayed amount."""
    text, locale, expected = case
    assert parse(text, locale) == expected
