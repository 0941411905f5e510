"""Tests for locale-aware number extraction (parsing/numbers.py)."""

from __future__ import annotations

from decimal import Decimal

import pytest
from hypothesis import given

from moneylex import AmbiguousError, InconsistentSeparatorsError, NoMatchError, number_parser
from moneylex.parsing import NumberParser
from tests.strategies import grouped_numbers


class TestNumberParserConstruction:
    """The decimal separator comes from the argument, then the locale."""

    def test_explicit_separator(self) -> None:
        assert NumberParser(decimal_separator=",").decimal_separator == ","

    def test_locale_separator(self) -> None:
        assert NumberParser("de-DE").decimal_separator == ","
        assert NumberParser("en_US").decimal_separator == "."

    def test_explicit_beats_locale(self) -> None:
        assert NumberParser("de-DE", decimal_separator=".").decimal_separator == "."

    def test_no_hint(self) -> None:
        assert NumberParser().decimal_separator is None

    def test_unknown_locale(self) -> None:
        with pytest.raises(ValueError, match="Unknown locale identifier"):
            NumberParser("xx-INVALID")

    def test_repr(self) -> None:
        assert repr(number_parser("de-DE")) == "NumberParser(locale='de_DE', decimal_separator=',')"


class TestParse:
    """parse() wants exactly one number."""

    @pytest.mark.parametrize(
        ("locale", "text", "expected"),
        [
            ("de-DE", "1.234.567,8", Decimal("1234567.8")),
            ("de-DE", "4,567", Decimal("4.567")),
            ("en-US", "4,567", Decimal(4567)),
            ("fr-FR", "Total : 1\u202f234,5", Decimal("1234.5")),
        ],
    )
    def test_locale(self, locale: str, text: str, expected: Decimal) -> None:
        assert number_parser(locale).parse(text) == expected

    def test_shape_without_hint(self) -> None:
        assert number_parser().parse("1,234.56") == Decimal("1234.56")
        assert number_parser().parse("١٢٬٣٤٥٫٦") == Decimal("12345.6")

    def test_ambiguous_without_hint(self) -> None:
        with pytest.raises(AmbiguousError):
            number_parser().parse("4,567")

    def test_no_number(self) -> None:
        with pytest.raises(NoMatchError):
            number_parser().parse("nothing here")

    def test_several_numbers(self) -> None:
        with pytest.raises(AmbiguousError):
            number_parser().parse("1 and 2")

    def test_inconsistent(self) -> None:
        with pytest.raises(InconsistentSeparatorsError):
            number_parser(decimal_separator=",").parse("1,2.3.5")

    def test_non_string(self) -> None:
        with pytest.raises(TypeError, match="Expected string, got NoneType"):
            number_parser().parse(None)  # type: ignore[arg-type]


class TestParseAll:
    """parse_all() skips what it cannot resolve."""

    def test_skips_invalid(self) -> None:
        parser = number_parser(decimal_separator=",")
        assert parser.parse_all("Total 1,2.3.5  Tax 234,56") == [Decimal("234.56")]

    def test_spaces_split_numbers(self) -> None:
        assert number_parser(decimal_separator=",").parse_all("1     2") == [
            Decimal(1),
            Decimal(2),
        ]

    def test_bidi_marks(self) -> None:
        assert number_parser("he").parse_all("\u200f595.5\u200e") == [Decimal("595.5")]

    def test_non_string(self) -> None:
        assert number_parser().parse_all(3.5) == []

    @given(case=grouped_numbers())
    def test_grouped_numbers(self, case: tuple[str, str, Decimal]) -> None:
        """PROPERTY: Embedded grouped numbers are found with their exact value."""
        text, decimal, expected = case
        parser = number_parser(decimal_separator=decimal)
        assert parser.parse_all(f"Amount: {text} total") == [expected]
