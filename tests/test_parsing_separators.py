"""Tests for the separator-ambiguity resolver (parsing/separators.py)."""

from __future__ import annotations

from decimal import Decimal

import pytest
from hypothesis import given

from moneylex.diagnostics import (
    AmbiguousError,
    DiagnosticCode,
    InconsistentSeparatorsError,
    NoMatchError,
    ParseErrorKind,
)
from moneylex.parsing.separators import canonical_separator, resolve
from tests.strategies import grouped_numbers


class TestUnambiguousShapes:
    """Runs whose shape alone decides the decimal separator."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("1234", Decimal(1234)),
            ("1.234,56", Decimal("1234.56")),
            ("1,234.56", Decimal("1234.56")),
            ("12,34", Decimal("12.34")),
            ("12.3", Decimal("12.3")),
            ("0,123", Decimal("0.123")),
            ("1234,567", Decimal("1234.567")),
            ("1.234.567", Decimal(1234567)),
            ("1 234", Decimal(1234)),
            ("1\u202f025,00", Decimal("1025.00")),
            ("1'234.50", Decimal("1234.50")),
            ("1’234.50", Decimal("1234.50")),
            ("1,23,45,678.90", Decimal("12345678.90")),
            ("-1.234,5", Decimal("-1234.5")),
            ("١٢٬٣٤٥٫٦", Decimal("12345.6")),
        ],
    )
    def test_values(self, text: str, expected: Decimal) -> None:
        assert resolve(text).value == expected

    def test_ascii_digits(self) -> None:
        resolved = resolve("١٢٫٥")
        assert resolved.integer_part == "12"
        assert resolved.fraction_part == "5"
        assert not resolved.negative


class TestSingleSeparatorTie:
    """'1,234' may be a thousands or a decimal separator."""

    def test_ambiguous_without_hints(self) -> None:
        with pytest.raises(AmbiguousError) as exc_info:
            resolve("1,234", offset=7)
        error = exc_info.value
        assert error.kind is ParseErrorKind.AMBIGUOUS
        assert error.position == 7
        assert error.raw_text == "1,234"
        assert error.diagnostic is not None
        assert error.diagnostic.code is DiagnosticCode.PARSE_SEPARATOR_AMBIGUOUS

    @pytest.mark.parametrize("decimals", [0, 2, 4])
    def test_currency_decimals_read_group(self, decimals: int) -> None:
        assert resolve("1,234", currency_decimals=decimals).value == Decimal(1234)

    def test_three_decimal_currency_stays_ambiguous(self) -> None:
        with pytest.raises(AmbiguousError):
            resolve("4.567", currency_decimals=3)

    def test_preferred_decimal_breaks_tie(self) -> None:
        assert resolve("4,567", currency_decimals=3, preferred_decimal=",").value == Decimal(
            "4.567"
        )
        assert resolve("4,567", currency_decimals=3, preferred_decimal=".").value == Decimal(
            4567
        )

    def test_space_is_never_decimal(self) -> None:
        assert resolve("4 567").value == Decimal(4567)

    @pytest.mark.parametrize("text", ["1234,567", "0.123", "12345.678"])
    @pytest.mark.parametrize("decimals", [0, 2, 4])
    def test_decimal_only_shape_conflicts_with_currency(self, text: str, decimals: int) -> None:
        with pytest.raises(InconsistentSeparatorsError) as exc_info:
            resolve(text, currency_decimals=decimals, offset=4)
        assert exc_info.value.position == 4
        assert exc_info.value.raw_text == text

    @pytest.mark.parametrize(("text", "expected"), [("1234,567", "1234.567"), ("0.123", "0.123")])
    def test_decimal_only_shape_fits_three_decimal_currency(
        self, text: str, expected: str
    ) -> None:
        assert resolve(text, currency_decimals=3).value == Decimal(expected)


class TestExplicitDecimal:
    """A known decimal separator makes every other separator a group."""

    def test_decimal_comma(self) -> None:
        assert resolve("4,567", decimal_separator=",").value == Decimal("4.567")

    def test_separator_absent_means_integer(self) -> None:
        assert resolve("1.234", decimal_separator=",").value == Decimal(1234)

    def test_space_variants_fold(self) -> None:
        assert resolve("1\u00a0234,5", decimal_separator=",").value == Decimal("1234.5")

    def test_repeated_decimal_rejected(self) -> None:
        with pytest.raises(InconsistentSeparatorsError):
            resolve("1,234,567", decimal_separator=",")

    def test_integer_only(self) -> None:
        assert resolve("550,000", integer_only=True).value == Decimal(550000)
        with pytest.raises(InconsistentSeparatorsError):
            resolve("1,234.56", integer_only=True)


class TestInvalidRuns:
    """Separators that cannot form a number."""

    @pytest.mark.parametrize(
        "text",
        [
            "1 23",
            "12'34",
            "1,2.3.5",
            "12,345,67",
            "1,234.56789",
            "1.234 567",
            "1,",
            "1a",
        ],
    )
    def test_inconsistent(self, text: str) -> None:
        with pytest.raises(InconsistentSeparatorsError) as exc_info:
            resolve(text)
        assert exc_info.value.kind is ParseErrorKind.INCONSISTENT_SEPARATORS

    def test_grouping_diagnostic(self) -> None:
        with pytest.raises(InconsistentSeparatorsError) as exc_info:
            resolve("12'34", offset=4)
        diagnostic = exc_info.value.diagnostic
        assert diagnostic is not None
        assert diagnostic.code is DiagnosticCode.PARSE_GROUPING_INVALID
        assert diagnostic.span is not None
        assert (diagnostic.span.start, diagnostic.span.end) == (4, 9)

    @pytest.mark.parametrize("text", ["", "-"])
    def test_no_digits(self, text: str) -> None:
        with pytest.raises(NoMatchError):
            resolve(text)


class TestCanonicalSeparator:
    """Test glyph folding."""

    @pytest.mark.parametrize(
        ("glyph", "expected"),
        [(" ", " "), ("\u00a0", " "), ("\u202f", " "), ("\u2009", " "), ("’", "'"),
         ("'", "'"), (".", "."), (",", ",")],
    )
    def test_fold(self, glyph: str, expected: str) -> None:
        assert canonical_separator(glyph) == expected


class TestResolveProperties:
    """Property tests over grouped numbers in real separator layouts."""

    @given(case=grouped_numbers())
    def test_shape_decides(self, case: tuple[str, str, Decimal]) -> None:
        """PROPERTY: Grouped numbers with 1, 2 or 4 fraction digits need no hint."""
        text, _, expected = case
        assert resolve(text).value == expected

    @given(case=grouped_numbers())
    def test_explicit_decimal_agrees(self, case: tuple[str, str, Decimal]) -> None:
        """PROPERTY: Passing the real decimal separator gives the same value."""
        text, decimal, expected = case
        assert resolve(text, decimal_separator=decimal).value == expected
