"""Tests for diagnostics: codes, templates, formatter and the error hierarchy."""

from __future__ import annotations

import json

import pytest

from moneylex import (
    AmbiguousError,
    GrammarError,
    InconsistentSeparatorsError,
    MoneyLexError,
    MoneyParseError,
    NoMatchError,
)
from moneylex.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorTemplate,
    OutputFormat,
    ParseErrorKind,
    SourceSpan,
)


class TestSourceSpan:
    """Test span invariants."""

    def test_valid(self) -> None:
        span = SourceSpan(3, 7)
        assert (span.start, span.end) == (3, 7)

    def test_negative_start(self) -> None:
        with pytest.raises(ValueError, match="start must be >= 0"):
            SourceSpan(-1, 2)

    def test_end_before_start(self) -> None:
        with pytest.raises(ValueError, match="must be >= start"):
            SourceSpan(5, 4)


class TestDiagnosticCode:
    """Codes are unique and grouped by range."""

    def test_unique_values(self) -> None:
        values = [code.value for code in DiagnosticCode]
        assert len(values) == len(set(values))

    def test_ranges(self) -> None:
        for code in DiagnosticCode:
            prefix = code.name.split("_")[0]
            expected = {"LOCALE": 1, "CURRENCY": 1, "GRAMMAR": 3, "PARSE": 4}[prefix]
            assert code.value // 1000 == expected


class TestErrorTemplate:
    """Templates carry codes, spans and hints."""

    def test_separator_ambiguous(self) -> None:
        diagnostic = ErrorTemplate.separator_ambiguous("4,567", ",", 4)
        assert diagnostic.code is DiagnosticCode.PARSE_SEPARATOR_AMBIGUOUS
        assert diagnostic.span == SourceSpan(4, 9)
        assert diagnostic.hint is not None
        assert "4,567" in diagnostic.message

    def test_currency_ambiguous(self) -> None:
        diagnostic = ErrorTemplate.currency_ambiguous("$", ("AUD", "USD"), 0, 3)
        assert diagnostic.candidates == ("AUD", "USD")
        assert str(diagnostic) == "Currency symbol '$' is ambiguous"

    def test_locale_unknown(self) -> None:
        diagnostic = ErrorTemplate.locale_unknown("xx")
        assert diagnostic.code is DiagnosticCode.LOCALE_UNKNOWN
        assert diagnostic.message == "Unknown locale identifier 'xx'"

    def test_configuration_errors_have_no_span(self) -> None:
        assert ErrorTemplate.currency_unknown("XYZ").span is None
        assert ErrorTemplate.grammar_empty().span is None


class TestDiagnosticFormatter:
    """Test rust, simple and json output."""

    def test_rust(self) -> None:
        diagnostic = ErrorTemplate.currency_ambiguous("$", ("AUD", "USD"), 0, 3)
        assert DiagnosticFormatter().format(diagnostic) == (
            "error[PARSE_CURRENCY_AMBIGUOUS]: Currency symbol '$' is ambiguous\n"
            "  --> position 0..3\n"
            "  = candidates: AUD, USD\n"
            "  = help: Pass prefer(...) or infer(locale) to pick a currency"
        )

    def test_simple(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        assert formatter.format(ErrorTemplate.no_match("hello")) == (
            "PARSE_NO_MATCH: No money amount found in 'hello'"
        )

    def test_json(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        data = json.loads(formatter.format(ErrorTemplate.separator_ambiguous("4,567", ",", 0)))
        assert data["code"] == "PARSE_SEPARATOR_AMBIGUOUS"
        assert data["code_value"] == 4003
        assert (data["start"], data["end"]) == (0, 5)
        assert data["severity"] == "error"

    def test_json_keeps_unicode(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        assert "€" in formatter.format(ErrorTemplate.no_match("€ only"))

    def test_control_characters_escaped(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        output = formatter.format(ErrorTemplate.no_match("a\nb\x1b[31m"))
        assert "\n" not in output
        assert "\x1b" not in output
        assert "\\n" in output

    def test_sanitize_truncates(self) -> None:
        formatter = DiagnosticFormatter(
            output_format=OutputFormat.SIMPLE, sanitize=True, max_content_length=20
        )
        output = formatter.format(ErrorTemplate.no_match("x" * 100))
        assert output.endswith("...")
        assert len(output) < 60

    def test_color(self) -> None:
        output = DiagnosticFormatter(color=True).format(ErrorTemplate.grammar_empty())
        assert output.startswith("\033[1;31merror\033[0m[GRAMMAR_EMPTY]")

    def test_warning_severity(self) -> None:
        diagnostic = Diagnostic(DiagnosticCode.PARSE_NO_MATCH, "note", severity="warning")
        assert DiagnosticFormatter().format(diagnostic).startswith("warning[PARSE_NO_MATCH]")

    def test_format_all(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        output = formatter.format_all([ErrorTemplate.grammar_empty(), ErrorTemplate.no_match("")])
        assert output.count("\n\n") == 1

    def test_format_error_shortcut(self) -> None:
        diagnostic = ErrorTemplate.grammar_empty()
        assert diagnostic.format_error() == DiagnosticFormatter().format(diagnostic)


class TestErrorHierarchy:
    """Test exception types and attributes."""

    @pytest.mark.parametrize(
        ("error_type", "kind"),
        [
            (NoMatchError, ParseErrorKind.NO_MATCH),
            (AmbiguousError, ParseErrorKind.AMBIGUOUS),
            (InconsistentSeparatorsError, ParseErrorKind.INCONSISTENT_SEPARATORS),
        ],
    )
    def test_kinds(self, error_type: type[MoneyParseError], kind: ParseErrorKind) -> None:
        error = error_type("boom", position=3, raw_text="1,2", locale_code="de_DE")
        assert error.kind is kind
        assert isinstance(error, MoneyParseError)
        assert isinstance(error, MoneyLexError)
        assert (error.position, error.raw_text, error.locale_code) == (3, "1,2", "de_DE")
        assert error.diagnostic is None
        assert str(error) == "boom"

    def test_diagnostic_message(self) -> None:
        error = NoMatchError(ErrorTemplate.no_match("hello"))
        assert error.diagnostic is not None
        assert str(error).startswith("error[PARSE_NO_MATCH]")

    def test_grammar_error(self) -> None:
        error = GrammarError(ErrorTemplate.grammar_empty(), format_string="")
        assert error.format_string == ""
        assert not isinstance(error, MoneyParseError)
