"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Every template returns a Diagnostic carrying the code, message and hint.
    """

    # Format grammar errors

    @staticmethod
    def grammar_empty() -> Diagnostic:
        """Format string is empty."""
        return Diagnostic(
            code=DiagnosticCode.GRAMMAR_EMPTY,
            message="Format string is empty",
            hint="Use a format such as 'i,iii.ff CCC'",
        )

    @staticmethod
    def grammar_no_integer(format_string: str) -> Diagnostic:
        """Format string has no integer run.

        Args:
            format_string: The rejected format

        Returns:
            Diagnostic for GRAMMAR_NO_INTEGER
        """
        msg = f"Format '{format_string}' has no integer digits ('i')"
        return Diagnostic(
            code=DiagnosticCode.GRAMMAR_NO_INTEGER,
            message=msg,
            hint="Every format needs at least one 'i'",
        )

    @staticmethod
    def grammar_integer_not_contiguous(format_string: str) -> Diagnostic:
        """Integer runs are interrupted by something other than a group separator."""
        msg = f"Integer digits in format '{format_string}' are not contiguous"
        return Diagnostic(
            code=DiagnosticCode.GRAMMAR_INTEGER_NOT_CONTIGUOUS,
            message=msg,
            hint="Only a single group separator may sit between 'i' runs",
        )

    @staticmethod
    def grammar_fraction_without_decimal(format_string: str) -> Diagnostic:
        """Fraction run is not directly preceded by integer digits and a decimal separator."""
        msg = f"Fraction digits in format '{format_string}' must follow a decimal separator"
        return Diagnostic(
            code=DiagnosticCode.GRAMMAR_FRACTION_WITHOUT_DECIMAL,
            message=msg,
            hint="Write the fraction as 'i.ff' (integer, separator, fraction)",
        )

    @staticmethod
    def grammar_duplicate_part(format_string: str, part: str) -> Diagnostic:
        """A part that may occur once occurs more than once.

        Args:
            format_string: The rejected format
            part: Name of the repeated part

        Returns:
            Diagnostic for GRAMMAR_DUPLICATE_PART
        """
        msg = f"Format '{format_string}' has more than one {part} part"
        return Diagnostic(
            code=DiagnosticCode.GRAMMAR_DUPLICATE_PART,
            message=msg,
        )

    @staticmethod
    def grammar_currency_position(format_string: str) -> Diagnostic:
        """Currency placeholder sits inside the number."""
        msg = f"Currency in format '{format_string}' must be at the start or the end"
        return Diagnostic(
            code=DiagnosticCode.GRAMMAR_CURRENCY_POSITION,
            message=msg,
            hint="Place 'C' before or after the number, e.g. 'C i.ff' or 'i.ff C'",
        )

    # Configuration errors

    @staticmethod
    def locale_unknown(locale_code: str) -> Diagnostic:
        """Locale identifier is not known to CLDR."""
        msg = f"Unknown locale identifier '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNKNOWN,
            message=msg,
            hint="Use a BCP-47 or POSIX identifier such as 'en-US' or 'de_DE'",
        )

    @staticmethod
    def currency_unknown(currency: str) -> Diagnostic:
        """Currency code or symbol is not recognized."""
        msg = f"Unknown currency '{currency}'"
        return Diagnostic(
            code=DiagnosticCode.CURRENCY_UNKNOWN,
            message=msg,
            hint="Use an ISO 4217 code (e.g., 'EUR') or a known currency symbol",
        )

    # Parsing errors

    @staticmethod
    def no_match(text: str) -> Diagnostic:
        """No money window was found.

        Args:
            text: The scanned input

        Returns:
            Diagnostic for PARSE_NO_MATCH
        """
        msg = f"No money amount found in '{text}'"
        return Diagnostic(
            code=DiagnosticCode.PARSE_NO_MATCH,
            message=msg,
            hint="An amount needs a currency symbol or code unless a currency is configured",
        )

    @staticmethod
    def no_number(text: str) -> Diagnostic:
        """No number window was found."""
        msg = f"No number found in '{text}'"
        return Diagnostic(code=DiagnosticCode.PARSE_NO_MATCH, message=msg)

    @staticmethod
    def no_digits(raw: str, position: int) -> Diagnostic:
        """Window contains no digits."""
        msg = f"No digits in '{raw}'"
        return Diagnostic(
            code=DiagnosticCode.PARSE_NO_DIGITS,
            message=msg,
            span=SourceSpan(position, position + len(raw)),
        )

    @staticmethod
    def separator_ambiguous(raw: str, separator: str, position: int) -> Diagnostic:
        """A lone separator followed by three digits may be decimal or thousands.

        Args:
            raw: The number text
            separator: The ambiguous separator glyph
            position: Offset of the number in the scanned input

        Returns:
            Diagnostic for PARSE_SEPARATOR_AMBIGUOUS
        """
        msg = f"Separator '{separator}' in '{raw}' may be a decimal or a thousands separator"
        return Diagnostic(
            code=DiagnosticCode.PARSE_SEPARATOR_AMBIGUOUS,
            message=msg,
            span=SourceSpan(position, position + len(raw)),
            hint="Pass decimal_separator or a locale to disambiguate",
        )

    @staticmethod
    def separators_inconsistent(raw: str, reason: str, position: int) -> Diagnostic:
        """Separators do not form a valid number.

        Args:
            raw: The number text
            reason: Short description of the violated rule
            position: Offset of the number in the scanned input

        Returns:
            Diagnostic for PARSE_SEPARATORS_INCONSISTENT
        """
        msg = f"Inconsistent separators in '{raw}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_SEPARATORS_INCONSISTENT,
            message=msg,
            span=SourceSpan(position, position + len(raw)),
        )

    @staticmethod
    def grouping_invalid(raw: str, position: int) -> Diagnostic:
        """Digit groups between thousands separators have invalid lengths."""
        msg = f"Invalid digit grouping in '{raw}'"
        return Diagnostic(
            code=DiagnosticCode.PARSE_GROUPING_INVALID,
            message=msg,
            span=SourceSpan(position, position + len(raw)),
            hint="Groups must have 3 digits (or 2 digits for Indian-style grouping)",
        )

    @staticmethod
    def currency_ambiguous(
        symbol: str, candidates: tuple[str, ...], start: int, end: int
    ) -> Diagnostic:
        """Symbol maps to several currencies and no preference selects one.

        Args:
            symbol: The ambiguous symbol text
            candidates: Competing currency codes
            start: Window start offset
            end: Window end offset

        Returns:
            Diagnostic for PARSE_CURRENCY_AMBIGUOUS
        """
        msg = f"Currency symbol '{symbol}' is ambiguous"
        return Diagnostic(
            code=DiagnosticCode.PARSE_CURRENCY_AMBIGUOUS,
            message=msg,
            span=SourceSpan(start, end),
            hint="Pass prefer(...) or infer(locale) to pick a currency",
            candidates=candidates,
        )

    @staticmethod
    def currency_conflict(window: str, codes: tuple[str, ...], start: int) -> Diagnostic:
        """Prefix and suffix name incompatible currencies."""
        msg = f"Conflicting currencies in '{window}'"
        return Diagnostic(
            code=DiagnosticCode.PARSE_CURRENCY_CONFLICT,
            message=msg,
            span=SourceSpan(start, start + len(window)),
            candidates=codes,
        )

    @staticmethod
    def multiple_amounts(text: str, count: int) -> Diagnostic:
        """parse() found more than one amount.

        Args:
            text: The scanned input
            count: Number of amounts found

        Returns:
            Diagnostic for PARSE_MULTIPLE_AMOUNTS
        """
        msg = f"Found {count} amounts in '{text}', expected exactly one"
        return Diagnostic(
            code=DiagnosticCode.PARSE_MULTIPLE_AMOUNTS,
            message=msg,
            hint="Use parse_all() to extract every amount",
        )
