"""MoneyLex exception hierarchy with structured diagnostics.

All exceptions optionally store Diagnostic objects for rich error information.
Type errors (non-string input) and unknown locales use the builtin TypeError
and ValueError instead.

Python 3.13+. Zero external dependencies.
"""

from enum import StrEnum
from typing import ClassVar

from .codes import Diagnostic

__all__ = [
    "AmbiguousError",
    "GrammarError",
    "InconsistentSeparatorsError",
    "MoneyLexError",
    "MoneyParseError",
    "NoMatchError",
    "ParseErrorKind",
]


class ParseErrorKind(StrEnum):
    """Failure categories reported by money and number parsing."""

    NO_MATCH = "no-match"
    AMBIGUOUS = "ambiguous"
    INCONSISTENT_SEPARATORS = "inconsistent-separators"


class MoneyLexError(Exception):
    """Base exception for all MoneyLex errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize MoneyLexError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class GrammarError(MoneyLexError):
    """Invalid format string passed to compile_format().

    Attributes:
        format_string: The format string that failed to compile
    """

    def __init__(self, message: str | Diagnostic, *, format_string: str = "") -> None:
        super().__init__(message)
        self.format_string = format_string


class MoneyParseError(MoneyLexError):
    """Error while extracting a money amount or number from text.

    Attributes:
        kind: Failure category (no-match, ambiguous, inconsistent-separators)
        position: Character offset of the failing window in the input
        raw_text: The failing window (or the whole input for no-match)
        locale_code: The locale used for parsing (empty if none)
    """

    kind: ClassVar[ParseErrorKind]

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        position: int = 0,
        raw_text: str = "",
        locale_code: str = "",
    ) -> None:
        """Initialize MoneyParseError.

        Args:
            message: Error message string OR Diagnostic object
            position: Character offset of the failing window
            raw_text: The failing window text
            locale_code: The locale used for parsing
        """
        super().__init__(message)
        self.position = position
        self.raw_text = raw_text
        self.locale_code = locale_code


class NoMatchError(MoneyParseError):
    """No money (or number) window was found in the input."""

    kind = ParseErrorKind.NO_MATCH


class AmbiguousError(MoneyParseError):
    """The input has more than one valid reading.

    Raised for a separator that may be decimal or thousands, for a currency
    symbol shared by several currencies with no preference to break the tie,
    and for parse() inputs containing several amounts.
    """

    kind = ParseErrorKind.AMBIGUOUS


class InconsistentSeparatorsError(MoneyParseError):
    """Separators in a digit run do not form a valid number."""

    kind = ParseErrorKind.INCONSISTENT_SEPARATORS
