"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Configuration errors (unknown locale, unknown currency)
        3000-3999: Format grammar errors (compile_format failures)
        4000-4999: Parsing errors (money and number extraction)
    """

    # Configuration errors (1000-1999)
    LOCALE_UNKNOWN = 1001
    CURRENCY_UNKNOWN = 1002

    # Format grammar errors (3000-3999)
    GRAMMAR_EMPTY = 3001
    GRAMMAR_NO_INTEGER = 3002
    GRAMMAR_INTEGER_NOT_CONTIGUOUS = 3003
    GRAMMAR_FRACTION_WITHOUT_DECIMAL = 3004
    GRAMMAR_DUPLICATE_PART = 3005
    GRAMMAR_CURRENCY_POSITION = 3006

    # Parsing errors (4000-4999)
    PARSE_NO_MATCH = 4001
    PARSE_NO_DIGITS = 4002
    PARSE_SEPARATOR_AMBIGUOUS = 4003
    PARSE_SEPARATORS_INCONSISTENT = 4004
    PARSE_GROUPING_INVALID = 4005
    PARSE_CURRENCY_AMBIGUOUS = 4006
    PARSE_CURRENCY_CONFLICT = 4007
    PARSE_MULTIPLE_AMOUNTS = 4008


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Location of a failing window in the scanned text.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative or end precedes start.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Location in the scanned text (None for configuration errors)
        hint: Suggestion for fixing the error
        candidates: Currency codes competing for an ambiguous symbol
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    candidates: tuple[str, ...] | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[PARSE_CURRENCY_AMBIGUOUS]: Currency symbol '$' is ambiguous
              --> position 0..4
              = candidates: AUD, CAD, USD
              = help: Pass prefer(...) or infer(locale) to pick a currency

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
