"""Diagnostic system for money extraction errors.

Provides structured error diagnostics with codes, spans, and hints.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    AmbiguousError,
    GrammarError,
    InconsistentSeparatorsError,
    MoneyLexError,
    MoneyParseError,
    NoMatchError,
    ParseErrorKind,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "AmbiguousError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "GrammarError",
    "InconsistentSeparatorsError",
    "MoneyLexError",
    "MoneyParseError",
    "NoMatchError",
    "OutputFormat",
    "ParseErrorKind",
    "SourceSpan",
]
