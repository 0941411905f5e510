"""MoneyLex - locale-aware money extraction.

Finds monetary amounts (ISO 4217 currency + exact Decimal) in free-form,
locale-ambiguous text such as receipts, listings and travel prices. Input
that cannot be read one way only is rejected instead of guessed.

Public API:
    parse - Exactly one Money from text
    parse_all - Every resolvable Money in text
    parser - Reusable MoneyParser for one configuration
    ParseOptions - Parser configuration
    Money / money - Value type and factory
    prefer / infer - Currency disambiguation strategies
    number_parser - Decimals without a currency

Exceptions:
    MoneyLexError - Base exception class
    GrammarError - Invalid user format string
    MoneyParseError - Base for parse failures
    NoMatchError, AmbiguousError, InconsistentSeparatorsError

Submodules:
    moneylex.currencies - ISO 4217 metadata, regional preferences, symbol tables
    moneylex.parsing - Grammar compiler, match builder, resolver and pipeline
    moneylex.diagnostics - Error codes, templates and formatting

Example:
    >>> from moneylex import parse_all
    >>> [str(m) for m in parse_all("You save 11.40 EUR    102.60 EUR")]
    ['EUR 11.40', 'EUR 102.60']
"""

from .diagnostics import (
    AmbiguousError,
    GrammarError,
    InconsistentSeparatorsError,
    MoneyLexError,
    MoneyParseError,
    NoMatchError,
)
from .money import Money, money
from .parsing import (
    Default,
    Infer,
    MoneyParser,
    NumberParser,
    ParseOptions,
    Prefer,
    infer,
    number_parser,
    parse,
    parse_all,
    parser,
    prefer,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("moneylex")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "AmbiguousError",
    "Default",
    "GrammarError",
    "InconsistentSeparatorsError",
    "Infer",
    "Money",
    "MoneyLexError",
    "MoneyParseError",
    "MoneyParser",
    "NoMatchError",
    "NumberParser",
    "ParseOptions",
    "Prefer",
    "__version__",
    "infer",
    "money",
    "number_parser",
    "parse",
    "parse_all",
    "parser",
    "prefer",
]
