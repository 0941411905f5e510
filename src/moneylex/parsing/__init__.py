"""Money and number extraction from locale-ambiguous text.

Public API:
    Money Parsing:
        parse - Exactly one Money from text (raises on none or several)
        parse_all - Every resolvable Money in text, in order
        parser / MoneyParser - Reusable parser for one configuration
        ParseOptions - locale, currency, format, decimal_separator, strategy

    Number Parsing:
        number_parser / NumberParser - Decimals without a currency

    Disambiguation:
        prefer, infer, Prefer, Infer, Default - Pick between currencies
        sharing a symbol

    Type Guards:
        is_valid_money - TypeIs guard for Money with a known code
        is_valid_amount - TypeIs guard for finite Decimal

Example:
    >>> from moneylex.parsing import parse_all, ParseOptions, prefer
    >>> parse_all("$5 or CA$7", options=ParseOptions(strategy=prefer("AUD")))
    [Money(currency='AUD', amount=Decimal('5')), Money(currency='CAD', amount=Decimal('7'))]

Python 3.13+. Uses Babel CLDR data for locales, symbols and minor units.
"""

from .grammar import FormatKind, NumberGrammar, Token, TokenKind, compile_format, compile_locale
from .guards import is_valid_amount, is_valid_money
from .matcher import MatchMode
from .numbers import NumberParser, number_parser
from .pipeline import MoneyParser, MoneyScan, ParseOptions, parse, parse_all, parser
from .strategy import Default, DisambiguationStrategy, Infer, Prefer, infer, prefer

__all__ = [
    # Disambiguation
    "Default",
    "DisambiguationStrategy",
    # Grammar
    "FormatKind",
    "Infer",
    "MatchMode",
    # Parsing
    "MoneyParser",
    "MoneyScan",
    "NumberGrammar",
    "NumberParser",
    "ParseOptions",
    "Prefer",
    "Token",
    "TokenKind",
    "compile_format",
    "compile_locale",
    "infer",
    # Type guards
    "is_valid_amount",
    "is_valid_money",
    "number_parser",
    "parse",
    "parse_all",
    "parser",
    "prefer",
]
