"""Format grammar compiler.

Turns a user format string ('i,iii.ff CCC') or a locale's own currency format
into a sequence of typed tokens, the shape the match builder turns into a
regular expression.

Format placeholders:
    i   integer digits        f   fraction digits        C   currency
Any other character is a single token: a Decimal separator when a fraction
run follows it, a Group separator when it sits between integer runs, and a
Literal otherwise.

Python 3.13+.
"""

from __future__ import annotations

import functools
import itertools
from dataclasses import dataclass
from decimal import Decimal
from enum import StrEnum
from typing import Literal, Protocol

from babel.numbers import (
    format_currency,
    format_decimal,
    get_currency_symbol,
    get_decimal_symbol,
    get_group_symbol,
)

from moneylex.constants import (
    MAX_LOCALE_CACHE_SIZE,
    REPRESENTATIVE_AMOUNT,
    REPRESENTATIVE_CURRENCY,
)
from moneylex.currencies.symbols import strip_bidi_marks
from moneylex.diagnostics import ErrorTemplate, GrammarError
from moneylex.locale_utils import normalize_locale, require_locale

__all__ = [
    "BabelPartsFormatter",
    "FormatKind",
    "NumberGrammar",
    "PartsFormatter",
    "Token",
    "TokenKind",
    "compile_format",
    "compile_locale",
    "normalize_parts",
    "split_parts",
    "tokenize_format",
]


class TokenKind(StrEnum):
    """Kinds of format tokens (mirrors the parts of a formatted number)."""

    INTEGER = "integer"
    GROUP = "group"
    DECIMAL = "decimal"
    FRACTION = "fraction"
    CURRENCY = "currency"
    LITERAL = "literal"


class FormatKind(StrEnum):
    """Which locale format compile_locale() reads."""

    CURRENCY = "currency"
    DECIMAL = "decimal"


@dataclass(frozen=True, slots=True)
class Token:
    """One part of a format: its kind and the text it was written as."""

    kind: TokenKind
    text: str


_EDGE_KINDS = frozenset({TokenKind.CURRENCY, TokenKind.LITERAL})


@dataclass(frozen=True, slots=True)
class NumberGrammar:
    """A compiled format.

    Attributes:
        tokens: Token sequence in reading order
        source: The format string or locale identifier it was compiled from
    """

    tokens: tuple[Token, ...]
    source: str

    def _first(self, kind: TokenKind) -> Token | None:
        return next((token for token in self.tokens if token.kind is kind), None)

    @property
    def decimal_separator(self) -> str | None:
        token = self._first(TokenKind.DECIMAL)
        return token.text if token else None

    @property
    def group_separator(self) -> str | None:
        token = self._first(TokenKind.GROUP)
        return token.text if token else None

    @property
    def currency_position(self) -> Literal["start", "end"] | None:
        """Where the (single) currency token sits, for user formats."""
        kinds = [token.kind for token in self.tokens]
        if TokenKind.CURRENCY not in kinds:
            return None
        before = kinds.index(TokenKind.CURRENCY) < kinds.index(TokenKind.INTEGER)
        return "start" if before else "end"

    @property
    def has_fraction(self) -> bool:
        return self._first(TokenKind.DECIMAL) is not None


# ============================================================================
# USER FORMATS
# ============================================================================

_RUN_KINDS = {"i": TokenKind.INTEGER, "f": TokenKind.FRACTION, "C": TokenKind.CURRENCY}


def tokenize_format(format_string: str) -> tuple[Token, ...]:
    """Split a format string into tokens without validating it.

    Example:
        >>> [t.kind.value for t in tokenize_format("i,iii.ff CCC")]
        ['integer', 'group', 'integer', 'decimal', 'fraction', 'literal', 'currency']
    """
    raw: list[tuple[TokenKind | None, str]] = []
    for char, run in itertools.groupby(format_string):
        kind = _RUN_KINDS.get(char)
        if kind is not None:
            raw.append((kind, "".join(run)))
        else:
            raw.extend((None, ch) for ch in run)

    tokens: list[Token] = []
    for index, (kind, text) in enumerate(raw):
        if kind is None:
            before = raw[index - 1][0] if index > 0 else None
            after = raw[index + 1][0] if index + 1 < len(raw) else None
            if after is TokenKind.FRACTION:
                kind = TokenKind.DECIMAL
            elif before is TokenKind.INTEGER and after is TokenKind.INTEGER:
                kind = TokenKind.GROUP
            else:
                kind = TokenKind.LITERAL
        tokens.append(Token(kind, text))
    return tuple(tokens)


def _validate(format_string: str, tokens: tuple[Token, ...]) -> None:
    kinds = [token.kind for token in tokens]

    if TokenKind.INTEGER not in kinds:
        raise GrammarError(
            ErrorTemplate.grammar_no_integer(format_string), format_string=format_string
        )

    first = kinds.index(TokenKind.INTEGER)
    last = len(kinds) - 1 - kinds[::-1].index(TokenKind.INTEGER)
    if any(kind not in (TokenKind.INTEGER, TokenKind.GROUP) for kind in kinds[first : last + 1]):
        raise GrammarError(
            ErrorTemplate.grammar_integer_not_contiguous(format_string),
            format_string=format_string,
        )

    for kind, name in (
        (TokenKind.FRACTION, "fraction"),
        (TokenKind.DECIMAL, "decimal separator"),
        (TokenKind.CURRENCY, "currency"),
    ):
        if kinds.count(kind) > 1:
            raise GrammarError(
                ErrorTemplate.grammar_duplicate_part(format_string, name),
                format_string=format_string,
            )

    if TokenKind.FRACTION in kinds:
        at = kinds.index(TokenKind.FRACTION)
        if at != last + 2 or kinds[at - 1] is not TokenKind.DECIMAL:
            raise GrammarError(
                ErrorTemplate.grammar_fraction_without_decimal(format_string),
                format_string=format_string,
            )

    if TokenKind.CURRENCY in kinds:
        at = kinds.index(TokenKind.CURRENCY)
        if at not in (0, len(kinds) - 1):
            raise GrammarError(
                ErrorTemplate.grammar_currency_position(format_string),
                format_string=format_string,
            )


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def compile_format(format_string: str) -> NumberGrammar:
    """Compile and validate a user format string.

    Args:
        format_string: Format such as 'i,iii.ff CCC' or 'C i.f'

    Returns:
        NumberGrammar with the format's tokens

    Raises:
        GrammarError: If the format has no integer run, interrupted integer
            runs, a fraction not preceded by integer + decimal separator, a
            repeated part, or a currency placeholder inside the number

    Example:
        >>> grammar = compile_format("iii iii,ff CCC")
        >>> grammar.decimal_separator, grammar.group_separator, grammar.currency_position
        (',', ' ', 'end')
    """
    if not format_string:
        raise GrammarError(ErrorTemplate.grammar_empty(), format_string=format_string)
    tokens = tokenize_format(format_string)
    _validate(format_string, tokens)
    return NumberGrammar(tokens, format_string)


# ============================================================================
# LOCALE FORMATS
# ============================================================================


class PartsFormatter(Protocol):
    """Anything that can render a value as typed format tokens."""

    def format_to_parts(self, value: Decimal) -> tuple[Token, ...]: ...


class BabelPartsFormatter:
    """Render a value with a locale's CLDR pattern and split it into tokens.

    Babel returns formatted strings only, so the string is split back into
    parts using the locale's decimal and group symbols and the currency
    symbol that was written.
    """

    def __init__(
        self,
        locale_code: str,
        currency: str = REPRESENTATIVE_CURRENCY,
        kind: FormatKind = FormatKind.CURRENCY,
    ) -> None:
        self.locale = require_locale(locale_code)
        self.currency = currency
        self.kind = kind

    def format(self, value: Decimal) -> str:
        if self.kind is FormatKind.CURRENCY:
            text = format_currency(value, self.currency, locale=self.locale)
        else:
            text = format_decimal(value, locale=self.locale)
        return strip_bidi_marks(text)

    def format_to_parts(self, value: Decimal) -> tuple[Token, ...]:
        symbol = None
        if self.kind is FormatKind.CURRENCY:
            symbol = get_currency_symbol(self.currency, locale=self.locale)
        return split_parts(
            self.format(value),
            decimal=get_decimal_symbol(self.locale),
            group=get_group_symbol(self.locale),
            currency=symbol,
        )


def split_parts(text: str, *, decimal: str, group: str, currency: str | None) -> tuple[Token, ...]:
    """Split formatted text into tokens given the symbols used to write it.

    Example:
        >>> parts = split_parts("€1,234.50", decimal=".", group=",", currency="€")
        >>> [t.kind.value for t in parts]
        ['currency', 'integer', 'group', 'integer', 'decimal', 'fraction']
    """
    tokens: list[Token] = []
    seen_decimal = False
    index = 0
    while index < len(text):
        char = text[index]
        if char.isdecimal():
            end = index
            while end < len(text) and text[end].isdecimal():
                end += 1
            kind = TokenKind.FRACTION if seen_decimal else TokenKind.INTEGER
            tokens.append(Token(kind, text[index:end]))
            index = end
            continue

        following = text[index + 1 : index + 2]
        if currency and text.startswith(currency, index):
            tokens.append(Token(TokenKind.CURRENCY, currency))
            index += len(currency)
            continue
        if not seen_decimal and text.startswith(decimal, index) and following.isdecimal():
            tokens.append(Token(TokenKind.DECIMAL, decimal))
            seen_decimal = True
        elif (
            text.startswith(group, index)
            and following.isdecimal()
            and tokens
            and tokens[-1].kind is TokenKind.INTEGER
        ):
            tokens.append(Token(TokenKind.GROUP, group))
        else:
            tokens.append(Token(TokenKind.LITERAL, char))
        index += 1
    return tuple(tokens)


def normalize_parts(tokens: tuple[Token, ...]) -> tuple[Token, ...]:
    """Place a currency and a space at both ends of the number.

    Strips the currency and literals around the number, then adds
    [Currency, Literal(' ')] before and [Literal(' '), Currency] after so a
    locale grammar matches symbols on either side.

    Example:
        >>> parts = BabelPartsFormatter("en_GB", "GBP").format_to_parts(Decimal(1))
        >>> [t.text for t in normalize_parts(parts)]
        ['£', ' ', '1', '.', '00', ' ', '£']
    """
    currency = next((t.text for t in tokens if t.kind is TokenKind.CURRENCY), "C")
    core = list(tokens)
    while core and core[0].kind in _EDGE_KINDS:
        core.pop(0)
    while core and core[-1].kind in _EDGE_KINDS:
        core.pop()
    space = Token(TokenKind.LITERAL, " ")
    edge = Token(TokenKind.CURRENCY, currency)
    return (edge, space, *core, space, edge)


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _compile_locale_impl(locale_code: str, kind: FormatKind) -> NumberGrammar:
    formatter: PartsFormatter = BabelPartsFormatter(locale_code, kind=kind)
    tokens = normalize_parts(formatter.format_to_parts(REPRESENTATIVE_AMOUNT))
    return NumberGrammar(tokens, locale_code)


def compile_locale(locale_code: str, kind: FormatKind = FormatKind.CURRENCY) -> NumberGrammar:
    """Compile a locale's own format from a representative formatted value.

    Raises:
        ValueError: If the locale is unknown
    """
    return _compile_locale_impl(normalize_locale(locale_code), kind)
