"""Anchored match builder.

Compiles a currency symbol table and a number grammar into one regular
expression that finds candidate money windows in free text.

Flexible mode accepts a currency on either side of a generic number and any
of the separators the resolver understands. Strict mode follows a user
format token by token, so '11.40 EUR' does not match 'C i,i.f'.

Both modes anchor matches on word boundaries: no letter, digit or non-space
separator directly before a window, no letter or digit directly after it.

Python 3.13+.
"""

from __future__ import annotations

import functools
import re
from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum

from moneylex.constants import ALL_SEPARATORS, MAX_MATCHER_CACHE_SIZE, SPACE_SEPARATORS
from moneylex.currencies.symbols import CurrencySymbols

from .grammar import NumberGrammar, Token, TokenKind

__all__ = ["NUMBER_PATTERN", "MatchMode", "MoneyMatcher", "RawMatch", "build_matcher"]


class MatchMode(StrEnum):
    """How closely a window must follow the grammar."""

    STRICT = "strict"
    FLEXIBLE = "flexible"


def _char_class(chars: str) -> str:
    return "[" + "".join(re.escape(ch) for ch in chars) + "]"


_SPACE = _char_class(SPACE_SEPARATORS)
_GLUED = _char_class("".join(ch for ch in ALL_SEPARATORS if ch not in SPACE_SEPARATORS))
_LEFT_ANCHOR = rf"(?<![\w{_GLUED[1:-1]}])"
_RIGHT_ANCHOR = r"(?!\w)"
# A space only groups when exactly three digits follow it.
_FLEXIBLE_NUMBER = rf"-?\d++(?:{_GLUED}\d++|{_SPACE}\d{{3}}(?!\d))*+"

# A bare number with the same anchors, for amounts without a currency.
NUMBER_PATTERN = re.compile(f"{_LEFT_ANCHOR}{_FLEXIBLE_NUMBER}{_RIGHT_ANCHOR}")


@dataclass(frozen=True, slots=True)
class RawMatch:
    """A candidate money window before currency and number resolution.

    Attributes:
        start: Offset of the window in the scanned text
        end: Offset just past the window
        text: The window text
        number: The number part (sign, digits and separators)
        number_start: Offset of the number part
        prefix: Currency token before the number, if any
        suffix: Currency token after the number, if any
    """

    start: int
    end: int
    text: str
    number: str
    number_start: int
    prefix: str | None = None
    suffix: str | None = None

    @property
    def currency_tokens(self) -> tuple[str, ...]:
        return tuple(token for token in (self.prefix, self.suffix) if token)


class MoneyMatcher:
    """Compiled window finder for one symbol table, grammar and mode."""

    __slots__ = ("grammar", "mode", "regex")

    def __init__(self, regex: re.Pattern[str], grammar: NumberGrammar, mode: MatchMode) -> None:
        self.regex = regex
        self.grammar = grammar
        self.mode = mode

    def finditer(self, text: str) -> Iterator[RawMatch]:
        """Yield non-overlapping windows from left to right."""
        groups = self.regex.groupindex
        for match in self.regex.finditer(text):
            yield RawMatch(
                start=match.start(),
                end=match.end(),
                text=match.group(0),
                number=match.group("number"),
                number_start=match.start("number"),
                prefix=match.group("prefix") if "prefix" in groups else None,
                suffix=match.group("suffix") if "suffix" in groups else None,
            )

    def __repr__(self) -> str:
        return f"MoneyMatcher(mode={self.mode.value!r}, grammar={self.grammar.source!r})"


def _literal(token: Token) -> str:
    if all(ch in SPACE_SEPARATORS for ch in token.text):
        return _SPACE * len(token.text)
    return re.escape(token.text)


def _separator(glyph: str) -> str:
    return _SPACE if glyph in SPACE_SEPARATORS else re.escape(glyph)


def _strict_number(grammar: NumberGrammar) -> str:
    integer = r"\d++"
    if grammar.group_separator is not None:
        integer = rf"\d++(?:{_separator(grammar.group_separator)}\d++)*+"
    number = rf"-?{integer}"
    if grammar.decimal_separator is not None:
        number += rf"(?:{_separator(grammar.decimal_separator)}\d++)?"
    return number


def _strict_pattern(symbols: CurrencySymbols, grammar: NumberGrammar) -> str:
    parts: list[str] = []
    number_done = False
    seen_number = False
    for token in grammar.tokens:
        match token.kind:
            case TokenKind.CURRENCY:
                name = "suffix" if seen_number else "prefix"
                parts.append(f"(?P<{name}>{symbols.pattern})")
            case TokenKind.LITERAL:
                parts.append(_literal(token))
            case _:
                seen_number = True
                if not number_done:
                    parts.append(f"(?P<number>{_strict_number(grammar)})")
                    number_done = True
    return "".join(parts)


def _flexible_pattern(symbols: CurrencySymbols) -> str:
    currency = symbols.pattern
    return (
        rf"(?:(?P<prefix>{currency}){_SPACE}?)?"
        rf"(?P<number>{_FLEXIBLE_NUMBER})"
        rf"(?:{_SPACE}?(?P<suffix>{currency}))?"
    )


@functools.lru_cache(maxsize=MAX_MATCHER_CACHE_SIZE)
def build_matcher(
    symbols: CurrencySymbols, grammar: NumberGrammar, mode: MatchMode = MatchMode.FLEXIBLE
) -> MoneyMatcher:
    """Compile the window regex.

    Args:
        symbols: Currency tokens to recognize
        grammar: Compiled format; flexible mode only uses it for reporting
        mode: STRICT follows grammar tokens exactly, FLEXIBLE accepts a
            currency on either side and any separator layout

    Returns:
        MoneyMatcher (cached per symbols, grammar and mode)
    """
    if mode is MatchMode.STRICT:
        body = _strict_pattern(symbols, grammar)
    else:
        body = _flexible_pattern(symbols)
    regex = re.compile(f"{_LEFT_ANCHOR}{body}{_RIGHT_ANCHOR}")
    return MoneyMatcher(regex, grammar, mode)
