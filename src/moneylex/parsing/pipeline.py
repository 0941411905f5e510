"""Money extraction pipeline.

Finds money amounts in free text:

    1. The match builder yields candidate windows (currency + number).
    2. Each window's currency token is mapped to compatible codes; an
       explicit ISO code wins, otherwise the strategy breaks ties.
    3. The separator resolver turns the number into an exact Decimal using
       the chosen currency's minor units.

parse() wants exactly one amount and raises on anything else; parse_all()
returns every amount it can resolve and skips windows that fail.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from moneylex.currencies.metadata import decimal_digits
from moneylex.currencies.symbols import CurrencyMatch, CurrencySymbols, strip_bidi_marks
from moneylex.diagnostics import (
    AmbiguousError,
    ErrorTemplate,
    MoneyParseError,
    NoMatchError,
)
from moneylex.locale_utils import normalize_locale, require_locale
from moneylex.money import Money

from .grammar import NumberGrammar, compile_format, compile_locale, normalize_parts, tokenize_format
from .matcher import MatchMode, MoneyMatcher, RawMatch, build_matcher
from .separators import resolve
from .strategy import Default, DisambiguationStrategy, choose_currency

__all__ = [
    "MoneyParser",
    "MoneyScan",
    "ParseOptions",
    "parse",
    "parse_all",
    "parser",
]

logger = logging.getLogger(__name__)

# Grammar used without a locale: currency on either side, no preferred decimal.
_GENERIC_GRAMMAR = NumberGrammar(normalize_parts(tokenize_format("i")), "generic")


@dataclass(frozen=True, slots=True)
class ParseOptions:
    """Parser configuration; every field is optional.

    Attributes:
        locale: Locale of the text (BCP-47 or POSIX); supplies the preferred
            decimal symbol and the region used to pick between currencies
        currency: Currency of amounts written without one (code or symbol)
        format: User format such as 'i,iii.ff CCC'; switches to strict mode
        decimal_separator: Known decimal glyph, overrides all inference
        strategy: How to pick between currencies sharing a symbol
    """

    locale: str | None = None
    currency: str | None = None
    format: str | None = None
    decimal_separator: str | None = None
    strategy: DisambiguationStrategy | None = None


class MoneyParser:
    """Reusable money parser for one configuration.

    Construction compiles the grammar and the window regex (both cached), so
    keep a parser around when scanning many texts with the same options.

    Example:
        >>> p = MoneyParser("de-DE")
        >>> p.parse("1.234,56 €")
        Money(currency='EUR', amount=Decimal('1234.56'))
        >>> [str(m) for m in p.parse_all("EUR 11,40 und 102,60 EUR")]
        ['EUR 11.40', 'EUR 102.60']
    """

    __slots__ = (
        "_currency",
        "_decimal_separator",
        "_integer_only",
        "_matcher",
        "_preferred_decimal",
        "_symbols",
        "locale",
        "options",
        "strategy",
    )

    def __init__(self, locale: str | None = None, options: ParseOptions | None = None) -> None:
        """Initialize MoneyParser.

        Args:
            locale: Locale of the text; overrides options.locale
            options: Remaining configuration

        Raises:
            ValueError: If the locale or the configured currency is unknown
            GrammarError: If options.format is invalid
        """
        self.options = options or ParseOptions()
        locale = locale or self.options.locale
        self.locale = normalize_locale(locale) if locale else None
        if self.locale is not None:
            require_locale(self.locale)
        self.strategy: DisambiguationStrategy = self.options.strategy or Default()

        symbols = CurrencySymbols.build(self.locale)
        self._symbols = symbols
        if self.options.format:
            grammar = compile_format(self.options.format)
            mode = MatchMode.STRICT
        elif self.locale is not None:
            grammar = compile_locale(self.locale)
            mode = MatchMode.FLEXIBLE
        else:
            grammar = _GENERIC_GRAMMAR
            mode = MatchMode.FLEXIBLE
        self._matcher: MoneyMatcher = build_matcher(symbols, grammar, mode)

        strict = mode is MatchMode.STRICT
        self._decimal_separator = self.options.decimal_separator or (
            grammar.decimal_separator if strict else None
        )
        self._integer_only = strict and not grammar.has_fraction and not self._decimal_separator
        self._preferred_decimal = None if strict else grammar.decimal_separator

        self._currency: CurrencyMatch | None = None
        if self.options.currency:
            self._currency = symbols.lookup(self.options.currency)
            if self._currency is None:
                diagnostic = ErrorTemplate.currency_unknown(self.options.currency)
                raise ValueError(diagnostic.message)

    def __repr__(self) -> str:
        return f"MoneyParser(locale={self.locale!r}, options={self.options!r})"

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def parse(self, text: str) -> Money:
        """Parse text holding exactly one money amount.

        Raises:
            TypeError: If text is not a string
            NoMatchError: If no amount is found
            AmbiguousError: If a window is ambiguous or several amounts exist
            InconsistentSeparatorsError: If a window's separators are invalid
        """
        if not isinstance(text, str):
            msg = f"Expected string, got {type(text).__name__}"
            raise TypeError(msg)

        results: list[Money] = []
        first_error: MoneyParseError | None = None
        for window in self._windows(text):
            try:
                results.append(self._resolve(window))
            except MoneyParseError as e:
                first_error = first_error or e

        if first_error is not None:
            raise first_error
        if not results:
            raise NoMatchError(
                ErrorTemplate.no_match(text), raw_text=text, locale_code=self.locale or ""
            )
        if len(results) > 1:
            raise AmbiguousError(
                ErrorTemplate.multiple_amounts(text, len(results)),
                raw_text=text,
                locale_code=self.locale or "",
            )
        return results[0]

    def parse_all(self, text: object) -> list[Money]:
        """Return every resolvable amount in text, in order.

        Non-string input yields an empty list. Windows that fail to resolve
        are skipped (logged at DEBUG level).
        """
        return list(self.scan(text))

    def scan(self, text: object) -> MoneyScan:
        """Return a lazy, restartable iterable over the amounts in text."""
        return MoneyScan(self, text if isinstance(text, str) else "")

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _iter_money(self, text: str) -> Iterator[Money]:
        for window in self._windows(text):
            try:
                yield self._resolve(window)
            except MoneyParseError as e:
                logger.debug("Skipping money window %r at %d: %s", window.text, window.start, e)

    def _windows(self, text: str) -> Iterator[RawMatch]:
        """Yield windows that carry a currency (or can borrow the configured one)."""
        for window in self._matcher.finditer(strip_bidi_marks(text)):
            if window.currency_tokens or self._currency is not None:
                yield window

    def _resolve(self, window: RawMatch) -> Money:
        currency = self._resolve_currency(window)
        number = resolve(
            window.number,
            decimal_separator=self._decimal_separator,
            currency_decimals=decimal_digits(currency),
            preferred_decimal=self._preferred_decimal,
            integer_only=self._integer_only,
            offset=window.number_start,
        )
        return Money(currency, number.value)

    def _resolve_currency(self, window: RawMatch) -> str:
        matches: list[CurrencyMatch] = []
        for token in window.currency_tokens:
            match = self._symbols.lookup(token)
            if match is None:
                raise NoMatchError(
                    ErrorTemplate.currency_unknown(token),
                    position=window.start,
                    raw_text=window.text,
                    locale_code=self.locale or "",
                )
            matches.append(match)
        if not matches:
            if self._currency is None:
                raise NoMatchError(
                    ErrorTemplate.no_match(window.text),
                    position=window.start,
                    raw_text=window.text,
                    locale_code=self.locale or "",
                )
            matches.append(self._currency)

        explicit = sorted({m.codes[0] for m in matches if m.explicit})
        if len(explicit) > 1:
            raise AmbiguousError(
                ErrorTemplate.currency_conflict(window.text, tuple(explicit), window.start),
                position=window.start,
                raw_text=window.text,
                locale_code=self.locale or "",
            )
        if explicit:
            return explicit[0]

        allowed = set(matches[0].codes).intersection(*(m.codes for m in matches[1:]))
        candidates = tuple(code for code in matches[0].codes if code in allowed)
        if not candidates:
            codes = tuple(sorted({code for m in matches for code in m.codes}))
            raise AmbiguousError(
                ErrorTemplate.currency_conflict(window.text, codes, window.start),
                position=window.start,
                raw_text=window.text,
                locale_code=self.locale or "",
            )

        chosen = choose_currency(candidates, self.strategy, self.locale)
        if chosen is None:
            raise AmbiguousError(
                ErrorTemplate.currency_ambiguous(
                    matches[0].text, candidates, window.start, window.end
                ),
                position=window.start,
                raw_text=window.text,
                locale_code=self.locale or "",
            )
        return chosen


@dataclass(frozen=True, slots=True)
class MoneyScan:
    """Lazy view of the amounts in one text; iterate as often as needed."""

    parser: MoneyParser
    text: str

    def __iter__(self) -> Iterator[Money]:
        return self.parser._iter_money(self.text)  # noqa: SLF001 - companion class


def parser(
    locale: str | None = None,
    *,
    currency: str | None = None,
    format: str | None = None,  # noqa: A002 - mirrors ParseOptions.format
    decimal_separator: str | None = None,
    strategy: DisambiguationStrategy | None = None,
) -> MoneyParser:
    """Build a MoneyParser from keyword options.

    Example:
        >>> parser("en", format="iii.fff CCC").parse("95065.22 Ft")
        Money(currency='HUF', amount=Decimal('95065.22'))
    """
    options = ParseOptions(
        locale=locale,
        currency=currency,
        format=format,
        decimal_separator=decimal_separator,
        strategy=strategy,
    )
    return MoneyParser(locale, options)


def parse(text: str, locale: str | None = None, options: ParseOptions | None = None) -> Money:
    """Parse text holding exactly one money amount (see MoneyParser.parse)."""
    return MoneyParser(locale, options).parse(text)


def parse_all(
    text: object, locale: str | None = None, options: ParseOptions | None = None
) -> list[Money]:
    """Return every resolvable amount in text (see MoneyParser.parse_all)."""
    return MoneyParser(locale, options).parse_all(text)
