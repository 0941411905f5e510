"""Locale-aware number extraction.

The number half of money parsing: finds bare numbers in text and resolves
their separators into exact Decimals. The decimal separator is the one
given explicitly, else the locale's CLDR decimal symbol, else it is inferred
from the shape of each number.

Python 3.13+.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from decimal import Decimal

from babel.numbers import get_decimal_symbol

from moneylex.currencies.symbols import strip_bidi_marks
from moneylex.diagnostics import AmbiguousError, ErrorTemplate, MoneyParseError, NoMatchError
from moneylex.locale_utils import normalize_locale, require_locale

from .matcher import NUMBER_PATTERN
from .separators import resolve

__all__ = ["NumberParser", "number_parser"]

logger = logging.getLogger(__name__)


class NumberParser:
    """Parse numbers written with one locale's (or one explicit) decimal mark.

    Example:
        >>> NumberParser(decimal_separator=",").parse_all("Total 1,2.3.5  Tax 234,56")
        [Decimal('234.56')]
        >>> NumberParser("de-DE").parse("1.234.567,8")
        Decimal('1234567.8')
    """

    __slots__ = ("decimal_separator", "locale")

    def __init__(self, locale: str | None = None, decimal_separator: str | None = None) -> None:
        self.locale = normalize_locale(locale) if locale else None
        if decimal_separator is None and self.locale is not None:
            decimal_separator = strip_bidi_marks(get_decimal_symbol(require_locale(self.locale)))
        self.decimal_separator = decimal_separator or None

    def __repr__(self) -> str:
        return f"NumberParser(locale={self.locale!r}, decimal_separator={self.decimal_separator!r})"

    def parse(self, text: str) -> Decimal:
        """Parse text holding exactly one number.

        Raises:
            TypeError: If text is not a string
            NoMatchError: If text holds no number
            AmbiguousError: If the number is ambiguous or text holds several
            InconsistentSeparatorsError: If the separators cannot form a number
        """
        if not isinstance(text, str):
            msg = f"Expected string, got {type(text).__name__}"
            raise TypeError(msg)

        found = [self._resolve(match.group(0), match.start()) for match in self._matches(text)]
        if not found:
            raise NoMatchError(
                ErrorTemplate.no_number(text), raw_text=text, locale_code=self.locale or ""
            )
        if len(found) > 1:
            raise AmbiguousError(
                ErrorTemplate.multiple_amounts(text, len(found)),
                raw_text=text,
                locale_code=self.locale or "",
            )
        return found[0]

    def parse_all(self, text: object) -> list[Decimal]:
        """Return every resolvable number in text; failures are skipped."""
        if not isinstance(text, str):
            return []
        values: list[Decimal] = []
        for match in self._matches(text):
            try:
                values.append(self._resolve(match.group(0), match.start()))
            except MoneyParseError as e:
                logger.debug("Skipping number %r at %d: %s", match.group(0), match.start(), e)
        return values

    def _matches(self, text: str) -> Iterator[re.Match[str]]:
        return NUMBER_PATTERN.finditer(strip_bidi_marks(text))

    def _resolve(self, number: str, offset: int) -> Decimal:
        return resolve(number, decimal_separator=self.decimal_separator, offset=offset).value


def number_parser(
    locale: str | None = None, *, decimal_separator: str | None = None
) -> NumberParser:
    """Build a NumberParser.

    Example:
        >>> number_parser(decimal_separator=",").parse_all("1     2")
        [Decimal('1'), Decimal('2')]
    """
    return NumberParser(locale, decimal_separator)
