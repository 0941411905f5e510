"""Currency symbol matcher.

Maps the currency tokens found next to amounts ('€', 'US$', 'kr.', 'EUR')
to the ISO 4217 codes they may denote. All data is sourced from Unicode CLDR
via Babel and cached per locale.

Symbol sources:
    - ISO 4217 codes, matched case-insensitively
    - CLDR symbols of every currency in a curated set of lookup locales
    - The requested locale's own symbols
    - A static table of symbols in common use that CLDR lacks ('KSh', 'Rs')
    - Country + glyph composites for the '$', '£' and '¥' families
      ('CA$', '$CA', 'AUD$', 'JP¥', '£GI')

A symbol may denote several currencies. Collisions are reported, never
resolved here: the parsing pipeline picks one using its strategy.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from babel import Locale, UnknownLocaleError

from moneylex.constants import (
    BIDI_MARKS,
    ISO_CURRENCY_CODE_LENGTH,
    MAX_LOCALE_CACHE_SIZE,
    SYMBOL_LOOKUP_LOCALE_IDS,
)
from moneylex.locale_utils import normalize_locale, require_locale

from .metadata import currency_codes

__all__ = ["CurrencyMatch", "CurrencySymbols", "strip_bidi_marks"]

logger = logging.getLogger(__name__)

_KRONE = ("DKK", "ISK", "NOK", "SEK")
_RUPEE_SIGN = ("INR", "LKR", "MUR", "NPR", "PKR", "SCR")
_RUPEE_ABBREVIATION = (*_RUPEE_SIGN, "IDR")

# Symbols seen in real listings that CLDR does not assign (or assigns only in
# locales outside the lookup set).
_EXTRA_SYMBOLS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "M": ("LSL",),
    "A.M.": ("AZN",),
    "KSh": ("KES",),
    "Ksh": ("KES",),
    "лв": ("BGN",),
    "лв.": ("BGN",),
    "kr": _KRONE,
    "kr.": _KRONE,
    "Rs": _RUPEE_ABBREVIATION,
    "Rs.": _RUPEE_ABBREVIATION,
    "₨": _RUPEE_SIGN,  # rupee sign
    "Re": ("NPR",),
    "रु": ("NPR",),  # Nepali
    "रू": ("NPR",),
    "රු": ("LKR",),  # Sinhala
    "ரூ": ("LKR",),  # Tamil
    "Rp": ("IDR",),
    "R": ("ZAR",),
    "K": ("MMK", "PGK", "ZMW"),
    "￥": ("CNY", "JPY"),  # fullwidth yen
})

# Symbol families matched regardless of case ('kr', 'Kr', 'KR.').
_CASE_INSENSITIVE_SYMBOLS: frozenset[str] = frozenset({"kr", "kr."})

# Glyphs shared by a family of currencies; composites add the country prefix.
_FAMILY_GLYPHS: tuple[str, ...] = ("$", "£", "¥")

_BIDI_TABLE = dict.fromkeys(map(ord, BIDI_MARKS))


def strip_bidi_marks(text: str) -> str:
    """Remove invisible directional marks (LRM, RLM, ALM) from text."""
    return text.translate(_BIDI_TABLE)


def _is_usable_symbol(symbol: str, code: str) -> bool:
    """Filter out symbols that are just the ISO code or carry digits."""
    return bool(symbol) and symbol != code and not (
        len(symbol) == ISO_CURRENCY_CODE_LENGTH and symbol.isupper() and symbol.isalpha()
    ) and not any(ch.isdigit() for ch in symbol)


def _add_locale_symbols(table: dict[str, set[str]], locale: Locale) -> None:
    for code, raw_symbol in locale.currency_symbols.items():
        symbol = strip_bidi_marks(raw_symbol).strip()
        if code in currency_codes() and _is_usable_symbol(symbol, code):
            table.setdefault(symbol, set()).add(code)


@functools.cache
def _shared_symbol_table() -> Mapping[str, frozenset[str]]:
    """Build the locale-independent symbol table once per process.

    Scans the curated lookup locales and merges the static extra symbols.
    """
    table: dict[str, set[str]] = {}
    for locale_id in SYMBOL_LOOKUP_LOCALE_IDS:
        try:
            locale = Locale.parse(locale_id)
        except (UnknownLocaleError, ValueError):
            # Lookup list may name locales missing from older CLDR releases
            logger.debug("Skipping unavailable symbol lookup locale %s", locale_id)
            continue
        _add_locale_symbols(table, locale)

    for symbol, codes in _EXTRA_SYMBOLS.items():
        table.setdefault(symbol, set()).update(codes)

    return MappingProxyType({symbol: frozenset(codes) for symbol, codes in table.items()})


def _add_family_symbols(table: dict[str, set[str]]) -> None:
    """Extend bare family glyphs and add country composites.

    A code belongs to the '$' family when any of its symbols is the glyph
    wrapped in at most three ASCII capitals ('$', 'HK$', 'R$', '$CA').
    """
    for glyph in _FAMILY_GLYPHS:
        shape = re.compile(rf"[A-Z]{{0,3}}{re.escape(glyph)}[A-Z]{{0,3}}")
        family = {
            code
            for symbol, codes in table.items()
            if shape.fullmatch(symbol)
            for code in codes
        }
        if not family:
            continue
        table.setdefault(glyph, set()).update(family)
        for code in family:
            country = code[:2]
            for composite in (f"{country}{glyph}", f"{glyph}{country}", f"{code}{glyph}"):
                table.setdefault(composite, set()).add(code)


@dataclass(frozen=True, slots=True)
class CurrencyMatch:
    """Currency codes compatible with a matched currency token.

    Attributes:
        text: The token as it appeared in the input
        codes: Compatible ISO 4217 codes, sorted
        explicit: True when the token is an ISO code itself
    """

    text: str
    codes: tuple[str, ...]
    explicit: bool = False

    @property
    def is_unique(self) -> bool:
        return len(self.codes) == 1


class CurrencySymbols:
    """Symbol table for one locale.

    Instances are immutable after construction and shared through the
    per-locale cache; use CurrencySymbols.build() rather than the constructor.

    Example:
        >>> symbols = CurrencySymbols.build("en")
        >>> symbols.parse("CA$"), symbols.parse("$CA"), symbols.parse("eur")
        ('CAD', 'CAD', 'EUR')
    """

    __slots__ = ("_folded", "_pattern", "_symbols", "locale_code")

    def __init__(self, locale_code: str | None, symbols: Mapping[str, frozenset[str]]) -> None:
        self.locale_code = locale_code
        self._symbols = symbols
        folded: dict[str, frozenset[str]] = {}
        for symbol, codes in symbols.items():
            key = symbol.casefold()
            if key in _CASE_INSENSITIVE_SYMBOLS:
                folded[key] = folded.get(key, frozenset()) | codes
        self._folded: Mapping[str, frozenset[str]] = MappingProxyType(folded)
        self._pattern = _alternation(symbols.keys(), currency_codes())

    @classmethod
    def build(cls, locale_code: str | None = None) -> CurrencySymbols:
        """Return the (cached) symbol table for a locale.

        Args:
            locale_code: Locale whose own symbols are added to the shared
                table (BCP-47 or POSIX), or None for the shared table only

        Raises:
            ValueError: If the locale is unknown
        """
        if locale_code is None:
            return _build_symbols(None)
        return _build_symbols(normalize_locale(locale_code))

    @property
    def pattern(self) -> str:
        """Regex alternation matching every known token, longest first."""
        return self._pattern

    @property
    def symbols(self) -> Mapping[str, frozenset[str]]:
        """Symbol to compatible codes (ISO codes not included)."""
        return self._symbols

    def lookup(self, text: str) -> CurrencyMatch | None:
        """Return the codes compatible with a currency token, or None if unknown."""
        token = strip_bidi_marks(text).strip()
        upper = token.upper()
        if len(token) == ISO_CURRENCY_CODE_LENGTH and upper in currency_codes():
            return CurrencyMatch(token, (upper,), explicit=True)
        codes = self._symbols.get(token) or self._folded.get(token.casefold())
        if not codes:
            return None
        return CurrencyMatch(token, tuple(sorted(codes)))

    def parse(self, text: str) -> str | None:
        """Return the ISO code for a token when exactly one currency is compatible."""
        match = self.lookup(text)
        if match is None or not match.is_unique:
            return None
        return match.codes[0]

    def __contains__(self, text: object) -> bool:
        return isinstance(text, str) and self.lookup(text) is not None

    def __repr__(self) -> str:
        return f"CurrencySymbols(locale_code={self.locale_code!r}, symbols={len(self._symbols)})"


def _alternation(symbols: Iterable[str], codes: Iterable[str]) -> str:
    """Build the token alternation; longer tokens first so 'US$' beats '$'."""
    entries: list[tuple[str, str]] = []
    for code in codes:
        entries.append((code, f"(?i:{code})"))
    for symbol in symbols:
        escaped = re.escape(symbol)
        if symbol.casefold() in _CASE_INSENSITIVE_SYMBOLS:
            escaped = f"(?i:{escaped})"
        entries.append((symbol, escaped))
    entries.sort(key=lambda entry: (-len(entry[0]), entry[0]))
    return "|".join(pattern for _, pattern in entries)


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _build_symbols(locale_code: str | None) -> CurrencySymbols:
    table = {symbol: set(codes) for symbol, codes in _shared_symbol_table().items()}
    if locale_code is not None:
        _add_locale_symbols(table, require_locale(locale_code))
    _add_family_symbols(table)

    frozen = MappingProxyType({symbol: frozenset(codes) for symbol, codes in table.items()})
    logger.debug(
        "Built currency symbol table for %s: %d symbols", locale_code or "<root>", len(frozen)
    )
    return CurrencySymbols(locale_code, frozen)
