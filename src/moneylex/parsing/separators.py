"""Separator-ambiguity resolver.

Decides which separator in a digit run is the decimal mark and which are
thousands marks, then builds the exact Decimal value.

"1,234" is the hard case: a thousands separator in en_US, a decimal comma
in de_DE, and either for a 3-decimal currency such as BHD. The resolver
uses, in order: an explicit decimal separator, the shape of the run, the
currency's minor units and finally the locale's preferred decimal symbol.
When none of those decides, it fails with AmbiguousError instead of
guessing.

Python 3.13+.
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from decimal import Decimal

from moneylex.constants import (
    ALL_SEPARATORS,
    APOSTROPHE_SEPARATORS,
    ARABIC_DECIMAL_SEPARATOR,
    ARABIC_GROUP_SEPARATOR,
    DECIMAL_CAPABLE_SEPARATORS,
    SPACE_SEPARATORS,
)
from moneylex.diagnostics import (
    AmbiguousError,
    ErrorTemplate,
    InconsistentSeparatorsError,
    NoMatchError,
)

__all__ = ["ResolvedNumber", "canonical_separator", "resolve"]

# Digit group lengths: Western 3-3-3, Indian lakh 2-2-3.
_GROUP_SIZE = 3
_LAKH_GROUP_SIZE = 2
_MAX_FRACTION_DIGITS = 4

_GROUP_ONLY = frozenset({" ", "'", ARABIC_GROUP_SEPARATOR})


@dataclass(frozen=True, slots=True)
class ResolvedNumber:
    """A digit run with its separators classified.

    Attributes:
        negative: Leading minus sign present
        integer_part: ASCII integer digits, group separators removed
        fraction_part: ASCII fraction digits ('' when there is no decimal)
    """

    negative: bool
    integer_part: str
    fraction_part: str

    @property
    def value(self) -> Decimal:
        sign = "-" if self.negative else ""
        if self.fraction_part:
            return Decimal(f"{sign}{self.integer_part}.{self.fraction_part}")
        return Decimal(f"{sign}{self.integer_part}")


def canonical_separator(glyph: str) -> str:
    """Fold every space kind to ' ' and both apostrophes to "'"."""
    if glyph in SPACE_SEPARATORS:
        return " "
    if glyph in APOSTROPHE_SEPARATORS:
        return "'"
    return glyph


def _ascii_digits(run: str) -> str:
    return "".join(str(unicodedata.decimal(ch)) for ch in run)


def _split(text: str, body: str, offset: int) -> tuple[list[str], list[str]]:
    """Split a signless number into digit runs and canonical separators."""
    runs: list[str] = []
    separators: list[str] = []
    current: list[str] = []
    for char in body:
        if char.isdecimal():
            current.append(char)
        elif char in ALL_SEPARATORS and current:
            runs.append("".join(current))
            separators.append(canonical_separator(char))
            current = []
        else:
            raise InconsistentSeparatorsError(
                ErrorTemplate.separators_inconsistent(text, f"unexpected '{char}'", offset),
                position=offset,
                raw_text=text,
            )
    if not current:
        if not runs:
            raise NoMatchError(
                ErrorTemplate.no_digits(text, offset), position=offset, raw_text=text
            )
        raise InconsistentSeparatorsError(
            ErrorTemplate.separators_inconsistent(text, "trailing separator", offset),
            position=offset,
            raw_text=text,
        )
    runs.append("".join(current))
    return runs, separators


def _fits_grouping(runs: list[str]) -> bool:
    """Leading group 1-3 digits, then all-3 or Indian 2-2-...-3 groups."""
    if len(runs) == 1:
        return True
    lead, middle, last = runs[0], runs[1:-1], runs[-1]
    if not 1 <= len(lead) <= _GROUP_SIZE or len(last) != _GROUP_SIZE:
        return False
    sizes = {len(run) for run in middle}
    return sizes <= {_GROUP_SIZE} or sizes == {_LAKH_GROUP_SIZE}


def _classify(
    text: str,
    runs: list[str],
    separators: list[str],
    *,
    currency_decimals: int | None,
    preferred_decimal: str | None,
    offset: int,
) -> int | None:
    """Return the index of the decimal separator, or None for an integer."""
    if not separators:
        return None

    if len(separators) == 1:
        separator = separators[0]
        lead, tail = runs
        if separator == ARABIC_DECIMAL_SEPARATOR:
            return 0
        if separator in _GROUP_ONLY or len(tail) != _GROUP_SIZE:
            return None if separator in _GROUP_ONLY else 0
        if not 1 <= len(lead) <= _GROUP_SIZE or lead.startswith("0"):
            # Only the decimal reading fits the digits
            if currency_decimals is not None and currency_decimals != _GROUP_SIZE:
                raise InconsistentSeparatorsError(
                    ErrorTemplate.separators_inconsistent(
                        text,
                        f"'{separator}{tail}' is neither a group nor "
                        f"{currency_decimals} currency decimals",
                        offset,
                    ),
                    position=offset,
                    raw_text=text,
                )
            return 0
        # Both readings fit the digits
        if currency_decimals is not None and currency_decimals != _GROUP_SIZE:
            return None
        if preferred_decimal is not None:
            return 0 if canonical_separator(preferred_decimal) == separator else None
        raise AmbiguousError(
            ErrorTemplate.separator_ambiguous(text, separator, offset),
            position=offset,
            raw_text=text,
        )

    *groups, last = separators
    if len(set(groups)) != 1:
        raise InconsistentSeparatorsError(
            ErrorTemplate.separators_inconsistent(text, "mixed group separators", offset),
            position=offset,
            raw_text=text,
        )
    if last == groups[0]:
        return None
    if last not in DECIMAL_CAPABLE_SEPARATORS or not 1 <= len(runs[-1]) <= _MAX_FRACTION_DIGITS:
        raise InconsistentSeparatorsError(
            ErrorTemplate.separators_inconsistent(text, f"'{last}' cannot end the number", offset),
            position=offset,
            raw_text=text,
        )
    return len(separators) - 1


def _explicit_decimal_index(
    text: str, separators: list[str], decimal_separator: str, offset: int
) -> int | None:
    decimal = canonical_separator(decimal_separator)
    positions = [index for index, glyph in enumerate(separators) if glyph == decimal]
    if not positions:
        return None
    if len(positions) > 1 or positions[0] != len(separators) - 1:
        raise InconsistentSeparatorsError(
            ErrorTemplate.separators_inconsistent(
                text, f"decimal separator '{decimal_separator}' must appear once, last", offset
            ),
            position=offset,
            raw_text=text,
        )
    return positions[0]


def resolve(
    text: str,
    *,
    decimal_separator: str | None = None,
    currency_decimals: int | None = None,
    preferred_decimal: str | None = None,
    integer_only: bool = False,
    offset: int = 0,
) -> ResolvedNumber:
    """Classify the separators of a digit run and return its value.

    Args:
        text: Number text, optionally with a leading '-'
        decimal_separator: Known decimal glyph; every other separator is a group
        currency_decimals: Minor units of the currency, used to break the
            single-separator tie ('1,234' is 1234 for a 2-decimal currency)
        preferred_decimal: Locale decimal symbol, the last tie-breaker
        integer_only: Every separator is a group (formats without fraction)
        offset: Position of text in the scanned input, for error reporting

    Returns:
        ResolvedNumber with ASCII digits

    Raises:
        NoMatchError: If text holds no digits
        AmbiguousError: If a lone separator may be decimal or thousands and
            nothing breaks the tie
        InconsistentSeparatorsError: If the separators cannot form a number

    Example:
        >>> resolve("1.234,56").value
        Decimal('1234.56')
        >>> resolve("4,567", currency_decimals=2).value
        Decimal('4567')
        >>> resolve("4,567", decimal_separator=",").value
        Decimal('4.567')
    """
    negative = text.startswith("-")
    runs, separators = _split(text, text[1:] if negative else text, offset)

    if integer_only:
        decimal_index = None
    elif decimal_separator:
        decimal_index = _explicit_decimal_index(text, separators, decimal_separator, offset)
    else:
        decimal_index = _classify(
            text,
            runs,
            separators,
            currency_decimals=currency_decimals,
            preferred_decimal=preferred_decimal,
            offset=offset,
        )

    if decimal_index is None:
        integer_runs, group_separators, fraction = runs, separators, ""
    else:
        integer_runs = runs[: decimal_index + 1]
        group_separators = separators[:decimal_index]
        fraction = runs[-1]

    if group_separators and (
        len(set(group_separators)) != 1
        or group_separators[0] == ARABIC_DECIMAL_SEPARATOR
        or not _fits_grouping(integer_runs)
    ):
        raise InconsistentSeparatorsError(
            ErrorTemplate.grouping_invalid(text, offset), position=offset, raw_text=text
        )

    return ResolvedNumber(
        negative=negative,
        integer_part=_ascii_digits("".join(integer_runs)),
        fraction_part=_ascii_digits(fraction),
    )
