"""Currency disambiguation strategies.

A symbol such as '$' or 'kr' is compatible with several currencies. The
strategy decides which one a window means:

    Prefer(codes)   the first listed code that is compatible
    Infer(locale)   the currency of the locale's region
    Default()       the ambient locale's region, then the global order

Prefer and Infer fall back to Default when nothing they name is compatible.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass

from moneylex.currencies.preferred import preferred_currencies, territory_currencies
from moneylex.locale_utils import get_locale_region, normalize_locale

__all__ = [
    "Default",
    "DisambiguationStrategy",
    "Infer",
    "Prefer",
    "choose_currency",
    "infer",
    "preference_order",
    "prefer",
]


@dataclass(frozen=True, slots=True)
class Prefer:
    """Pick the first of these codes that the symbol allows."""

    codes: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class Infer:
    """Pick the currency of this locale's region."""

    locale: str


@dataclass(frozen=True, slots=True)
class Default:
    """Pick by the parser's own locale, then USD, GBP, JPY, DKK, INR."""


type DisambiguationStrategy = Prefer | Infer | Default


def prefer(*codes: str | None) -> Prefer:
    """Build a Prefer strategy; None entries are ignored.

    Example:
        >>> prefer("usd", None, "CNY")
        Prefer(codes=('USD', 'CNY'))
    """
    return Prefer(tuple(code.upper() for code in codes if code))


def infer(locale: str) -> Infer:
    """Build an Infer strategy for a locale (BCP-47 or POSIX)."""
    return Infer(normalize_locale(locale))


def _region_order(region: str | None) -> tuple[str, ...]:
    if region is None:
        return preferred_currencies(None)
    return territory_currencies(region) + preferred_currencies(region)


def preference_order(
    strategy: DisambiguationStrategy, locale: str | None = None
) -> tuple[str, ...]:
    """Return the currencies a strategy tries, most preferred first.

    Args:
        strategy: The disambiguation strategy
        locale: Ambient locale of the parser (None for no locale)

    Returns:
        Ordered codes; may contain duplicates

    Raises:
        ValueError: If a locale is unknown
    """
    default = _region_order(get_locale_region(locale) if locale else None)
    match strategy:
        case Prefer(codes=codes):
            return codes + default
        case Infer(locale=inferred):
            return _region_order(get_locale_region(inferred)) + default
        case Default():
            return default


def choose_currency(
    candidates: tuple[str, ...],
    strategy: DisambiguationStrategy,
    locale: str | None = None,
) -> str | None:
    """Pick one of several compatible currencies, or None if nothing applies.

    Example:
        >>> choose_currency(("AUD", "CAD", "USD"), infer("en-AU"))
        'AUD'
        >>> choose_currency(("MMK", "PGK", "ZMW"), Default()) is None
        True
    """
    if len(candidates) == 1:
        return candidates[0]
    allowed = set(candidates)
    return next((code for code in preference_order(strategy, locale) if code in allowed), None)
