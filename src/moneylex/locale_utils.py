"""Locale utilities for BCP-47 to POSIX conversion.

Centralizes locale format normalization used throughout the codebase.
Provides canonical locale handling to ensure consistent cache keys and lookups,
plus region resolution used when choosing between same-symbol currencies.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING

from .constants import MAX_LOCALE_CACHE_SIZE
from .diagnostics import ErrorTemplate

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "get_locale_region",
    "normalize_locale",
    "require_locale",
]

logger = logging.getLogger(__name__)


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).
    All locale handling should normalize at the system boundary (entry point)
    using this function, then use the normalized form for cache keys.

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.strip().replace("-", "_")


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Parses the locale code once and caches the result. A language and region
    pair without its own CLDR locale ("en_JP") falls back to the language
    locale ("en"); get_locale_region() still reports the requested region.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If neither the locale nor its language
            is recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale, UnknownLocaleError  # noqa: PLC0415
    from babel.core import parse_locale  # noqa: PLC0415

    normalized = normalize_locale(locale_code)
    try:
        return Locale.parse(normalized)
    except UnknownLocaleError as e:
        parts = parse_locale(normalized)
        language, territory, script = parts[0], parts[1], parts[2]
        if not territory:
            raise
        fallback = f"{language}_{script}" if script else language
        logger.warning("Unknown locale '%s': %s. Falling back to %s", locale_code, e, fallback)
        return Locale.parse(fallback)


def require_locale(locale_code: str) -> Locale:
    """Resolve a locale code or raise ValueError.

    Converts Babel's UnknownLocaleError (and malformed identifiers) into a
    single ValueError so callers see one exception type for bad locales.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        ValueError: If the locale is unknown or malformed
    """
    from babel import UnknownLocaleError  # noqa: PLC0415

    try:
        return get_babel_locale(locale_code)
    except (UnknownLocaleError, ValueError, TypeError) as e:
        logger.debug("Locale lookup failed for '%s': %s", locale_code, e)
        raise ValueError(ErrorTemplate.locale_unknown(str(locale_code)).message) from e


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_locale_region(locale_code: str) -> str | None:
    """Return the region (territory) a locale implies.

    Uses the explicit territory when present ("en_AU" -> "AU", "en_JP" ->
    "JP"), otherwise the CLDR likely-subtags table ("fr" -> "FR", "en" -> "US").

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        ISO 3166 region code, or None if no region can be inferred

    Raises:
        ValueError: If the locale is unknown or malformed
    """
    from babel.core import get_global, parse_locale  # noqa: PLC0415

    locale = require_locale(locale_code)
    requested = parse_locale(normalize_locale(locale_code))[1]
    if requested:
        return requested

    likely: dict[str, str] = get_global("likely_subtags")
    for key in (str(locale), locale.language):
        maximized = likely.get(key)
        if maximized is None:
            continue
        try:
            territory = parse_locale(maximized)[1]
        except ValueError:
            continue
        if territory:
            return territory
    return None
