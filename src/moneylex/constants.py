"""Shared constants for MoneyLex.

This module provides centralized configuration constants used across the
currencies and parsing packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Cache limits: Memory bounds for per-locale caches
- Currency defaults: Fallback decimal places and preference order
- Separator glyphs: Characters accepted between digit runs
- Symbol lookup: Locales scanned for CLDR currency symbols

Python 3.13+. Zero external dependencies.
"""

from decimal import Decimal

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    "MAX_MATCHER_CACHE_SIZE",
    # Currency defaults
    "ISO_CURRENCY_CODE_LENGTH",
    "DEFAULT_DECIMAL_DIGITS",
    "DEFAULT_PREFERRED_CURRENCIES",
    "REPRESENTATIVE_AMOUNT",
    "REPRESENTATIVE_CURRENCY",
    # Separator glyphs
    "SPACE_SEPARATORS",
    "APOSTROPHE_SEPARATORS",
    "ARABIC_GROUP_SEPARATOR",
    "ARABIC_DECIMAL_SEPARATOR",
    "DECIMAL_CAPABLE_SEPARATORS",
    "ALL_SEPARATORS",
    "BIDI_MARKS",
    # Symbol lookup
    "SYMBOL_LOOKUP_LOCALE_IDS",
]

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached per-locale objects (symbol tables, grammars, Babel locales).
# 128 covers typical multi-region applications (major locales + variants).
MAX_LOCALE_CACHE_SIZE: int = 128

# Maximum cached compiled money matchers (symbols x grammar x mode).
MAX_MATCHER_CACHE_SIZE: int = 256

# ============================================================================
# CURRENCY DEFAULTS
# ============================================================================

# ISO 4217 currency codes are exactly 3 uppercase ASCII letters.
ISO_CURRENCY_CODE_LENGTH: int = 3

# ISO 4217 default minor units when CLDR has no explicit entry.
DEFAULT_DECIMAL_DIGITS: int = 2

# Global fallback order for ambiguous symbols when no locale is known:
# dollar, pound, yen, krone, rupee families.
DEFAULT_PREFERRED_CURRENCIES: tuple[str, ...] = ("USD", "GBP", "JPY", "DKK", "INR")

# Value formatted to derive a locale's canonical parts (shows grouping and fraction).
REPRESENTATIVE_AMOUNT: Decimal = Decimal("1234567.89")

# Currency used for the representative value (2 decimals, single-glyph symbol).
REPRESENTATIVE_CURRENCY: str = "EUR"

# ============================================================================
# SEPARATOR GLYPHS
# ============================================================================

# ASCII space plus every Unicode space variant seen as a thousands mark:
# no-break, ogham, en/em/thin/hair spaces, narrow no-break, math, ideographic.
SPACE_SEPARATORS: str = (
    " \u00a0\u1680"
    + "".join(chr(code) for code in range(0x2000, 0x200B))
    + "\u202f\u205f\u3000"
)

# ASCII apostrophe and the right single quotation mark (de_CH, fr_CH).
APOSTROPHE_SEPARATORS: str = "'\u2019"

ARABIC_GROUP_SEPARATOR: str = "\u066c"
ARABIC_DECIMAL_SEPARATOR: str = "\u066b"

# Glyphs that may act as a decimal separator. Spaces and apostrophes never do.
DECIMAL_CAPABLE_SEPARATORS: str = ".," + ARABIC_DECIMAL_SEPARATOR

ALL_SEPARATORS: str = (
    ".,"
    + SPACE_SEPARATORS
    + APOSTROPHE_SEPARATORS
    + ARABIC_GROUP_SEPARATOR
    + ARABIC_DECIMAL_SEPARATOR
)

# Directional marks emitted by RTL locale formatters; invisible, never significant.
BIDI_MARKS: str = "\u200e\u200f\u061c"

# ============================================================================
# SYMBOL LOOKUP
# ============================================================================

# Curated list of locales for currency symbol lookup.
# Selected to cover major world currencies and regional variants.
# Add locales here to support additional currency symbol mappings.
SYMBOL_LOOKUP_LOCALE_IDS: tuple[str, ...] = (
    "en_US", "en_GB", "en_CA", "en_AU", "en_NZ", "en_SG", "en_HK", "en_IN",
    "en_ZA", "en_ZM", "en_KE", "en_NG", "en_GH", "en_JM", "en_TT", "en_FJ",
    "en_GI", "en_FK", "en_LR", "en_NA", "en_PG", "en_MU", "en_PK",
    "de_DE", "de_CH", "de_AT", "fr_FR", "fr_CH", "fr_CA",
    "es_ES", "es_MX", "es_AR", "es_CO", "es_CL", "es_PE", "es_UY",
    "it_IT", "it_CH", "nl_NL", "pt_PT", "pt_BR",
    "ja_JP", "zh_CN", "zh_TW", "zh_HK", "ko_KR",
    "ru_RU", "pl_PL", "sv_SE", "nb_NO", "nn_NO", "da_DK", "fi_FI", "is_IS",
    "tr_TR", "ar_SA", "ar_EG", "ar_AE", "ar_BH", "ar_KW", "he_IL", "hi_IN",
    "ur_PK", "si_LK", "ta_LK", "ne_NP", "my_MM", "sw_KE",
    "th_TH", "vi_VN", "id_ID", "ms_MY", "fil_PH",
    "lv_LV", "et_EE", "lt_LT", "cs_CZ", "sk_SK", "hu_HU",
    "ro_RO", "bg_BG", "hr_HR", "sl_SI", "sr_RS",
    "uk_UA", "ka_GE", "az_AZ", "kk_KZ",
)
