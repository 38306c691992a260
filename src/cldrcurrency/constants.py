"""Shared constants for cldrcurrency.

This module provides centralized configuration constants used across
the data, filtering, and lookup layers. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Code shapes: ISO 4217 and private-use currency code formats
- Cache limits: Memory bounds for per-locale caches
- Locale defaults: Fallback locale for lookups without an explicit locale
- Plural categories: CLDR plural category keys used by currency counts

Python 3.13+. Zero external dependencies.
"""

import re

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Code shapes
    "ISO_CURRENCY_CODE_PATTERN",
    "PRIVATE_CURRENCY_CODE_PATTERN",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    # Locale defaults
    "DEFAULT_LOCALE",
    # Plural categories
    "PLURAL_CATEGORIES",
    "PLURAL_CATEGORY_OTHER",
    # Index normalization
    "TRAILING_ABBREVIATION_MARK",
]

# ============================================================================
# CODE SHAPES
# ============================================================================

# ISO 4217 currency codes are exactly 3 uppercase ASCII letters.
ISO_CURRENCY_CODE_PATTERN: re.Pattern[str] = re.compile(r"^[A-Z]{3}$")

# ISO 4217 reserves codes starting with "X" followed by two letters for
# private use (precious metals, testing codes, application currencies).
PRIVATE_CURRENCY_CODE_PATTERN: re.Pattern[str] = re.compile(r"^X[A-Z]{2}$")

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum number of locales whose currency map and string index are held
# in memory by a single CurrencyLookup.
# 128 covers typical multi-region applications (major locales + variants).
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

DEFAULT_LOCALE: str = "en"

# ============================================================================
# PLURAL CATEGORIES
# ============================================================================

# CLDR plural categories, in CLDR's canonical order.
PLURAL_CATEGORIES: tuple[str, ...] = ("zero", "one", "two", "few", "many", "other")

# Every locale defines "other"; it is the fallback for any missing category.
PLURAL_CATEGORY_OTHER: str = "other"

# ============================================================================
# INDEX NORMALIZATION
# ============================================================================

# CLDR encodes some abbreviated names with a trailing period ("fr.").
# A single trailing period is trimmed before strings enter the index.
TRAILING_ABBREVIATION_MARK: str = "."
