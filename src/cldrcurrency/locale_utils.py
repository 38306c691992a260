"""Locale utilities for BCP-47 to POSIX conversion.

Centralizes locale format normalization used throughout the codebase.
Provides canonical locale handling to ensure consistent cache keys and lookups.

Python 3.13+.
"""

from __future__ import annotations

import functools
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "normalize_locale",
    "region_subtag",
    "split_unicode_extension",
]

_SUBTAG_SEPARATOR = re.compile(r"[-_]")

# BCP 47 unicode extension keys are exactly two alphanumeric characters.
_UNICODE_KEY_LENGTH = 2


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).
    This function performs the necessary conversion for Babel API compatibility.

    This is the canonical normalization function. All locale handling should
    normalize at the system boundary (entry point) using this function, then
    use the normalized form for cache keys and lookups.

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("pt-BR")
        'pt_BR'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.strip().replace("-", "_")


def split_unicode_extension(locale_code: str) -> tuple[str, dict[str, str]]:
    """Separate a BCP-47 unicode ("-u-") extension from a locale code.

    Babel cannot parse extension subtags, so they are stripped before the
    locale reaches Babel and returned as a key/value mapping. Keys and values
    are lowercased; multi-subtag values are joined with "-".

    Args:
        locale_code: Locale code, BCP-47 or POSIX separators accepted

    Returns:
        Tuple of (base locale in POSIX format, extension keywords)

    Example:
        >>> split_unicode_extension("en-US-u-cu-eur")
        ('en_US', {'cu': 'eur'})
        >>> split_unicode_extension("de_CH")
        ('de_CH', {})
    """
    subtags = _SUBTAG_SEPARATOR.split(locale_code.strip())
    lowered = [subtag.lower() for subtag in subtags]
    if "u" not in lowered[1:]:
        return normalize_locale(locale_code), {}

    start = lowered.index("u", 1)
    base = "_".join(subtags[:start])

    keywords: dict[str, str] = {}
    key: str | None = None
    values: list[str] = []
    for subtag in lowered[start + 1 :]:
        if len(subtag) == 1:
            # Next singleton starts another extension type
            break
        if len(subtag) == _UNICODE_KEY_LENGTH:
            if key is not None:
                keywords[key] = "-".join(values)
            key, values = subtag, []
        elif key is not None:
            values.append(subtag)
    if key is not None:
        keywords[key] = "-".join(values)

    return base, keywords


def region_subtag(locale_code: str) -> str | None:
    """Return the region subtag of a locale code, if it has one.

    Regions are two letters or three digits; script subtags are skipped.

    Example:
        >>> region_subtag("sr-Latn-RS")
        'RS'
        >>> region_subtag("es-419")
        '419'
        >>> region_subtag("de") is None
        True
    """
    for subtag in _SUBTAG_SEPARATOR.split(locale_code.strip())[1:]:
        if len(subtag) == 2 and subtag.isalpha():
            return subtag.upper()
        if len(subtag) == 3 and subtag.isdigit():
            return subtag
    return None


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Parses the locale code once and caches the result. This avoids repeated
    parsing overhead in hot paths like plural rule selection.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> locale = get_babel_locale("en-US")
        >>> locale.language
        'en'
        >>> locale.territory
        'US'
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    normalized = normalize_locale(locale_code)
    return Locale.parse(normalized)
