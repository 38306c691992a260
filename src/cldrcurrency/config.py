"""Configuration for CurrencyLookup.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from cldrcurrency.constants import DEFAULT_LOCALE, MAX_LOCALE_CACHE_SIZE

__all__ = ["CurrencyConfig"]


@dataclass(frozen=True, slots=True)
class CurrencyConfig:
    """Immutable configuration for a CurrencyLookup.

    Attributes:
        default_locale: Locale used when a query passes no locale
            (default: "en").
        locale_cache_size: Maximum number of locales whose currency map and
            string index are held in memory (default: 128). Computing one
            more locale evicts the oldest.

    Example:
        >>> config = CurrencyConfig(default_locale="de", locale_cache_size=8)
        >>> lookup = CurrencyLookup(config=config)
        >>> lookup.config.default_locale
        'de'
    """

    default_locale: str = DEFAULT_LOCALE
    locale_cache_size: int = MAX_LOCALE_CACHE_SIZE

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If default_locale is blank or locale_cache_size is
                not positive.
        """
        if not self.default_locale or not self.default_locale.strip():
            msg = "default_locale must be a non-empty locale code"
            raise ValueError(msg)
        if self.locale_cache_size <= 0:
            msg = f"locale_cache_size must be positive (got {self.locale_cache_size})"
            raise ValueError(msg)
