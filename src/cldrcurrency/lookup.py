"""Currency lookup facade.

CurrencyLookup ties a locale data source, a private currency registry and
the per-locale caches together. It answers two kinds of query:

- what is the metadata or status of currency X in locale L
- which currency code does a human-typed string refer to in locale L

API: query methods return ``(result, errors)`` tuples and never raise for
domain failures; each has an ``*_or_raise`` variant that raises the first
error. Unrecognized filter atoms are a programming error and raise
ValueError.

Per-locale data (currency map, inverted string pairs, string index) is
computed once per canonical locale identifier and held until evicted.
Module-level functions of the same names query a lazily created default
lookup backed by Babel.

Thread-safe.

Python 3.13+.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from types import MappingProxyType
from typing import Any

from cldrcurrency.config import CurrencyConfig
from cldrcurrency.constants import PLURAL_CATEGORY_OTHER
from cldrcurrency.currency import (
    Currency,
    CurrencyCode,
    normalize_currency_code,
    validate_currency_code,
)
from cldrcurrency.data.babel_source import BabelCurrencyData
from cldrcurrency.data.protocol import CurrencyDataSource, CurrencyHistory
from cldrcurrency.deprecation import deprecated
from cldrcurrency.diagnostics import (
    CurrencyError,
    ErrorTemplate,
    UnknownCurrencyError,
    UnknownLocaleError,
)
from cldrcurrency.enums import CurrencyStatus
from cldrcurrency.filtering import CurrencyCollection, FilterSpec, currency_filter
from cldrcurrency.locale_utils import region_subtag, split_unicode_extension
from cldrcurrency.registry import PrivateCurrencyRegistry
from cldrcurrency.strings import (
    add_unique_narrow_symbols,
    invert_currency_strings,
    normalize_currency_string,
    remove_duplicate_strings,
)

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    "CurrencyLookup",
    "get_default_lookup",
    "reset_default_lookup",
    # Default-lookup queries
    "currency_for_code",
    "currency_for_code_or_raise",
    "currencies_for_locale",
    "currencies_for_locale_or_raise",
    "currency_strings",
    "currency_strings_or_raise",
    "strings_for_currency",
    "strings_for_currency_or_raise",
    "currency_code_for_string",
    "currency_code_for_string_or_raise",
    "pluralize",
    "pluralize_or_raise",
    "known_currency_codes",
    "known_currencies",
    "is_known_currency_code",
    "known_currency_code",
    "known_currency_code_or_raise",
    "currency_from_locale",
    "currency_from_locale_or_raise",
    "current_currency_from_locale",
    "current_currency_from_locale_or_raise",
    "currency_history_for_locale",
    "currency_history_for_locale_or_raise",
    "register_currency",
    "register_currency_or_raise",
]

logger = logging.getLogger(__name__)

type Errors = tuple[CurrencyError, ...]


@dataclass(frozen=True, slots=True)
class _LocaleEntry:
    """Cached data for one canonical locale."""

    currencies: Mapping[CurrencyCode, Currency]
    pairs: tuple[tuple[str, CurrencyCode], ...]
    strings: Mapping[str, CurrencyCode]


def _unwrap[T](result: tuple[T | None, Errors]) -> T:
    value, errors = result
    if errors:
        raise errors[0]
    assert value is not None  # Type narrowing: no errors means success
    return value


def _placeholder(code: CurrencyCode) -> Currency:
    """Record for a known code that the locale has no display data for."""
    return Currency(
        code=code,
        name=code,
        symbol=code,
        narrow_symbol=code,
        count={PLURAL_CATEGORY_OTHER: code},
    )


class CurrencyLookup:
    """Locale-aware currency queries over a data source and a private registry.

    Attributes:
        _cache: Canonical locale id -> cached locale data, oldest first
        _config: Lookup configuration
        _lock: Serializes cache population
        _registry: Private currency registry
        _source: Locale currency data source

    Example:
        >>> lookup = CurrencyLookup()
        >>> currency, errors = lookup.currency_for_code("aud", "en")
        >>> currency.name
        'Australian Dollar'
        >>> lookup.currency_code_for_string("euros", "en")
        ('EUR', ())
    """

    __slots__ = ("_cache", "_config", "_lock", "_registry", "_source")

    def __init__(
        self,
        source: CurrencyDataSource | None = None,
        *,
        registry: PrivateCurrencyRegistry | None = None,
        config: CurrencyConfig | None = None,
    ) -> None:
        """Initialize a lookup.

        Args:
            source: Locale data source (default: BabelCurrencyData)
            registry: Private currency registry (default: a new registry
                that reserves the source's built-in codes)
            config: Lookup configuration (default: CurrencyConfig())

        Raises:
            BabelImportError: If no source is given and Babel is not installed
        """
        self._source: CurrencyDataSource = source if source is not None else BabelCurrencyData()
        self._registry = (
            registry
            if registry is not None
            else PrivateCurrencyRegistry(self._source.known_currency_codes)
        )
        self._config = config if config is not None else CurrencyConfig()
        self._cache: dict[str, _LocaleEntry] = {}
        self._lock = threading.Lock()

    @property
    def source(self) -> CurrencyDataSource:
        return self._source

    @property
    def registry(self) -> PrivateCurrencyRegistry:
        return self._registry

    @property
    def config(self) -> CurrencyConfig:
        return self._config

    # ------------------------------------------------------------------
    # Locale cache
    # ------------------------------------------------------------------

    def clear_cache(self) -> None:
        """Drop every cached locale."""
        with self._lock:
            self._cache.clear()
        logger.debug("Currency locale cache cleared")

    @property
    def cached_locales(self) -> tuple[str, ...]:
        """Canonical identifiers of the cached locales, oldest first."""
        with self._lock:
            return tuple(self._cache)

    def _resolve_locale(self, locale: str | None) -> tuple[str | None, Errors]:
        requested = self._config.default_locale if locale is None else locale
        try:
            return (self._source.resolve_locale(requested), ())
        except UnknownLocaleError as e:
            return (None, (e,))

    def _entry(self, locale_id: str) -> _LocaleEntry:
        """Return cached locale data, computing it once per locale.

        Uses double-check locking pattern for thread safety.
        """
        entry = self._cache.get(locale_id)
        if entry is not None:
            return entry

        with self._lock:
            entry = self._cache.get(locale_id)
            if entry is not None:
                return entry

            entry = self._build_entry(locale_id)
            while len(self._cache) >= self._config.locale_cache_size:
                evicted = next(iter(self._cache))
                del self._cache[evicted]
                logger.debug("Evicted currency data for locale %s", evicted)
            self._cache[locale_id] = entry
            return entry

    def _build_entry(self, locale_id: str) -> _LocaleEntry:
        currencies = MappingProxyType(dict(self._source.currencies(locale_id)))
        pairs = tuple(invert_currency_strings(currencies))
        resolved = remove_duplicate_strings(pairs, currencies)
        strings = MappingProxyType(add_unique_narrow_symbols(resolved, currencies))
        logger.debug(
            "Computed currency data for locale %s: %d currencies, %d strings",
            locale_id,
            len(currencies),
            len(strings),
        )
        return _LocaleEntry(currencies=currencies, pairs=pairs, strings=strings)

    # ------------------------------------------------------------------
    # Currency records
    # ------------------------------------------------------------------

    def currency_for_code(
        self,
        code_or_currency: str | Currency,
        locale: str | None = None,
    ) -> tuple[Currency | None, Errors]:
        """Return the currency record for a code in a locale.

        A Currency argument is returned unchanged without any lookup.
        Otherwise the code is searched in the locale's currency map, then
        in the private registry. A built-in code without display data in
        the locale resolves to a placeholder record named by its code.

        Args:
            code_or_currency: Currency code (any case) or Currency
            locale: Locale code (default: the configured default locale)

        Returns:
            Tuple of (currency, errors) - currency is None on failure.
        """
        if isinstance(code_or_currency, Currency):
            return (code_or_currency, ())

        code, errors = validate_currency_code(code_or_currency)
        if code is None:
            return (None, errors)

        locale_id, errors = self._resolve_locale(locale)
        if locale_id is None:
            return (None, errors)

        currency = self._entry(locale_id).currencies.get(code) or self._registry.lookup(code)
        if currency is None and code in self._source.known_currency_codes():
            currency = _placeholder(code)
        if currency is None:
            diagnostic = ErrorTemplate.currency_unknown(code, locale_id)
            return (None, (UnknownCurrencyError(diagnostic),))
        return (currency, ())

    def currency_for_code_or_raise(
        self, code_or_currency: str | Currency, locale: str | None = None
    ) -> Currency:
        return _unwrap(self.currency_for_code(code_or_currency, locale))

    def currencies_for_locale(
        self,
        locale: str | None = None,
        only: FilterSpec = CurrencyStatus.ALL,
        exclude: FilterSpec = None,
    ) -> tuple[Mapping[CurrencyCode, Currency] | None, Errors]:
        """Return the locale's currencies, filtered.

        The unfiltered call returns the cached read-only mapping itself.

        Raises:
            ValueError: If a filter atom is not recognized.
        """
        locale_id, errors = self._resolve_locale(locale)
        if locale_id is None:
            return (None, errors)
        currencies = self._entry(locale_id).currencies
        return (self._filter_map(currencies, only, exclude), ())

    def currencies_for_locale_or_raise(
        self,
        locale: str | None = None,
        only: FilterSpec = CurrencyStatus.ALL,
        exclude: FilterSpec = None,
    ) -> Mapping[CurrencyCode, Currency]:
        return _unwrap(self.currencies_for_locale(locale, only, exclude))

    def currency_filter(
        self,
        currencies: CurrencyCollection,
        only: FilterSpec = CurrencyStatus.ALL,
        exclude: FilterSpec = None,
    ) -> CurrencyCollection:
        """Filter currencies, resolving the private tag against this lookup's registry."""
        return currency_filter(currencies, only, exclude, registry=self._registry)

    def _filter_map(
        self,
        currencies: Mapping[CurrencyCode, Currency],
        only: FilterSpec,
        exclude: FilterSpec,
    ) -> Mapping[CurrencyCode, Currency]:
        result = currency_filter(currencies, only, exclude, registry=self._registry)
        assert isinstance(result, Mapping)  # Mapping input yields Mapping output
        return result

    # ------------------------------------------------------------------
    # String index
    # ------------------------------------------------------------------

    def currency_strings(
        self,
        locale: str | None = None,
        only: FilterSpec = CurrencyStatus.ALL,
        exclude: FilterSpec = None,
    ) -> tuple[Mapping[str, CurrencyCode] | None, Errors]:
        """Return the string index of a locale, narrowed to filtered currencies.

        The unfiltered call returns the cached index. A filtered call keeps
        only the cached (string, code) pairs of the selected currencies and
        resolves collisions again among them, so narrowing can make a
        previously ambiguous string resolvable. Private currencies selected
        by the filter contribute their own strings.

        Raises:
            ValueError: If a filter atom is not recognized.
        """
        locale_id, errors = self._resolve_locale(locale)
        if locale_id is None:
            return (None, errors)

        entry = self._entry(locale_id)
        selected = self._filter_map(entry.currencies, only, exclude)
        if selected is entry.currencies:
            return (entry.strings, ())

        pairs = [(text, code) for text, code in entry.pairs if code in selected]
        private = {
            code: currency
            for code, currency in selected.items()
            if code not in entry.currencies
        }
        pairs.extend(invert_currency_strings(private))

        resolved = remove_duplicate_strings(pairs, selected)
        return (MappingProxyType(add_unique_narrow_symbols(resolved, selected)), ())

    def currency_strings_or_raise(
        self,
        locale: str | None = None,
        only: FilterSpec = CurrencyStatus.ALL,
        exclude: FilterSpec = None,
    ) -> Mapping[str, CurrencyCode]:
        return _unwrap(self.currency_strings(locale, only, exclude))

    def strings_for_currency(
        self,
        code_or_currency: str | Currency,
        locale: str | None = None,
        only: FilterSpec = CurrencyStatus.ALL,
        exclude: FilterSpec = None,
    ) -> tuple[list[str] | None, Errors]:
        """Return the sorted index strings that resolve to one currency.

        Exact inverse projection of ``currency_strings`` with the same
        filters. Private currencies appear in the index only when the
        filter selects them, so unfiltered calls return no strings for them.
        """
        currency, errors = self.currency_for_code(code_or_currency, locale)
        if currency is None:
            return (None, errors)

        strings, errors = self.currency_strings(locale, only, exclude)
        if strings is None:
            return (None, errors)
        return (sorted(text for text, code in strings.items() if code == currency.code), ())

    def strings_for_currency_or_raise(
        self,
        code_or_currency: str | Currency,
        locale: str | None = None,
        only: FilterSpec = CurrencyStatus.ALL,
        exclude: FilterSpec = None,
    ) -> list[str]:
        return _unwrap(self.strings_for_currency(code_or_currency, locale, only, exclude))

    def currency_code_for_string(
        self,
        text: str,
        locale: str | None = None,
        only: FilterSpec = CurrencyStatus.ALL,
        exclude: FilterSpec = None,
    ) -> tuple[CurrencyCode | None, Errors]:
        """Resolve a human-typed currency reference to a code.

        Input is matched case-insensitively. When the exact text is not
        indexed, one trailing "." is dropped and the lookup retried, so both
        "Fr." and a narrow symbol such as "kr." resolve.

        Example:
            >>> lookup.currency_code_for_string("US Dollars", "en")
            ('USD', ())
        """
        strings, errors = self.currency_strings(locale, only, exclude)
        if strings is None:
            return (None, errors)

        code = strings.get(text.strip().lower())
        if code is None:
            code = strings.get(normalize_currency_string(text))
        if code is None:
            locale_code = self._config.default_locale if locale is None else locale
            diagnostic = ErrorTemplate.currency_string_unknown(text, locale_code)
            return (None, (UnknownCurrencyError(diagnostic),))
        return (code, ())

    def currency_code_for_string_or_raise(
        self,
        text: str,
        locale: str | None = None,
        only: FilterSpec = CurrencyStatus.ALL,
        exclude: FilterSpec = None,
    ) -> CurrencyCode:
        return _unwrap(self.currency_code_for_string(text, locale, only, exclude))

    def pluralize(
        self,
        number: int | float | Decimal,
        code_or_currency: str | Currency,
        locale: str | None = None,
    ) -> tuple[str | None, Errors]:
        """Return the currency's display name pluralized for number.

        Falls back to the "other" form, then to the currency name.

        Example:
            >>> lookup.pluralize(1, "USD", "en")
            ('US dollar', ())
            >>> lookup.pluralize(3, "USD", "en")
            ('US dollars', ())
        """
        locale_id, errors = self._resolve_locale(locale)
        if locale_id is None:
            return (None, errors)

        currency, errors = self.currency_for_code(code_or_currency, locale_id)
        if currency is None:
            return (None, errors)
        return (currency.display_name(self._source.plural_category(number, locale_id)), ())

    def pluralize_or_raise(
        self,
        number: int | float | Decimal,
        code_or_currency: str | Currency,
        locale: str | None = None,
    ) -> str:
        return _unwrap(self.pluralize(number, code_or_currency, locale))

    # ------------------------------------------------------------------
    # Known codes
    # ------------------------------------------------------------------

    def known_currency_codes(self) -> frozenset[CurrencyCode]:
        """Return every built-in and registered private currency code."""
        return self._source.known_currency_codes() | self._registry.known_codes()

    @deprecated(removal_version="2.0.0", alternative="known_currency_codes()")
    def known_currencies(self) -> frozenset[CurrencyCode]:
        """Return every built-in and registered private currency code."""
        return self.known_currency_codes()

    def is_known_currency_code(self, code: str) -> bool:
        return normalize_currency_code(code) in self.known_currency_codes()

    def known_currency_code(self, code: str) -> tuple[CurrencyCode | None, Errors]:
        """Normalize a code and check that it is built-in or registered."""
        normalized, errors = validate_currency_code(code)
        if normalized is None:
            return (None, errors)
        if normalized not in self.known_currency_codes():
            return (None, (UnknownCurrencyError(ErrorTemplate.currency_unknown(normalized)),))
        return (normalized, ())

    def known_currency_code_or_raise(self, code: str) -> CurrencyCode:
        return _unwrap(self.known_currency_code(code))

    # ------------------------------------------------------------------
    # Locale territories
    # ------------------------------------------------------------------

    def currency_from_locale(self, locale: str | None = None) -> tuple[CurrencyCode | None, Errors]:
        """Return the currency a locale implies.

        A BCP 47 currency extension ("en-AU-u-cu-eur") wins; otherwise the
        locale territory's current tender currency is returned.
        """
        requested = self._config.default_locale if locale is None else locale
        _, keywords = split_unicode_extension(requested)
        if "cu" in keywords:
            return self.known_currency_code(keywords["cu"])
        return self.current_currency_from_locale(requested)

    def currency_from_locale_or_raise(self, locale: str | None = None) -> CurrencyCode:
        return _unwrap(self.currency_from_locale(locale))

    def current_currency_from_locale(
        self, locale: str | None = None
    ) -> tuple[CurrencyCode | None, Errors]:
        """Return the current tender currency of the locale's territory.

        A currency extension in the locale is ignored. When several tender
        currencies are in use the most recently introduced one is returned.
        """
        territory, locale_id, errors = self._territory(locale)
        if territory is None:
            return (None, errors)

        today = date.today()
        active = [
            history
            for history in self._source.territory_currencies(territory)
            if history.tender and history.is_active(today)
        ]
        if not active:
            diagnostic = ErrorTemplate.locale_currency_unknown(str(locale_id), territory)
            return (None, (UnknownCurrencyError(diagnostic),))
        latest = max(active, key=lambda history: history.from_date or date.min)
        return (latest.code, ())

    def current_currency_from_locale_or_raise(self, locale: str | None = None) -> CurrencyCode:
        return _unwrap(self.current_currency_from_locale(locale))

    def currency_history_for_locale(
        self, locale: str | None = None
    ) -> tuple[Mapping[CurrencyCode, CurrencyHistory] | None, Errors]:
        """Return the currencies used in the locale's territory over time.

        A code used in several periods maps to its most recent period.

        Example:
            >>> history, _ = lookup.currency_history_for_locale("de-AT")
            >>> history["ATS"].to_date
            datetime.date(2002, 2, 28)
        """
        territory, _, errors = self._territory(locale)
        if territory is None:
            return (None, errors)
        histories = self._source.territory_currencies(territory)
        return (MappingProxyType({history.code: history for history in histories}), ())

    def currency_history_for_locale_or_raise(
        self, locale: str | None = None
    ) -> Mapping[CurrencyCode, CurrencyHistory]:
        return _unwrap(self.currency_history_for_locale(locale))

    def _territory(self, locale: str | None) -> tuple[str | None, str | None, Errors]:
        """Return the requested region subtag, else the source's territory for the locale."""
        requested = self._config.default_locale if locale is None else locale
        locale_id, errors = self._resolve_locale(requested)
        if locale_id is None:
            return (None, None, errors)
        base, _ = split_unicode_extension(requested)
        territory = region_subtag(base) or self._source.territory_for_locale(locale_id)
        if territory is None:
            diagnostic = ErrorTemplate.locale_territory_unknown(locale_id)
            return (None, locale_id, (UnknownLocaleError(diagnostic),))
        return (territory, locale_id, ())

    # ------------------------------------------------------------------
    # Private currencies
    # ------------------------------------------------------------------

    def register_currency(self, code: str, **options: Any) -> tuple[Currency | None, Errors]:
        """Register a private currency; see PrivateCurrencyRegistry.register()."""
        return self._registry.register(code, **options)

    def register_currency_or_raise(self, code: str, **options: Any) -> Currency:
        return self._registry.register_or_raise(code, **options)


# ============================================================================
# Default lookup
# ============================================================================

_default_lookup: CurrencyLookup | None = None
_default_lock = threading.Lock()


def get_default_lookup() -> CurrencyLookup:
    """Return the process-wide Babel-backed lookup, creating it on first use.

    Raises:
        BabelImportError: If Babel is not installed
    """
    global _default_lookup  # noqa: PLW0603  # pylint: disable=global-statement
    lookup = _default_lookup
    if lookup is not None:
        return lookup

    with _default_lock:
        if _default_lookup is None:
            _default_lookup = CurrencyLookup()
            logger.debug("Created default currency lookup")
        return _default_lookup


def reset_default_lookup() -> None:
    """Discard the default lookup together with its private registry.

    Private currencies are not persisted; after a reset they must be
    registered again.
    """
    global _default_lookup  # noqa: PLW0603  # pylint: disable=global-statement
    with _default_lock:
        _default_lookup = None


def currency_for_code(
    code_or_currency: str | Currency, locale: str | None = None
) -> tuple[Currency | None, Errors]:
    return get_default_lookup().currency_for_code(code_or_currency, locale)


def currency_for_code_or_raise(
    code_or_currency: str | Currency, locale: str | None = None
) -> Currency:
    return get_default_lookup().currency_for_code_or_raise(code_or_currency, locale)


def currencies_for_locale(
    locale: str | None = None,
    only: FilterSpec = CurrencyStatus.ALL,
    exclude: FilterSpec = None,
) -> tuple[Mapping[CurrencyCode, Currency] | None, Errors]:
    return get_default_lookup().currencies_for_locale(locale, only, exclude)


def currencies_for_locale_or_raise(
    locale: str | None = None,
    only: FilterSpec = CurrencyStatus.ALL,
    exclude: FilterSpec = None,
) -> Mapping[CurrencyCode, Currency]:
    return get_default_lookup().currencies_for_locale_or_raise(locale, only, exclude)


def currency_strings(
    locale: str | None = None,
    only: FilterSpec = CurrencyStatus.ALL,
    exclude: FilterSpec = None,
) -> tuple[Mapping[str, CurrencyCode] | None, Errors]:
    return get_default_lookup().currency_strings(locale, only, exclude)


def currency_strings_or_raise(
    locale: str | None = None,
    only: FilterSpec = CurrencyStatus.ALL,
    exclude: FilterSpec = None,
) -> Mapping[str, CurrencyCode]:
    return get_default_lookup().currency_strings_or_raise(locale, only, exclude)


def strings_for_currency(
    code_or_currency: str | Currency,
    locale: str | None = None,
    only: FilterSpec = CurrencyStatus.ALL,
    exclude: FilterSpec = None,
) -> tuple[list[str] | None, Errors]:
    return get_default_lookup().strings_for_currency(code_or_currency, locale, only, exclude)


def strings_for_currency_or_raise(
    code_or_currency: str | Currency,
    locale: str | None = None,
    only: FilterSpec = CurrencyStatus.ALL,
    exclude: FilterSpec = None,
) -> list[str]:
    lookup = get_default_lookup()
    return lookup.strings_for_currency_or_raise(code_or_currency, locale, only, exclude)


def currency_code_for_string(
    text: str,
    locale: str | None = None,
    only: FilterSpec = CurrencyStatus.ALL,
    exclude: FilterSpec = None,
) -> tuple[CurrencyCode | None, Errors]:
    return get_default_lookup().currency_code_for_string(text, locale, only, exclude)


def currency_code_for_string_or_raise(
    text: str,
    locale: str | None = None,
    only: FilterSpec = CurrencyStatus.ALL,
    exclude: FilterSpec = None,
) -> CurrencyCode:
    return get_default_lookup().currency_code_for_string_or_raise(text, locale, only, exclude)


def pluralize(
    number: int | float | Decimal, code_or_currency: str | Currency, locale: str | None = None
) -> tuple[str | None, Errors]:
    return get_default_lookup().pluralize(number, code_or_currency, locale)


def pluralize_or_raise(
    number: int | float | Decimal, code_or_currency: str | Currency, locale: str | None = None
) -> str:
    return get_default_lookup().pluralize_or_raise(number, code_or_currency, locale)


def known_currency_codes() -> frozenset[CurrencyCode]:
    return get_default_lookup().known_currency_codes()


@deprecated(removal_version="2.0.0", alternative="known_currency_codes()")
def known_currencies() -> frozenset[CurrencyCode]:
    """Return every built-in and registered private currency code."""
    return get_default_lookup().known_currency_codes()


def is_known_currency_code(code: str) -> bool:
    return get_default_lookup().is_known_currency_code(code)


def known_currency_code(code: str) -> tuple[CurrencyCode | None, Errors]:
    return get_default_lookup().known_currency_code(code)


def known_currency_code_or_raise(code: str) -> CurrencyCode:
    return get_default_lookup().known_currency_code_or_raise(code)


def currency_from_locale(locale: str | None = None) -> tuple[CurrencyCode | None, Errors]:
    return get_default_lookup().currency_from_locale(locale)


def currency_from_locale_or_raise(locale: str | None = None) -> CurrencyCode:
    return get_default_lookup().currency_from_locale_or_raise(locale)


def current_currency_from_locale(locale: str | None = None) -> tuple[CurrencyCode | None, Errors]:
    return get_default_lookup().current_currency_from_locale(locale)


def current_currency_from_locale_or_raise(locale: str | None = None) -> CurrencyCode:
    return get_default_lookup().current_currency_from_locale_or_raise(locale)


def currency_history_for_locale(
    locale: str | None = None,
) -> tuple[Mapping[CurrencyCode, CurrencyHistory] | None, Errors]:
    return get_default_lookup().currency_history_for_locale(locale)


def currency_history_for_locale_or_raise(
    locale: str | None = None,
) -> Mapping[CurrencyCode, CurrencyHistory]:
    return get_default_lookup().currency_history_for_locale_or_raise(locale)


def register_currency(code: str, **options: Any) -> tuple[Currency | None, Errors]:
    """Register a private currency in the default lookup's registry."""
    return get_default_lookup().register_currency(code, **options)


def register_currency_or_raise(code: str, **options: Any) -> Currency:
    return get_default_lookup().register_currency_or_raise(code, **options)
