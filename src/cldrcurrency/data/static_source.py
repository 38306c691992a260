"""In-memory currency data supplied by the integrator.

Useful for applications with a fixed currency set and for tests that must
not depend on the installed CLDR release.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from decimal import Decimal
from types import MappingProxyType

from cldrcurrency.currency import Currency, CurrencyCode
from cldrcurrency.data.protocol import CurrencyHistory
from cldrcurrency.diagnostics import ErrorTemplate, UnknownLocaleError
from cldrcurrency.locale_utils import region_subtag, split_unicode_extension

__all__ = ["StaticCurrencyData"]

type PluralRule = Callable[[int | float | Decimal, str], str]


def _one_other(number: int | float | Decimal, _locale_id: str) -> str:
    return "one" if abs(number) == 1 else "other"


class StaticCurrencyData:
    """CurrencyDataSource over fixed in-memory maps.

    Locale resolution tries the exact identifier, then its language subtag
    ("en_AU" falls back to "en").

    Example:
        >>> usd = Currency(code="USD", name="US Dollar", symbol="$", iso_digits=2)
        >>> source = StaticCurrencyData({"en": [usd]}, territories={"en": "US"})
        >>> source.resolve_locale("en-AU")
        'en'
        >>> source.currencies("en")["USD"].name
        'US Dollar'
    """

    __slots__ = (
        "_currencies",
        "_known_codes",
        "_plural_rule",
        "_territories",
        "_territory_currencies",
    )

    def __init__(
        self,
        currencies: Mapping[str, Mapping[CurrencyCode, Currency] | Iterable[Currency]],
        *,
        known_codes: Iterable[CurrencyCode] | None = None,
        territories: Mapping[str, str] | None = None,
        territory_currencies: Mapping[str, Iterable[CurrencyHistory]] | None = None,
        plural_rule: PluralRule | None = None,
    ) -> None:
        """Initialize from per-locale currency data.

        Args:
            currencies: Locale identifier -> currencies (mapping or iterable)
            known_codes: Built-in codes (default: every code in ``currencies``)
            territories: Locale identifier -> territory code
            territory_currencies: Territory code -> currency periods
            plural_rule: (number, locale_id) -> plural category
                (default: "one" for 1, else "other")
        """
        self._currencies: dict[str, Mapping[CurrencyCode, Currency]] = {}
        for locale_id, records in currencies.items():
            values = records.values() if isinstance(records, Mapping) else records
            self._currencies[locale_id] = MappingProxyType({c.code: c for c in values})

        if known_codes is None:
            known_codes = (code for records in self._currencies.values() for code in records)
        self._known_codes: frozenset[CurrencyCode] = frozenset(known_codes)
        self._territories: dict[str, str] = dict(territories or {})
        self._territory_currencies: dict[str, tuple[CurrencyHistory, ...]] = {
            territory.upper(): tuple(histories)
            for territory, histories in (territory_currencies or {}).items()
        }
        self._plural_rule: PluralRule = plural_rule or _one_other

    def resolve_locale(self, locale: str) -> str:
        """Return the stored identifier matching locale.

        Raises:
            UnknownLocaleError: If neither the locale nor its language has data.
        """
        base, _ = split_unicode_extension(locale) if isinstance(locale, str) else ("", {})
        if base in self._currencies:
            return base
        language = base.split("_", 1)[0]
        if language in self._currencies:
            return language
        raise UnknownLocaleError(ErrorTemplate.locale_unknown(str(locale)))

    def known_locales(self) -> frozenset[str]:
        return frozenset(self._currencies)

    def currencies(self, locale_id: str) -> Mapping[CurrencyCode, Currency]:
        return self._currencies[locale_id]

    def known_currency_codes(self) -> frozenset[CurrencyCode]:
        return self._known_codes

    def plural_category(self, number: int | float | Decimal, locale_id: str) -> str:
        return self._plural_rule(number, locale_id)

    def territory_for_locale(self, locale_id: str) -> str | None:
        """Return the configured territory, else a region subtag of the identifier."""
        if locale_id in self._territories:
            return self._territories[locale_id]
        return region_subtag(locale_id)

    def territory_currencies(self, territory: str) -> tuple[CurrencyHistory, ...]:
        return self._territory_currencies.get(territory.upper(), ())
