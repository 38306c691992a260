"""Locale data source interface.

A data source supplies the per-locale currency maps and the supplemental
territory data that CurrencyLookup builds on. Implementations must treat
every returned mapping as immutable.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Protocol, runtime_checkable

from cldrcurrency.currency import Currency, CurrencyCode

__all__ = ["CurrencyDataSource", "CurrencyHistory"]


@dataclass(frozen=True, slots=True)
class CurrencyHistory:
    """One period of a currency's use in a territory.

    Attributes:
        code: ISO 4217 currency code
        from_date: First day of use, or None if unknown
        to_date: Last day of use, or None if still in use
        tender: True if legal tender during the period
    """

    code: CurrencyCode
    from_date: date | None = None
    to_date: date | None = None
    tender: bool = True

    def is_active(self, on: date) -> bool:
        """Check whether the period covers the given day."""
        started = self.from_date is None or self.from_date <= on
        return started and (self.to_date is None or self.to_date >= on)


@runtime_checkable
class CurrencyDataSource(Protocol):
    """Supplier of locale currency data.

    Locale identifiers passed to every method except ``resolve_locale`` are
    canonical identifiers previously returned by ``resolve_locale``.
    """

    def resolve_locale(self, locale: str) -> str:
        """Return the canonical identifier for a locale code.

        BCP 47 and POSIX separators are accepted; a unicode ("-u-")
        extension is ignored.

        Raises:
            UnknownLocaleError: If the locale has no data.
        """
        ...

    def known_locales(self) -> frozenset[str]:
        """Return every locale identifier with currency data."""
        ...

    def currencies(self, locale_id: str) -> Mapping[CurrencyCode, Currency]:
        """Return the locale's currency map keyed by code."""
        ...

    def known_currency_codes(self) -> frozenset[CurrencyCode]:
        """Return every built-in currency code."""
        ...

    def plural_category(self, number: int | float | Decimal, locale_id: str) -> str:
        """Return the CLDR plural category for number in the locale."""
        ...

    def territory_for_locale(self, locale_id: str) -> str | None:
        """Return the locale's territory, or its likely territory, or None."""
        ...

    def territory_currencies(self, territory: str) -> tuple[CurrencyHistory, ...]:
        """Return the territory's currency periods, oldest first."""
        ...
