"""CLDR currency data read through Babel.

Builds Currency records from three CLDR sources:
    - Locale data: display names, symbols and plural names per locale
    - ``currency_fractions``: digits and rounding per code
    - ``territory_currencies``: periods of use and tender status

A code with an open-ended territory period is treated as an active ISO
4217 currency (``iso_digits`` set). Codes that no territory uses today
carry ``iso_digits=None`` and classify as historic.

Babel does not ship narrow currency symbols, so ``narrow_symbol`` is None
for every record built here.

Thread-safe. Supplemental tables load lazily on first use.

Python 3.13+. Depends on Babel for CLDR data.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from datetime import date
from decimal import Decimal
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from cldrcurrency.constants import PLURAL_CATEGORY_OTHER
from cldrcurrency.core.babel_compat import (
    get_babel_global,
    get_locale_identifiers,
    get_unknown_locale_error,
    require_babel,
)
from cldrcurrency.currency import Currency, CurrencyCode, is_iso_code_shape
from cldrcurrency.data.protocol import CurrencyHistory
from cldrcurrency.diagnostics import ErrorTemplate, UnknownLocaleError
from cldrcurrency.locale_utils import get_babel_locale, split_unicode_extension
from cldrcurrency.plural_rules import select_plural_category

if TYPE_CHECKING:
    from babel import Locale

__all__ = ["BabelCurrencyData"]

logger = logging.getLogger(__name__)

# Fallback entry of the currency_fractions table
_DEFAULT_FRACTIONS_KEY = "DEFAULT"


def _to_date(value: tuple[int, ...] | None) -> date | None:
    return date(*value) if value else None


class BabelCurrencyData:
    """CurrencyDataSource backed by Babel's CLDR data.

    Attributes:
        _loaded: Whether the supplemental tables have been loaded
        _lock: Threading lock for thread-safe initialization
        _fractions: Code -> (digits, rounding, cash_digits, cash_rounding)
        _periods: Code -> (from_year, to_year, tender, active)
        _known_codes: Every ISO-shaped code Babel knows
    """

    __slots__ = ("_fractions", "_known_codes", "_loaded", "_lock", "_periods")

    def __init__(self) -> None:
        """Initialize with empty supplemental state (lazy-loaded).

        Raises:
            BabelImportError: If Babel is not installed
        """
        require_babel("BabelCurrencyData")
        self._loaded: bool = False
        self._lock: threading.Lock = threading.Lock()
        self._fractions: dict[str, tuple[int, int, int, int]] = {}
        self._periods: dict[str, tuple[int | None, int | None, bool, bool]] = {}
        self._known_codes: frozenset[CurrencyCode] = frozenset()

    def ensure_loaded(self) -> None:
        """Load the supplemental tables (thread-safe, idempotent).

        Uses double-check locking pattern for thread safety.
        """
        if self._loaded:
            return

        with self._lock:
            if self._loaded:
                return  # type: ignore[unreachable]

            self._fractions = _load_fractions(get_babel_global("currency_fractions"))
            self._periods = _load_periods(get_babel_global("territory_currencies"))
            known = set(get_babel_global("all_currencies")) | set(self._periods)
            self._known_codes = frozenset(code for code in known if is_iso_code_shape(code))
            self._loaded = True
            logger.debug(
                "Loaded CLDR supplemental currency data: %d codes, %d with territory periods",
                len(self._known_codes),
                len(self._periods),
            )

    def resolve_locale(self, locale: str) -> str:
        """Return Babel's canonical identifier for a locale code.

        Raises:
            UnknownLocaleError: If Babel has no data for the locale.
        """
        base, _ = split_unicode_extension(locale)
        unknown_locale_error = get_unknown_locale_error()
        try:
            locale_obj = get_babel_locale(base)
        except (unknown_locale_error, ValueError, TypeError) as e:
            raise UnknownLocaleError(ErrorTemplate.locale_unknown(locale)) from e
        return str(locale_obj)

    def known_locales(self) -> frozenset[str]:
        return frozenset(get_locale_identifiers())

    def known_currency_codes(self) -> frozenset[CurrencyCode]:
        self.ensure_loaded()
        return self._known_codes

    def currencies(self, locale_id: str) -> Mapping[CurrencyCode, Currency]:
        """Build the currency map for one locale.

        Every ISO-shaped code with a display name in the locale gets a
        record. Missing symbols fall back to the code.
        """
        self.ensure_loaded()
        locale_obj = get_babel_locale(locale_id)
        names = locale_obj.currencies
        symbols = locale_obj.currency_symbols
        plural_names = _plural_names(locale_obj)

        result: dict[CurrencyCode, Currency] = {}
        for code, name in names.items():
            if not is_iso_code_shape(code):
                continue
            result[code] = self._build_currency(
                code,
                name=name,
                symbol=symbols.get(code) or code,
                count=dict(plural_names.get(code) or {PLURAL_CATEGORY_OTHER: name}),
            )

        logger.debug("Built %d currencies for locale %s", len(result), locale_id)
        return MappingProxyType(result)

    def plural_category(self, number: int | float | Decimal, locale_id: str) -> str:
        return select_plural_category(number, locale_id)

    def territory_for_locale(self, locale_id: str) -> str | None:
        """Return the locale's territory, falling back to CLDR likely subtags.

        Example:
            >>> BabelCurrencyData().territory_for_locale("de")
            'DE'
        """
        locale_obj = get_babel_locale(locale_id)
        if locale_obj.territory:
            return str(locale_obj.territory)

        likely: str | None = get_babel_global("likely_subtags").get(locale_obj.language)
        if likely is None:
            return None
        for subtag in likely.split("_")[1:]:
            if (len(subtag) == 2 and subtag.isalpha() and subtag.isupper()) or (
                len(subtag) == 3 and subtag.isdigit()
            ):
                return subtag
        return None

    def territory_currencies(self, territory: str) -> tuple[CurrencyHistory, ...]:
        entries = get_babel_global("territory_currencies").get(territory.upper(), ())
        return tuple(
            CurrencyHistory(
                code=code,
                from_date=_to_date(start),
                to_date=_to_date(end),
                tender=bool(tender),
            )
            for code, start, end, tender in entries
        )

    def _build_currency(
        self,
        code: CurrencyCode,
        *,
        name: str,
        symbol: str,
        count: dict[str, str],
    ) -> Currency:
        digits, rounding, cash_digits, cash_rounding = self._fractions.get(
            code, self._fractions[_DEFAULT_FRACTIONS_KEY]
        )
        from_year, to_year, tender, active = self._periods.get(code, (None, None, False, False))
        return Currency(
            code=code,
            name=name,
            symbol=symbol,
            digits=digits,
            rounding=rounding,
            cash_digits=cash_digits,
            cash_rounding=cash_rounding,
            iso_digits=digits if active else None,
            tender=tender,
            count=count,
            from_year=from_year,
            to_year=to_year,
        )


def _plural_names(locale_obj: Locale) -> Mapping[str, Any]:
    # Babel exposes plural currency names only through the raw locale data
    return locale_obj._data["currency_names_plural"]  # noqa: SLF001


def _load_fractions(table: Mapping[str, tuple[int, ...]]) -> dict[str, tuple[int, int, int, int]]:
    """Normalize fraction entries to (digits, rounding, cash_digits, cash_rounding).

    Entries without cash values reuse the standard values.
    """
    fractions: dict[str, tuple[int, int, int, int]] = {}
    for code, entry in table.items():
        digits, rounding = entry[0], entry[1]
        if len(entry) >= 4:
            fractions[code] = (digits, rounding, entry[2], entry[3])
        else:
            fractions[code] = (digits, rounding, digits, rounding)
    fractions.setdefault(_DEFAULT_FRACTIONS_KEY, (2, 0, 2, 0))
    return fractions


def _load_periods(
    table: Mapping[str, list[tuple[str, Any, Any, bool]]],
) -> dict[str, tuple[int | None, int | None, bool, bool]]:
    """Fold every territory's periods into one span per code.

    Returns:
        Code -> (from_year, to_year, tender, active). ``to_year`` is None
        and ``active`` True when any territory still uses the code.
    """
    starts: dict[str, list[int]] = {}
    ends: dict[str, list[int]] = {}
    tender: dict[str, bool] = {}
    active: set[str] = set()

    for entries in table.values():
        for code, start, end, is_tender in entries:
            starts.setdefault(code, [])
            ends.setdefault(code, [])
            if start:
                starts[code].append(start[0])
            if end:
                ends[code].append(end[0])
            else:
                active.add(code)
            tender[code] = tender.get(code, False) or bool(is_tender)

    periods: dict[str, tuple[int | None, int | None, bool, bool]] = {}
    for code, code_starts in starts.items():
        code_ends = ends[code]
        is_active = code in active
        periods[code] = (
            min(code_starts) if code_starts else None,
            None if is_active or not code_ends else max(code_ends),
            tender[code],
            is_active,
        )
    return periods
