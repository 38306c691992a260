"""Private currency registry.

Holds application-defined currencies (ISO 4217 private-use codes XAA-XZZ)
created at runtime. Entries live for the lifetime of the registry object:
nothing is persisted, so applications that need private currencies must
re-register them on every process start.

Concurrency:
    Reads are lock-free. The registry publishes an immutable snapshot
    (MappingProxyType) that writers replace wholesale under a lock, so a
    reader sees each record either completely or not at all.
    Writes are insert-if-absent: an existing code can never be overwritten.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Collection, Mapping
from types import MappingProxyType
from typing import Any

from cldrcurrency.constants import PLURAL_CATEGORY_OTHER
from cldrcurrency.currency import Currency, CurrencyCode, make_private_currency_code
from cldrcurrency.diagnostics import (
    CurrencyAlreadyDefinedError,
    CurrencyError,
    CurrencyNotSavedError,
    ErrorTemplate,
    MissingRequiredOptionError,
)

__all__ = ["PrivateCurrencyRegistry"]

logger = logging.getLogger(__name__)

_REQUIRED_OPTIONS: tuple[str, ...] = ("name", "digits")

_OPTIONAL_OPTIONS: frozenset[str] = frozenset({
    "symbol",
    "narrow_symbol",
    "rounding",
    "round_nearest",
    "alt_code",
    "cash_digits",
    "cash_rounding",
    "cash_rounding_nearest",
    "tender",
    "count",
})

# Option aliases kept for callers used to "round to nearest" naming.
_OPTION_ALIASES: dict[str, str] = {
    "round_nearest": "rounding",
    "cash_rounding_nearest": "cash_rounding",
}

_INTEGER_OPTIONS: frozenset[str] = frozenset({"digits", "rounding", "cash_digits", "cash_rounding"})


class PrivateCurrencyRegistry:
    """Process-lifetime store of private-use currencies.

    Attributes:
        _builtin_codes: Codes that can never be registered (built-in ISO
            4217 data), or a zero-argument callable returning them
        _closed: Whether writes are rejected
        _currencies: Immutable snapshot of registered currencies
        _lock: Serializes writers

    Example:
        >>> registry = PrivateCurrencyRegistry()
        >>> currency, errors = registry.register("xaz", name="Test Coin", digits=2)
        >>> currency.code, currency.symbol, dict(currency.count)
        ('XAZ', 'XAZ', {'other': 'Test Coin'})
        >>> registry.lookup("XAZ") is currency
        True
    """

    __slots__ = ("_builtin_codes", "_closed", "_currencies", "_lock")

    def __init__(
        self,
        builtin_codes: Collection[str] | Callable[[], Collection[str]] = frozenset(),
    ) -> None:
        """Initialize an empty, open registry.

        Args:
            builtin_codes: Codes reserved by built-in currency data. A
                callable is evaluated on every registration, which lets the
                built-in data load lazily.
        """
        self._builtin_codes = builtin_codes
        self._closed: bool = False
        self._currencies: Mapping[CurrencyCode, Currency] = MappingProxyType({})
        self._lock: threading.Lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._currencies)

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and code.strip().upper() in self._currencies

    @property
    def closed(self) -> bool:
        """Whether the registry rejects writes."""
        return self._closed

    def close(self) -> None:
        """Reject all further writes with CurrencyNotSavedError.

        Registered currencies remain readable.
        """
        with self._lock:
            self._closed = True
        logger.debug("Private currency registry closed with %d currencies", len(self))

    def register(
        self,
        code: str,
        **options: Any,
    ) -> tuple[Currency | None, tuple[CurrencyError, ...]]:
        """Create a private currency and make it visible to all readers.

        Validation runs in this order and stops at the first failure:

        1. The code must be a private-use code (X followed by 2 letters).
        2. The code must not be a built-in code or already registered.
        3. ``name`` and ``digits`` must be supplied.
        4. The record is built from defaults plus the supplied options.
        5. The record is inserted if absent.

        Args:
            code: Private-use currency code, any case
            **options: ``name`` and ``digits`` (required); ``symbol``,
                ``narrow_symbol``, ``rounding`` (alias ``round_nearest``),
                ``alt_code``, ``cash_digits``, ``cash_rounding`` (alias
                ``cash_rounding_nearest``), ``tender``, ``count``

        Returns:
            Tuple of (currency, errors) - currency is None on failure.

        Raises:
            TypeError: If an unknown option name is passed, or if ``digits``,
                ``rounding``, ``cash_digits`` or ``cash_rounding`` is not an int.
            ValueError: If digits or cash_digits is negative.
        """
        unknown = set(options) - _OPTIONAL_OPTIONS - set(_REQUIRED_OPTIONS)
        if unknown:
            msg = f"Unknown private currency options: {', '.join(sorted(unknown))}"
            raise TypeError(msg)

        currency_code, errors = make_private_currency_code(code)
        if currency_code is None:
            logger.warning("Rejected private currency %r: invalid code", code)
            return (None, errors)

        if currency_code in self._reserved_codes() or currency_code in self._currencies:
            logger.warning("Rejected private currency %s: already defined", currency_code)
            diagnostic = ErrorTemplate.currency_already_defined(currency_code)
            return (None, (CurrencyAlreadyDefinedError(diagnostic),))

        missing = tuple(name for name in _REQUIRED_OPTIONS if options.get(name) is None)
        if missing:
            logger.warning(
                "Rejected private currency %s: missing options %s", currency_code, missing
            )
            diagnostic = ErrorTemplate.currency_option_missing(currency_code, missing)
            error = MissingRequiredOptionError(
                diagnostic, missing=missing, currency_code=currency_code
            )
            return (None, (error,))

        _check_integer_options(options)
        currency = _build_currency(currency_code, options)
        return self._insert_if_absent(currency)

    def register_or_raise(self, code: str, **options: Any) -> Currency:
        """Register a private currency, raising the first error on failure.

        Raises:
            CurrencyError: Any error register() would return.
        """
        currency, errors = self.register(code, **options)
        if errors:
            raise errors[0]
        assert currency is not None  # Type narrowing: no errors means success
        return currency

    def lookup(self, code: str) -> Currency | None:
        """Return the registered currency for code, or None."""
        return self._currencies.get(str(code).strip().upper())

    def all(self) -> Mapping[CurrencyCode, Currency]:
        """Return an immutable snapshot of all registered currencies."""
        return self._currencies

    def known_codes(self) -> frozenset[CurrencyCode]:
        """Return the set of registered codes."""
        return frozenset(self._currencies)

    def _reserved_codes(self) -> Collection[str]:
        if callable(self._builtin_codes):
            return self._builtin_codes()
        return self._builtin_codes

    def _insert_if_absent(
        self, currency: Currency
    ) -> tuple[Currency | None, tuple[CurrencyError, ...]]:
        with self._lock:
            if self._closed:
                error: CurrencyError = CurrencyNotSavedError(
                    ErrorTemplate.currency_not_saved(currency.code)
                )
            elif currency.code in self._currencies:
                # Lost a race against another writer for the same code
                error = CurrencyAlreadyDefinedError(
                    ErrorTemplate.currency_already_defined(currency.code)
                )
            else:
                updated = dict(self._currencies)
                updated[currency.code] = currency
                self._currencies = MappingProxyType(updated)
                logger.info("Registered private currency %s (%s)", currency.code, currency.name)
                return (currency, ())

        logger.warning("Private currency %s not saved: %s", currency.code, type(error).__name__)
        return (None, (error,))


def _build_currency(code: CurrencyCode, options: Mapping[str, Any]) -> Currency:
    resolved = {_OPTION_ALIASES.get(key, key): value for key, value in options.items()}
    name: str = resolved["name"]
    digits: int = resolved["digits"]
    rounding = resolved.get("rounding", 0)

    return Currency(
        code=code,
        name=name,
        symbol=resolved.get("symbol") or code,
        narrow_symbol=resolved.get("narrow_symbol"),
        digits=digits,
        rounding=rounding,
        cash_digits=resolved.get("cash_digits", digits),
        cash_rounding=resolved.get("cash_rounding", rounding),
        # Private currencies are ISO-shaped and in use from registration on
        iso_digits=digits,
        tender=bool(resolved.get("tender", False)),
        count=resolved.get("count") or {PLURAL_CATEGORY_OTHER: name},
        alt_code=resolved.get("alt_code") or code,
    )


def _check_integer_options(options: Mapping[str, Any]) -> None:
    for key, value in options.items():
        name = _OPTION_ALIASES.get(key, key)
        if name in _INTEGER_OPTIONS and (isinstance(value, bool) or not isinstance(value, int)):
            msg = f"Private currency option {key!r} must be an int, got {type(value).__name__}"
            raise TypeError(msg)
