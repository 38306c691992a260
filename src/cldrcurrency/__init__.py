"""cldrcurrency - CLDR currency metadata with locale-aware lookup.

Canonical metadata for ISO 4217 currencies and application-defined
private-use currencies (XAA-XZZ), sourced from Unicode CLDR via Babel.

Public API:
    Currency - Immutable currency record
    CurrencyLookup - Locale-aware queries over a data source and a registry
    PrivateCurrencyRegistry - Process-lifetime store of private currencies
    currency_filter - Select currencies by status tags and codes
    build_currency_strings - Build a string -> code index for parsing input

Module-level query functions (currency_for_code, currency_strings, ...)
run against a lazily created Babel-backed CurrencyLookup.

Exceptions:
    CurrencyError - Base exception class
    InvalidCurrencyCodeError - Malformed currency code
    UnknownCurrencyError - Well-formed code or string with no record
    CurrencyAlreadyDefinedError - Duplicate private currency registration
    MissingRequiredOptionError - Private currency without name or digits
    CurrencyNotSavedError - Registry rejected the write
    UnknownLocaleError - Locale without data

Submodules:
    cldrcurrency.status - Status predicates
    cldrcurrency.data - Locale data sources (Babel, static)
    cldrcurrency.diagnostics - Error types, templates and formatter
"""

from .config import CurrencyConfig
from .currency import Currency, CurrencyCode
from .data import BabelCurrencyData, CurrencyDataSource, CurrencyHistory, StaticCurrencyData
from .diagnostics import (
    CurrencyAlreadyDefinedError,
    CurrencyError,
    CurrencyNotSavedError,
    InvalidCurrencyCodeError,
    MissingRequiredOptionError,
    UnknownCurrencyError,
    UnknownLocaleError,
)
from .enums import CurrencyStatus
from .filtering import currency_filter
from .lookup import (
    CurrencyLookup,
    currencies_for_locale,
    currencies_for_locale_or_raise,
    currency_code_for_string,
    currency_code_for_string_or_raise,
    currency_for_code,
    currency_for_code_or_raise,
    currency_from_locale,
    currency_from_locale_or_raise,
    currency_history_for_locale,
    currency_history_for_locale_or_raise,
    currency_strings,
    currency_strings_or_raise,
    current_currency_from_locale,
    current_currency_from_locale_or_raise,
    get_default_lookup,
    is_known_currency_code,
    known_currencies,
    known_currency_code,
    known_currency_code_or_raise,
    known_currency_codes,
    pluralize,
    pluralize_or_raise,
    register_currency,
    register_currency_or_raise,
    reset_default_lookup,
    strings_for_currency,
    strings_for_currency_or_raise,
)
from .registry import PrivateCurrencyRegistry
from .strings import build_currency_strings

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError  # noqa: E402
from importlib.metadata import version as _get_version  # noqa: E402

try:
    __version__ = _get_version("cldrcurrency")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "BabelCurrencyData",
    "Currency",
    "CurrencyAlreadyDefinedError",
    "CurrencyCode",
    "CurrencyConfig",
    "CurrencyDataSource",
    "CurrencyError",
    "CurrencyHistory",
    "CurrencyLookup",
    "CurrencyNotSavedError",
    "CurrencyStatus",
    "InvalidCurrencyCodeError",
    "MissingRequiredOptionError",
    "PrivateCurrencyRegistry",
    "StaticCurrencyData",
    "UnknownCurrencyError",
    "UnknownLocaleError",
    "__version__",
    "build_currency_strings",
    "currencies_for_locale",
    "currencies_for_locale_or_raise",
    "currency_code_for_string",
    "currency_code_for_string_or_raise",
    "currency_filter",
    "currency_for_code",
    "currency_for_code_or_raise",
    "currency_from_locale",
    "currency_from_locale_or_raise",
    "currency_history_for_locale",
    "currency_history_for_locale_or_raise",
    "currency_strings",
    "currency_strings_or_raise",
    "current_currency_from_locale",
    "current_currency_from_locale_or_raise",
    "get_default_lookup",
    "is_known_currency_code",
    "known_currencies",
    "known_currency_code",
    "known_currency_code_or_raise",
    "known_currency_codes",
    "pluralize",
    "pluralize_or_raise",
    "register_currency",
    "register_currency_or_raise",
    "reset_default_lookup",
    "strings_for_currency",
    "strings_for_currency_or_raise",
]
