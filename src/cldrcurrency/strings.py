"""Currency string index builder.

Builds the reverse index that resolves user-typed currency references
(display names, symbols, codes, plural names) to a currency code.

Construction:
    1. Collect each currency's candidate strings: name, symbol, code and
       plural names, lowercased, with one trailing "." removed.
    2. Invert into (string, code) pairs sorted by string, then code.
    3. Resolve collisions: a string claimed by several codes survives only
       when exactly one claimant is current and all others are historic.
       Any other collision drops the string.
    4. Fold in narrow symbols where the string is not already a key,
       walking codes in ascending order (first writer wins).

The index is a pure function of its input currencies.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from itertools import groupby
from operator import itemgetter
from types import MappingProxyType

from cldrcurrency.constants import TRAILING_ABBREVIATION_MARK
from cldrcurrency.currency import Currency, CurrencyCode
from cldrcurrency.status import is_current, is_historic

__all__ = [
    "add_unique_narrow_symbols",
    "build_currency_strings",
    "candidate_strings",
    "invert_currency_strings",
    "normalize_currency_string",
    "remove_duplicate_strings",
]

logger = logging.getLogger(__name__)

type CurrencyStringIndex = Mapping[str, CurrencyCode]


def normalize_currency_string(text: str) -> str:
    """Lowercase and strip one trailing abbreviation mark.

    Example:
        >>> normalize_currency_string("Fr.")
        'fr'
    """
    text = text.strip().lower()
    if text.endswith(TRAILING_ABBREVIATION_MARK):
        text = text[:-1]
    return text


def candidate_strings(currency: Currency) -> tuple[str, ...]:
    """Return the distinct matchable strings of one currency.

    Order follows name, symbol, code, then plural names. Empty strings are
    dropped.
    """
    raw = [currency.name, currency.symbol, currency.code, *currency.count.values()]
    strings = (normalize_currency_string(text) for text in raw if text)
    return tuple(dict.fromkeys(text for text in strings if text))


def invert_currency_strings(
    currencies: Mapping[CurrencyCode, Currency] | Iterable[Currency],
) -> list[tuple[str, CurrencyCode]]:
    """Flatten currencies into (string, code) pairs sorted by string, then code."""
    values = currencies.values() if isinstance(currencies, Mapping) else currencies
    pairs = {(text, currency.code) for currency in values for text in candidate_strings(currency)}
    return sorted(pairs)


def remove_duplicate_strings(
    pairs: Iterable[tuple[str, CurrencyCode]],
    currencies: Mapping[CurrencyCode, Currency],
    *,
    year: int | None = None,
) -> dict[str, CurrencyCode]:
    """Resolve strings claimed by more than one code.

    Args:
        pairs: (string, code) pairs; need not be sorted
        currencies: Records for every code appearing in ``pairs``
        year: Reference year for the historic test (default: current year)

    Returns:
        Mapping of string to the single code it resolves to.
    """
    index: dict[str, CurrencyCode] = {}
    for text, group in groupby(sorted(set(pairs)), key=itemgetter(0)):
        codes = [code for _, code in group]
        if len(codes) == 1:
            index[text] = codes[0]
            continue

        current = [code for code in codes if is_current(currencies[code])]
        historic = [code for code in codes if is_historic(currencies[code], year=year)]
        if len(current) == 1 and len(historic) == len(codes) - 1:
            index[text] = current[0]
        else:
            logger.debug("Dropping ambiguous currency string %r claimed by %s", text, codes)
    return index


def add_unique_narrow_symbols(
    index: Mapping[str, CurrencyCode],
    currencies: Mapping[CurrencyCode, Currency],
) -> dict[str, CurrencyCode]:
    """Return a copy of index with narrow symbols added where not already keys."""
    result = dict(index)
    for code in sorted(currencies):
        narrow_symbol = currencies[code].narrow_symbol
        if narrow_symbol:
            result.setdefault(narrow_symbol.lower(), code)
    return result


def build_currency_strings(
    currencies: Mapping[CurrencyCode, Currency],
    *,
    year: int | None = None,
) -> CurrencyStringIndex:
    """Build the read-only string index for one locale's currencies.

    Example:
        >>> afa = Currency(code="AFA", name="Afghani", symbol="AFA", to_year=2002)
        >>> afn = Currency(code="AFN", name="Afghani", symbol="؋", iso_digits=2)
        >>> build_currency_strings({"AFA": afa, "AFN": afn})["afghani"]
        'AFN'
    """
    resolved = remove_duplicate_strings(invert_currency_strings(currencies), currencies, year=year)
    index = add_unique_narrow_symbols(resolved, currencies)
    logger.debug(
        "Built currency string index: %d strings, %d currencies", len(index), len(currencies)
    )
    return MappingProxyType(index)
