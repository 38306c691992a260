"""Currency status classification.

Pure, total predicates over a Currency. The year-dependent predicates
(is_current, is_historic) evaluate against the current calendar year unless
a year is passed; their results can change across a year boundary.

A currency is never both current and historic. A currency whose end year
is this year or later is neither.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from cldrcurrency.currency import is_private_code_shape

if TYPE_CHECKING:
    from cldrcurrency.currency import Currency

__all__ = [
    "is_annotated",
    "is_current",
    "is_historic",
    "is_private",
    "is_tender",
    "is_unannotated",
]


def is_historic(currency: Currency, *, year: int | None = None) -> bool:
    """Check if currency is historic.

    True when ISO 4217 does not (or no longer) recognize the code, or when
    its end year is before ``year``.

    Args:
        currency: Currency to classify
        year: Reference year (default: current calendar year)
    """
    if currency.iso_digits is None:
        return True
    if currency.to_year is None:
        return False
    reference = date.today().year if year is None else year
    return currency.to_year < reference


def is_current(currency: Currency) -> bool:
    """Check if currency is a recognized ISO 4217 currency without an end year."""
    return currency.iso_digits is not None and currency.to_year is None


def is_tender(currency: Currency) -> bool:
    return currency.tender


def is_annotated(currency: Currency) -> bool:
    """Check if the display name carries a parenthesized annotation.

    Annotated names usually denote financial instruments rather than
    everyday tender, e.g. "US Dollar (Next day)".
    """
    return "(" in currency.name


def is_unannotated(currency: Currency) -> bool:
    return not is_annotated(currency)


def is_private(currency: Currency) -> bool:
    """Check if the code is in the ISO 4217 private-use range (X followed by 2 letters)."""
    return is_private_code_shape(currency.code)
