"""Enumerations for cldrcurrency type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class CurrencyStatus(StrEnum):
    """Status tag accepted by the currency filter.

    StrEnum provides automatic string conversion: str(CurrencyStatus.CURRENT) == "current"
    """

    ALL = "all"
    """Every currency in the input collection."""

    CURRENT = "current"
    """Recognized by ISO 4217 and without an end year."""

    HISTORIC = "historic"
    """Not recognized by ISO 4217, or with an end year in the past."""

    TENDER = "tender"
    """Legal tender."""

    ANNOTATED = "annotated"
    """Display name carries a parenthesized qualifier, e.g. "US Dollar (Next day)"."""

    UNANNOTATED = "unannotated"
    """Display name without a parenthesized qualifier."""

    PRIVATE = "private"
    """Every currency held by the private currency registry."""


__all__ = [
    "CurrencyStatus",
]
