"""Hypothesis strategies for cldrcurrency property-based testing.

Usage:
    from tests.strategies import currencies, currency_maps, filter_specs
"""

from .currency import (
    REFERENCE_YEAR,
    currencies,
    currency_maps,
    filter_specs,
    iso_codes,
    private_codes,
    status_atoms,
)

__all__ = [
    "REFERENCE_YEAR",
    "currencies",
    "currency_maps",
    "filter_specs",
    "iso_codes",
    "private_codes",
    "status_atoms",
]
