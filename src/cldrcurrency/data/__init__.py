"""Locale currency data sources.

Exports:
    CurrencyDataSource: Protocol every data source implements
    CurrencyHistory: One period of a currency's use in a territory
    BabelCurrencyData: CLDR data read through Babel (requires the babel extra)
    StaticCurrencyData: Integrator-supplied in-memory data

Python 3.13+.
"""

from .babel_source import BabelCurrencyData
from .protocol import CurrencyDataSource, CurrencyHistory
from .static_source import StaticCurrencyData

__all__ = [
    "BabelCurrencyData",
    "CurrencyDataSource",
    "CurrencyHistory",
    "StaticCurrencyData",
]
