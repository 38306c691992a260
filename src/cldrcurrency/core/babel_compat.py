"""Lazy access to the optional Babel dependency.

cldrcurrency installs in two flavours:
    - Core: `pip install cldrcurrency` (registry, filters, string index and
      lookups over integrator-supplied currency data)
    - CLDR: `pip install cldrcurrency[babel]` (built-in CLDR currency data)

Every Babel import in the package goes through this module, so importing
cldrcurrency never imports Babel and a missing Babel surfaces as one
BabelImportError naming the feature that needed it.

Python 3.13+.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from babel import Locale
    from babel.core import UnknownLocaleError as BabelUnknownLocaleError

__all__ = [
    "BabelImportError",
    "get_babel_global",
    "get_locale_class",
    "get_locale_identifiers",
    "get_unknown_locale_error",
    "is_babel_available",
    "require_babel",
]


@lru_cache(maxsize=1)
def _check_babel_available() -> bool:
    try:
        import babel  # noqa: F401, PLC0415  # pylint: disable=unused-import
    except ImportError:
        return False
    return True


class BabelImportError(ImportError):
    """A feature backed by CLDR data was used without Babel installed.

    Attributes:
        feature: Name of the class or function that needed Babel
    """

    def __init__(self, feature: str) -> None:
        super().__init__(
            f"{feature} requires Babel for CLDR currency data. "
            "Install with: pip install cldrcurrency[babel]"
        )
        self.feature = feature


def is_babel_available() -> bool:
    """Return True if Babel can be imported (checked once per process)."""
    return _check_babel_available()


def require_babel(feature: str) -> None:
    """Raise BabelImportError naming feature unless Babel is importable."""
    if not _check_babel_available():
        raise BabelImportError(feature)


def get_locale_class() -> type[Locale]:
    """Return ``babel.Locale``.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_locale_class")
    from babel import Locale  # noqa: PLC0415

    return Locale


def get_unknown_locale_error() -> type[BabelUnknownLocaleError]:
    """Return Babel's UnknownLocaleError class, for use in except clauses.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_unknown_locale_error")
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    return UnknownLocaleError


def get_babel_global(key: str) -> Any:
    """Get a table from Babel's CLDR supplemental data.

    Args:
        key: Table name, e.g. "currency_fractions" or "territory_currencies"

    Raises:
        BabelImportError: If Babel is not installed
        KeyError: If the table does not exist
    """
    require_babel("get_babel_global")
    from babel.core import get_global  # noqa: PLC0415

    return get_global(key)  # type: ignore[arg-type]


def get_locale_identifiers() -> list[str]:
    """Get the identifiers of every locale Babel ships data for.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_locale_identifiers")
    from babel.localedata import locale_identifiers  # noqa: PLC0415

    return locale_identifiers()
