"""Plural category selection for currency display names.

``Currency.count`` is keyed by CLDR plural category; this picks the
category for an amount using the locale's CLDR plural rules via Babel.

Python 3.13+. Depends on Babel for CLDR data.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

from decimal import Decimal

from cldrcurrency.constants import PLURAL_CATEGORY_OTHER
from cldrcurrency.core.babel_compat import get_unknown_locale_error
from cldrcurrency.locale_utils import get_babel_locale

__all__ = ["select_plural_category"]


def select_plural_category(n: int | float | Decimal, locale: str) -> str:
    """Return the CLDR plural category of n in locale.

    Locales Babel cannot parse get the English one/other rule.

    Examples:
        >>> select_plural_category(1, "en_US")
        'one'
        >>> select_plural_category(5, "ru-RU")
        'many'

    Raises:
        BabelImportError: If Babel is not installed
    """
    try:
        locale_obj = get_babel_locale(locale)
    except (get_unknown_locale_error(), ValueError):
        return "one" if abs(n) == 1 else PLURAL_CATEGORY_OTHER
    return locale_obj.plural_form(n)
