"""Currency record and currency code helpers.

Currency is the immutable value type describing one currency's metadata in
one locale. Records are produced by a locale data source (built-in ISO 4217
currencies) or by the private currency registry (application currencies).

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TypeIs

from cldrcurrency.constants import (
    ISO_CURRENCY_CODE_PATTERN,
    PLURAL_CATEGORY_OTHER,
    PRIVATE_CURRENCY_CODE_PATTERN,
)
from cldrcurrency.diagnostics import CurrencyError, ErrorTemplate, InvalidCurrencyCodeError

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Type aliases
    "CurrencyCode",
    # Data classes
    "Currency",
    # Code helpers
    "normalize_currency_code",
    "is_iso_code_shape",
    "is_private_code_shape",
    "validate_currency_code",
    "make_private_currency_code",
]

type CurrencyCode = str
"""ISO 4217 currency code (e.g., 'USD', 'EUR') or private-use code (e.g., 'XAZ')."""


@dataclass(frozen=True, slots=True)
class Currency:
    """Currency metadata for one locale.

    Immutable, thread-safe, hashable. Safe for use as dict key or set member.
    The hash ignores ``count``; equality compares every field.

    Attributes:
        code: ISO 4217 code, or private-use code matching ``X[A-Z]{2}``.
        name: Localized display name; may carry an annotation, e.g.
            "US Dollar (Next day)".
        symbol: Localized symbol (e.g., 'A$').
        narrow_symbol: Localized narrow symbol (e.g., '$'), or None.
        digits: Decimal precision for standard amounts.
        rounding: Rounding increment for standard amounts (0 = none).
        cash_digits: Decimal precision for cash amounts.
        cash_rounding: Rounding increment for cash amounts.
        iso_digits: Precision declared by ISO 4217; None when the code is
            not a currently recognized ISO currency.
        tender: True if legal tender.
        count: Plural category -> localized plural display name.
        from_year: First year of use, or None if unknown.
        to_year: Last year of use, or None if still in use.
        alt_code: Application-chosen alternate identifier (e.g. a crypto
            ticker); defaults to ``code``.
    """

    code: CurrencyCode
    name: str
    symbol: str
    narrow_symbol: str | None = None
    digits: int = 0
    rounding: int | float = 0
    cash_digits: int = 0
    cash_rounding: int | float = 0
    iso_digits: int | None = None
    tender: bool = False
    count: Mapping[str, str] = field(default_factory=dict, hash=False)
    from_year: int | None = None
    to_year: int | None = None
    alt_code: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants and freeze ``count``.

        Raises:
            ValueError: If code is not 3 uppercase ASCII letters, or if
                digits or cash_digits is negative.
        """
        if not is_iso_code_shape(self.code):
            msg = f"Currency.code must be 3 uppercase ASCII letters, got {self.code!r}"
            raise ValueError(msg)
        if self.digits < 0:
            msg = f"Currency.digits must be >= 0, got {self.digits}"
            raise ValueError(msg)
        if self.cash_digits < 0:
            msg = f"Currency.cash_digits must be >= 0, got {self.cash_digits}"
            raise ValueError(msg)
        if self.alt_code is None:
            object.__setattr__(self, "alt_code", self.code)
        if not isinstance(self.count, MappingProxyType):
            object.__setattr__(self, "count", MappingProxyType(dict(self.count)))

    def display_name(self, category: str) -> str:
        """Return the plural display name for a CLDR plural category.

        Falls back to the "other" form, then to ``name``.
        """
        if category in self.count:
            return self.count[category]
        return self.count.get(PLURAL_CATEGORY_OTHER, self.name)


def normalize_currency_code(code: str) -> str:
    """Normalize a currency code to its canonical uppercase form.

    Accepts plain strings and StrEnum members; surrounding whitespace is
    removed.

    Example:
        >>> normalize_currency_code(" aud ")
        'AUD'
    """
    return str(code).strip().upper()


def is_iso_code_shape(value: object) -> TypeIs[CurrencyCode]:
    """Check if value has the shape of an ISO 4217 code (3 uppercase letters)."""
    return isinstance(value, str) and ISO_CURRENCY_CODE_PATTERN.fullmatch(value) is not None


def is_private_code_shape(value: object) -> TypeIs[CurrencyCode]:
    """Check if value is in the ISO 4217 private-use range (X followed by 2 letters)."""
    return isinstance(value, str) and PRIVATE_CURRENCY_CODE_PATTERN.fullmatch(value) is not None


def validate_currency_code(code: str) -> tuple[CurrencyCode | None, tuple[CurrencyError, ...]]:
    """Normalize a currency code and check its shape.

    Only the syntax is checked; existence is the caller's concern.

    Args:
        code: Currency code in any case

    Returns:
        Tuple of (normalized code, errors) - code is None on failure.
    """
    if not isinstance(code, str):
        diagnostic = ErrorTemplate.currency_code_invalid(repr(code))  # type: ignore[unreachable]
        return (None, (InvalidCurrencyCodeError(diagnostic),))

    normalized = normalize_currency_code(code)
    if not is_iso_code_shape(normalized):
        diagnostic = ErrorTemplate.currency_code_invalid(normalized)
        return (None, (InvalidCurrencyCodeError(diagnostic),))
    return (normalized, ())


def make_private_currency_code(
    code: str,
) -> tuple[CurrencyCode | None, tuple[CurrencyError, ...]]:
    """Normalize a private-use currency code and check its shape.

    Example:
        >>> make_private_currency_code("xzz")
        ('XZZ', ())
        >>> code, errors = make_private_currency_code("aaa")
        >>> code is None, type(errors[0]).__name__
        (True, 'InvalidCurrencyCodeError')
    """
    normalized = normalize_currency_code(code)
    if not is_private_code_shape(normalized):
        diagnostic = ErrorTemplate.private_currency_code_invalid(normalized)
        return (None, (InvalidCurrencyCodeError(diagnostic),))
    return (normalized, ())
