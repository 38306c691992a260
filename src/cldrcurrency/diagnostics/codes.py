"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Currency code errors (shape, existence)
        2000-2999: Private currency registry errors
        3000-3999: Locale errors
    """

    # Currency code errors (1000-1999)
    CURRENCY_CODE_INVALID = 1001
    CURRENCY_UNKNOWN = 1002
    CURRENCY_STRING_UNKNOWN = 1003

    # Registry errors (2000-2999)
    CURRENCY_ALREADY_DEFINED = 2001
    CURRENCY_OPTION_MISSING = 2002
    CURRENCY_NOT_SAVED = 2003

    # Locale errors (3000-3999)
    LOCALE_UNKNOWN = 3001
    LOCALE_TERRITORY_UNKNOWN = 3002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
        currency_code: Currency code involved in the error (if any)
        locale_code: Locale involved in the error (if any)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    help_url: str | None = None
    currency_code: str | None = None
    locale_code: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[CURRENCY_UNKNOWN]: The currency 'GGG' is unknown
              = currency: GGG
              = help: Use a code returned by known_currency_codes() or register a private currency
              = note: see https://www.iso.org/iso-4217-currency-codes.html

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
