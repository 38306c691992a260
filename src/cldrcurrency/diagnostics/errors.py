"""Currency exception hierarchy with structured diagnostics.

Integrates with diagnostic codes for Rust/Elm-inspired error messages.
All exceptions store Diagnostic objects for rich error information.

Query functions return these errors in a result tuple rather than raising
them; the ``*_or_raise`` variants raise the first collected error.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "CurrencyAlreadyDefinedError",
    "CurrencyError",
    "CurrencyNotSavedError",
    "InvalidCurrencyCodeError",
    "MissingRequiredOptionError",
    "UnknownCurrencyError",
    "UnknownLocaleError",
]


class CurrencyError(Exception):
    """Base exception for all currency errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
        currency_code: Currency code involved in the error ("" if none)
        locale_code: Locale involved in the error ("" if none)
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        currency_code: str = "",
        locale_code: str = "",
    ) -> None:
        """Initialize CurrencyError.

        Args:
            message: Error message string OR Diagnostic object
            currency_code: Currency code involved in the error
            locale_code: Locale involved in the error
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
            currency_code = currency_code or (message.currency_code or "")
            locale_code = locale_code or (message.locale_code or "")
        else:
            self.diagnostic = None
            super().__init__(message)
        self.currency_code = currency_code
        self.locale_code = locale_code


class InvalidCurrencyCodeError(CurrencyError):
    """Currency code has the wrong shape.

    ISO 4217 codes are 3 uppercase letters; private-use codes are "X"
    followed by two letters.
    """


class UnknownCurrencyError(CurrencyError):
    """Well-formed currency code (or display string) with no matching record."""


class CurrencyAlreadyDefinedError(CurrencyError):
    """Registration attempted for a code that already resolves.

    Raised for built-in ISO codes and for codes already present in the
    private currency registry. Re-registration is never idempotent.
    """


class MissingRequiredOptionError(CurrencyError):
    """Private currency registration without ``name`` and/or ``digits``.

    Attributes:
        missing: Names of the missing options, in declaration order
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        missing: tuple[str, ...] = (),
        currency_code: str = "",
    ) -> None:
        super().__init__(message, currency_code=currency_code)
        self.missing = missing


class CurrencyNotSavedError(CurrencyError):
    """The registry store rejected a write.

    Indicates an infrastructure fault (for example, a closed registry),
    not a duplicate code. Fix the application's registry setup.
    """


class UnknownLocaleError(CurrencyError):
    """Locale is not known to the locale data source."""
