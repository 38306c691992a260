"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This solves EM101/EM102 violations while providing:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    _ISO_4217_URL = "https://www.iso.org/iso-4217-currency-codes.html"
    _CLDR_LOCALES_URL = "https://cldr.unicode.org/index/cldr-spec/picking-the-right-language-code"

    @staticmethod
    def currency_code_invalid(code: str) -> Diagnostic:
        """Currency code is not 3 uppercase letters.

        Args:
            code: The rejected code (already uppercased)

        Returns:
            Diagnostic for CURRENCY_CODE_INVALID
        """
        msg = f"Invalid currency code '{code}'"
        return Diagnostic(
            code=DiagnosticCode.CURRENCY_CODE_INVALID,
            message=msg,
            hint="Currency codes are 3 alphabetic characters, e.g. 'USD'",
            help_url=ErrorTemplate._ISO_4217_URL,
            currency_code=code,
        )

    @staticmethod
    def private_currency_code_invalid(code: str) -> Diagnostic:
        """Private currency code outside the ISO 4217 private-use range.

        Args:
            code: The rejected code (already uppercased)

        Returns:
            Diagnostic for CURRENCY_CODE_INVALID
        """
        msg = (
            f"Invalid currency code '{code}'. "
            "Private currency codes must start with 'X' followed by 2 alphabetic characters"
        )
        return Diagnostic(
            code=DiagnosticCode.CURRENCY_CODE_INVALID,
            message=msg,
            hint="Choose an unused code in the range XAA-XZZ",
            help_url=ErrorTemplate._ISO_4217_URL,
            currency_code=code,
        )

    @staticmethod
    def currency_unknown(code: str, locale_code: str | None = None) -> Diagnostic:
        """Well-formed currency code with no record.

        Args:
            code: The unknown currency code
            locale_code: Locale searched (optional)

        Returns:
            Diagnostic for CURRENCY_UNKNOWN
        """
        msg = f"The currency '{code}' is unknown"
        if locale_code:
            msg += f" in locale '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.CURRENCY_UNKNOWN,
            message=msg,
            hint="Use a code returned by known_currency_codes() or register a private currency",
            help_url=ErrorTemplate._ISO_4217_URL,
            currency_code=code,
            locale_code=locale_code,
        )

    @staticmethod
    def locale_currency_unknown(locale_code: str, territory: str) -> Diagnostic:
        """Territory without a current tender currency.

        Args:
            locale_code: Locale whose territory was searched
            territory: Territory code derived from the locale

        Returns:
            Diagnostic for CURRENCY_UNKNOWN
        """
        msg = f"No current tender currency for territory '{territory}' of locale '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.CURRENCY_UNKNOWN,
            message=msg,
            hint="Pass the currency explicitly, or add a '-u-cu-' extension to the locale",
            locale_code=locale_code,
        )

    @staticmethod
    def currency_string_unknown(text: str, locale_code: str) -> Diagnostic:
        """Display string that resolves to no currency.

        Args:
            text: The string as typed by the caller
            locale_code: Locale whose string index was searched

        Returns:
            Diagnostic for CURRENCY_STRING_UNKNOWN
        """
        msg = f"No currency matches '{text}' in locale '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.CURRENCY_STRING_UNKNOWN,
            message=msg,
            hint="Ambiguous strings are excluded from the index; use the ISO code instead",
            locale_code=locale_code,
        )

    @staticmethod
    def currency_already_defined(code: str) -> Diagnostic:
        """Registration of an existing code.

        Args:
            code: The code already in use

        Returns:
            Diagnostic for CURRENCY_ALREADY_DEFINED
        """
        msg = f"Currency '{code}' is already defined"
        return Diagnostic(
            code=DiagnosticCode.CURRENCY_ALREADY_DEFINED,
            message=msg,
            hint="Private currencies cannot be redefined; pick another code",
            currency_code=code,
        )

    @staticmethod
    def currency_option_missing(code: str, missing: tuple[str, ...]) -> Diagnostic:
        """Registration without required options.

        Args:
            code: The code being registered
            missing: Names of the missing options

        Returns:
            Diagnostic for CURRENCY_OPTION_MISSING
        """
        msg = (
            f"Required options are missing for currency '{code}': {', '.join(missing)}. "
            "Required options are name, digits"
        )
        return Diagnostic(
            code=DiagnosticCode.CURRENCY_OPTION_MISSING,
            message=msg,
            hint="Pass name=... and digits=... to register()",
            currency_code=code,
        )

    @staticmethod
    def currency_not_saved(code: str) -> Diagnostic:
        """Registry store rejected the write.

        Args:
            code: The code being registered

        Returns:
            Diagnostic for CURRENCY_NOT_SAVED
        """
        msg = f"Currency '{code}' could not be saved: the private currency registry is closed"
        return Diagnostic(
            code=DiagnosticCode.CURRENCY_NOT_SAVED,
            message=msg,
            hint="Create a new registry at application start and re-register private currencies",
            currency_code=code,
        )

    @staticmethod
    def locale_unknown(locale_code: str) -> Diagnostic:
        """Locale unknown to the data source.

        Args:
            locale_code: The unknown locale code

        Returns:
            Diagnostic for LOCALE_UNKNOWN
        """
        msg = f"Unknown locale '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNKNOWN,
            message=msg,
            hint="Use BCP 47 locale codes (e.g., 'en', 'en-AU', 'de_CH')",
            help_url=ErrorTemplate._CLDR_LOCALES_URL,
            locale_code=locale_code,
        )

    @staticmethod
    def locale_territory_unknown(locale_code: str) -> Diagnostic:
        """Locale whose territory cannot be determined.

        Args:
            locale_code: The locale code

        Returns:
            Diagnostic for LOCALE_TERRITORY_UNKNOWN
        """
        msg = f"No territory can be determined for locale '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_TERRITORY_UNKNOWN,
            message=msg,
            hint="Include a territory in the locale, e.g. 'en-AU'",
            locale_code=locale_code,
        )
