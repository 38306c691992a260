"""Tests for the diagnostics package: codes, templates, errors and formatter.

Python 3.13+.
"""

import json

import pytest
from hypothesis import given
from hypothesis import strategies as st

from cldrcurrency.diagnostics import (
    CurrencyAlreadyDefinedError,
    CurrencyError,
    CurrencyNotSavedError,
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorTemplate,
    InvalidCurrencyCodeError,
    MissingRequiredOptionError,
    OutputFormat,
    UnknownCurrencyError,
    UnknownLocaleError,
)


class TestDiagnosticCode:
    """Diagnostic code numbering."""

    def test_codes_are_unique(self) -> None:
        values = [code.value for code in DiagnosticCode]
        assert len(values) == len(set(values))

    @pytest.mark.parametrize(
        ("code", "low", "high"),
        [
            (DiagnosticCode.CURRENCY_CODE_INVALID, 1000, 1999),
            (DiagnosticCode.CURRENCY_STRING_UNKNOWN, 1000, 1999),
            (DiagnosticCode.CURRENCY_ALREADY_DEFINED, 2000, 2999),
            (DiagnosticCode.CURRENCY_NOT_SAVED, 2000, 2999),
            (DiagnosticCode.LOCALE_UNKNOWN, 3000, 3999),
        ],
    )
    def test_category_ranges(self, code: DiagnosticCode, low: int, high: int) -> None:
        assert low <= code.value <= high


class TestErrorTemplate:
    """Every template fills in its code and context fields."""

    def test_currency_code_invalid(self) -> None:
        diagnostic = ErrorTemplate.currency_code_invalid("US")
        assert diagnostic.code is DiagnosticCode.CURRENCY_CODE_INVALID
        assert diagnostic.currency_code == "US"
        assert "'US'" in diagnostic.message

    def test_private_code_invalid_mentions_range(self) -> None:
        diagnostic = ErrorTemplate.private_currency_code_invalid("ABC")
        assert diagnostic.code is DiagnosticCode.CURRENCY_CODE_INVALID
        assert "'X'" in diagnostic.message

    def test_currency_unknown_with_and_without_locale(self) -> None:
        assert ErrorTemplate.currency_unknown("GGG").message == "The currency 'GGG' is unknown"
        diagnostic = ErrorTemplate.currency_unknown("GGG", "en")
        assert diagnostic.message == "The currency 'GGG' is unknown in locale 'en'"
        assert diagnostic.locale_code == "en"

    def test_locale_currency_unknown(self) -> None:
        diagnostic = ErrorTemplate.locale_currency_unknown("en_AQ", "AQ")
        assert diagnostic.code is DiagnosticCode.CURRENCY_UNKNOWN
        assert "'AQ'" in diagnostic.message

    def test_currency_string_unknown(self) -> None:
        diagnostic = ErrorTemplate.currency_string_unknown("doubloon", "en")
        assert diagnostic.code is DiagnosticCode.CURRENCY_STRING_UNKNOWN
        assert diagnostic.currency_code is None

    def test_option_missing_lists_options(self) -> None:
        diagnostic = ErrorTemplate.currency_option_missing("XAZ", ("name", "digits"))
        assert "name, digits" in diagnostic.message

    @pytest.mark.parametrize(
        ("diagnostic", "code"),
        [
            (
                ErrorTemplate.currency_already_defined("XAU"),
                DiagnosticCode.CURRENCY_ALREADY_DEFINED,
            ),
            (ErrorTemplate.currency_not_saved("XAZ"), DiagnosticCode.CURRENCY_NOT_SAVED),
            (ErrorTemplate.locale_unknown("tlh"), DiagnosticCode.LOCALE_UNKNOWN),
            (ErrorTemplate.locale_territory_unknown("eo"), DiagnosticCode.LOCALE_TERRITORY_UNKNOWN),
        ],
    )
    def test_codes(self, diagnostic: Diagnostic, code: DiagnosticCode) -> None:
        assert diagnostic.code is code
        assert diagnostic.hint


class TestErrors:
    """Exception hierarchy and diagnostic wiring."""

    @pytest.mark.parametrize(
        "error_type",
        [
            InvalidCurrencyCodeError,
            UnknownCurrencyError,
            CurrencyAlreadyDefinedError,
            MissingRequiredOptionError,
            CurrencyNotSavedError,
            UnknownLocaleError,
        ],
    )
    def test_hierarchy(self, error_type: type[CurrencyError]) -> None:
        assert issubclass(error_type, CurrencyError)

    def test_not_saved_is_not_already_defined(self) -> None:
        assert not issubclass(CurrencyNotSavedError, CurrencyAlreadyDefinedError)

    def test_diagnostic_fields_copied(self) -> None:
        error = UnknownCurrencyError(ErrorTemplate.currency_unknown("GGG", "en"))
        assert error.diagnostic is not None
        assert error.currency_code == "GGG"
        assert error.locale_code == "en"
        assert str(error).startswith("error[CURRENCY_UNKNOWN]")

    def test_plain_message(self) -> None:
        error = CurrencyError("boom")
        assert error.diagnostic is None
        assert str(error) == "boom"
        assert error.currency_code == ""

    def test_missing_option_attributes(self) -> None:
        diagnostic = ErrorTemplate.currency_option_missing("XAZ", ("digits",))
        error = MissingRequiredOptionError(diagnostic, missing=("digits",))
        assert error.missing == ("digits",)
        assert error.currency_code == "XAZ"


class TestDiagnosticFormatter:
    """Output formats."""

    def test_rust_format(self) -> None:
        output = DiagnosticFormatter().format(ErrorTemplate.currency_unknown("GGG", "en"))
        lines = output.splitlines()
        assert lines[0] == "error[CURRENCY_UNKNOWN]: The currency 'GGG' is unknown in locale 'en'"
        assert "  = currency: GGG" in lines
        assert "  = locale: en" in lines
        assert any(line.startswith("  = help: ") for line in lines)
        assert lines[-1].startswith("  = note: see https://")

    def test_simple_format(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        output = formatter.format(ErrorTemplate.currency_already_defined("XAU"))
        assert output == "CURRENCY_ALREADY_DEFINED: Currency 'XAU' is already defined"

    def test_json_format(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        data = json.loads(formatter.format(ErrorTemplate.locale_unknown("tlh")))
        assert data["code"] == "LOCALE_UNKNOWN"
        assert data["code_value"] == 3001
        assert data["locale_code"] == "tlh"
        assert "currency_code" not in data

    def test_warning_in_color(self) -> None:
        diagnostic = Diagnostic(
            code=DiagnosticCode.CURRENCY_UNKNOWN, message="m", severity="warning"
        )
        output = DiagnosticFormatter(color=True).format(diagnostic)
        assert output.startswith("\033[1;33mwarning\033[0m")

    def test_sanitize_truncates(self) -> None:
        diagnostic = Diagnostic(code=DiagnosticCode.CURRENCY_UNKNOWN, message="x" * 50)
        formatter = DiagnosticFormatter(
            output_format=OutputFormat.SIMPLE, sanitize=True, max_content_length=10
        )
        assert formatter.format(diagnostic) == "CURRENCY_UNKNOWN: " + "x" * 10 + "..."

    def test_format_all(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        output = formatter.format_all(
            [ErrorTemplate.currency_unknown("AAA"), ErrorTemplate.currency_unknown("BBB")]
        )
        assert output.count("\n\n") == 1

    @given(text=st.text())
    def test_user_text_cannot_inject_lines(self, text: str) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        output = formatter.format(ErrorTemplate.currency_string_unknown(text, "en"))
        assert "\n" not in output
        assert "\r" not in output
