"""Diagnostic system for currency errors.

Provides structured error diagnostics with codes, hints, and help URLs.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    CurrencyAlreadyDefinedError,
    CurrencyError,
    CurrencyNotSavedError,
    InvalidCurrencyCodeError,
    MissingRequiredOptionError,
    UnknownCurrencyError,
    UnknownLocaleError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "CurrencyAlreadyDefinedError",
    "CurrencyError",
    "CurrencyNotSavedError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "InvalidCurrencyCodeError",
    "MissingRequiredOptionError",
    "OutputFormat",
    "UnknownCurrencyError",
    "UnknownLocaleError",
]
